from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
import numpy as np
from scipy import sparse
from homalg_ph.core.representation import VectorRepresentation
from homalg_ph.errors import PreconditionError


class BoundaryMatrix:
    """
    Boundary matrix of a filtered complex over GF(2).
    Column `j` holds the row indices of the faces of simplex `j`, all of
    them smaller than `j`. The `dualized` flag marks a matrix holding the
    anti-transposed (coboundary) problem; it only changes how pairs are read
    back, never how the matrix is reduced.
    >>> M = BoundaryMatrix.from_columns([[], [], [], [0, 1], [0, 2], [1, 2], [3, 4, 5]])
    >>> M.get_maximum_index(6)
    (5, True)
    """

    def __init__(self, num_columns: int = 0, dualized: bool = False):
        self._representation = VectorRepresentation(num_columns)
        self.dualized = dualized

    @classmethod
    def from_columns(
        cls,
        columns: Iterable[Iterable[int]],
        dualized: bool = False
    ) -> "BoundaryMatrix":
        columns = [list(c) for c in columns]
        matrix = cls(len(columns), dualized=dualized)
        for j, column in enumerate(columns):
            if column:
                matrix.set_column(j, column)
        return matrix

    @classmethod
    def from_dense(cls, array: Any, dualized: bool = False) -> "BoundaryMatrix":
        """
        Build from a square array; entry `(r, c)` is taken mod 2.
        """
        array = np.asarray(array)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Expected a square 2D array, got shape {array.shape}")
        odd = np.mod(array.astype(np.int64), 2) != 0
        return cls.from_columns(
            (np.flatnonzero(odd[:, j]).tolist() for j in range(array.shape[1])),
            dualized=dualized
        )

    @classmethod
    def from_sparse(cls, matrix: Any, dualized: bool = False) -> "BoundaryMatrix":
        """
        Build from any scipy sparse matrix; duplicate entries are summed mod 2.
        """
        csc = sparse.csc_matrix(matrix, copy=True)
        if csc.shape[0] != csc.shape[1]:
            raise ValueError(f"Expected a square sparse matrix, got shape {csc.shape}")
        csc.sum_duplicates()
        csc.data = np.mod(csc.data.astype(np.int64), 2)
        csc.eliminate_zeros()
        csc.sort_indices()
        return cls.from_columns(
            (csc.indices[csc.indptr[j]:csc.indptr[j + 1]].tolist() for j in range(csc.shape[1])),
            dualized=dualized
        )

    # column operations

    def set_num_columns(self, num_columns: int):
        self._representation.set_num_columns(num_columns)

    @property
    def num_columns(self) -> int:
        return self._representation.get_num_columns()

    def get_num_columns(self) -> int:
        return self._representation.get_num_columns()

    def set_column(self, column: int, indices: Iterable[int]):
        self._representation.set_column(column, indices)

    def get_column(self, column: int) -> List[int]:
        return self._representation.get_column(column)

    def clear_column(self, column: int):
        self._representation.clear_column(column)

    def get_maximum_index(self, column: int) -> Tuple[Optional[int], bool]:
        return self._representation.get_maximum_index(column)

    def add_columns(self, source: int, target: int):
        self._representation.add_columns(source, target)

    def get_dimension(self, column: Optional[int] = None) -> int:
        return self._representation.get_dimension(column)

    def columns(self) -> Iterator[List[int]]:
        for j in range(self.num_columns):
            yield self.get_column(j)

    def num_entries(self) -> int:
        return self._representation.num_entries()

    # whole-matrix queries

    def copy(self) -> "BoundaryMatrix":
        """Independent copy; reduction mutates its input, so keep one of these if needed."""
        other = BoundaryMatrix(dualized=self.dualized)
        other._representation = self._representation.copy()
        return other

    def validate(self):
        """
        Re-check every column for triangularity and uniqueness.
        Raises `PreconditionError` on the first violating column.
        """
        for j in range(self.num_columns):
            column = self.get_column(j)
            for k, index in enumerate(column):
                if index < 0 or index >= j:
                    raise PreconditionError(f"Column {j} references index {index}")
                if k > 0 and column[k - 1] >= index:
                    raise PreconditionError(f"Column {j} is not strictly ascending")

    def is_reduced(self) -> bool:
        """Whether all non-empty columns have distinct pivots."""
        seen = set()
        for j in range(self.num_columns):
            pivot, present = self.get_maximum_index(j)
            if not present:
                continue
            if pivot in seen:
                return False
            seen.add(pivot)
        return True

    def to_dense(self) -> np.ndarray:
        n = self.num_columns
        dense = np.zeros((n, n), dtype=np.uint8)
        for j, column in enumerate(self.columns()):
            dense[column, j] = 1
        return dense

    def to_sparse(self) -> sparse.csc_matrix:
        n = self.num_columns
        indptr = [0]
        indices: List[int] = []
        for column in self.columns():
            indices.extend(column)
            indptr.append(len(indices))
        data = np.ones(len(indices), dtype=np.uint8)
        return sparse.csc_matrix(
            (data, np.asarray(indices, dtype=np.int64), np.asarray(indptr, dtype=np.int64)),
            shape=(n, n)
        )

    def summary(self) -> Dict[str, Any]:
        return {
            'num_columns': self.num_columns,
            'num_entries': self.num_entries(),
            'dimension': self.get_dimension(),
            'dualized': self.dualized,
            'is_reduced': self.is_reduced(),
        }

    def __len__(self) -> int:
        return self.num_columns

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoundaryMatrix):
            return NotImplemented
        return (
            self.dualized == other.dualized
            and self._representation == other._representation
        )

    def __repr__(self) -> str:
        return (
            f"BoundaryMatrix(num_columns={self.num_columns}, "
            f"entries={self.num_entries()}, dualized={self.dualized})"
        )

    def __str__(self) -> str:
        """One line per column: ascending indices, or `-` for an empty column."""
        lines = []
        for column in self.columns():
            lines.append(' '.join(str(i) for i in column) if column else '-')
        return ''.join(line + '\n' for line in lines)


def columns_from_pairs(num_columns: int, entries: Sequence[Tuple[int, int]]) -> List[List[int]]:
    """
    Group `(row, column)` entries into ascending per-column lists.
    """
    columns: List[List[int]] = [[] for _ in range(num_columns)]
    for row, column in entries:
        columns[column].append(row)
    for column in columns:
        column.sort()
    return columns
