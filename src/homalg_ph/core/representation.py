from typing import Iterable, List, Optional, Tuple
from homalg_ph.errors import PreconditionError


def xor_sorted(a: List[int], b: List[int]) -> List[int]:
    """
    Symmetric difference of two ascending, duplicate-free lists.
    - GF(2) column addition: an index present in both columns cancels.
    - Single merge pass, `O(len(a) + len(b))`.
    """
    result = []
    i, j = 0, 0
    n_a, n_b = len(a), len(b)
    while i < n_a and j < n_b:
        x, y = a[i], b[j]
        if x < y:
            result.append(x)
            i += 1
        elif y < x:
            result.append(y)
            j += 1
        else:
            i += 1
            j += 1
    if i < n_a:
        result.extend(a[i:])
    if j < n_b:
        result.extend(b[j:])
    return result


class VectorRepresentation:
    """
    Sparse column storage of a boundary matrix over GF(2).
    Every column is an ascending list of row indices without duplicates
    (presence = 1, absence = 0). The pivot of a column is its last entry.
    """

    def __init__(self, num_columns: int = 0):
        self._columns: List[List[int]] = []
        self.set_num_columns(num_columns)

    def set_num_columns(self, num_columns: int):
        """(Re)initialize storage with `num_columns` empty columns."""
        if num_columns < 0:
            raise ValueError(f"Number of columns must be non-negative, got {num_columns}")
        self._columns = [[] for _ in range(num_columns)]

    def get_num_columns(self) -> int:
        return len(self._columns)

    def _check(self, column: int):
        if column < 0 or column >= len(self._columns):
            raise IndexError(f"Column {column} out of range [0, {len(self._columns) - 1}]")

    def set_column(self, column: int, indices: Iterable[int]):
        """
        Replace the contents of `column`.
        Indices must be unique and strictly smaller than `column`; they are
        stored in ascending order regardless of input order.
        """
        self._check(column)
        entries = sorted(int(i) for i in indices)
        for k, index in enumerate(entries):
            if index < 0 or index >= column:
                raise PreconditionError(
                    f"Column {column} references index {index}; "
                    f"entries must lie in [0, {column - 1}]"
                )
            if k > 0 and entries[k - 1] == index:
                raise PreconditionError(f"Column {column} lists index {index} twice")
        self._columns[column] = entries

    def get_column(self, column: int) -> List[int]:
        self._check(column)
        return list(self._columns[column])

    def clear_column(self, column: int):
        self._check(column)
        self._columns[column] = []

    def get_maximum_index(self, column: int) -> Tuple[Optional[int], bool]:
        """
        Pivot of `column` as `(index, True)`, or `(None, False)` for an empty column.
        """
        self._check(column)
        entries = self._columns[column]
        if entries:
            return entries[-1], True
        return None, False

    def add_columns(self, source: int, target: int):
        """`column[target] := column[target] + column[source]` over GF(2)."""
        self._check(source)
        self._check(target)
        self._columns[target] = xor_sorted(self._columns[source], self._columns[target])

    def get_dimension(self, column: Optional[int] = None) -> int:
        """
        Simplex dimension implied by the number of boundary faces.
        - `len(column) - 1`, with an empty column (a vertex) counting as 0
        - without an argument: maximum over all columns
        """
        if column is not None:
            self._check(column)
            return max(len(self._columns[column]) - 1, 0)
        if not self._columns:
            return 0
        return max(max(len(c) for c in self._columns) - 1, 0)

    def num_entries(self) -> int:
        return sum(len(c) for c in self._columns)

    def copy(self) -> "VectorRepresentation":
        other = VectorRepresentation()
        other._columns = [list(c) for c in self._columns]
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, VectorRepresentation):
            return NotImplemented
        return self._columns == other._columns
