from typing import Iterator, List, Optional, Sequence, Tuple, Union
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.core.dualization import dualize as dualize_matrix
from homalg_ph.reduction.base import Reduction
from homalg_ph.reduction.registry import get_reduction_algorithm

Pair = Tuple[int, Optional[int]]


class PersistencePairing:
    """
    Persistence pairs as matrix indices.
    Every pair is `(birth, death)` with `birth < death`; an essential class
    (never killed) has `death = None`.
    """

    def __init__(self, pairs: Optional[Sequence[Pair]] = None):
        self._pairs: List[Pair] = []
        for birth, death in pairs or []:
            self.add(birth, death)

    def add(self, birth: int, death: Optional[int] = None):
        if death is not None and not birth < death:
            raise ValueError(f"Birth {birth} must precede death {death}")
        self._pairs.append((birth, death))

    def contains(self, birth: int, death: Optional[int] = None) -> bool:
        return (birth, death) in self._pairs

    def sort(self):
        """Order by birth, essential classes after finite pairs with the same birth."""
        self._pairs.sort(key=lambda p: (p[0], p[1] is None, p[1] if p[1] is not None else 0))

    def essential(self) -> List[int]:
        return [birth for birth, death in self._pairs if death is None]

    def finite(self) -> List[Tuple[int, int]]:
        return [(birth, death) for birth, death in self._pairs if death is not None]

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PersistencePairing):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"PersistencePairing({self._pairs})"

    def __str__(self) -> str:
        return '\n'.join(
            f"{birth}\t{death if death is not None else 'inf'}" for birth, death in self._pairs
        )


def extract_pairing(matrix: BoundaryMatrix, raw_pairs: Sequence[Tuple[int, int]]) -> PersistencePairing:
    """
    Turn the raw `(pivot, column)` pairs of a reduced matrix into a pairing.
    - dualized matrices are read back into the original filtration:
      `(p, j) -> (N-1-j, N-1-p)`, and essential `i -> N-1-i`
    - a column that reduced to zero and is nobody's pivot is essential
    """
    n = matrix.num_columns
    pivots = set()
    pairing = PersistencePairing()
    for p, j in raw_pairs:
        pivots.add(p)
        if matrix.dualized:
            pairing.add(n - 1 - j, n - 1 - p)
        else:
            pairing.add(p, j)
    for k in range(n):
        _, present = matrix.get_maximum_index(k)
        if present or k in pivots:
            continue
        pairing.add(n - 1 - k if matrix.dualized else k)
    pairing.sort()
    return pairing


def compute_persistence_pairs(
    matrix: BoundaryMatrix,
    algorithm: Union[str, Reduction] = 'standard',
    dualize: bool = False,
    **kwargs
) -> PersistencePairing:
    """
    Reduce `matrix` and extract its persistence pairs.
    The matrix is reduced IN PLACE unless `dualize=True`, in which case its
    anti-transpose is reduced and the input is left as is. Either way the
    pairs refer to indices of the original filtration.
    Usage: `compute_persistence_pairs(M.copy(), algorithm='twist')` keeps `M` intact.
    """
    if dualize:
        matrix = dualize_matrix(matrix)
    reduction = get_reduction_algorithm(algorithm, **kwargs)
    raw_pairs = reduction(matrix)
    return extract_pairing(matrix, raw_pairs)
