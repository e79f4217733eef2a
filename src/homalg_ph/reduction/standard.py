from typing import List, Optional, Tuple
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.reduction.base import Reduction


class StandardReduction(Reduction):
    """
    Classical left-to-right reduction.
    Columns are visited in index order; a pair `(p, j)` is emitted as soon as
    column `j` settles on an unowned pivot `p`.
    """
    name = 'standard'

    def _reduce(self, matrix: BoundaryMatrix) -> List[Tuple[int, int]]:
        n = matrix.num_columns
        owner: List[Optional[int]] = [None] * n
        pairs = []
        for j in range(n):
            pivot = self._reduce_column(matrix, j, owner)
            if pivot is not None:
                pairs.append((pivot, j))
        return pairs
