from typing import Dict, List, Optional, Sequence, Tuple
import warnings
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.core.dualization import is_chain_complex, original_dimensions
from homalg_ph.reduction.base import Reduction, logger


def column_degrees(matrix: BoundaryMatrix) -> List[int]:
    """
    Grading used by the twist.
    - boundary matrix: the simplex dimension of each column
    - dualized matrix: minus the dimension of the original simplex, so that
      cofaces (one dimension up) sit one degree below
    In both cases the entries of a degree-d column have degree d - 1.
    """
    dimensions = original_dimensions(matrix)
    if matrix.dualized:
        return [-d for d in dimensions]
    return dimensions


def is_graded(matrix: BoundaryMatrix, degrees: Sequence[int]) -> bool:
    """Whether every entry of every column sits exactly one degree below it."""
    for j, column in enumerate(matrix.columns()):
        expected = degrees[j] - 1
        if any(degrees[i] != expected for i in column):
            return False
    return True


class TwistReduction(Reduction):
    """
    Reduction with the twist (clearing) optimization.
    Degrees are processed from high to low, each in index order. Once a pair
    `(p, j)` is found, column `p` is known to reduce to zero: it is cleared
    right away and skipped when its own turn comes.
    Correctness needs a graded chain complex (`d o d = 0`, faces one degree
    down). With `validate=True` this is checked first; a matrix failing the
    check is reduced with the standard order instead, with a `UserWarning`.
    Columns do not need to be grouped by dimension.
    """
    name = 'twist'

    def __init__(self, validate: bool = True, verbose: bool = False):
        super().__init__(verbose=verbose)
        self.validate = validate

    def _reduce(self, matrix: BoundaryMatrix) -> List[Tuple[int, int]]:
        n = matrix.num_columns
        degrees = column_degrees(matrix)
        if self.validate and not (is_graded(matrix, degrees) and is_chain_complex(matrix)):
            warnings.warn(
                "Matrix is not a graded chain complex; twist clearing does not "
                "apply. Falling back to standard reduction order."
            )
            logger.debug("twist fallback for matrix with %d columns", n)
            order = list(range(n))
            clearing = False
        else:
            buckets: Dict[int, List[int]] = {}
            for j, degree in enumerate(degrees):
                buckets.setdefault(degree, []).append(j)
            order = [j for degree in sorted(buckets, reverse=True) for j in buckets[degree]]
            clearing = True

        owner: List[Optional[int]] = [None] * n
        resolved = [False] * n
        pairs = []
        for j in order:
            if resolved[j]:
                self.stats.skipped_columns += 1
                continue
            pivot = self._reduce_column(matrix, j, owner)
            if pivot is None:
                continue
            pairs.append((pivot, j))
            if clearing:
                matrix.clear_column(pivot)
                resolved[pivot] = True
                self.stats.cleared_columns += 1
        return pairs
