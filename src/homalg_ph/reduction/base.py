from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Tuple
import logging
from homalg_ph.core.boundary_matrix import BoundaryMatrix

logger = logging.getLogger(__name__)


@dataclass
class ReductionStats:
    """Counters of the last run of a reduction strategy."""
    column_additions: int = 0
    pairs: int = 0
    cleared_columns: int = 0
    skipped_columns: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class Reduction:
    """
    Column reduction of a boundary matrix over GF(2).
    Subclasses decide the order in which columns are visited; the pivot
    discipline is shared: while the pivot of column `j` is owned by an
    earlier column `k`, add column `k` into column `j`.
    Reduction happens IN PLACE. Call `matrix.copy()` first to keep the input.
    Usage: `pairs = StandardReduction()(M)` leaves `M` reduced.
    """
    name = 'base'

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = ReductionStats()

    def __call__(self, matrix: BoundaryMatrix) -> List[Tuple[int, int]]:
        return self.reduce(matrix)

    def reduce(self, matrix: BoundaryMatrix) -> List[Tuple[int, int]]:
        """
        Reduce `matrix` and return raw `(pivot, column)` pairs in discovery order.
        """
        self.stats = ReductionStats()
        pairs = self._reduce(matrix)
        self.stats.pairs = len(pairs)
        logger.debug(
            "%s reduction of %d columns: %s",
            self.name, matrix.num_columns, self.stats.as_dict()
        )
        if self.verbose:
            print(
                f"{self.name}: columns={matrix.num_columns}  pairs={self.stats.pairs}  "
                f"additions={self.stats.column_additions}  cleared={self.stats.cleared_columns}"
            )
        return pairs

    def _reduce(self, matrix: BoundaryMatrix) -> List[Tuple[int, int]]:
        raise NotImplementedError

    def _reduce_column(
        self,
        matrix: BoundaryMatrix,
        j: int,
        owner: List[Optional[int]]
    ) -> Optional[int]:
        """
        Eliminate pivot collisions of column `j`.
        Returns the pivot that `j` ends up owning, or `None` if it reduced to zero.
        """
        pivot, present = matrix.get_maximum_index(j)
        while present and owner[pivot] is not None:
            matrix.add_columns(owner[pivot], j)
            self.stats.column_additions += 1
            pivot, present = matrix.get_maximum_index(j)
        if not present:
            return None
        owner[pivot] = j
        return pivot
