import copy
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Union
from tqdm import tqdm
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.persistence.pairs import PersistencePairing, compute_persistence_pairs
from homalg_ph.reduction.base import Reduction


def reduce_batch(
    matrices: Sequence[BoundaryMatrix],
    algorithm: Union[str, Reduction] = 'twist',
    dualize: bool = False,
    max_workers: Optional[int] = None,
    progress: bool = False,
    **kwargs
) -> List[PersistencePairing]:
    """
    Compute persistence pairs of many independent matrices concurrently.
    Every task owns its matrix, so no locking is involved; a strategy is
    built per task since strategies keep per-run stats. A strategy instance
    is copied per task with its settings. Pairings come back in input order.
    Matrices are reduced in place (see `compute_persistence_pairs`).
    The same matrix object must not appear twice in `matrices`.
    """
    if len({id(m) for m in matrices}) != len(matrices):
        raise ValueError("The same matrix cannot be reduced twice concurrently")

    def _task(matrix: BoundaryMatrix) -> PersistencePairing:
        strategy = copy.copy(algorithm) if isinstance(algorithm, Reduction) else algorithm
        return compute_persistence_pairs(matrix, algorithm=strategy, dualize=dualize, **kwargs)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = executor.map(_task, matrices)
        if progress:
            results = tqdm(results, total=len(matrices), desc="Reducing")
        return list(results)
