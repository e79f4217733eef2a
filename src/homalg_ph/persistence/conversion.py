from typing import Dict, List
import numpy as np
from homalg_ph.errors import PreconditionError
from homalg_ph.persistence.diagram import PersistenceDiagram
from homalg_ph.persistence.pairs import PersistencePairing


def make_persistence_diagrams(pairing: PersistencePairing, K) -> List[PersistenceDiagram]:
    """
    Bucket a pairing into one persistence diagram per dimension.
    `K` resolves a matrix index through `K.lookup(index)`, which
    returns `(dimension, filtration value)` of the simplex at that index.
    - the dimension of a pair is the dimension of its birth simplex
    - essential classes become points `(value, inf)`
    - only dimensions that occur in the pairing get a diagram
    """
    diagrams: Dict[int, PersistenceDiagram] = {}
    for birth, death in pairing:
        dimension, x = K.lookup(birth)
        if death is None:
            y = np.inf
        else:
            _, y = K.lookup(death)
            if y < x:
                raise PreconditionError(
                    f"Filtration values decrease from index {birth} ({x}) to {death} ({y})"
                )
        if dimension not in diagrams:
            diagrams[dimension] = PersistenceDiagram(dimension=dimension)
        diagrams[dimension].add(x, y)
    return [diagrams[d] for d in sorted(diagrams)]


def betti_numbers(diagrams: List[PersistenceDiagram]) -> List[int]:
    """Betti numbers `[b_0, ..., b_max]`; dimensions without a diagram count as 0."""
    if not diagrams:
        return []
    betti = [0] * (max(D.dimension for D in diagrams) + 1)
    for D in diagrams:
        betti[D.dimension] += D.betti()
    return betti
