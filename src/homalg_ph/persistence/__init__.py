from homalg_ph.persistence.pairs import (
    PersistencePairing,
    compute_persistence_pairs,
    extract_pairing
)
from homalg_ph.persistence.diagram import Point, PersistenceDiagram
from homalg_ph.persistence.conversion import make_persistence_diagrams, betti_numbers
from homalg_ph.persistence.batch import reduce_batch

__all__ = [
    "PersistencePairing",
    "compute_persistence_pairs",
    "extract_pairing",
    "Point",
    "PersistenceDiagram",
    "make_persistence_diagrams",
    "betti_numbers",
    "reduce_batch",
]
