__version__ = "0.1.0"
from homalg_ph.core import BoundaryMatrix, dualize
from homalg_ph.reduction import StandardReduction, TwistReduction
from homalg_ph.persistence import (
    PersistencePairing,
    PersistenceDiagram,
    compute_persistence_pairs,
    make_persistence_diagrams,
    reduce_batch
)
from homalg_ph.topology import Simplex, SimplicialComplex, make_boundary_matrix
from homalg_ph.errors import PreconditionError, FormatError

__all__ = [
    "BoundaryMatrix",
    "dualize",
    "StandardReduction",
    "TwistReduction",
    "PersistencePairing",
    "PersistenceDiagram",
    "compute_persistence_pairs",
    "make_persistence_diagrams",
    "reduce_batch",
    "Simplex",
    "SimplicialComplex",
    "make_boundary_matrix",
    "PreconditionError",
    "FormatError",
]
