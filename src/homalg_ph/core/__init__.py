from homalg_ph.core.representation import VectorRepresentation
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.core.dualization import dualize, is_chain_complex, original_dimensions

__all__ = [
    "VectorRepresentation",
    "BoundaryMatrix",
    "dualize",
    "is_chain_complex",
    "original_dimensions",
]
