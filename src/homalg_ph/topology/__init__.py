from homalg_ph.topology.simplex import Simplex
from homalg_ph.topology.complex import SimplicialComplex, make_boundary_matrix, sort_by_data

__all__ = [
    "Simplex",
    "SimplicialComplex",
    "make_boundary_matrix",
    "sort_by_data",
]
