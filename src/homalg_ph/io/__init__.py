from homalg_ph.io.text import dumps, loads, save_matrix, load_matrix
from homalg_ph.io.function import function_complex, load_function
from homalg_ph.io.bipartite import BipartiteAdjacencyMatrixReader

__all__ = [
    "dumps",
    "loads",
    "save_matrix",
    "load_matrix",
    "function_complex",
    "load_function",
    "BipartiteAdjacencyMatrixReader",
]
