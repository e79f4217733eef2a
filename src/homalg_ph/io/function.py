from typing import Sequence, Tuple, Union
import os
import numpy as np
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.errors import FormatError
from homalg_ph.topology.complex import SimplicialComplex, make_boundary_matrix
from homalg_ph.topology.simplex import Simplex


def function_complex(values: Sequence[float]) -> Tuple[BoundaryMatrix, SimplicialComplex]:
    """
    Sublevel-set filtration of a 1-D function given by its samples.
    > `n` values give vertices `0..n-1` and edges `(k, k+1)`
    > a vertex is weighted by its value, an edge by the max of its endpoints
    > simplices are stably sorted by weight, vertices ahead of edges on ties
    Returns the boundary matrix together with the ordered complex (which
    resolves indices to values for the persistence diagrams).
    """
    values = np.asarray(values, dtype=float).ravel()
    if values.size == 0:
        raise FormatError("Unable to load any function values")
    if not np.all(np.isfinite(values)):
        raise FormatError("Function values must be finite")
    n = values.size
    edge_weights = np.maximum(values[:-1], values[1:])
    weights = np.concatenate([values, edge_weights])
    order = np.argsort(weights, kind='stable')
    simplices = []
    for index in order:
        index = int(index)
        if index < n:
            simplices.append(Simplex(index, float(values[index])))
        else:
            k = index - n
            simplices.append(Simplex([k, k + 1], float(edge_weights[k])))
    K = SimplicialComplex(simplices)
    return make_boundary_matrix(K), K


def load_function(path: Union[str, os.PathLike]) -> Tuple[BoundaryMatrix, SimplicialComplex]:
    """Read whitespace-separated function values (lines starting with `#` are skipped)."""
    tokens = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            if line.lstrip().startswith('#'):
                continue
            tokens.extend(line.split())
    try:
        values = np.array([float(t) for t in tokens], dtype=float)
    except ValueError as e:
        raise FormatError(f"Invalid function value: {e}") from None
    return function_complex(values)
