from typing import Dict, List, Union
import os
import numpy as np
from homalg_ph.errors import FormatError
from homalg_ph.topology.complex import SimplicialComplex, sort_by_data
from homalg_ph.topology.simplex import Simplex


class BipartiteAdjacencyMatrixReader:
    """
    Read a weighted bipartite graph given as an `n x m` weight matrix.
    Row `y` is vertex `y`, column `x` is vertex `x + n`, and entry `(y, x)`
    is the weight of edge `{y, x + n}`. The complex is returned sorted by
    weight.
    Vertex weights default to the global minimum weight. Two flags change that:
    > `assign_minimum_vertex_weight`: minimum weight of the incident edges
    > `assign_minimum_absolute_vertex_weight`: incident weight of minimum
      absolute value (may leave a vertex above one of its edges, in which case
      `make_boundary_matrix` rejects the order)
    >>> reader = BipartiteAdjacencyMatrixReader(assign_minimum_vertex_weight=True)
    >>> K = reader.from_array([[1, 2], [3, 4]])
    >>> len(K), reader.height, reader.width
    (8, 2, 2)
    """

    def __init__(
        self,
        assign_minimum_vertex_weight: bool = False,
        assign_minimum_absolute_vertex_weight: bool = False
    ):
        self.assign_minimum_vertex_weight = assign_minimum_vertex_weight
        self.assign_minimum_absolute_vertex_weight = assign_minimum_absolute_vertex_weight
        self.height = 0
        self.width = 0

    def __call__(self, path: Union[str, os.PathLike]) -> SimplicialComplex:
        with open(path, 'r', encoding='utf-8') as f:
            return self.read_text(f.read())

    def read_text(self, text: str) -> SimplicialComplex:
        """Parse rows of whitespace-separated weights; `#` lines and blank lines are skipped."""
        rows: List[List[float]] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            try:
                row = [float(token) for token in line.split()]
            except ValueError:
                raise FormatError(f"non-numeric weight in {line!r}", line_number) from None
            if rows and len(row) != len(rows[0]):
                raise FormatError(
                    f"number of columns must not vary (expected {len(rows[0])}, got {len(row)})",
                    line_number
                )
            rows.append(row)
        if not rows:
            raise FormatError("Unable to load any weights")
        return self.from_array(np.array(rows, dtype=float))

    def from_array(self, values) -> SimplicialComplex:
        values = np.asarray(values, dtype=float)
        if values.ndim != 2 or values.size == 0:
            raise FormatError(f"Expected a non-empty 2D weight matrix, got shape {values.shape}")
        height, width = values.shape
        min_weight: Dict[int, float] = {}

        def update(vertex: int, weight: float):
            if vertex not in min_weight:
                min_weight[vertex] = weight
            elif self.assign_minimum_absolute_vertex_weight:
                if abs(weight) < abs(min_weight[vertex]):
                    min_weight[vertex] = weight
            else:
                min_weight[vertex] = min(min_weight[vertex], weight)

        simplices = []
        for y in range(height):
            for x in range(width):
                u, v = y, x + height
                w = float(values[y, x])
                update(u, w)
                update(v, w)
                simplices.append(Simplex([u, v], w))

        use_minimum = self.assign_minimum_vertex_weight or self.assign_minimum_absolute_vertex_weight
        min_data = float(values.min())
        for i in range(height + width):
            simplices.append(Simplex(i, min_weight[i] if use_minimum else min_data))

        self.height, self.width = height, width
        return SimplicialComplex(sort_by_data(simplices))
