from typing import Dict, Iterable, Iterator, List, Tuple
from homalg_ph.core.boundary_matrix import BoundaryMatrix
from homalg_ph.errors import PreconditionError
from homalg_ph.topology.simplex import Simplex


class SimplicialComplex:
    """
    Simplices in filtration order.
    The order is taken as given; `make_boundary_matrix` checks that it is a
    valid filtration. Plain vertex lists are accepted in place of `Simplex`.
    >>> K = SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]])
    >>> K.lookup(6)
    (2, 0.0)
    """

    def __init__(self, simplices: Iterable = ()):
        self._simplices: List[Simplex] = [
            s if isinstance(s, Simplex) else Simplex(s) for s in simplices
        ]
        self._index: Dict[Simplex, int] = {}
        for i, simplex in enumerate(self._simplices):
            if simplex in self._index:
                raise ValueError(f"Duplicate simplex {simplex!r} at positions {self._index[simplex]} and {i}")
            self._index[simplex] = i

    def index(self, simplex) -> int:
        if not isinstance(simplex, Simplex):
            simplex = Simplex(simplex)
        try:
            return self._index[simplex]
        except KeyError:
            raise KeyError(f"{simplex!r} is not part of the complex") from None

    def lookup(self, index: int) -> Tuple[int, float]:
        """`(dimension, filtration value)` of the simplex at matrix index `index`."""
        if not 0 <= index < len(self._simplices):
            raise IndexError(f"Index {index} out of range for {len(self._simplices)} simplices")
        simplex = self._simplices[index]
        return simplex.dimension, simplex.data

    def dimension(self) -> int:
        return max((s.dimension for s in self._simplices), default=0)

    def __contains__(self, simplex) -> bool:
        if not isinstance(simplex, Simplex):
            simplex = Simplex(simplex)
        return simplex in self._index

    def __getitem__(self, index: int) -> Simplex:
        return self._simplices[index]

    def __iter__(self) -> Iterator[Simplex]:
        return iter(self._simplices)

    def __len__(self) -> int:
        return len(self._simplices)

    def __repr__(self) -> str:
        return f"SimplicialComplex({len(self)} simplices, dimension={self.dimension()})"

    def __str__(self) -> str:
        return ''.join(str(s) + '\n' for s in self._simplices)


def make_boundary_matrix(K: SimplicialComplex) -> BoundaryMatrix:
    """
    Boundary matrix of a complex in filtration order.
    Column `j` lists the positions of the codimension-1 faces of simplex `j`.
    Raises `PreconditionError` if a face is missing or does not precede its coface.
    """
    matrix = BoundaryMatrix(len(K))
    for j, simplex in enumerate(K):
        column = []
        for face in simplex.boundary():
            if face not in K:
                raise PreconditionError(f"Face {face!r} of {simplex!r} is missing from the complex")
            i = K.index(face)
            if i >= j:
                raise PreconditionError(
                    f"Face {face!r} (position {i}) does not precede {simplex!r} (position {j})"
                )
            column.append(i)
        if column:
            matrix.set_column(j, column)
    return matrix


def sort_by_data(simplices: Iterable[Simplex]) -> List[Simplex]:
    """Filtration order by value, then dimension, then vertices."""
    return sorted(simplices, key=lambda s: (s.data, s.dimension, s.vertices))
