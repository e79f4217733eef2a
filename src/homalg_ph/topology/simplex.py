from numbers import Integral
from typing import Iterable, Iterator, Tuple, Union


class Simplex:
    """
    Simplex given by its vertex set, carrying a filtration value in `data`.
    Equality and hashing look at the vertices only, so a face built by
    `boundary()` finds its stored counterpart regardless of value.
    >>> list(Simplex([0, 1, 2]).boundary())
    [Simplex((1, 2)), Simplex((0, 2)), Simplex((0, 1))]
    """
    __slots__ = ('vertices', 'data')

    def __init__(self, vertices: Union[int, Iterable[int]], data: float = 0.0):
        if isinstance(vertices, Integral):
            vertices = [vertices]
        vertices = tuple(sorted(int(v) for v in vertices))
        if not vertices:
            raise ValueError("A simplex needs at least one vertex")
        if len(set(vertices)) != len(vertices):
            raise ValueError(f"Repeated vertex in simplex {vertices}")
        self.vertices: Tuple[int, ...] = vertices
        self.data = data

    @property
    def dimension(self) -> int:
        return len(self.vertices) - 1

    def boundary(self) -> Iterator["Simplex"]:
        """Codimension-1 faces, each obtained by dropping one vertex; none for a vertex."""
        if len(self.vertices) == 1:
            return
        for i in range(len(self.vertices)):
            yield Simplex(self.vertices[:i] + self.vertices[i + 1:], self.data)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Simplex):
            return NotImplemented
        return self.vertices == other.vertices

    def __lt__(self, other: "Simplex") -> bool:
        return self.vertices < other.vertices

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __repr__(self) -> str:
        return f"Simplex({self.vertices})"

    def __str__(self) -> str:
        return '{' + ' '.join(str(v) for v in self.vertices) + '}' + f" ({self.data})"
