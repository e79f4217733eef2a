from typing import Iterable, Iterator, List, NamedTuple, Optional
import numpy as np


class Point(NamedTuple):
    """Diagram point; `y = inf` marks an unpaired (essential) feature."""
    x: float
    y: float = np.inf

    @property
    def persistence(self) -> float:
        return self.y - self.x

    @property
    def is_unpaired(self) -> bool:
        return bool(np.isinf(self.y))


class PersistenceDiagram:
    """
    Multiset of `(birth value, death value)` points of one homological dimension.
    > populated once from a reduction
    > afterwards only changed by the explicit clean-up operations below
    >>> D = PersistenceDiagram(dimension=0)
    >>> D.add(0.0)          # essential
    >>> D.add(0.0, 1.5)
    >>> D.betti()
    1
    """

    def __init__(self, points: Optional[Iterable] = None, dimension: int = 0):
        self.dimension = dimension
        self._points: List[Point] = [Point(*p) for p in points or []]

    def add(self, x: float, y: float = np.inf):
        self._points.append(Point(float(x), float(y)))

    def merge(self, other: "PersistenceDiagram"):
        """Append the points of `other`; duplicates are kept."""
        self._points.extend(other._points)

    def remove_diagonal(self):
        self._points = [p for p in self._points if p.x != p.y]

    def remove_unpaired(self):
        self._points = [p for p in self._points if not p.is_unpaired]

    def remove_duplicates(self):
        """Keep each point once; the result is sorted by `(x, y)`."""
        self._points = sorted(set(self._points))

    def betti(self) -> int:
        """Number of unpaired points, i.e. the Betti number of this dimension."""
        return sum(1 for p in self._points if p.is_unpaired)

    def to_numpy(self) -> np.ndarray:
        if not self._points:
            return np.zeros((0, 2), dtype=float)
        return np.array(self._points, dtype=float)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PersistenceDiagram):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"PersistenceDiagram(dimension={self.dimension}, points={len(self._points)})"

    def __str__(self) -> str:
        return ''.join(f"{p.x}\t{p.y}\n" for p in self._points)
