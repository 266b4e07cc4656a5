"""Field-of-vision trie.

For a fixed radius, every sightline from the origin to the edge of the
covering square is threaded into one prefix trie. Rays that start out
through the same cells share nodes, so a breadth-first walk of the trie
visits each reachable cell once per shared prefix instead of once per ray,
and pruning a node cuts off every ray that passes through it.

Nodes live in an arena and are addressed by index: node 0 is the origin.
The trie is immutable once built and is shared by every board that uses
the same radius (see fov_for_radius).
"""

from __future__ import annotations

from collections import deque
from typing import Callable

from tallgrass.simulation.geometry import ORIGIN, Point, los

# blocked(point, parent_point) -> True to stop descending past this node.
# parent_point is None for the root.
BlockedFn = Callable[[Point, Point | None], bool]

# The 8 octant transforms of (x, y) with 0 <= y <= x.
_OCTANTS: tuple[Callable[[Point], Point], ...] = (
    lambda p: Point(p.x, p.y),
    lambda p: Point(p.x, -p.y),
    lambda p: Point(-p.x, p.y),
    lambda p: Point(-p.x, -p.y),
    lambda p: Point(p.y, p.x),
    lambda p: Point(p.y, -p.x),
    lambda p: Point(-p.y, p.x),
    lambda p: Point(-p.y, -p.x),
)


class FieldOfVision:
    """Shared trie of sightlines radiating from the origin."""

    def __init__(self, radius: int) -> None:
        self.radius = radius
        self.points: list[Point] = [ORIGIN]
        self.parents: list[int] = [-1]
        self.children: list[list[int]] = [[]]

        # len > radius - 0.5  <=>  4 * len^2 > (2 * radius - 1)^2
        self._limit = (2 * radius - 1) * (2 * radius - 1)

        for i in range(radius + 1):
            path = los(ORIGIN, Point(radius, i))
            for transform in _OCTANTS:
                self._insert([transform(p) for p in path])

    def __len__(self) -> int:
        return len(self.points)

    def _insert(self, path: list[Point]) -> None:
        """Thread a ray (starting at the origin) into the trie."""
        node = 0
        for point in path[1:]:
            if 4 * point.len_squared() > self._limit:
                break
            node = self._child(node, point)

    def _child(self, node: int, point: Point) -> int:
        for child in self.children[node]:
            if self.points[child] == point:
                return child
        index = len(self.points)
        self.points.append(point)
        self.parents.append(node)
        self.children.append([])
        self.children[node].append(index)
        return index

    def field_of_vision(self, blocked: BlockedFn) -> None:
        """Breadth-first walk of the trie.

        Calls blocked(point, parent_point) exactly once per visited node and
        skips the children of any node for which it returns True.
        """
        queue: deque[int] = deque([0])
        while queue:
            node = queue.popleft()
            parent = self.parents[node]
            prev = self.points[parent] if parent >= 0 else None
            if blocked(self.points[node], prev):
                continue
            queue.extend(self.children[node])


_SHARED: dict[int, FieldOfVision] = {}


def fov_for_radius(radius: int) -> FieldOfVision:
    """Return the shared trie for a radius, building it on first use."""
    fov = _SHARED.get(radius)
    if fov is None:
        fov = FieldOfVision(radius)
        _SHARED[radius] = fov
    return fov
