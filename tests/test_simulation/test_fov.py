"""Tests for the field-of-vision trie."""

from tallgrass.simulation.fov import FieldOfVision, fov_for_radius
from tallgrass.simulation.geometry import ORIGIN, Point


def _within(radius: int) -> set[Point]:
    """Cells within Euclidean distance radius - 0.5 of the origin."""
    limit = (2 * radius - 1) ** 2
    return {
        Point(x, y)
        for y in range(-radius, radius + 1)
        for x in range(-radius, radius + 1)
        if 4 * (x * x + y * y) <= limit
    }


class TestConstruction:
    def test_root_is_origin(self):
        fov = FieldOfVision(4)
        assert fov.points[0] == ORIGIN
        assert fov.parents[0] == -1

    def test_covers_exactly_the_disc(self):
        for radius in (1, 2, 5, 8, 15):
            fov = FieldOfVision(radius)
            assert set(fov.points) == _within(radius), f"radius {radius}"

    def test_each_node_is_one_step_from_its_parent(self):
        fov = FieldOfVision(8)
        for node in range(1, len(fov)):
            parent = fov.parents[node]
            step = fov.points[node] - fov.points[parent]
            assert step.len_walking() == 1
            assert node in fov.children[parent]

    def test_prefixes_are_shared(self):
        fov = FieldOfVision(8)
        for children in fov.children:
            points = [fov.points[c] for c in children]
            assert len(points) == len(set(points))
        # Every ray leaves the origin through one of its 8 neighbours.
        assert len(fov.children[0]) == 8

    def test_octant_symmetry(self):
        fov = FieldOfVision(6)
        points = set(fov.points)
        for p in points:
            assert Point(-p.x, p.y) in points
            assert Point(p.x, -p.y) in points
            assert Point(p.y, p.x) in points

    def test_shared_per_radius(self):
        assert fov_for_radius(7) is fov_for_radius(7)
        assert fov_for_radius(7) is not fov_for_radius(6)


class TestTraversal:
    def test_visits_every_node_once(self):
        fov = FieldOfVision(6)
        calls: list[tuple[Point, Point | None]] = []

        def blocked(p, prev):
            calls.append((p, prev))
            return False

        fov.field_of_vision(blocked)
        assert len(calls) == len(fov)
        assert calls[0] == (ORIGIN, None)
        assert sum(1 for _, prev in calls if prev is None) == 1

    def test_breadth_first_order(self):
        fov = FieldOfVision(6)
        depths: list[int] = []
        fov.field_of_vision(lambda p, prev: depths.append(p.len_walking()) or False)
        assert depths == sorted(depths)

    def test_blocked_node_prunes_its_subtree(self):
        fov = FieldOfVision(5)
        visited: set[Point] = set()

        def blocked(p, prev):
            visited.add(p)
            return p == Point(1, 0)

        fov.field_of_vision(blocked)
        assert Point(1, 0) in visited
        for x in range(2, 5):
            assert Point(x, 0) not in visited
        # Off-axis cells are still reached around the blocker.
        assert Point(2, 1) in visited
        assert Point(-2, 0) in visited

    def test_blocking_root_visits_only_root(self):
        fov = FieldOfVision(5)
        visited: list[Point] = []
        fov.field_of_vision(lambda p, prev: visited.append(p) or True)
        assert visited == [ORIGIN]
