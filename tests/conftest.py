import pytest

from floorrooms.core.model import FloorPlan, Point, Wall


def make_plan(corners, edges):
    """Build a plan from point coordinates and index pairs."""
    points = [Point(x, z) for x, z in corners]
    walls = [Wall(start=corners[a], end=corners[b]) for a, b in edges]
    return FloorPlan(points=points, walls=walls)


def loop(n, offset=0):
    return [(offset + i, offset + (i + 1) % n) for i in range(n)]


@pytest.fixture
def square_plan():
    corners = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    return make_plan(corners, loop(4))


@pytest.fixture
def split_plan():
    """A 4 x 2 rectangle split into two 2 x 2 rooms by a wall at x = 2."""
    corners = [(0.0, 0.0), (2.0, 0.0), (4.0, 0.0), (4.0, 2.0), (2.0, 2.0), (0.0, 2.0)]
    return make_plan(corners, loop(6) + [(1, 4)])


@pytest.fixture
def diagonal_plan():
    """A unit square with a diagonal wall from (0, 0) to (1, 1)."""
    corners = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    return make_plan(corners, loop(4) + [(0, 2)])


@pytest.fixture
def nested_plan():
    """Two concentric squares with no wall between them."""
    outer = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
    inner = [(1.0, 1.0), (3.0, 1.0), (3.0, 3.0), (1.0, 3.0)]
    return make_plan(outer + inner, loop(4) + loop(4, offset=4))


@pytest.fixture
def tjunction_plan():
    """A 4 x 2 rectangle split at x = 2, its right half split again at z = 1.

    The junction (2, 1) is not on the outer wall loop.
    """
    corners = [
        (0.0, 0.0), (2.0, 0.0), (4.0, 0.0), (4.0, 1.0),
        (4.0, 2.0), (2.0, 2.0), (0.0, 2.0), (2.0, 1.0),
    ]
    return make_plan(corners, loop(7) + [(1, 7), (7, 5), (7, 3)])


@pytest.fixture
def grid_plan():
    """A 2 x 2 square split into four unit rooms by a cross at (1, 1)."""
    corners = [
        (0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (2.0, 1.0),
        (2.0, 2.0), (1.0, 2.0), (0.0, 2.0), (0.0, 1.0), (1.0, 1.0),
    ]
    return make_plan(corners, loop(8) + [(1, 8), (8, 5), (7, 8), (8, 3)])
