"""Room detection for floor plans.

Rooms are the closed wall loops that survive three filters: loops crossed by
a chord are replaced by the smaller loops they contain, loops wrapped around
rooms that share their walls are dropped, and so are loops whose center
falls inside another room with no more corners and at least as much floor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Tuple

from ..config import FLOOR_DEPTH
from ..core.model import Centroid, FloorPlan, Point
from ..core.topology import Cycle, build_plan_graph, find_cycles, reduce_cycles
from ..geom.polygon import bbox_centroid, covers, cycle_ring, inside, polygon_area

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomShape:
    """Geometry of a detected room.

    Attributes:
        cycle: Point indices around the room.
        ring: (x, z) coordinates around the room.
        center: Bounding-box centroid of the extruded floor.
        area: Floor area.
    """

    cycle: Cycle
    ring: Tuple[Tuple[float, float], ...]
    center: Centroid
    area: float

    @property
    def size(self) -> int:
        return len(self.cycle)


def shape_room(points: Sequence[Point], cycle: Cycle, depth: float = FLOOR_DEPTH) -> RoomShape:
    ring = cycle_ring(points, cycle)
    return RoomShape(
        cycle=tuple(cycle),
        ring=tuple(ring),
        center=bbox_centroid(ring, depth),
        area=polygon_area(ring),
    )


def _walls(cycle: Cycle) -> FrozenSet[FrozenSet[int]]:
    return frozenset(frozenset(pair) for pair in zip(cycle, cycle[1:] + cycle[:1]))


def drop_covering(shapes: Sequence[RoomShape]) -> List[RoomShape]:
    """Drop loops that wrap around smaller rooms built on their own walls.

    A loop whose vertices are not all shared with one room (an interior T or
    cross junction sits off it) survives the cycle reducer. It is still not
    a room when another candidate lies within it and runs along at least one
    of its walls.

    Args:
        shapes: Candidate rooms left by the cycle reducer.

    Returns:
        The candidates that wrap around no wall-sharing candidate, in their
        original order.
    """
    walls = [_walls(shape.cycle) for shape in shapes]

    kept = []
    for i, shape in enumerate(shapes):
        covered = None
        for j, other in enumerate(shapes):
            if j == i or not walls[i] & walls[j]:
                continue
            if covers(shape.ring, other.ring):
                covered = other
                break

        if covered is not None:
            LOGGER.debug("Dropping cycle %s: it wraps around cycle %s", shape.cycle, covered.cycle)
        else:
            kept.append(shape)

    return kept


def _encloses(other: RoomShape, other_index: int, shape: RoomShape, index: int) -> bool:
    """Whether ``other`` is a room that can swallow ``shape``.

    It needs no more corners and at least as much floor. With as many
    corners and as much floor, the earlier candidate wins.
    """
    if other.size > shape.size or other.area < shape.area:
        return False
    if other.size == shape.size and other.area == shape.area:
        return other_index < index
    return True


def filter_contained(shapes: Sequence[RoomShape]) -> List[RoomShape]:
    """Drop candidates whose center lies inside another candidate.

    Args:
        shapes: Candidate rooms left by ``drop_covering``.

    Returns:
        The candidates that are rooms of their own, in their original order.
    """
    kept = []
    for i, shape in enumerate(shapes):
        center = (shape.center.x, shape.center.y)
        enclosing = None
        for j, other in enumerate(shapes):
            if j == i or not _encloses(other, j, shape, i):
                continue
            if inside(center, other.ring):
                enclosing = other
                break

        if enclosing is not None:
            LOGGER.debug("Dropping cycle %s: center lies inside cycle %s", shape.cycle, enclosing.cycle)
        else:
            kept.append(shape)

    return kept


def detect_rooms(plan: FloorPlan, depth: float = FLOOR_DEPTH) -> List[RoomShape]:
    """Find the rooms enclosed by the walls of a plan.

    Args:
        plan: The floor plan to analyse.
        depth: Extrusion depth used for floor centroids.

    Returns:
        Detected rooms in a deterministic order.

    Raises:
        DanglingWallError: If a wall endpoint matches no point.
        DuplicatePointError: If two points share the same coordinates.
    """
    graph = build_plan_graph(plan.points, plan.walls)
    cycles = find_cycles(graph)
    candidates = reduce_cycles(cycles)
    shapes = [shape_room(plan.points, cycle, depth) for cycle in candidates]
    rooms = filter_contained(drop_covering(shapes))

    LOGGER.info(
        "Detected %d rooms (%d cycles, %d after reduction)",
        len(rooms),
        len(cycles),
        len(candidates),
    )
    return rooms
