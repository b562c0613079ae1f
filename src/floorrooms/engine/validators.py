"""Consistency checks for floor plan documents.

Room detection looks points up by coordinates, so every wall endpoint has to
resolve to exactly one point. These validators report problems before a
recomputation is attempted.
"""

from __future__ import annotations

import logging

from ..core.model import FloorPlan
from ..core.topology import build_plan_graph

LOGGER = logging.getLogger(__name__)


def validate_unique_points(plan: FloorPlan) -> bool:
    """Validate that no two points share the same coordinates.

    Args:
        plan: The plan to validate.

    Returns:
        True if every point has its own coordinates, False otherwise.
    """
    keys = [point.key for point in plan.points]
    return len(keys) == len(set(keys))


def validate_wall_references(plan: FloorPlan) -> bool:
    """Validate that both endpoints of every wall are plan points.

    Args:
        plan: The plan to validate.

    Returns:
        True if no wall is dangling, False otherwise.
    """
    keys = {point.key for point in plan.points}
    return all(wall.start in keys and wall.end in keys for wall in plan.walls)


def validate_wall_lengths(plan: FloorPlan) -> bool:
    """Validate that no wall starts and ends on the same point.

    Zero-length walls never close a loop, so they are tolerated but reported.
    """
    degenerate = [i for i, wall in enumerate(plan.walls) if wall.start == wall.end]
    for i in degenerate:
        LOGGER.warning("Wall %d has zero length at %s", i, plan.walls[i].start)
    return not degenerate


def validate_all(plan: FloorPlan) -> bool:
    """Run all validators on the plan.

    Endpoint lookup goes through the same graph construction room detection
    uses, so a plan passes here exactly when it can be analysed.

    Args:
        plan: The plan to validate.

    Returns:
        True if the plan can be used for room detection.

    Raises:
        DuplicatePointError: If two points share the same coordinates.
        DanglingWallError: If a wall endpoint matches no point.
    """
    build_plan_graph(plan.points, plan.walls)
    validate_wall_lengths(plan)

    return True
