"""Polygon geometry utilities for room calculations.

This module converts wall loops into planar rings and provides the
measurements the room filter relies on: the bounding-box centroid of the
extruded floor, point-in-polygon testing, area and polygon cover.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from shapely.geometry import LinearRing, MultiPoint, Polygon
from shapely.geometry import Point as ShapelyPoint

from ..config import FLOOR_DEPTH
from ..core.model import Centroid, Point

Ring = List[Tuple[float, float]]


def cycle_ring(points: Sequence[Point], cycle: Sequence[int]) -> Ring:
    """Return the (x, z) ring traced by a cycle of point indices."""
    return [(points[i].x, points[i].z) for i in cycle]


def bbox_centroid(ring: Sequence[Tuple[float, float]], depth: float = FLOOR_DEPTH) -> Centroid:
    """Center of the bounding box of a ring extruded by ``depth``.

    The ring lies in the (x, y) plane of the slab and the extrusion runs
    from 0 to ``depth`` along z.

    Args:
        ring: Ordered (x, z) coordinates of the floor outline.
        depth: Extrusion depth of the floor slab.

    Returns:
        Centroid of the slab's axis-aligned bounding box.
    """
    min_x, min_y, max_x, max_y = MultiPoint(list(ring)).bounds
    return Centroid(
        (min_x + max_x) * 0.5,
        (min_y + max_y) * 0.5,
        (0.0 + depth) * 0.5,
    )


def inside(point: Tuple[float, float], polygon: Sequence[Tuple[float, float]]) -> bool:
    """Crossing-number point-in-polygon test.

    The polygon is an ordered ring; the closing edge from the last vertex
    back to the first is implied. Points on the boundary are outside.

    Args:
        point: (x, y) coordinates to test.
        polygon: Ordered ring of (x, y) vertices.

    Returns:
        True if the point lies strictly inside the polygon.
    """
    if len(polygon) < 3:
        return False

    x, y = point
    if LinearRing(list(polygon)).intersects(ShapelyPoint(x, y)):
        return False

    result = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            result = not result
        j = i

    return result


def polygon_area(ring: Sequence[Tuple[float, float]]) -> float:
    """Area enclosed by a ring, 0.0 for degenerate rings."""
    if len(ring) < 3:
        return 0.0
    return Polygon(list(ring)).area


def covers(outer: Sequence[Tuple[float, float]], inner: Sequence[Tuple[float, float]]) -> bool:
    """Whether ``inner`` lies within ``outer`` and encloses less floor.

    Shared boundary segments are allowed. Degenerate or self-intersecting
    rings never cover and are never covered.
    """
    if len(outer) < 3 or len(inner) < 3:
        return False

    outer_polygon = Polygon(list(outer))
    inner_polygon = Polygon(list(inner))
    if not (outer_polygon.is_valid and inner_polygon.is_valid):
        return False
    if inner_polygon.area <= 0.0 or inner_polygon.area >= outer_polygon.area:
        return False
    return inner_polygon.within(outer_polygon)
