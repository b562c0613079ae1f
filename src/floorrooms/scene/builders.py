"""Mesh builders for floor plan scenes.

Each builder turns part of the floor plan document into scene meshes. The
wall builder also writes appearance back onto the document: walls without a
texture receive the default one and every wall gets the handle of its new
mesh.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

from shapely.geometry import LineString, Polygon
from shapely.geometry import Point as ShapelyPoint

from ..config import (
    DEFAULT_WALL_TEXTURE,
    DEPTH,
    FLOOR_DEPTH,
    HEIGHT,
    LABEL_OFFSET,
    LINE_WIDTH,
    MARKER_COLOR,
    MARKER_RADIUS,
    SELECTED_MARKER_COLOR,
    SKIRTING_DEPTH,
    SKIRTING_HEIGHT,
    SKIRTING_TEXTURE,
)
from ..core.model import Centroid, FloorPlan, Point, Room, Wall
from .objects import Group, Mesh


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def wall_footprint(wall: Wall, depth: float = DEPTH) -> Polygon:
    """Rectangle covered by a wall of the given thickness, in plan coordinates."""
    return LineString([wall.start, wall.end]).buffer(depth / 2, cap_style="flat")


def _marker(x: float, y: float, z: float, color: str) -> Mesh:
    return Mesh(
        name="point",
        geometry=ShapelyPoint(x, z).buffer(MARKER_RADIUS),
        position=(x, y, z),
        height=2 * MARKER_RADIUS,
        color=color,
    )


def build_floor_mesh(ring: Sequence[Tuple[float, float]], room: Room, depth: float = FLOOR_DEPTH) -> Mesh:
    """Build the floor slab of a room.

    The mesh reuses the room's handle so the persisted room points at it.
    """
    return Mesh(
        name="floor",
        geometry=Polygon(list(ring)),
        height=depth,
        texture=room.texture,
        uuid=room.mesh,
    )


def build_point_markers(points: Iterable[Point]) -> List[Mesh]:
    """Build a marker per plan point, highlighting selected ones."""
    return [
        _marker(p.x, 0.0, p.z, SELECTED_MARKER_COLOR if p.selected else MARKER_COLOR)
        for p in points
    ]


def build_center_markers(centers: Iterable[Centroid]) -> List[Mesh]:
    """Build a marker per room center given in render coordinates."""
    return [_marker(c.x, c.y, c.z, MARKER_COLOR) for c in centers]


def build_wall_lines(walls: Iterable[Wall]) -> List[Mesh]:
    """Build the thin line overlay used while drawing walls."""
    return [
        Mesh(
            name="line",
            geometry=LineString([wall.start, wall.end]),
            height=LINE_WIDTH,
            color="#ffffff",
        )
        for wall in walls
    ]


def wall_label(wall: Wall) -> Mesh:
    """Build the length label of a wall.

    The length is truncated to one decimal and the label is moved off the
    wall: sideways for axis-aligned walls, perpendicular otherwise.
    """
    distance_x = wall.end[0] - wall.start[0]
    distance_z = wall.end[1] - wall.start[1]

    x = (wall.start[0] + wall.end[0]) / 2
    z = (wall.start[1] + wall.end[1]) / 2

    if distance_x == 0:
        x = x + LABEL_OFFSET
    if distance_z == 0:
        z = z + LABEL_OFFSET
    if distance_x != 0 and distance_z != 0:
        x = x - _sign(distance_z) * LABEL_OFFSET
        z = z + _sign(distance_x) * LABEL_OFFSET

    length = math.floor(math.hypot(distance_x, distance_z) * 10) / 10
    text = f"{int(length)}m" if length.is_integer() else f"{length}m"

    return Mesh(name="label", geometry=ShapelyPoint(x, z), position=(x, 0.0, z), text=text)


def build_draw_model(plan: FloorPlan) -> Group:
    """Build the 2D drawing overlay: points, wall lines and length labels."""
    group = Group(name="draw")
    group.extend(build_point_markers(plan.points))
    group.extend(build_wall_lines(plan.walls))
    group.extend(wall_label(wall) for wall in plan.walls)
    return group


def build_wall_meshes(plan: FloorPlan, skirting: bool = False) -> List[Mesh]:
    """Build a box per wall.

    Skirting boards are lower and slightly thicker than walls and do not
    touch the wall records. Regular walls get the default texture when they
    have none, and their mesh handle is refreshed.
    """
    height = SKIRTING_HEIGHT if skirting else HEIGHT
    depth = SKIRTING_DEPTH if skirting else DEPTH

    meshes = []
    for wall in plan.walls:
        (x1, z1), (x2, z2) = wall.start, wall.end
        offset_x = x1 - x2
        offset_z = z1 - z2

        mesh = Mesh(
            name="skirting" if skirting else "wall",
            geometry=wall_footprint(wall, depth),
            position=(x2 + offset_x / 2, height / 2, z2 + offset_z / 2),
            height=height,
            rotation_y=-math.atan2(offset_z, offset_x),
        )

        if skirting:
            mesh.texture = SKIRTING_TEXTURE
        else:
            if wall.texture is None:
                wall.texture = DEFAULT_WALL_TEXTURE
            mesh.texture = wall.texture
            wall.mesh = mesh.uuid

        meshes.append(mesh)

    return meshes


def build_column_meshes(points: Iterable[Point], skirting: bool = False) -> List[Mesh]:
    """Build a round column at every wall corner."""
    height = SKIRTING_HEIGHT if skirting else HEIGHT
    depth = SKIRTING_DEPTH if skirting else DEPTH

    return [
        Mesh(
            name="column",
            geometry=ShapelyPoint(p.x, p.z).buffer(depth / 2),
            position=(p.x, height / 2, p.z),
            height=height,
            texture=SKIRTING_TEXTURE if skirting else None,
            color=None if skirting else "#ffffff",
        )
        for p in points
    ]


def build_walls_model(plan: FloorPlan, skirting: bool = False) -> Group:
    """Build the wall (or skirting) group of the scene."""
    group = Group(name="skirting" if skirting else "walls")
    group.extend(build_wall_meshes(plan, skirting))
    group.extend(build_column_meshes(plan.points, skirting))
    return group
