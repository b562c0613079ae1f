"""Core data models for floor plans.

This module defines the floor plan document: points, the walls drawn
between them, and the persisted rooms derived from closed wall loops.
"""

from __future__ import annotations

import math
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


def new_id() -> str:
    """Return a fresh identifier for points, rooms and mesh handles."""
    return uuid.uuid4().hex


def _coords(data: Mapping[str, Any]) -> Tuple[float, float]:
    return float(data["x"]), float(data["z"])


@dataclass
class Point:
    """Represents a wall corner on the plan.

    Attributes:
        x: The x-coordinate of the point.
        z: The z-coordinate of the point (depth axis of the plan).
        selected: Whether the point is selected in the editor.
        id: Stable identifier assigned at creation.
    """

    x: float
    z: float
    selected: bool = False
    id: str = field(default_factory=new_id)

    @property
    def key(self) -> Tuple[float, float]:
        """Coordinates used to look the point up from wall endpoints."""
        return (self.x, self.z)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": self.x, "z": self.z, "selected": self.selected}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Point":
        x, z = _coords(data)
        return cls(
            x=x,
            z=z,
            selected=bool(data.get("selected", False)),
            id=data.get("id") or new_id(),
        )


@dataclass
class Wall:
    """Represents a wall segment between two points.

    Attributes:
        start: (x, z) coordinates of the first endpoint.
        end: (x, z) coordinates of the second endpoint.
        texture: Name of the texture applied to the wall, if any.
        mesh: Handle of the mesh last built for this wall.
    """

    start: Tuple[float, float]
    end: Tuple[float, float]
    texture: str | None = None
    mesh: str | None = None

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "from": {"x": self.start[0], "z": self.start[1]},
            "to": {"x": self.end[0], "z": self.end[1]},
        }
        if self.texture is not None:
            data["texture"] = self.texture
        if self.mesh is not None:
            data["mesh"] = self.mesh
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Wall":
        return cls(
            start=_coords(data["from"]),
            end=_coords(data["to"]),
            texture=data.get("texture"),
            mesh=data.get("mesh"),
        )


@dataclass(frozen=True)
class Centroid:
    """Bounding-box center of an extruded room polygon.

    The floor polygon is drawn in its own (x, y) plane and extruded along z,
    so ``y`` holds the plan z-coordinate and ``z`` half the extrusion depth.

    Attributes:
        x: Plan x-coordinate.
        y: Plan z-coordinate.
        z: Mid-depth of the extruded slab.
    """

    x: float
    y: float
    z: float

    def to_render(self) -> "Centroid":
        """Return the same center with y as the vertical render axis."""
        return Centroid(self.x, self.z, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Centroid":
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))


@dataclass
class Room:
    """Represents a persisted room.

    Attributes:
        center: Centroid of the room floor, used to recognise the room
            again after the plan is recomputed.
        texture: Name of the floor texture.
        mesh: Handle of the floor mesh built in the last recomputation.
        id: Stable identifier assigned when the room was first detected.
    """

    center: Centroid
    texture: str
    mesh: str | None = None
    id: str = field(default_factory=new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "center": self.center.to_dict(),
            "mesh": self.mesh,
            "texture": self.texture,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Room":
        return cls(
            center=Centroid.from_dict(data["center"]),
            texture=data["texture"],
            mesh=data.get("mesh"),
            id=data.get("id") or new_id(),
        )


@dataclass
class FloorPlan:
    """Represents a complete floor plan document.

    Attributes:
        points: Wall corners, in document order. A point's position in this
            list is its vertex index in the plan graph.
        walls: Wall segments between points.
        rooms: Persisted rooms with their appearance.
    """

    points: List[Point] = field(default_factory=list)
    walls: List[Wall] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "points": [point.to_dict() for point in self.points],
            "walls": [wall.to_dict() for wall in self.walls],
            "rooms": [room.to_dict() for room in self.rooms],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FloorPlan":
        return cls(
            points=[Point.from_dict(p) for p in data.get("points", [])],
            walls=[Wall.from_dict(w) for w in data.get("walls", [])],
            rooms=[Room.from_dict(r) for r in data.get("rooms", [])],
        )
