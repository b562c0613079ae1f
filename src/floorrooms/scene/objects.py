"""Renderable scene objects.

Meshes carry their planar footprint as a Shapely geometry in plan (x, z)
coordinates plus the placement data a renderer needs to extrude them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from shapely.geometry.base import BaseGeometry

from ..core.model import new_id


@dataclass
class Mesh:
    """A renderable object.

    Attributes:
        name: Kind of object ("floor", "wall", "column", "point", "line", "label").
        geometry: Footprint on the plan, in (x, z) coordinates.
        position: (x, y, z) render position, y being vertical.
        height: Vertical extent of the object.
        rotation_y: Rotation around the vertical axis, in radians.
        texture: Texture name, if the object is textured.
        color: Flat color, if the object is not textured.
        text: Text content for labels.
        uuid: Handle written back onto walls and rooms.
        visible: Whether the object is currently shown.
    """

    name: str
    geometry: BaseGeometry | None
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    height: float = 0.0
    rotation_y: float = 0.0
    texture: str | None = None
    color: str | None = None
    text: str | None = None
    uuid: str = field(default_factory=new_id)
    visible: bool = True


@dataclass
class Group:
    """An ordered collection of meshes added to or removed from a scene together."""

    name: str
    children: List[Mesh] = field(default_factory=list)

    def add(self, mesh: Mesh) -> None:
        self.children.append(mesh)

    def extend(self, meshes: Iterable[Mesh]) -> None:
        self.children.extend(meshes)

    def named(self, name: str) -> List[Mesh]:
        return [mesh for mesh in self.children if mesh.name == name]

    def __iter__(self) -> Iterator[Mesh]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


def hide(meshes: Iterable[Mesh]) -> None:
    for mesh in meshes:
        mesh.visible = False
