"""Core API for floor plan modelling.

This module provides the entry points used by an editor: building the floor
model of a plan, and a session object that owns a plan document together
with every scene group derived from it.
"""

from __future__ import annotations

import logging
from typing import Protocol, Tuple

from ..config import DEFAULT_FLOOR_TEXTURE, FLOOR_DEPTH, PLAN_KEY
from ..core.model import FloorPlan
from ..scene.builders import (
    build_center_markers,
    build_draw_model,
    build_floor_mesh,
    build_walls_model,
)
from ..scene.objects import Group, hide
from .reconcile import reconcile_rooms
from .rooms import detect_rooms

LOGGER = logging.getLogger(__name__)


class PlanStore(Protocol):
    """Keyed persistence for plan documents."""

    def load(self, key: str) -> FloorPlan:
        ...

    def save(self, key: str, plan: FloorPlan) -> None:
        ...


def create_floor_model(
    plan: FloorPlan,
    depth: float = FLOOR_DEPTH,
    default_texture: str = DEFAULT_FLOOR_TEXTURE,
) -> Tuple[Group, Group]:
    """Detect the rooms of a plan and build their floors.

    ``plan.rooms`` is reconciled with the detected rooms as a side effect.

    Args:
        plan: The floor plan document.
        depth: Extrusion depth of the floor slabs.
        default_texture: Texture given to newly detected rooms.

    Returns:
        A tuple containing:
        - The group of floor meshes, one per room
        - The group of room center markers, in render coordinates

    Raises:
        DanglingWallError: If a wall endpoint matches no point.
        DuplicatePointError: If two points share the same coordinates.
    """
    shapes = detect_rooms(plan, depth)
    pairs = reconcile_rooms(plan, shapes, default_texture=default_texture)

    floor = Group(name="floor")
    for room, shape in pairs:
        floor.add(build_floor_mesh(shape.ring, room, depth))

    centers = Group(name="room-centers")
    centers.extend(build_center_markers(shape.center.to_render() for _, shape in pairs))

    return floor, centers


class PlanSession:
    """A floor plan document and the scene built from it.

    The session must not be used from several threads at once: every
    operation reads and rewrites the document in place.
    """

    def __init__(self, store: PlanStore, key: str = PLAN_KEY, depth: float = FLOOR_DEPTH):
        self.store = store
        self.key = key
        self.depth = depth
        self.plan: FloorPlan | None = None
        self.draw_model: Group | None = None
        self.floor_model: Group | None = None
        self.room_centers: Group | None = None
        self.walls_model: Group | None = None
        self.skirting_model: Group | None = None

    @property
    def groups(self) -> list[Group]:
        """Scene groups currently built, in scene order."""
        groups = [
            self.draw_model,
            self.floor_model,
            self.room_centers,
            self.skirting_model,
            self.walls_model,
        ]
        return [group for group in groups if group is not None]

    def _require_plan(self) -> FloorPlan:
        if self.plan is None:
            raise RuntimeError("No plan loaded: call create_model() first")
        return self.plan

    def create_model(self) -> None:
        """Load the plan, build every scene group and save the plan."""
        self.plan = self.store.load(self.key)
        LOGGER.info(
            "Loaded plan '%s': %d points, %d walls, %d rooms",
            self.key,
            len(self.plan.points),
            len(self.plan.walls),
            len(self.plan.rooms),
        )

        self.draw_model = build_draw_model(self.plan)
        hide(self.draw_model.children)

        self.floor_model, self.room_centers = create_floor_model(self.plan, self.depth)
        self.skirting_model = build_walls_model(self.plan, skirting=True)
        self.walls_model = build_walls_model(self.plan)

        self.store.save(self.key, self.plan)

    def update_scene(self) -> None:
        """Rebuild the drawing overlay after an edit and save the plan."""
        plan = self._require_plan()
        self.draw_model = build_draw_model(plan)
        self.store.save(self.key, plan)

    def update_model(self) -> None:
        """Rebuild floors, room centers, walls and skirting after an edit.

        The new groups start hidden; the 3D view shows them when entered.
        """
        plan = self._require_plan()

        self.floor_model, self.room_centers = create_floor_model(plan, self.depth)
        self.walls_model = build_walls_model(plan)
        self.skirting_model = build_walls_model(plan, skirting=True)

        for group in (self.floor_model, self.room_centers, self.walls_model, self.skirting_model):
            hide(group.children)
