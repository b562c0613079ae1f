"""Room identity across recomputations.

Detected rooms have no identity of their own; they are matched against the
persisted rooms of the plan by centroid so that a room keeps its id and
texture while the walls around it are edited.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Tuple

from ..config import DEFAULT_FLOOR_TEXTURE
from ..core.model import FloorPlan, Room, new_id
from .rooms import RoomShape

LOGGER = logging.getLogger(__name__)


def reconcile_rooms(
    plan: FloorPlan,
    shapes: Sequence[RoomShape],
    default_texture: str = DEFAULT_FLOOR_TEXTURE,
    new_handle: Callable[[], str] = new_id,
) -> List[Tuple[Room, RoomShape]]:
    """Update the persisted rooms of a plan from freshly detected ones.

    Each detected room claims at most one persisted room whose center is
    exactly equal to its own. A claimed room keeps its id and texture and
    gets a new mesh handle; a detected room with nothing to claim becomes a
    new persisted room with the default texture. Persisted rooms left
    unclaimed no longer exist and are removed.

    The plan is modified in place; saving it is up to the caller.

    Args:
        plan: Plan whose ``rooms`` list is updated.
        shapes: Rooms detected in the current walls.
        default_texture: Texture given to newly detected rooms.
        new_handle: Factory for mesh handles.

    Returns:
        (persisted room, detected room) pairs in detection order.
    """
    unclaimed = list(plan.rooms)
    pairs = []
    created = 0

    for shape in shapes:
        room = next((r for r in unclaimed if r.center == shape.center), None)
        if room is not None:
            unclaimed.remove(room)
            room.mesh = new_handle()
        else:
            room = Room(center=shape.center, texture=default_texture, mesh=new_handle())
            plan.rooms.append(room)
            created += 1
            LOGGER.debug("New room %s at %s", room.id, shape.center)
        pairs.append((room, shape))

    stale = {id(room) for room in unclaimed}
    if stale:
        for room in unclaimed:
            LOGGER.debug("Removing room %s at %s", room.id, room.center)
        plan.rooms[:] = [room for room in plan.rooms if id(room) not in stale]

    LOGGER.info(
        "Reconciled rooms: %d kept, %d created, %d removed",
        len(pairs) - created,
        created,
        len(stale),
    )
    return pairs
