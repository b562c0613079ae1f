"""Reading and writing floor plan JSON documents.

A document holds ``points``, ``walls`` and ``rooms`` lists. :class:`JsonStore`
keeps documents under a directory, one ``<key>.json`` file per key.
"""

import json
import logging
from pathlib import Path

from ..core.model import FloorPlan, Point, Room, Wall

LOGGER = logging.getLogger(__name__)


def parse_plan(data: dict) -> FloorPlan:
    """Convert a decoded JSON document into a FloorPlan.

    Args:
        data: Dictionary with optional ``points``, ``walls`` and ``rooms`` lists.

    Returns:
        FloorPlan object. Points and rooms without an id receive one.

    Raises:
        ValueError: If an entry is malformed.
    """
    if not isinstance(data, dict):
        raise ValueError("Floor plan document must be a JSON object")

    points = []
    for i, point_data in enumerate(data.get("points", [])):
        try:
            points.append(Point.from_dict(point_data))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid point data at index {i}: {e}") from e

    walls = []
    for i, wall_data in enumerate(data.get("walls", [])):
        try:
            walls.append(Wall.from_dict(wall_data))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid wall data at index {i}: {e}") from e

    rooms = []
    for i, room_data in enumerate(data.get("rooms", [])):
        try:
            rooms.append(Room.from_dict(room_data))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid room data at index {i}: {e}") from e

    return FloorPlan(points=points, walls=walls, rooms=rooms)


def load_plan(path: str) -> FloorPlan:
    """Load a floor plan from a JSON file.

    Args:
        path: Path to the JSON file containing the plan.

    Returns:
        FloorPlan object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return parse_plan(data)


def save_plan(plan: FloorPlan, path: str) -> None:
    """Save a floor plan to a JSON file, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(plan.to_dict(), f, indent=2)


class JsonStore:
    """Key-value store of floor plan documents backed by JSON files."""

    def __init__(self, root):
        self.root = Path(root)

    def path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def load(self, key: str) -> FloorPlan:
        """Load the plan stored under ``key``; an unknown key gives an empty plan."""
        path = self.path(key)
        if not path.exists():
            LOGGER.info("No plan stored under '%s', starting empty", key)
            return FloorPlan()
        return load_plan(str(path))

    def save(self, key: str, plan: FloorPlan) -> None:
        save_plan(plan, str(self.path(key)))
        LOGGER.debug("Saved plan '%s' to %s", key, self.path(key))
