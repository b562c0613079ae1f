"""Core data models and topology for floor plans."""

from .errors import DanglingWallError, DuplicatePointError, InvalidPlan
from .model import Centroid, FloorPlan, Point, Room, Wall
from .topology import build_plan_graph, find_cycles, reduce_cycles

__all__ = [
    "Centroid",
    "FloorPlan",
    "Point",
    "Room",
    "Wall",
    "InvalidPlan",
    "DanglingWallError",
    "DuplicatePointError",
    "build_plan_graph",
    "find_cycles",
    "reduce_cycles",
]
