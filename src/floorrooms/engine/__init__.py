"""Engine module for floor plan modelling.

This module provides room detection, room reconciliation and the session
API used to build the scene of a floor plan.
"""

from .api import PlanSession, create_floor_model
from .reconcile import reconcile_rooms
from .rooms import RoomShape, detect_rooms

__all__ = ["PlanSession", "create_floor_model", "reconcile_rooms", "RoomShape", "detect_rooms"]
