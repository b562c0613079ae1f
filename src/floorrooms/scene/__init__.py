"""Scene module for floor plans.

This module provides the renderable objects built from a floor plan:
floors, walls, skirting, columns, point markers and wall labels.
"""

from .builders import build_draw_model, build_walls_model
from .objects import Group, Mesh, hide

__all__ = ["Group", "Mesh", "hide", "build_draw_model", "build_walls_model"]
