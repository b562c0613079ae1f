"""Visualization module for floor plans.

This module renders top-down images of a floor plan and its detected rooms.
"""

from .generator import generate_plan_image

__all__ = ["generate_plan_image"]
