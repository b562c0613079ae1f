"""JSON persistence for floor plan documents."""

from .parser import JsonStore, load_plan, parse_plan, save_plan

__all__ = ["JsonStore", "load_plan", "parse_plan", "save_plan"]
