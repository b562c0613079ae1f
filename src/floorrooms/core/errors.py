"""Exceptions raised when a floor plan document is not self-consistent."""

from __future__ import annotations


class InvalidPlan(ValueError):
    """Raised when a floor plan is not self-consistent."""

    pass


class DanglingWallError(InvalidPlan):
    """Raised when a wall endpoint matches no point of the plan."""

    def __init__(self, wall_index: int, coords: tuple[float, float]):
        super().__init__(
            f"Wall {wall_index} references point ({coords[0]}, {coords[1]}) "
            "which is not in the plan"
        )
        self.wall_index = wall_index
        self.coords = coords


class DuplicatePointError(InvalidPlan):
    """Raised when two points share the same coordinates."""

    def __init__(self, first: int, second: int, coords: tuple[float, float]):
        super().__init__(
            f"Points {first} and {second} both sit at ({coords[0]}, {coords[1]})"
        )
        self.indices = (first, second)
        self.coords = coords
