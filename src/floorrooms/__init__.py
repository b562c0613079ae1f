"""Floor Rooms - room detection and floor modelling for wall-based floor plans."""

__version__ = "0.1.0"
__author__ = "Marco"
__email__ = "marco@example.com"

from .core.model import Centroid, FloorPlan, Point, Room, Wall

__all__ = ["Centroid", "FloorPlan", "Point", "Room", "Wall"]
