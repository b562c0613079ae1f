"""Geometry utilities for floor plans.

This module provides the planar calculations used to turn wall loops
into rooms: rings, bounding-box centroids, containment and area.
"""

from .polygon import bbox_centroid, cycle_ring, inside, polygon_area

__all__ = ["cycle_ring", "bbox_centroid", "inside", "polygon_area"]
