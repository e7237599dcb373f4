"""Computational geometry helpers."""

from .hull import close_polygon, convex_hull, orientation, polygon_area

__all__ = ["close_polygon", "convex_hull", "orientation", "polygon_area"]
