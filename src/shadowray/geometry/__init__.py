"""Geometry module for shape primitives.

This module provides geometric primitives and their intersection routines:

Components:
    primitive: The Primitive protocol (intersect, normal_at, position, color)
    sphere: Sphere primitive with quadratic ray-sphere intersection
    plane: Infinite plane primitive

Ray-object intersection follows the pattern:
    t = shape.intersect(ray)          # float distance or None
    n = shape.normal_at(ray.point_at(t))

Both primitives reject hits closer than RAY_EPSILON so that shadow rays
leaving a surface do not immediately re-hit it.
"""

from .plane import Plane
from .primitive import Primitive
from .sphere import Sphere

__all__ = [
    "Primitive",
    "Sphere",
    "Plane",
]
