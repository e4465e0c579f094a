"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vector3 value type (add, subtract, scale, dot, cross, normalize)
    ray: Ray data structure and the shared epsilon tolerance
    renderer: Sequential reference renderer producing RGBA byte buffers
    integrator: Taichi-compiled renderer backend (optional)

The renderer maps every pixel to a camera ray, asks the scene for the color
seen along it, and writes the 8-bit result into a row-major RGBA buffer.
"""

from .ray import RAY_EPSILON, Ray
from .vector import Vector3

# Note: renderer and integrator are NOT imported here. The renderer depends on
# the scene package (which depends on core), and the integrator allocates
# Taichi fields at import time, which requires ti.init() to have run first.
#
# For rendering, use:
#   from src.shadowray.core.renderer import Renderer

__all__ = [
    "Vector3",
    "Ray",
    "RAY_EPSILON",
]
