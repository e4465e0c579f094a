"""Python implementation of a small Whitted-style ray tracer.

This package renders static scenes of spheres and planes with direct
diffuse lighting, a per-light ambient term and hard shadows:
- Double precision vector algebra with reproducible results
- Sphere and infinite plane primitives
- Point lights that can be moved between renders
- Reference Python renderer and a Taichi-compiled backend

Subpackages:
    core: Vector and ray types, reference renderer, Taichi integrator
    geometry: Shape primitives and intersection algorithms
    scene: Scene container, lights, configuration and the demo scene
    camera: Pinhole camera with per-pixel ray generation
    preview: Buffer export utilities
"""

__version__ = "0.1.0"
