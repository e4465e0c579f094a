"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization for the compiled backend tests, which must happen
once per session and before the integrator module is imported.
"""

import pytest


@pytest.fixture(scope="session")
def taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Double precision
    and exact float math keep the kernel in step with the Python renderer.
    """
    ti = pytest.importorskip("taichi")
    ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False, random_seed=42)
    yield ti
    # Note: We don't call ti.reset() here as it can cause issues
    # with subsequent tests if any cleanup happens after


@pytest.fixture
def demo_scene():
    """The demo scene and its light."""
    from src.shadowray.scene.demo import create_demo_scene

    return create_demo_scene()


@pytest.fixture
def single_sphere_scene():
    """A red sphere of radius 2 at the origin lit from (2, 5, 2)."""
    from src.shadowray.core.vector import Vector3
    from src.shadowray.geometry.sphere import Sphere
    from src.shadowray.scene.light import Light
    from src.shadowray.scene.scene import Scene

    scene = Scene()
    scene.add_object(Sphere(Vector3(0, 0, 0), 2, Vector3(0.8, 0.2, 0.2)))
    light = Light(Vector3(2, 5, 2), 1.5)
    scene.add_light(light)
    return scene, light
