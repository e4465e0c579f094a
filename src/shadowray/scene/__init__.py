"""Scene module for scene management and shading.

This module handles scene representation and ray-scene queries:

Components:
    light: Mutable point light (position, intensity)
    scene: Scene container with nearest-hit search, shadow test and shading
    config: Plain-data scene configuration for serialization
    demo: Demo scene factory and live light settings

The scene module manages:
    - Ordered primitive storage (list order breaks distance ties)
    - Light enumeration for direct lighting and shadows
    - Light snapshots so a render never sees a mid-frame light change
"""

from .config import SceneConfig, config_from_dict, config_to_dict
from .demo import (
    DEFAULT_LIGHT_INTENSITY,
    DEFAULT_LIGHT_POSITION,
    LightSettings,
    create_demo_scene,
    format_light_position,
)
from .light import Light
from .scene import AMBIENT_FACTOR, DEFAULT_BACKGROUND_COLOR, MAX_DEPTH, Scene

__all__ = [
    # Scene
    "Scene",
    "Light",
    "AMBIENT_FACTOR",
    "MAX_DEPTH",
    "DEFAULT_BACKGROUND_COLOR",
    # Configuration
    "SceneConfig",
    "config_to_dict",
    "config_from_dict",
    # Demo scene
    "create_demo_scene",
    "LightSettings",
    "format_light_position",
    "DEFAULT_LIGHT_POSITION",
    "DEFAULT_LIGHT_INTENSITY",
]
