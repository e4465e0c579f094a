"""Taichi-compiled renderer backend.

This module evaluates the same shading model as ``Scene.trace`` inside a
Taichi kernel. The scene is copied into Taichi fields at the start of every
render (which doubles as the per-frame light snapshot), then a single kernel
launch walks every pixel and writes 8-bit RGBA values into a NumPy buffer.

The pixel loop is serialized with ``ti.loop_config(serialize=True)``, so
pixels are produced in the same order as the reference renderer. All scene
data lives in ``ti.f64`` fields; Taichi must be initialized with
``default_fp=ti.f64`` and ``fast_math=False`` so that literals and
intermediate values stay in double precision. Output matches the reference
renderer to within one 8-bit level per channel.

Fields are allocated at import time, so ``ti.init()`` must run before this
module is imported.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False)
    >>> from src.shadowray.core.integrator import KernelRenderer
    >>> from src.shadowray.scene.demo import create_demo_scene
    >>>
    >>> scene, light = create_demo_scene()
    >>> renderer = KernelRenderer(scene)
    >>> buffer = renderer.render(320, 240)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.shadowray.camera.pinhole import PinholeCamera
from src.shadowray.core.ray import RAY_EPSILON
from src.shadowray.core.renderer import CHANNELS, check_dimensions
from src.shadowray.geometry.plane import Plane
from src.shadowray.geometry.sphere import Sphere
from src.shadowray.scene.scene import AMBIENT_FACTOR, Scene

# Double precision 3-vector
vec3d = ti.types.vector(3, ti.f64)

# =============================================================================
# Scene Storage
# =============================================================================

# Maximum number of primitives and lights supported by the kernel
MAX_OBJECTS = 256
MAX_LIGHTS = 16

# Primitive kind tags stored in _object_kinds
KIND_SPHERE = 0
KIND_PLANE = 1

# Object storage: Structure of Arrays layout, one slot per primitive.
# _object_normals is only meaningful for planes, _object_radii for spheres.
_object_kinds = ti.field(dtype=ti.i32, shape=MAX_OBJECTS)
_object_positions = ti.Vector.field(3, dtype=ti.f64, shape=MAX_OBJECTS)
_object_normals = ti.Vector.field(3, dtype=ti.f64, shape=MAX_OBJECTS)
_object_radii = ti.field(dtype=ti.f64, shape=MAX_OBJECTS)
_object_colors = ti.Vector.field(3, dtype=ti.f64, shape=MAX_OBJECTS)
_num_objects = ti.field(dtype=ti.i32, shape=())

# Light storage
_light_positions = ti.Vector.field(3, dtype=ti.f64, shape=MAX_LIGHTS)
_light_intensities = ti.field(dtype=ti.f64, shape=MAX_LIGHTS)
_num_lights = ti.field(dtype=ti.i32, shape=())

_background = ti.Vector.field(3, dtype=ti.f64, shape=())
_camera_position = ti.Vector.field(3, dtype=ti.f64, shape=())


def clear_scene() -> None:
    """Reset the object and light counts to zero."""
    _num_objects[None] = 0
    _num_lights[None] = 0


def load_scene(scene: Scene, camera: PinholeCamera) -> None:
    """Copy a scene and camera into the kernel's fields.

    Light positions and intensities are read here, once, so a render
    launched afterwards never sees later changes to the scene's lights.

    Args:
        scene: The scene to upload.
        camera: The camera whose position is used for primary rays.

    Raises:
        RuntimeError: If the scene exceeds MAX_OBJECTS or MAX_LIGHTS.
        ValueError: If the scene contains a primitive other than Sphere or
            Plane.
    """
    if scene.object_count > MAX_OBJECTS:
        raise RuntimeError(f"Maximum number of objects ({MAX_OBJECTS}) exceeded")
    if scene.light_count > MAX_LIGHTS:
        raise RuntimeError(f"Maximum number of lights ({MAX_LIGHTS}) exceeded")

    # A failed upload leaves an empty scene, never a stale one
    clear_scene()

    for i, obj in enumerate(scene.objects):
        if isinstance(obj, Sphere):
            _object_kinds[i] = KIND_SPHERE
            _object_radii[i] = obj.radius
            _object_normals[i] = [0.0, 0.0, 0.0]
        elif isinstance(obj, Plane):
            _object_kinds[i] = KIND_PLANE
            _object_radii[i] = 0.0
            _object_normals[i] = list(obj.normal.to_tuple())
        else:
            raise ValueError(f"Unsupported primitive type: {type(obj).__name__}")
        _object_positions[i] = list(obj.position.to_tuple())
        _object_colors[i] = list(obj.color.to_tuple())
    _num_objects[None] = scene.object_count

    for i, light in enumerate(scene.lights):
        _light_positions[i] = list(light.position.to_tuple())
        _light_intensities[i] = light.intensity
    _num_lights[None] = scene.light_count

    _background[None] = list(scene.background_color.to_tuple())
    _camera_position[None] = list(camera.origin.to_tuple())


def get_object_count() -> int:
    """Get the number of objects currently loaded."""
    return int(_num_objects[None])


def get_light_count() -> int:
    """Get the number of lights currently loaded."""
    return int(_num_lights[None])


# =============================================================================
# Kernel Functions
# =============================================================================


@ti.func
def _normalize(v):
    """Normalize a vector; the zero vector stays zero."""
    length = ti.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)
    result = vec3d(0.0, 0.0, 0.0)
    if length != 0.0:
        result = vec3d(v.x / length, v.y / length, v.z / length)
    return result


@ti.func
def _intersect_object(i, origin, direction):
    """Intersect a ray with object i.

    Returns:
        A tuple (hit, t) where hit is 1 on a valid intersection beyond
        RAY_EPSILON and t is the distance along the ray.
    """
    hit = 0
    t = 0.0

    if _object_kinds[i] == KIND_SPHERE:
        oc = origin - _object_positions[i]
        a = direction.dot(direction)
        b = 2.0 * oc.dot(direction)
        radius = _object_radii[i]
        c = oc.dot(oc) - radius * radius
        discriminant = b * b - 4.0 * a * c

        if discriminant >= 0.0 and a != 0.0:
            sqrt_d = ti.sqrt(discriminant)
            t_near = (-b - sqrt_d) / (2.0 * a)
            t_far = (-b + sqrt_d) / (2.0 * a)
            if t_near > RAY_EPSILON:
                hit = 1
                t = t_near
            elif t_far > RAY_EPSILON:
                hit = 1
                t = t_far
    else:
        normal = _object_normals[i]
        denom = normal.dot(direction)
        if ti.abs(denom) > RAY_EPSILON:
            t_plane = (_object_positions[i] - origin).dot(normal) / denom
            if t_plane >= RAY_EPSILON:
                hit = 1
                t = t_plane

    return hit, t


@ti.func
def _normal_at(i, point):
    normal = _object_normals[i]
    if _object_kinds[i] == KIND_SPHERE:
        normal = _normalize(point - _object_positions[i])
    return normal


@ti.func
def _in_shadow(point, normal, light_position):
    """Check whether any object blocks the path from point to the light."""
    light_direction = _normalize(light_position - point)
    shadow_origin = point + normal * RAY_EPSILON
    shadow_direction = _normalize(light_direction)

    delta = light_position - point
    light_distance = ti.sqrt(delta.x * delta.x + delta.y * delta.y + delta.z * delta.z)

    blocked = 0
    for j in range(_num_objects[None]):
        if blocked == 0:
            hit, t = _intersect_object(j, shadow_origin, shadow_direction)
            if hit == 1 and t < light_distance:
                blocked = 1
    return blocked


@ti.func
def _trace(origin, direction):
    """Compute the clamped color seen along a primary ray."""
    closest_hit = 0
    closest_t = 0.0
    closest_index = -1

    # Nearest hit; strict < keeps the first object on ties
    for i in range(_num_objects[None]):
        hit, t = _intersect_object(i, origin, direction)
        if hit == 1 and (closest_hit == 0 or t < closest_t):
            closest_hit = 1
            closest_t = t
            closest_index = i

    color = _background[None]

    if closest_hit == 1:
        point = origin + direction * closest_t
        normal = _normal_at(closest_index, point)
        albedo = _object_colors[closest_index]
        shaded = vec3d(0.0, 0.0, 0.0)

        for k in range(_num_lights[None]):
            light_position = _light_positions[k]
            light_direction = _normalize(light_position - point)

            if _in_shadow(point, normal, light_position) == 0:
                diffuse = ti.max(0.0, normal.dot(light_direction))
                shaded += albedo * (diffuse * _light_intensities[k])

            shaded += albedo * AMBIENT_FACTOR

        color = ti.min(ti.max(shaded, 0.0), 1.0)

    return color


@ti.func
def _channel_to_byte(value):
    """floor(value * 255) saturated to [0, 255]; the background is not clamped."""
    level = ti.min(ti.max(ti.floor(value * 255.0), 0.0), 255.0)
    return ti.cast(level, ti.u8)


@ti.kernel
def _render_kernel(pixels: ti.types.ndarray(), width: ti.i32, height: ti.i32):
    """Trace every pixel in row-major order and write RGBA bytes."""
    ti.loop_config(serialize=True)
    for y, x in ti.ndrange(height, width):
        px = (ti.cast(x, ti.f64) / ti.cast(width, ti.f64)) * 2.0 - 1.0
        py = -(ti.cast(y, ti.f64) / ti.cast(height, ti.f64)) * 2.0 + 1.0

        # Normalized once for the view direction, again by ray construction
        direction = _normalize(_normalize(vec3d(px, py, -1.0)))
        color = _trace(_camera_position[None], direction)

        pixels[y, x, 0] = _channel_to_byte(color.x)
        pixels[y, x, 1] = _channel_to_byte(color.y)
        pixels[y, x, 2] = _channel_to_byte(color.z)
        pixels[y, x, 3] = ti.cast(255, ti.u8)


# =============================================================================
# Renderer
# =============================================================================


class KernelRenderer:
    """Renders a scene with the Taichi kernel backend.

    Has the same interface as ``Renderer``: ``render(width, height)`` returns
    a row-major RGBA byte buffer and ``render_array`` a NumPy array.

    Attributes:
        scene: The scene to render. Its lights may be changed between renders.
        camera: The camera generating primary rays.
    """

    def __init__(self, scene: Scene, camera: PinholeCamera | None = None) -> None:
        self.scene = scene
        self.camera = camera if camera is not None else PinholeCamera()

    def render_array(self, width: int, height: int) -> npt.NDArray[np.uint8]:
        """Render the scene into a NumPy array.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Returns:
            Array of shape (height, width, 4) with dtype uint8.

        Raises:
            ValueError: If width or height is not a positive integer.
            RuntimeError: If the scene exceeds the kernel's capacity.
        """
        check_dimensions(width, height)
        load_scene(self.scene, self.camera)

        pixels = np.zeros((height, width, CHANNELS), dtype=np.uint8)
        _render_kernel(pixels, width, height)
        return pixels

    def render(self, width: int, height: int) -> bytes:
        """Render the scene into a row-major RGBA byte buffer."""
        return self.render_array(width, height).tobytes()

    def __repr__(self) -> str:
        return f"KernelRenderer(scene={self.scene!r}, camera={self.camera!r})"
