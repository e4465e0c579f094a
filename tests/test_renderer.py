"""Tests for the sequential reference renderer.

Tests cover:
- Buffer size, layout and alpha channel
- Background-only images
- Per-pixel agreement with Scene.trace
- Determinism across renders
- Light changes between renders and the per-frame light snapshot
- Progress callbacks
- Dimension validation
"""

import math

import pytest


def _empty_scene():
    from src.shadowray.scene.scene import Scene

    return Scene()


class TestChannelConversion:
    """Tests for the float to byte conversion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0),
            (1.0, 255),
            (0.5, 127),
            (0.1, 25),
            (0.2, 51),
            (0.999, 254),
            (1.2, 255),
            (-0.1, 0),
        ],
    )
    def test_channel_to_byte_floors(self, value, expected):
        """Test that channels are floored, then saturated to [0, 255]."""
        from src.shadowray.core.renderer import channel_to_byte

        assert channel_to_byte(value) == expected


class TestRenderBuffer:
    """Tests for the layout of rendered buffers."""

    def test_buffer_length(self, demo_scene):
        """Test that the buffer holds width * height * 4 bytes."""
        from src.shadowray.core.renderer import Renderer

        scene, _ = demo_scene
        buffer = Renderer(scene).render(16, 12)
        assert isinstance(buffer, bytes)
        assert len(buffer) == 16 * 12 * 4

    def test_render_array_shape(self, demo_scene):
        """Test the array form of the image."""
        import numpy as np

        from src.shadowray.core.renderer import Renderer

        scene, _ = demo_scene
        image = Renderer(scene).render_array(16, 12)
        assert image.shape == (12, 16, 4)
        assert image.dtype == np.uint8

    def test_alpha_is_opaque(self, demo_scene):
        """Test that every alpha byte is 255."""
        from src.shadowray.core.renderer import Renderer

        scene, _ = demo_scene
        buffer = Renderer(scene).render(10, 8)
        assert all(alpha == 255 for alpha in buffer[3::4])

    def test_empty_scene_is_background(self):
        """Test a 2x2 render of an empty scene."""
        from src.shadowray.core.renderer import Renderer

        buffer = Renderer(_empty_scene()).render(2, 2)
        pixel = bytes(
            [math.floor(0.1 * 255), math.floor(0.1 * 255), math.floor(0.2 * 255), 255]
        )
        assert buffer == pixel * 4
        assert buffer[:4] == bytes([25, 25, 51, 255])

    def test_out_of_range_background_is_saturated(self):
        """Test that an unclamped background color still yields valid bytes."""
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.core.vector import Vector3
        from src.shadowray.scene.scene import Scene

        scene = Scene(background_color=Vector3(1.2, 0.5, -0.1))
        assert Renderer(scene).render(1, 1) == bytes([255, 127, 0, 255])

    def test_single_pixel(self):
        """Test that a 1x1 render is valid."""
        from src.shadowray.core.renderer import Renderer

        assert len(Renderer(_empty_scene()).render(1, 1)) == 4

    def test_pixels_match_scene_trace(self, demo_scene):
        """Test that each pixel is the floor-converted trace of its camera ray."""
        from src.shadowray.camera.pinhole import PinholeCamera
        from src.shadowray.core.renderer import Renderer, channel_to_byte

        scene, _ = demo_scene
        width, height = 12, 9
        image = Renderer(scene).render_array(width, height)
        camera = PinholeCamera()

        for x, y in [(0, 0), (6, 4), (11, 8), (3, 7), (9, 1)]:
            color = scene.trace(camera.get_ray(x, y, width, height))
            expected = [channel_to_byte(c) for c in color.to_tuple()] + [255]
            assert list(image[y, x]) == expected

    def test_row_major_top_row_first(self, demo_scene):
        """Test that the buffer is laid out row by row from the top."""
        from src.shadowray.core.renderer import Renderer

        scene, _ = demo_scene
        width, height = 8, 6
        renderer = Renderer(scene)
        buffer = renderer.render(width, height)
        image = renderer.render_array(width, height)

        x, y = 5, 2
        offset = (y * width + x) * 4
        assert list(buffer[offset : offset + 4]) == list(image[y, x])

    def test_custom_camera(self):
        """Test that the camera position is used for primary rays."""
        from src.shadowray.camera.pinhole import PinholeCamera
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.core.vector import Vector3
        from src.shadowray.geometry.sphere import Sphere
        from src.shadowray.scene.light import Light
        from src.shadowray.scene.scene import Scene

        scene = Scene()
        scene.add_object(Sphere(Vector3(0, 0, 0), 1.0, Vector3(1, 1, 1)))
        scene.add_light(Light(Vector3(0, 0, 10), 1.0))

        # Center pixel looks down -z; from (0, 0, 5) it hits the sphere
        hit = Renderer(scene, PinholeCamera(position=(0.0, 0.0, 5.0))).render_array(2, 2)
        # From behind the sphere looking away, it misses
        miss = Renderer(scene, PinholeCamera(position=(0.0, 0.0, -5.0))).render_array(2, 2)

        assert list(hit[1, 1]) == [255, 255, 255, 255]
        assert list(miss[1, 1]) == [25, 25, 51, 255]


class TestRenderDeterminism:
    """Tests for repeatability and light updates."""

    def test_same_scene_same_bytes(self, demo_scene):
        """Test that rendering twice without changes is byte-identical."""
        from src.shadowray.core.renderer import Renderer

        scene, _ = demo_scene
        renderer = Renderer(scene)
        assert renderer.render(20, 15) == renderer.render(20, 15)

    def test_light_change_affects_next_render(self, demo_scene):
        """Test that moving the light changes the following image."""
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.scene.demo import LightSettings

        scene, light = demo_scene
        renderer = Renderer(scene)
        before = renderer.render(20, 15)

        LightSettings(x=-5.0, y=5.0, z=2.0, intensity=0.3).apply(light)
        after = renderer.render(20, 15)

        assert before != after

    def test_restoring_light_restores_image(self, demo_scene):
        """Test that resetting the light reproduces the original image."""
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.scene.demo import LightSettings

        scene, light = demo_scene
        renderer = Renderer(scene)
        original = renderer.render(16, 12)

        LightSettings(x=0.0, y=10.0, z=0.0, intensity=3.0).apply(light)
        renderer.render(16, 12)

        settings = LightSettings()
        settings.apply(light)
        assert renderer.render(16, 12) == original

    def test_light_change_during_render_is_deferred(self, demo_scene):
        """Test that a light moved mid-render only shows up in the next frame."""
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.scene.demo import LightSettings, create_demo_scene

        scene, light = demo_scene
        renderer = Renderer(scene)
        moved = LightSettings(x=-5.0, y=5.0, z=2.0, intensity=0.3)

        def move_light(current, total):
            if current == 1:
                moved.apply(light)

        during = renderer.render(20, 15, callback=move_light)

        reference_scene, _ = create_demo_scene()
        assert during == Renderer(reference_scene).render(20, 15)

        moved_scene, moved_light = create_demo_scene()
        moved.apply(moved_light)
        assert renderer.render(20, 15) == Renderer(moved_scene).render(20, 15)


class TestProgressCallback:
    """Tests for the per-row progress callback."""

    def test_called_once_per_row(self):
        """Test that the callback reports every completed row."""
        from src.shadowray.core.renderer import Renderer

        calls = []
        Renderer(_empty_scene()).render(3, 4, callback=lambda c, t: calls.append((c, t)))
        assert calls == [(1, 4), (2, 4), (3, 4), (4, 4)]

    def test_callback_optional(self):
        """Test that rendering without a callback works."""
        from src.shadowray.core.renderer import Renderer

        assert Renderer(_empty_scene()).render(2, 1, callback=None)


class TestDimensionValidation:
    """Tests for invalid image sizes."""

    @pytest.mark.parametrize(
        "width, height",
        [
            (0, 10),
            (10, 0),
            (-1, 10),
            (10, -5),
            (2.5, 10),
            (10, "4"),
            (True, 10),
        ],
    )
    def test_invalid_dimensions_raise(self, width, height):
        """Test that non-positive or non-integer dimensions raise ValueError."""
        from src.shadowray.core.renderer import Renderer

        with pytest.raises(ValueError):
            Renderer(_empty_scene()).render(width, height)

    def test_numpy_integers_accepted(self):
        """Test that NumPy integer dimensions are accepted."""
        import numpy as np

        from src.shadowray.core.renderer import Renderer

        buffer = Renderer(_empty_scene()).render(np.int64(2), np.int32(3))
        assert len(buffer) == 2 * 3 * 4
