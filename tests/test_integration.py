"""Integration tests for the end-to-end rendering pipeline.

This module tests the complete pipeline from demo scene creation through
light adjustment, rendering and PNG output. Tests are kept fast by rendering
at low resolution.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest


class TestDemoSceneRender:
    """Integration tests for rendering the demo scene."""

    def test_center_pixel_sees_red_sphere(self) -> None:
        """Test that the image center shows the lit top of the red sphere."""
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.scene.demo import create_demo_scene

        scene, _ = create_demo_scene()
        image = Renderer(scene).render_array(32, 24)

        r, g, b, a = (int(c) for c in image[12, 16])
        assert r > g
        assert r > b
        assert r > 25
        assert a == 255

    def test_floor_is_grey(self) -> None:
        """Test that a bottom-left pixel lands on the grey floor."""
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.scene.demo import create_demo_scene

        scene, _ = create_demo_scene()
        image = Renderer(scene).render_array(32, 24)

        r, g, b, _ = (int(c) for c in image[23, 0])
        assert r == g == b
        assert r > 0

    def test_light_intensity_brightens_image(self) -> None:
        """Test that raising the light intensity never darkens any pixel."""
        from src.shadowray.core.renderer import Renderer
        from src.shadowray.scene.demo import LightSettings, create_demo_scene

        scene, light = create_demo_scene()
        renderer = Renderer(scene)

        LightSettings(intensity=0.5).apply(light)
        dim = renderer.render_array(24, 18).astype(np.int16)
        LightSettings(intensity=2.5).apply(light)
        bright = renderer.render_array(24, 18).astype(np.int16)

        assert np.all(bright >= dim)
        assert np.any(bright > dim)

    def test_zero_intensity_leaves_ambient_only(self) -> None:
        """Test that an unlit render equals 0.2 * albedo wherever a surface is hit."""
        from src.shadowray.core.renderer import Renderer, channel_to_byte
        from src.shadowray.scene.demo import LightSettings, create_demo_scene

        scene, light = create_demo_scene()
        LightSettings(intensity=0.0).apply(light)
        image = Renderer(scene).render_array(32, 24)

        # Center pixel hits the red sphere
        expected = [channel_to_byte(0.8 * 0.2), channel_to_byte(0.2 * 0.2), channel_to_byte(0.2 * 0.2)]
        assert list(image[12, 16, :3]) == expected

    def test_save_png(self, tmp_path: Path) -> None:
        """Test rendering straight to a PNG file."""
        from PIL import Image

        from src.shadowray.core.renderer import Renderer
        from src.shadowray.preview.export import save_png
        from src.shadowray.scene.demo import create_demo_scene

        scene, _ = create_demo_scene()
        buffer = Renderer(scene).render(20, 10)
        path = save_png(buffer, 20, 10, tmp_path / "demo.png")

        with Image.open(path) as loaded:
            assert loaded.size == (20, 10)


class TestRenderScript:
    """Integration tests for the example render script."""

    def test_render_scene_writes_png(self, tmp_path: Path) -> None:
        """Test the script's render function with the Python backend."""
        from examples.render_scene import render_scene

        output = render_scene(
            width=12,
            height=8,
            light_position=(-3.0, 4.0, 2.0),
            intensity=2.0,
            output_path=str(tmp_path / "scene.png"),
            quiet=True,
        )
        assert output.exists()

    def test_main_returns_zero(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the command-line entry point."""
        from examples.render_scene import main

        output = tmp_path / "cli.png"
        monkeypatch.setattr(
            "sys.argv",
            ["render_scene", "--width", "8", "--height", "6", "--output", str(output), "--quiet"],
        )
        assert main() == 0
        assert output.exists()

    def test_main_reports_errors(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that invalid dimensions produce an error exit code."""
        from examples.render_scene import main

        monkeypatch.setattr(
            "sys.argv",
            ["render_scene", "--width", "0", "--output", str(tmp_path / "x.png"), "--quiet"],
        )
        assert main() == 1
        assert "Error:" in capsys.readouterr().err
