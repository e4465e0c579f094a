#!/usr/bin/env python3
"""Render the demo scene.

This script renders the demo scene (four spheres, a floor and a back wall
lit by one point light) and saves the result as a PNG. The light can be
moved and dimmed from the command line, the same controls the interactive
version exposes as sliders.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH           Image width in pixels (default: 400)
    --height HEIGHT         Image height in pixels (default: 400)
    --light-x X             Light x position (default: 2.0)
    --light-y Y             Light y position (default: 5.0)
    --light-z Z             Light z position (default: 2.0)
    --intensity INTENSITY   Light intensity (default: 1.5)
    --backend {python,taichi}
                            Renderer backend (default: python)
    --output OUTPUT         Output file path (default: scene.png)
    --quiet                 Suppress progress output

Example:
    python -m examples.render_scene --width 200 --height 200 --light-x -3 --intensity 2
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=400,
        help="Image height in pixels (default: 400)",
    )
    parser.add_argument("--light-x", type=float, default=2.0, help="Light x position (default: 2.0)")
    parser.add_argument("--light-y", type=float, default=5.0, help="Light y position (default: 5.0)")
    parser.add_argument("--light-z", type=float, default=2.0, help="Light z position (default: 2.0)")
    parser.add_argument(
        "--intensity",
        type=float,
        default=1.5,
        help="Light intensity (default: 1.5)",
    )
    parser.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default="python",
        help="Renderer backend (default: python)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file path (default: scene.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    width: int = 400,
    height: int = 400,
    light_position: tuple[float, float, float] = (2.0, 5.0, 2.0),
    intensity: float = 1.5,
    backend: str = "python",
    output_path: str = "scene.png",
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        light_position: Light position (x, y, z).
        intensity: Light intensity.
        backend: "python" for the reference renderer, "taichi" for the
            compiled backend (Taichi must already be initialized).
        output_path: Output file path (PNG).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from src.shadowray.core.renderer import Renderer
    from src.shadowray.preview.export import save_png
    from src.shadowray.scene.demo import LightSettings, create_demo_scene, format_light_position

    if not quiet:
        print(f"Creating demo scene ({width}x{height})...")

    scene, light = create_demo_scene()
    settings = LightSettings(
        x=light_position[0],
        y=light_position[1],
        z=light_position[2],
        intensity=intensity,
    )
    settings.apply(light)

    if not quiet:
        print(f"  Objects: {scene.object_count}")
        print(f"  Light: {format_light_position(light)} intensity {light.intensity:.1f}")

    start_time = time.time()

    if backend == "taichi":
        # Lazy import: Taichi fields are allocated on import
        from src.shadowray.core.integrator import KernelRenderer

        if not quiet:
            print("Rendering with Taichi backend...")
        buffer = KernelRenderer(scene).render(width, height)
    else:

        def progress_callback(current: int, target: int) -> None:
            if not quiet:
                elapsed = time.time() - start_time
                progress_pct = (current / target) * 100 if target > 0 else 0
                print(
                    f"\r  Progress: {current}/{target} rows "
                    f"({progress_pct:.1f}%) - {elapsed:.1f}s",
                    end="",
                    flush=True,
                )

        if not quiet:
            print("Rendering...")
        buffer = Renderer(scene).render(width, height, callback=progress_callback)
        if not quiet:
            print()  # Newline after progress

    output_file = save_png(buffer, width, height, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.backend == "taichi":
        import taichi as ti

        # Double precision keeps the kernel in step with the reference renderer
        ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False)

    try:
        render_scene(
            width=args.width,
            height=args.height,
            light_position=(args.light_x, args.light_y, args.light_z),
            intensity=args.intensity,
            backend=args.backend,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
