#!/usr/bin/env python3
"""Render one of the built-in scenarios.

Usage:
    python -m examples.render_scenario [options]

Options:
    --scenario NAME     Scenario to render (default: Three Spheres)
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 200)
    --fov DEGREES       Field of view in degrees (default: 60)
    --depth DEPTH       Reflection/refraction recursion budget
    --workers N         Number of render processes
    --output OUTPUT     Output file, .png or .ppm (default: scenario.png)
    --list              List the available scenarios and exit

Depth, workers and log level default to the WHITTED_MAX_DEPTH,
WHITTED_WORKERS and WHITTED_LOG_LEVEL environment variables.

Example:
    python -m examples.render_scenario --scenario Hexagon --width 320 --height 160
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

import taichi as ti

logger = logging.getLogger("examples.render_scenario")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a built-in scenario.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scenario",
        type=str,
        default="Three Spheres",
        help="Scenario to render (default: Three Spheres)",
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
        default=200,
        help="Image height in pixels (default: 200)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Recursion budget for reflection and refraction",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of render processes",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scenario.png",
        help="Output file, .png or .ppm (default: scenario.png)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available scenarios and exit",
    )
    return parser.parse_args(argv)


def render_scenario(
    name: str,
    width: int = 400,
    height: int = 200,
    fov_degrees: float = 60.0,
    max_depth: int | None = None,
    workers: int | None = None,
    output_path: str = "scenario.png",
) -> Path:
    """Render a scenario and save it to a file.

    Args:
        name: Registered scenario name.
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Field of view in degrees.
        max_depth: Recursion budget, or None for the configured default.
        workers: Render processes, or None for the configured default.
        output_path: Output file path; the suffix selects PNG or PPM.

    Returns:
        Path to the saved image file.

    Raises:
        KeyError: If the scenario does not exist.
        ValueError: If the output suffix is not .png or .ppm.
    """
    # Lazy imports to allow Taichi initialization first
    from src.whitted.preview.export import save_png, save_ppm
    from src.whitted.scene.scenarios import get_scenario

    output_file = Path(output_path)
    suffix = output_file.suffix.lower()
    if suffix not in (".png", ".ppm"):
        raise ValueError(f"Output must end in .png or .ppm, got {output_file.name!r}")

    scenario = get_scenario(name)
    camera = scenario.camera(width, height, math.radians(fov_degrees))
    canvas = camera.render(scenario.world, max_depth=max_depth, workers=workers)

    if suffix == ".png":
        save_png(canvas, output_file)
    else:
        save_ppm(canvas, output_file)

    logger.info("Saved to: %s", output_file.absolute())
    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    from src.whitted.config import RenderConfig
    from src.whitted.logging_config import setup_logging
    from src.whitted.scene.scenarios import list_scenarios

    args = parse_args(argv)

    try:
        config = RenderConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)
    setup_logging(config.log_level, name=logger.name)

    if args.list:
        for name in list_scenarios():
            print(name)
        return 0

    ti.init(arch=ti.cpu)

    try:
        render_scenario(
            args.scenario,
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            max_depth=args.depth,
            workers=args.workers,
            output_path=args.output,
        )
    except (KeyError, ValueError, OSError) as e:
        logger.error("Render failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
