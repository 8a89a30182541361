#!/usr/bin/env python3
"""Draw the twelve hour marks of a clock face.

Each mark starts as the point at twelve o'clock and is rotated into place
about the y axis, then scaled to the clock radius and moved to the middle
of the canvas, using the fluent transform methods. The clock lies in the
x-z plane and is drawn looking down the y axis.

Usage:
    python -m examples.clock [options]

Options:
    --size SIZE         Canvas width and height in pixels (default: 100)
    --output OUTPUT     Output file path, .png or .ppm (default: clock.png)
    --quiet             Suppress progress output

Example:
    python -m examples.clock --size 64 --output clock.ppm
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

import taichi as ti

HOURS = 12


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Draw the hour marks of a clock face.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=100,
        help="Canvas width and height in pixels (default: 100)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="clock.png",
        help="Output file path, .png or .ppm (default: clock.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def draw_clock(size: int = 100, output_path: str = "clock.png", quiet: bool = False) -> Path:
    """Draw the clock face and save it to file.

    Args:
        size: Canvas width and height in pixels.
        output_path: Output file path (.ppm for plain PPM, otherwise PNG).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from raykernel.core.color import WHITE
    from raykernel.core.matrix import Matrix
    from raykernel.core.tuple import point
    from raykernel.preview.canvas import Canvas
    from raykernel.preview.export import save_png, save_ppm

    canvas = Canvas(size, size)
    radius = size * 3 / 8
    twelve = point(0, 0, 1)

    for hour in range(HOURS):
        transform = (
            Matrix.identity(4)
            .rotate_y(hour * 2 * math.pi / HOURS)
            .scale(radius, 0, radius)
            .translate(size / 2, 0, size / 2)
        )
        mark = transform @ twelve
        x, y = round(mark.x), round(mark.z)
        canvas.write_pixel(x, y, WHITE)
        if not quiet:
            print(f"  {hour:2d} o'clock -> ({x}, {y})")

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    ti.init(arch=ti.cpu, default_fp=ti.f64)

    try:
        draw_clock(size=args.size, output_path=args.output, quiet=args.quiet)
        return 0
    except (ValueError, IndexError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
