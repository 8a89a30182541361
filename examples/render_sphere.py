#!/usr/bin/env python3
"""Render a single Phong-lit sphere.

This script casts one ray per pixel from a fixed eye point through a wall
behind a sphere, shades every hit with a point light, and writes the
result to a canvas. It exercises the whole kernel: transforms, ray-sphere
intersection, hit selection, normals, and lighting.

Usage:
    python -m examples.render_sphere [options]

Options:
    --size SIZE         Canvas width and height in pixels (default: 100)
    --output OUTPUT     Output file path, .png or .ppm (default: sphere.png)
    --color R G B       Sphere surface color (default: 1 0.2 1)
    --light X Y Z       Point light position (default: -10 10 -10)
    --transform NAME    Sphere transform: none, squash, shrink-rotate, shear
                        (default: none)
    --arch ARCH         Taichi backend: cpu or cuda (default: cpu). The canvas
                        stores float64, which Metal and Vulkan do not support
    --quiet             Suppress progress output

Example:
    python -m examples.render_sphere --size 200 --transform shear --output shear.png
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path

import taichi as ti

# Eye and wall placement; the wall is sized so the unit sphere fills most of it
RAY_ORIGIN = (0.0, 0.0, -5.0)
WALL_Z = 10.0
WALL_SIZE = 7.0

TRANSFORMS = ("none", "squash", "shrink-rotate", "shear")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a Phong-lit sphere.",
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
        default="sphere.png",
        help="Output file path, .png or .ppm (default: sphere.png)",
    )
    parser.add_argument(
        "--color",
        type=float,
        nargs=3,
        default=(1.0, 0.2, 1.0),
        metavar=("R", "G", "B"),
        help="Sphere surface color (default: 1 0.2 1)",
    )
    parser.add_argument(
        "--light",
        type=float,
        nargs=3,
        default=(-10.0, 10.0, -10.0),
        metavar=("X", "Y", "Z"),
        help="Point light position (default: -10 10 -10)",
    )
    parser.add_argument(
        "--transform",
        choices=TRANSFORMS,
        default="none",
        help="Sphere transform (default: none)",
    )
    parser.add_argument(
        "--arch",
        choices=("cpu", "cuda"),
        default="cpu",
        help="Taichi backend; cuda is the only GPU backend with float64 (default: cpu)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def sphere_transform(name: str):
    """Build one of the named demo transforms."""
    from raykernel.core.matrix import Matrix

    identity = Matrix.identity(4)
    if name == "squash":
        return identity.scale(1, 0.5, 1)
    if name == "shrink-rotate":
        return identity.scale(1, 0.5, 1).rotate_z(math.pi / 4)
    if name == "shear":
        return identity.scale(0.5, 1, 1).shear(1, 0, 0, 0, 0, 0)
    return identity


def render_sphere(
    size: int = 100,
    output_path: str = "sphere.png",
    color: tuple[float, float, float] = (1.0, 0.2, 1.0),
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0),
    transform: str = "none",
    quiet: bool = False,
) -> Path:
    """Render the sphere and save it to file.

    Args:
        size: Canvas width and height in pixels.
        output_path: Output file path. A .ppm suffix writes plain PPM,
            anything else writes PNG.
        color: Sphere surface color.
        light_position: World-space position of the white point light.
        transform: Name of the sphere transform, one of TRANSFORMS.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from raykernel.core.color import WHITE, Color
    from raykernel.core.ray import Ray
    from raykernel.core.tuple import point
    from raykernel.geometry.shape import intersect, material_of, normal_at
    from raykernel.geometry.sphere import Sphere
    from raykernel.materials.phong import Material
    from raykernel.preview.canvas import Canvas
    from raykernel.preview.export import save_png, save_ppm
    from raykernel.scene.light import PointLight

    if not quiet:
        print(f"Rendering sphere ({size}x{size}, transform={transform})...")

    sphere = Sphere(
        transform=sphere_transform(transform),
        material=Material(color=Color(*color)),
    )
    light = PointLight(point(*light_position), WHITE)
    canvas = Canvas(size, size)

    ray_origin = point(*RAY_ORIGIN)
    pixel_size = WALL_SIZE / size
    half = WALL_SIZE / 2
    hits = 0
    start_time = time.time()

    for y in range(size):
        # Top of the wall is +half; canvas rows grow downward
        world_y = half - pixel_size * y
        for x in range(size):
            world_x = -half + pixel_size * x
            target = point(world_x, world_y, WALL_Z)
            ray = Ray(ray_origin, (target - ray_origin).normalized())

            hit = intersect(sphere, ray).hit()
            if hit is None:
                continue
            hits += 1
            position = ray.position(hit.t)
            normal = normal_at(hit.shape, position)
            eye = -ray.direction
            canvas.write_pixel(
                x, y, material_of(hit.shape).lighting(light, position, eye, normal)
            )

        if not quiet:
            print(f"\r  Progress: {y + 1}/{size} rows", end="", flush=True)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Hit pixels: {hits}/{size * size}")
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    ti.init(arch=ti.cuda if args.arch == "cuda" else ti.cpu, default_fp=ti.f64)
    if not args.quiet:
        print(f"Using {args.arch.upper()} backend")

    try:
        render_sphere(
            size=args.size,
            output_path=args.output,
            color=tuple(args.color),
            light_position=tuple(args.light),
            transform=args.transform,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, ZeroDivisionError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
