"""Command-line entry point: render a scene and save it as a BMP file."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from spheretrace.bmp import save_as_bmp
from spheretrace.canvas import Canvas
from spheretrace.scene import DRAW_DISTANCE, Camera, Scene, canvas_to_viewport, default_scene
from spheretrace.tracer import trace_ray
from spheretrace.vector import Vector

DEFAULT_WIDTH = 1080
DEFAULT_HEIGHT = 720
DEFAULT_DEPTH = 4


def render(
    scene: Scene,
    camera: Camera,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    recursion_depth: int = DEFAULT_DEPTH,
) -> Canvas:
    """Trace one ray per pixel through the camera and paint the results onto a canvas."""
    canvas = Canvas(width, height)
    for y in range(-(height // 2), height // 2):
        for x in range(-(width // 2), width // 2):
            ray = camera.orientation.rotate(canvas_to_viewport(x, y, width, height))
            colour = trace_ray(scene, camera.position, ray, 1, DRAW_DISTANCE, recursion_depth)
            canvas.place_pixel(colour, x, y)
    return canvas


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spheretrace", description="Render the sphere scene to a BMP image."
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--depth", type=int, default=DEFAULT_DEPTH, help="reflection recursion depth")
    parser.add_argument("--output", default="output.bmp", help="file name of the image")
    parser.add_argument("--directory", default="renders", help="directory the image is written to")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Render the default scene, report the time taken and write the image."""
    args = _parse_args(argv)
    print("Working...", flush=True)

    camera = Camera(Vector(0, 1, -6), 0, 0, 0)
    scene = default_scene()

    start = time.perf_counter()
    canvas = render(scene, camera, args.width, args.height, args.depth)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(f"\rRender complete. Time taken: {elapsed_ms} ms.")

    path = save_as_bmp(canvas.pixels, canvas.width, canvas.height, args.output, args.directory)
    print(f"Saved {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())