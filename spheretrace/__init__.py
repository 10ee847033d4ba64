"""Recursive sphere ray tracer with BMP output."""

__version__ = "0.1.0"
__all__ = ["bmp", "canvas", "cli", "scene", "tracer", "vector"]