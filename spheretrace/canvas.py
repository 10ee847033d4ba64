"""Colours and the pixel canvas they are painted onto."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def _channel(value: float) -> int:
    """Clamp a channel value into 0..255 and truncate it to an integer."""
    if isinstance(value, float) and math.isnan(value):
        return 0
    return int(min(max(value, 0), 255))


@dataclass(frozen=True)
class Colour:
    """An RGBA colour whose channels are clamped to 0..255."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, _channel(getattr(self, name)))

    def __add__(self, other: Colour) -> Colour:
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Colour) -> Colour:
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Colour | float) -> Colour:
        if isinstance(other, Colour):
            return Colour(
                self.red * other.red // 255,
                self.green * other.green // 255,
                self.blue * other.blue // 255,
            )
        factor = float(other)
        return Colour(self.red * factor, self.green * factor, self.blue * factor)


@dataclass
class Canvas:
    """A row-major grid of colours addressed with the origin at its centre."""

    width: int
    height: int
    pixels: list[Colour] = field(init=False)

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [Colour() for _ in range(width * height)]

    def place_pixel(self, colour: Colour, x: int, y: int) -> None:
        """Blend ``colour`` over the pixel at centred coordinates (x, y); y grows upward."""
        column = self.width // 2 + x
        row = self.height // 2 - y
        if not (0 <= column < self.width and 0 <= row < self.height):
            return
        index = row * self.width + column
        old = self.pixels[index]
        factor = colour.alpha / 255
        keep = 1 - factor
        self.pixels[index] = Colour(
            old.red * keep + colour.red * factor,
            old.green * keep + colour.green * factor,
            old.blue * keep + colour.blue * factor,
        )