"""Scene description: camera, lights, spheres and the default showcase scene."""

from __future__ import annotations

from dataclasses import dataclass, field

from spheretrace.canvas import Colour
from spheretrace.vector import Quaternion, Vector

VIEWPORT_WIDTH = 1.5
VIEWPORT_HEIGHT = 1.0
VIEWPORT_DISTANCE = 1.0
DRAW_DISTANCE = 999999.0


class Camera:
    """A camera placed at ``position`` and turned by yaw, pitch and roll angles in degrees."""

    def __init__(
        self,
        position: Vector,
        yaw: float = 0.0,
        pitch: float = 0.0,
        roll: float = 0.0,
    ) -> None:
        self.position = position
        yaw_quat = Quaternion.from_axis_angle(yaw, Vector(0, 1, 0))
        pitch_quat = Quaternion.from_axis_angle(pitch, Vector(1, 0, 0))
        roll_quat = Quaternion.from_axis_angle(roll, Vector(0, 0, 1))
        # Rotation is applied as roll, then pitch, then yaw.
        self.orientation = yaw_quat * pitch_quat * roll_quat

    def __repr__(self) -> str:
        return f"Camera(position={self.position!r}, orientation={self.orientation!r})"


@dataclass
class PointLight:
    """A light that shines in all directions from a point."""

    colour: Colour = Colour(255, 255, 255)
    position: Vector = Vector(0, 0, 0)
    intensity: float = 1.0


@dataclass
class DirectionalLight:
    """A light arriving from infinitely far away along ``direction``."""

    colour: Colour = Colour(255, 255, 255)
    direction: Vector = Vector(0, 0, 0)
    intensity: float = 1.0


@dataclass
class Sphere:
    """A sphere and its surface material.

    ``specularity`` of -1 disables specular highlights; ``transparency`` of 1
    means fully opaque; ``refractive_index`` of 0 means transparency without
    bending of light.
    """

    centre: Vector = Vector(0, 0, 0)
    radius: float = 0.0
    colour: Colour = Colour(255, 255, 255)
    transparency: float = 1.0
    specularity: float = 500.0
    reflectivity: float = 0.5
    refractive_index: float = 1.0


@dataclass
class Scene:
    """Everything a ray can meet or be lit by."""

    spheres: list[Sphere] = field(default_factory=list)
    point_lights: list[PointLight] = field(default_factory=list)
    directional_lights: list[DirectionalLight] = field(default_factory=list)
    ambient_light: float = 0.2


def canvas_to_viewport(x: int, y: int, width: int, height: int) -> Vector:
    """Map centred canvas coordinates to the point on the viewport they look through."""
    return Vector(
        x * VIEWPORT_WIDTH / width,
        y * VIEWPORT_HEIGHT / height,
        VIEWPORT_DISTANCE,
    )


def default_scene() -> Scene:
    """Build the showcase scene: coloured glass spheres around a clear one on a yellow floor."""
    white = Colour(255, 255, 255)
    red = Colour(255, 0, 0)
    green = Colour(0, 255, 0)
    blue = Colour(0, 0, 255)

    def glass(centre: Vector, colour: Colour) -> Sphere:
        return Sphere(centre, 1.0, colour, 0.75, 500.0, 0.3, 1.5)

    spheres = [
        glass(Vector(0, -1, 3), red),
        glass(Vector(-2, 0, 4), green),
        glass(Vector(2, 0, 4), blue),
        Sphere(Vector(0, -5001, 0), 5000.0, Colour(255, 255, 0), 1.0, 1000.0, 0.5, 7.5),
        # Highly transparent and refractive, so it carries no reflectivity of its own.
        Sphere(Vector(0, 1, -1), 1.4, white, 0.01, 1000.0, 0.0, 1.5),
        glass(Vector(0, -1, -3), red),
        glass(Vector(-2, 0, -4), green),
        glass(Vector(2, 0, -4), blue),
    ]
    return Scene(
        spheres=spheres,
        point_lights=[PointLight(white, Vector(2, 1, 0), 0.6)],
        directional_lights=[DirectionalLight(white, Vector(1, 4, 4), 0.2)],
        ambient_light=0.2,
    )