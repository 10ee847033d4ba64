"""Ray–sphere intersection, lighting and recursive ray tracing."""

from __future__ import annotations

import math
from dataclasses import dataclass

from spheretrace.canvas import Colour
from spheretrace.scene import Scene, Sphere
from spheretrace.vector import Vector, dot, normalize

INF = 999999.0

_SHADOW_EPSILON = 0.001
_SURFACE_OFFSET = 0.01
_EXTRA_REFLECTION = 0.1


@dataclass(frozen=True)
class Hit:
    """The nearest intersection of a ray: its parameter ``t`` and the sphere hit."""

    t: float
    sphere: Sphere


def intersect_ray_sphere(origin: Vector, direction: Vector, sphere: Sphere) -> tuple[float, float]:
    """Return both ray parameters where the ray meets the sphere, or (INF, INF) if it misses."""
    co = origin - sphere.centre
    a = dot(direction, direction)
    b = 2 * dot(co, direction)
    c = dot(co, co) - sphere.radius * sphere.radius

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return INF, INF
    root = math.sqrt(discriminant)
    return (-b + root) / (2 * a), (-b - root) / (2 * a)


def reflect_ray(ray: Vector, normal: Vector) -> Vector:
    """Mirror ``ray`` about ``normal``."""
    return normal * 2 * dot(normal, ray) - ray


def refract_ray(incident: Vector, normal: Vector, n1: float, n2: float) -> Vector | None:
    """Bend ``incident`` through a surface; return None on total internal reflection."""
    cos_theta = -dot(incident, normal)
    eta = n1 / n2
    k = 1 - eta**2 * (1 - cos_theta**2)
    if k < 0:
        return None
    return incident * eta + normal * (eta * cos_theta - math.sqrt(k))


def fresnel_schlick(cos_theta: float, f0: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    return f0 + (1 - f0) * (1 - cos_theta) ** 5


def closest_intersection(
    scene: Scene, origin: Vector, ray: Vector, start: float, end: float
) -> Hit | None:
    """Find the nearest sphere hit with ``start < t < end``, or None."""
    best: Hit | None = None
    for sphere in scene.spheres:
        for t in intersect_ray_sphere(origin, ray, sphere):
            if start < t < end and (best is None or t < best.t):
                best = Hit(t, sphere)
    return best


def _light_contribution(
    scene: Scene,
    point: Vector,
    normal: Vector,
    view: Vector,
    specular_exponent: float,
    light_ray: Vector,
    intensity: float,
    shadow_end: float,
) -> float:
    if closest_intersection(scene, point, light_ray, _SHADOW_EPSILON, shadow_end) is not None:
        return 0.0

    total = 0.0
    n_dot_l = dot(normal, light_ray)
    if n_dot_l > 0:
        total += intensity * n_dot_l / (normal.magnitude * light_ray.magnitude)

    if specular_exponent != -1:
        reflection = normal * 2 * n_dot_l - light_ray
        r_dot_v = dot(reflection, view)
        if r_dot_v > 0:
            ratio = r_dot_v / (reflection.magnitude * view.magnitude)
            total += intensity * ratio**specular_exponent
    return total


def compute_light_intensity(
    scene: Scene, point: Vector, normal: Vector, view: Vector, specular_exponent: float
) -> float:
    """Total light reaching ``point``: ambient plus unshadowed diffuse and specular terms."""
    intensity = scene.ambient_light
    for light in scene.point_lights:
        # The light sits at t = 1 along the ray from the point towards it.
        intensity += _light_contribution(
            scene, point, normal, view, specular_exponent,
            light.position - point, light.intensity, 1.0,
        )
    for light in scene.directional_lights:
        intensity += _light_contribution(
            scene, point, normal, view, specular_exponent,
            light.direction, light.intensity, INF,
        )
    return intensity


def trace_ray(
    scene: Scene,
    origin: Vector,
    ray: Vector,
    start: float,
    end: float,
    recursion_depth: int,
) -> Colour:
    """Colour seen along ``ray``; fully transparent black when nothing is hit."""
    hit = closest_intersection(scene, origin, ray, start, end)
    if hit is None:
        return Colour(0, 0, 0, 0)

    sphere = hit.sphere
    point = origin + ray * hit.t
    normal = normalize(point - sphere.centre)

    local = sphere.colour * compute_light_intensity(
        scene, point, normal, -ray, sphere.specularity
    )
    if recursion_depth <= 0:
        return local
    depth = recursion_depth - 1

    def follow(direction: Vector, offset: float = _SURFACE_OFFSET, start_dist: float = _SHADOW_EPSILON) -> Colour:
        return trace_ray(scene, point + direction * offset, direction, start_dist, INF, depth)

    if sphere.refractive_index > 0 and sphere.transparency < 1:
        n1, n2 = 1.0, sphere.refractive_index
        facing = normal
        view = -ray
        if dot(view, facing) < 0:
            # The ray leaves the sphere from the inside.
            n1, n2 = n2, n1
            facing = -facing
        fresnel = fresnel_schlick(dot(view, facing), ((n1 - n2) / (n1 + n2)) ** 2)

        refracted = refract_ray(ray, facing, n1, n2)
        if refracted is not None:
            refracted_colour = follow(refracted)
            reflected_colour = follow(reflect_ray(ray, facing))
            blended = reflected_colour * fresnel + refracted_colour * (1 - fresnel)
            local = local * sphere.transparency + blended * (1 - sphere.transparency)

            extra = follow(reflect_ray(-ray, normal), offset=0.0, start_dist=0.05)
            local = local * (1 - _EXTRA_REFLECTION) + extra * _EXTRA_REFLECTION
        else:
            reflected_colour = follow(reflect_ray(ray, facing))
            local = local * sphere.transparency + reflected_colour * (1 - sphere.transparency)
    elif sphere.refractive_index == 0 and sphere.transparency < 1:
        transmitted = follow(ray, offset=0.0)
        local = local * sphere.transparency + transmitted * (1 - sphere.transparency)

    if sphere.reflectivity > 0:
        cos_theta = max(0.0, dot(-ray, normal))
        fresnel = fresnel_schlick(cos_theta, sphere.reflectivity)
        reflected_colour = follow(reflect_ray(-ray, normal))
        local = local * (1 - fresnel) + reflected_colour * fresnel

    return local