import pytest

from spheretrace.canvas import Colour
from spheretrace.scene import DirectionalLight, PointLight, Scene, Sphere
from spheretrace.tracer import (
    INF,
    Hit,
    closest_intersection,
    compute_light_intensity,
    fresnel_schlick,
    intersect_ray_sphere,
    reflect_ray,
    refract_ray,
    trace_ray,
)
from spheretrace.vector import Vector, dot, normalize


def _opaque(centre, radius=1.0, colour=Colour(255, 0, 0)):
    return Sphere(centre, radius, colour, 1.0, -1, 0.0, 1.0)


def test_intersect_hits_both_sides():
    t1, t2 = intersect_ray_sphere(Vector(0, 0, 0), Vector(0, 0, 1), _opaque(Vector(0, 0, 5)))
    assert sorted((t1, t2)) == pytest.approx([4.0, 6.0])


def test_intersect_miss_returns_inf():
    result = intersect_ray_sphere(Vector(0, 0, 0), Vector(0, 0, 1), _opaque(Vector(5, 0, 5)))
    assert result == (INF, INF)


def test_reflect_normal_onto_itself():
    normal = Vector(0, 1, 0)
    assert reflect_ray(normal, normal) == normal


def test_reflect_preserves_length():
    ray = Vector(0.3, -0.8, 0.5)
    normal = normalize(Vector(1, 2, 3))
    assert reflect_ray(ray, normal).magnitude == pytest.approx(ray.magnitude)


def test_refract_equal_indices_is_straight():
    incident = normalize(Vector(0.4, -1, 0.2))
    normal = Vector(0, 1, 0)
    refracted = refract_ray(incident, normal, 1.5, 1.5)
    assert refracted.x == pytest.approx(incident.x)
    assert refracted.y == pytest.approx(incident.y)
    assert refracted.z == pytest.approx(incident.z)


def test_refract_total_internal_reflection():
    grazing = normalize(Vector(1, -0.05, 0))
    assert refract_ray(grazing, Vector(0, 1, 0), 1.5, 1.0) is None


def test_refract_bends_towards_normal_in_denser_medium():
    incident = normalize(Vector(1, -1, 0))
    refracted = refract_ray(incident, Vector(0, 1, 0), 1.0, 1.5)
    assert refracted.magnitude == pytest.approx(1.0)
    assert abs(refracted.x) < abs(incident.x)


def test_fresnel_limits():
    assert fresnel_schlick(1.0, 0.04) == pytest.approx(0.04)
    assert fresnel_schlick(0.0, 0.04) == pytest.approx(1.0)


def test_closest_intersection_picks_nearer_sphere():
    near = _opaque(Vector(0, 0, 3))
    far = _opaque(Vector(0, 0, 10), colour=Colour(0, 255, 0))
    scene = Scene(spheres=[far, near])
    hit = closest_intersection(scene, Vector(), Vector(0, 0, 1), 1, INF)
    assert hit.sphere is near
    assert hit.t == pytest.approx(2.0)


def test_closest_intersection_respects_range():
    scene = Scene(spheres=[_opaque(Vector(0, 0, 3))])
    assert closest_intersection(scene, Vector(), Vector(0, 0, 1), 1, 1.5) is None
    assert closest_intersection(Scene(), Vector(), Vector(0, 0, 1), 1, INF) is None


def test_closest_intersection_returns_equal_hit_value():
    sphere = _opaque(Vector(0, 0, 3))
    scene = Scene(spheres=[sphere])
    hit = closest_intersection(scene, Vector(), Vector(0, 0, 1), 1, INF)
    assert hit == Hit(2.0, sphere)


def test_light_intensity_without_lights_is_ambient():
    scene = Scene(ambient_light=0.3)
    value = compute_light_intensity(scene, Vector(), Vector(0, 1, 0), Vector(0, 1, 0), 10)
    assert value == pytest.approx(0.3)


def test_light_intensity_diffuse_facing_light():
    scene = Scene(directional_lights=[DirectionalLight(direction=Vector(0, 1, 0), intensity=0.5)])
    value = compute_light_intensity(scene, Vector(), Vector(0, 1, 0), Vector(1, 0, 0), -1)
    assert value == pytest.approx(scene.ambient_light + 0.5)


def test_light_intensity_blocked_by_shadow():
    blocker = _opaque(Vector(0, 3, 0))
    scene = Scene(
        spheres=[blocker],
        point_lights=[PointLight(position=Vector(0, 6, 0), intensity=0.7)],
    )
    value = compute_light_intensity(scene, Vector(), Vector(0, 1, 0), Vector(0, 1, 0), 10)
    assert value == pytest.approx(scene.ambient_light)


def test_trace_ray_miss_is_transparent():
    assert trace_ray(Scene(), Vector(), Vector(0, 0, 1), 1, INF, 3) == Colour(0, 0, 0, 0)


def test_trace_ray_ambient_only():
    sphere = _opaque(Vector(0, 0, 5))
    scene = Scene(spheres=[sphere], ambient_light=0.2)
    colour = trace_ray(scene, Vector(), Vector(0, 0, 1), 1, INF, 0)
    assert colour == sphere.colour * scene.ambient_light


def test_trace_ray_recursion_on_opaque_matte_matches_depth_zero():
    sphere = _opaque(Vector(0, 0, 5))
    scene = Scene(spheres=[sphere])
    shallow = trace_ray(scene, Vector(), Vector(0, 0, 1), 1, INF, 0)
    deep = trace_ray(scene, Vector(), Vector(0, 0, 1), 1, INF, 3)
    assert deep == shallow


def test_trace_ray_transparent_sphere_shows_background_object():
    glass = Sphere(Vector(0, 0, 3), 1.0, Colour(0, 0, 0), 0.0, -1, 0.0, 0.0)
    behind = Sphere(Vector(0, 0, 10), 1.0, Colour(0, 255, 0), 1.0, -1, 0.0, 1.0)
    scene = Scene(spheres=[glass, behind], ambient_light=1.0)
    colour = trace_ray(scene, Vector(), Vector(0, 0, 1), 1, INF, 3)
    assert colour.green > 0
    assert colour.red == 0


def test_trace_ray_refractive_sphere_stays_in_range():
    glass = Sphere(Vector(0, 0, 4), 1.0, Colour(255, 0, 0), 0.5, 500, 0.3, 1.5)
    scene = Scene(
        spheres=[glass],
        directional_lights=[DirectionalLight(direction=Vector(1, 4, -4), intensity=0.5)],
    )
    colour = trace_ray(scene, Vector(), normalize(Vector(0.2, 0.1, 1)), 1, INF, 3)
    for channel in (colour.red, colour.green, colour.blue, colour.alpha):
        assert 0 <= channel <= 255
    assert colour.alpha == 255
    assert dot(Vector(0, 0, 1), Vector(0, 0, 1)) == 1