# spheretrace

A small recursive ray tracer. A scene is made of spheres lit by point lights and directional lights. Spheres can be glossy, reflective, transparent and refractive. Shading uses ambient light, Lambertian diffuse light, Phong highlights and shadows. Reflection and refraction are blended with the Schlick approximation of the Fresnel term. The result is written as an uncompressed 24-bit BMP file.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
spheretrace
```

This renders the built-in scene at 1080×720 and writes `renders/output.bmp`. Progress and the render time in milliseconds are printed to the console. The scene contains:

- six coloured glass spheres,
- a large, nearly clear refractive sphere between the camera and the scene,
- a huge yellow sphere that acts as the ground.

Options:

- `--width`, `--height`: image size in pixels. The defaults are 1080 and 720, and both must be positive.
- `--depth`: recursion depth for reflection and refraction rays. The default is 4.
- `--output`: file name of the image. The default is `output.bmp`.
- `--directory`: directory the image is written to. The default is `renders`, and the directory is created if it does not exist.

Rendering is done in pure Python. A full-size image takes a long time, so use smaller sizes to try things out:

```
spheretrace --width 160 --height 120 --depth 2
```

## Library use

```python
from spheretrace.scene import Camera, default_scene
from spheretrace.vector import Vector
from spheretrace.cli import render
from spheretrace.bmp import save_as_bmp

scene = default_scene()
camera = Camera(Vector(0, 1, -6), 0, 0, 0)
canvas = render(scene, camera, 320, 240, 4)
save_as_bmp(canvas.pixels, 320, 240, "small.bmp", "renders")
```

Modules:

- `spheretrace.vector`: `Vector` (immutable, with `+`, `-`, `*`, `/`, unary `-` and a `magnitude` property), `normalize`, `dot`, and `Quaternion` with `from_axis_angle` (angles in degrees), `rotate`, `conjugate` and `*`.
- `spheretrace.canvas`: `Colour` and `Canvas`.
  - `Colour` is an RGBA colour. Each channel is clamped to 0–255 and truncated to an integer. Colours can be added or subtracted. They can be multiplied by another colour or by a number.
  - `Canvas` is a grid of pixels. `place_pixel(colour, x, y)` takes coordinates measured from the centre of the canvas, with y growing upward, and alpha-blends the colour over the pixel that is already there. Pixels that fall outside the canvas are ignored.
- `spheretrace.scene`: `Camera`, `PointLight`, `DirectionalLight`, `Sphere`, `Scene`, `canvas_to_viewport` and `default_scene`.
  - Camera angles are in degrees and are applied in the order roll, pitch, yaw.
  - On a `Sphere`, `transparency` of 1 means opaque, and `specularity` of -1 turns highlights off. `refractive_index` of 0 makes a transparent sphere let light through without bending it.
- `spheretrace.tracer`: `trace_ray` and the functions it uses: `intersect_ray_sphere`, `closest_intersection` (which returns a `Hit` or `None`), `reflect_ray`, `refract_ray` (which returns `None` on total internal reflection), `fresnel_schlick` and `compute_light_intensity`.
- `spheretrace.bmp`: `encode_bmp` returns the bytes of a BMP file and `save_as_bmp` writes them to disk. Alpha is dropped.
- `spheretrace.cli`: `render` and the `main` entry point of the command.

## What it does not do

There is no preview window: the image is only written to a BMP file. Light colours are stored but not used in shading. Only spheres are supported, and the command always renders the built-in scene. There is no scene file format.