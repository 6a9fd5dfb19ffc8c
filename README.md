# sphereview

A small ray tracer that draws a shaded sphere against a sky gradient and
lets you fly around it in a pygame window. Each time the camera turns or
moves, a ray is sent through every pixel again and the new image is shown.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
sphereview
```

Options:

| Option             | Default | Meaning                                   |
|--------------------|---------|-------------------------------------------|
| `--width N`        | 1280    | image and window width in pixels          |
| `--height N`       | 720     | image and window height in pixels         |
| `--speed X`        | 1.0     | camera speed, between 0.1 and 2.0         |
| `--sensitivity X`  | 0.2     | mouse sensitivity, between 0.1 and 2.0    |
| `--no-invert-y`    |         | do not invert the vertical mouse axis     |

Width and height must be positive; speed and sensitivity outside their
range are rejected. Run `sphereview --help` for the same list.

### Controls

| Input                   | Action                                     |
|-------------------------|--------------------------------------------|
| Hold right mouse button | Look around (yaw and pitch)                |
| `W` / `S`               | Move forward / backward                    |
| `A` / `D`               | Strafe left / right                        |
| `Space`                 | Move against the camera's up axis          |
| `Left Ctrl`             | Move along the camera's up axis            |
| `-` / `=`               | Lower / raise camera speed by 0.1          |
| `[` / `]`               | Lower / raise mouse sensitivity by 0.1     |
| `I`                     | Toggle Y-axis inversion                    |
| `R`                     | Render the image again                     |
| `Esc` or closing window | Quit                                       |

Pitch stays between -89° and 89°. Speed and sensitivity stay between 0.1
and 2.0. An overlay in the window shows the frame time, camera position,
yaw, pitch and the current settings.

Rendering is done in pure Python, so large windows redraw slowly; a
smaller `--width` and `--height` keep the viewer responsive.

## Using the library

```python
from sphereview.camera import Camera
from sphereview.scene import render
from sphereview.vec3 import Vec3

camera = Camera(320, 180, Vec3(0, 0, 0), 1.0)
camera.rotate(10.0, 0.0)
pixels = render(camera, 320, 180)  # packed RGB bytes, top row first
```

The building blocks sit in their own modules:

- `sphereview.vec3`: the immutable `Vec3` (with `length` and
  `length_squared`), `dot`, `cross` and `unit_vector`
- `sphereview.ray`: `Ray` with `origin`, `direction` and `Ray.at(t)`
- `sphereview.color`: `format_color` and `write_color`, which turn a colour
  with components in [0, 1] into an `"r g b"` line of byte values
- `sphereview.camera`: `Camera` with `get_ray`, `move` and `rotate`, and the
  read-only properties `forward`, `right`, `up`, `yaw`, `pitch` and
  `viewport_width`; `position` can also be set, which moves only the ray
  origin and leaves the viewport in place
- `sphereview.scene`: `hit_sphere`, `ray_color`, `to_byte` and `render`
- `sphereview.app`: the viewer, with `parse_args`, `main`, the `Controls`
  enum of movement directions, `movement_offset` (camera offset for the
  controls held in one frame) and `look_delta` (mouse movement to yaw and
  pitch changes)

## What it does not do

The scene is fixed: one sphere of radius 0.5 at (0, 0, -1) with its
surface coloured by its normal. There are no materials, lights, shadows,
reflections or anti-aliasing, and the viewer does not save images to disk.