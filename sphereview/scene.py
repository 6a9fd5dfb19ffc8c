"""The scene: a single sphere in front of a sky gradient, traced ray by ray."""

from __future__ import annotations

import math

from .camera import Camera
from .color import Color
from .ray import Ray
from .vec3 import Point3, Vec3, dot, unit_vector

SPHERE_CENTER = Point3(0, 0, -1)
SPHERE_RADIUS = 0.5

_SKY_HORIZON = Color(1.0, 1.0, 1.0)
_SKY_ZENITH = Color(0.5, 0.7, 1.0)


def hit_sphere(center: Point3, radius: float, r: Ray) -> float:
    """Return the nearest ray parameter ``t`` at which ``r`` meets the sphere, or -1.0 on a miss.

    Solving |O + tB|² = radius² with O = origin - center gives a quadratic in t;
    a negative discriminant means the ray never touches the sphere.
    """
    oc = r.origin - center
    a = r.direction.length_squared()
    b = 2 * dot(oc, r.direction)
    c = oc.length_squared() - radius * radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return -1.0
    return (-b - math.sqrt(discriminant)) / (2.0 * a)


def ray_color(r: Ray) -> Color:
    """Return the colour seen along ``r``: the sphere's normal map, or the sky."""
    t = hit_sphere(SPHERE_CENTER, SPHERE_RADIUS, r)
    if t > 0.0:
        normal = unit_vector(r.at(t) - Vec3(0, 0, -1))
        return 0.5 * Color(normal.x + 1, normal.y + 1, normal.z + 1)

    unit_direction = unit_vector(r.direction)
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * _SKY_HORIZON + a * _SKY_ZENITH


def to_byte(component: float) -> int:
    """Map a colour component to a byte, clamping it to [0, 0.999] first."""
    return int(256 * min(max(component, 0.0), 0.999))


def render(camera: Camera, image_width: int, image_height: int) -> bytes:
    """Trace every pixel and return the image as packed RGB rows, top row first."""
    buffer = bytearray()
    for j in range(image_height):
        for i in range(image_width):
            buffer.extend(map(to_byte, ray_color(camera.get_ray(i, j))))
    return bytes(buffer)