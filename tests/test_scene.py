import math

import pytest

from sphereview.camera import Camera
from sphereview.ray import Ray
from sphereview.scene import (
    SPHERE_CENTER,
    SPHERE_RADIUS,
    hit_sphere,
    ray_color,
    render,
    to_byte,
)
from sphereview.vec3 import Point3, Vec3


def test_hit_sphere_miss_returns_minus_one():
    r = Ray(Point3(0, 0, 0), Vec3(0, 1, 0))
    assert hit_sphere(SPHERE_CENTER, SPHERE_RADIUS, r) == -1.0


def test_hit_sphere_head_on():
    r = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))
    assert hit_sphere(SPHERE_CENTER, SPHERE_RADIUS, r) == pytest.approx(0.5)


@pytest.mark.parametrize(
    "direction",
    [Vec3(0.1, 0.2, -1), Vec3(-0.2, 0.0, -1), Vec3(0.0, -0.3, -2)],
)
def test_hit_point_lies_on_sphere(direction):
    r = Ray(Point3(0, 0, 0), direction)
    t = hit_sphere(SPHERE_CENTER, SPHERE_RADIUS, r)
    assert t > 0
    assert (r.at(t) - SPHERE_CENTER).length() == pytest.approx(SPHERE_RADIUS)


def test_ray_color_straight_up_is_zenith():
    c = ray_color(Ray(Point3(0, 0, 0), Vec3(0, 1, 0)))
    assert tuple(c) == pytest.approx((0.5, 0.7, 1.0))


def test_ray_color_straight_down_is_white():
    c = ray_color(Ray(Point3(0, 0, 0), Vec3(0, -1, 0)))
    assert tuple(c) == pytest.approx((1.0, 1.0, 1.0))


def test_ray_color_sphere_components_in_unit_range():
    c = ray_color(Ray(Point3(0, 0, 0), Vec3(0.1, 0.1, -1)))
    assert all(0.0 <= component <= 1.0 for component in c)
    # The front of the sphere faces +Z, so blue dominates.
    assert c.z > c.x and c.z > c.y


@pytest.mark.parametrize("value, expected", [(0.0, 0), (-3.0, 0), (1.0, 255), (5.0, 255)])
def test_to_byte_clamps(value, expected):
    assert to_byte(value) == expected


def test_to_byte_is_monotonic():
    values = [i / 20 for i in range(21)]
    bytes_ = [to_byte(v) for v in values]
    assert bytes_ == sorted(bytes_)


def test_render_size_and_pixels():
    width, height = 9, 5
    camera = Camera(width, height)
    image = render(camera, width, height)
    assert len(image) == width * height * 3

    def pixel(i, j):
        idx = (j * width + i) * 3
        return tuple(image[idx:idx + 3])

    centre = pixel(width // 2, height // 2)
    assert centre == tuple(to_byte(c) for c in ray_color(camera.get_ray(width // 2, height // 2)))
    # Sky pixels always have full blue; higher rows are bluer (less red).
    top_left = pixel(0, 0)
    bottom_left = pixel(0, height - 1)
    assert top_left[2] == 255 and bottom_left[2] == 255
    assert top_left[0] < bottom_left[0]


def test_render_matches_ray_color_everywhere():
    width, height = 4, 3
    camera = Camera(width, height)
    image = render(camera, width, height)
    expected = bytes(
        to_byte(component)
        for j in range(height)
        for i in range(width)
        for component in ray_color(camera.get_ray(i, j))
    )
    assert image == expected
    assert not math.isnan(sum(image))