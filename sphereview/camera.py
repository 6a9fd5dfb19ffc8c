"""A yaw/pitch camera that produces one ray per image pixel."""

from __future__ import annotations

import math

from .ray import Ray
from .vec3 import Point3, Vec3, cross, unit_vector

_PITCH_LIMIT = 89.0


class Camera:
    """Pinhole camera looking down -Z by default, steered by yaw and pitch in degrees."""

    def __init__(
        self,
        image_width: int,
        image_height: int,
        position: Point3 = Point3(0, 0, 0),
        focal_length: float = 1.0,
    ) -> None:
        self.image_width = image_width
        self.image_height = image_height
        self.focal_length = focal_length
        self.viewport_height = 2.0
        self._center = position
        self._yaw = -90.0
        self._pitch = 0.0
        self._world_up = Vec3(0, 1, 0)
        self._front = Vec3(0, 0, -1)
        self._update_vectors()

    @property
    def position(self) -> Point3:
        return self._center

    @position.setter
    def position(self, value: Point3) -> None:
        # Only the ray origin moves; the viewport stays where it was.
        self._center = value

    @property
    def forward(self) -> Vec3:
        return self._front

    @property
    def right(self) -> Vec3:
        return self._right

    @property
    def up(self) -> Vec3:
        return self._up

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    def get_ray(self, pixel_x: int, pixel_y: int) -> Ray:
        """Return the ray from the camera centre through the centre of a pixel."""
        pixel_center = (
            self._pixel00 + pixel_x * self._pixel_delta_u + pixel_y * self._pixel_delta_v
        )
        return Ray(self._center, pixel_center - self._center)

    def move(self, offset: Vec3) -> None:
        """Translate the camera by ``offset``."""
        self._center = self._center + offset
        self._update_vectors()

    def rotate(self, delta_yaw: float, delta_pitch: float) -> None:
        """Turn the camera; pitch is kept within ±89 degrees."""
        self._yaw += delta_yaw
        self._pitch = min(max(self._pitch + delta_pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self._yaw)
        pitch = math.radians(self._pitch)
        self._front = unit_vector(
            Vec3(
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            )
        )
        self._right = unit_vector(cross(self._front, self._world_up))
        self._up = unit_vector(cross(self._right, self._front))

        self._viewport_width = self.viewport_height * (self.image_width / self.image_height)
        viewport_u = self._viewport_width * self._right
        viewport_v = self.viewport_height * -self._up

        self._pixel_delta_u = viewport_u / self.image_width
        self._pixel_delta_v = viewport_v / self.image_height

        viewport_center = self._center + self._front * self.focal_length
        upper_left = viewport_center - viewport_u / 2 - viewport_v / 2
        self._pixel00 = upper_left + 0.5 * (self._pixel_delta_u + self._pixel_delta_v)