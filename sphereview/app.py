"""Interactive viewer: fly the camera around the sphere in a pygame window."""

from __future__ import annotations

import argparse
import enum
import time
from collections.abc import Collection, Sequence

import pygame

from .camera import Camera
from .scene import render
from .vec3 import Point3, Vec3

_SETTING_MIN = 0.1
_SETTING_MAX = 2.0
_SETTING_STEP = 0.1


class Controls(enum.Enum):
    """Movement controls and the camera axis each one follows."""

    LEFT = "left"
    RIGHT = "right"
    FORWARD = "forward"
    BACKWARD = "backward"
    LOWER = "lower"
    RAISE = "raise"


_KEY_BINDINGS = {
    pygame.K_a: Controls.LEFT,
    pygame.K_d: Controls.RIGHT,
    pygame.K_w: Controls.FORWARD,
    pygame.K_s: Controls.BACKWARD,
    pygame.K_SPACE: Controls.LOWER,
    pygame.K_LCTRL: Controls.RAISE,
}


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _setting(text: str) -> float:
    value = float(text)
    if not _SETTING_MIN <= value <= _SETTING_MAX:
        raise argparse.ArgumentTypeError(
            f"must be between {_SETTING_MIN} and {_SETTING_MAX}, got {value}"
        )
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the viewer's command-line options."""
    parser = argparse.ArgumentParser(prog="sphereview", description="Ray-traced sphere viewer.")
    parser.add_argument("--width", type=_positive_int, default=1280, help="image width in pixels")
    parser.add_argument("--height", type=_positive_int, default=720, help="image height in pixels")
    parser.add_argument("--speed", type=_setting, default=1.0, help="camera speed (0.1-2.0)")
    parser.add_argument(
        "--sensitivity", type=_setting, default=0.2, help="mouse sensitivity (0.1-2.0)"
    )
    parser.add_argument(
        "--no-invert-y",
        dest="invert_y",
        action="store_false",
        help="do not invert the vertical mouse axis",
    )
    return parser.parse_args(argv)


def movement_offset(
    camera: Camera, pressed: Collection[Controls], speed: float, delta_time: float
) -> Vec3:
    """Return how far the camera moves this frame for the controls held down."""
    step = speed * delta_time
    directions = {
        Controls.LEFT: -camera.right,
        Controls.RIGHT: camera.right,
        Controls.FORWARD: camera.forward,
        Controls.BACKWARD: -camera.forward,
        Controls.LOWER: -camera.up,
        Controls.RAISE: camera.up,
    }
    offset = Vec3(0, 0, 0)
    for control in Controls:
        if control in pressed:
            offset = offset + directions[control] * step
    return offset


def look_delta(
    offset_x: float, offset_y: float, sensitivity: float, invert_y: bool
) -> tuple[float, float]:
    """Turn a mouse movement into (yaw, pitch) changes in degrees."""
    delta_yaw = offset_x * sensitivity
    delta_pitch = (offset_y if invert_y else -offset_y) * sensitivity
    return delta_yaw, delta_pitch


def _adjust(value: float, step: float) -> float:
    return round(min(max(value + step, _SETTING_MIN), _SETTING_MAX), 2)


def _frame_surface(camera: Camera, width: int, height: int) -> pygame.Surface:
    return pygame.image.frombuffer(render(camera, width, height), (width, height), "RGB")


def _draw_overlay(
    screen: pygame.Surface,
    font: pygame.font.Font,
    camera: Camera,
    delta_time: float,
    speed: float,
    sensitivity: float,
    invert_y: bool,
) -> None:
    pos = camera.position
    lines = [
        f"delta_time: {delta_time:.4f} s",
        f"camera: [{pos.x:.2f}, {pos.y:.2f}, {pos.z:.2f}]",
        f"yaw: {camera.yaw:.1f}°, pitch: {camera.pitch:.1f}°",
        f"camera speed: {speed:.1f}  (-/=)",
        f"sensitivity: {sensitivity:.1f}  ([/])",
        f"invert Y-axis: {'on' if invert_y else 'off'}  (I)",
        "R: reload   right mouse: look   WASD/Space/Ctrl: move",
    ]
    y = 8
    for line in lines:
        text = font.render(line, True, (235, 235, 235), (25, 25, 25))
        screen.blit(text, (8, y))
        y += text.get_height() + 2


def main(argv: Sequence[str] | None = None) -> int:
    """Open the viewer window and run until it is closed."""
    args = parse_args(argv)
    width, height = args.width, args.height
    speed, sensitivity, invert_y = args.speed, args.sensitivity, args.invert_y

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("RayTracer")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()

        camera = Camera(width, height, Point3(0, 0, 0), 1.0)
        frame = _frame_surface(camera, width, height)

        looking = False
        delta_time = 0.0
        last_time = time.perf_counter()
        running = True
        while running:
            now = time.perf_counter()
            delta_time = now - last_time
            last_time = now

            reload = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        reload = True
                    elif event.key == pygame.K_EQUALS:
                        speed = _adjust(speed, _SETTING_STEP)
                    elif event.key == pygame.K_MINUS:
                        speed = _adjust(speed, -_SETTING_STEP)
                    elif event.key == pygame.K_RIGHTBRACKET:
                        sensitivity = _adjust(sensitivity, _SETTING_STEP)
                    elif event.key == pygame.K_LEFTBRACKET:
                        sensitivity = _adjust(sensitivity, -_SETTING_STEP)
                    elif event.key == pygame.K_i:
                        invert_y = not invert_y
            if not running:
                break

            updated = False
            if pygame.mouse.get_pressed()[2]:
                if not looking:
                    looking = True
                    pygame.mouse.get_rel()
                    pygame.mouse.set_visible(False)
                    pygame.event.set_grab(True)
                else:
                    dx, dy = pygame.mouse.get_rel()
                    if dx or dy:
                        camera.rotate(*look_delta(dx, dy, sensitivity, invert_y))
                        updated = True
            elif looking:
                looking = False
                pygame.mouse.set_visible(True)
                pygame.event.set_grab(False)

            keys = pygame.key.get_pressed()
            pressed = {control for key, control in _KEY_BINDINGS.items() if keys[key]}
            offset = movement_offset(camera, pressed, speed, delta_time)
            if offset.length_squared() > 0:
                camera.move(offset)
                updated = True

            if updated or reload:
                frame = _frame_surface(camera, width, height)

            screen.fill((25, 25, 25))
            screen.blit(frame, (0, 0))
            _draw_overlay(screen, font, camera, delta_time, speed, sensitivity, invert_y)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0