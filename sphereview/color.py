"""Colour values and their plain-text pixel format."""

from __future__ import annotations

from typing import TextIO

from .vec3 import Vec3

Color = Vec3


def format_color(pixel_color: Color) -> str:
    """Return the colour's components in [0, 1] as ``"r g b"`` bytes in [0, 255]."""
    return " ".join(str(int(255.999 * component)) for component in pixel_color)


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel line to ``out``."""
    out.write(format_color(pixel_color) + "\n")