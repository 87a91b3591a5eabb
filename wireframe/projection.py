"""Turning grid points into screen coordinates."""

from __future__ import annotations

import math

from wireframe.view import PI, View


def rad(degrees: float) -> float:
    """Degrees to radians."""
    return degrees * PI / 180


def rotate_point(x: float, y: float, z: float, view: View) -> tuple[float, float, float]:
    """Rotate a point about x, then y, then z by the view's angles.

    The view's height offset is added only to points whose height is not 0.
    """
    height = z + (view.trans_z if z != 0 else 0)

    a = rad(view.tx)
    ny = y * math.cos(a) - height * math.sin(a)
    nz = y * math.sin(a) + height * math.cos(a)
    nx = x

    b = rad(view.ty)
    nx, nz = nx * math.cos(b) - nz * math.sin(b), -nx * math.sin(b) + nz * math.cos(b)

    c = rad(view.tz)
    nx, ny = nx * math.cos(c) - ny * math.sin(c), nx * math.sin(c) + ny * math.cos(c)

    return nx, ny, nz


def project(x: float, y: float, z: float, view: View) -> tuple[float, float]:
    """Screen position of a point: rotated, scaled and offset."""
    rx, ry, _ = rotate_point(x, y, z, view)
    return rx * view.scale + view.ax, ry * view.scale + view.ay