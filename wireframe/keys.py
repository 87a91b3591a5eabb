"""Keyboard handling: what each key does to the view."""

from __future__ import annotations

from enum import Enum

from wireframe.mapfile import HeightMap
from wireframe.support.output import format_printf
from wireframe.view import Projection, View

KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_ESCAPE = 65307

_ARROWS = {KEY_UP: -2, KEY_DOWN: 2, KEY_LEFT: -1, KEY_RIGHT: 1}


class Action(Enum):
    """What the caller should do after a key press."""

    REDRAW = "redraw"
    DESCRIBE = "describe"
    QUIT = "quit"


def _code(key: int | str) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single key character, got {key!r}")
        return ord(key)
    return key


def _isometric(key: int, heightmap: HeightMap, view: View) -> None:
    if key in _ARROWS:
        view.translate(_ARROWS[key])
    elif key == ord("w"):
        view.rotate_x(0)
    elif key == ord("s"):
        view.rotate_x(-1)
    elif key == ord("a"):
        view.rotate_y(-1)
    elif key == ord("d"):
        view.rotate_y(0)
    elif key == ord("z"):
        view.rotate_z(0)
    elif key == ord("m"):
        view.rotate_z(-1)
    elif key == ord("r"):
        view.reset(heightmap.columns, heightmap.rows)


def _parallel(key: int, view: View) -> None:
    if key in _ARROWS:
        view.translate(_ARROWS[key])
    elif key == ord("w"):
        view.rotate_x_parallel(1)
    elif key == ord("s"):
        view.rotate_x_parallel(-1)
    elif key == ord("a"):
        view.rotate_y_parallel(-1)
    elif key == ord("d"):
        view.rotate_y_parallel(1)
    elif key == ord("z"):
        view.rotate_z_parallel(1)
    elif key == ord("m"):
        view.rotate_z_parallel(-1)
    elif key == ord("r"):
        view.rotate_z_parallel(0)
    elif key == ord("l"):
        view.randomize()


def handle_key(key: int | str, heightmap: HeightMap, view: View) -> Action:
    """Apply a key press to the view and say what should follow.

    Keys are X11 key symbols; letters and digits are their ASCII codes.
    """
    code = _code(key)
    action = Action.REDRAW
    if code == ord("p"):
        view.proj = Projection.PARALLEL
    elif code == ord("o"):
        view.proj = Projection.ISOMETRIC
    elif code == KEY_ESCAPE:
        return Action.QUIT
    elif code == ord("j"):
        view.scale_up()
    elif code == ord("k"):
        view.scale_down()
    elif code == ord("q"):
        action = Action.DESCRIBE
    elif code == ord("8"):
        view.shift_z(1)
    elif code == ord("9"):
        view.shift_z(-1)
    if view.proj == Projection.ISOMETRIC:
        _isometric(code, heightmap, view)
    else:
        _parallel(code, view)
    return action


def describe(heightmap: HeightMap, view: View) -> str:
    """A report of the map and the current view settings."""
    parts = [
        format_printf("____________________VALUES___________________________\n\n\n"),
        format_printf('Map:\t\t\t"%s"\n\n', heightmap.path),
        format_printf("X axis rotation:\t [%i]\nY axis rotation:\t [%i]\n", view.tx, view.ty),
        format_printf("z axis rotation:\t [%i]\n\n", view.tz),
        format_printf("Scale:\t\t\t [%i]\n\n", view.scale),
        format_printf(
            "Translation on X:\t [%i]\nTranslation on Y:\t [%i]\n\n", view.ax, view.ay
        ),
        format_printf("Image Width:\t\t [%i]\n", heightmap.columns),
        format_printf("Image Height:\t\t [%i]\n\n", heightmap.rows),
        format_printf("Z Transformation: \t [%i]\n\n", view.trans_z),
        format_printf("______________________________________________________\n\n"),
    ]
    return "".join(parts)