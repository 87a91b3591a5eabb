import random

import pytest

from wireframe.view import (
    HEIGHT,
    MAX_SCALE,
    WIDTH,
    Projection,
    View,
)


def make_view(columns=1, rows=1):
    view = View()
    view.reset(columns, rows)
    return view


def test_reset_starting_angles():
    view = make_view(10, 10)
    assert (view.tx, view.ty, view.tz) == (35, -15, 0)
    assert view.trans_z == 0
    assert view.proj is Projection.ISOMETRIC


def test_reset_single_cell_is_centred():
    view = make_view(1, 1)
    assert view.scale == 1040
    assert view.ax == WIDTH // 2
    assert view.ay == HEIGHT // 2


def test_larger_map_gets_smaller_scale():
    assert make_view(100, 100).scale < make_view(10, 10).scale


@pytest.mark.parametrize("columns, rows", [(0, 3), (3, 0), (-1, 2)])
def test_reset_rejects_empty_map(columns, rows):
    with pytest.raises(ValueError):
        View().reset(columns, rows)


@pytest.mark.parametrize("direction, axis, delta", [(1, "ax", 15), (-1, "ax", -15), (2, "ay", 15), (-2, "ay", -15)])
def test_translate(direction, axis, delta):
    view = make_view()
    before = getattr(view, axis)
    view.translate(direction)
    assert getattr(view, axis) == before + delta


def test_translate_round_trip_and_unknown_direction():
    view = make_view()
    start = (view.ax, view.ay)
    view.translate(1)
    view.translate(-1)
    view.translate(7)
    assert (view.ax, view.ay) == start


def test_small_rotations():
    view = make_view()
    view.rotate_x(0)
    view.rotate_y(-1)
    view.rotate_z(1)
    assert (view.tx, view.ty, view.tz) == (35 + 5, -15 - 5, 0 + 5)


def test_parallel_rotation_snaps_other_angles():
    view = make_view()
    view.rotate_x_parallel(1)
    assert (view.tx, view.ty, view.tz) == (90, 0, 0)
    view.rotate_y_parallel(-1)
    assert (view.tx, view.ty) == (90, -90)


def test_parallel_z_zero_resets():
    view = make_view()
    view.rotate_x_parallel(1)
    view.rotate_z_parallel(0)
    assert (view.tx, view.ty, view.tz) == (0, 0, 0)


def test_parallel_zero_sign_only_snaps():
    view = make_view()
    view.rotate_x_parallel(0)
    assert view.tx == 0


def test_scale_up_is_capped():
    view = View(scale=MAX_SCALE - 2)
    view.scale_up()
    assert view.scale == MAX_SCALE
    view.scale_up()
    assert view.scale == MAX_SCALE


def test_scale_down_stops_at_zero():
    view = View(scale=2)
    view.scale_down()
    assert view.scale == 0
    one = View(scale=1)
    one.scale_down()
    assert one.scale == 1


def test_shift_z_round_trip_and_truncation():
    view = make_view()
    view.shift_z(1)
    view.shift_z(-1)
    assert view.trans_z == 0
    view.shift_z(0.5)
    assert view.trans_z == 0


def test_randomize_ranges_and_determinism():
    first = make_view()
    second = make_view()
    first.randomize(random.Random(42))
    second.randomize(random.Random(42))
    assert first == second
    assert 0 <= first.ay < HEIGHT
    assert 0 <= first.ax < WIDTH
    assert all(0 <= angle < 2**31 for angle in (first.tx, first.ty, first.tz))