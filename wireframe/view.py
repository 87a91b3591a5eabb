"""The view of a height map: rotation angles, offset, scale and projection mode."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

HEIGHT = 1600
WIDTH = 2560
PI = 3.1415926

START_TX = 35
START_TY = -15
ROTATION_STEP = 5
TRANSLATION_STEP = 15
PARALLEL_STEP = 90
SCALE_STEP = 2
MAX_SCALE = 150
RAND_LIMIT = 2**31


class Projection(IntEnum):
    """How key presses turn the model."""

    ISOMETRIC = 1
    PARALLEL = 2


def _sign_step(sign: int, step: int) -> int:
    if sign < 0:
        return -step
    if sign > 0:
        return step
    return 0


@dataclass
class View:
    """Angles in degrees, screen offset in pixels and scale in pixels per cell."""

    tx: int = 0
    ty: int = 0
    tz: int = 0
    trans_z: int = 0
    ax: int = 0
    ay: int = 0
    scale: int = 0
    proj: Projection = Projection.ISOMETRIC

    def reset(self, columns: int, rows: int) -> None:
        """Return to the starting view, centred for a map of this size."""
        if columns <= 0 or rows <= 0:
            raise ValueError(f"map size must be positive, got {columns}x{rows}")
        self.tx = START_TX
        self.ty = START_TY
        self.tz = 0
        self.trans_z = 0
        self.scale = (HEIGHT // rows + WIDTH // columns) // 4
        self.ay = HEIGHT // 2 - (rows // 2 * self.scale)
        self.ax = WIDTH // 2 - (columns // 2 * self.scale)
        self.proj = Projection.ISOMETRIC

    def translate(self, direction: int) -> None:
        """Move right (1), down (2), left (-1) or up (-2); other values do nothing."""
        if direction == 1:
            self.ax += TRANSLATION_STEP
        elif direction == 2:
            self.ay += TRANSLATION_STEP
        elif direction == -1:
            self.ax -= TRANSLATION_STEP
        elif direction == -2:
            self.ay -= TRANSLATION_STEP

    def rotate_x(self, sign: int) -> None:
        """Turn about the x axis by a small step; negative sign turns back."""
        self.tx += -ROTATION_STEP if sign < 0 else ROTATION_STEP

    def rotate_y(self, sign: int) -> None:
        """Turn about the y axis by a small step; negative sign turns back."""
        self.ty += -ROTATION_STEP if sign < 0 else ROTATION_STEP

    def rotate_z(self, sign: int) -> None:
        """Turn about the z axis by a small step; negative sign turns back."""
        self.tz += -ROTATION_STEP if sign < 0 else ROTATION_STEP

    def _snap_to_right_angles(self) -> None:
        self.tx, self.ty, self.tz = (
            angle if angle % PARALLEL_STEP == 0 else 0
            for angle in (self.tx, self.ty, self.tz)
        )

    def rotate_x_parallel(self, sign: int) -> None:
        """Zero any angle off a right angle, then turn a quarter about x."""
        self._snap_to_right_angles()
        self.tx += _sign_step(sign, PARALLEL_STEP)

    def rotate_y_parallel(self, sign: int) -> None:
        """Zero any angle off a right angle, then turn a quarter about y."""
        self._snap_to_right_angles()
        self.ty += _sign_step(sign, PARALLEL_STEP)

    def rotate_z_parallel(self, sign: int) -> None:
        """Turn a quarter about z; a sign of 0 resets every angle to zero."""
        if sign == 0:
            self.tx = self.ty = self.tz = 0
        self._snap_to_right_angles()
        self.tz += _sign_step(sign, PARALLEL_STEP)

    def scale_up(self) -> None:
        """Enlarge, up to the maximum scale."""
        if self.scale < MAX_SCALE:
            self.scale += SCALE_STEP

    def scale_down(self) -> None:
        """Shrink, never below zero."""
        if self.scale >= SCALE_STEP:
            self.scale -= SCALE_STEP

    def shift_z(self, amount: float) -> None:
        """Add ``amount`` to the height offset, truncating to a whole number."""
        self.trans_z = int(self.trans_z + amount)

    def randomize(self, rng: random.Random | None = None) -> None:
        """Pick random angles and a random on-screen offset."""
        source = rng if rng is not None else random.Random()
        self.tx = source.randrange(RAND_LIMIT)
        self.ty = source.randrange(RAND_LIMIT)
        self.tz = source.randrange(RAND_LIMIT)
        self.ay = source.randrange(RAND_LIMIT) % HEIGHT
        self.ax = source.randrange(RAND_LIMIT) % WIDTH