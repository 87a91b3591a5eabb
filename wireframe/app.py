"""The interactive viewer: a window showing the map, driven by the keyboard."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Any

from wireframe.keys import (
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Action,
    describe,
    handle_key,
)
from wireframe.mapfile import HeightMap, MapError, load_map
from wireframe.raster import Canvas, draw_wireframe
from wireframe.support.output import printf
from wireframe.view import HEIGHT, WIDTH, View

TITLE = "wireframe"
REPEAT_DELAY_MS = 500
REPEAT_INTERVAL_MS = 30


def _keysym(pygame: Any, key: int) -> int:
    table = {
        pygame.K_UP: KEY_UP,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
        pygame.K_ESCAPE: KEY_ESCAPE,
    }
    return table.get(key, key)


def _present(pygame: Any, screen: Any, canvas: Canvas, heightmap: HeightMap, view: View) -> None:
    canvas.clear()
    draw_wireframe(canvas, heightmap, view)
    data = canvas.to_bytes()
    rgb = bytearray(canvas.width * canvas.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    surface = pygame.image.frombuffer(bytes(rgb), (canvas.width, canvas.height), "RGB")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(path: str | os.PathLike[str]) -> None:
    """Load the map at ``path`` and show it until the window is closed."""
    heightmap = load_map(path)
    view = View()
    view.reset(heightmap.columns, heightmap.rows)

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        pygame.key.set_repeat(REPEAT_DELAY_MS, REPEAT_INTERVAL_MS)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        canvas = Canvas(WIDTH, HEIGHT)
        _present(pygame, screen, canvas, heightmap, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            action = handle_key(_keysym(pygame, event.key), heightmap, view)
            if action is Action.QUIT:
                return
            if action is Action.DESCRIBE:
                sys.stdout.write(describe(heightmap, view))
                sys.stdout.flush()
            _present(pygame, screen, canvas, heightmap, view)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: one argument, the map file to show."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error: Wrong number of parameter")
        return 0
    try:
        run(args[0])
    except MapError as exc:
        printf("%s", str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())