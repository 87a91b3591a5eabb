# wireframe

An interactive viewer that draws a height map as a 3D wireframe grid.
Each point of the map is joined to its right and lower neighbours, and the
whole grid can be rotated, moved, scaled and stretched from the keyboard.
The window is 2560 x 1600 pixels.

## Installing

```
pip install .
```

The window is drawn with pygame, which is installed as a dependency.

## Map files

A map is a plain text file. Each line is one row of the grid and holds the
heights of its points separated by spaces:

```
0 0 0 0 0
0 5 5 5 0
0 5 10 5 0
0 5 5 5 0
0 0 0 0 0
```

The number of columns is taken from the first line. Every line that holds
more than a bare newline must have that many values, otherwise the map is
rejected as uneven. Every line counts as a row. A height may carry a sign,
and reading a field stops at a `.` or `,`, so `10,0xFF0000` reads as `10`.

## Running

```
wireframe path/to/map.fdf
```

Exactly one argument is expected: the map file. With any other number of
arguments, or when the file cannot be opened or is not an even grid, a
message is printed and the viewer does not open.

## Keys

The viewer has two modes. It starts in isometric mode.

| Key          | Isometric mode                          | Parallel mode                                      |
|--------------|-----------------------------------------|----------------------------------------------------|
| Arrow keys   | move the drawing by 15 pixels           | move the drawing by 15 pixels                      |
| `w` / `s`    | rotate about X by +5 / -5 degrees       | rotate about X by +90 / -90 degrees                |
| `d` / `a`    | rotate about Y by +5 / -5 degrees       | rotate about Y by +90 / -90 degrees                |
| `z` / `m`    | rotate about Z by +5 / -5 degrees       | rotate about Z by +90 / -90 degrees                |
| `r`          | reset the whole view                    | set every angle to zero                            |
| `l`          | —                                       | random angles and a random position                |

In parallel mode any angle that is not a multiple of 90 degrees is set to
zero before the quarter turn is applied.

Keys that work in both modes:

| Key       | Action                                                        |
|-----------|---------------------------------------------------------------|
| `o`       | switch to isometric mode                                      |
| `p`       | switch to parallel mode                                       |
| `j` / `k` | zoom in / out by 2 (up to 150, never below 0)                 |
| `8` / `9` | raise / lower every non-zero height by 1                      |
| `q`       | print the current view settings                               |
| `Esc`     | quit (closing the window quits too)                           |

Each segment is coloured by the height of its right or lower end: white when
that height is zero, red when the height plus the raise/lower offset is above
zero, blue otherwise.

## Using it as a library

The pieces behind the viewer can be used on their own:

```python
from wireframe.mapfile import load_map
from wireframe.view import View
from wireframe.raster import Canvas, draw_wireframe

heightmap = load_map("path/to/map.fdf")
view = View()
view.reset(heightmap.columns, heightmap.rows)
canvas = Canvas()
draw_wireframe(canvas, heightmap, view)
pixels = canvas.to_bytes()
```

- `wireframe.mapfile` — `load_map`, `HeightMap`, `MapError`, and the field
  helpers `count_columns` and `parse_field`.
- `wireframe.view` — `View` (angles, offset, scale, projection mode) and
  `Projection`.
- `wireframe.projection` — `rotate_point` and `project`, which turn a map
  point into screen coordinates for a `View`.
- `wireframe.raster` — `Canvas`, `line_points`, `point_color` and
  `draw_wireframe`.
- `wireframe.keys` — `handle_key`, which applies a key press to a view and
  returns an `Action`, and `describe`, which builds the settings report.
- `wireframe.app` — `run(path)` opens the window; `main(argv=None)` is the
  command.

`wireframe.support` holds small helpers used along the way: character tests
(`chars`), byte-buffer operations (`memory`), string functions (`strings`,
`transform`), a singly linked list (`linked_list`), a line reader
(`lines`) and a small printf (`output`).

## What it does not do

Colours written in a map file (the part after a comma) are ignored; colours
come only from the heights. There is no mouse control and no way to save the
picture to a file from the viewer.

## Tests

```
pip install .[test]
pytest
```