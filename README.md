# wireframe

Draws a height map as a wireframe in an isometric projection, in a window
you can steer with the keyboard.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Map files

A map is a text file whose name ends in `.fdf`. Each line is a row of
points; each number is the height of one point, and points are separated by
spaces:

    0 0 0 0
    0 5 5 0
    0 5,0xff0000 5 0
    0 0 0 0

- A height may carry a `+` or `-` sign and may be at most 159999999.
- A point may carry a colour after a comma, either in hexadecimal
  (`0xFF0000`, upper- or lower-case digits) or as a decimal number, at most
  `0x7FFFFFFF`. Points without a colour are drawn in white.
- Rows may differ in length, but no line may be empty, and the first row
  must hold at least two points.

Anything else makes the file an invalid map.

## Running

    wireframe path/to/map.fdf

The map is laid out to fit an 1800 × 900 window and centred in it. If the
file cannot be read or is not a valid map, the command prints the reason to
standard error and exits with status 1; it does the same, with a usage line,
when it is not given exactly one map.

    wireframe --basic path/to/map.fdf

shows only the isometric picture, without the help panel; in this mode
every key except Esc is ignored.

## Keys

| Key | Action |
| --- | --- |
| Esc | quit (closing the window works too) |
| arrow keys | move the map |
| T | cycle the move step: 10, 20, 30, 40, then back to 10 |
| I / O | zoom in / out (in steps of 0.1, between 0.2 and 5) |
| keypad 8 / 2 | rotate around X |
| keypad 4 / 6 | rotate around Y |
| keypad 9 / 1 | rotate around Z |
| keypad + / - | raise / lower the heights (not in parallel view) |
| P | parallel (top-down) projection |
| R | back to the isometric view |
| C | colour points by height |

Rotating drops any zoom and height scaling. Colouring by height paints
points at or below zero blue, and higher points green, red or white in three
bands up to the highest point; it stays on until P or R brings back the
points' own colours.

A help panel on the left of the window lists these keys and shows the move
step, the rotation angles in degrees and whether the parallel and colour
modes are active.

## Using it from Python

    from wireframe.reader import load_map
    from wireframe.projection import Key, View, pixel_spacing
    from wireframe.raster import Canvas, render

    height_map = load_map("map.fdf")
    pix_space = pixel_spacing(len(height_map), height_map.max_row())
    view = View(height_map, pix_space)   # projects the map isometrically
    view.handle_key(Key.ZM_IN)

    canvas = Canvas()                    # 1800 × 900 by default
    render(height_map, canvas, pix_space)
    print(hex(canvas.pixel(900, 450)))

- `wireframe.reader` — `count_lines`, `read_lines` and `load_map` read map
  files into a `wireframe.model.HeightMap`.
- `wireframe.parser` — `check_line`, `normalize_line`, `parse_point`,
  `parse_row` and `parse_hex_color` handle single lines and points;
  `MapError` (a `ValueError`) is raised for anything that is not a valid map.
- `wireframe.model` — `Point`, `Bounds` and `HeightMap`, which holds the
  grid and its projected positions.
- `wireframe.projection` — `rotate_point`, `pixel_spacing`, the `Key`
  codes and `View`, which keeps angles, zoom, offset and colouring.
- `wireframe.raster` — `Canvas` (a NumPy array of packed colours),
  `draw_line` (Bresenham with a colour gradient) and `render`.
- `wireframe.colors` — packing and unpacking of TRGB colours and the
  `Gradient` used along each edge.
- `wireframe.guide` — `guide_entries`, the text of the help panel for a
  view.
- `wireframe.app` — `Viewer`, the pygame window, and `main`, the command.

## What it does not do

The viewer only shows maps: it does not edit them, save the picture to an
image file, or read any format other than `.fdf` height maps.