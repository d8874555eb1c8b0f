# rasterkit

rasterkit is a small software rasterizer. It keeps a grid of colours and draws
lines and points into it. It writes the result as a plain-text PPM (`P3`)
image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rasterkit [OUTPUT]
```

The command creates a white 100×100 canvas and draws a black line from
(1, 1) towards (50, 70). It writes the picture to `OUTPUT`, which is
`first.ppm` in the current directory by default.

## Library use

```python
from rasterkit.canvas import Canvas
from rasterkit.raster import Point, draw_line, make_grid, save_grid
from rasterkit.scene import Scene
from rasterkit.vector import Vector

scene = Scene(Vector(255, 255, 255))
with Canvas("line.ppm", 100, 100, 1, 1, 1) as canvas:
    grid = make_grid(canvas.height, canvas.width, scene.background_color)
    draw_line(grid, Point(1, 1), Point(50, 70), Vector(0, 0, 0))
    save_grid(canvas, grid)
```

A grid is a list of columns, and you index it as `grid[x][y]`. `draw_line`
colours each cell from the first point up to the second point, leaving the
second point out. Writing to a cell outside the grid raises `IndexError`.

### Modules

- `rasterkit.vector`: `Vector`, an immutable 3-component vector.
  - It supports `+`, `-` and unary `-`.
  - It supports `*` and `/` both component-wise and by a scalar.
  - It has `dot` and `norm`, and can be iterated.
- `rasterkit.homocoord`: `HomoCoord`, a vector that carries an extra
  `iscoord` weight.
  - The `is_coord` property is true when that weight is non-zero.
  - It has the same arithmetic as `Vector`, and also `dot` and `norm`.
- `rasterkit.canvas`: `Canvas`, which writes a `P3` header and pixels to a
  file.
  - It has `open`, `close`, `rename`, `write` and `plot`.
  - It has the read-only properties `name`, `width`, `height`,
    `viewport_width`, `viewport_height`, `viewport_distance`, `closed` and
    `header`.
  - It can be used as a context manager.
  - Each dimension must be between 0 and 65535.
  - `plot` on a closed canvas raises `ValueError`.
- `rasterkit.scene`: `Scene`, which holds a `background_color`.
- `rasterkit.camera`: `Camera`, which holds an `origin`. The origin defaults
  to the zero vector.
- `rasterkit.cube`: `CubeModel` and `Triangle`.
  - `CubeModel` holds the eight vertices of a 2×2×2 cube moved by an offset.
  - It also holds the cube's twelve coloured triangles.
- `rasterkit.raster`: `Point` and the grid functions `make_grid`,
  `format_grid`, `save_grid`, `interpolate`, `draw_line`, `draw_point`,
  `viewport_to_canvas` and `project_vertex`, plus `main`, which the command
  runs.

## What it does not do

`Camera` and `CubeModel` only hold data. Nothing renders a cube or a scene
through a camera. There is no triangle filling, shading, rotation or
perspective projection. `project_vertex` maps 2D viewport coordinates to
canvas coordinates by integer scaling, and that is all it does. Output is
limited to plain-text PPM files.