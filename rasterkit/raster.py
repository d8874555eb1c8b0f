"""Grid rasterisation helpers: lines, points, projection and PPM output."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

from rasterkit.canvas import Canvas
from rasterkit.scene import Scene
from rasterkit.vector import Vector

Grid = list[list[Vector]]

_WHITE = Vector(255, 255, 255)
_BLACK = Vector(0, 0, 0)


@dataclass(frozen=True)
class Point:
    """An integer position on the canvas grid."""

    x: int
    y: int


def make_grid(height: int, width: int, color: Vector) -> Grid:
    """Return a grid filled with ``color``, indexed as ``grid[x][y]``."""
    if height < 0 or width < 0:
        raise ValueError("grid dimensions must not be negative")
    return [[color] * height for _ in range(width)]


def format_grid(grid: Grid) -> str:
    """Render every cell on its own line, with a blank line after each column."""
    return "".join(
        "".join(f"{cell}\n" for cell in column) + "\n" for column in grid
    )


def save_grid(canvas: Canvas, grid: Grid) -> None:
    """Plot the grid to the canvas row by row."""
    for y in range(canvas.height):
        for x in range(canvas.width):
            canvas.plot(grid[x][y])


def interpolate(
    start0: float, end0: float, start1: float, end1: float
) -> list[float]:
    """Values of the line through (start0, end0) and (start1, end1) at each integer step."""
    if start0 == start1:
        return [end0]
    slope = (end1 - end0) / (start1 - start0)
    values: list[float] = []
    displacement = end0
    step = int(start0)
    while step <= start1:
        values.append(displacement)
        displacement += slope
        step += 1
    return values


def _set_cell(grid: Grid, x: int, y: int, color: Vector) -> None:
    if x < 0 or y < 0 or x >= len(grid) or y >= len(grid[x]):
        raise IndexError(f"cell ({x}, {y}) is outside the grid")
    grid[x][y] = color


def draw_line(grid: Grid, point0: Point, point1: Point, color: Vector) -> None:
    """Draw a line from ``point0`` up to, but not including, ``point1``."""
    x0, y0 = int(point0.x), int(point0.y)
    x1, y1 = int(point1.x), int(point1.y)

    if abs(x1 - x0) > abs(y1 - y0):
        if x0 > x1:
            x0, x1, y0, y1 = x1, x0, y1, y0
        ys = interpolate(x0, y0, x1, y1)
        for x in range(x0, x1):
            _set_cell(grid, x, int(ys[x - x0]), color)
    else:
        if y0 > y1:
            x0, x1, y0, y1 = x1, x0, y1, y0
        xs = interpolate(y0, x0, y1, x1)
        for y in range(y0, y1):
            _set_cell(grid, int(xs[y - y0]), y, color)


def draw_point(grid: Grid, point: Point, color: Vector) -> None:
    """Colour a single cell."""
    _set_cell(grid, point.x, point.y, color)


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def viewport_to_canvas(canvas: Canvas, x: int, y: int) -> tuple[int, int]:
    """Map viewport coordinates to canvas coordinates with integer division."""
    return (
        _truncating_div(x * canvas.width, canvas.viewport_width),
        _truncating_div(y * canvas.height, canvas.viewport_height),
    )


def project_vertex(canvas: Canvas, point: Point) -> tuple[int, int]:
    """Project a point onto the canvas."""
    return viewport_to_canvas(canvas, point.x, point.y)


def main(argv: Sequence[str] | None = None) -> int:
    """Draw a sample line on a white 100x100 canvas and save it as PPM."""
    parser = argparse.ArgumentParser(description="Render a sample line to a PPM file.")
    parser.add_argument("output", nargs="?", default="first.ppm")
    args = parser.parse_args(argv)

    scene = Scene(_WHITE)
    with Canvas(args.output, 100, 100, 1, 1, 1) as canvas:
        grid = make_grid(canvas.height, canvas.width, scene.background_color)
        draw_line(grid, Point(1, 1), Point(50, 70), _BLACK)
        save_grid(canvas, grid)
    return 0