"""Cube mesh model made of triangles."""

from __future__ import annotations

from dataclasses import dataclass

from rasterkit.vector import Vector

_UNIT_VERTICES = (
    Vector(1, 1, 1),
    Vector(-1, 1, 1),
    Vector(-1, -1, 1),
    Vector(1, -1, 1),
    Vector(1, 1, -1),
    Vector(-1, 1, -1),
    Vector(-1, -1, -1),
    Vector(1, -1, -1),
)

_FACES = (
    (0, 1, 2), (0, 2, 3), (4, 0, 3), (4, 3, 7),
    (5, 4, 7), (5, 7, 6), (1, 5, 6), (1, 6, 2),
    (4, 5, 1), (4, 1, 0), (2, 6, 7), (2, 7, 3),
)


@dataclass(frozen=True)
class Triangle:
    """A triangle given by three vertex indices and a colour name."""

    id1: int
    id2: int
    id3: int
    color: str = ""

    @property
    def indices(self) -> tuple[int, int, int]:
        return (self.id1, self.id2, self.id3)


class CubeModel:
    """A 2x2x2 cube centred at the given offset, with 12 coloured triangles."""

    def __init__(
        self,
        x_off: float = 0.0,
        y_off: float = 0.0,
        z_off: float = 0.0,
        color: str = "",
    ) -> None:
        self.position = Vector(x_off, y_off, z_off)
        self.color = color
        self.vertices: tuple[Vector, ...] = tuple(
            v + self.position for v in _UNIT_VERTICES
        )
        self.triangles: tuple[Triangle, ...] = tuple(
            Triangle(a, b, c, color) for a, b, c in _FACES
        )

    def __repr__(self) -> str:
        return f"CubeModel(position={self.position}, color={self.color!r})"