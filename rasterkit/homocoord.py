"""Homogeneous coordinate: a 3D vector with a point/direction weight."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class HomoCoord:
    """Vector with an extra ``iscoord`` weight (non-zero for points)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    iscoord: float = 0.0

    def __add__(self, other: HomoCoord) -> HomoCoord:
        if not isinstance(other, HomoCoord):
            return NotImplemented
        return HomoCoord(
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
            self.iscoord + other.iscoord,
        )

    def __neg__(self) -> HomoCoord:
        return HomoCoord(-self.x, -self.y, -self.z, -self.iscoord)

    def __sub__(self, other: HomoCoord) -> HomoCoord:
        if not isinstance(other, HomoCoord):
            return NotImplemented
        return self + -other

    def __mul__(self, other: HomoCoord | float) -> HomoCoord:
        if isinstance(other, HomoCoord):
            return HomoCoord(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return HomoCoord(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> HomoCoord:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: HomoCoord | float) -> HomoCoord:
        if isinstance(other, HomoCoord):
            return HomoCoord(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return HomoCoord(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @property
    def is_coord(self) -> bool:
        """True when the weight marks this as a point rather than a direction."""
        return self.iscoord != 0

    def dot(self, other: HomoCoord) -> float:
        """Return the scalar product of the spatial components."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """Return the Euclidean length of the spatial components."""
        return math.sqrt(self.dot(self))

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"