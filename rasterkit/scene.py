"""Scene description."""

from __future__ import annotations

from dataclasses import dataclass

from rasterkit.vector import Vector


@dataclass(frozen=True)
class Scene:
    """A scene with a background colour."""

    background_color: Vector