"""Camera placed in the scene."""

from __future__ import annotations

from dataclasses import dataclass, field

from rasterkit.vector import Vector


@dataclass(frozen=True)
class Camera:
    """A camera located at ``origin``."""

    origin: Vector = field(default_factory=Vector)