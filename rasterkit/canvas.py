"""PPM (P3) canvas that writes pixel colours to a file."""

from __future__ import annotations

import operator
import os
from typing import IO

from rasterkit.vector import Vector

_USHORT_MAX = 0xFFFF


def _ushort(label: str, value: int) -> int:
    number = operator.index(value)
    if not 0 <= number <= _USHORT_MAX:
        raise ValueError(f"{label} must be between 0 and {_USHORT_MAX}, got {number}")
    return number


class Canvas:
    """A plain-text PPM image file with viewport dimensions."""

    def __init__(
        self,
        file_name: str | os.PathLike[str],
        width: int,
        height: int,
        viewport_width: int,
        viewport_height: int,
        viewport_distance: int,
    ) -> None:
        self._name = os.fspath(file_name)
        self._width = _ushort("width", width)
        self._height = _ushort("height", height)
        self._v_width = _ushort("viewport_width", viewport_width)
        self._v_height = _ushort("viewport_height", viewport_height)
        self._v_dist = _ushort("viewport_distance", viewport_distance)
        self._stream: IO[str] | None = None
        self._start()

    @property
    def name(self) -> str:
        return self._name

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def viewport_width(self) -> int:
        return self._v_width

    @property
    def viewport_height(self) -> int:
        return self._v_height

    @property
    def viewport_distance(self) -> int:
        return self._v_dist

    @property
    def closed(self) -> bool:
        return self._stream is None

    @property
    def header(self) -> str:
        """The P3 header written at the top of the file."""
        return f"P3 \n{self._width} {self._height}\n255\n"

    def _start(self) -> None:
        self.open()
        self._stream.write(self.header)

    def open(self) -> None:
        """Open (and truncate) the file if it is not already open."""
        if self._stream is None:
            self._stream = open(self._name, "w", encoding="ascii", newline="")

    def close(self) -> None:
        """Close the file if it is open."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def rename(self, new_name: str | os.PathLike[str]) -> None:
        """Switch to a new file and write a fresh header to it."""
        self.close()
        self._name = os.fspath(new_name)
        self._start()

    def write(self, message: str) -> None:
        """Write raw text, reopening the file if it was closed."""
        self.open()
        self._stream.write(message)

    def plot(self, color: Vector) -> None:
        """Append one pixel colour."""
        if self._stream is None:
            raise ValueError("canvas is closed")
        self._stream.write(f"{color.x:g} {color.y:g} {color.z:g} \n")

    def __enter__(self) -> Canvas:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Canvas({self._name!r}, {self._width}x{self._height})"