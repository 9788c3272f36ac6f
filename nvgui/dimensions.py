"""Window dimensions expressed as a width and a height in grid units."""

from __future__ import annotations

import re
from dataclasses import dataclass

_GEOMETRY_PATTERN = re.compile(r"(\d+)x(\d+)", re.ASCII)


def _to_unsigned(value: float) -> int:
    """Convert a number to a non-negative integer, truncating fractions."""
    return max(0, int(value))


@dataclass(frozen=True)
class Dimensions:
    """A width and a height."""

    width: int
    height: int

    @classmethod
    def parse(cls, text: str) -> Dimensions:
        """Parse a ``<width>x<height>`` string."""
        return parse_window_geometry(text)

    @classmethod
    def from_tuple(cls, pair: tuple[float, float]) -> Dimensions:
        """Build dimensions from a ``(width, height)`` pair of numbers."""
        width, height = pair
        return cls(_to_unsigned(width), _to_unsigned(height))

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    def __mul__(self, other: object) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_tuple(
            (self.width * other.width, self.height * other.height)
        )

    def __rmul__(self, other: object) -> tuple[int, int]:
        if isinstance(other, tuple) and len(other) == 2:
            x, y = other
            return (x * self.width, y * self.height)
        return NotImplemented

    def __floordiv__(self, other: object) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_tuple(
            (self.width // other.width, self.height // other.height)
        )


DEFAULT_WINDOW_GEOMETRY = Dimensions(100, 50)


def parse_window_geometry(text: str) -> Dimensions:
    """Parse a geometry such as ``"80x24"``; raise ValueError when malformed."""
    match = _GEOMETRY_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ValueError(
            f"Invalid geometry: {text!r}. Expected format <width>x<height>"
        )
    return Dimensions(int(match.group(1)), int(match.group(2)))