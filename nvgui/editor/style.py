"""Highlight styles and the colours they carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Color4f:
    """An RGBA colour with float components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass
class Colors:
    """Foreground, background and special colours, each possibly unset."""

    foreground: Optional[Color4f] = None
    background: Optional[Color4f] = None
    special: Optional[Color4f] = None


class UnderlineStyle(Enum):
    UNDERLINE = "underline"
    UNDER_DOUBLE = "underdouble"
    UNDER_DASH = "underdash"
    UNDER_DOT = "underdot"
    UNDER_CURL = "undercurl"


def _required(color: Optional[Color4f], name: str) -> Color4f:
    if color is None:
        raise ValueError(f"default {name} color is not set")
    return color


@dataclass
class Style:
    """A highlight definition: colours plus text attributes."""

    colors: Colors = field(default_factory=Colors)
    reverse: bool = False
    italic: bool = False
    bold: bool = False
    strikethrough: bool = False
    blend: int = 0
    underline: Optional[UnderlineStyle] = None

    def _own_or_default(self, attribute: str, default_colors: Colors) -> Color4f:
        own = getattr(self.colors, attribute)
        if own is not None:
            return own
        return _required(getattr(default_colors, attribute), attribute)

    def foreground(self, default_colors: Colors) -> Color4f:
        """The colour text is drawn with, honouring ``reverse``.

        Raises ValueError when the needed default colour is unset.
        """
        attribute = "background" if self.reverse else "foreground"
        return self._own_or_default(attribute, default_colors)

    def background(self, default_colors: Colors) -> Color4f:
        """The colour behind the text, honouring ``reverse``.

        Raises ValueError when the needed default colour is unset.
        """
        attribute = "foreground" if self.reverse else "background"
        return self._own_or_default(attribute, default_colors)

    def special(self, default_colors: Colors) -> Color4f:
        """The colour of underlines; falls back to the foreground colour."""
        if self.colors.special is not None:
            return self.colors.special
        return self.foreground(default_colors)