"""The editor cursor and the modes that change its appearance."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from nvgui.editor.style import Color4f, Colors, Style


class CursorShape(Enum):
    BLOCK = "block"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def from_type_name(cls, name: str) -> Optional[CursorShape]:
        """Return the shape with this name, or None for unknown names."""
        for shape in cls:
            if shape.value == name:
                return shape
        return None


@dataclass
class CursorMode:
    """Cursor appearance for one editor mode; unset fields are None."""

    shape: Optional[CursorShape] = None
    style_id: Optional[int] = None
    cell_percentage: Optional[float] = None
    blinkwait: Optional[int] = None
    blinkon: Optional[int] = None
    blinkoff: Optional[int] = None


def _default_grid_cell() -> tuple[str, Optional[Style]]:
    return (" ", None)


@dataclass
class Cursor:
    """Where the cursor is and how it is drawn."""

    grid_position: tuple[int, int] = (0, 0)
    parent_window_id: int = 0
    shape: CursorShape = CursorShape.BLOCK
    cell_percentage: Optional[float] = None
    blinkwait: Optional[int] = None
    blinkon: Optional[int] = None
    blinkoff: Optional[int] = None
    style: Optional[Style] = None
    enabled: bool = True
    double_width: bool = False
    grid_cell: tuple[str, Optional[Style]] = field(default_factory=_default_grid_cell)

    def foreground(self, default_colors: Colors) -> Color4f:
        """The cursor's own foreground, or the default background."""
        if self.style is not None and self.style.colors.foreground is not None:
            return self.style.colors.foreground
        if default_colors.background is None:
            raise ValueError("default background color is not set")
        return default_colors.background

    def background(self, default_colors: Colors) -> Color4f:
        """The cursor's own background, or the default foreground."""
        if self.style is not None and self.style.colors.background is not None:
            return self.style.colors.background
        if default_colors.foreground is None:
            raise ValueError("default foreground color is not set")
        return default_colors.foreground

    def alpha(self) -> int:
        """Opacity 0..255 derived from the style's blend percentage."""
        if self.style is None:
            return 255
        value = int(255.0 * ((100 - self.style.blend) / 100.0))
        return max(0, min(255, value))

    def change_mode(self, cursor_mode: CursorMode, styles: Mapping[int, Style]) -> None:
        """Apply a cursor mode; shape and style change only when set."""
        if cursor_mode.shape is not None:
            self.shape = cursor_mode.shape
        if cursor_mode.style_id is not None:
            self.style = styles.get(cursor_mode.style_id)
        self.cell_percentage = cursor_mode.cell_percentage
        self.blinkwait = cursor_mode.blinkwait
        self.blinkon = cursor_mode.blinkon
        self.blinkoff = cursor_mode.blinkoff