"""A fixed-size grid of character cells."""

from __future__ import annotations

from typing import Optional

from nvgui.editor.style import Style

GridCell = tuple[str, Optional[Style]]


def default_cell() -> GridCell:
    """An empty cell: a single space with no style."""
    return (" ", None)


class CharacterGrid:
    """Cells stored row by row; ``width`` columns by ``height`` rows."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.width, self.height = size
        self._characters: list[GridCell] = [default_cell()] * (self.width * self.height)

    def _index(self, x: int, y: int) -> Optional[int]:
        if 0 <= x < self.width and 0 <= y < self.height:
            return x + y * self.width
        return None

    def resize(self, size: tuple[int, int]) -> None:
        """Change the size, keeping the cells that still fit."""
        width, height = size
        kept_width = min(self.width, width)
        characters: list[GridCell] = []
        for y in range(height):
            if y < self.height:
                start = y * self.width
                kept = self._characters[start:start + kept_width]
            else:
                kept = []
            characters.extend(kept)
            characters.extend([default_cell()] * (width - len(kept)))
        self.width, self.height = width, height
        self._characters = characters

    def clear(self) -> None:
        """Reset every cell to the default cell."""
        self.set_all_characters(default_cell())

    def get_cell(self, x: int, y: int) -> Optional[GridCell]:
        """Return the cell at column x, row y, or None when out of bounds."""
        index = self._index(x, y)
        return None if index is None else self._characters[index]

    def set_cell(self, x: int, y: int, cell: GridCell) -> bool:
        """Store a cell; out-of-bounds positions are ignored.

        Returns whether the position was inside the grid.
        """
        index = self._index(x, y)
        if index is None:
            return False
        self._characters[index] = cell
        return True

    def set_all_characters(self, value: GridCell) -> None:
        """Fill the whole grid with one cell."""
        self._characters = [value] * (self.width * self.height)

    def row(self, row_index: int) -> Optional[list[GridCell]]:
        """Return a copy of one row, or None when out of bounds."""
        if 0 <= row_index < self.height:
            start = row_index * self.width
            return self._characters[start:start + self.width]
        return None