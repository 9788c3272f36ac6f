import pytest

from nvgui.editor.cursor import Cursor, CursorMode, CursorShape
from nvgui.editor.style import Color4f, Colors, Style

COLORS = Colors(
    foreground=Color4f(0.1, 0.1, 0.1, 0.1),
    background=Color4f(0.2, 0.1, 0.1, 0.1),
    special=Color4f(0.3, 0.1, 0.1, 0.1),
)

DEFAULT_COLORS = Colors(
    foreground=Color4f(0.1, 0.2, 0.1, 0.1),
    background=Color4f(0.2, 0.2, 0.1, 0.1),
    special=Color4f(0.3, 0.2, 0.1, 0.1),
)

NONE_COLORS = Colors(None, None, None)


def test_from_type_name():
    assert CursorShape.from_type_name("block") == CursorShape.BLOCK
    assert CursorShape.from_type_name("horizontal") == CursorShape.HORIZONTAL
    assert CursorShape.from_type_name("vertical") == CursorShape.VERTICAL


def test_from_type_name_unknown():
    assert CursorShape.from_type_name("triangle") is None


def test_new_cursor_defaults():
    cursor = Cursor()
    assert cursor.grid_position == (0, 0)
    assert cursor.shape == CursorShape.BLOCK
    assert cursor.enabled is True
    assert cursor.double_width is False
    assert cursor.grid_cell == (" ", None)


def test_foreground():
    cursor = Cursor()
    assert cursor.foreground(DEFAULT_COLORS) == DEFAULT_COLORS.background
    cursor.style = Style(COLORS)
    assert cursor.foreground(DEFAULT_COLORS) == COLORS.foreground
    cursor.style = Style(NONE_COLORS)
    assert cursor.foreground(DEFAULT_COLORS) == DEFAULT_COLORS.background


def test_background():
    cursor = Cursor()
    assert cursor.background(DEFAULT_COLORS) == DEFAULT_COLORS.foreground
    cursor.style = Style(COLORS)
    assert cursor.background(DEFAULT_COLORS) == COLORS.background
    cursor.style = Style(NONE_COLORS)
    assert cursor.background(DEFAULT_COLORS) == DEFAULT_COLORS.foreground


def test_missing_defaults_raise():
    cursor = Cursor()
    with pytest.raises(ValueError):
        cursor.foreground(NONE_COLORS)
    with pytest.raises(ValueError):
        cursor.background(NONE_COLORS)


@pytest.mark.parametrize("blend, expected", [(0, 255), (50, 127), (100, 0)])
def test_alpha(blend, expected):
    cursor = Cursor(style=Style(COLORS, blend=blend))
    assert cursor.alpha() == expected


def test_alpha_without_style():
    assert Cursor().alpha() == 255


def test_change_mode():
    cursor_mode = CursorMode(
        shape=CursorShape.HORIZONTAL,
        style_id=1,
        cell_percentage=100.0,
        blinkwait=1,
        blinkon=1,
        blinkoff=1,
    )
    styles = {1: Style(COLORS)}
    cursor = Cursor()

    cursor.change_mode(cursor_mode, styles)
    assert cursor.shape == CursorShape.HORIZONTAL
    assert cursor.style is styles[1]
    assert cursor.cell_percentage == 100.0
    assert cursor.blinkwait == 1
    assert cursor.blinkon == 1
    assert cursor.blinkoff == 1

    cursor.change_mode(CursorMode(), styles)
    assert cursor.shape == CursorShape.HORIZONTAL
    assert cursor.style is styles[1]
    assert cursor.cell_percentage is None
    assert cursor.blinkwait is None
    assert cursor.blinkon is None
    assert cursor.blinkoff is None


def test_change_mode_unknown_style_clears_style():
    cursor = Cursor(style=Style(COLORS))
    cursor.change_mode(CursorMode(style_id=7), {})
    assert cursor.style is None