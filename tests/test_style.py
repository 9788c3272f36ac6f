import dataclasses

import pytest

from nvgui.editor.style import Color4f, Colors, Style, UnderlineStyle

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


def make_style() -> Style:
    return Style(dataclasses.replace(COLORS))


def test_foreground():
    style = make_style()
    assert style.foreground(DEFAULT_COLORS) == COLORS.foreground
    style.colors.foreground = None
    assert style.foreground(DEFAULT_COLORS) == DEFAULT_COLORS.foreground


def test_foreground_reverse():
    style = make_style()
    style.reverse = True
    assert style.foreground(DEFAULT_COLORS) == COLORS.background
    style.colors.background = None
    assert style.foreground(DEFAULT_COLORS) == DEFAULT_COLORS.background


def test_background():
    style = make_style()
    assert style.background(DEFAULT_COLORS) == COLORS.background
    style.colors.background = None
    assert style.background(DEFAULT_COLORS) == DEFAULT_COLORS.background


def test_background_reverse():
    style = make_style()
    style.reverse = True
    assert style.background(DEFAULT_COLORS) == COLORS.foreground
    style.colors.foreground = None
    assert style.background(DEFAULT_COLORS) == DEFAULT_COLORS.foreground


def test_special():
    style = make_style()
    assert style.special(DEFAULT_COLORS) == COLORS.special
    style.colors.special = None
    assert style.special(DEFAULT_COLORS) == style.foreground(DEFAULT_COLORS)


def test_new_style_has_default_attributes():
    style = Style(Colors())
    assert (style.reverse, style.italic, style.bold, style.strikethrough) == (
        False,
        False,
        False,
        False,
    )
    assert style.blend == 0
    assert style.underline is None


def test_missing_default_color_raises():
    style = Style(Colors())
    with pytest.raises(ValueError):
        style.foreground(Colors())
    with pytest.raises(ValueError):
        style.background(Colors())


def test_styles_compare_by_value():
    first = Style(Colors(foreground=Color4f(0.5, 0.5, 0.5)), underline=UnderlineStyle.UNDER_CURL)
    second = Style(Colors(foreground=Color4f(0.5, 0.5, 0.5)), underline=UnderlineStyle.UNDER_CURL)
    assert first == second
    second.bold = True
    assert first != second
    assert not (first == second)


def test_color_alpha_defaults_to_opaque():
    assert Color4f(0.1, 0.2, 0.3).a == 1.0