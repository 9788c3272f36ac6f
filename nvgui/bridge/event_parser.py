"""Parsing of NeoVim ``redraw`` notifications into redraw events."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from nvgui.bridge.redraw_events import (
    BusyStart,
    BusyStop,
    Clear,
    CommandLineBlockAppend,
    CommandLineBlockHide,
    CommandLineBlockShow,
    CommandLineHide,
    CommandLinePosition,
    CommandLineShow,
    CommandLineSpecialCharacter,
    CursorGoto,
    DefaultColorsSet,
    Destroy,
    EditorMode,
    Flush,
    GridLine,
    GridLineCell,
    GuiOption,
    GuiOptionKind,
    HighlightAttributesDefine,
    MessageClear,
    MessageHistoryShow,
    MessageKind,
    MessageRuler,
    MessageSetPosition,
    MessageShow,
    MessageShowCommand,
    MessageShowMode,
    ModeChange,
    ModeInfoSet,
    MouseOff,
    MouseOn,
    OptionSet,
    ParseError,
    RedrawEvent,
    Resize,
    Scroll,
    SetTitle,
    StyledContent,
    WindowAnchor,
    WindowClose,
    WindowExternalPosition,
    WindowFloatPosition,
    WindowHide,
    WindowPosition,
    WindowViewport,
)
from nvgui.editor.cursor import CursorMode, CursorShape
from nvgui.editor.style import Color4f, Colors, Style, UnderlineStyle

log = logging.getLogger(__name__)

_U64_LIMIT = 2**64
_I64_LIMIT = 2**63


def _format_error(values: Any) -> ParseError:
    return ParseError("event", repr(values))


def _extract(values: list[Any], required: int) -> list[Any]:
    if len(values) < required:
        raise _format_error(values)
    return values[:required]


def _extract_with_optional(
    values: list[Any], required: int, optional: int
) -> tuple[list[Any], list[Optional[Any]]]:
    if not required <= len(values) <= required + optional:
        raise _format_error(values)
    extra = values[required:]
    return values[:required], extra + [None] * (optional - len(extra))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_array(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ParseError("array", value)


def _parse_map(value: Any) -> list[tuple[Any, Any]]:
    if isinstance(value, dict):
        return list(value.items())
    raise ParseError("map", value)


def _parse_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return "\ufffd"
    raise ParseError("string", value)


def _parse_u64(value: Any) -> int:
    if _is_int(value) and 0 <= value < _U64_LIMIT:
        return value
    raise ParseError("u64", value)


def _parse_i64(value: Any) -> int:
    if _is_int(value) and -_I64_LIMIT <= value < _I64_LIMIT:
        return value
    raise ParseError("i64", value)


def _parse_f64(value: Any) -> float:
    if isinstance(value, float) or _is_int(value):
        return float(value)
    raise ParseError("f64", value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ParseError("bool", value)


def unpack_color(packed_color: int) -> Color4f:
    """Turn a packed ``0xRRGGBB`` integer into an opaque colour."""
    packed = packed_color & 0xFFFFFFFF
    red = (packed & 0x00FF0000) >> 16
    green = (packed & 0xFF00) >> 8
    blue = packed & 0xFF
    return Color4f(red / 255.0, green / 255.0, blue / 255.0, 1.0)


_COLOR_ATTRIBUTES = frozenset({"foreground", "background", "special"})
_FLAG_ATTRIBUTES = frozenset({"reverse", "italic", "bold", "strikethrough"})
_UNDERLINE_ATTRIBUTES = {
    "underline": UnderlineStyle.UNDERLINE,
    "undercurl": UnderlineStyle.UNDER_CURL,
    "underdotted": UnderlineStyle.UNDER_DOT,
    "underdot": UnderlineStyle.UNDER_DOT,
    "underdashed": UnderlineStyle.UNDER_DASH,
    "underdash": UnderlineStyle.UNDER_DASH,
    "underdouble": UnderlineStyle.UNDER_DOUBLE,
    "underlineline": UnderlineStyle.UNDER_DOUBLE,
}


def parse_style(style_map: Any) -> Style:
    """Build a style from a highlight attribute map.

    Attributes with an unexpected name or value type are ignored.
    """
    style = Style(Colors())
    for name, value in _parse_map(style_map):
        if not isinstance(name, str):
            log.debug("Invalid attribute format")
            continue
        if name in _COLOR_ATTRIBUTES and _is_int(value):
            setattr(style.colors, name, unpack_color(_parse_u64(value)))
        elif name in _FLAG_ATTRIBUTES and isinstance(value, bool):
            setattr(style, name, value)
        elif name == "blend" and _is_int(value):
            style.blend = _parse_u64(value) & 0xFF
        elif name in _UNDERLINE_ATTRIBUTES and value is True:
            style.underline = _UNDERLINE_ATTRIBUTES[name]
        else:
            log.debug("Ignored style attribute: %s", name)
    return style


def parse_styled_content(line: Any) -> StyledContent:
    """Parse a list of ``[highlight_id, text]`` chunks."""
    content: StyledContent = []
    for chunk in _parse_array(line):
        style_id, text = _extract(_parse_array(chunk), 2)
        content.append((_parse_u64(style_id), _parse_string(text)))
    return content


def parse_grid_line_cell(value: Any) -> GridLineCell:
    """Parse a ``[text, highlight_id?, repeat?]`` cell."""
    contents = _parse_array(value)
    if not contents:
        raise _format_error(contents)
    highlight_id = _parse_u64(contents[1]) if len(contents) > 1 else None
    repeat = _parse_u64(contents[2]) if len(contents) > 2 else None
    return GridLineCell(_parse_string(contents[0]), highlight_id, repeat)


def _parse_set_title(arguments: list[Any]) -> RedrawEvent:
    (title,) = _extract(arguments, 1)
    return SetTitle(_parse_string(title))


def _parse_cursor_mode(value: Any) -> CursorMode:
    mode = CursorMode()
    for name, setting in _parse_map(value):
        key = _parse_string(name)
        if key == "cursor_shape":
            mode.shape = CursorShape.from_type_name(_parse_string(setting))
        elif key == "cell_percentage":
            mode.cell_percentage = _parse_u64(setting) / 100.0
        elif key == "blinkwait":
            mode.blinkwait = _parse_u64(setting)
        elif key == "blinkon":
            mode.blinkon = _parse_u64(setting)
        elif key == "blinkoff":
            mode.blinkoff = _parse_u64(setting)
        elif key == "attr_id":
            mode.style_id = _parse_u64(setting)
    return mode


def _parse_mode_info_set(arguments: list[Any]) -> RedrawEvent:
    _cursor_style_enabled, mode_info = _extract(arguments, 2)
    return ModeInfoSet([_parse_cursor_mode(info) for info in _parse_array(mode_info)])


_OPTION_PARSERS: dict[str, Callable[[Any], Any]] = {
    "arabicshape": _parse_bool,
    "ambiwidth": _parse_string,
    "emoji": _parse_bool,
    "guifont": _parse_string,
    "guifontset": _parse_string,
    "guifontwide": _parse_string,
    "linespace": _parse_u64,
    "pumblend": _parse_u64,
    "showtabline": _parse_u64,
    "termguicolors": _parse_bool,
}


def _parse_option_set(arguments: list[Any]) -> RedrawEvent:
    name_value, value = _extract(arguments, 2)
    name = _parse_string(name_value)
    parser = _OPTION_PARSERS.get(name)
    if parser is None:
        return OptionSet(GuiOption(GuiOptionKind.UNKNOWN, value, name))
    return OptionSet(GuiOption(GuiOptionKind(name), parser(value)))


def _parse_mode_change(arguments: list[Any]) -> RedrawEvent:
    mode, mode_index = _extract(arguments, 2)
    return ModeChange(EditorMode.parse(_parse_string(mode)), _parse_u64(mode_index))


def _parse_grid_resize(arguments: list[Any]) -> RedrawEvent:
    grid, width, height = _extract(arguments, 3)
    return Resize(_parse_u64(grid), _parse_u64(width), _parse_u64(height))


def _parse_default_colors(arguments: list[Any]) -> RedrawEvent:
    foreground, background, special, _fg_term, _bg_term = _extract(arguments, 5)
    return DefaultColorsSet(
        Colors(
            unpack_color(_parse_u64(foreground)),
            unpack_color(_parse_u64(background)),
            unpack_color(_parse_u64(special)),
        )
    )


def _parse_hl_attr_define(arguments: list[Any]) -> RedrawEvent:
    highlight_id, attributes, _terminal_attributes, _info = _extract(arguments, 4)
    style = parse_style(attributes)
    return HighlightAttributesDefine(_parse_u64(highlight_id), style)


def _parse_grid_line(arguments: list[Any]) -> RedrawEvent:
    grid, row, column_start, cells = _extract(arguments, 4)
    return GridLine(
        _parse_u64(grid),
        _parse_u64(row),
        _parse_u64(column_start),
        [parse_grid_line_cell(cell) for cell in _parse_array(cells)],
    )


def _parse_grid_clear(arguments: list[Any]) -> RedrawEvent:
    (grid,) = _extract(arguments, 1)
    return Clear(_parse_u64(grid))


def _parse_grid_destroy(arguments: list[Any]) -> RedrawEvent:
    (grid,) = _extract(arguments, 1)
    return Destroy(_parse_u64(grid))


def _parse_grid_cursor_goto(arguments: list[Any]) -> RedrawEvent:
    grid, row, column = _extract(arguments, 3)
    return CursorGoto(_parse_u64(grid), _parse_u64(row), _parse_u64(column))


def _parse_grid_scroll(arguments: list[Any]) -> RedrawEvent:
    grid, top, bottom, left, right, rows, columns = _extract(arguments, 7)
    return Scroll(
        _parse_u64(grid),
        _parse_u64(top),
        _parse_u64(bottom),
        _parse_u64(left),
        _parse_u64(right),
        _parse_i64(rows),
        _parse_i64(columns),
    )


def _parse_win_pos(arguments: list[Any]) -> RedrawEvent:
    grid, _window, start_row, start_column, width, height = _extract(arguments, 6)
    return WindowPosition(
        _parse_u64(grid),
        _parse_u64(start_row),
        _parse_u64(start_column),
        _parse_u64(width),
        _parse_u64(height),
    )


def _parse_win_float_pos(arguments: list[Any]) -> RedrawEvent:
    required, (sort_order,) = _extract_with_optional(arguments, 7, 1)
    grid, _window, anchor, anchor_grid, anchor_row, anchor_column, focusable = required
    parsed_sort_order = None if sort_order is None else _parse_u64(sort_order)
    return WindowFloatPosition(
        _parse_u64(grid),
        WindowAnchor.parse(_parse_string(anchor)),
        _parse_u64(anchor_grid),
        _parse_f64(anchor_row),
        _parse_f64(anchor_column),
        _parse_bool(focusable),
        parsed_sort_order,
    )


def _parse_win_external_pos(arguments: list[Any]) -> RedrawEvent:
    grid, _window = _extract(arguments, 2)
    return WindowExternalPosition(_parse_u64(grid))


def _parse_win_hide(arguments: list[Any]) -> RedrawEvent:
    (grid,) = _extract(arguments, 1)
    return WindowHide(_parse_u64(grid))


def _parse_win_close(arguments: list[Any]) -> RedrawEvent:
    (grid,) = _extract(arguments, 1)
    return WindowClose(_parse_u64(grid))


def _parse_msg_set_pos(arguments: list[Any]) -> RedrawEvent:
    grid, row, scrolled, separator = _extract(arguments, 4)
    return MessageSetPosition(
        _parse_u64(grid), _parse_u64(row), _parse_bool(scrolled), _parse_string(separator)
    )


def _parse_win_viewport(arguments: list[Any]) -> RedrawEvent:
    required, (line_count,) = _extract_with_optional(arguments, 6, 1)
    grid, _window, top_line, bottom_line, current_line, current_column = required
    parsed_line_count = None if line_count is None else _parse_f64(line_count)
    return WindowViewport(
        _parse_u64(grid),
        _parse_f64(top_line),
        _parse_f64(bottom_line),
        _parse_f64(current_line),
        _parse_f64(current_column),
        parsed_line_count,
    )


def _parse_cmdline_show(arguments: list[Any]) -> RedrawEvent:
    content, position, first_character, prompt, indent, level = _extract(arguments, 6)
    return CommandLineShow(
        parse_styled_content(content),
        _parse_u64(position),
        _parse_string(first_character),
        _parse_string(prompt),
        _parse_u64(indent),
        _parse_u64(level),
    )


def _parse_cmdline_pos(arguments: list[Any]) -> RedrawEvent:
    position, level = _extract(arguments, 2)
    return CommandLinePosition(_parse_u64(position), _parse_u64(level))


def _parse_cmdline_special_char(arguments: list[Any]) -> RedrawEvent:
    character, shift, level = _extract(arguments, 3)
    return CommandLineSpecialCharacter(
        _parse_string(character), _parse_bool(shift), _parse_u64(level)
    )


def _parse_cmdline_block_show(arguments: list[Any]) -> RedrawEvent:
    (lines,) = _extract(arguments, 1)
    return CommandLineBlockShow([parse_styled_content(line) for line in _parse_array(lines)])


def _parse_cmdline_block_append(arguments: list[Any]) -> RedrawEvent:
    (line,) = _extract(arguments, 1)
    return CommandLineBlockAppend(parse_styled_content(line))


def _parse_msg_show(arguments: list[Any]) -> RedrawEvent:
    kind, content, replace_last = _extract(arguments, 3)
    return MessageShow(
        MessageKind.parse(_parse_string(kind)),
        parse_styled_content(content),
        _parse_bool(replace_last),
    )


def _parse_msg_showmode(arguments: list[Any]) -> RedrawEvent:
    (content,) = _extract(arguments, 1)
    return MessageShowMode(parse_styled_content(content))


def _parse_msg_showcmd(arguments: list[Any]) -> RedrawEvent:
    (content,) = _extract(arguments, 1)
    return MessageShowCommand(parse_styled_content(content))


def _parse_msg_ruler(arguments: list[Any]) -> RedrawEvent:
    (content,) = _extract(arguments, 1)
    return MessageRuler(parse_styled_content(content))


def _parse_msg_history_entry(entry: Any) -> tuple[MessageKind, StyledContent]:
    kind, content = _extract(_parse_array(entry), 2)
    return (MessageKind.parse(_parse_string(kind)), parse_styled_content(content))


def _parse_msg_history_show(arguments: list[Any]) -> RedrawEvent:
    (entries,) = _extract(arguments, 1)
    return MessageHistoryShow([_parse_msg_history_entry(e) for e in _parse_array(entries)])


def _constant(event: RedrawEvent) -> Callable[[list[Any]], RedrawEvent]:
    return lambda _arguments: event


_EVENT_PARSERS: dict[str, Optional[Callable[[list[Any]], RedrawEvent]]] = {
    "set_title": _parse_set_title,
    "set_icon": None,
    "mode_info_set": _parse_mode_info_set,
    "option_set": _parse_option_set,
    "mode_change": _parse_mode_change,
    "mouse_on": _constant(MouseOn()),
    "mouse_off": _constant(MouseOff()),
    "busy_start": _constant(BusyStart()),
    "busy_stop": _constant(BusyStop()),
    "flush": _constant(Flush()),
    "grid_resize": _parse_grid_resize,
    "default_colors_set": _parse_default_colors,
    "hl_attr_define": _parse_hl_attr_define,
    "grid_line": _parse_grid_line,
    "grid_clear": _parse_grid_clear,
    "grid_destroy": _parse_grid_destroy,
    "grid_cursor_goto": _parse_grid_cursor_goto,
    "grid_scroll": _parse_grid_scroll,
    "win_pos": _parse_win_pos,
    "win_float_pos": _parse_win_float_pos,
    "win_external_pos": _parse_win_external_pos,
    "win_hide": _parse_win_hide,
    "win_close": _parse_win_close,
    "msg_set_pos": _parse_msg_set_pos,
    "win_viewport": _parse_win_viewport,
    "cmdline_show": _parse_cmdline_show,
    "cmdline_pos": _parse_cmdline_pos,
    "cmdline_special_char": _parse_cmdline_special_char,
    "cmdline_hide": _constant(CommandLineHide()),
    "cmdline_block_show": _parse_cmdline_block_show,
    "cmdline_block_append": _parse_cmdline_block_append,
    "cmdline_block_hide": _constant(CommandLineBlockHide()),
    "msg_show": _parse_msg_show,
    "msg_clear": _constant(MessageClear()),
    "msg_showmode": _parse_msg_showmode,
    "msg_showcmd": _parse_msg_showcmd,
    "msg_ruler": _parse_msg_ruler,
    "msg_history_show": _parse_msg_history_show,
}


def parse_redraw_event(event_value: Any) -> list[RedrawEvent]:
    """Parse one ``[name, args...]`` batch of a redraw notification.

    Each argument list yields one event; unknown and ignored event names
    yield nothing. Raises ParseError on malformed input.
    """
    contents = _parse_array(event_value)
    if not contents:
        raise _format_error(contents)
    name = _parse_string(contents[0])
    parser = _EVENT_PARSERS.get(name)
    events: list[RedrawEvent] = []
    for arguments in contents[1:]:
        parameters = _parse_array(arguments)
        if parser is not None:
            events.append(parser(parameters))
    return events