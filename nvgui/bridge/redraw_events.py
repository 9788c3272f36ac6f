"""Redraw events sent by NeoVim and the values they carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from nvgui.editor.cursor import CursorMode
from nvgui.editor.style import Colors, Style

StyledContent = list[tuple[int, str]]


class ParseError(ValueError):
    """A redraw event or one of its values did not have the expected form.

    ``kind`` names what was expected, for example ``"u64"`` or ``"event"``.
    """

    def __init__(self, kind: str, value: Any) -> None:
        self.kind = kind
        self.value = value
        shown = value if kind == "event" else repr(value)
        super().__init__(f"invalid {kind} format {shown}")


@dataclass(frozen=True)
class GridLineCell:
    """One cell of a ``grid_line`` event; unset fields are None."""

    text: str
    highlight_id: Optional[int] = None
    repeat: Optional[int] = None


class MessageKind(Enum):
    UNKNOWN = ""
    CONFIRM = "confirm"
    CONFIRM_SUBSTITUTE = "confirm_sub"
    ERROR = "emsg"
    ECHO = "echo"
    ECHO_MESSAGE = "echomsg"
    ECHO_ERROR = "echoerr"
    LUA_ERROR = "lua_error"
    RPC_ERROR = "rpc_error"
    RETURN_PROMPT = "return_prompt"
    QUICK_FIX = "quickfix"
    SEARCH_COUNT = "search_count"
    WARNING = "wmsg"

    @classmethod
    def parse(cls, kind: str) -> MessageKind:
        """Map a message kind name to a member; unknown names give UNKNOWN."""
        try:
            return cls(kind)
        except ValueError:
            return cls.UNKNOWN


class GuiOptionKind(Enum):
    """The UI options NeoVim reports; values are the option names."""

    ARABIC_SHAPE = "arabicshape"
    AMBI_WIDTH = "ambiwidth"
    EMOJI = "emoji"
    GUI_FONT = "guifont"
    GUI_FONT_SET = "guifontset"
    GUI_FONT_WIDE = "guifontwide"
    LINE_SPACE = "linespace"
    PUMBLEND = "pumblend"
    SHOW_TAB_LINE = "showtabline"
    TERM_GUI_COLORS = "termguicolors"
    UNKNOWN = None


@dataclass(frozen=True)
class GuiOption:
    """An option value; ``name`` defaults to the option name of ``kind``."""

    kind: GuiOptionKind
    value: Any
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name and self.kind is not GuiOptionKind.UNKNOWN:
            object.__setattr__(self, "name", self.kind.value)


class WindowAnchor(Enum):
    NORTH_WEST = "NW"
    NORTH_EAST = "NE"
    SOUTH_WEST = "SW"
    SOUTH_EAST = "SE"

    @classmethod
    def parse(cls, value: str) -> WindowAnchor:
        """Parse an anchor name such as ``"NW"``; raise ParseError otherwise."""
        try:
            return cls(value)
        except ValueError:
            raise ParseError("window anchor", value) from None

    def modified_top_left(
        self, grid_left: float, grid_top: float, width: int, height: int
    ) -> tuple[float, float]:
        """The top left corner of a window of this size anchored at the point."""
        left = float(grid_left)
        top = float(grid_top)
        if self in (WindowAnchor.NORTH_EAST, WindowAnchor.SOUTH_EAST):
            left -= width
        if self in (WindowAnchor.SOUTH_WEST, WindowAnchor.SOUTH_EAST):
            top -= height
        return (left, top)


@dataclass(frozen=True)
class EditorMode:
    """The editor's main mode; names NeoVim reports but we do not know are kept."""

    name: str
    unknown: bool = False

    NORMAL: ClassVar[EditorMode]
    INSERT: ClassVar[EditorMode]
    VISUAL: ClassVar[EditorMode]
    REPLACE: ClassVar[EditorMode]
    CMDLINE: ClassVar[EditorMode]

    @classmethod
    def parse(cls, name: str) -> EditorMode:
        """Map a mode name from NeoVim to a mode."""
        known = _KNOWN_MODES.get(name)
        return known if known is not None else cls(name, unknown=True)


EditorMode.NORMAL = EditorMode("normal")
EditorMode.INSERT = EditorMode("insert")
EditorMode.VISUAL = EditorMode("visual")
EditorMode.REPLACE = EditorMode("replace")
EditorMode.CMDLINE = EditorMode("cmdline")

_KNOWN_MODES = {
    "normal": EditorMode.NORMAL,
    "insert": EditorMode.INSERT,
    "visual": EditorMode.VISUAL,
    "replace": EditorMode.REPLACE,
    "cmdline_normal": EditorMode.CMDLINE,
}


@dataclass(frozen=True)
class SetTitle:
    title: str


@dataclass(frozen=True)
class ModeInfoSet:
    cursor_modes: list[CursorMode] = field(default_factory=list)


@dataclass(frozen=True)
class OptionSet:
    gui_option: GuiOption


@dataclass(frozen=True)
class ModeChange:
    mode: EditorMode
    mode_index: int


@dataclass(frozen=True)
class MouseOn:
    pass


@dataclass(frozen=True)
class MouseOff:
    pass


@dataclass(frozen=True)
class BusyStart:
    pass


@dataclass(frozen=True)
class BusyStop:
    pass


@dataclass(frozen=True)
class Flush:
    pass


@dataclass(frozen=True)
class Resize:
    grid: int
    width: int
    height: int


@dataclass(frozen=True)
class DefaultColorsSet:
    colors: Colors


@dataclass(frozen=True)
class HighlightAttributesDefine:
    id: int
    style: Style


@dataclass(frozen=True)
class GridLine:
    grid: int
    row: int
    column_start: int
    cells: list[GridLineCell] = field(default_factory=list)


@dataclass(frozen=True)
class Clear:
    grid: int


@dataclass(frozen=True)
class Destroy:
    grid: int


@dataclass(frozen=True)
class CursorGoto:
    grid: int
    row: int
    column: int


@dataclass(frozen=True)
class Scroll:
    grid: int
    top: int
    bottom: int
    left: int
    right: int
    rows: int
    columns: int


@dataclass(frozen=True)
class WindowPosition:
    grid: int
    start_row: int
    start_column: int
    width: int
    height: int


@dataclass(frozen=True)
class WindowFloatPosition:
    grid: int
    anchor: WindowAnchor
    anchor_grid: int
    anchor_row: float
    anchor_column: float
    focusable: bool
    sort_order: Optional[int] = None


@dataclass(frozen=True)
class WindowExternalPosition:
    grid: int


@dataclass(frozen=True)
class WindowHide:
    grid: int


@dataclass(frozen=True)
class WindowClose:
    grid: int


@dataclass(frozen=True)
class MessageSetPosition:
    grid: int
    row: int
    scrolled: bool
    separator_character: str


@dataclass(frozen=True)
class WindowViewport:
    grid: int
    top_line: float
    bottom_line: float
    current_line: float
    current_column: float
    line_count: Optional[float] = None


@dataclass(frozen=True)
class CommandLineShow:
    content: StyledContent
    position: int
    first_character: str
    prompt: str
    indent: int
    level: int


@dataclass(frozen=True)
class CommandLinePosition:
    position: int
    level: int


@dataclass(frozen=True)
class CommandLineSpecialCharacter:
    character: str
    shift: bool
    level: int


@dataclass(frozen=True)
class CommandLineHide:
    pass


@dataclass(frozen=True)
class CommandLineBlockShow:
    lines: list[StyledContent] = field(default_factory=list)


@dataclass(frozen=True)
class CommandLineBlockAppend:
    line: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class CommandLineBlockHide:
    pass


@dataclass(frozen=True)
class MessageShow:
    kind: MessageKind
    content: StyledContent
    replace_last: bool


@dataclass(frozen=True)
class MessageClear:
    pass


@dataclass(frozen=True)
class MessageShowMode:
    content: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class MessageShowCommand:
    content: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class MessageRuler:
    content: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class MessageHistoryShow:
    entries: list[tuple[MessageKind, StyledContent]] = field(default_factory=list)


RedrawEvent = Union[
    SetTitle,
    ModeInfoSet,
    OptionSet,
    ModeChange,
    MouseOn,
    MouseOff,
    BusyStart,
    BusyStop,
    Flush,
    Resize,
    DefaultColorsSet,
    HighlightAttributesDefine,
    GridLine,
    Clear,
    Destroy,
    CursorGoto,
    Scroll,
    WindowPosition,
    WindowFloatPosition,
    WindowExternalPosition,
    WindowHide,
    WindowClose,
    MessageSetPosition,
    WindowViewport,
    CommandLineShow,
    CommandLinePosition,
    CommandLineSpecialCharacter,
    CommandLineHide,
    CommandLineBlockShow,
    CommandLineBlockAppend,
    CommandLineBlockHide,
    MessageShow,
    MessageClear,
    MessageShowMode,
    MessageShowCommand,
    MessageRuler,
    MessageHistoryShow,
]