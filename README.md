# nvgui

`nvgui` holds editor-side building blocks for a graphical Neovim front end.
It turns the `redraw` notifications that Neovim sends to an attached UI into
typed Python events. It models highlight styles, the cursor and character
grids. It routes events between components and batches draw commands.

It has no dependencies outside the standard library. It draws nothing and
needs no window system, so you can test it and drive it from scripts.

## Installation

Install `nvgui` into your environment like any other Python distribution.
The `test` extra adds `pytest`.

## Modules

| Module | Purpose |
| --- | --- |
| `nvgui.dimensions` | `Dimensions`, a width × height pair that is parsed from and printed as `WIDTHxHEIGHT`, and `parse_window_geometry` |
| `nvgui.channel_utils` | `LoggingSender`, which logs each message at debug level and then puts it on a queue |
| `nvgui.event_aggregator` | `EventAggregator` and the shared `EVENT_AGGREGATOR`, which route events by their exact type to a single receiver |
| `nvgui.redraw_scheduler` | `RedrawScheduler`, which decides whether the next frame needs drawing |
| `nvgui.bridge.redraw_events` | The redraw event classes (`GridLine`, `Resize`, `CursorGoto`, `WindowFloatPosition`, …), plus `GridLineCell`, `GuiOption`, `GuiOptionKind`, `WindowAnchor`, `EditorMode`, `MessageKind` and `ParseError` |
| `nvgui.bridge.event_parser` | `parse_redraw_event` and its helpers `unpack_color`, `parse_style`, `parse_styled_content` and `parse_grid_line_cell` |
| `nvgui.bridge.clipboard` | `get_clipboard_contents` and `set_clipboard_contents`, which convert between clipboard text and Neovim's line lists |
| `nvgui.editor.style` | `Color4f`, `Colors`, `UnderlineStyle` and `Style` |
| `nvgui.editor.cursor` | `CursorShape`, `CursorMode` and `Cursor` |
| `nvgui.editor.grid` | `CharacterGrid` and `default_cell` |
| `nvgui.editor.draw_command_batcher` | `DrawCommandBatcher`, which collects draw commands and sends them as one list |

## Parsing redraw events

Each element of a `redraw` notification's arguments is an event name followed
by one or more parameter lists. `parse_redraw_event` returns one event for
each parameter list. It returns nothing for event names it does not know and
for `set_icon`. It raises `ParseError`, a `ValueError`, when an event or a
value is malformed.

```python
from nvgui.bridge.event_parser import parse_redraw_event
from nvgui.bridge.redraw_events import Resize

events = parse_redraw_event(["grid_resize", [1, 80, 24]])
assert events == [Resize(grid=1, width=80, height=24)]
```

`unpack_color` turns a packed `0xRRGGBB` integer into an opaque `Color4f`.
`parse_style` builds a `Style` from an `hl_attr_define` attribute map. It
ignores attributes whose name or value type it does not expect.

## Geometry

```python
from nvgui.dimensions import Dimensions

size = Dimensions.parse("42x24")
assert size == Dimensions(width=42, height=24)
assert str(size) == "42x24"
```

A malformed geometry raises `ValueError`.

## Grids and the cursor

`CharacterGrid((width, height))` stores `(text, style)` cells row by row.
`get_cell` and `row` return `None` outside the grid. `set_cell` ignores
positions outside the grid. `resize` keeps the cells that still fit.

`Cursor.change_mode` applies a `CursorMode`, looking up its style in a mapping
of highlight ids to `Style` objects. `Cursor.foreground`, `Cursor.background`
and `Style.foreground`, `Style.background` and `Style.special` fall back to
the default `Colors`. They raise `ValueError` when the default colour they
need is unset.

## Routing events and batching draw commands

`EventAggregator.send` delivers an event to the receiver of its type.
`EventAggregator.register_event(SomeType)` returns the `queue.SimpleQueue` for
that type. It includes any events that were sent before registration. A second
registration for the same type raises `RuntimeError`.

`DrawCommandBatcher.queue` collects commands. `send_batch` sends them, in
order, as one `list` through its aggregator, so register for `list` to
receive batches. `RedrawScheduler.should_draw` returns `True` once after
`queue_next_frame`, or once the earliest time passed to `schedule` has gone
by on its clock.

## What this package does not do

`nvgui` does not start or connect to Neovim, and it has no command line
entry point. It does not apply redraw events to windows or to an editor state
of its own. It defines no draw command types and renders nothing. A front end
built on it supplies those parts itself. It passes the parsed events and the
grid, cursor and style models to its own window and rendering code.