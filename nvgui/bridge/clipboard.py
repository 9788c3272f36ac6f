"""Conversion between clipboard text and NeoVim's register contents."""

from __future__ import annotations

import sys
from typing import Any, Optional

_DEFAULT_ENDLINE = "\r\n" if sys.platform == "win32" else "\n"


def get_clipboard_contents(text: str, file_format: Optional[str] = None) -> list[Any]:
    """Turn clipboard text into ``[lines, paste_mode]`` for NeoVim.

    Carriage returns are dropped, then added back before each newline when
    the file format is ``"dos"``. The paste mode is always ``"v"``.
    """
    stripped = text.replace("\r", "")
    if file_format == "dos":
        stripped = stripped.replace("\n", "\r\n")
    return [stripped.split("\n"), "v"]


def set_clipboard_contents(value: Any, endline: str = _DEFAULT_ENDLINE) -> str:
    """Join NeoVim's register lines into clipboard text.

    Non-string entries are skipped and carriage returns removed. Raises
    ValueError when ``value`` is not a list.
    """
    if not isinstance(value, (list, tuple)):
        raise ValueError("can't build string from provided text")
    lines = (line.replace("\r", "") for line in value if isinstance(line, str))
    return endline.join(lines)