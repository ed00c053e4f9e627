"""
Indentation-aware line writer.

Collects output one line at a time at the current nesting depth. Blank lines
are written without trailing indentation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager


class IndentedTextWriter:
    """Line buffer with a nesting cursor."""

    INDENT = "    "  # 4 spaces

    def __init__(self, indent_level: int = 0):
        self.indent_level = indent_level
        self._lines: list[str] = []

    def write_line(self, text: str = "") -> None:
        """Write one line at the current depth."""
        if text.strip():
            self._lines.append(self.INDENT * self.indent_level + text)
        else:
            self._lines.append("")

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_line(line)

    @contextmanager
    def nest(self) -> Iterator[IndentedTextWriter]:
        """Increase the depth for the duration of the block."""
        self.indent_level += 1
        try:
            yield self
        finally:
            self.indent_level -= 1

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def getvalue(self) -> str:
        """Return the collected text, one trailing newline per line."""
        return "".join(f"{line}\n" for line in self._lines)
