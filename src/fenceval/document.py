"""Document interface used by the evaluation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from fenceval.errors import PreconditionViolation

Location = tuple[int, int]


class Document(Protocol):
    """The editor operations the pipeline relies on.

    ``replace_selection`` is the only change to the text. ``select`` moves
    the selection without touching the text.
    """

    def line_count(self) -> int: ...

    def get_line(self, index: int) -> str: ...

    def get_selection(self) -> str: ...

    def get_selection_range(self) -> tuple[Location, Location]: ...

    def select(self, anchor: Location, cursor: Location) -> None: ...

    def get_cursor_line(self) -> int: ...

    def replace_selection(self, text: str) -> None: ...


@dataclass
class TextDocument:
    """In-memory document with a single selection.

    Locations are ``(line, column)`` pairs. ``anchor`` is where the selection
    started and ``cursor`` where it ends; the cursor may come before the
    anchor for a backward selection.
    """

    text: str = ""
    anchor: Location = (0, 0)
    cursor: Location = (0, 0)
    _lines: list[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._lines = self.text.split("\n")
        self._check_location(self.anchor)
        self._check_location(self.cursor)

    @classmethod
    def from_lines(
        cls,
        lines: list[str],
        anchor: Location = (0, 0),
        cursor: Location | None = None,
    ) -> TextDocument:
        return cls("\n".join(lines), anchor, anchor if cursor is None else cursor)

    def _check_location(self, location: Location) -> None:
        line, column = location
        if not 0 <= line < len(self._lines) or not 0 <= column <= len(self._lines[line]):
            raise PreconditionViolation(f"Location {location} is outside the document")

    def _offset(self, location: Location) -> int:
        line, column = location
        return sum(len(text) + 1 for text in self._lines[:line]) + column

    def _span(self) -> tuple[int, int]:
        start, end = sorted((self._offset(self.anchor), self._offset(self.cursor)))
        return start, end

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def get_selection(self) -> str:
        start, end = self._span()
        return self.text[start:end]

    def get_selection_range(self) -> tuple[Location, Location]:
        return self.anchor, self.cursor

    def get_cursor_line(self) -> int:
        return self.cursor[0]

    def select(self, anchor: Location, cursor: Location) -> None:
        self._check_location(anchor)
        self._check_location(cursor)
        self.anchor = anchor
        self.cursor = cursor

    def replace_selection(self, text: str) -> None:
        """Replace the selected span and collapse the cursor after it."""
        start, end = self._span()
        self.text = self.text[:start] + text + self.text[end:]
        self._lines = self.text.split("\n")

        inserted = text.split("\n")
        start_line, start_column = sorted((self.anchor, self.cursor))[0]
        if len(inserted) == 1:
            end_location = (start_line, start_column + len(text))
        else:
            end_location = (start_line + len(inserted) - 1, len(inserted[-1]))
        self.anchor = self.cursor = end_location
