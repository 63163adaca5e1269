"""Document adapter over a Textual TextArea."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets.text_area import Selection

if TYPE_CHECKING:
    from textual.widgets import TextArea

    from fenceval.document import Location


class TextAreaDocument:
    """Exposes a TextArea through the pipeline's document interface."""

    def __init__(self, text_area: TextArea) -> None:
        self._text_area = text_area

    def line_count(self) -> int:
        return self._text_area.document.line_count

    def get_line(self, index: int) -> str:
        return self._text_area.document.get_line(index)

    def get_selection(self) -> str:
        return self._text_area.selected_text

    def get_selection_range(self) -> tuple[Location, Location]:
        start, end = self._text_area.selection
        return tuple(start), tuple(end)

    def select(self, anchor: Location, cursor: Location) -> None:
        self._text_area.selection = Selection(anchor, cursor)

    def get_cursor_line(self) -> int:
        return self._text_area.cursor_location[0]

    def replace_selection(self, text: str) -> None:
        start, end = sorted(self._text_area.selection)
        self._text_area.replace(text, start, end, maintain_selection_offset=False)
