"""Classify whether a document line sits inside a fenced code block.

The scan works in two passes around the cursor line:

1. Walk backward from the cursor line to the top of the document, toggling
   the state on every fence marker. This establishes fence parity up to and
   including the cursor line.
2. Peek forward from the line after the cursor and toggle once on the first
   fence marker found, then stop.

Both passes always run in that order, so an unbalanced document still gets a
definite answer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol, Union

from fenceval.errors import PreconditionViolation
from fenceval.fencing.state import FenceState

logger = logging.getLogger(__name__)

FENCE = "```"

# A document with no fence markers is treated as one implicit script block.
INITIAL_STATE = FenceState.INSIDE


class LineSource(Protocol):
    """Read-only line access needed by the classifier."""

    def line_count(self) -> int: ...

    def get_line(self, index: int) -> str: ...


Lines = Union[LineSource, Sequence[str]]


def is_fence_marker(line: str) -> bool:
    """True if the line opens or closes a fenced block."""
    return line.strip().startswith(FENCE)


def _line_access(document: Lines) -> tuple[int, Callable[[int], str]]:
    if isinstance(document, Sequence) and not isinstance(document, str):
        return len(document), document.__getitem__
    return document.line_count(), document.get_line


def classify_state(document: Lines, cursor_line: int) -> FenceState:
    """Compute the fence state at ``cursor_line``.

    Args:
        document: Line source or plain sequence of lines
        cursor_line: Zero-based index of the line holding the cursor

    Returns:
        FenceState.INSIDE or FenceState.OUTSIDE

    Raises:
        PreconditionViolation: If cursor_line is outside the document
    """
    line_count, get_line = _line_access(document)

    if line_count == 0 and cursor_line == 0:
        return INITIAL_STATE
    if not 0 <= cursor_line < line_count:
        raise PreconditionViolation(
            f"Cursor line {cursor_line} out of range for {line_count} lines"
        )

    state = INITIAL_STATE
    for i in range(cursor_line, -1, -1):
        if is_fence_marker(get_line(i)):
            state = state.toggled()

    for i in range(cursor_line + 1, line_count):
        if is_fence_marker(get_line(i)):
            state = state.toggled()
            break

    logger.debug("Line %d classified as %s", cursor_line, state.value)
    return state


def classify(document: Lines, cursor_line: int) -> bool:
    """True if ``cursor_line`` lies inside a fenced code block."""
    return classify_state(document, cursor_line).is_inside
