"""Two-state tracking for code fence classification."""

from __future__ import annotations

import enum


class FenceState(enum.Enum):
    """Whether a scan position is inside or outside a fenced block."""

    INSIDE = "inside"
    OUTSIDE = "outside"

    def toggled(self) -> FenceState:
        """State after crossing a fence marker."""
        if self is FenceState.INSIDE:
            return FenceState.OUTSIDE
        return FenceState.INSIDE

    @property
    def is_inside(self) -> bool:
        return self is FenceState.INSIDE
