"""Code fence classification."""

from __future__ import annotations

from fenceval.fencing.classifier import (
    FENCE,
    LineSource,
    classify,
    classify_state,
    is_fence_marker,
)
from fenceval.fencing.state import FenceState

__all__ = [
    "FENCE",
    "FenceState",
    "LineSource",
    "classify",
    "classify_state",
    "is_fence_marker",
]
