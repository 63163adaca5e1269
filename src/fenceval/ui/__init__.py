"""Textual widgets for the fenceval host application."""

from __future__ import annotations

from fenceval.ui.document import TextAreaDocument
from fenceval.ui.result_screen import ResultScreen

__all__ = ["ResultScreen", "TextAreaDocument"]
