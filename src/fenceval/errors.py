"""Exceptions raised by the evaluation pipeline."""

from __future__ import annotations


class PreconditionViolation(ValueError):
    """The caller invoked the pipeline with invalid input.

    Raised for an empty selection or a cursor line outside the document.
    These are integration mistakes of the host, not evaluation failures,
    which are always reported through the outcome instead.
    """
