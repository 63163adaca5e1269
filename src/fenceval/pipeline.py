"""Evaluate a selection and put the result where the user can see it."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fenceval.config import FencevalConfig
from fenceval.errors import PreconditionViolation
from fenceval.fencing import classify
from fenceval.formatting import (
    ANNOTATION_PREFIX,
    RESULT_FENCE,
    format_replacement,
    render_outcome,
)

if TYPE_CHECKING:
    from fenceval.document import Document, Location
    from fenceval.execution.base import EvaluationOutcome, Runtime

logger = logging.getLogger(__name__)


class PipelineState(enum.Enum):
    """Where a request currently is in the pipeline."""

    IDLE = "idle"
    EVALUATING = "evaluating"
    CLASSIFYING = "classifying"
    FORMATTING = "formatting"
    INSERTED = "inserted"


@dataclass(frozen=True)
class EvaluationRequest:
    """A snippet to evaluate, the line the cursor was on and where it was selected."""

    source: str
    cursor_line: int
    selection: tuple[Location, Location] | None = None


@dataclass(frozen=True)
class ViewResult:
    """What the transient result view shows."""

    source: str
    result_text: str
    is_error: bool


def insert_result(
    document: Document,
    source: str,
    outcome: EvaluationOutcome,
    inside_code_block: bool,
    *,
    annotation_prefix: str = ANNOTATION_PREFIX,
    fence: str = RESULT_FENCE,
) -> str:
    """Replace the document's selection with ``source`` and its result.

    Exactly one ``replace_selection`` call is made.

    Returns:
        The replacement text

    Raises:
        PreconditionViolation: If the document has no active selection
    """
    if not document.get_selection():
        raise PreconditionViolation("No active selection to replace")

    replacement = format_replacement(
        source,
        render_outcome(outcome),
        inside_code_block,
        annotation_prefix=annotation_prefix,
        fence=fence,
    )
    document.replace_selection(replacement)
    return replacement


class EvaluationPipeline:
    """Runs selections through a runtime and delivers the results.

    Two entry points mirror the two user actions: ``evaluate_to_view``
    leaves the document untouched, ``evaluate_in_place`` writes the result
    back under the selection.
    """

    def __init__(self, runtime: Runtime, config: FencevalConfig | None = None):
        self.runtime = runtime
        self.config = config or FencevalConfig()
        self.state = PipelineState.IDLE

    def _enter(self, state: PipelineState) -> None:
        logger.debug("Pipeline %s -> %s", self.state.value, state.value)
        self.state = state

    def build_request(self, document: Document) -> EvaluationRequest:
        """Capture the current selection and cursor line.

        Raises:
            PreconditionViolation: If nothing is selected
        """
        source = document.get_selection()
        if not source:
            raise PreconditionViolation("Select some code to evaluate")
        return EvaluationRequest(
            source=source,
            cursor_line=document.get_cursor_line(),
            selection=document.get_selection_range(),
        )

    def _restore_selection(self, document: Document, request: EvaluationRequest) -> None:
        """Put the selection back where the request found it.

        Raises:
            PreconditionViolation: If the selected text itself was changed
        """
        if request.selection is not None and (
            document.get_selection_range() != request.selection
        ):
            logger.info("Selection moved during evaluation, restoring it")
            document.select(*request.selection)
        if document.get_selection() != request.source:
            raise PreconditionViolation("Selected code changed during evaluation")

    async def evaluate(self, request: EvaluationRequest) -> EvaluationOutcome:
        """Evaluate the request's source. Failures come back as ERROR outcomes."""
        self._enter(PipelineState.EVALUATING)
        try:
            outcome = await self.runtime.evaluate(request.source)
        except BaseException:
            self._enter(PipelineState.IDLE)
            raise
        if not outcome.is_success:
            logger.info("Evaluation of %d chars failed", len(request.source))
        return outcome

    async def evaluate_to_view(self, document: Document) -> ViewResult:
        """Evaluate the selection for display without touching the document."""
        request = self.build_request(document)
        outcome = await self.evaluate(request)
        self._enter(PipelineState.IDLE)
        return ViewResult(
            source=request.source,
            result_text=render_outcome(outcome),
            is_error=not outcome.is_success,
        )

    async def evaluate_in_place(self, document: Document) -> str:
        """Evaluate the selection and splice the result into the document.

        Returns:
            The text that replaced the selection
        """
        request = self.build_request(document)
        outcome = await self.evaluate(request)

        try:
            self._restore_selection(document, request)

            self._enter(PipelineState.CLASSIFYING)
            inside = classify(document, request.cursor_line)

            self._enter(PipelineState.FORMATTING)
            replacement = insert_result(
                document,
                request.source,
                outcome,
                inside,
                annotation_prefix=self.config.annotation_prefix,
                fence=self.config.result_fence,
            )
            self._enter(PipelineState.INSERTED)
        finally:
            self._enter(PipelineState.IDLE)
        return replacement
