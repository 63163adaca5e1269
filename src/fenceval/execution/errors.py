from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from fenceval.execution.base import EvaluationOutcome, ExecutionStatus

logger = logging.getLogger(__name__)


def format_exception(exc: BaseException) -> str:
    """Render an exception as a single ``Type: message`` line."""
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"


@contextmanager
def execution_error_handler(
    outcome: EvaluationOutcome,
    on_error: Callable[[str], None] | None = None,
) -> Iterator[EvaluationOutcome]:
    """Context manager that turns evaluation failures into an ERROR outcome.

    Args:
        outcome: The EvaluationOutcome to modify on errors
        on_error: Optional callback to invoke with error messages

    Yields:
        The outcome object for use within the context

    Example:
        async def evaluate(self, source: str) -> EvaluationOutcome:
            outcome = EvaluationOutcome(code=source)
            with execution_error_handler(outcome, self.on_error):
                outcome.result_value = run(source)
                outcome.status = ExecutionStatus.SUCCESS
            return outcome
    """
    try:
        yield outcome
    except asyncio.CancelledError:
        outcome.status = ExecutionStatus.ERROR
        outcome.error = "[Evaluation cancelled]"
        if on_error:
            on_error(outcome.error)
        raise
    except Exception as e:
        outcome.status = ExecutionStatus.ERROR
        outcome.exception = e
        outcome.error = format_exception(e)
        logger.warning("Evaluation failed: %s", outcome.error)
        if on_error:
            on_error(outcome.error)
