"""Base types for snippet evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable


class ExecutionStatus(Enum):
    """Status of an evaluation."""

    PENDING = auto()
    RUNNING = auto()
    SUCCESS = auto()
    ERROR = auto()


@dataclass
class EvaluationOutcome:
    """Result of evaluating a snippet against a runtime.

    A finished outcome is either SUCCESS, carrying ``result_value`` and/or
    captured ``output``, or ERROR, carrying the rendered ``error`` text.
    """

    code: str
    status: ExecutionStatus = ExecutionStatus.PENDING
    output: str = ""
    error: str = ""
    result_value: Any = None
    exception: BaseException | None = None

    @property
    def is_complete(self) -> bool:
        """Check if evaluation is complete."""
        return self.status in (ExecutionStatus.SUCCESS, ExecutionStatus.ERROR)

    @property
    def is_success(self) -> bool:
        """Check if evaluation was successful."""
        return self.status == ExecutionStatus.SUCCESS


class Runtime(Protocol):
    """Anything that can evaluate a snippet of source text."""

    async def evaluate(self, source: str) -> EvaluationOutcome: ...


class BaseRuntime:
    """Base class for runtimes with common functionality."""

    def __init__(self, on_error: Callable[[str], None] | None = None) -> None:
        """Initialize base runtime.

        Args:
            on_error: Callback invoked with the error text of failed evaluations
        """
        self.on_error = on_error
