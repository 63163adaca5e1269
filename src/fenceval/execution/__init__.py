"""Runtimes that evaluate snippets of script text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fenceval.execution.base import (
    BaseRuntime,
    EvaluationOutcome,
    ExecutionStatus,
    Runtime,
)
from fenceval.execution.errors import execution_error_handler, format_exception
from fenceval.execution.external import SubprocessRuntime
from fenceval.execution.python import PythonRuntime

if TYPE_CHECKING:
    from collections.abc import Callable

    from fenceval.config import FencevalConfig


def create_runtime(
    config: FencevalConfig,
    on_error: Callable[[str], None] | None = None,
) -> Runtime:
    """Create the runtime named by ``config.runtime``.

    Raises:
        ValueError: If the runtime name is not recognised
    """
    name = (config.runtime or "python").lower()
    if name == "python":
        return PythonRuntime(on_error=on_error)
    if name == "ruby":
        return SubprocessRuntime(config.ruby_command, on_error=on_error)
    raise ValueError(f"Unknown runtime: {config.runtime}")


__all__ = [
    "BaseRuntime",
    "EvaluationOutcome",
    "ExecutionStatus",
    "PythonRuntime",
    "Runtime",
    "SubprocessRuntime",
    "create_runtime",
    "execution_error_handler",
    "format_exception",
]
