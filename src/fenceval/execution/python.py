"""In-process Python runtime with a persistent session."""

from __future__ import annotations

import asyncio
import sys
import threading
from io import StringIO
from typing import TYPE_CHECKING, Any

from fenceval.execution.base import BaseRuntime, EvaluationOutcome, ExecutionStatus
from fenceval.execution.errors import execution_error_handler

if TYPE_CHECKING:
    from collections.abc import Callable


class PythonRuntime(BaseRuntime):
    """Evaluates Python snippets with persistent session context.

    The runtime keeps one globals/locals dictionary across evaluations, so
    variables, functions and imports defined by one snippet are visible to
    the next one (similar to a Python REPL).

    Evaluation happens in the default thread pool so the event loop stays
    responsive while a snippet runs.

    Security Note: Code is executed with eval()/exec() without sandboxing.
    Only evaluate trusted code.
    """

    def __init__(self, on_error: Callable[[str], None] | None = None) -> None:
        super().__init__(on_error=on_error)
        self._globals: dict[str, Any] = {
            "__name__": "__main__",
            "__builtins__": __builtins__,
        }
        self._locals: dict[str, Any] = {}
        self._exec_lock = threading.Lock()

    def reset(self) -> None:
        """Reset the session context."""
        self._globals = {"__name__": "__main__", "__builtins__": __builtins__}
        self._locals = {}

    async def evaluate(self, source: str) -> EvaluationOutcome:
        """Evaluate a Python snippet.

        Expressions produce ``result_value``; statements produce only
        captured output. Exceptions never escape: they are recorded on the
        returned outcome with status ERROR.

        Args:
            source: The Python code to evaluate.

        Returns:
            EvaluationOutcome with status, value, output and any error.
        """
        outcome = EvaluationOutcome(code=source, status=ExecutionStatus.RUNNING)

        with execution_error_handler(outcome, self.on_error):
            loop = asyncio.get_running_loop()
            result_value, stdout, stderr = await loop.run_in_executor(
                None, self._evaluate_sync, source
            )
            outcome.result_value = result_value
            outcome.output = stdout
            outcome.error = stderr
            outcome.status = ExecutionStatus.SUCCESS

        return outcome

    def _evaluate_sync(self, source: str) -> tuple[Any, str, str]:
        """Evaluate synchronously (called in thread pool)."""
        with self._exec_lock:
            old_stdout, old_stderr = sys.stdout, sys.stderr
            captured_stdout = StringIO()
            captured_stderr = StringIO()
            sys.stdout = captured_stdout
            sys.stderr = captured_stderr

            result_value = None
            try:
                # Try to compile as expression first (for return value)
                try:
                    compiled = compile(source, "<snippet>", "eval")
                except SyntaxError:
                    compiled = compile(source, "<snippet>", "exec")
                    exec(compiled, self._globals, self._locals)
                else:
                    result_value = eval(compiled, self._globals, self._locals)

                return (
                    result_value,
                    captured_stdout.getvalue(),
                    captured_stderr.getvalue(),
                )
            finally:
                sys.stdout, sys.stderr = old_stdout, old_stderr
