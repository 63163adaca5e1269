"""Runtime that evaluates snippets with an external interpreter."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fenceval.execution.base import BaseRuntime, EvaluationOutcome, ExecutionStatus
from fenceval.execution.errors import execution_error_handler

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

# The snippet arrives as ARGV[0]; its value is printed the way a REPL would.
DEFAULT_RUBY_COMMAND = ("ruby", "-e", "print eval(ARGV[0]).to_s")


class SubprocessRuntime(BaseRuntime):
    """Evaluates each snippet in a fresh interpreter process.

    The snippet is passed as the final argument of ``command``. The default
    command evaluates it with Ruby's ``eval`` and prints the value. Stdout becomes the
    result text; a non-zero exit status makes the outcome an ERROR carrying
    stderr. There is no state shared between evaluations.

    Security Note: Snippets run with full user permissions without sandboxing.
    """

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_RUBY_COMMAND,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__(on_error=on_error)
        if not command:
            raise ValueError("Interpreter command must not be empty")
        self.command = list(command)

    async def evaluate(self, source: str) -> EvaluationOutcome:
        """Run the interpreter on ``source`` and collect its output."""
        outcome = EvaluationOutcome(code=source, status=ExecutionStatus.RUNNING)
        process = None

        try:
            with execution_error_handler(outcome, self.on_error):
                logger.debug("Running %s", self.command[0])
                process = await asyncio.create_subprocess_exec(
                    *self.command,
                    source,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
                stdout, stderr = await process.communicate()

                outcome.output = stdout.decode("utf-8", errors="replace")
                outcome.error = stderr.decode("utf-8", errors="replace")
                if process.returncode == 0:
                    outcome.status = ExecutionStatus.SUCCESS
                else:
                    outcome.status = ExecutionStatus.ERROR
                    if not outcome.error:
                        outcome.error = f"Exited with status {process.returncode}"
                    logger.warning(
                        "%s exited with status %d", self.command[0], process.returncode
                    )
                    if self.on_error:
                        self.on_error(outcome.error)
        except asyncio.CancelledError:
            if process and process.returncode is None:
                try:
                    process.terminate()
                    await asyncio.wait_for(process.wait(), timeout=1.0)
                except asyncio.TimeoutError:
                    process.kill()
                    await process.wait()
            raise

        return outcome
