"""Tests for the subprocess-backed runtime."""

import shutil
import sys

import pytest

from fenceval.execution.base import ExecutionStatus
from fenceval.execution.external import SubprocessRuntime
from fenceval.formatting import render_outcome


@pytest.fixture
def runtime():
    # Any interpreter taking the snippet as its last argument will do.
    return SubprocessRuntime([sys.executable, "-c"])


class TestSubprocessRuntime:
    @pytest.mark.asyncio
    async def test_stdout_is_result(self, runtime):
        outcome = await runtime.evaluate("print(1+1)")
        assert outcome.status == ExecutionStatus.SUCCESS
        assert render_outcome(outcome) == "2"

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_error(self, runtime):
        outcome = await runtime.evaluate("1/0")
        assert outcome.status == ExecutionStatus.ERROR
        assert "ZeroDivisionError" in render_outcome(outcome)

    @pytest.mark.asyncio
    async def test_silent_failure_reports_status(self, runtime):
        outcome = await runtime.evaluate("import sys; sys.exit(3)")
        assert outcome.status == ExecutionStatus.ERROR
        assert outcome.error == "Exited with status 3"

    @pytest.mark.asyncio
    async def test_no_state_between_runs(self, runtime):
        await runtime.evaluate("x = 1")
        outcome = await runtime.evaluate("print(x)")
        assert outcome.status == ExecutionStatus.ERROR

    @pytest.mark.asyncio
    async def test_missing_interpreter(self):
        errors = []
        runtime = SubprocessRuntime(
            ["fenceval-no-such-interpreter", "-e"], on_error=errors.append
        )
        outcome = await runtime.evaluate("1+1")
        assert outcome.status == ExecutionStatus.ERROR
        assert "FileNotFoundError" in outcome.error
        assert len(errors) == 1

    def test_empty_command(self):
        with pytest.raises(ValueError):
            SubprocessRuntime([])

    def test_default_command_is_ruby(self):
        assert SubprocessRuntime().command[:2] == ["ruby", "-e"]


@pytest.mark.skipif(shutil.which("ruby") is None, reason="ruby not installed")
class TestRubyRuntime:
    @pytest.mark.asyncio
    async def test_expression_value(self):
        outcome = await SubprocessRuntime().evaluate("1+1")
        assert outcome.status == ExecutionStatus.SUCCESS
        assert render_outcome(outcome) == "2"

    @pytest.mark.asyncio
    async def test_string_value(self):
        outcome = await SubprocessRuntime().evaluate("'ab' * 2")
        assert render_outcome(outcome) == "abab"

    @pytest.mark.asyncio
    async def test_multiple_statements(self):
        outcome = await SubprocessRuntime().evaluate("x = 20\nx + 22")
        assert render_outcome(outcome) == "42"

    @pytest.mark.asyncio
    async def test_error(self):
        outcome = await SubprocessRuntime().evaluate("1/0")
        assert outcome.status == ExecutionStatus.ERROR
        assert "ZeroDivisionError" in render_outcome(outcome)
