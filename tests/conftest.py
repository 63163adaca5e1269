"""Shared fixtures for fenceval tests."""

import pytest

from fenceval.execution.base import EvaluationOutcome, ExecutionStatus


class FakeRuntime:
    """Runtime returning canned outcomes and recording what it was asked."""

    def __init__(self, results=None, errors=None):
        self.results = results or {}
        self.errors = errors or {}
        self.calls = []

    async def evaluate(self, source):
        self.calls.append(source)
        if source in self.errors:
            return EvaluationOutcome(
                code=source, status=ExecutionStatus.ERROR, error=self.errors[source]
            )
        return EvaluationOutcome(
            code=source,
            status=ExecutionStatus.SUCCESS,
            result_value=self.results.get(source),
        )


@pytest.fixture
def fake_runtime():
    return FakeRuntime(
        results={"1+1": 2, "'a' * 3": "aaa"},
        errors={"1/0": "ZeroDivisionError: division by zero"},
    )


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Provide a temporary config directory."""
    config_dir = tmp_path / "config" / "fenceval"
    config_dir.mkdir(parents=True)
    return config_dir
