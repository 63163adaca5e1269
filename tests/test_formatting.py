"""Tests for result rendering and replacement formatting."""

from fenceval.execution.base import EvaluationOutcome, ExecutionStatus
from fenceval.formatting import format_replacement, render_outcome


class TestFormatReplacement:
    def test_inside_block_annotates(self):
        assert format_replacement("1+1", "2", inside_code_block=True) == "1+1\n# => 2"

    def test_outside_block_synthesizes_fence(self):
        assert (
            format_replacement("1+1", "2", inside_code_block=False)
            == "1+1\n```\n2\n```"
        )

    def test_outside_block_fence_lines_stand_alone(self):
        lines = format_replacement("1+1", "2", inside_code_block=False).split("\n")
        assert lines == ["1+1", "```", "2", "```"]

    def test_custom_annotation_prefix(self):
        text = format_replacement("1+1", "2", True, annotation_prefix="-- ")
        assert text == "1+1\n-- 2"

    def test_custom_fence(self):
        text = format_replacement("1+1", "2", False, fence="```text")
        assert text == "1+1\n```text\n2\n```text"

    def test_multiline_source_kept_verbatim(self):
        source = "x = 1\nx + 1"
        assert format_replacement(source, "2", True) == "x = 1\nx + 1\n# => 2"

    def test_error_text_inside_block(self):
        text = format_replacement("1/0", "ZeroDivisionError: division by zero", True)
        assert text == "1/0\n# => ZeroDivisionError: division by zero"


class TestRenderOutcome:
    def test_value(self):
        outcome = EvaluationOutcome(
            code="1+1", status=ExecutionStatus.SUCCESS, result_value=2
        )
        assert render_outcome(outcome) == "2"

    def test_string_value_unquoted(self):
        outcome = EvaluationOutcome(
            code="'a'", status=ExecutionStatus.SUCCESS, result_value="a"
        )
        assert render_outcome(outcome) == "a"

    def test_falls_back_to_output(self):
        outcome = EvaluationOutcome(
            code="puts 2", status=ExecutionStatus.SUCCESS, output="2\n"
        )
        assert render_outcome(outcome) == "2"

    def test_value_wins_over_output(self):
        outcome = EvaluationOutcome(
            code="f()", status=ExecutionStatus.SUCCESS, output="log\n", result_value=3
        )
        assert render_outcome(outcome) == "3"

    def test_error(self):
        outcome = EvaluationOutcome(
            code="1/0",
            status=ExecutionStatus.ERROR,
            error="ZeroDivisionError: division by zero\n",
        )
        assert render_outcome(outcome) == "ZeroDivisionError: division by zero"

    def test_error_ignores_value(self):
        outcome = EvaluationOutcome(
            code="x", status=ExecutionStatus.ERROR, error="boom", result_value=1
        )
        assert render_outcome(outcome) == "boom"

    def test_nothing_to_show(self):
        outcome = EvaluationOutcome(code="x = 1", status=ExecutionStatus.SUCCESS)
        assert render_outcome(outcome) == ""
