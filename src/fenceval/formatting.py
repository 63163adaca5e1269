"""Turn evaluation outcomes into text that can be spliced into a document."""

from __future__ import annotations

from fenceval.execution.base import EvaluationOutcome, ExecutionStatus

ANNOTATION_PREFIX = "# => "
RESULT_FENCE = "```"


def render_outcome(outcome: EvaluationOutcome) -> str:
    """Reduce an outcome to its display string.

    Failures render their error text. Successes render the expression value
    when there is one, otherwise whatever the snippet printed.
    """
    if outcome.status == ExecutionStatus.ERROR:
        return outcome.error.rstrip("\n")
    if outcome.result_value is not None:
        return str(outcome.result_value)
    return outcome.output.rstrip("\n")


def format_replacement(
    source: str,
    result_text: str,
    inside_code_block: bool,
    *,
    annotation_prefix: str = ANNOTATION_PREFIX,
    fence: str = RESULT_FENCE,
) -> str:
    """Build the text that replaces the evaluated selection.

    Inside a fenced block the result becomes a comment line under the code.
    Outside one, the result gets its own fenced block so it stands apart
    from the prose around it.

    Args:
        source: The evaluated snippet, kept verbatim
        result_text: Rendered outcome
        inside_code_block: Fence context at the cursor line
        annotation_prefix: Comment marker put before an inline result
        fence: Delimiter line for a synthesized result block

    Returns:
        Replacement text for the selection
    """
    if inside_code_block:
        return f"{source}\n{annotation_prefix}{result_text}"
    return f"{source}\n{fence}\n{result_text}\n{fence}"
