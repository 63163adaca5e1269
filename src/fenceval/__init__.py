from .document import Document, TextDocument
from .errors import PreconditionViolation
from .execution import EvaluationOutcome, PythonRuntime, SubprocessRuntime
from .fencing import FenceState, classify
from .formatting import format_replacement, render_outcome
from .pipeline import EvaluationPipeline, EvaluationRequest, ViewResult, insert_result

__all__ = [
    "Document",
    "TextDocument",
    "PreconditionViolation",
    "EvaluationOutcome",
    "PythonRuntime",
    "SubprocessRuntime",
    "FenceState",
    "classify",
    "format_replacement",
    "render_outcome",
    "EvaluationPipeline",
    "EvaluationRequest",
    "ViewResult",
    "insert_result",
]
__version__ = "0.1.0"
