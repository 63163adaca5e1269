"""Popup that shows an evaluated snippet and its result."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from fenceval.pipeline import ViewResult


class ResultScreen(ModalScreen[None]):
    """Transient view of a result. Nothing here touches the document."""

    DEFAULT_CSS = """
    ResultScreen {
        align: center middle;
    }
    ResultScreen > Vertical {
        width: 80%;
        height: auto;
        max-height: 80%;
        border: round $primary;
        background: $surface;
        padding: 1 2;
    }
    ResultScreen .result-code {
        background: $panel;
        padding: 0 1;
    }
    ResultScreen .result-output {
        margin: 1 0;
    }
    ResultScreen .result-error {
        color: $error;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    def __init__(self, result: ViewResult) -> None:
        super().__init__()
        self.view_result = result

    def compose(self) -> ComposeResult:
        output_classes = "result-output"
        if self.view_result.is_error:
            output_classes += " result-error"
        with Vertical():
            yield Static(self.view_result.source or "code", classes="result-code", markup=False)
            yield Static(
                self.view_result.result_text or "result",
                classes=output_classes,
                id="result-output",
                markup=False,
            )
            yield Button("Close", id="close-result")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-result":
            self.dismiss()

    def action_close(self) -> None:
        self.dismiss()
