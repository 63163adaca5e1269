"""Textual host application and the fenceval command."""

import argparse
import logging
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static, TextArea

from fenceval.config import FencevalConfig, load_config
from fenceval.errors import PreconditionViolation
from fenceval.execution import create_runtime
from fenceval.pipeline import EvaluationPipeline
from fenceval.ui import ResultScreen, TextAreaDocument

logger = logging.getLogger(__name__)


class FencevalApp(App):
    """Markdown editor that evaluates selected snippets."""

    TITLE = "fenceval"

    DEFAULT_CSS = """
    #editor {
        height: 1fr;
    }
    .header-bar {
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("f5", "run_in_editor", "Run in Editor", priority=True),
        Binding("f6", "run_in_view", "Run in View", priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: FencevalConfig, path: Path | None = None):
        self.config = config
        self.note_path = path
        self.pipeline = EvaluationPipeline(create_runtime(config), config)
        self.evaluating = False
        super().__init__()

    def compose(self) -> ComposeResult:
        name = str(self.note_path) if self.note_path else "untitled"
        yield Static(f"{name} · {self.config.runtime}", classes="header-bar")
        text = ""
        if self.note_path and self.note_path.exists():
            text = self.note_path.read_text()
        yield TextArea(text, id="editor")
        yield Footer()

    @property
    def editor(self) -> TextArea:
        return self.query_one("#editor", TextArea)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        # The editor is not reachable while the result popup is open.
        if action in ("run_in_view", "run_in_editor", "save"):
            if isinstance(self.screen, ResultScreen):
                return False
        if action in ("run_in_view", "run_in_editor"):
            return not self.evaluating
        return True

    def action_run_in_view(self) -> None:
        """Evaluate the selection and show the result in a popup."""
        self.evaluating = True
        self._evaluate(in_place=False)

    def action_run_in_editor(self) -> None:
        """Evaluate the selection and insert the result below it."""
        self.evaluating = True
        self._evaluate(in_place=True)

    @work(exclusive=False)
    async def _evaluate(self, in_place: bool) -> None:
        editor = self.editor
        document = TextAreaDocument(editor)
        # Keep the user from editing the snippet while the runtime has it.
        editor.read_only = True
        try:
            if in_place:
                await self.pipeline.evaluate_in_place(document)
            else:
                result = await self.pipeline.evaluate_to_view(document)
                self.push_screen(ResultScreen(result))
        except PreconditionViolation as e:
            self.notify(str(e), severity="warning")
        finally:
            editor.read_only = False
            self.evaluating = False

    def action_save(self) -> None:
        """Write the editor contents back to the note."""
        if self.note_path is None:
            self.notify("No file to save to", severity="warning")
            return
        self.note_path.write_text(self.editor.text)
        self.notify(f"Saved {self.note_path}")


def main():
    """Main entry point for the fenceval command."""
    parser = argparse.ArgumentParser()
    parser.add_argument("file", nargs="?", default=None, help="Markdown file to edit")
    parser.add_argument(
        "--runtime", default=None, help="Runtime to evaluate with (python, ruby)"
    )
    parser.add_argument(
        "--logging", action="store_true", default=None, help="Enable logging"
    )
    args = parser.parse_args()

    # Load configuration from ~/.config/fenceval/init.py
    config, config_error = load_config()

    # Command-line arguments override config
    if args.runtime is not None:
        config.runtime = args.runtime
    if args.logging:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename="fenceval.log",
            filemode="a",  # append mode
        )
        logging.getLogger("fenceval").setLevel(logging.DEBUG)

    try:
        app = FencevalApp(config, Path(args.file) if args.file else None)
    except ValueError as e:
        parser.error(str(e))

    # Show config error if any (as a notification once app starts)
    if config_error:
        app.call_later(
            lambda: app.notify(
                f"Config error: {config_error}", severity="warning", timeout=10
            )
        )

    app.run()


if __name__ == "__main__":
    main()
