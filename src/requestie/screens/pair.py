"""Pair screen — modal for editing a header or environment value row."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label


class PairScreen(ModalScreen[tuple[str, str] | None]):
    """Modal with two inputs, one per side of the pair.

    Enter in the first input moves to the second; Enter in the second
    saves.  Dismisses with ``(first, second)`` on save or None on cancel.
    Blank values are allowed on both sides.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    DEFAULT_CSS = """
    PairScreen {
        align: center middle;
    }
    #pair-container {
        width: 70;
        height: auto;
        border: round $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def __init__(self, title: str, labels: tuple[str, str], current: tuple[str, str]) -> None:
        super().__init__()
        self._title = title
        self._labels = labels
        self._current = current

    def compose(self) -> ComposeResult:
        first_label, second_label = self._labels
        first, second = self._current
        with Vertical(id="pair-container"):
            yield Label(self._title, id="pair-title", markup=False)
            yield Input(value=first, placeholder=first_label, id="pair-first")
            yield Input(value=second, placeholder=second_label, id="pair-second")
            yield Label("Tab · Enter to save · Escape to cancel", id="pair-hint")

    def on_mount(self) -> None:
        self.query_one("#pair-first", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "pair-first":
            self.query_one("#pair-second", Input).focus()
            return
        self.dismiss(
            (
                self.query_one("#pair-first", Input).value,
                self.query_one("#pair-second", Input).value,
            )
        )

    def action_cancel(self) -> None:
        self.dismiss(None)
