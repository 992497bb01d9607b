"""Help overlay screen."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from requestie.constants import HELP_TEXT


class HelpScreen(ModalScreen):
    """Modal overlay listing keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss", show=False),
        Binding("?", "dismiss", show=False),
        Binding("q", "dismiss", show=False),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    #help-container {
        width: auto;
        height: auto;
        border: round $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def compose(self) -> ComposeResult:
        yield Container(
            Static(HELP_TEXT, id="help-text", markup=False),
            id="help-container",
        )

    def on_click(self) -> None:
        """Dismiss on any click."""
        self.dismiss()
