"""Body screen — multiline editor for a request body.

The body is raw text; nothing here interprets it as JSON or any other
content type.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, TextArea


class BodyScreen(ModalScreen[str | None]):
    """Modal TextArea for editing a request body.

    ``ctrl+s`` saves from anywhere in the modal and dismisses with the new
    text; Escape dismisses with None.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False, priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
    ]

    DEFAULT_CSS = """
    BodyScreen {
        align: center middle;
    }
    #body-container {
        width: 90%;
        height: 80%;
        border: round $primary;
        background: $surface;
        padding: 0 1;
    }
    #body-text {
        height: 1fr;
    }
    """

    def __init__(self, request_name: str, body: str) -> None:
        super().__init__()
        self._request_name = request_name
        self._body = body

    def compose(self) -> ComposeResult:
        with Vertical(id="body-container"):
            yield Label(f"Body  ·  {self._request_name}", id="body-title", markup=False)
            yield TextArea(self._body, id="body-text", show_line_numbers=True)
            yield Label("ctrl+s to save · Escape to cancel", id="body-hint")

    def on_mount(self) -> None:
        self.query_one("#body-text", TextArea).focus()

    def action_save(self) -> None:
        self.dismiss(self.query_one("#body-text", TextArea).text)

    def action_cancel(self) -> None:
        self.dismiss(None)
