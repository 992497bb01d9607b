"""Edit screen — modal for changing a single line of text (name, URL)."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label

_HINT = "Enter to save · Escape to cancel"


class EditScreen(ModalScreen[str | None]):
    """Modal that lets the user edit one text field.

    Dismisses with the new text on save, or None on cancel.  With
    ``allow_blank=False`` an empty or whitespace-only entry is refused with
    an inline error instead.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    DEFAULT_CSS = """
    EditScreen {
        align: center middle;
    }
    #edit-container {
        width: 70;
        height: auto;
        border: round $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def __init__(
        self,
        title: str,
        current_value: str,
        *,
        placeholder: str = "",
        allow_blank: bool = True,
    ) -> None:
        super().__init__()
        self._title = title
        self._current_value = current_value
        self._placeholder = placeholder
        self._allow_blank = allow_blank

    def compose(self) -> ComposeResult:
        with Vertical(id="edit-container"):
            yield Label(self._title, id="edit-title", markup=False)
            yield Input(value=self._current_value, placeholder=self._placeholder, id="edit-value")
            yield Label(_HINT, id="edit-hint")

    def on_mount(self) -> None:
        input = self.query_one("#edit-value", Input)
        input.focus()
        input.cursor_position = len(self._current_value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self._allow_blank and not event.value.strip():
            self._show_error("Cannot be blank")
            return
        self.dismiss(event.value)

    def _show_error(self, message: str) -> None:
        hint = self.query_one("#edit-hint", Label)
        hint.update(f"[red]{message}[/]")
        self.set_timer(2.0, lambda: hint.update(_HINT))

    def action_cancel(self) -> None:
        self.dismiss(None)
