"""Method picker modal — choose the HTTP method of a request."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from requestie.models import HttpMethod


class MethodPickerScreen(ModalScreen[HttpMethod | None]):
    """Modal listing every HttpMethod in declaration order.

    The request's current method is pre-highlighted.  Dismisses with the
    chosen method on Enter or None on Escape/q.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
        Binding("q", "cancel", show=False),
        Binding("j", "cursor_down", show=False),
        Binding("k", "cursor_up", show=False),
    ]

    DEFAULT_CSS = """
    MethodPickerScreen {
        align: center middle;
    }
    #method-list {
        width: 30;
        height: auto;
        max-height: 12;
        border: round $primary;
    }
    """

    def __init__(self, current: HttpMethod) -> None:
        super().__init__()
        self._current = current

    def compose(self) -> ComposeResult:
        yield Static("  Method", id="method-title")
        yield OptionList(
            *[Option(str(method), id=method.name) for method in HttpMethod],
            id="method-list",
        )
        yield Static("  Enter to select · Esc/q to cancel", id="method-hint")

    def on_mount(self) -> None:
        option_list = self.query_one("#method-list", OptionList)
        option_list.highlighted = list(HttpMethod).index(self._current)
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if event.option_id is not None:
            self.dismiss(HttpMethod.from_name(event.option_id))

    def action_cursor_down(self) -> None:
        self.query_one("#method-list", OptionList).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#method-list", OptionList).action_cursor_up()

    def action_cancel(self) -> None:
        self.dismiss(None)
