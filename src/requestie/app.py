"""Main application: drives a Session's document from the terminal."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import DataTable, Footer, Header, OptionList

from requestie.config import load_theme, save_theme
from requestie.constants import APP_SUBTITLE, APP_TITLE
from requestie.document import Document
from requestie.domain.selection import EnvironmentPanel, RequestPanel
from requestie.models import HttpMethod
from requestie.screens.body import BodyScreen
from requestie.screens.confirm import ConfirmScreen
from requestie.screens.edit import EditScreen
from requestie.screens.help import HelpScreen
from requestie.screens.method_picker import MethodPickerScreen
from requestie.screens.pair import PairScreen
from requestie.session import Session
from requestie.widgets.main_view import MainView
from requestie.widgets.pair_table import PairTable
from requestie.widgets.panel_list import PanelList, parse_panel_option_id

logger = logging.getLogger(__name__)


class RequestieApp(App):
    """requestie — HTTP request collection editor."""

    CSS_PATH = "app.tcss"
    TITLE = APP_TITLE

    _persist_theme: bool = False

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("?", "toggle_help", "Help"),
        Binding("a", "add_request", "Request+"),
        Binding("e", "add_environment", "Env+"),
        Binding("x", "delete_item", "Delete"),
        Binding("r", "rename", "Rename"),
        Binding("m", "pick_method", "Method"),
        Binding("u", "edit_url", "URL"),
        Binding("b", "edit_body", "Body"),
        Binding("o", "add_row", "Row+"),
        Binding("i", "edit_row", "Edit row"),
        Binding("d", "delete_row", "dd Delete row"),
    ]

    def __init__(self, session: Session, persist_theme: bool = False) -> None:
        super().__init__()
        self._session = session
        self._document: Document = session.open()
        self._persist_theme = persist_theme
        self._d_pressed: bool = False

    @property
    def document(self) -> Document:
        return self._document

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="body"):
            yield PanelList(id="panels")
            yield MainView(id="main")
        yield Footer()

    def on_mount(self) -> None:
        if self._persist_theme:
            saved_theme = load_theme()
            if saved_theme:
                self.theme = saved_theme
        self._refresh_view()
        self._panels().focus()

    def watch_theme(self, theme: str) -> None:
        """Persist theme changes whenever the theme is changed."""
        if self._persist_theme:
            save_theme(theme)

    async def action_quit(self) -> None:
        """Save the document, then exit."""
        logger.info("quit requested, saving document")
        self._session.close()
        self.exit()

    def _panels(self) -> PanelList:
        return self.query_one("#panels", PanelList)

    def _row_table(self) -> PairTable:
        """Return the headers or values table, whichever is on screen."""
        if isinstance(self._document.selected, RequestPanel):
            return self.query_one("#headers", PairTable)
        return self.query_one("#values", PairTable)

    def _refresh_view(self) -> None:
        """Re-render the sidebar and the editor from the document."""
        self._panels().load(self._document)
        self.query_one("#main", MainView).show(self._document)
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        n_requests = len(self._document.requests)
        n_envs = len(self._document.environments)
        requests = "1 request" if n_requests == 1 else f"{n_requests} requests"
        envs = "1 environment" if n_envs == 1 else f"{n_envs} environments"
        self.sub_title = f"{APP_SUBTITLE} · {requests} · {envs}"

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Open the request or environment picked in the sidebar."""
        if event.option_list.id != "panels":
            return
        event.stop()
        selection = parse_panel_option_id(event.option_id)
        if isinstance(selection, RequestPanel):
            self._document.select_request(selection.index)
        elif isinstance(selection, EnvironmentPanel):
            self._document.select_environment(selection.index)
        else:
            return
        self._refresh_view()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter on a header or value row opens its editor."""
        event.stop()
        self.action_edit_row()

    def action_toggle_help(self) -> None:
        self.push_screen(HelpScreen())

    def action_add_request(self) -> None:
        idx = self._document.add_request()
        self._refresh_view()
        self.notify(f"Added {self._document.requests[idx].name}", timeout=2)

    def action_add_environment(self) -> None:
        idx = self._document.add_environment()
        self._refresh_view()
        self.notify(f"Added {self._document.environments[idx].name}", timeout=2)

    def action_delete_item(self) -> None:
        """Delete the selected request or environment after confirmation."""
        selected = self._document.selected
        if isinstance(selected, RequestPanel):
            idx = selected.index
            name = self._document.requests[idx].name

            def on_confirm_request(confirmed: bool | None) -> None:
                if confirmed and self._document.remove_request(idx):
                    self._refresh_view()
                    self.notify(f"Deleted {name}", timeout=2)

            self.push_screen(ConfirmScreen(f"Delete request  {name}?"), on_confirm_request)
            return

        idx = selected.index
        if len(self._document.environments) == 1:
            self.notify("The last environment cannot be deleted", severity="warning", timeout=3)
            return
        name = self._document.environments[idx].name

        def on_confirm_environment(confirmed: bool | None) -> None:
            if confirmed and self._document.remove_environment(idx):
                self._refresh_view()
                self.notify(f"Deleted {name}", timeout=2)

        self.push_screen(ConfirmScreen(f"Delete environment  {name}?"), on_confirm_environment)

    def action_rename(self) -> None:
        """Rename the selected request or environment."""
        selected = self._document.selected
        idx = selected.index
        if isinstance(selected, RequestPanel):
            current = self._document.requests[idx].name

            def on_rename_request(name: str | None) -> None:
                if name is not None:
                    self._document.update_request(idx, name=name)
                    self._refresh_view()

            self.push_screen(
                EditScreen("Rename request", current, allow_blank=False), on_rename_request
            )
            return

        current = self._document.environments[idx].name

        def on_rename_environment(name: str | None) -> None:
            if name is not None:
                self._document.rename_environment(idx, name)
                self._refresh_view()

        self.push_screen(
            EditScreen("Rename environment", current, allow_blank=False), on_rename_environment
        )

    def _selected_request_index(self) -> int | None:
        """Return the selected request's index, notifying if none is selected."""
        selected = self._document.selected
        if isinstance(selected, RequestPanel):
            return selected.index
        self.notify("Select a request first", timeout=2)
        return None

    def action_pick_method(self) -> None:
        idx = self._selected_request_index()
        if idx is None:
            return

        def on_pick(method: HttpMethod | None) -> None:
            if method is not None:
                self._document.update_request(idx, method=method)
                self._refresh_view()

        self.push_screen(MethodPickerScreen(self._document.requests[idx].method), on_pick)

    def action_edit_url(self) -> None:
        idx = self._selected_request_index()
        if idx is None:
            return

        def on_save(url: str | None) -> None:
            if url is not None:
                self._document.update_request(idx, url=url)
                self._refresh_view()

        self.push_screen(
            EditScreen("URL", self._document.requests[idx].url, placeholder="https://"),
            on_save,
        )

    def action_edit_body(self) -> None:
        idx = self._selected_request_index()
        if idx is None:
            return
        request = self._document.requests[idx]

        def on_save(body: str | None) -> None:
            if body is not None:
                self._document.update_request(idx, body=body)
                self._refresh_view()

        self.push_screen(BodyScreen(request.name, request.body), on_save)

    def action_add_row(self) -> None:
        """Append an empty header or value row and open it for editing."""
        selected = self._document.selected
        if isinstance(selected, RequestPanel):
            self._document.add_header(selected.index)
            count = len(self._document.requests[selected.index].headers)
        else:
            self._document.add_environment_value(selected.index)
            count = len(self._document.environments[selected.index].values)
        self._refresh_view()
        table = self._row_table()
        table.move_cursor(row=count - 1)
        table.focus()
        self._edit_row(count - 1)

    def action_edit_row(self) -> None:
        row = self._row_table().selected_index()
        if row is not None:
            self._edit_row(row)

    def _edit_row(self, row: int) -> None:
        selected = self._document.selected
        idx = selected.index
        if isinstance(selected, RequestPanel):
            current = self._document.requests[idx].headers[row]

            def on_save_header(pair: tuple[str, str] | None) -> None:
                if pair is not None:
                    name, value = pair
                    self._document.set_header(idx, row, name=name, value=value)
                    self._refresh_view()

            self.push_screen(
                PairScreen(f"Header {row + 1}", ("Name", "Value"), tuple(current)),
                on_save_header,
            )
            return

        current = self._document.environments[idx].values[row]

        def on_save_value(pair: tuple[str, str] | None) -> None:
            if pair is not None:
                key, value = pair
                self._document.set_environment_value(idx, row, key=key, value=value)
                self._refresh_view()

        self.push_screen(
            PairScreen(f"Value {row + 1}", ("Key", "Value"), tuple(current)),
            on_save_value,
        )

    def action_delete_row(self) -> None:
        """Implement vim-style dd: delete the highlighted row on second d press."""
        if not self._d_pressed:
            self._d_pressed = True
            self.set_timer(0.5, self._reset_d)
            return
        self._d_pressed = False
        row = self._row_table().selected_index()
        if row is None:
            return
        selected = self._document.selected
        if isinstance(selected, RequestPanel):
            self._document.remove_header(selected.index, row)
        else:
            self._document.remove_environment_value(selected.index, row)
        self._refresh_view()

    def _reset_d(self) -> None:
        self._d_pressed = False
