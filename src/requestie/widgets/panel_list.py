"""Sidebar listing every request and environment."""

from rich.text import Text
from textual.binding import Binding
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from requestie.document import Document
from requestie.domain.selection import EnvironmentPanel, PanelSelection, RequestPanel

_REQUEST_PREFIX = "request-"
_ENVIRONMENT_PREFIX = "environment-"


def panel_option_id(selection: PanelSelection) -> str:
    """Return the option ID used for the item a selection points at."""
    if isinstance(selection, RequestPanel):
        return f"{_REQUEST_PREFIX}{selection.index}"
    return f"{_ENVIRONMENT_PREFIX}{selection.index}"


def parse_panel_option_id(option_id: str | None) -> PanelSelection | None:
    """Convert an option ID back into a selection; None for headings."""
    if option_id is None:
        return None
    for prefix, variant in (
        (_REQUEST_PREFIX, RequestPanel),
        (_ENVIRONMENT_PREFIX, EnvironmentPanel),
    ):
        if option_id.startswith(prefix):
            suffix = option_id[len(prefix) :]
            if suffix.isdigit():
                return variant(index=int(suffix))
    return None


def _label(name: str) -> Text:
    return Text(name) if name else Text("(unnamed)", style="dim italic")


class PanelList(OptionList):
    """Two headed sections, Requests then Environments.

    The headings are disabled options so the cursor skips them.  The app
    reloads the list after every mutation; the highlight always follows the
    document's selection.
    """

    BINDINGS = [
        Binding("j", "cursor_down", show=False),
        Binding("k", "cursor_up", show=False),
    ]

    def load(self, document: Document) -> None:
        """Replace the options with the document's requests and environments."""
        self.clear_options()
        self.add_option(Option(Text("Requests", style="bold"), id="heading-requests", disabled=True))
        for i, request in enumerate(document.requests):
            line = Text.assemble((f"{str(request.method):<6} ", "dim"), _label(request.name))
            self.add_option(Option(line, id=panel_option_id(RequestPanel(index=i))))
        self.add_option(
            Option(Text("Environments", style="bold"), id="heading-environments", disabled=True)
        )
        for i, environment in enumerate(document.environments):
            self.add_option(
                Option(_label(environment.name), id=panel_option_id(EnvironmentPanel(index=i)))
            )
        self.highlighted = self.get_option_index(panel_option_id(document.selected))
