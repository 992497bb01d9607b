"""Read-only view of the selected request.

Fields are edited through modal screens opened by the app; this widget only
renders the current state of a Request.
"""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static

from requestie.constants import HEADER_COLUMNS
from requestie.models import HttpMethod, Request
from requestie.widgets.pair_table import PairTable

_METHOD_STYLES: dict[HttpMethod, str] = {
    HttpMethod.GET: "bold green",
    HttpMethod.HEAD: "bold cyan",
    HttpMethod.PUT: "bold yellow",
    HttpMethod.POST: "bold blue",
    HttpMethod.PATCH: "bold magenta",
    HttpMethod.DELETE: "bold red",
}


def request_line(request: Request) -> Text:
    """Return ``METHOD url`` styled for display, e.g. ``GET https://example.com``."""
    url = Text(request.url) if request.url else Text("(no URL)", style="dim italic")
    return Text.assemble((str(request.method), _METHOD_STYLES[request.method]), " ", url)


class RequestView(Vertical):
    """Name, method and URL, headers table, and body of one request."""

    def compose(self) -> ComposeResult:
        yield Static(id="request-title")
        yield Static(id="request-line")
        yield Label("Headers", classes="section")
        yield PairTable(HEADER_COLUMNS, id="headers")
        yield Label("Body", classes="section")
        yield Static(id="request-body")

    def show(self, request: Request) -> None:
        self.query_one("#request-title", Static).update(
            Text(request.name or "(unnamed)", style="bold")
        )
        self.query_one("#request-line", Static).update(request_line(request))
        self.query_one("#headers", PairTable).load(request.headers)
        body = Text(request.body) if request.body else Text("(empty)", style="dim italic")
        self.query_one("#request-body", Static).update(body)
