"""Read-only view of the selected environment."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static

from requestie.constants import VALUE_COLUMNS
from requestie.models import Environment
from requestie.widgets.pair_table import PairTable


class EnvironmentView(Vertical):
    """Name and key/value table of one environment."""

    def compose(self) -> ComposeResult:
        yield Static(id="environment-title")
        yield Label("Values", classes="section")
        yield PairTable(VALUE_COLUMNS, id="values")

    def show(self, environment: Environment) -> None:
        self.query_one("#environment-title", Static).update(
            Text(environment.name or "(unnamed)", style="bold")
        )
        self.query_one("#values", PairTable).load(environment.values)
