"""Table of ordered name/value pairs (request headers, environment values)."""

from collections.abc import Sequence

from rich.text import Text
from textual.binding import Binding
from textual.widgets import DataTable


class PairTable(DataTable):
    """Scrollable table of ordered pairs with vim-style navigation.

    Rows are keyed by their position, because pairs have no identity of
    their own: names may repeat and may be blank.  Reloading keeps the
    cursor on the same row number, clamped to the new row count.
    """

    BINDINGS = [
        Binding("j", "cursor_down", show=False),
        Binding("k", "cursor_up", show=False),
    ]

    def __init__(
        self,
        columns: tuple[str, str, str],
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._column_labels = columns

    def _ensure_columns(self) -> None:
        if not self.columns:
            self.add_columns(*self._column_labels)

    def on_mount(self) -> None:
        self.cursor_type = "row"
        self.zebra_stripes = True
        self._ensure_columns()

    def load(self, pairs: Sequence[tuple[str, str]]) -> None:
        """Replace table contents with ``pairs`` in order."""
        self._ensure_columns()
        row = self.cursor_row
        self.clear()
        for i, (first, second) in enumerate(pairs):
            self.add_row(str(i + 1), Text(first), Text(second), key=str(i))
        if self.row_count:
            self.move_cursor(row=min(row, self.row_count - 1))

    def selected_index(self) -> int | None:
        """Return the position of the highlighted pair, or None if empty."""
        if self.row_count == 0:
            return None
        return self.cursor_row
