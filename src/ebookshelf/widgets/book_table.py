"""Book table widget with book id tracking and sortable columns."""

from textual.widgets import DataTable, Static

from ..models import Book

# Column key -> sort key function
_COLUMN_SORT_KEY = {
    "id": lambda b: b.book_id or 0,
    "title": lambda b: b.title.casefold(),
    "author": lambda b: b.author.casefold(),
    "category": lambda b: b.category.casefold(),
}

# Column key -> (base label, sort shortcut key, share of width)
_COLUMNS = {
    "id": ("ID", "F1", 0.10),
    "title": ("Title", "F2", 0.40),
    "author": ("Author", "F3", 0.25),
    "category": ("Category", "F4", 0.15),
    "format": ("Format", None, 0.10),
}

# Keyboard key -> column key
_KEY_TO_COLUMN = {
    info[1].lower(): col for col, info in _COLUMNS.items() if info[1] is not None
}


class BookTable(Static):
    """DataTable wrapper that tracks the book id per row."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._id_map: dict = {}  # row_key -> book_id
        self._books: list[Book] = []
        self._sort_column: str = "id"
        self._sort_reverse: bool = False

    def compose(self):
        yield DataTable()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.cursor_type = "row"

    def _header(self, col_key: str) -> str:
        """Build a column header string with sort key hint and indicator."""
        base, shortcut, _share = _COLUMNS[col_key]
        if shortcut is None:
            return base
        indicator = ""
        if col_key == self._sort_column:
            indicator = " ▼" if self._sort_reverse else " ▲"
        return f"{base} [{shortcut}]{indicator}"

    def _add_columns(self, table: DataTable) -> None:
        """Add columns sized to the terminal width."""
        width = self.app.size.width - 2
        for col_key, (_base, _shortcut, share) in _COLUMNS.items():
            table.add_column(
                self._header(col_key), width=max(6, int(width * share)), key=col_key
            )

    def refresh_books(self, books: list[Book]) -> None:
        """Replace book data and re-sort using the current sort column and direction."""
        self._books = list(books)
        self._sort_and_reload()

    def _sort_and_reload(self) -> None:
        """Sort stored books and rebuild the table."""
        table = self.query_one(DataTable)
        table.clear(columns=True)
        self._add_columns(table)
        self._id_map.clear()

        key_fn = _COLUMN_SORT_KEY[self._sort_column]
        for book in sorted(self._books, key=key_fn, reverse=self._sort_reverse):
            row_key = table.add_row(
                str(book.book_id),
                book.display_title(60),
                book.display_author(40),
                book.category,
                book.format,
            )
            self._id_map[row_key] = book.book_id

    def _sort_by(self, col_key: str) -> None:
        """Sort by the given column, toggling direction if already active."""
        if col_key == self._sort_column:
            self._sort_reverse = not self._sort_reverse
        else:
            self._sort_column = col_key
            self._sort_reverse = False
        self._sort_and_reload()

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Sort table when a column header is clicked."""
        col_key = event.column_key.value
        if col_key in _COLUMN_SORT_KEY:
            self._sort_by(col_key)

    def on_key(self, event) -> None:
        """Handle F1-F4 sort shortcuts when the table has focus."""
        col_key = _KEY_TO_COLUMN.get(event.key)
        if col_key is not None and self._books:
            self._sort_by(col_key)
            event.prevent_default()

    def get_selected_id(self) -> int | None:
        """Return the id of the currently highlighted book."""
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return None
        row_key = table.coordinate_to_cell_key(table.cursor_coordinate).row_key
        return self._id_map.get(row_key)
