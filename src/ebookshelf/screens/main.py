"""Main screen with stats, search, and book table.

This is the default screen shown on launch. It displays a stats bar, a
search input, and a sortable table of all books. Keys: ``/`` search,
``a`` add, ``d`` delete highlighted book, ``q`` quit.
"""

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Input

from .. import __version__
from ..errors import CatalogError
from ..widgets.book_table import BookTable
from ..widgets.stats_panel import StatsPanel


class MainScreen(Screen):
    """Default screen showing stats, search, and a sortable book table."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search", key_display="/"),
        Binding("a", "add_book", "Add"),
        Binding("d", "delete_book", "Delete"),
        Binding("q", "quit", "Quit"),
    ]

    def compose(self) -> ComposeResult:
        """Build the screen layout: stats, search input, book table, footer."""
        yield StatsPanel()
        yield Input(placeholder="Search by title or author...", id="search-input")
        yield BookTable()
        yield Footer()

    def on_mount(self) -> None:
        """Load data and focus the book table on first mount."""
        self._refresh_data()
        self._focus_table()

    def on_screen_resume(self) -> None:
        """Refresh data when returning from the add screen."""
        self._refresh_data()
        self._focus_table()

    def _focus_table(self) -> None:
        """Move keyboard focus to the inner ``DataTable``."""
        try:
            self.query_one(BookTable).query_one(DataTable).focus()
        except NoMatches:
            pass

    def _current_books(self) -> list:
        """Return the books matching the search box, or all books."""
        catalog = self.app.catalog
        query = self.query_one("#search-input", Input).value.strip()
        if query:
            return catalog.search_books(query)
        return catalog.list_books()

    def _refresh_stats(self) -> None:
        """Update the stats panel from the catalogue."""
        catalog = self.app.catalog
        stats = catalog.catalog_stats()
        self.query_one(StatsPanel).update_stats(
            __version__,
            stats.total,
            len(stats.category_counts),
            catalog.peek_next_id(),
        )

    def _refresh_data(self) -> None:
        """Reload stats and the table, keeping the current sort order."""
        self._refresh_stats()
        self.query_one(BookTable).refresh_books(self._current_books())

    def on_input_changed(self, event: Input.Changed) -> None:
        """Trigger a search whenever the search input text changes."""
        if event.input.id == "search-input":
            self._do_search(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Move focus from the search input to the table on Enter."""
        if event.input.id == "search-input":
            self._focus_table()

    @work(exclusive=True, group="search", thread=True)
    def _do_search(self, query: str) -> None:
        """Run a search in a background thread.

        Parameters
        ----------
        query : str
            The search term entered by the user.
        """
        catalog = self.app.catalog
        if query.strip():
            books = catalog.search_books(query)
        else:
            books = catalog.list_books()
        self.app.call_from_thread(self._update_table, books)

    def _update_table(self, books: list) -> None:
        """Replace the book table contents (called from the search worker)."""
        self.query_one(BookTable).refresh_books(books)

    def on_key(self, event) -> None:
        """Handle Escape: move focus from search to table, or clear search."""
        if event.key == "escape":
            focused = self.app.focused
            if isinstance(focused, Input):
                self._focus_table()
                event.prevent_default()
            elif isinstance(focused, DataTable):
                search_input = self.query_one("#search-input", Input)
                if search_input.value.strip():
                    search_input.value = ""
                    self._refresh_data()
                    event.prevent_default()

    def action_focus_search(self) -> None:
        """Focus the search input (bound to ``/``)."""
        self.query_one("#search-input", Input).focus()

    def action_add_book(self) -> None:
        """Push the add book screen (bound to ``a``)."""
        from .book_add import BookAddScreen
        self.app.push_screen(BookAddScreen())

    def action_delete_book(self) -> None:
        """Delete the highlighted book (bound to ``d``)."""
        book_id = self.query_one(BookTable).get_selected_id()
        if book_id is None:
            self.notify("No book selected", severity="warning")
            return
        by_id = {b.book_id: b for b in self.app.catalog.list_books()}
        try:
            self.app.catalog.delete_book(book_id)
        except CatalogError as e:
            self.notify(str(e), severity="error")
            return
        self.app.activity.record("delete", "tui", by_id.get(book_id))
        self.notify(f"Deleted #{book_id}")
        self._refresh_data()

    def action_quit(self) -> None:
        """Exit the application (bound to ``q``)."""
        self.app.exit()
