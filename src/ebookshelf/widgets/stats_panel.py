"""Stats panel widget displaying catalogue summary.

Shows the application version, book count, category count, and the id the
next added book will receive.
"""

from textual.widgets import Static


class StatsPanel(Static):
    """Single-line stats bar at the top of the main screen."""

    def update_stats(
        self,
        version: str,
        book_count: int,
        category_count: int,
        next_id: int,
    ) -> None:
        """Refresh the stats bar content.

        Parameters
        ----------
        version : str
            Application version string (e.g. ``"0.1.0"``).
        book_count : int
            Total number of books in the catalogue.
        category_count : int
            Number of distinct non-empty categories.
        next_id : int
            Identifier the next added book will receive.
        """
        self.update(
            f"[bold]ebookshelf {version}[/bold]  |  in-memory  |  "
            f"{book_count} books, {category_count} categories  |  "
            f"next id: {next_id}"
        )
