"""Rich UI components for the ebookshelf CLI."""

from typing import Callable, Iterable, Optional

from rich.console import Console
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from .activity_log import ActivityEntry
from .models import Book
from .service import CatalogStats

console = Console()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_skip(message: str) -> None:
    """Print a skip message with circle."""
    console.print(f"[dim]○[/dim] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def create_spinner(message: str):
    """Create a spinner context for long operations."""
    return console.status(f"[dim]{message}[/dim]", spinner="dots")


def print_import_summary(added: int, skipped: int) -> None:
    """Print import summary."""
    if skipped > 0:
        console.print(f"\nImported [bold]{added}[/bold] books ({skipped} skipped)")
    else:
        console.print(f"\nImported [bold]{added}[/bold] books")


def display_book_table(
    books: Iterable[Book],
    max_rows: int = 50,
    title_width: int = 50,
    author_width: int = 30,
) -> None:
    """Display books in a table format."""
    table = Table(show_header=True, header_style="dim", box=None, padding=(0, 2))
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Title", style="white", no_wrap=False, max_width=title_width)
    table.add_column("Author", style="dim", no_wrap=False, max_width=author_width)
    table.add_column("Category", no_wrap=True)
    table.add_column("Format", style="cyan", no_wrap=True)

    count = 0
    for book in books:
        table.add_row(
            str(book.book_id),
            book.display_title(title_width),
            book.display_author(author_width),
            book.category,
            book.format,
        )
        count += 1
        if count >= max_rows:
            break

    console.print(table)

    if count == 0:
        print_info("No books found.")
    elif count == max_rows:
        print_info(f"Showing first {max_rows} books. Use search to narrow down.")


def display_stats(stats: CatalogStats) -> None:
    """Display catalogue statistics."""
    console.print(f"Catalogue: [bold]{stats.total}[/bold] books\n")

    if stats.category_counts:
        console.print("[dim]By Category:[/dim]")
        for category, count in stats.category_counts.items():
            console.print(f"  {category:<20} {count:>4}")
        console.print()

    if stats.format_counts:
        console.print("[dim]By Format:[/dim]")
        for fmt, count in stats.format_counts.items():
            console.print(f"  {fmt:<20} {count:>4}")


def display_activity(entries: list[ActivityEntry]) -> None:
    """Display activity log entries, newest first."""
    if not entries:
        print_info("No activity recorded.")
        return

    table = Table(show_header=True, header_style="dim", box=None, padding=(0, 2))
    table.add_column("When", style="dim", no_wrap=True)
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Source", style="dim", no_wrap=True)
    table.add_column("Book", no_wrap=False, max_width=50)

    for entry in entries:
        if entry.book_id is not None:
            book = f"#{entry.book_id} {entry.title or ''}".strip()
            if entry.format:
                book += f" ({entry.format})"
        else:
            book = ", ".join(f"{k}={v}" for k, v in entry.details.items())
        table.add_row(entry.timestamp[:19].replace("T", " "), entry.action, entry.source, book)

    console.print(table)


def interactive_menu(
    options: list[tuple[str, str, str]],
    header: Optional[Callable[[], None]] = None,
) -> Optional[str]:
    """Display an interactive menu and return the selected option key.

    Args:
        options: List of (key, shortcut, label) tuples
        header: Optional callback to print a header above the options

    Returns:
        The selected key or None if user quits
    """
    if header:
        header()
    shortcuts: dict[str, str] = {}
    console.print()
    for key, shortcut, label in options:
        shortcuts[shortcut] = key
        console.print(f"  [dim]\\[{shortcut}][/dim] {label}")
    console.print("  [dim]\\[q][/dim] Quit")
    console.print()

    while True:
        choice = Prompt.ask("[dim]Select[/dim]", default="q")

        if choice.lower() == "q":
            return None

        if choice.lower() in shortcuts:
            return shortcuts[choice.lower()]

        console.print("[dim]Invalid choice[/dim]")


def prompt_new_book() -> dict[str, str]:
    """Prompt for the fields of a new book.

    Returns:
        Keyword arguments for ``CatalogService.add_book``
    """
    return {
        "title": Prompt.ask("[dim]Title[/dim]", default=""),
        "author": Prompt.ask("[dim]Author[/dim]", default=""),
        "category": Prompt.ask("[dim]Category[/dim]", default=""),
        "format": Prompt.ask("[dim]Format[/dim]", default=""),
    }


def prompt_search() -> str:
    """Prompt for a search query."""
    return Prompt.ask("[dim]Search[/dim]", default="")


def prompt_book_id() -> int:
    """Prompt for a book ID.

    Non-numeric input is rejected and the prompt repeats.
    """
    return IntPrompt.ask("[dim]Book ID[/dim]")


def prompt_csv_path() -> str:
    """Prompt for a CSV file path."""
    return Prompt.ask("[dim]CSV file path[/dim]", default="")
