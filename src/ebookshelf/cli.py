"""CLI entry point for the ebookshelf catalogue."""

from pathlib import Path
from typing import Optional

import click

from . import importer, ui
from .activity_log import ActivityLog
from .errors import CatalogError, ImportFailedError, RepositoryNotReadyError
from .memory import InMemoryBookRepository
from .repository import BookRepository
from .service import CatalogService
from .settings import Settings, load_settings


def build_service(repository: Optional[BookRepository] = None) -> CatalogService:
    """Create a catalogue service backed by *repository*.

    A fresh ``InMemoryBookRepository`` is used when none is given.
    """
    if repository is None:
        repository = InMemoryBookRepository()
    return CatalogService(repository)


def _show_books(books, settings: Settings) -> None:
    ui.display_book_table(
        books,
        max_rows=settings.max_rows,
        title_width=settings.title_width,
        author_width=settings.author_width,
    )


@click.group(invoke_without_command=True)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file to use instead of ~/.ebookshelf/ebookshelf-settings.json",
)
@click.pass_context
def main(ctx: click.Context, settings_path: Optional[Path]) -> None:
    """ebookshelf - An in-memory catalogue for your e-books."""
    ctx.obj = load_settings(settings_path)
    if ctx.invoked_subcommand is None:
        try:
            service = build_service()
        except RepositoryNotReadyError as e:
            ui.print_error(str(e))
            ctx.exit(1)
        interactive_mode(service, ctx.obj)


def _run_import(
    service: CatalogService,
    csv_path: Path,
    activity: ActivityLog,
    on_book=None,
) -> bool:
    """Import *csv_path*, log it and print the summary.

    Returns ``False`` when the file could not be read.
    """
    try:
        if on_book is not None:
            added, skipped = importer.import_csv(csv_path, service, on_book=on_book)
        else:
            with ui.create_spinner("Importing books..."):
                added, skipped = importer.import_csv(csv_path, service)
    except ImportFailedError as e:
        ui.print_error(str(e))
        return False

    activity.record("import", "cli", file=str(csv_path), added=added, skipped=skipped)
    ui.print_import_summary(added, skipped)
    return True


@main.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--verbose", "-v", is_flag=True, help="Print one line per CSV row")
@click.pass_context
def import_cmd(ctx: click.Context, csv_file: Path, verbose: bool) -> None:
    """Load books from a CSV file and show the resulting catalogue."""
    settings: Settings = ctx.obj
    service = build_service()

    def on_book(label, book):
        if book is not None:
            ui.print_success(f"Added: #{book.book_id} {book.display_title(60)}")
        else:
            ui.print_skip(f"Skipped: {label} (missing title or author)")

    activity = ActivityLog.from_settings(settings)
    if not _run_import(service, csv_file, activity, on_book=on_book if verbose else None):
        ctx.exit(1)
    _show_books(service.list_books(), settings)


@main.command("activity")
@click.option("--limit", "-n", default=20, show_default=True, help="Number of entries")
@click.pass_obj
def activity_cmd(settings: Settings, limit: int) -> None:
    """Show recent catalogue changes."""
    ui.display_activity(ActivityLog.from_settings(settings).recent(limit))


@main.command("tui")
@click.pass_obj
def tui_cmd(settings: Settings) -> None:
    """Open the full-screen terminal interface."""
    from .app import EbookshelfApp

    EbookshelfApp(settings=settings).run()


def _add_book(service: CatalogService, activity: ActivityLog) -> None:
    values = ui.prompt_new_book()
    try:
        book = service.add_book(**values)
    except CatalogError as e:
        ui.print_error(str(e))
        return
    activity.record("create", "cli", book)
    ui.print_success(f"Added #{book.book_id}: {book.title}")


def _delete_book(service: CatalogService, activity: ActivityLog) -> None:
    book_id = ui.prompt_book_id()
    by_id = {b.book_id: b for b in service.list_books()}
    try:
        service.delete_book(book_id)
    except CatalogError as e:
        ui.print_error(str(e))
        return
    activity.record("delete", "cli", by_id.get(book_id))
    ui.print_success(f"Deleted #{book_id}")


def _import_books(service: CatalogService, activity: ActivityLog) -> None:
    raw_path = ui.prompt_csv_path().strip()
    if not raw_path:
        return
    csv_path = Path(raw_path).expanduser()
    if not csv_path.is_file():
        ui.print_error(f"File not found: {csv_path}")
        return
    _run_import(service, csv_path, activity)


def interactive_mode(service: CatalogService, settings: Settings) -> None:
    """Run the interactive menu mode."""
    ui.console.print("[bold]ebookshelf[/bold] E-book Catalogue\n")
    activity = ActivityLog.from_settings(settings)

    options = [
        ("add", "a", "Add a book"),
        ("list", "l", "List all books"),
        ("search", "s", "Search by title or author"),
        ("delete", "d", "Delete a book (by ID)"),
        ("stats", "t", "Show statistics"),
        ("import", "i", "Import books from CSV"),
    ]

    def header() -> None:
        ui.print_info(f"{service.catalog_stats().total} books in catalogue")

    while True:
        choice = ui.interactive_menu(options, header=header)

        if choice is None:
            break

        if choice == "add":
            _add_book(service, activity)

        elif choice == "list":
            _show_books(service.list_books(), settings)

        elif choice == "search":
            query = ui.prompt_search()
            if query.strip():
                _show_books(service.search_books(query), settings)

        elif choice == "delete":
            _delete_book(service, activity)

        elif choice == "stats":
            ui.display_stats(service.catalog_stats())

        elif choice == "import":
            _import_books(service, activity)

    ui.console.print("\n[dim]Goodbye![/dim]")


if __name__ == "__main__":
    main()
