"""CSV import logic for the ebookshelf catalogue.

Reads a CSV file with ``Title``, ``Author``, ``Category`` and ``Format``
columns and adds each row through the catalogue service, so every imported
book passes the same rules as one typed into the menu.
"""

from pathlib import Path
from typing import Callable, Optional

import pandas as pd

from .errors import CatalogError, ImportFailedError
from .models import Book
from .service import CatalogService

_COLUMNS = {
    "title": "Title",
    "author": "Author",
    "category": "Category",
    "format": "Format",
}


def _parse_str(value) -> str:
    """Parse a string value from a CSV cell.

    Parameters
    ----------
    value : any
        Raw value from the CSV. May be ``NaN``.

    Returns
    -------
    str
        Stripped string, or ``""`` if the value is missing.
    """
    if pd.isna(value):
        return ""
    return str(value).strip()


def _row_values(row: pd.Series) -> dict[str, str]:
    """Map a CSV row to ``CatalogService.add_book`` keyword arguments."""
    return {field: _parse_str(row.get(column, "")) for field, column in _COLUMNS.items()}


def import_csv(
    csv_path: Path,
    service: CatalogService,
    on_book: Optional[Callable[[str, Optional[Book]], None]] = None,
) -> tuple[int, int]:
    """Import books from a CSV file into *service*.

    Rows rejected by the service (for instance with an empty title or
    author) are skipped.

    Parameters
    ----------
    csv_path : Path
        Path to the CSV file.
    service : CatalogService
        Catalogue receiving the books.
    on_book : callable, optional
        Callback invoked for each row as ``on_book(label, book)`` where
        *book* is the stored ``Book``, or ``None`` when the row was skipped.
        *label* is the row title, or ``"row N"`` when the title is empty.

    Returns
    -------
    tuple of (int, int)
        ``(added_count, skipped_count)``.

    Raises
    ------
    ImportFailedError
        If the file is empty, is not valid CSV or is not UTF-8 text.
        Nothing is added in that case.
    """
    try:
        df = pd.read_csv(csv_path, dtype=str)
    except pd.errors.EmptyDataError as e:
        raise ImportFailedError(f"{csv_path} has no CSV data") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ImportFailedError(f"Cannot read {csv_path}: {e}") from e

    added = 0
    skipped = 0

    for index, row in df.iterrows():
        values = _row_values(row)
        label = values["title"] or f"row {index + 1}"

        try:
            book = service.add_book(**values)
        except CatalogError:
            skipped += 1
            if on_book:
                on_book(label, None)
            continue

        added += 1
        if on_book:
            on_book(label, book)

    return added, skipped
