"""Activity log of catalogue changes.

The CLI menu and the TUI record every successful add, delete and CSV import
in a JSON Lines file (``~/.ebookshelf/data/activity.log`` by default, see
``Settings.activity_log_path``). The catalogue core itself never writes
here, and nothing in the log is read back into the catalogue.
"""

import fcntl
import json
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, Literal, Optional, get_args

from .models import Book
from .settings import Settings

Action = Literal["create", "delete", "import"]
Source = Literal["cli", "tui"]

ACTIONS: tuple[str, ...] = get_args(Action)
SOURCES: tuple[str, ...] = get_args(Source)


@dataclass
class ActivityEntry:
    """One recorded change.

    ``book_id``, ``title``, ``category`` and ``format`` describe the book
    for ``create`` and ``delete`` entries and stay empty for ``import``,
    whose counts live in ``details``.
    """

    timestamp: str
    action: Action
    source: Source
    book_id: Optional[int] = None
    title: Optional[str] = None
    category: Optional[str] = None
    format: Optional[str] = None
    details: dict = field(default_factory=dict)

    @classmethod
    def from_json(cls, line: str) -> Optional["ActivityEntry"]:
        """Parse one log line, returning ``None`` for anything unreadable."""
        try:
            data = json.loads(line)
            entry = cls(**data)
        except (json.JSONDecodeError, TypeError):
            return None
        if entry.action not in ACTIONS or entry.source not in SOURCES:
            return None
        return entry


@contextmanager
def _locked(path: Path, mode: str, lock: int) -> Iterator:
    """Open *path* holding a POSIX ``flock`` for the duration of the block."""
    with open(path, mode, encoding="utf-8") as f:
        fcntl.flock(f.fileno(), lock)
        try:
            yield f
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)


class ActivityLog:
    """Append-only JSON Lines log bound to one file.

    Parameters
    ----------
    path : Path
        The log file. Parent directories are created on first write.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def from_settings(cls, settings: Settings) -> "ActivityLog":
        """Return the log configured by ``settings.activity_log_path``."""
        return cls(settings.resolve_activity_log_path())

    def record(
        self,
        action: Action,
        source: Source,
        book: Optional[Book] = None,
        **details,
    ) -> ActivityEntry:
        """Append an entry and return it.

        Parameters
        ----------
        action : {"create", "delete", "import"}
            What happened.
        source : {"cli", "tui"}
            Which interface made the change.
        book : Book, optional
            The book created or deleted.
        **details
            Extra JSON-serialisable data, e.g. import counts.

        Raises
        ------
        ValueError
            If *action* or *source* is not one of the known values.
        """
        if action not in ACTIONS:
            raise ValueError(f"Unknown activity action: {action!r}")
        if source not in SOURCES:
            raise ValueError(f"Unknown activity source: {source!r}")

        entry = ActivityEntry(
            timestamp=datetime.now().isoformat(),
            action=action,
            source=source,
            details=details,
        )
        if book is not None:
            entry.book_id = book.book_id
            entry.title = book.title
            entry.category = book.category
            entry.format = book.format

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with _locked(self.path, "a", fcntl.LOCK_EX) as f:
            f.write(json.dumps(asdict(entry), ensure_ascii=False) + "\n")
        return entry

    def recent(self, limit: int = 100) -> list[ActivityEntry]:
        """Return up to *limit* entries, newest first.

        Lines that are not valid entries are ignored.
        """
        if not self.path.exists():
            return []

        with _locked(self.path, "r", fcntl.LOCK_SH) as f:
            entries = [
                entry
                for entry in (ActivityEntry.from_json(line) for line in f if line.strip())
                if entry is not None
            ]

        # Timestamps can tie on coarse clocks; file order breaks ties
        ordered = sorted(enumerate(entries), key=lambda p: (p[1].timestamp, p[0]), reverse=True)
        return [entry for _, entry in ordered[:limit]]
