"""Settings management for the ebookshelf catalogue.

Settings are persisted as JSON in ``_EBOOKSHELF_DIR/ebookshelf-settings.json``.
The file is created with defaults on first launch; users edit it directly
and restart the app to apply changes. The catalogue itself is never written
to disk.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

_EBOOKSHELF_DIR = Path.home() / ".ebookshelf"
_DEFAULT_SETTINGS_PATH = _EBOOKSHELF_DIR / "ebookshelf-settings.json"


@dataclass
class Settings:
    """Application settings persisted as JSON.

    Relative paths are resolved from ``_EBOOKSHELF_DIR/``. Absolute paths
    and ``~`` expansion are supported.

    Attributes
    ----------
    activity_log_path : str
        Path to the JSON Lines activity log.
    max_rows : int
        Maximum number of rows printed by the book table.
    title_width : int
        Title column width before truncation.
    author_width : int
        Author column width before truncation.
    """

    activity_log_path: str = "data/activity.log"
    max_rows: int = 50
    title_width: int = 50
    author_width: int = 30

    def resolve_activity_log_path(self) -> Path:
        """Resolve ``activity_log_path`` to an absolute path.

        Returns
        -------
        Path
            Absolute, resolved path to the activity log.
        """
        p = Path(self.activity_log_path).expanduser()
        if not p.is_absolute():
            p = _EBOOKSHELF_DIR / p
        return p.resolve()


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a JSON file.

    Creates the default settings file if it does not exist. Unknown keys
    are ignored and missing keys fall back to their defaults.

    Parameters
    ----------
    path : Path, optional
        Path to the settings file. Defaults to
        ``_EBOOKSHELF_DIR/ebookshelf-settings.json``.

    Returns
    -------
    Settings
        Loaded (or default) application settings.
    """
    path = path or _DEFAULT_SETTINGS_PATH
    if not path.exists():
        settings = Settings()
        save_settings(settings, path)
        return settings
    try:
        data = json.loads(path.read_text())
        known = {f.name for f in fields(Settings)}
        return Settings(**{k: v for k, v in data.items() if k in known})
    except (json.JSONDecodeError, AttributeError, TypeError):
        return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> None:
    """Write settings to a JSON file.

    Creates parent directories if they do not exist.
    """
    path = path or _DEFAULT_SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2) + "\n")
