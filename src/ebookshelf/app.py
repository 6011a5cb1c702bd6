"""Textual TUI application for the ebookshelf catalogue.

Defines the ``EbookshelfApp`` class (the Textual ``App`` subclass) which
owns one in-memory ``CatalogService`` for the lifetime of the session.
"""

from typing import Optional

from textual.app import App

from .activity_log import ActivityLog
from .memory import InMemoryBookRepository
from .service import CatalogService
from .settings import Settings, load_settings


class EbookshelfApp(App):
    """ebookshelf E-book Catalogue TUI.

    Parameters
    ----------
    settings : Settings, optional
        Loaded settings. Read from the default location when omitted.
    service : CatalogService, optional
        Catalogue to display. A fresh in-memory catalogue when omitted.

    Attributes
    ----------
    app_settings : Settings
        Settings shared by all screens.
    activity : ActivityLog
        Log receiving every change made in the TUI.
    catalog : CatalogService
        Shared catalogue service used by all screens.
    """

    TITLE = "ebookshelf"
    SUB_TITLE = "E-book Catalogue"
    CSS_PATH = "ebookshelf.tcss"

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        service: Optional[CatalogService] = None,
    ) -> None:
        super().__init__()
        self.app_settings = settings or load_settings()
        self.activity = ActivityLog.from_settings(self.app_settings)
        self.catalog = service or CatalogService(InMemoryBookRepository())

    def on_mount(self) -> None:
        """Push the main screen."""
        from .screens.main import MainScreen
        self.push_screen(MainScreen())
