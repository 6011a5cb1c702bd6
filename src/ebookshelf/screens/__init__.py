"""ebookshelf TUI screens."""

from .main import MainScreen
from .book_add import BookAddScreen

__all__ = [
    "MainScreen",
    "BookAddScreen",
]
