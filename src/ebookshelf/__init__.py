"""ebookshelf - an in-memory catalogue for electronic books."""

__version__ = "0.1.0"
