"""Exception types raised by the ebookshelf catalogue core.

All errors derive from ``CatalogError`` so the CLI and TUI can catch them
in one place. The core never prints or logs; errors are raised to the
immediate caller.
"""


class CatalogError(Exception):
    """Base class for catalogue errors."""


class BookValidationError(CatalogError, ValueError):
    """A book could not be built from the supplied values."""


class InvalidIdError(BookValidationError):
    """A supplied book identifier is zero or negative."""


class IncompleteDataError(BookValidationError):
    """Title or author is empty after trimming whitespace."""


class NotFoundError(CatalogError, LookupError):
    """No stored book has the requested identifier."""


class RepositoryNotReadyError(CatalogError):
    """The catalogue service was created without a repository."""


class MissingBookError(CatalogError, TypeError):
    """``None`` was handed to a repository in place of a book."""


class BookRejectedError(CatalogError):
    """Storage refused a book because it failed validation.

    The original ``BookValidationError`` is available as ``__cause__``.
    """


class ImportFailedError(CatalogError):
    """A CSV file could not be read at all."""
