"""Core exception types shared across layers."""


class BookDatasetError(Exception):
    """Raised when the canonical book dataset is missing or malformed."""


class PresentationLibraryError(Exception):
    """Raised by presentation library adapters when a listing call fails."""


class LibraryNotFoundError(PresentationLibraryError):
    """Raised when the configured presentation library does not exist."""


__all__ = [
    "BookDatasetError",
    "LibraryNotFoundError",
    "PresentationLibraryError",
]
