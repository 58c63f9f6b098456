"""Errors raised by daumdic."""


class DaumDicError(Exception):
    """Base error for every failed dictionary lookup."""


class EmptyWordError(DaumDicError):
    """Raised when an empty query is given to search."""

    def __init__(self) -> None:
        super().__init__("empty word was given")


class FetchError(DaumDicError):
    """Raised when the search page cannot be fetched."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(DaumDicError):
    """Raised when the search page does not have the expected layout."""
