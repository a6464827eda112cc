class SearchError(Exception):
    """Raised when an image search cannot produce candidates."""


class SearchNetworkError(SearchError):
    """Raised when the search provider call fails due to network/infrastructure issues."""


class SearchRejectedError(SearchError):
    """Raised when the search provider returns a structured error payload."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
