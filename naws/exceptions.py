from __future__ import annotations

from typing import Optional, Tuple


class FetchError(Exception):
    """Raised when the feed cannot be downloaded or the server answers with a non-success status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(Exception):
    """Raised when the feed document is not well-formed RSS."""

    def __init__(self, message: str, *, position: Optional[Tuple[int, int]] = None) -> None:
        super().__init__(message)
        self.position = position
