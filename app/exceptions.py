"""Domain exceptions raised by services and translated at the HTTP edge."""

from __future__ import annotations


class ForbiddenError(Exception):
    """The acting staff member may not perform this operation."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)
        self.message = message


class ProviderError(Exception):
    """The external messaging provider rejected or failed a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code