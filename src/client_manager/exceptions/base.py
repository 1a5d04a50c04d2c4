"""Base exception for Client Manager."""

from typing import Any, Mapping, Optional


class ClientManagerError(Exception):
    """Base exception for all Client Manager errors.

    ``details`` keeps the offending values as they were (a UUID stays a
    UUID) so callers can inspect them; they are only stringified when the
    error is shown to the user.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({details_str})"
