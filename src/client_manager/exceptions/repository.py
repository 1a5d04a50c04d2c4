"""Storage and input exceptions: missing records, malformed identifiers."""

from uuid import UUID

from .base import ClientManagerError


class RepositoryError(ClientManagerError):
    """Base class for repository-related errors."""

    pass


class RecordNotFoundError(RepositoryError):
    """Raised when no client is stored under the requested id.

    A record that never existed and one that is gone look the same here.
    """

    def __init__(self, client_id: UUID):
        super().__init__(
            "No client found for given ID",
            details={"client_id": client_id},
        )
        self.client_id = client_id


class InputError(ClientManagerError):
    """Base class for errors in user-supplied values."""

    pass


class InvalidIdentifierError(InputError):
    """Raised when a string is not a canonical client identifier."""

    def __init__(self, value: str):
        super().__init__(
            f"Invalid client ID: {value!r}",
            details={"expected": "xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx"},
        )
        self.value = value
