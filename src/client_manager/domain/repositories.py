"""Repository contract for Client storage.

Handlers depend only on these protocols; any object with matching methods
can be injected, including test doubles.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable
from uuid import UUID

from .entities import Client


class ClientRepository(Protocol):
    """Storage capability set for clients.

    ``by_id`` raises ``RecordNotFoundError`` when nothing is stored under
    the id. ``next_identity``, ``save`` and ``all`` never fail.
    """

    def next_identity(self) -> UUID:
        """Return an id not used by any stored record."""
        ...

    def save(self, client: Client) -> None:
        """Insert or fully replace the record keyed by ``client.id``."""
        ...

    def by_id(self, client_id: UUID) -> Client:
        """Return the stored record for ``client_id``."""
        ...

    def all(self) -> list[Client]:
        """Return every stored record, in no particular order."""
        ...


@runtime_checkable
class TransactionalClientRepository(ClientRepository, Protocol):
    """A repository that can hold its lock across several calls."""

    def transaction(self) -> AbstractContextManager[None]:
        """Context manager making the enclosed calls one critical section."""
        ...
