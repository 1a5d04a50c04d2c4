"""In-memory ClientRepository.

Records live in a dict keyed by client id for the lifetime of the process.
Every record crossing the repository boundary is copied, so callers never
hold a live reference into the store.

Usage:
    repository = InMemoryClientRepository.with_sample_clients()

    client_id = repository.next_identity()
    repository.save(Client(client_id, "Saburo", "Kyoto"))

    with repository.transaction():
        client = repository.by_id(client_id)
        client.edit("Saburo", "Nara")
        repository.save(client)
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Optional

from ..domain.entities import Client
from ..exceptions import RecordNotFoundError
from ..logging_config import get_logger

logger = get_logger(__name__)

# Seed records used by the --sample start-up mode.
SAMPLE_CLIENTS: tuple[tuple[str, str], ...] = (
    ("Taro", "Tokyo"),
    ("Jiro", "Tokyo"),
)


class InMemoryClientRepository:
    """Volatile, dict-backed client storage.

    Each public method runs under a re-entrant lock. ``transaction()``
    exposes the same lock so a read-modify-write sequence can run without
    another thread saving in between.
    """

    def __init__(self) -> None:
        self._clients: dict[uuid.UUID, Client] = {}
        self._lock = threading.RLock()

    @classmethod
    def with_sample_clients(
        cls, samples: Optional[Iterable[tuple[str, str]]] = None
    ) -> InMemoryClientRepository:
        """Build a repository pre-populated with example records.

        Args:
            samples: (name, location) pairs to seed; defaults to SAMPLE_CLIENTS

        Returns:
            A repository holding one record per sample, each with a fresh id
        """
        repository = cls()
        for name, location in SAMPLE_CLIENTS if samples is None else samples:
            repository.save(Client(repository.next_identity(), name, location))
        logger.debug("Seeded repository with %d sample clients", len(repository))
        return repository

    def next_identity(self) -> uuid.UUID:
        with self._lock:
            client_id = uuid.uuid4()
            while client_id in self._clients:
                client_id = uuid.uuid4()
            return client_id

    def save(self, client: Client) -> None:
        with self._lock:
            replaced = client.id in self._clients
            self._clients[client.id] = client.copy()
        logger.debug("%s client %s", "Replaced" if replaced else "Stored", client.id)

    def by_id(self, client_id: uuid.UUID) -> Client:
        with self._lock:
            client = self._clients.get(client_id)
            if client is None:
                raise RecordNotFoundError(client_id)
            return client.copy()

    def all(self) -> list[Client]:
        with self._lock:
            return [client.copy() for client in self._clients.values()]

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the repository lock for the duration of the block."""
        with self._lock:
            yield

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def __contains__(self, client_id: object) -> bool:
        with self._lock:
            return client_id in self._clients
