"""Use-case handlers: create, get, list and edit clients.

Each handler receives a ClientRepository in its constructor and works only
through that contract. ``RecordNotFoundError`` from the repository reaches
the caller unchanged.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext

from ..domain.entities import Client
from ..domain.repositories import ClientRepository, TransactionalClientRepository
from ..logging_config import get_logger
from .dtos import ClientDto, ClientDtoList
from .requests import CreateClientRequest, EditClientRequest, GetClientRequest, NoneRequest

logger = get_logger(__name__)


class CreateClientUseCaseHandler:
    """Create a client under a freshly generated id."""

    def __init__(self, client_repository: ClientRepository) -> None:
        self._client_repository = client_repository

    def execute(self, request: CreateClientRequest) -> None:
        client_id = self._client_repository.next_identity()
        self._client_repository.save(Client(client_id, request.name, request.location))
        logger.debug("Created client %s", client_id)


class GetClientUseCaseHandler:
    """Fetch one client by id."""

    def __init__(self, client_repository: ClientRepository) -> None:
        self._client_repository = client_repository

    def execute(self, request: GetClientRequest) -> ClientDto:
        return ClientDto.from_client(self._client_repository.by_id(request.client_id))


class GetAllClientUseCaseHandler:
    """List every client in repository order."""

    def __init__(self, client_repository: ClientRepository) -> None:
        self._client_repository = client_repository

    def execute(self, request: NoneRequest = NoneRequest()) -> ClientDtoList:
        return ClientDtoList.from_clients(self._client_repository.all())


class EditClientUseCaseHandler:
    """Replace a client's name and location, keeping its id.

    The lookup and the write run inside ``transaction()`` when the
    repository provides one. Otherwise two concurrent edits of the same id
    are last-write-wins.
    """

    def __init__(self, client_repository: ClientRepository) -> None:
        self._client_repository = client_repository

    def execute(self, request: EditClientRequest) -> None:
        with self._transaction():
            client = self._client_repository.by_id(request.client_id)
            client.edit(request.name, request.location)
            self._client_repository.save(client)
        logger.debug("Edited client %s", request.client_id)

    def _transaction(self) -> AbstractContextManager[None]:
        if isinstance(self._client_repository, TransactionalClientRepository):
            return self._client_repository.transaction()
        return nullcontext()
