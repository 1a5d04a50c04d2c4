"""
Client Manager - a layered in-memory client registry

Use-case handlers work against a repository contract, so storage can be
swapped without touching application logic. Ships with an in-memory
repository and an interactive menu shell.
"""

__version__ = "0.1.0"
__author__ = "Naman Agarwal"

from .application import (
    ClientDto,
    ClientDtoList,
    CreateClientRequest,
    CreateClientUseCaseHandler,
    EditClientRequest,
    EditClientUseCaseHandler,
    GetAllClientUseCaseHandler,
    GetClientRequest,
    GetClientUseCaseHandler,
    NoneRequest,
)
from .domain import Client, ClientRepository
from .exceptions import ClientManagerError, RecordNotFoundError
from .infrastructure import InMemoryClientRepository

__all__ = [
    "Client",
    "ClientRepository",
    "InMemoryClientRepository",
    "CreateClientUseCaseHandler",
    "GetClientUseCaseHandler",
    "GetAllClientUseCaseHandler",
    "EditClientUseCaseHandler",
    "CreateClientRequest",
    "GetClientRequest",
    "EditClientRequest",
    "NoneRequest",
    "ClientDto",
    "ClientDtoList",
    "ClientManagerError",
    "RecordNotFoundError",
]
