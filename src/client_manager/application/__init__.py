"""Application layer: use-case handlers and the values they exchange."""

from .dtos import ClientDto, ClientDtoList
from .handler import Handler
from .handlers import (
    CreateClientUseCaseHandler,
    EditClientUseCaseHandler,
    GetAllClientUseCaseHandler,
    GetClientUseCaseHandler,
)
from .requests import CreateClientRequest, EditClientRequest, GetClientRequest, NoneRequest

__all__ = [
    "Handler",
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
]
