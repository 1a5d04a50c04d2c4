"""Request values passed to the use-case handlers."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CreateClientRequest:
    name: str
    location: str


@dataclass(frozen=True)
class GetClientRequest:
    client_id: UUID


@dataclass(frozen=True)
class EditClientRequest:
    client_id: UUID
    name: str
    location: str


@dataclass(frozen=True)
class NoneRequest:
    """Request for handlers that take no input."""
