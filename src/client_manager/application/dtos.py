"""Read-only projections of Client records handed to the presentation layer.

Conversion runs one way only: ``ClientDto.from_client`` builds a DTO from an
entity, and nothing builds an entity back from a DTO.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Union, overload
from uuid import UUID

from ..domain.entities import Client


@dataclass(frozen=True)
class ClientDto:
    """Immutable view of a client."""

    id: UUID
    name: str
    location: str

    @classmethod
    def from_client(cls, client: Client) -> ClientDto:
        return cls(id=client.id, name=client.name, location=client.location)


class ClientDtoList(Sequence[ClientDto]):
    """Ordered, immutable collection of ClientDto.

    Keeps the order it was built with; indexing with a slice returns another
    ClientDtoList.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[ClientDto] = ()) -> None:
        self._items: tuple[ClientDto, ...] = tuple(items)

    @classmethod
    def from_clients(cls, clients: Iterable[Client]) -> ClientDtoList:
        return cls(ClientDto.from_client(client) for client in clients)

    def is_empty(self) -> bool:
        return not self._items

    @overload
    def __getitem__(self, index: int) -> ClientDto: ...

    @overload
    def __getitem__(self, index: slice) -> ClientDtoList: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[ClientDto, ClientDtoList]:
        if isinstance(index, slice):
            return ClientDtoList(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ClientDto]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClientDtoList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"ClientDtoList({list(self._items)!r})"
