"""Client entity.

A Client is the one record type the application manages:

    Client
        ├── id        UUID, fixed at construction
        ├── name      free text, changed through edit()
        └── location  free text, changed through edit()

The repository keys records by ``id`` alone; two clients with the same
name and location are still different records.
"""

from __future__ import annotations

from uuid import UUID


class Client:
    """A client record with a stable identity and editable details."""

    __slots__ = ("_id", "_name", "_location")

    # Mutable record; identity lives in the repository key, not in hashing.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, id: UUID, name: str, location: str) -> None:
        self._id = id
        self._name = name
        self._location = location

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    def edit(self, name: str, location: str) -> None:
        """Replace name and location; the id never changes."""
        self._name = name
        self._location = location

    def copy(self) -> Client:
        """Return an independent value copy of this record."""
        return Client(self._id, self._name, self._location)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Client):
            return NotImplemented
        return (
            self._id == other._id
            and self._name == other._name
            and self._location == other._location
        )

    def __repr__(self) -> str:
        return f"Client(id={self._id!r}, name={self._name!r}, location={self._location!r})"
