"""Domain layer: the Client entity and the storage contract it lives behind."""

from .entities import Client
from .repositories import ClientRepository, TransactionalClientRepository

__all__ = ["Client", "ClientRepository", "TransactionalClientRepository"]
