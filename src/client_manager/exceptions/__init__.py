"""Exception hierarchy for Client Manager."""

from .base import ClientManagerError
from .config import ConfigurationError, InvalidConfigError
from .repository import (
    InputError,
    InvalidIdentifierError,
    RecordNotFoundError,
    RepositoryError,
)

__all__ = [
    "ClientManagerError",
    "RepositoryError",
    "RecordNotFoundError",
    "InputError",
    "InvalidIdentifierError",
    "ConfigurationError",
    "InvalidConfigError",
]
