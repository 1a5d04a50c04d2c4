"""Concrete repository implementations."""

from .memory import SAMPLE_CLIENTS, InMemoryClientRepository

__all__ = ["InMemoryClientRepository", "SAMPLE_CLIENTS"]
