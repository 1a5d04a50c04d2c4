"""Presentation layer: text rendering, input parsing and the menu loop."""

from .identifiers import parse_client_id
from .presenters import format_client, format_client_list
from .shell import ClientShell

__all__ = ["ClientShell", "format_client", "format_client_list", "parse_client_id"]
