"""Plain-text rendering of client DTOs."""

from ..application.dtos import ClientDto, ClientDtoList

LIST_HEADER = "Client list"
LIST_RULE = "-" * 40
EMPTY_LIST = "No clients"


def format_client(dto: ClientDto) -> str:
    """One-line summary: ``Client #<id>: <name>, from <location>``."""
    return f"Client #{dto.id}: {dto.name}, from {dto.location}"


def format_client_list(dtos: ClientDtoList) -> str:
    """Header, rule, blank line, then one line per client.

    Every line, including the last, ends with a newline.
    """
    if dtos.is_empty():
        return f"{EMPTY_LIST}\n"

    lines = [LIST_HEADER, LIST_RULE, ""]
    lines.extend(format_client(dto) for dto in dtos)
    return "\n".join(lines) + "\n"
