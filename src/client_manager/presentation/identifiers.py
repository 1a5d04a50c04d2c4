"""Parsing of client identifiers typed by the user."""

import re
from uuid import UUID

from ..exceptions import InvalidIdentifierError

# Canonical 8-4-4-4-12 hyphenated form; uuid.UUID alone also accepts braces and urn: prefixes.
_CANONICAL_UUID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def parse_client_id(text: str) -> UUID:
    """Parse a canonical hyphenated UUID string.

    Surrounding whitespace is ignored. Raises InvalidIdentifierError for
    anything else, so malformed input never reaches a handler.
    """
    candidate = text.strip()
    if not _CANONICAL_UUID.match(candidate):
        raise InvalidIdentifierError(text)
    return UUID(candidate)
