"""Tests for presentation/identifiers.py - parsing client ids from user input."""

import uuid

import pytest

from client_manager.exceptions import InvalidIdentifierError
from client_manager.presentation.identifiers import parse_client_id


class TestParseClientId:
    """Test parse_client_id."""

    def test_canonical_form(self):
        client_id = uuid.uuid4()
        assert parse_client_id(str(client_id)) == client_id

    def test_uppercase_and_whitespace(self):
        client_id = uuid.uuid4()
        assert parse_client_id(f"  {str(client_id).upper()}\n") == client_id

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not-a-uuid",
            "67e5504410b1426f9247bb680e5fe0c8",
            "{67e55044-10b1-426f-9247-bb680e5fe0c8}",
            "urn:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8",
            "67e55044-10b1-426f-9247-bb680e5fe0c",
            "g7e55044-10b1-426f-9247-bb680e5fe0c8",
        ],
    )
    def test_rejects_non_canonical_input(self, text):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_client_id(text)
        assert exc_info.value.value == text
