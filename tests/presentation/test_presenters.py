"""Tests for presentation/presenters.py - text rendering of DTOs."""

import uuid

from client_manager.application.dtos import ClientDto, ClientDtoList
from client_manager.domain.entities import Client
from client_manager.presentation.presenters import format_client, format_client_list


class TestFormatClient:
    """Test format_client."""

    def test_single_line_summary(self):
        client_id = uuid.UUID("67e55044-10b1-426f-9247-bb680e5fe0c8")
        dto = ClientDto.from_client(Client(client_id, "Taro", "Tokyo"))

        assert format_client(dto) == (
            "Client #67e55044-10b1-426f-9247-bb680e5fe0c8: Taro, from Tokyo"
        )


class TestFormatClientList:
    """Test format_client_list."""

    def test_empty_list(self):
        assert format_client_list(ClientDtoList()) == "No clients\n"

    def test_header_then_one_line_per_client(self, make_client):
        dtos = ClientDtoList.from_clients(make_client() for _ in range(2))

        expected = (
            "Client list\n"
            "----------------------------------------\n"
            "\n"
            f"{format_client(dtos[0])}\n"
            f"{format_client(dtos[1])}\n"
        )
        assert format_client_list(dtos) == expected
