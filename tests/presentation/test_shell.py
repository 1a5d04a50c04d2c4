"""Tests for presentation/shell.py - the interactive menu loop."""

import io
import uuid

import pytest
from rich.console import Console

from client_manager.application.dtos import ClientDtoList
from client_manager.application.handlers import (
    CreateClientUseCaseHandler,
    EditClientUseCaseHandler,
    GetClientUseCaseHandler,
)
from client_manager.presentation.shell import MENU, ClientShell


class ScriptedInput:
    """Stand-in for Prompt.ask that replays fixed answers, then signals EOF."""

    def __init__(self, *answers):
        self._answers = list(answers)
        self.prompts = []
        self.choices = []

    def __call__(self, prompt, choices=None):
        self.prompts.append(prompt)
        self.choices.append(choices)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


def run_shell(repository, console, *answers):
    ask = ScriptedInput(*answers)
    ClientShell.for_repository(repository, console=console, ask=ask).run()
    return console.file.getvalue(), ask


class TestMenu:
    """Test the command loop itself."""

    def test_exit_immediately(self, repository, console):
        output, ask = run_shell(repository, console, "0")

        assert "Goodbye" in output
        assert ask.prompts == ["Select a command"]
        assert ask.choices[0] == [key for key, _ in MENU]

    def test_menu_lists_every_command(self, repository, console):
        output, _ = run_shell(repository, console, "0")
        for key, label in MENU:
            assert label in output

    def test_end_of_input_ends_session(self, repository, console):
        output, _ = run_shell(repository, console)
        assert "Goodbye" in output

    def test_keyboard_interrupt_ends_session(self, repository, console):
        def interrupted(prompt, choices=None):
            raise KeyboardInterrupt

        ClientShell.for_repository(repository, console=console, ask=interrupted).run()

        assert "Goodbye" in console.file.getvalue()

    def test_unknown_command_is_reported(self, repository, console):
        output, ask = run_shell(repository, console, "9", "0")

        assert "Unknown command: 9" in output
        assert ask.prompts.count("Select a command") == 2


class TestListAndShow:
    """Test menu entries 1 and 2."""

    def test_list_empty(self, repository, console):
        output, _ = run_shell(repository, console, "1", "0")
        assert "No clients" in output

    def test_list_seeded(self, seeded_repository, console):
        output, _ = run_shell(seeded_repository, console, "1", "0")

        assert "Client list" in output
        assert "Taro, from Tokyo" in output
        assert "Jiro, from Tokyo" in output

    def test_show_existing(self, repository, console, client):
        repository.save(client)

        output, _ = run_shell(repository, console, "2", str(client.id), "0")

        assert f"Client #{client.id}: Hanako, from Sapporo" in output

    def test_show_missing_reports_and_continues(self, repository, console):
        missing_id = uuid.uuid4()

        output, ask = run_shell(repository, console, "2", str(missing_id), "1", "0")

        assert "Error:" in output
        assert "No client found for given ID" in output
        assert str(missing_id) in output
        assert "No clients" in output
        assert "Goodbye" in output

    def test_malformed_id_is_asked_again(self, repository, console, client):
        repository.save(client)

        output, ask = run_shell(repository, console, "2", "nope", str(client.id), "0")

        assert "Invalid client ID" in output
        assert ask.prompts.count("ID of the client to show") == 2
        assert "Hanako, from Sapporo" in output


class TestCreateAndEdit:
    """Test menu entries 3 and 4."""

    def test_create(self, repository, console):
        output, _ = run_shell(repository, console, "3", "Saburo", "Kyoto", "0")

        assert "Client created" in output
        (created,) = repository.all()
        assert (created.name, created.location) == ("Saburo", "Kyoto")

    def test_create_with_markup_like_name(self, repository, console):
        """Names are shown verbatim, never interpreted as rich markup."""
        output, _ = run_shell(repository, console, "3", "[bold]Ken[/bold]", "Nagoya", "1", "0")

        assert "[bold]Ken[/bold], from Nagoya" in output

    def test_edit(self, repository, console, client):
        repository.save(client)

        output, _ = run_shell(repository, console, "4", str(client.id), "Taro2", "Osaka", "0")

        assert "Client updated" in output
        stored = repository.by_id(client.id)
        assert (stored.id, stored.name, stored.location) == (client.id, "Taro2", "Osaka")

    def test_edit_missing_writes_nothing(self, repository, console, client):
        repository.save(client)
        missing_id = uuid.uuid4()

        output, _ = run_shell(repository, console, "4", str(missing_id), "X", "Y", "0")

        assert "No client found for given ID" in output
        assert "Client updated" not in output
        assert repository.all() == [client]


class TestHandlerInjection:
    """Any object with a matching execute() can stand in for a handler."""

    def test_stub_list_handler(self, repository, console, client):
        class FixedListHandler:
            def execute(self, request):
                return ClientDtoList.from_clients([client])

        shell = ClientShell(
            CreateClientUseCaseHandler(repository),
            GetClientUseCaseHandler(repository),
            FixedListHandler(),
            EditClientUseCaseHandler(repository),
            console=console,
            ask=ScriptedInput("1", "0"),
        )
        shell.run()

        assert "Hanako, from Sapporo" in console.file.getvalue()
