"""Interactive menu loop driving the four client use cases.

The shell owns all user interaction: it prompts, parses identifiers,
builds request values, calls the handlers and prints the results.
Missing records are reported and the session carries on.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence
from uuid import UUID

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..application.dtos import ClientDto, ClientDtoList
from ..application.handler import Handler
from ..application.handlers import (
    CreateClientUseCaseHandler,
    EditClientUseCaseHandler,
    GetAllClientUseCaseHandler,
    GetClientUseCaseHandler,
)
from ..application.requests import (
    CreateClientRequest,
    EditClientRequest,
    GetClientRequest,
    NoneRequest,
)
from ..domain.repositories import ClientRepository
from ..exceptions import InvalidIdentifierError, RecordNotFoundError
from ..logging_config import get_logger
from .identifiers import parse_client_id
from .presenters import format_client, format_client_list

logger = get_logger(__name__)

AskFn = Callable[..., str]

EXIT = "0"
LIST_ALL = "1"
SHOW = "2"
CREATE = "3"
EDIT = "4"

MENU: tuple[tuple[str, str], ...] = (
    (EXIT, "Exit"),
    (LIST_ALL, "List all clients"),
    (SHOW, "Show a client"),
    (CREATE, "Create a client"),
    (EDIT, "Edit a client"),
)


class ClientShell:
    """Menu-driven session over a set of client handlers.

    Args:
        create_handler: Handler for menu entry 3
        get_handler: Handler for menu entry 2
        get_all_handler: Handler for menu entry 1
        edit_handler: Handler for menu entry 4
        console: Where output goes (default: a new stdout console)
        ask: ``ask(prompt, choices=None) -> str``; defaults to rich's Prompt.ask
    """

    def __init__(
        self,
        create_handler: Handler[CreateClientRequest, None],
        get_handler: Handler[GetClientRequest, ClientDto],
        get_all_handler: Handler[NoneRequest, ClientDtoList],
        edit_handler: Handler[EditClientRequest, None],
        console: Optional[Console] = None,
        ask: Optional[AskFn] = None,
    ) -> None:
        self.create_handler = create_handler
        self.get_handler = get_handler
        self.get_all_handler = get_all_handler
        self.edit_handler = edit_handler
        self.console = console or Console()
        self._ask = ask or self._prompt_ask
        self._commands: dict[str, Callable[[], None]] = {
            LIST_ALL: self.list_clients,
            SHOW: self.show_client,
            CREATE: self.create_client,
            EDIT: self.edit_client,
        }

    @classmethod
    def for_repository(
        cls,
        repository: ClientRepository,
        console: Optional[Console] = None,
        ask: Optional[AskFn] = None,
    ) -> ClientShell:
        """Bind all four handlers to one shared repository."""
        return cls(
            CreateClientUseCaseHandler(repository),
            GetClientUseCaseHandler(repository),
            GetAllClientUseCaseHandler(repository),
            EditClientUseCaseHandler(repository),
            console=console,
            ask=ask,
        )

    def run(self) -> None:
        """Prompt for commands until the user exits or input ends."""
        try:
            while True:
                self.console.print()
                self._print_menu()
                choice = self._ask(
                    "Select a command", choices=[key for key, _ in MENU]
                ).strip()
                self.console.print()

                if choice == EXIT:
                    break
                command = self._commands.get(choice)
                if command is None:
                    self.console.print(f"[red]Unknown command:[/red] {escape(choice)}")
                    continue
                command()
        except (EOFError, KeyboardInterrupt):
            self.console.print()
        self.console.print("Goodbye")

    def list_clients(self) -> None:
        clients = self.get_all_handler.execute(NoneRequest())
        self.console.print(format_client_list(clients), markup=False, highlight=False, end="")

    def show_client(self) -> None:
        client_id = self._ask_client_id("ID of the client to show")
        try:
            client = self.get_handler.execute(GetClientRequest(client_id))
        except RecordNotFoundError as e:
            self._report_not_found(e)
            return
        self.console.print(format_client(client), markup=False, highlight=False)

    def create_client(self) -> None:
        name = self._ask("Name of the new client")
        location = self._ask("Location of the new client")
        self.create_handler.execute(CreateClientRequest(name, location))
        self.console.print("[green]Client created[/green]")

    def edit_client(self) -> None:
        client_id = self._ask_client_id("ID of the client to edit")
        name = self._ask("New name")
        location = self._ask("New location")
        try:
            self.edit_handler.execute(EditClientRequest(client_id, name, location))
        except RecordNotFoundError as e:
            self._report_not_found(e)
            return
        self.console.print("[green]Client updated[/green]")

    def _ask_client_id(self, prompt: str) -> UUID:
        while True:
            raw = self._ask(prompt)
            try:
                return parse_client_id(raw)
            except InvalidIdentifierError as e:
                self.console.print(f"[red]{escape(e.message)}[/red]")

    def _report_not_found(self, error: RecordNotFoundError) -> None:
        logger.info("Client %s not found", error.client_id)
        self.console.print(f"[red]Error:[/red] {escape(str(error))}")

    def _print_menu(self) -> None:
        for key, label in MENU:
            self.console.print(f"  [bold cyan]{key}[/bold cyan]  {label}")

    def _prompt_ask(self, prompt: str, choices: Optional[Sequence[str]] = None) -> str:
        return Prompt.ask(
            prompt, console=self.console, choices=list(choices) if choices else None
        )
