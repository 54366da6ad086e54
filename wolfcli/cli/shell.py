"""
Query Session.

Drives the fetch, decode, format and print cycle, either once or as an
interactive loop that reads a new query from stdin after every result.
"""

import json
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from wolfcli.cli.client import WolframClient
from wolfcli.cli.formatter import RenderMode, ask_render_mode, render
from wolfcli.cli.params import QueryParams
from wolfcli.cli.parser import decode_response
from wolfcli.core.exceptions import ApplicationError
from wolfcli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

INPUT_PROMPT = "[green]Enter your input: [/green]"
EXIT_COMMAND = "exit"


def is_exit_command(line: str) -> bool:
    """True when the line asks to leave the interactive loop."""
    return line.strip().lower() == EXIT_COMMAND


class QuerySession:
    """
    One client session.

    Owns the current query parameters; in interactive mode only the input
    text changes between requests.

    Usage:
        session = QuerySession(params, client)
        session.run_once()        # one-shot, errors propagate
        session.run_interactive() # loop until 'exit' or end of input
    """

    def __init__(
        self,
        params: QueryParams,
        client: WolframClient,
        console: Console | None = None,
        raw: bool = False,
        choose_mode: Callable[[Console], RenderMode] | None = None,
    ) -> None:
        self.params = params
        self.client = client
        self.console = console or client.console
        self.raw = raw
        self.choose_mode = choose_mode or ask_render_mode
        self.requests_sent = 0

    def run_cycle(self) -> None:
        """
        Fetch, decode, format and print the result for the current params.

        Raises:
            TransportError: If the request fails
            DecodeError: If the response is not JSON
        """
        self.requests_sent += 1
        body = self.client.fetch(self.params)
        document = decode_response(body)

        if self.raw:
            self.console.print_json(json.dumps(document))
            return

        mode = self.choose_mode(self.console)
        self._print_result(render(document, mode))

    def _print_result(self, rendered: str) -> None:
        self.console.print(Text.from_ansi(rendered), soft_wrap=True)

    def _report(self, error: ApplicationError) -> None:
        log_with_source(logger, "shell", "error", "Query failed", code=error.code, error=error.message)
        self.console.print(f"[red]Error: {escape(error.message)}[/red]", highlight=False)

    def run_once(self) -> None:
        """Run a single cycle. Errors are printed, then re-raised."""
        try:
            self.run_cycle()
        except ApplicationError as e:
            self._report(e)
            raise

    def submit(self, line: str) -> None:
        """Replace the query text with the line as read and run a cycle."""
        self.params = self.params.with_input(line)
        self._safe_cycle()

    def _safe_cycle(self) -> None:
        try:
            self.run_cycle()
        except ApplicationError as e:
            self._report(e)

    def run_interactive(self) -> None:
        """
        Run the first query, then read queries until 'exit' or end of input.

        A failed query is reported and the prompt comes back.
        """
        log_with_source(logger, "shell", "info", "Interactive session started", input=self.params.input)
        self._safe_cycle()

        while True:
            try:
                line = self.console.input(INPUT_PROMPT)
            except EOFError:
                break
            except KeyboardInterrupt:
                self.console.print(f"\n[dim]Type '{EXIT_COMMAND}' to quit[/dim]")
                continue

            if is_exit_command(line):
                break
            self.submit(line)

        log_with_source(logger, "shell", "info", "Interactive session ended", requests=self.requests_sent)


def run_session(session: QuerySession, interactive: bool) -> None:
    """Run a session in the requested mode and close its client."""
    try:
        if interactive:
            session.run_interactive()
        else:
            session.run_once()
    finally:
        session.client.close()
