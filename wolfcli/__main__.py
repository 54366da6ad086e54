"""
Wolfram|Alpha Query CLI.

Sends a natural-language query to the Wolfram|Alpha Full Results API and
prints the result pods. Built with Typer for the command line and Rich for
formatted output.

Usage:
    wolfq --help
    python -m wolfcli "2+2"
    wolfq "integrate x^2"
    wolfq "solve x^2 = 4" --interactive       # keep asking; 'exit' to quit
    wolfq "pi" --podstate "More digits" -t 10
    wolfq "weather in Oslo" --reinterpret false
    wolfq "2+2" --raw                          # print the JSON document

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message
"""

from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from wolfcli.cli.client import WolframClient
from wolfcli.cli.params import build_params
from wolfcli.cli.shell import QuerySession, run_session
from wolfcli.core.config import get_app_config
from wolfcli.core.exceptions import ApplicationError, ArgumentError, ConfigurationError
from wolfcli.core.logging import get_logger, log_with_source, setup_logging

app = typer.Typer(
    name="wolfq",
    help="Make a request to the Wolfram|Alpha API.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        try:
            application = get_app_config().application
        except ConfigurationError as e:
            _exit_on_config_error(e)
        console.print(f"{application.name} {application.version}")
        raise typer.Exit()


def _exit_on_config_error(error: ConfigurationError) -> NoReturn:
    console.print(f"[red]Error: {escape(error.message)}[/red]")
    raise typer.Exit(1) from error


@app.command()
def main(
    query: str = typer.Argument(
        ...,
        metavar="INPUT",
        help="Input to the Wolfram|Alpha API",
        show_default=False,
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Enable interactive mode; type `exit` to leave it",
    ),
    podstate: Optional[str] = typer.Option(
        None,
        "--podstate",
        help="Extra params to the API, e.g. 'Step-by-step solution'",
        show_default=False,
    ),
    totaltimeout: Optional[int] = typer.Option(
        None, "--totaltimeout", "-t", min=0, max=255, help="Total timeout", show_default="30",
    ),
    podtimeout: Optional[int] = typer.Option(
        None, "--podtimeout", "-p", min=0, max=255,
        help="Pod timeout. Individual computation block timeout", show_default="30",
    ),
    formattimeout: Optional[int] = typer.Option(
        None, "--formattimeout", min=0, max=255, help="Format timeout", show_default="30",
    ),
    parsetimeout: Optional[int] = typer.Option(
        None, "--parsetimeout", min=0, max=255, help="Parse timeout", show_default="30",
    ),
    scantimeout: Optional[int] = typer.Option(
        None, "--scantimeout", min=0, max=255, help="Scan timeout", show_default="30",
    ),
    appid: Optional[str] = typer.Option(
        None,
        "--appid",
        help="App ID identifying the source of the request",
        show_default="WOLFRAM_APPID or built-in key",
    ),
    # parsed by QueryParams: true/false, yes/no, on/off, 1/0
    reinterpret: Optional[str] = typer.Option(
        None,
        "--reinterpret",
        metavar="BOOLEAN",
        help="Whether the API should reinterpret the input",
        show_default="true",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Print the decoded JSON response instead of the formatted pods",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Query the Wolfram|Alpha API and print the result pods.
    """
    try:
        if debug:
            setup_logging(level="DEBUG", format_type="console")
            console.print("[dim]Debug mode enabled[/dim]")
        elif verbose:
            setup_logging(level="INFO", format_type="console")
        else:
            setup_logging()
    except ConfigurationError as e:
        _exit_on_config_error(e)

    logger = get_logger(__name__)

    try:
        params = build_params(
            query,
            podstate=podstate,
            totaltimeout=totaltimeout,
            podtimeout=podtimeout,
            formattimeout=formattimeout,
            parsetimeout=parsetimeout,
            scantimeout=scantimeout,
            appid=appid,
            reinterpret=reinterpret,
        )
    except ArgumentError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(2) from e
    except ConfigurationError as e:
        _exit_on_config_error(e)

    log_with_source(logger, "cli", "info", "Query started", interactive=interactive, raw=raw)

    session = QuerySession(params, WolframClient(console=console), console=console, raw=raw)
    try:
        run_session(session, interactive)
    except ApplicationError as e:
        log_with_source(logger, "cli", "debug", "Exiting after error", code=e.code)
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
