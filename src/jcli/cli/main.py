"""CLI entry point (Typer).

Why a single boundary:
- Actions raise typed `JCliError`s instead of exiting.
- This module is the only place that turns them into a message and an exit
  code.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console

from jcli.adapters.http_client import HttpQueryClient
from jcli.adapters.terminal_input import TerminalInput
from jcli.cli import doctor
from jcli.cli.menu import choose_action
from jcli.cli.ui_components import print_error
from jcli.core.config import AppSettings, load_settings
from jcli.core.domain.errors import JCliError
from jcli.core.domain.models import MenuSelection, StartupArguments
from jcli.core.interfaces.input_source import InputSource
from jcli.core.interfaces.query_client import QueryClient
from jcli.core.logging_setup import configure_logging
from jcli.core.services.api_fetch import fetch_json_api
from jcli.core.services.json_print import pretty_print_json
from jcli.core.services.weather import show_weather

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Weather, JSON pretty-printing and authenticated GETs from one menu.",
)
app.add_typer(doctor.app, name="doctor")


def resolve_arguments(settings: AppSettings, city: str | None, bearer: str | None) -> StartupArguments:
    """Flags win; settings (env, .env) fill the gaps."""

    return StartupArguments(
        city=city if city else settings.default_city,
        bearer=bearer if bearer is not None else settings.bearer,
    )


def run_selection(
    selection: MenuSelection,
    arguments: StartupArguments,
    *,
    input_source: InputSource,
    query_client: QueryClient,
    console: Console,
    settings: AppSettings,
) -> None:
    logger.debug("Running %s", selection.name)
    if selection is MenuSelection.GET_TEMPERATURE:
        asyncio.run(
            show_weather(
                query_client,
                arguments.city,
                console,
                url_template=settings.weather_url_template,
            )
        )
    elif selection is MenuSelection.PRETTY_PRINT_JSON:
        pretty_print_json(input_source, console)
    else:
        asyncio.run(fetch_json_api(input_source, query_client, arguments.bearer, console))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    city: str | None = typer.Option(
        None, "--city", "-c", help="Default city to query the weather (J_DEFAULT_CITY, default Berlin)."
    ),
    bearer: str | None = typer.Option(
        None, "--bearer", "-b", help="Token to use on requests (J_BEARER)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
) -> None:
    """Pick one action from the menu and run it."""

    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        settings = load_settings()
        if not verbose:
            configure_logging(settings.log_level)
        if ctx.invoked_subcommand is not None:
            return

        arguments = resolve_arguments(settings, city, bearer)
        console = Console()
        input_source = TerminalInput(console)
        query_client = HttpQueryClient(settings)

        selection = choose_action(input_source, console)
        run_selection(
            selection,
            arguments,
            input_source=input_source,
            query_client=query_client,
            console=console,
            settings=settings,
        )
    except JCliError as exc:
        logger.debug("Run aborted: %s", type(exc).__name__)
        print_error(Console(stderr=True), exc)
        raise typer.Exit(code=int(exc.exit_code)) from exc


def run() -> None:
    app()
