"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console

from jcli.adapters.http_client import build_async_client
from jcli.cli.ui_components import build_doctor_table
from jcli.core.config import AppSettings, load_settings
from jcli.core.services.weather import build_weather_url

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Show the effective configuration and check the weather service."""

    settings = load_settings()

    table = build_doctor_table()
    table.add_row("Default city", "OK", settings.default_city)
    if settings.bearer:
        table.add_row("Bearer token", "OK", "Set; the token prompt is skipped")
    else:
        table.add_row("Bearer token", "OPTIONAL", "Not set -> prompted when fetching an API")
    timeout = settings.http_timeout_seconds
    table.add_row("HTTP timeout", "OK", f"{timeout:g}s" if timeout else "none")
    table.add_row("User-Agent", "OK", settings.user_agent)

    url = build_weather_url(settings.default_city, settings.weather_url_template)
    ok_http, detail_http = asyncio.run(_check_http(url, settings))
    table.add_row("Weather service", "OK" if ok_http else "FAIL", f"{url} -> {detail_http}")

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Set J_HTTP_TIMEOUT_SECONDS to stop requests hanging on a slow network."
        )
        raise typer.Exit(code=1)
