"""Packpin command-line interface.

One command per API operation, useful for checking an API key and poking at
trackings by hand:

    packpin carriers
    packpin detect 058200005422993
    packpin create 058200005422993 dpd --description mylittleshipment
    packpin get 058200005422993 dpd
    packpin list --page 1 --limit 20
    packpin update 058200005422993 dpd myothership
    packpin delete 058200005422993 dpd

The API key comes from `--api-key` or the PACKPIN_API_KEY environment variable.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from packpin.core.config import get_settings
from packpin.core.errors import PackpinError
from packpin.core.result import Failure, Result, Success
from packpin.domain.errors import ApiStatusError
from packpin.infrastructure.logging import configure_logging, configure_logging_from_settings
from packpin.infrastructure.packpin.packpin_client import PackpinClient

app = typer.Typer(no_args_is_help=True, help="Packpin shipment-tracking API client.")


def _console() -> Console:
    return Console()


def _error_console() -> Console:
    return Console(stderr=True)


def _client(ctx: typer.Context) -> PackpinClient:
    """Build the client for a command, exiting when no API key is set."""
    options = ctx.obj
    if not options["api_key"]:
        _error_console().print("[red]No API key provided.[/red] Use --api-key or set PACKPIN_API_KEY.")
        raise typer.Exit(code=1)
    return PackpinClient(options["api_key"], settings=options["settings"], timeout=options["timeout"])


def _print_error(error: PackpinError) -> None:
    table = Table(title="Packpin error", show_header=False)
    table.add_column("Field", style="bold red", no_wrap=True)
    table.add_column("Value")
    table.add_row("code", str(error.code.value))
    table.add_row("type", error.type)
    table.add_row("message", error.message)
    if isinstance(error, ApiStatusError):
        table.add_row("statusCode", str(error.status_code))
    _error_console().print(table)


def _run(call: Callable[[], Awaitable[Result[Any, PackpinError]]]) -> None:
    result = asyncio.run(call())
    match result:
        case Success(value=None):
            _console().print("[green]OK[/green]")
        case Success(value=value):
            _console().print_json(data=value)
        case Failure(error=error):
            _print_error(error)
            raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        envvar="PACKPIN_API_KEY",
        help="Packpin API key.",
        show_default=False,
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="Request timeout in seconds.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests at debug level."),
) -> None:
    """Packpin shipment-tracking API client."""
    settings = get_settings()
    if verbose:
        configure_logging(level="DEBUG", use_json=settings.use_json_logs)
    else:
        configure_logging_from_settings(settings)

    # The key is checked per command so `--help` works without one.
    ctx.obj = {
        "api_key": api_key or settings.api_key,
        "settings": settings,
        "timeout": timeout,
    }


@app.command()
def carriers(ctx: typer.Context) -> None:
    """List all carriers."""
    _run(lambda: _client(ctx).get_carriers())


@app.command()
def detect(ctx: typer.Context, code: str = typer.Argument(..., help="Tracking number.")) -> None:
    """Detect the carriers a tracking number may belong to."""
    _run(lambda: _client(ctx).detect_carriers(code))


@app.command()
def create(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="Tracking number."),
    carrier: str = typer.Argument(..., help="Carrier code."),
    description: str | None = typer.Option(None, "--description", "-d", help="Tracking description."),
) -> None:
    """Start tracking a shipment."""
    params = {"description": description} if description else None
    _run(lambda: _client(ctx).create_tracking(code, carrier, params))


@app.command()
def get(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="Tracking number."),
    carrier: str = typer.Argument(..., help="Carrier code."),
) -> None:
    """Show a tracking and its checkpoints."""
    _run(lambda: _client(ctx).get_tracking(code, carrier))


@app.command(name="list")
def list_trackings(
    ctx: typer.Context,
    page: int | None = typer.Option(None, "--page", min=1, help="Page number."),
    limit: int | None = typer.Option(None, "--limit", min=1, help="Trackings per page."),
) -> None:
    """List trackings in the account."""
    options = {k: v for k, v in {"page": page, "limit": limit}.items() if v is not None}
    _run(lambda: _client(ctx).get_trackings(options))


@app.command()
def update(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="Tracking number."),
    carrier: str = typer.Argument(..., help="Carrier code."),
    description: str = typer.Argument(..., help="New description."),
) -> None:
    """Change the description of a tracking."""
    _run(lambda: _client(ctx).update_tracking(code, carrier, description))


@app.command()
def delete(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="Tracking number."),
    carrier: str = typer.Argument(..., help="Carrier code."),
) -> None:
    """Stop tracking a shipment."""
    _run(lambda: _client(ctx).delete_tracking(code, carrier))


def run() -> None:
    app()
