"""Booking API endpoint commands.

Each remote pairs an API base URL with the operator token used to sign
requests. The ``env`` remote is built from COURTDESK_API_URL and
COURTDESK_API_TOKEN at load time and is never written to config.toml.
"""

from typing import Optional
from urllib.parse import urlparse

import typer
from rich.table import Table

from courtdesk.cli.utils import console, get_config_with_data
from courtdesk.config import ENV_REMOTE, ClientConfig, RemoteConfig

app = typer.Typer()


def normalize_url(url: str) -> str:
    """Check that ``url`` is an http(s) API base URL and drop the trailing slash.

    Raises:
        typer.BadParameter: If the scheme or host is missing
    """
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise typer.BadParameter(
            f"'{url}' is not an http(s) URL, e.g. https://booking.example.com/api"
        )
    return url.strip().rstrip("/")


def mask_token(token: str) -> str:
    """Show only the last four characters of an operator token."""
    if len(token) <= 4:
        return "****"
    return f"****{token[-4:]}"


def _get_remote(config_data: ClientConfig, alias: str) -> RemoteConfig:
    remote = config_data.remotes.get(alias)
    if remote is None:
        known = ", ".join(sorted(config_data.remotes)) or "none"
        console.print(f"[red]❌ Unknown remote '{alias}' (configured: {known})[/red]")
        raise typer.Exit(1)
    return remote


@app.command("add")
def add_remote(
    alias: str = typer.Argument(..., help="Name to refer to this API by"),
    url: str = typer.Option(
        ..., "--url", "-u", help="API base URL", callback=normalize_url
    ),
    token: str = typer.Option(
        ..., "--token", "-k", help="Operator bearer token", prompt=True, hide_input=True
    ),
    activate: bool = typer.Option(
        False, "--use", help="Make this the active remote"
    ),
):
    """Register a booking API and the token to call it with."""
    if alias == ENV_REMOTE:
        console.print(
            f"[red]❌ '{ENV_REMOTE}' is reserved for COURTDESK_API_URL/COURTDESK_API_TOKEN[/red]"
        )
        raise typer.Exit(1)

    config, config_data = get_config_with_data()
    replaced = config_data.remotes.get(alias)
    config_data.remotes[alias] = RemoteConfig(url=url, token=token)
    if activate or config_data.active is None:
        config_data.active_remote = alias
    config.save(config_data)

    verb = "Updated" if replaced else "Added"
    console.print(f"[green]✓ {verb} '{alias}' → {url}[/green]")
    if config_data.active_remote == alias:
        console.print(f"[dim]'{alias}' is the active remote[/dim]")


@app.command("list")
def list_remotes():
    """Show every remote, its masked token and which one is active."""
    _, config_data = get_config_with_data()

    if not config_data.remotes:
        console.print(
            "[yellow]No booking API configured. Use 'courtdesk remote add' "
            "or set COURTDESK_API_URL and COURTDESK_API_TOKEN.[/yellow]"
        )
        return

    table = Table(title=f"Booking APIs (timeout {config_data.timeout:g}s)")
    table.add_column("", style="yellow")
    table.add_column("Alias", style="cyan")
    table.add_column("URL", style="green")
    table.add_column("Token", style="dim")
    table.add_column("Source", style="dim")

    for alias, remote in sorted(config_data.remotes.items()):
        marker = "*" if alias == config_data.active_remote else ""
        source = "environment" if alias == ENV_REMOTE else "config.toml"
        table.add_row(marker, alias, remote.url, mask_token(remote.token), source)

    console.print(table)


@app.command("show")
def show_remote():
    """Show the remote that field commands will call."""
    _, config_data = get_config_with_data()

    remote = config_data.active
    if remote is None:
        console.print("[yellow]No active remote[/yellow]")
        raise typer.Exit(1)

    console.print(f"[bold]{config_data.active_remote}[/bold]")
    console.print(f"  url:     {remote.url}")
    console.print(f"  token:   {mask_token(remote.token)}")
    console.print(f"  timeout: {config_data.timeout:g}s")


@app.command("use")
def use_remote(alias: str = typer.Argument(..., help="Remote to activate")):
    """Switch the active remote."""
    config, config_data = get_config_with_data()
    remote = _get_remote(config_data, alias)

    config_data.active_remote = alias
    config.save(config_data)
    console.print(f"[green]✓ Field commands now call {remote.url}[/green]")


@app.command("remove")
def remove_remote(alias: str = typer.Argument(..., help="Remote to forget")):
    """Forget a remote and its token."""
    if alias == ENV_REMOTE:
        console.print(
            f"[red]❌ '{ENV_REMOTE}' comes from the environment; "
            "unset COURTDESK_API_URL instead[/red]"
        )
        raise typer.Exit(1)

    config, config_data = get_config_with_data()
    _get_remote(config_data, alias)

    del config_data.remotes[alias]
    was_active = config_data.active_remote == alias
    if was_active:
        config_data.active_remote = None
    config.save(config_data)

    console.print(f"[green]✓ Removed '{alias}'[/green]")
    if was_active and config_data.remotes:
        console.print(
            "[yellow]⚠️  No active remote left; pick one with 'courtdesk remote use'[/yellow]"
        )


@app.command("timeout")
def set_timeout(
    seconds: float = typer.Argument(..., min=0.1, help="Seconds to wait per request")
):
    """Set how long each API request may take."""
    config, config_data = get_config_with_data()
    config_data.timeout = seconds
    config.save(config_data)
    console.print(f"[green]✓ Request timeout set to {seconds:g}s[/green]")
