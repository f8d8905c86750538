"""Utility functions for CLI commands."""

import logging
from typing import Dict, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from courtdesk.config import Config
from courtdesk.core.api import ApiClient, BranchApi, FieldApi
from courtdesk.session.controller import FieldEditSession
from courtdesk.session.state import EditState

console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich when --verbose is given."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def get_config_with_data():
    """Get config manager and loaded data.

    Returns:
        tuple: (config, config_data)
    """
    config = Config()
    try:
        config_data = config.load_or_default()
    except Exception as e:
        console.print(f"[red]❌ Could not read {config.config_path}: {e}[/red]")
        raise typer.Exit(1)

    return config, config_data


def get_api_client(remote_alias: Optional[str] = None) -> ApiClient:
    """Build an API client from the active (or named) remote.

    Raises:
        typer.Exit: If no usable remote is configured
    """
    _, config_data = get_config_with_data()
    if remote_alias:
        remote = config_data.remotes.get(remote_alias)
    else:
        remote = config_data.active

    if remote is None:
        alias = remote_alias or config_data.active_remote
        if alias is None:
            console.print(
                "[red]❌ No remote configured. Run 'courtdesk remote add' first.[/red]"
            )
        else:
            console.print(f"[red]❌ Remote '{alias}' not found[/red]")
        raise typer.Exit(1)

    return ApiClient(remote.url, token=remote.token, timeout=config_data.timeout)


class ConsoleView:
    """Renders session feedback on the terminal."""

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console
        self.navigated_to: Optional[str] = None

    def show_error(self, error: Exception, message: str) -> None:
        self.console.print(f"[red]❌ {message}[/red] [dim]({error})[/dim]")

    def show_field_errors(self, errors: Dict[str, str]) -> None:
        for name, message in errors.items():
            self.console.print(f"[red]❌ {name}: {message}[/red]")

    def navigate(self, path: str) -> None:
        self.navigated_to = path

    def set_busy(self, busy: bool) -> None:
        pass

    def reset_file_input(self) -> None:
        pass


def open_session(
    branch_id: str, field_id: str, remote_alias: Optional[str] = None
) -> tuple:
    """Create an edit session wired to the console.

    Returns:
        tuple: (session, view)
    """
    client = get_api_client(remote_alias)
    view = ConsoleView()
    session = FieldEditSession(
        FieldApi(client), BranchApi(client), branch_id, field_id, view
    )
    return session, view


def render_state(state: EditState) -> None:
    """Print the form, catalogs and image state as tables."""
    header = state.branch_label or "-"
    table = Table(title=f"Field edit (branch: {header})")
    table.add_column("Control", style="cyan")
    table.add_column("Value", style="green")

    form = state.form
    branch_value = form.branch_id + (" [dim](locked)[/dim]" if state.branch_locked else "")
    table.add_row("name", form.name)
    table.add_row("type_id", form.type_id)
    table.add_row("branch_id", branch_value)
    table.add_row("price_day", form.price_day)
    table.add_row("price_night", form.price_night)
    table.add_row("status", form.status)
    table.add_row("image", state.image.display_source() or "[dim]no image[/dim]")
    console.print(table)

    choices = Table(title="Choices")
    choices.add_column("Catalog", style="cyan")
    choices.add_column("ID", style="yellow")
    choices.add_column("Name", style="green")
    for branch in state.branches:
        choices.add_row("branch", str(branch.id), branch.name)
    for field_type in state.field_types:
        choices.add_row("type", str(field_type.id), field_type.name)
    console.print(choices)
