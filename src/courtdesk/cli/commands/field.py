"""Field editing commands."""

from pathlib import Path
from typing import Optional

import typer

from courtdesk.cli.utils import console, open_session, render_state
from courtdesk.models.image import ImageFile

app = typer.Typer()


@app.command("show")
def show_field(
    branch_id: str = typer.Argument(..., help="Branch ID from the dashboard URL"),
    field_id: str = typer.Argument(..., help="Field ID"),
    remote: Optional[str] = typer.Option(
        None, "--remote", "-r", help="Use specific remote alias"
    ),
):
    """Load a field and show its editable values."""
    session, _ = open_session(branch_id, field_id, remote)
    if not session.load():
        raise typer.Exit(1)
    render_state(session.state)


@app.command("edit")
def edit_field(
    branch_id: str = typer.Argument(..., help="Branch ID from the dashboard URL"),
    field_id: str = typer.Argument(..., help="Field ID"),
    name: Optional[str] = typer.Option(None, "--name", help="Field name"),
    type_id: Optional[str] = typer.Option(None, "--type-id", help="Field type ID"),
    new_branch_id: Optional[str] = typer.Option(
        None, "--branch-id", help="Owning branch ID (only when not locked)"
    ),
    price_day: Optional[str] = typer.Option(None, "--price-day", help="Day price"),
    price_night: Optional[str] = typer.Option(
        None, "--price-night", help="Night price"
    ),
    status: Optional[str] = typer.Option(
        None, "--status", help="available, booked, maintenance or closed"
    ),
    image: Optional[Path] = typer.Option(
        None, "--image", help="PNG or JPEG file to upload", exists=True, dir_okay=False
    ),
    remove_image: bool = typer.Option(
        False, "--remove-image", help="Delete the current image"
    ),
    remote: Optional[str] = typer.Option(
        None, "--remote", "-r", help="Use specific remote alias"
    ),
):
    """Edit a field and save it."""
    session, view = open_session(branch_id, field_id, remote)
    if not session.load():
        raise typer.Exit(1)

    if new_branch_id is not None:
        if session.state.branch_locked:
            console.print(
                "[yellow]⚠️  Branch is fixed for this page; ignoring --branch-id[/yellow]"
            )
        else:
            session.set_value("branch_id", new_branch_id)

    edits = {
        "name": name,
        "type_id": type_id,
        "price_day": price_day,
        "price_night": price_night,
        "status": status,
    }
    for control, value in edits.items():
        if value is not None:
            session.set_value(control, value)

    if remove_image:
        session.remove_image()
    if image is not None and not session.select_file(ImageFile.from_path(image)):
        raise typer.Exit(1)

    if not session.submit():
        raise typer.Exit(1)

    console.print(f"[green]✓ Field {field_id} updated[/green]")
    console.print(f"[dim]Back to {view.navigated_to}[/dim]")
