"""Main CLI entry point for courtdesk."""

import typer

from courtdesk.cli.commands import field, remote
from courtdesk.cli.utils import configure_logging

app = typer.Typer(
    name="courtdesk",
    help="courtdesk - Back-office editing of bookable fields",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    courtdesk - Back-office editing of bookable fields
    """
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        # No subcommand was invoked, show help
        print(ctx.get_help())
        raise typer.Exit(0)


app.add_typer(field.app, name="field", help="Field editing commands")
app.add_typer(remote.app, name="remote", help="Booking API endpoint management")


@app.command()
def version():
    """Show the courtdesk version."""
    from courtdesk import __version__

    typer.echo(f"courtdesk {__version__}")


if __name__ == "__main__":
    app()
