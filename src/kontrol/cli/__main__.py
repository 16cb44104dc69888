"""kontrol CLI entry point.

Provides commands for inspecting parameter definitions and their MIDI
response.
"""

import logging
import sys

import typer

from .commands import show_command, sweep_command

# Create the main app
app = typer.Typer(
    name="kontrol",
    help="kontrol CLI for inspecting control parameter definitions",
    invoke_without_command=True,
)

app.command("show")(show_command)
app.command("sweep")(sweep_command)


@app.command("version")
def version():
    """Show version information."""
    from .. import __version__
    typer.echo(f"kontrol CLI version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output")
):
    """kontrol CLI for inspecting control parameter definitions."""
    if verbose:
        logging.basicConfig(level=logging.INFO)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        typer.echo("\nError: Missing command.", err=True)
        raise typer.Exit(1)


def cli_main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\nAborted", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
