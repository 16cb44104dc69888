"""Inspection commands for parameter definitions."""

from typing import Optional

import polars as pl
import typer

from ..curves import response_table
from ..parameters import Parameter
from ..wire import args_to_json, parameter_from_json


def _load_parameter(definition: str) -> Parameter:
    try:
        parameter = parameter_from_json(definition)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not parameter.is_valid:
        typer.echo(f"Error: invalid parameter definition: {definition}", err=True)
        raise typer.Exit(1)
    return parameter


def _format_display(parameter: Parameter) -> str:
    return f"{parameter.display_value()} {parameter.display_unit()}".rstrip()


def _print_summary(parameter: Parameter):
    typer.echo("\nParameter Summary")
    typer.echo(f"  Kind    : {parameter.kind.value} ({parameter.kind.describe()})")
    typer.echo(f"  Id      : {parameter.id}")
    typer.echo(f"  Name    : {parameter.display_name}")
    typer.echo(f"  Value   : {_format_display(parameter)}")
    typer.echo(f"  Args    : {args_to_json(parameter.create_args())}")


def show_command(
    definition: str = typer.Argument(..., help='JSON array, e.g. \'["freq", "cutoff", "Cutoff", 20, 20000, 1000]\''),
    midi: Optional[int] = typer.Option(None, "--midi", "-m", min=0, max=127, help="Apply a MIDI controller value"),
    set_value: Optional[float] = typer.Option(None, "--set", "-s", help="Apply a normalized value in [0, 1]"),
    nudge: Optional[float] = typer.Option(None, "--nudge", "-n", help="Apply a relative nudge"),
):
    """Build a parameter from its definition and show it.

    Updates are applied in the order --midi, --set, --nudge.
    """
    parameter = _load_parameter(definition)

    updates = [
        ("midi", midi, parameter.calc_midi),
        ("set", set_value, parameter.calc_float),
        ("nudge", nudge, parameter.calc_relative),
    ]
    for label, amount, calc in updates:
        if amount is None:
            continue
        changed = parameter.change(calc(amount))
        status = "changed" if changed else "unchanged"
        typer.echo(f"{label} {amount} → {_format_display(parameter)} ({status})")

    _print_summary(parameter)


def sweep_command(
    definition: str = typer.Argument(..., help="JSON array parameter definition"),
    step: int = typer.Option(8, "--step", min=1, help="Spacing between MIDI positions"),
):
    """Show the value reached at each MIDI controller position."""
    parameter = _load_parameter(definition)
    table = response_table(parameter, step=step)

    typer.echo(f"Response of {parameter.id} ({parameter.kind.value}) to MIDI input:")
    with pl.Config(tbl_rows=table.height):
        typer.echo(str(table))
