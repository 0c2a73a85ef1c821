"""Rates commands for inspecting and editing the stored rate table."""

import json
from pathlib import Path
from typing import Annotated

import typer

from furniture_estimator.domain import validate_rate_table
from furniture_estimator.infrastructure import RateTableStore

rates_app = typer.Typer(
    name="rates",
    help="Show and edit the stored rate table (prices in USD).",
)

RatesDirOption = Annotated[
    Path | None,
    typer.Option("--rates-dir", help="Directory holding the stored rate table"),
]


@rates_app.command(name="show")
def show_rates(rates_dir: RatesDirOption = None) -> None:
    """Print the effective rate table as JSON."""
    rates = RateTableStore(rates_dir).load()
    typer.echo(json.dumps(rates.to_dict(), indent=2))


@rates_app.command(name="set")
def set_rate(
    path: Annotated[
        str,
        typer.Argument(help="Dotted rate path, e.g. hardware.hinge.soft_close"),
    ],
    value: Annotated[float, typer.Argument(help="New price in USD")],
    rates_dir: RatesDirOption = None,
) -> None:
    """Update one rate and save the table.

    Examples:
        furniture-estimator rates set markup_percentage 25
        furniture-estimator rates set material.plywood_18mm 5.5
        furniture-estimator rates set hardware.handle.designer 18
    """
    store = RateTableStore(rates_dir)
    try:
        rates = store.load().with_rate(path, value)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)

    result = validate_rate_table(rates)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)

    try:
        saved = store.save(rates)
    except OSError as e:
        typer.echo(f"Error: Could not save rates: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Set {path} = {value:g} ({saved})")


@rates_app.command(name="reset")
def reset_rates(rates_dir: RatesDirOption = None) -> None:
    """Discard stored rates and return to the defaults."""
    store = RateTableStore(rates_dir)
    try:
        store.reset()
    except OSError as e:
        typer.echo(f"Error: Could not remove {store.path}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo("Rates reset to defaults.")
