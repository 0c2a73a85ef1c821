"""Typer CLI for furniture cost estimation."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from furniture_estimator.application import EstimateCostCommand
from furniture_estimator.application.config import (
    ConfigError,
    config_to_rate_table,
    config_to_spec,
    load_config,
    validate_config,
)
from furniture_estimator.cli.commands import (
    display_load_error,
    display_validation_result,
    rates_app,
    templates_app,
    validate_command,
)
from furniture_estimator.domain import Currency, LaborPolicyType, get_labor_policy
from furniture_estimator.infrastructure import (
    EstimateReportFormatter,
    JsonExporter,
    RateTableStore,
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="furniture-estimator",
    help="Estimate material, labor and final price for wardrobes, tables and sofas.",
)

app.command(name="validate")(validate_command)
app.add_typer(rates_app, name="rates")
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Estimate material, labor and final price for wardrobes, tables and sofas."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def estimate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON estimate configuration"),
    ],
    currency: Annotated[
        Currency | None,
        typer.Option("--currency", "-c", help="Display currency (default: from config)"),
    ] = None,
    labor_policy: Annotated[
        LaborPolicyType | None,
        typer.Option("--labor-policy", "-l", help="Labor pricing policy (default: from config)"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.TEXT,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
    rates_dir: Annotated[
        Path | None,
        typer.Option("--rates-dir", help="Directory holding the stored rate table"),
    ] = None,
) -> None:
    """Estimate the cost of the piece described by a configuration file.

    Stored rates are used as the base; rates in the configuration override
    them for this estimate only.

    Examples:
        furniture-estimator estimate wardrobe.json
        furniture-estimator estimate sofa.json --currency USD --format json
        furniture-estimator estimate table.json --labor-policy material_ratio
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    base_rates = RateTableStore(rates_dir).load()
    validation = validate_config(config, base_rates)
    if not validation.is_valid:
        display_validation_result(validation)
        raise typer.Exit(code=1)
    for warning in validation.warnings:
        typer.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    command = EstimateCostCommand(
        labor_policy=get_labor_policy(labor_policy or config.labor_policy)
    )
    result = command.execute(
        config_to_spec(config),
        config_to_rate_table(config, base_rates),
        currency=currency or config.currency,
    )

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    result.validation.warnings.extend(validation.warnings)

    if output_format is OutputFormat.JSON:
        report = JsonExporter().export(result)
    else:
        report = EstimateReportFormatter().format(result)

    if output_file is not None:
        try:
            output_file.write_text(report, encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: Could not write file: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Estimate written to {output_file}")
    else:
        typer.echo(report)


if __name__ == "__main__":
    app()
