"""Validate command for checking estimate configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors and warnings, including rate-table coverage advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from furniture_estimator.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)
from furniture_estimator.infrastructure import RateTableStore


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
    rates_dir: Annotated[
        Path | None,
        typer.Option("--rates-dir", help="Directory holding the stored rate table"),
    ] = None,
) -> None:
    """Validate an estimate configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (unknown fields, invalid types, etc.)
    - Range errors (non-positive dimensions, negative counts or rates)
    - Selections with no rate in the rate table

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        furniture-estimator validate wardrobe.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config, RateTableStore(rates_dir).load())
    display_validation_result(result)

    raise typer.Exit(code=result.exit_code)
