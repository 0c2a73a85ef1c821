"""CLI command implementations for the furniture estimator.

This package contains subcommands for the furniture-estimator CLI, including:
- validate: Validate a configuration file
- templates: Manage estimate configuration templates
- rates: Show and edit the stored rate table
"""

from furniture_estimator.cli.commands.rates import rates_app
from furniture_estimator.cli.commands.templates import templates_app
from furniture_estimator.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = [
    "display_load_error",
    "display_validation_result",
    "rates_app",
    "templates_app",
    "validate_command",
]
