"""Domain validation for furniture configurations and rate tables.

Validation never stops at the first problem: every violation is collected
into a ``ValidationResult`` so the caller can report them all at once.
Calculators assume their input has passed these checks.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from .rate_table import RateTable
from .value_objects import FurnitureSpec, SofaSpec, TableSpec, WardrobeSpec

MIN_MARKUP_PERCENTAGE = 0.0
MAX_MARKUP_PERCENTAGE = 100.0

NOT_FINITE = "Must be a finite number"


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: Dotted path to the invalid field (e.g., "furniture.num_doors")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: Dotted path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


class EstimationValidationError(ValueError):
    """Raised when an estimate is requested for an invalid configuration.

    Attributes:
        result: The full set of violations.
    """

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        messages = "; ".join(f"{e.path}: {e.message}" for e in result.errors)
        super().__init__(f"Invalid configuration: {messages}")


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _check_positive(
    result: ValidationResult, prefix: str, spec: Any, names: tuple[str, ...]
) -> None:
    for name in names:
        value = getattr(spec, name)
        if not math.isfinite(value):
            result.add_error(_join(prefix, name), NOT_FINITE, value)
        elif value <= 0:
            result.add_error(_join(prefix, name), "Must be positive", value)


def _check_non_negative_counts(
    result: ValidationResult, prefix: str, spec: Any, names: tuple[str, ...]
) -> None:
    for name in names:
        value = getattr(spec, name)
        if not math.isfinite(value):
            result.add_error(_join(prefix, name), NOT_FINITE, value)
        elif value < 0:
            result.add_error(_join(prefix, name), "Cannot be negative", value)


def validate_furniture(spec: FurnitureSpec, prefix: str = "furniture") -> ValidationResult:
    """Check dimensions and counts of a furniture configuration.

    Args:
        spec: The configuration to check.
        prefix: Path prefix for reported fields.

    Returns:
        ValidationResult with one error per offending field.
    """
    result = ValidationResult()

    if isinstance(spec, WardrobeSpec):
        _check_positive(result, prefix, spec, ("height", "width", "depth"))
        _check_non_negative_counts(
            result, prefix, spec, ("num_shelves", "num_drawers", "num_doors")
        )
        # Drawer dimensions only matter once there are drawers to build.
        if spec.num_drawers > 0:
            _check_positive(result, prefix, spec, ("drawer_height", "drawer_depth"))
    elif isinstance(spec, TableSpec):
        _check_positive(
            result, prefix, spec, ("table_length", "table_width", "table_height")
        )
    elif isinstance(spec, SofaSpec):
        _check_positive(
            result, prefix, spec, ("sofa_length", "sofa_depth", "sofa_height")
        )
        _check_non_negative_counts(
            result, prefix, spec, ("num_seat_cushions", "num_back_cushions")
        )
    else:
        result.add_error(prefix, f"Unsupported furniture type: {type(spec).__name__}")

    return result


def _check_rate(result: ValidationResult, path: str, value: float) -> None:
    if not math.isfinite(value):
        result.add_error(path, NOT_FINITE, value)
    elif value < 0:
        result.add_error(path, "Cannot be negative", value)


def _check_rate_mapping(
    result: ValidationResult, path: str, mapping: Mapping[str, Any]
) -> None:
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            _check_rate_mapping(result, f"{path}.{key}", value)
        else:
            _check_rate(result, f"{path}.{key}", value)


def validate_rate_table(rates: RateTable, prefix: str = "rates") -> ValidationResult:
    """Check that every rate is finite and non-negative, and markup is within 0-100."""
    result = ValidationResult()

    for f in fields(rates):
        if f.name == "markup_percentage":
            continue
        value = getattr(rates, f.name)
        path = _join(prefix, f.name)
        if isinstance(value, Mapping):
            _check_rate_mapping(result, path, value)
        else:
            _check_rate(result, path, value)

    markup = rates.markup_percentage
    # Written as a range test so NaN fails it too.
    if not MIN_MARKUP_PERCENTAGE <= markup <= MAX_MARKUP_PERCENTAGE:
        result.add_error(
            _join(prefix, "markup_percentage"), "Must be between 0-100", markup
        )

    if rates.finish.get("none") != 0.0:
        result.add_error(
            _join(prefix, "finish.none"),
            "Finish 'none' must be present and priced at 0",
            rates.finish.get("none"),
        )

    return result


__all__ = [
    "EstimationValidationError",
    "MAX_MARKUP_PERCENTAGE",
    "MIN_MARKUP_PERCENTAGE",
    "NOT_FINITE",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_furniture",
    "validate_rate_table",
]
