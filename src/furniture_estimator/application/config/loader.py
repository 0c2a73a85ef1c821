"""Reading estimate files and persisted rate blobs.

Everything that can go wrong before the domain checks run (a missing
file, broken JSON, a field pydantic rejects) surfaces as ``ConfigError``.
Field paths use the same dotted form as domain validation, so
``furniture.num_doors`` means the same field in both.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from furniture_estimator.application.config.schemas import (
    EstimateConfiguration,
    RatesConfigSchema,
)
from furniture_estimator.domain.value_objects import FurnitureKind

_KIND_TAGS = frozenset(kind.value for kind in FurnitureKind)


class ConfigError(Exception):
    """An estimate file or rate blob that cannot be used.

    Attributes:
        message: Summary suitable for printing as-is.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: File the data came from, None for in-memory data.
        details: One dict per problem. Validation problems carry
            path/message/value/error_type; JSON problems carry
            line/column/message.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _field_path(loc: tuple[str | int, ...]) -> str:
    """Dotted field path for a pydantic error location.

    The furniture union adds its ``kind`` tag to the location; it is
    dropped so the path names the field in the file.

    Examples:
        >>> _field_path(("furniture", "wardrobe", "num_doors"))
        'furniture.num_doors'
        >>> _field_path(("rates", "hardware", "hinge", "soft_close"))
        'rates.hardware.hinge.soft_close'
    """
    segments = [str(segment) for segment in loc]
    if len(segments) > 1 and segments[0] == "furniture" and segments[1] in _KIND_TAGS:
        del segments[1]
    return ".".join(segments)


def _schema_error(
    error: PydanticValidationError, what: str, path: Path | None
) -> ConfigError:
    details = [
        {
            "path": _field_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    lines = [f"Invalid {what}:"]
    for detail in details:
        lines.append(f"  - {detail['path']}: {detail['message']}")
    return ConfigError("\n".join(lines), "validation", path, details)


def _validate(model: type[BaseModel], data: Any, what: str, path: Path | None = None):
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise _schema_error(e, what, path) from e


def read_json_file(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        ConfigError: With error_type "file_not_found", "permission_denied",
            "file_read_error" or "json_parse".
    """
    if not path.exists():
        raise ConfigError(f"File not found: {path}", "file_not_found", path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        error_type = (
            "permission_denied" if isinstance(e, PermissionError) else "file_read_error"
        )
        raise ConfigError(f"Cannot read {path}: {e}", error_type, path) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> EstimateConfiguration:
    """Load an estimate file.

    Only structure and types are checked here; run ``validate_config``
    on the result for range checks and rate coverage.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the estimate schema.

    Example:
        >>> try:
        ...     config = load_config(Path("wardrobe.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    return _validate(EstimateConfiguration, read_json_file(path), "estimate file", path)


def load_config_from_dict(data: dict[str, Any]) -> EstimateConfiguration:
    """Load an estimate configuration that is already parsed."""
    return _validate(EstimateConfiguration, data, "estimate configuration")


def load_rates_from_dict(data: Any) -> RatesConfigSchema:
    """Check a rate table blob, full or partial."""
    return _validate(RatesConfigSchema, data, "rate table")
