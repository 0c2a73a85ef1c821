"""Configuration schema and loading system for furniture estimates.

This package provides JSON-based configuration loading and validation
for estimate requests. It includes Pydantic models for schema
validation, a configuration loader with comprehensive error handling,
and conversion of configurations into domain objects.

Public API:
    - EstimateConfiguration: Root configuration model
    - WardrobeConfigSchema: Wardrobe configuration model
    - TableConfigSchema: Table configuration model
    - SofaConfigSchema: Sofa configuration model
    - RatesConfigSchema: Rate override model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - load_rates_from_dict: Validate a rate table blob
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_config: Perform full configuration validation
    - config_to_spec: Convert the furniture section to a domain spec
    - config_to_rate_table: Apply rate overrides to a base rate table

Example:
    >>> from pathlib import Path
    >>> from furniture_estimator.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("wardrobe.json"))
    ...     print(f"Estimating a {config.furniture.kind}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from furniture_estimator.application.config.adapter import (
    apply_rate_overrides,
    config_to_rate_table,
    config_to_spec,
    furniture_to_spec,
    rate_table_to_schema,
)
from furniture_estimator.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_rates_from_dict,
    read_json_file,
)
from furniture_estimator.application.config.schemas import (
    SUPPORTED_VERSIONS,
    EstimateConfiguration,
    FurnitureConfigSchema,
    HardwareRatesSchema,
    RatesConfigSchema,
    SofaConfigSchema,
    TableConfigSchema,
    WardrobeConfigSchema,
)
from furniture_estimator.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_rate_coverage,
    validate_config,
)

__all__ = [
    "ConfigError",
    "EstimateConfiguration",
    "FurnitureConfigSchema",
    "HardwareRatesSchema",
    "RatesConfigSchema",
    "SUPPORTED_VERSIONS",
    "SofaConfigSchema",
    "TableConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WardrobeConfigSchema",
    "apply_rate_overrides",
    "check_rate_coverage",
    "config_to_rate_table",
    "config_to_spec",
    "furniture_to_spec",
    "load_config",
    "load_config_from_dict",
    "load_rates_from_dict",
    "rate_table_to_schema",
    "read_json_file",
    "validate_config",
]
