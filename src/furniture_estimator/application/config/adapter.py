"""Conversion of configuration schemas into domain objects."""

from furniture_estimator.application.config.schemas import (
    EstimateConfiguration,
    RatesConfigSchema,
    SofaConfigSchema,
    TableConfigSchema,
    WardrobeConfigSchema,
)
from furniture_estimator.domain.rate_table import RateTable
from furniture_estimator.domain.value_objects import (
    FurnitureSpec,
    SofaSpec,
    TableSpec,
    WardrobeSpec,
)

_SPEC_TYPES: dict[type, type] = {
    WardrobeConfigSchema: WardrobeSpec,
    TableConfigSchema: TableSpec,
    SofaConfigSchema: SofaSpec,
}


def furniture_to_spec(
    furniture: WardrobeConfigSchema | TableConfigSchema | SofaConfigSchema,
) -> FurnitureSpec:
    """Convert a furniture schema to its domain spec."""
    spec_type = _SPEC_TYPES[type(furniture)]
    return spec_type(**furniture.model_dump(exclude={"kind"}))


def config_to_spec(config: EstimateConfiguration) -> FurnitureSpec:
    """Convert the furniture section of a configuration to a domain spec."""
    return furniture_to_spec(config.furniture)


def apply_rate_overrides(
    base: RateTable, overrides: RatesConfigSchema | None
) -> RateTable:
    """Apply rate overrides on top of a base table.

    Mapping entries are merged key by key; scalar entries replace the
    base value. Fields left as None keep the base value.
    """
    if overrides is None:
        return base

    changes: dict = {}
    for name in ("material", "finish", "upholstery"):
        entries = getattr(overrides, name)
        if entries is not None:
            changes[name] = {**getattr(base, name), **entries}

    for name in (
        "edge_banding",
        "lighting",
        "glass_door",
        "sofa_cushion",
        "sofa_leg_set",
        "sofa_arm_pair",
        "labor_hourly_rate",
        "markup_percentage",
    ):
        value = getattr(overrides, name)
        if value is not None:
            changes[name] = value

    if overrides.hardware is not None:
        hardware = {category: dict(grades) for category, grades in base.hardware.items()}
        for category in ("hinge", "drawer_slide", "handle"):
            grades = getattr(overrides.hardware, category)
            if grades is not None:
                hardware[category] = {**hardware.get(category, {}), **grades}
        changes["hardware"] = hardware
        if overrides.hardware.hanging_rod is not None:
            changes["hanging_rod"] = overrides.hardware.hanging_rod

    return base.with_updates(**changes) if changes else base


def config_to_rate_table(
    config: EstimateConfiguration, base: RateTable | None = None
) -> RateTable:
    """Rate table for a configuration: its overrides applied to ``base``."""
    return apply_rate_overrides(base or RateTable.defaults(), config.rates)


def rate_table_to_schema(rates: RateTable) -> RatesConfigSchema:
    """Full schema form of a rate table, used when persisting it."""
    data = rates.to_dict()
    hardware = dict(data.pop("hardware"))
    hardware["hanging_rod"] = data.pop("hanging_rod")
    data["hardware"] = hardware
    return RatesConfigSchema.model_validate(data)


__all__ = [
    "apply_rate_overrides",
    "config_to_rate_table",
    "config_to_spec",
    "furniture_to_spec",
    "rate_table_to_schema",
]
