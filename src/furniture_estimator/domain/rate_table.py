"""Rate table value object.

The rate table holds every unit price used by the cost aggregator, in the
base currency (USD). It is immutable: edits go through ``with_updates`` or
``with_rate`` and return a new table, so a calculation always reads one
consistent snapshot. Tables hash by value and can key a cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

from .value_objects import HardwareCategory, MaterialType, ThicknessClass

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL_RATES: dict[str, float] = {
    "plywood_18mm": 5.0,
    "plywood_12mm": 3.5,
    "plywood_6mm": 2.0,
    "mdf_18mm": 3.0,
    "mdf_12mm": 2.0,
    "mdf_6mm": 1.5,
    "solid_wood_18mm": 10.0,
    "solid_wood_12mm": 7.0,
    "solid_wood_6mm": 4.0,
}

DEFAULT_HARDWARE_RATES: dict[str, dict[str, float]] = {
    "hinge": {"standard": 2.0, "soft_close": 5.0, "european": 3.5},
    "drawer_slide": {"standard": 8.0, "soft_close": 15.0, "heavy_duty": 20.0},
    "handle": {"basic": 5.0, "modern": 8.0, "designer": 15.0},
}

DEFAULT_FINISH_RATES: dict[str, float] = {
    "none": 0.0,
    "paint": 2.5,
    "veneer": 4.0,
    "laminate": 3.0,
}

DEFAULT_UPHOLSTERY_RATES: dict[str, float] = {
    "fabric": 3.0,
    "leather": 10.0,
    "velvet": 5.0,
}

# Top-level mapping fields, addressable as "<field>.<key>" by with_rate().
_MAPPING_FIELDS = ("material", "finish", "upholstery")


def material_key(material_type: MaterialType | str, thickness: ThicknessClass) -> str:
    """Build the rate key for a material at a thickness, e.g. ``plywood_18mm``.

    Materials outside ``MaterialType`` give a key that simply has no rate.
    """
    material = (
        material_type.value if isinstance(material_type, MaterialType) else material_type
    )
    return f"{material}_{thickness.value}"


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    frozen: dict[str, Any] = {}
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            frozen[key] = _freeze(value)
        else:
            frozen[key] = float(value)
    return MappingProxyType(frozen)


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    return value


def _thaw(mapping: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: _thaw(value) if isinstance(value, Mapping) else value
        for key, value in mapping.items()
    }


@dataclass(frozen=True)
class RateTable:
    """Unit prices and global labor/markup parameters.

    Attributes:
        material: Price per sq ft keyed by ``{material}_{thickness}``.
        edge_banding: Price per linear foot of edge banding.
        hardware: Price per unit keyed by category then grade.
        hanging_rod: Price of one hanging rod.
        lighting: Price per linear foot of lighting strip.
        glass_door: Surcharge per glass door.
        finish: Exterior finish price per sq ft keyed by finish name.
        upholstery: Upholstery price per sq ft keyed by upholstery type.
        sofa_cushion: Price per sofa cushion.
        sofa_leg_set: Price of one set of sofa legs.
        sofa_arm_pair: Price of one pair of sofa arms.
        labor_hourly_rate: Labor price per hour.
        markup_percentage: Markup applied to the subtotal, 0 to 100.
    """

    material: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_MATERIAL_RATES)
    )
    edge_banding: float = 0.5
    hardware: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_HARDWARE_RATES.items()}
    )
    hanging_rod: float = 15.0
    lighting: float = 10.0
    glass_door: float = 30.0
    finish: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_FINISH_RATES)
    )
    upholstery: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_UPHOLSTERY_RATES)
    )
    sofa_cushion: float = 25.0
    sofa_leg_set: float = 40.0
    sofa_arm_pair: float = 50.0
    labor_hourly_rate: float = 30.0
    markup_percentage: float = 20.0

    def __post_init__(self) -> None:
        # Nested mappings are copied into read-only views.
        object.__setattr__(self, "material", _freeze(self.material))
        object.__setattr__(self, "hardware", _freeze(self.hardware))
        object.__setattr__(self, "finish", _freeze(self.finish))
        object.__setattr__(self, "upholstery", _freeze(self.upholstery))

    def __hash__(self) -> int:
        # Mapping fields hash by their items so equal tables hash equal.
        return hash(tuple(_hashable(getattr(self, f.name)) for f in fields(self)))

    @classmethod
    def defaults(cls) -> RateTable:
        """Built-in default rates."""
        return cls()

    def material_rate(
        self, material_type: MaterialType | str, thickness: ThicknessClass
    ) -> float:
        """Price per sq ft for a material at a thickness, 0 if unknown."""
        key = material_key(material_type, thickness)
        return self._lookup(self.material, key, "material")

    def hardware_rate(self, category: HardwareCategory | str, grade: str) -> float:
        """Price per unit for a hardware grade, 0 if unknown."""
        category = HardwareCategory(category).value
        grades = self.hardware.get(category, MappingProxyType({}))
        return self._lookup(grades, grade, f"hardware.{category}")

    def finish_rate(self, finish_type: str) -> float:
        """Price per sq ft for an exterior finish, 0 if unknown."""
        return self._lookup(self.finish, finish_type, "finish")

    def upholstery_rate(self, upholstery_type: str) -> float:
        """Price per sq ft for an upholstery type, 0 if unknown."""
        return self._lookup(self.upholstery, upholstery_type, "upholstery")

    def with_updates(self, **changes: Any) -> RateTable:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def with_rate(self, path: str, value: float) -> RateTable:
        """Return a copy with one entry replaced.

        Args:
            path: Dotted path to the entry, e.g. ``markup_percentage``,
                ``material.plywood_18mm``, ``hardware.hinge.soft_close`` or
                ``hardware.hanging_rod``. Keys inside mappings may be new.
            value: New price.

        Raises:
            KeyError: If the path does not name a rate.
        """
        parts = path.split(".")
        value = float(value)

        if len(parts) == 1:
            if parts[0] in _MAPPING_FIELDS or parts[0] == "hardware":
                raise KeyError(f"Rate path '{path}' names a group, not a rate")
            if parts[0] not in {f.name for f in fields(self)}:
                raise KeyError(f"Unknown rate: {path}")
            return replace(self, **{parts[0]: value})

        head = parts[0]
        if head in _MAPPING_FIELDS and len(parts) == 2:
            updated = dict(getattr(self, head))
            updated[parts[1]] = value
            return replace(self, **{head: updated})

        if head == "hardware":
            if len(parts) == 2 and parts[1] == "hanging_rod":
                return replace(self, hanging_rod=value)
            if len(parts) == 3 and parts[1] in DEFAULT_HARDWARE_RATES:
                hardware = _thaw(self.hardware)
                hardware.setdefault(parts[1], {})[parts[2]] = value
                return replace(self, hardware=hardware)

        raise KeyError(f"Unknown rate: {path}")

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form, suitable for JSON."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = _thaw(value) if isinstance(value, Mapping) else value
        return data

    @staticmethod
    def _lookup(mapping: Mapping[str, float], key: str, group: str) -> float:
        if key not in mapping:
            logger.debug(f"No {group} rate for '{key}', pricing at 0")
            return 0.0
        return mapping[key]


__all__ = [
    "DEFAULT_FINISH_RATES",
    "DEFAULT_HARDWARE_RATES",
    "DEFAULT_MATERIAL_RATES",
    "DEFAULT_UPHOLSTERY_RATES",
    "RateTable",
    "material_key",
]
