"""Core value objects for furniture estimation.

All dimensions are in inches. Configurations are frozen so that a single
snapshot can be shared between calculators without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FurnitureKind(str, Enum):
    """Kinds of furniture the estimator can price."""

    WARDROBE = "wardrobe"
    TABLE = "table"
    SOFA = "sofa"


class MaterialType(str, Enum):
    """Sheet materials used for carcasses, frames and panels."""

    PLYWOOD = "plywood"
    MDF = "mdf"
    SOLID_WOOD = "solid_wood"


class ThicknessClass(str, Enum):
    """Material gauge buckets, each with its own rate per square foot."""

    MM_18 = "18mm"
    MM_12 = "12mm"
    MM_6 = "6mm"


class HardwareCategory(str, Enum):
    """Hardware priced per unit by grade."""

    HINGE = "hinge"
    DRAWER_SLIDE = "drawer_slide"
    HANDLE = "handle"


class Currency(str, Enum):
    """Display currencies. All calculation happens in USD."""

    USD = "USD"
    INR = "INR"

    @property
    def exchange_rate(self) -> float:
        """Units of this currency per one USD."""
        return _EXCHANGE_RATES[self]

    @property
    def symbol(self) -> str:
        return _CURRENCY_SYMBOLS[self]


_EXCHANGE_RATES: dict[Currency, float] = {
    Currency.USD: 1.0,
    Currency.INR: 83.5,
}

_CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.USD: "$",
    Currency.INR: "₹",
}


@dataclass(frozen=True)
class WardrobeSpec:
    """A wardrobe configuration.

    Attributes:
        height: Outside height in inches.
        width: Outside width in inches.
        depth: Outside depth in inches.
        num_shelves: Number of 12mm shelves.
        num_drawers: Number of drawers sharing the full width.
        num_doors: Number of doors sharing the full width.
        drawer_height: Height of each drawer box (used when num_drawers > 0).
        drawer_depth: Depth of each drawer box (used when num_drawers > 0).
        has_hanging_rod: Whether a hanging rod is fitted.
        has_back_panel: Whether a 6mm back panel is fitted.
        has_lighting: Whether an internal light strip is fitted.
        has_glass_doors: Whether doors carry a glass surcharge.
        material_type: Sheet material for all panels.
        hinge_type: Hinge grade key in the rate table.
        drawer_slide_type: Drawer slide grade key in the rate table.
        handle_type: Handle grade key in the rate table.
        finish_type: Exterior finish key in the rate table.
    """

    height: float = 72.0
    width: float = 36.0
    depth: float = 24.0
    num_shelves: int = 2
    num_drawers: int = 0
    num_doors: int = 2
    drawer_height: float = 8.0
    drawer_depth: float = 20.0
    has_hanging_rod: bool = True
    has_back_panel: bool = True
    has_lighting: bool = False
    has_glass_doors: bool = False
    material_type: MaterialType = MaterialType.PLYWOOD
    hinge_type: str = "standard"
    drawer_slide_type: str = "standard"
    handle_type: str = "basic"
    finish_type: str = "none"

    @property
    def kind(self) -> FurnitureKind:
        return FurnitureKind.WARDROBE


@dataclass(frozen=True)
class TableSpec:
    """A table configuration (top plus four legs and an apron frame)."""

    table_length: float = 48.0
    table_width: float = 24.0
    table_height: float = 30.0
    material_type: MaterialType = MaterialType.PLYWOOD
    finish_type: str = "none"

    @property
    def kind(self) -> FurnitureKind:
        return FurnitureKind.TABLE


@dataclass(frozen=True)
class SofaSpec:
    """A sofa configuration.

    The frame material is priced like any other 18mm panel; the upholstery
    is reported as a separate area.
    """

    sofa_length: float = 80.0
    sofa_depth: float = 36.0
    sofa_height: float = 30.0
    num_seat_cushions: int = 3
    num_back_cushions: int = 3
    has_arms: bool = True
    material_type: MaterialType = MaterialType.PLYWOOD
    upholstery_type: str = "fabric"
    finish_type: str = "none"

    @property
    def kind(self) -> FurnitureKind:
        return FurnitureKind.SOFA

    @property
    def num_cushions(self) -> int:
        return self.num_seat_cushions + self.num_back_cushions


FurnitureSpec = WardrobeSpec | TableSpec | SofaSpec


__all__ = [
    "Currency",
    "FurnitureKind",
    "FurnitureSpec",
    "HardwareCategory",
    "MaterialType",
    "SofaSpec",
    "TableSpec",
    "ThicknessClass",
    "WardrobeSpec",
]
