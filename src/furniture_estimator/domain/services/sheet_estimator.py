"""Sheet count estimation for plywood-type materials.

A greedy cover of the required area with standard sheet sizes, largest
first, rounding any remainder up to one extra sheet of the smallest size.
This is an estimate for display, not a cutting optimizer, and is never
priced.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

__all__ = ["DEFAULT_SHEET_CATALOG", "SheetSize", "estimate_sheets"]


@dataclass(frozen=True)
class SheetSize:
    """A standard sheet size.

    Attributes:
        name: Display name, e.g. "8x4" (feet).
        area_sqft: Area of one sheet in square feet.
    """

    name: str
    area_sqft: float

    def __post_init__(self) -> None:
        if self.area_sqft <= 0:
            raise ValueError("Sheet area must be positive")


DEFAULT_SHEET_CATALOG: tuple[SheetSize, ...] = (
    SheetSize("8x4", 32.0),
    SheetSize("7x4", 28.0),
    SheetSize("6x4", 24.0),
    SheetSize("7x3", 21.0),
)


def estimate_sheets(
    area_sqft: float, catalog: Sequence[SheetSize] = DEFAULT_SHEET_CATALOG
) -> dict[str, int]:
    """Estimate how many sheets of each size cover an area.

    Args:
        area_sqft: Required area in square feet.
        catalog: Available sheet sizes, in any order.

    Returns:
        Mapping from sheet name to count, containing only sizes used.
        Empty when the area is zero or the catalog is empty.

    Example:
        >>> estimate_sheets(33, [SheetSize("8x4", 32)])
        {'8x4': 2}
    """
    if area_sqft <= 0 or not catalog:
        return {}

    sizes = sorted(catalog, key=lambda s: s.area_sqft, reverse=True)
    counts: dict[str, int] = {}
    remaining = area_sqft

    for size in sizes:
        count = math.floor(remaining / size.area_sqft)
        if count > 0:
            counts[size.name] = counts.get(size.name, 0) + count
            remaining -= count * size.area_sqft

    if remaining > 0:
        smallest = sizes[-1]
        counts[smallest.name] = counts.get(smallest.name, 0) + 1

    return counts
