"""Protocol definitions for the quantity calculators.

These protocols decouple the cost aggregator from the concrete per-kind
calculators: the aggregator only needs the capability flags and the
``compute_quantities`` method.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from furniture_estimator.domain.rate_table import RateTable
    from furniture_estimator.domain.services.quantities import BillOfQuantities
    from furniture_estimator.domain.value_objects import FurnitureKind, FurnitureSpec


@runtime_checkable
class QuantityCalculator(Protocol):
    """Protocol for per-kind geometry calculators.

    A calculator turns one furniture configuration into a Bill of
    Quantities. It never prices material, edge banding, hardware or labor;
    only feature surcharges that have no generic unit price end up in
    ``features_cost``.

    Capability flags tell the aggregator which cross-cutting options apply
    to this kind of furniture.

    Example:
        ```python
        class WardrobeCalculator:
            kind = FurnitureKind.WARDROBE
            supports_lighting = True
            supports_glass_doors = True
            supports_upholstery = False

            def compute_quantities(self, spec, rates) -> BillOfQuantities:
                ...
        ```
    """

    kind: ClassVar["FurnitureKind"]
    supports_lighting: ClassVar[bool]
    supports_glass_doors: ClassVar[bool]
    supports_upholstery: ClassVar[bool]

    def compute_quantities(
        self, spec: "FurnitureSpec", rates: "RateTable"
    ) -> "BillOfQuantities":
        """Derive physical quantities for a validated configuration.

        Args:
            spec: Furniture configuration of this calculator's kind.
            rates: Rate table, read only for pre-aggregated surcharges.

        Returns:
            A fresh BillOfQuantities.
        """
        ...

    def exterior_finish_area(self, spec: "FurnitureSpec") -> float:
        """Approximate exposed surface in square feet used to price finishes."""
        ...

    def lighting_length_ft(self, spec: "FurnitureSpec") -> float:
        """Length of lighting strip in feet, 0 when not fitted."""
        ...


__all__ = [
    "QuantityCalculator",
]
