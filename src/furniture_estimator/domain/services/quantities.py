"""Bill of Quantities produced by the geometry calculators."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects import HardwareCategory, ThicknessClass

__all__ = ["BillOfQuantities", "HardwareCount"]


@dataclass(frozen=True)
class HardwareCount:
    """Unit counts of hardware needed for one piece."""

    hinge: int = 0
    drawer_slide: int = 0
    handle: int = 0
    hanging_rod: int = 0

    def count(self, category: HardwareCategory) -> int:
        """Count for a grade-priced hardware category."""
        return getattr(self, HardwareCategory(category).value)

    @property
    def total(self) -> int:
        return self.hinge + self.drawer_slide + self.handle + self.hanging_rod


@dataclass(frozen=True)
class BillOfQuantities:
    """Physical quantities derived from a furniture configuration.

    Areas are in square feet, lengths in feet. ``features_cost`` holds the
    surcharges that are priced per piece rather than per unit of material
    (glass doors, cushions, legs, arms).

    Attributes:
        material_area_18mm: Area of 18mm panels.
        material_area_12mm: Area of 12mm panels.
        material_area_6mm: Area of 6mm panels.
        edge_banding_length_ft: Total edge banding.
        hardware_count: Hardware unit counts.
        features_cost: Pre-aggregated surcharges in base currency.
        upholstery_area_sqft: Upholstered surface, 0 for non-upholstered kinds.
        labor_hours: Estimated labor hours.
    """

    material_area_18mm: float = 0.0
    material_area_12mm: float = 0.0
    material_area_6mm: float = 0.0
    edge_banding_length_ft: float = 0.0
    hardware_count: HardwareCount = field(default_factory=HardwareCount)
    features_cost: float = 0.0
    upholstery_area_sqft: float = 0.0
    labor_hours: float = 0.0

    def material_area(self, thickness: ThicknessClass) -> float:
        """Area in square feet for one thickness class."""
        return {
            ThicknessClass.MM_18: self.material_area_18mm,
            ThicknessClass.MM_12: self.material_area_12mm,
            ThicknessClass.MM_6: self.material_area_6mm,
        }[ThicknessClass(thickness)]

    @property
    def total_material_area(self) -> float:
        return self.material_area_18mm + self.material_area_12mm + self.material_area_6mm
