"""Cost aggregation: prices a Bill of Quantities against a rate table.

Steps run in a fixed order so partial results read naturally in a report:

1. material cost per thickness class
2. edge banding
3. hardware
4. additional features (per-piece surcharges, lighting, exterior finish)
5. labor, through the configured LaborPolicy
6. subtotal
7. final cost with markup

Everything is in the rate table's currency. Currency conversion happens
only when formatting for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..rate_table import RateTable
from ..value_objects import FurnitureSpec, HardwareCategory, ThicknessClass
from .quantities import BillOfQuantities

if TYPE_CHECKING:
    from furniture_estimator.contracts import LaborPolicy, QuantityCalculator

logger = logging.getLogger(__name__)

__all__ = [
    "CostAggregator",
    "CostBreakdown",
    "HourlyLaborPolicy",
    "LaborPolicyType",
    "MaterialRatioLaborPolicy",
    "get_labor_policy",
]

# Attribute on the furniture spec holding the selected grade per category.
_GRADE_ATTRIBUTES: dict[HardwareCategory, str] = {
    HardwareCategory.HINGE: "hinge_type",
    HardwareCategory.DRAWER_SLIDE: "drawer_slide_type",
    HardwareCategory.HANDLE: "handle_type",
}


class LaborPolicyType(str, Enum):
    """Available labor pricing policies."""

    HOURLY = "hourly"
    MATERIAL_RATIO = "material_ratio"


class HourlyLaborPolicy:
    """Labor priced as estimated hours times the hourly rate."""

    name = LaborPolicyType.HOURLY.value

    def labor_cost(
        self, bill: BillOfQuantities, rates: RateTable, direct_cost: float
    ) -> float:
        return bill.labor_hours * rates.labor_hourly_rate


class MaterialRatioLaborPolicy:
    """Labor priced as a fixed ratio of the direct costs.

    Direct costs are material, edge banding, hardware and additional
    features. Estimated hours are still reported but not priced.
    """

    name = LaborPolicyType.MATERIAL_RATIO.value

    def __init__(self, ratio: float = 0.7) -> None:
        if ratio < 0:
            raise ValueError("Labor ratio must be non-negative")
        self.ratio = ratio

    def labor_cost(
        self, bill: BillOfQuantities, rates: RateTable, direct_cost: float
    ) -> float:
        return self.ratio * direct_cost


def get_labor_policy(policy: LaborPolicyType | str) -> "LaborPolicy":
    """Instantiate a labor policy by name.

    Raises:
        ValueError: If the name is not a known policy.
    """
    policy = LaborPolicyType(policy)
    if policy is LaborPolicyType.MATERIAL_RATIO:
        return MaterialRatioLaborPolicy()
    return HourlyLaborPolicy()


@dataclass(frozen=True)
class CostBreakdown:
    """Itemized cost of one piece in base currency.

    Attributes:
        material_cost_18mm: Cost of 18mm panels.
        material_cost_12mm: Cost of 12mm panels.
        material_cost_6mm: Cost of 6mm panels.
        total_material_cost: Sum of the three classes.
        edge_banding_cost: Cost of edge banding.
        hardware_cost: Cost of hinges, slides, handles and hanging rod.
        labor_hours: Estimated hours (informational under ratio pricing).
        labor_cost: Cost of labor under the selected policy.
        additional_features_cost: Surcharges, lighting and finish.
        subtotal: Sum of all of the above costs.
        markup_percentage: Markup applied to the subtotal.
        final_cost: Subtotal with markup.
        labor_policy: Name of the labor policy used.
        lighting_length_ft: Lighting strip length, 0 if none.
        exterior_finish_area_sqft: Finished surface, 0 when unfinished.
        glass_door_count: Doors carrying the glass surcharge.
        upholstery_cost: Upholstery area priced at the selected fabric,
            shown for reference and not part of the subtotal.
    """

    material_cost_18mm: float
    material_cost_12mm: float
    material_cost_6mm: float
    total_material_cost: float
    edge_banding_cost: float
    hardware_cost: float
    labor_hours: float
    labor_cost: float
    additional_features_cost: float
    subtotal: float
    markup_percentage: float
    final_cost: float
    labor_policy: str = LaborPolicyType.HOURLY.value
    lighting_length_ft: float = 0.0
    exterior_finish_area_sqft: float = 0.0
    glass_door_count: int = 0
    upholstery_cost: float = 0.0

    def material_cost(self, thickness: ThicknessClass) -> float:
        """Material cost for one thickness class."""
        return {
            ThicknessClass.MM_18: self.material_cost_18mm,
            ThicknessClass.MM_12: self.material_cost_12mm,
            ThicknessClass.MM_6: self.material_cost_6mm,
        }[ThicknessClass(thickness)]

    @property
    def markup_amount(self) -> float:
        return self.final_cost - self.subtotal


class CostAggregator:
    """Prices Bills of Quantities with a fixed labor policy.

    Stateless apart from the policy, so one instance can be shared.
    """

    def __init__(self, labor_policy: "LaborPolicy | None" = None) -> None:
        self.labor_policy = labor_policy or HourlyLaborPolicy()

    def aggregate(
        self,
        bill: BillOfQuantities,
        spec: FurnitureSpec,
        rates: RateTable,
        calculator: "QuantityCalculator",
    ) -> CostBreakdown:
        """Price a Bill of Quantities.

        Args:
            bill: Quantities from ``calculator`` for ``spec``.
            spec: The configuration, for material, grades and feature flags.
            rates: Rate table snapshot.
            calculator: Calculator of the spec's kind, for capability flags
                and kind-specific areas.

        Returns:
            A fresh CostBreakdown.
        """
        # 1. Material
        cost_18 = bill.material_area_18mm * rates.material_rate(
            spec.material_type, ThicknessClass.MM_18
        )
        cost_12 = bill.material_area_12mm * rates.material_rate(
            spec.material_type, ThicknessClass.MM_12
        )
        cost_6 = bill.material_area_6mm * rates.material_rate(
            spec.material_type, ThicknessClass.MM_6
        )
        total_material = cost_18 + cost_12 + cost_6

        # 2. Edge banding
        edge_cost = bill.edge_banding_length_ft * rates.edge_banding

        # 3. Hardware
        hardware_cost = self._hardware_cost(bill, spec, rates)

        # 4. Additional features
        additional = bill.features_cost

        lighting_ft = 0.0
        if calculator.supports_lighting:
            lighting_ft = calculator.lighting_length_ft(spec)
            additional += lighting_ft * rates.lighting

        finish_area = 0.0
        if spec.finish_type != "none":
            finish_area = calculator.exterior_finish_area(spec)
            additional += finish_area * rates.finish_rate(spec.finish_type)

        glass_doors = 0
        if calculator.supports_glass_doors and getattr(spec, "has_glass_doors", False):
            glass_doors = spec.num_doors

        upholstery_cost = 0.0
        if calculator.supports_upholstery:
            upholstery_cost = bill.upholstery_area_sqft * rates.upholstery_rate(
                spec.upholstery_type
            )

        # 5. Labor
        direct_cost = total_material + edge_cost + hardware_cost + additional
        labor_cost = self.labor_policy.labor_cost(bill, rates, direct_cost)

        # 6-7. Subtotal and markup
        subtotal = total_material + edge_cost + hardware_cost + labor_cost + additional
        final_cost = subtotal * (1 + rates.markup_percentage / 100)

        logger.debug(
            f"Priced {calculator.kind.value}: subtotal={subtotal:.2f} "
            f"final={final_cost:.2f} policy={self.labor_policy.name}"
        )

        return CostBreakdown(
            material_cost_18mm=cost_18,
            material_cost_12mm=cost_12,
            material_cost_6mm=cost_6,
            total_material_cost=total_material,
            edge_banding_cost=edge_cost,
            hardware_cost=hardware_cost,
            labor_hours=bill.labor_hours,
            labor_cost=labor_cost,
            additional_features_cost=additional,
            subtotal=subtotal,
            markup_percentage=rates.markup_percentage,
            final_cost=final_cost,
            labor_policy=self.labor_policy.name,
            lighting_length_ft=lighting_ft,
            exterior_finish_area_sqft=finish_area,
            glass_door_count=glass_doors,
            upholstery_cost=upholstery_cost,
        )

    @staticmethod
    def _hardware_cost(
        bill: BillOfQuantities, spec: FurnitureSpec, rates: RateTable
    ) -> float:
        cost = 0.0
        for category, attribute in _GRADE_ATTRIBUTES.items():
            count = bill.hardware_count.count(category)
            if count:
                grade = getattr(spec, attribute, "")
                cost += count * rates.hardware_rate(category, grade)
        cost += bill.hardware_count.hanging_rod * rates.hanging_rod
        return cost
