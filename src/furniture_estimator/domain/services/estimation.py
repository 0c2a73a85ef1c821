"""Entry points for quantity and cost estimation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..rate_table import RateTable
from ..validation import EstimationValidationError, ValidationResult, validate_furniture
from ..value_objects import FurnitureKind, FurnitureSpec
from .calculators import get_calculator
from .cost_aggregator import CostAggregator, CostBreakdown
from .quantities import BillOfQuantities

if TYPE_CHECKING:
    from furniture_estimator.contracts import LaborPolicy

__all__ = ["compute_bill_of_quantities", "compute_cost_breakdown"]


def _check_kind(kind: FurnitureKind, spec: FurnitureSpec) -> ValidationResult:
    result = ValidationResult()
    if spec.kind is not kind:
        result.add_error(
            "furniture.kind",
            f"Configuration is a {spec.kind.value}, expected {kind.value}",
            spec.kind.value,
        )
    return result


def compute_bill_of_quantities(
    kind: FurnitureKind | str, spec: FurnitureSpec, rates: RateTable
) -> BillOfQuantities:
    """Derive the Bill of Quantities for a configuration.

    Args:
        kind: Furniture kind selecting the calculator.
        spec: Configuration of that kind.
        rates: Rate table, used only for per-piece surcharges.

    Returns:
        The Bill of Quantities.

    Raises:
        EstimationValidationError: With every violation found, if the
            configuration is invalid or does not match ``kind``.
    """
    kind = FurnitureKind(kind)
    result = _check_kind(kind, spec)
    if result.is_valid:
        result.merge(validate_furniture(spec))
    if not result.is_valid:
        raise EstimationValidationError(result)
    return get_calculator(kind).compute_quantities(spec, rates)


def compute_cost_breakdown(
    bill: BillOfQuantities,
    kind: FurnitureKind | str,
    spec: FurnitureSpec,
    rates: RateTable,
    labor_policy: "LaborPolicy | None" = None,
) -> CostBreakdown:
    """Price a Bill of Quantities.

    Args:
        bill: Quantities from ``compute_bill_of_quantities``.
        kind: Furniture kind of ``spec``.
        spec: The configuration the bill was computed from.
        rates: Rate table snapshot.
        labor_policy: Labor strategy; hourly pricing when omitted.

    Returns:
        The itemized CostBreakdown.
    """
    calculator = get_calculator(kind)
    return CostAggregator(labor_policy).aggregate(bill, spec, rates, calculator)
