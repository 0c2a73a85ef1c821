"""Domain services for furniture estimation."""

from .calculators import (
    CalculatorRegistry,
    SofaCalculator,
    TableCalculator,
    WardrobeCalculator,
    calculator_registry,
    get_calculator,
)
from .cost_aggregator import (
    CostAggregator,
    CostBreakdown,
    HourlyLaborPolicy,
    LaborPolicyType,
    MaterialRatioLaborPolicy,
    get_labor_policy,
)
from .estimation import compute_bill_of_quantities, compute_cost_breakdown
from .quantities import BillOfQuantities, HardwareCount
from .sheet_estimator import DEFAULT_SHEET_CATALOG, SheetSize, estimate_sheets

__all__ = [
    "BillOfQuantities",
    "CalculatorRegistry",
    "CostAggregator",
    "CostBreakdown",
    "DEFAULT_SHEET_CATALOG",
    "HardwareCount",
    "HourlyLaborPolicy",
    "LaborPolicyType",
    "MaterialRatioLaborPolicy",
    "SheetSize",
    "SofaCalculator",
    "TableCalculator",
    "WardrobeCalculator",
    "calculator_registry",
    "compute_bill_of_quantities",
    "compute_cost_breakdown",
    "estimate_sheets",
    "get_calculator",
    "get_labor_policy",
]
