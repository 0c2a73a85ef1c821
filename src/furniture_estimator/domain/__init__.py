"""Domain layer: value objects, rate table and estimation services."""

from .rate_table import RateTable, material_key
from .services import (
    DEFAULT_SHEET_CATALOG,
    BillOfQuantities,
    CostAggregator,
    CostBreakdown,
    HardwareCount,
    HourlyLaborPolicy,
    LaborPolicyType,
    MaterialRatioLaborPolicy,
    SheetSize,
    SofaCalculator,
    TableCalculator,
    WardrobeCalculator,
    compute_bill_of_quantities,
    compute_cost_breakdown,
    estimate_sheets,
    get_calculator,
    get_labor_policy,
)
from .units import inches_to_feet, inches_to_square_feet
from .validation import (
    EstimationValidationError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_furniture,
    validate_rate_table,
)
from .value_objects import (
    Currency,
    FurnitureKind,
    FurnitureSpec,
    HardwareCategory,
    MaterialType,
    SofaSpec,
    TableSpec,
    ThicknessClass,
    WardrobeSpec,
)

__all__ = [
    "BillOfQuantities",
    "CostAggregator",
    "CostBreakdown",
    "Currency",
    "DEFAULT_SHEET_CATALOG",
    "EstimationValidationError",
    "FurnitureKind",
    "FurnitureSpec",
    "HardwareCategory",
    "HardwareCount",
    "HourlyLaborPolicy",
    "LaborPolicyType",
    "MaterialRatioLaborPolicy",
    "MaterialType",
    "RateTable",
    "SheetSize",
    "SofaCalculator",
    "SofaSpec",
    "TableCalculator",
    "TableSpec",
    "ThicknessClass",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WardrobeCalculator",
    "WardrobeSpec",
    "compute_bill_of_quantities",
    "compute_cost_breakdown",
    "estimate_sheets",
    "get_calculator",
    "get_labor_policy",
    "inches_to_feet",
    "inches_to_square_feet",
    "material_key",
    "validate_furniture",
    "validate_rate_table",
]
