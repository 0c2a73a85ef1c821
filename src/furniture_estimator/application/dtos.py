"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from furniture_estimator.domain import (
    BillOfQuantities,
    CostBreakdown,
    Currency,
    FurnitureKind,
    FurnitureSpec,
    RateTable,
    ThicknessClass,
    ValidationResult,
)


@dataclass
class EstimateOutput:
    """Output DTO containing the estimate results.

    Attributes:
        kind: Furniture kind that was estimated.
        spec: The furniture configuration.
        rates: Rate table snapshot the estimate was priced with.
        bill: Bill of Quantities, None if validation failed.
        breakdown: Itemized cost, None if validation failed.
        sheet_estimates: Sheets needed per thickness class, only for
            sheet materials (plywood).
        currency: Display currency for reports.
        validation: Every error and warning found before estimating.
    """

    kind: FurnitureKind
    spec: FurnitureSpec
    rates: RateTable
    bill: BillOfQuantities | None = None
    breakdown: CostBreakdown | None = None
    sheet_estimates: dict[ThicknessClass, dict[str, int]] = field(default_factory=dict)
    currency: Currency = Currency.INR
    validation: ValidationResult = field(default_factory=ValidationResult)

    @property
    def errors(self) -> list[str]:
        """Error messages, prefixed with the offending field path."""
        return [f"{e.path}: {e.message}" for e in self.validation.errors]

    @property
    def warnings(self) -> list[str]:
        return [f"{w.path}: {w.message}" for w in self.validation.warnings]

    @property
    def is_valid(self) -> bool:
        """Check if the estimate was produced successfully."""
        return self.validation.is_valid and self.breakdown is not None
