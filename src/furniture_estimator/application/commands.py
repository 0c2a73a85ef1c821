"""Application commands (use cases) for furniture estimation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from furniture_estimator.domain import (
    DEFAULT_SHEET_CATALOG,
    CostAggregator,
    Currency,
    MaterialType,
    RateTable,
    SheetSize,
    ThicknessClass,
    ValidationResult,
    estimate_sheets,
    get_calculator,
    validate_furniture,
    validate_rate_table,
)
from furniture_estimator.domain.value_objects import FurnitureSpec

from .dtos import EstimateOutput

if TYPE_CHECKING:
    from furniture_estimator.contracts import LaborPolicy

logger = logging.getLogger(__name__)

# Materials bought as standard sheets and therefore given a sheet count.
SHEET_MATERIALS: frozenset[MaterialType] = frozenset({MaterialType.PLYWOOD})


class EstimateCostCommand:
    """Command to estimate the cost of one piece of furniture.

    Validates the configuration and the rate table, derives the Bill of
    Quantities with the calculator for the spec's kind, prices it, and
    adds sheet estimates for sheet materials.
    """

    def __init__(
        self,
        labor_policy: "LaborPolicy | None" = None,
        sheet_catalog: Sequence[SheetSize] = DEFAULT_SHEET_CATALOG,
    ) -> None:
        self.aggregator = CostAggregator(labor_policy)
        self.sheet_catalog = sheet_catalog

    def execute(
        self,
        spec: FurnitureSpec,
        rates: RateTable | None = None,
        currency: Currency = Currency.INR,
    ) -> EstimateOutput:
        """Execute the estimate.

        Args:
            spec: Furniture configuration of any supported kind.
            rates: Rate table snapshot; built-in defaults when omitted.
            currency: Display currency carried on the output.

        Returns:
            EstimateOutput with the bill and breakdown, or with the
            validation errors and no results if the input is invalid.
        """
        rates = rates or RateTable.defaults()

        validation = ValidationResult()
        validation.merge(validate_furniture(spec))
        validation.merge(validate_rate_table(rates))

        output = EstimateOutput(
            kind=spec.kind,
            spec=spec,
            rates=rates,
            currency=currency,
            validation=validation,
        )
        if not validation.is_valid:
            logger.info(
                f"Skipping {spec.kind.value} estimate: "
                f"{len(validation.errors)} validation error(s)"
            )
            return output

        calculator = get_calculator(spec.kind)
        output.bill = calculator.compute_quantities(spec, rates)
        output.breakdown = self.aggregator.aggregate(output.bill, spec, rates, calculator)

        if spec.material_type in SHEET_MATERIALS:
            for thickness in ThicknessClass:
                sheets = estimate_sheets(
                    output.bill.material_area(thickness), self.sheet_catalog
                )
                if sheets:
                    output.sheet_estimates[thickness] = sheets

        return output
