"""Strategy protocols for labor pricing.

Two labor policies have been used for quotes: pricing estimated hours at
the hourly rate, or charging a fixed ratio of the direct costs. The
aggregator takes one policy at construction and applies it to every
estimate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from furniture_estimator.domain.rate_table import RateTable
    from furniture_estimator.domain.services.quantities import BillOfQuantities


@runtime_checkable
class LaborPolicy(Protocol):
    """Protocol for labor cost strategies.

    Implementations:
    - HourlyLaborPolicy: estimated hours times the hourly rate
    - MaterialRatioLaborPolicy: a ratio of material, edge, hardware and
      feature costs

    Example:
        ```python
        class HourlyLaborPolicy:
            name = "hourly"

            def labor_cost(self, bill, rates, direct_cost) -> float:
                return bill.labor_hours * rates.labor_hourly_rate
        ```
    """

    name: str

    def labor_cost(
        self,
        bill: "BillOfQuantities",
        rates: "RateTable",
        direct_cost: float,
    ) -> float:
        """Compute labor cost in base currency.

        Args:
            bill: Quantities for the piece being priced.
            rates: Rate table snapshot.
            direct_cost: Material + edge banding + hardware + additional
                features cost, already computed by the aggregator.

        Returns:
            Labor cost, never negative for valid input.
        """
        ...


__all__ = [
    "LaborPolicy",
]
