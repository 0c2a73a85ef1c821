"""Contracts shared between the domain services and their callers.

Public API:
    - QuantityCalculator: Per-kind geometry calculator protocol
    - LaborPolicy: Labor cost strategy protocol
"""

from furniture_estimator.contracts.protocols import QuantityCalculator
from furniture_estimator.contracts.strategies import LaborPolicy

__all__ = [
    "LaborPolicy",
    "QuantityCalculator",
]
