"""Application layer - use cases and orchestration."""

from .commands import EstimateCostCommand
from .dtos import EstimateOutput

__all__ = [
    "EstimateCostCommand",
    "EstimateOutput",
]
