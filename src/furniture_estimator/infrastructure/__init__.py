"""Infrastructure layer - external concerns and formatters."""

from .formatters import (
    EstimateReportFormatter,
    JsonExporter,
    format_money,
    parse_money,
)
from .rate_store import RATES_KEY, RateTableStore, default_rates_dir

__all__ = [
    "EstimateReportFormatter",
    "JsonExporter",
    "RATES_KEY",
    "RateTableStore",
    "default_rates_dir",
    "format_money",
    "parse_money",
]
