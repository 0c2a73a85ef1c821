"""Unit conversions. Inputs are always inches."""

from __future__ import annotations

INCHES_PER_FOOT = 12.0
SQUARE_INCHES_PER_SQUARE_FOOT = 144.0


def inches_to_feet(inches: float) -> float:
    """Convert a length in inches to feet."""
    return inches / INCHES_PER_FOOT


def inches_to_square_feet(square_inches: float) -> float:
    """Convert an area in square inches to square feet."""
    return square_inches / SQUARE_INCHES_PER_SQUARE_FOOT


__all__ = [
    "INCHES_PER_FOOT",
    "SQUARE_INCHES_PER_SQUARE_FOOT",
    "inches_to_feet",
    "inches_to_square_feet",
]
