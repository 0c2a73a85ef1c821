"""Geometry calculators for each kind of furniture.

Each calculator maps a configuration to a Bill of Quantities: panel areas
per thickness class, edge banding length, hardware counts, per-piece
surcharges, upholstery area and estimated labor hours. Prices per unit of
material, edge banding and hardware are applied later by the cost
aggregator.

All inputs are inches; areas are converted to square feet and lengths to
feet as they are accumulated.
"""

from __future__ import annotations

from typing import Callable, ClassVar, TypeVar

from ..rate_table import RateTable
from ..units import inches_to_feet, inches_to_square_feet
from ..value_objects import FurnitureKind, SofaSpec, TableSpec, WardrobeSpec
from .quantities import BillOfQuantities, HardwareCount

__all__ = [
    "CalculatorRegistry",
    "SofaCalculator",
    "TableCalculator",
    "WardrobeCalculator",
    "calculator_registry",
    "get_calculator",
]

T = TypeVar("T")


class CalculatorRegistry:
    """Singleton registry mapping furniture kinds to calculator classes.

    Example:
        @calculator_registry.register(FurnitureKind.WARDROBE)
        class WardrobeCalculator:
            ...

        calculator = calculator_registry.get(FurnitureKind.WARDROBE)()
    """

    _instance: CalculatorRegistry | None = None
    _calculators: dict[FurnitureKind, type]

    def __new__(cls) -> CalculatorRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._calculators = {}
        return cls._instance

    def register(self, kind: FurnitureKind) -> Callable[[type[T]], type[T]]:
        """Decorator to register a calculator class for a furniture kind.

        Raises:
            ValueError: If the kind already has a calculator.
        """

        def decorator(cls: type[T]) -> type[T]:
            if kind in self._calculators:
                raise ValueError(f"Calculator for '{kind.value}' already registered")
            self._calculators[kind] = cls
            return cls

        return decorator

    def get(self, kind: FurnitureKind | str) -> type:
        """Get the calculator class for a furniture kind.

        Raises:
            KeyError: If no calculator is registered for the kind.
        """
        kind = FurnitureKind(kind)
        if kind not in self._calculators:
            raise KeyError(f"Unknown furniture kind: {kind.value}")
        return self._calculators[kind]

    def list(self) -> list[FurnitureKind]:
        """List registered furniture kinds in declaration order."""
        return [kind for kind in FurnitureKind if kind in self._calculators]


calculator_registry = CalculatorRegistry()


def get_calculator(kind: FurnitureKind | str):
    """Instantiate the registered calculator for a furniture kind."""
    return calculator_registry.get(kind)()


@calculator_registry.register(FurnitureKind.WARDROBE)
class WardrobeCalculator:
    """Quantities for a wardrobe: carcass, shelves, back, doors and drawers.

    Thickness classes:
    - 18mm: sides, top, bottom, doors and drawer fronts
    - 12mm: shelves and drawer boxes
    - 6mm: back panel
    """

    kind: ClassVar[FurnitureKind] = FurnitureKind.WARDROBE
    supports_lighting: ClassVar[bool] = True
    supports_glass_doors: ClassVar[bool] = True
    supports_upholstery: ClassVar[bool] = False

    # Shelves sit this far back from the front edge.
    SHELF_SETBACK = 1.0
    MIN_LABOR_HOURS = 5.0

    def compute_quantities(self, spec: WardrobeSpec, rates: RateTable) -> BillOfQuantities:
        h, w, d = spec.height, spec.width, spec.depth

        area_18 = 0.0
        area_12 = 0.0
        area_6 = 0.0
        edge_ft = 0.0
        hinges = 0
        slides = 0
        handles = 0
        features_cost = 0.0

        # Carcass: two sides plus top and bottom, banded around the opening
        area_18 += inches_to_square_feet(2 * h * d + 2 * w * d)
        edge_ft += inches_to_feet(2 * h + 2 * w)

        # Shelves, banded on the front edge only
        shelf_depth = max(d - self.SHELF_SETBACK, 0.0)
        area_12 += inches_to_square_feet(spec.num_shelves * w * shelf_depth)
        edge_ft += inches_to_feet(spec.num_shelves * w)

        if spec.has_back_panel:
            area_6 += inches_to_square_feet(w * h)

        if spec.num_doors > 0:
            door_width = w / spec.num_doors
            area_18 += inches_to_square_feet(spec.num_doors * door_width * h)
            edge_ft += inches_to_feet(spec.num_doors * (2 * door_width + 2 * h))
            hinges += 2 * spec.num_doors
            handles += spec.num_doors
            if spec.has_glass_doors:
                features_cost += spec.num_doors * rates.glass_door

        if spec.num_drawers > 0:
            drawer_width = w / spec.num_drawers
            dh, dd = spec.drawer_height, spec.drawer_depth
            # Box: front and back, two sides and a bottom
            box_area = 2 * drawer_width * dh + 2 * dd * dh + drawer_width * dd
            front_area = drawer_width * dh
            area_12 += inches_to_square_feet(spec.num_drawers * box_area)
            area_18 += inches_to_square_feet(spec.num_drawers * front_area)
            edge_ft += inches_to_feet(spec.num_drawers * (2 * drawer_width + 2 * dh))
            slides += spec.num_drawers
            handles += spec.num_drawers

        return BillOfQuantities(
            material_area_18mm=area_18,
            material_area_12mm=area_12,
            material_area_6mm=area_6,
            edge_banding_length_ft=edge_ft,
            hardware_count=HardwareCount(
                hinge=hinges,
                drawer_slide=slides,
                handle=handles,
                hanging_rod=1 if spec.has_hanging_rod else 0,
            ),
            features_cost=features_cost,
            upholstery_area_sqft=0.0,
            labor_hours=self.labor_hours(spec),
        )

    def labor_hours(self, spec: WardrobeSpec) -> float:
        """Estimated build hours, never below MIN_LABOR_HOURS."""
        hours = (
            (spec.height * spec.width * spec.depth) / 10000
            + spec.num_shelves * 0.5
            + spec.num_drawers * 2.0
            + spec.num_doors * 1.0
            + (0.2 if spec.has_hanging_rod else 0.0)
            + (0.5 if spec.has_back_panel else 0.0)
        )
        return max(hours, self.MIN_LABOR_HOURS)

    def exterior_finish_area(self, spec: WardrobeSpec) -> float:
        # Two sides, the front and the top
        h, w, d = spec.height, spec.width, spec.depth
        return inches_to_square_feet(2 * h * d + w * h + w * d)

    def lighting_length_ft(self, spec: WardrobeSpec) -> float:
        return inches_to_feet(spec.width) if spec.has_lighting else 0.0


@calculator_registry.register(FurnitureKind.TABLE)
class TableCalculator:
    """Quantities for a table: an 18mm top plus legs and an apron frame.

    Legs and frame are modelled as 3-inch-wide strips of 18mm material.
    """

    kind: ClassVar[FurnitureKind] = FurnitureKind.TABLE
    supports_lighting: ClassVar[bool] = False
    supports_glass_doors: ClassVar[bool] = False
    supports_upholstery: ClassVar[bool] = False

    LEG_COUNT = 4
    # Legs stop this far below the top surface.
    TOP_THICKNESS_ALLOWANCE = 1.0
    STRIP_WIDTH_FT = 3 / 12
    MIN_LABOR_HOURS = 2.0

    def compute_quantities(self, spec: TableSpec, rates: RateTable) -> BillOfQuantities:
        length, width, height = spec.table_length, spec.table_width, spec.table_height

        area_18 = inches_to_square_feet(length * width)
        edge_ft = inches_to_feet(2 * length + 2 * width)

        leg_length = max(height - self.TOP_THICKNESS_ALLOWANCE, 0.0)
        leg_linear_ft = self.LEG_COUNT * inches_to_feet(leg_length)
        frame_perimeter_ft = inches_to_feet(2 * length + 2 * width)
        area_18 += (leg_linear_ft + frame_perimeter_ft) * self.STRIP_WIDTH_FT

        return BillOfQuantities(
            material_area_18mm=area_18,
            edge_banding_length_ft=edge_ft,
            labor_hours=self.labor_hours(spec),
        )

    def labor_hours(self, spec: TableSpec) -> float:
        hours = (spec.table_length * spec.table_width * spec.table_height) / 50000
        return max(hours, self.MIN_LABOR_HOURS)

    def exterior_finish_area(self, spec: TableSpec) -> float:
        # Top plus the four apron faces
        length, width, height = spec.table_length, spec.table_width, spec.table_height
        return inches_to_square_feet(
            length * width + 2 * length * height + 2 * width * height
        )

    def lighting_length_ft(self, spec: TableSpec) -> float:
        return 0.0


@calculator_registry.register(FurnitureKind.SOFA)
class SofaCalculator:
    """Quantities for a sofa: a frame, upholstery and bought-in parts.

    The frame area is a volumetric proxy (volume / 5), not a panel
    decomposition. Cushions, legs and arms are priced per piece into
    ``features_cost``.
    """

    kind: ClassVar[FurnitureKind] = FurnitureKind.SOFA
    supports_lighting: ClassVar[bool] = False
    supports_glass_doors: ClassVar[bool] = False
    supports_upholstery: ClassVar[bool] = True

    FRAME_VOLUME_DIVISOR = 5.0
    MIN_LABOR_HOURS = 8.0

    def compute_quantities(self, spec: SofaSpec, rates: RateTable) -> BillOfQuantities:
        length, depth, height = spec.sofa_length, spec.sofa_depth, spec.sofa_height

        frame_area = inches_to_square_feet(
            (length * depth * height) / self.FRAME_VOLUME_DIVISOR
        )

        # Front and back, two sides, and the seat
        upholstery_area = inches_to_square_feet(
            length * height * 2 + depth * height * 2 + length * depth
        )

        features_cost = spec.num_cushions * rates.sofa_cushion + rates.sofa_leg_set
        if spec.has_arms:
            features_cost += rates.sofa_arm_pair

        return BillOfQuantities(
            material_area_18mm=frame_area,
            features_cost=features_cost,
            upholstery_area_sqft=upholstery_area,
            labor_hours=self.labor_hours(spec),
        )

    def labor_hours(self, spec: SofaSpec) -> float:
        hours = (
            (spec.sofa_length * spec.sofa_depth * spec.sofa_height) / 15000
            + spec.num_cushions * 0.5
            + (1.5 if spec.has_arms else 0.0)
        )
        return max(hours, self.MIN_LABOR_HOURS)

    def exterior_finish_area(self, spec: SofaSpec) -> float:
        # Front and one side
        length, depth, height = spec.sofa_length, spec.sofa_depth, spec.sofa_height
        return inches_to_square_feet(length * height + depth * height)

    def lighting_length_ft(self, spec: SofaSpec) -> float:
        return 0.0
