"""Tests for the per-kind geometry calculators.

Tests cover:
- Registry lookup by furniture kind
- Concrete wardrobe, table and sofa quantities
- Zero-count invariants for doors, drawers and hanging rod
- Shelf monotonicity
- Non-negative outputs across a spread of valid configurations
- Minimum labor hours
"""

from __future__ import annotations

from dataclasses import fields, replace

import pytest

from furniture_estimator.domain import (
    BillOfQuantities,
    EstimationValidationError,
    FurnitureKind,
    RateTable,
    SofaCalculator,
    SofaSpec,
    TableCalculator,
    TableSpec,
    WardrobeCalculator,
    WardrobeSpec,
    compute_bill_of_quantities,
    get_calculator,
)
from furniture_estimator.domain.services import calculator_registry


def _assert_non_negative(bill: BillOfQuantities) -> None:
    for f in fields(bill):
        value = getattr(bill, f.name)
        if f.name == "hardware_count":
            for hw in fields(value):
                assert getattr(value, hw.name) >= 0, hw.name
        else:
            assert value >= 0, f.name


class TestCalculatorRegistry:
    def test_all_kinds_registered(self) -> None:
        assert set(calculator_registry.list()) == set(FurnitureKind)

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (FurnitureKind.WARDROBE, WardrobeCalculator),
            ("table", TableCalculator),
            ("sofa", SofaCalculator),
        ],
    )
    def test_get_calculator(self, kind, expected) -> None:
        assert isinstance(get_calculator(kind), expected)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            get_calculator("bookcase")

    def test_capability_flags(self) -> None:
        assert WardrobeCalculator.supports_lighting
        assert WardrobeCalculator.supports_glass_doors
        assert not WardrobeCalculator.supports_upholstery
        assert not TableCalculator.supports_lighting
        assert SofaCalculator.supports_upholstery
        assert not SofaCalculator.supports_glass_doors


class TestWardrobeCalculator:
    def test_default_wardrobe_quantities(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        bill = WardrobeCalculator().compute_quantities(wardrobe, default_rates)

        # Carcass plus two 18" doors
        expected_18 = (2 * 72 * 24 + 2 * 36 * 24) / 144 + 2 * (18 * 72) / 144
        assert bill.material_area_18mm == pytest.approx(expected_18)
        assert bill.material_area_18mm == pytest.approx(54.0)
        assert bill.material_area_12mm == pytest.approx(2 * 36 * 23 / 144)
        assert bill.material_area_6mm == pytest.approx(18.0)
        # Carcass 18 ft, shelves 6 ft, doors 30 ft
        assert bill.edge_banding_length_ft == pytest.approx(54.0)

        hw = bill.hardware_count
        assert (hw.hinge, hw.drawer_slide, hw.handle, hw.hanging_rod) == (4, 0, 2, 1)
        assert bill.features_cost == 0.0
        assert bill.upholstery_area_sqft == 0.0

    def test_labor_hours(self, wardrobe: WardrobeSpec) -> None:
        expected = 72 * 36 * 24 / 10000 + 2 * 0.5 + 2 * 1.0 + 0.2 + 0.5
        assert WardrobeCalculator().labor_hours(wardrobe) == pytest.approx(expected)

    def test_minimum_labor_hours(self) -> None:
        tiny = WardrobeSpec(
            height=10, width=10, depth=10, num_shelves=0, num_doors=0,
            has_hanging_rod=False, has_back_panel=False,
        )
        assert WardrobeCalculator().labor_hours(tiny) == 5.0

    def test_no_doors_means_no_hinges_or_door_handles(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        spec = replace(wardrobe, num_doors=0, num_drawers=0)
        bill = WardrobeCalculator().compute_quantities(spec, default_rates)
        assert bill.hardware_count.hinge == 0
        assert bill.hardware_count.handle == 0

    def test_no_drawers_means_no_slides(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        bill = WardrobeCalculator().compute_quantities(wardrobe, default_rates)
        assert bill.hardware_count.drawer_slide == 0

    def test_no_hanging_rod(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        spec = replace(wardrobe, has_hanging_rod=False)
        bill = WardrobeCalculator().compute_quantities(spec, default_rates)
        assert bill.hardware_count.hanging_rod == 0

    def test_drawers(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        spec = replace(wardrobe, num_doors=0, num_drawers=3, drawer_height=8, drawer_depth=20)
        bill = WardrobeCalculator().compute_quantities(spec, default_rates)

        drawer_width = 36 / 3
        box = 2 * drawer_width * 8 + 2 * 20 * 8 + drawer_width * 20
        assert bill.hardware_count.drawer_slide == 3
        assert bill.hardware_count.handle == 3
        assert bill.material_area_12mm == pytest.approx(
            (2 * 36 * 23 + 3 * box) / 144
        )
        assert bill.material_area_18mm == pytest.approx(
            (2 * 72 * 24 + 2 * 36 * 24 + 3 * drawer_width * 8) / 144
        )

    @pytest.mark.parametrize("shelves", [0, 1, 4])
    def test_adding_a_shelf(
        self, wardrobe: WardrobeSpec, default_rates: RateTable, shelves: int
    ) -> None:
        calculator = WardrobeCalculator()
        before = calculator.compute_quantities(
            replace(wardrobe, num_shelves=shelves), default_rates
        )
        after = calculator.compute_quantities(
            replace(wardrobe, num_shelves=shelves + 1), default_rates
        )

        w, d = wardrobe.width, wardrobe.depth
        assert after.material_area_12mm - before.material_area_12mm == pytest.approx(
            w * (d - 1) / 144
        )
        assert after.edge_banding_length_ft - before.edge_banding_length_ft == pytest.approx(
            w / 12
        )

    def test_glass_doors_surcharge(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        spec = replace(wardrobe, has_glass_doors=True)
        bill = WardrobeCalculator().compute_quantities(spec, default_rates)
        assert bill.features_cost == pytest.approx(2 * default_rates.glass_door)

    def test_glass_doors_without_doors(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        spec = replace(wardrobe, has_glass_doors=True, num_doors=0)
        bill = WardrobeCalculator().compute_quantities(spec, default_rates)
        assert bill.features_cost == 0.0

    def test_no_back_panel(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        spec = replace(wardrobe, has_back_panel=False)
        bill = WardrobeCalculator().compute_quantities(spec, default_rates)
        assert bill.material_area_6mm == 0.0

    def test_lighting_length(self, wardrobe: WardrobeSpec) -> None:
        calculator = WardrobeCalculator()
        assert calculator.lighting_length_ft(wardrobe) == 0.0
        assert calculator.lighting_length_ft(replace(wardrobe, has_lighting=True)) == 3.0

    def test_exterior_finish_area(self, wardrobe: WardrobeSpec) -> None:
        expected = (2 * 72 * 24 + 36 * 72 + 36 * 24) / 144
        assert WardrobeCalculator().exterior_finish_area(wardrobe) == pytest.approx(expected)


class TestTableCalculator:
    def test_default_table_quantities(self, table: TableSpec, default_rates: RateTable) -> None:
        bill = TableCalculator().compute_quantities(table, default_rates)

        expected = 48 * 24 / 144 + (4 * (29 / 12) + (2 * 48 + 2 * 24) / 12) * (3 / 12)
        assert bill.material_area_18mm == pytest.approx(expected)
        assert bill.material_area_12mm == 0.0
        assert bill.material_area_6mm == 0.0
        assert bill.edge_banding_length_ft == pytest.approx(12.0)
        assert bill.hardware_count.total == 0
        assert bill.features_cost == 0.0

    def test_minimum_labor_hours(self, table: TableSpec) -> None:
        # 48 * 24 * 30 / 50000 is below the minimum
        assert TableCalculator().labor_hours(table) == 2.0

    def test_large_table_labor_hours(self) -> None:
        spec = TableSpec(table_length=120, table_width=48, table_height=30)
        assert TableCalculator().labor_hours(spec) == pytest.approx(120 * 48 * 30 / 50000)

    def test_exterior_finish_area(self, table: TableSpec) -> None:
        expected = (48 * 24 + 2 * 48 * 30 + 2 * 24 * 30) / 144
        assert TableCalculator().exterior_finish_area(table) == pytest.approx(expected)


class TestSofaCalculator:
    def test_default_sofa_quantities(self, sofa: SofaSpec, default_rates: RateTable) -> None:
        bill = SofaCalculator().compute_quantities(sofa, default_rates)

        assert bill.upholstery_area_sqft == pytest.approx(
            (80 * 30 * 2 + 36 * 30 * 2 + 80 * 36) / 144
        )
        assert bill.features_cost == pytest.approx(
            6 * default_rates.sofa_cushion
            + default_rates.sofa_leg_set
            + default_rates.sofa_arm_pair
        )
        assert bill.material_area_18mm == pytest.approx(80 * 36 * 30 / 5 / 144)
        assert bill.edge_banding_length_ft == 0.0
        assert bill.hardware_count.total == 0

    def test_without_arms(self, sofa: SofaSpec, default_rates: RateTable) -> None:
        bill = SofaCalculator().compute_quantities(replace(sofa, has_arms=False), default_rates)
        assert bill.features_cost == pytest.approx(6 * 25.0 + 40.0)

    def test_labor_hours(self, sofa: SofaSpec) -> None:
        expected = 80 * 36 * 30 / 15000 + 6 * 0.5 + 1.5
        assert SofaCalculator().labor_hours(sofa) == pytest.approx(expected)

    def test_minimum_labor_hours(self) -> None:
        spec = SofaSpec(
            sofa_length=40, sofa_depth=20, sofa_height=20,
            num_seat_cushions=0, num_back_cushions=0, has_arms=False,
        )
        assert SofaCalculator().labor_hours(spec) == 8.0


class TestNonNegativeOutputs:
    @pytest.mark.parametrize(
        "spec",
        [
            WardrobeSpec(height=1, width=1, depth=1, num_shelves=0, num_doors=0),
            WardrobeSpec(num_drawers=5, num_doors=6, num_shelves=8, has_lighting=True),
            WardrobeSpec(height=96, width=120, depth=30, has_glass_doors=True),
            TableSpec(table_length=1, table_width=1, table_height=0.5),
            TableSpec(table_length=200, table_width=60, table_height=42),
            SofaSpec(num_seat_cushions=0, num_back_cushions=0, has_arms=False),
            SofaSpec(sofa_length=120, sofa_depth=40, sofa_height=36),
        ],
    )
    def test_quantities_non_negative(self, spec, default_rates: RateTable) -> None:
        bill = get_calculator(spec.kind).compute_quantities(spec, default_rates)
        _assert_non_negative(bill)


class TestComputeBillOfQuantities:
    def test_dispatches_by_kind(self, table: TableSpec, default_rates: RateTable) -> None:
        bill = compute_bill_of_quantities("table", table, default_rates)
        assert bill == TableCalculator().compute_quantities(table, default_rates)

    def test_kind_mismatch(self, table: TableSpec, default_rates: RateTable) -> None:
        with pytest.raises(EstimationValidationError) as exc_info:
            compute_bill_of_quantities(FurnitureKind.SOFA, table, default_rates)
        assert exc_info.value.result.errors[0].path == "furniture.kind"

    def test_invalid_configuration_collects_all_errors(
        self, default_rates: RateTable
    ) -> None:
        spec = WardrobeSpec(height=0, width=-1, num_shelves=-2)
        with pytest.raises(EstimationValidationError) as exc_info:
            compute_bill_of_quantities("wardrobe", spec, default_rates)

        paths = {e.path for e in exc_info.value.result.errors}
        assert paths == {"furniture.height", "furniture.width", "furniture.num_shelves"}


class TestProtocols:
    def test_calculators_satisfy_protocol(self) -> None:
        from furniture_estimator.contracts import QuantityCalculator

        for kind in FurnitureKind:
            assert isinstance(get_calculator(kind), QuantityCalculator)

    def test_labor_policies_satisfy_protocol(self) -> None:
        from furniture_estimator.contracts import LaborPolicy
        from furniture_estimator.domain import HourlyLaborPolicy, MaterialRatioLaborPolicy

        assert isinstance(HourlyLaborPolicy(), LaborPolicy)
        assert isinstance(MaterialRatioLaborPolicy(), LaborPolicy)
