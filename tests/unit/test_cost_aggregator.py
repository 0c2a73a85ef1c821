"""Tests for cost aggregation and labor policies.

Tests cover:
- Itemized costs for the default wardrobe, table and sofa
- Markup law and zero markup
- Determinism of repeated aggregation
- Labor policies (hourly and material ratio)
- Lighting, finish, glass door and upholstery handling
- Lookup misses priced at zero
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from furniture_estimator.domain import (
    CostAggregator,
    CostBreakdown,
    HourlyLaborPolicy,
    LaborPolicyType,
    MaterialRatioLaborPolicy,
    MaterialType,
    RateTable,
    SofaSpec,
    TableSpec,
    ThicknessClass,
    WardrobeSpec,
    compute_bill_of_quantities,
    compute_cost_breakdown,
    get_calculator,
    get_labor_policy,
)


def _price(spec, rates: RateTable, policy=None) -> CostBreakdown:
    bill = compute_bill_of_quantities(spec.kind, spec, rates)
    return compute_cost_breakdown(bill, spec.kind, spec, rates, labor_policy=policy)


class TestWardrobeCost:
    def test_default_wardrobe(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        breakdown = _price(wardrobe, default_rates)

        assert breakdown.material_cost_18mm == pytest.approx(54.0 * 5.0)
        assert breakdown.material_cost_12mm == pytest.approx(11.5 * 3.5)
        assert breakdown.material_cost_6mm == pytest.approx(18.0 * 2.0)
        assert breakdown.total_material_cost == pytest.approx(346.25)
        assert breakdown.edge_banding_cost == pytest.approx(27.0)
        # 4 standard hinges, 2 basic handles, 1 rod
        assert breakdown.hardware_cost == pytest.approx(4 * 2.0 + 2 * 5.0 + 15.0)
        assert breakdown.additional_features_cost == 0.0

        labor_hours = 72 * 36 * 24 / 10000 + 1.0 + 2.0 + 0.2 + 0.5
        assert breakdown.labor_hours == pytest.approx(labor_hours)
        assert breakdown.labor_cost == pytest.approx(labor_hours * 30.0)

        assert breakdown.subtotal == pytest.approx(346.25 + 27.0 + 33.0 + labor_hours * 30.0)
        assert breakdown.final_cost == breakdown.subtotal * 1.2
        assert breakdown.markup_percentage == 20.0
        assert breakdown.labor_policy == "hourly"

    def test_subtotal_is_sum_of_items(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        breakdown = _price(replace(wardrobe, num_drawers=2, has_lighting=True), default_rates)
        assert breakdown.subtotal == pytest.approx(
            breakdown.total_material_cost
            + breakdown.edge_banding_cost
            + breakdown.hardware_cost
            + breakdown.labor_cost
            + breakdown.additional_features_cost
        )

    def test_lighting(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        breakdown = _price(replace(wardrobe, has_lighting=True), default_rates)
        assert breakdown.lighting_length_ft == pytest.approx(3.0)
        assert breakdown.additional_features_cost == pytest.approx(3.0 * 10.0)

    def test_exterior_finish(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        breakdown = _price(replace(wardrobe, finish_type="paint"), default_rates)
        assert breakdown.exterior_finish_area_sqft == pytest.approx(48.0)
        assert breakdown.additional_features_cost == pytest.approx(48.0 * 2.5)

    def test_glass_doors(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        breakdown = _price(replace(wardrobe, has_glass_doors=True), default_rates)
        assert breakdown.glass_door_count == 2
        assert breakdown.additional_features_cost == pytest.approx(2 * 30.0)

    def test_no_glass_surcharge_without_glass(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(wardrobe, default_rates)
        assert breakdown.glass_door_count == 0

    def test_hardware_grades(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        spec = replace(
            wardrobe,
            num_drawers=2,
            hinge_type="soft_close",
            drawer_slide_type="heavy_duty",
            handle_type="designer",
        )
        breakdown = _price(spec, default_rates)
        assert breakdown.hardware_cost == pytest.approx(4 * 5.0 + 2 * 20.0 + 4 * 15.0 + 15.0)

    def test_unknown_grade_priced_at_zero(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(replace(wardrobe, hinge_type="gold_plated"), default_rates)
        assert breakdown.hardware_cost == pytest.approx(2 * 5.0 + 15.0)

    def test_unknown_finish_priced_at_zero(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(replace(wardrobe, finish_type="lacquer"), default_rates)
        assert breakdown.additional_features_cost == 0.0

    def test_unknown_material_priced_at_zero(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        spec = replace(wardrobe, material_type="oak")
        breakdown = _price(spec, default_rates)
        assert breakdown.total_material_cost == 0.0
        assert breakdown.edge_banding_cost == pytest.approx(27.0)
        assert breakdown.final_cost > 0

    def test_material_type_changes_rates(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(replace(wardrobe, material_type=MaterialType.MDF), default_rates)
        assert breakdown.material_cost(ThicknessClass.MM_18) == pytest.approx(54.0 * 3.0)
        assert breakdown.material_cost(ThicknessClass.MM_6) == pytest.approx(18.0 * 1.5)


class TestTableCost:
    def test_default_table(self, table: TableSpec, default_rates: RateTable) -> None:
        breakdown = _price(table, default_rates)

        area = 48 * 24 / 144 + (4 * (29 / 12) + (2 * 48 + 2 * 24) / 12) * (3 / 12)
        assert breakdown.total_material_cost == pytest.approx(area * 5.0)
        assert breakdown.hardware_cost == 0.0
        assert breakdown.additional_features_cost == 0.0
        assert breakdown.labor_cost == pytest.approx(2.0 * 30.0)
        assert breakdown.lighting_length_ft == 0.0

    def test_table_finish(self, table: TableSpec, default_rates: RateTable) -> None:
        breakdown = _price(replace(table, finish_type="veneer"), default_rates)
        area = (48 * 24 + 2 * 48 * 30 + 2 * 24 * 30) / 144
        assert breakdown.additional_features_cost == pytest.approx(area * 4.0)


class TestSofaCost:
    def test_default_sofa(self, sofa: SofaSpec, default_rates: RateTable) -> None:
        breakdown = _price(sofa, default_rates)

        assert breakdown.additional_features_cost == pytest.approx(6 * 25.0 + 40.0 + 50.0)
        assert breakdown.total_material_cost == pytest.approx(120.0 * 5.0)
        assert breakdown.hardware_cost == 0.0
        assert breakdown.edge_banding_cost == 0.0

    def test_upholstery_reported_outside_subtotal(
        self, sofa: SofaSpec, default_rates: RateTable
    ) -> None:
        fabric = _price(sofa, default_rates)
        leather = _price(replace(sofa, upholstery_type="leather"), default_rates)

        area = (80 * 30 * 2 + 36 * 30 * 2 + 80 * 36) / 144
        assert fabric.upholstery_cost == pytest.approx(area * 3.0)
        assert leather.upholstery_cost == pytest.approx(area * 10.0)
        assert fabric.subtotal == pytest.approx(leather.subtotal)

    def test_sofa_ignores_lighting_and_glass(
        self, sofa: SofaSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(sofa, default_rates)
        assert breakdown.lighting_length_ft == 0.0
        assert breakdown.glass_door_count == 0


class TestMarkup:
    @pytest.mark.parametrize("markup", [0.0, 12.5, 20.0, 100.0])
    def test_markup_law(self, wardrobe: WardrobeSpec, default_rates: RateTable, markup: float) -> None:
        rates = default_rates.with_updates(markup_percentage=markup)
        breakdown = _price(wardrobe, rates)
        assert breakdown.final_cost == breakdown.subtotal * (1 + markup / 100)

    def test_zero_markup(self, table: TableSpec, default_rates: RateTable) -> None:
        breakdown = _price(table, default_rates.with_updates(markup_percentage=0.0))
        assert breakdown.final_cost == breakdown.subtotal
        assert breakdown.markup_amount == 0.0


class TestDeterminism:
    def test_repeated_aggregation_is_identical(
        self, wardrobe: WardrobeSpec, default_rates: RateTable
    ) -> None:
        spec = replace(wardrobe, num_drawers=2, has_lighting=True, finish_type="paint")
        bill = compute_bill_of_quantities("wardrobe", spec, default_rates)
        aggregator = CostAggregator()
        calculator = get_calculator("wardrobe")

        first = aggregator.aggregate(bill, spec, default_rates, calculator)
        second = aggregator.aggregate(bill, spec, default_rates, calculator)
        assert first == second


class TestLaborPolicies:
    def test_default_policy_is_hourly(self) -> None:
        assert isinstance(CostAggregator().labor_policy, HourlyLaborPolicy)

    def test_get_labor_policy(self) -> None:
        assert isinstance(get_labor_policy("hourly"), HourlyLaborPolicy)
        assert isinstance(
            get_labor_policy(LaborPolicyType.MATERIAL_RATIO), MaterialRatioLaborPolicy
        )

    def test_get_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            get_labor_policy("piecework")

    def test_negative_ratio_rejected(self) -> None:
        with pytest.raises(ValueError):
            MaterialRatioLaborPolicy(ratio=-0.1)

    def test_material_ratio(self, wardrobe: WardrobeSpec, default_rates: RateTable) -> None:
        breakdown = _price(wardrobe, default_rates, MaterialRatioLaborPolicy())

        direct = 346.25 + 27.0 + 33.0
        assert breakdown.labor_cost == pytest.approx(0.7 * direct)
        assert breakdown.labor_policy == "material_ratio"
        assert breakdown.subtotal == pytest.approx(direct + 0.7 * direct)

    def test_material_ratio_includes_features(
        self, sofa: SofaSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(sofa, default_rates, MaterialRatioLaborPolicy(ratio=0.5))
        assert breakdown.labor_cost == pytest.approx(0.5 * (600.0 + 240.0))

    def test_hours_reported_under_ratio_policy(
        self, table: TableSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(table, default_rates, MaterialRatioLaborPolicy())
        assert breakdown.labor_hours == 2.0

    def test_labor_rate_scales_hourly_cost(
        self, table: TableSpec, default_rates: RateTable
    ) -> None:
        breakdown = _price(table, default_rates.with_rate("labor_hourly_rate", 50))
        assert breakdown.labor_cost == pytest.approx(100.0)
