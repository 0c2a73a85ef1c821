"""Output formatters and exporters for estimates."""

from __future__ import annotations

import json
from dataclasses import asdict
from enum import Enum
from typing import Any

from furniture_estimator.application.dtos import EstimateOutput
from furniture_estimator.domain import (
    BillOfQuantities,
    CostBreakdown,
    Currency,
    ThicknessClass,
)


def format_money(amount: float, exchange_rate: float, symbol: str) -> str:
    """Convert a base-currency amount for display, e.g. ``"$12.50"``."""
    return f"{symbol}{amount * exchange_rate:.2f}"


def parse_money(text: str, exchange_rate: float, symbol: str) -> float:
    """Inverse of ``format_money``: a display string back to base currency.

    Raises:
        ValueError: If the text does not start with ``symbol`` or the
            exchange rate is not positive.
    """
    if exchange_rate <= 0:
        raise ValueError("Exchange rate must be positive")
    if not text.startswith(symbol):
        raise ValueError(f"Expected amount in {symbol}: {text!r}")
    return float(text[len(symbol):].replace(",", "")) / exchange_rate


def _money(amount: float, currency: Currency) -> str:
    return format_money(amount, currency.exchange_rate, currency.symbol)


def _results(output: EstimateOutput) -> tuple[BillOfQuantities, CostBreakdown]:
    if output.bill is None or output.breakdown is None:
        raise ValueError(f"{output.kind.value} estimate has no bill or breakdown")
    return output.bill, output.breakdown


class EstimateReportFormatter:
    """Formats an estimate as a plain-text report.

    Quantities are shown in feet and square feet; costs are converted to
    the output's display currency.
    """

    WIDTH = 70

    def format(self, output: EstimateOutput) -> str:
        if not output.is_valid:
            lines = ["ESTIMATE FAILED", "=" * self.WIDTH]
            lines.extend(f"  {error}" for error in output.errors)
            return "\n".join(lines)

        bill, breakdown = _results(output)
        sections = [
            self._format_header(output),
            self.format_quantities(bill),
            self._format_sheets(output),
            self.format_costs(breakdown, output.currency),
        ]
        return "\n\n".join(s for s in sections if s)

    def _format_header(self, output: EstimateOutput) -> str:
        spec = output.spec
        material = getattr(spec.material_type, "value", spec.material_type)
        lines = [
            f"{output.kind.value.upper()} ESTIMATE",
            "=" * self.WIDTH,
            f"Material: {material.replace('_', ' ').title()}",
            f"Finish:   {spec.finish_type}",
            f"Currency: {output.currency.value} "
            f"(1 USD = {output.currency.exchange_rate:g} {output.currency.value})",
        ]
        return "\n".join(lines)

    def format_quantities(self, bill: BillOfQuantities) -> str:
        lines = [
            "QUANTITIES",
            "-" * self.WIDTH,
        ]
        for thickness in ThicknessClass:
            area = bill.material_area(thickness)
            if area > 0:
                lines.append(f"  {thickness.value + ' panels':<28} {area:>10.2f} sq ft")
        lines.append(f"  {'Edge banding':<28} {bill.edge_banding_length_ft:>10.2f} ft")

        hardware = bill.hardware_count
        for label, count in (
            ("Hinges", hardware.hinge),
            ("Drawer slides", hardware.drawer_slide),
            ("Handles", hardware.handle),
            ("Hanging rods", hardware.hanging_rod),
        ):
            if count:
                lines.append(f"  {label:<28} {count:>10}")

        if bill.upholstery_area_sqft > 0:
            lines.append(f"  {'Upholstery':<28} {bill.upholstery_area_sqft:>10.2f} sq ft")
        lines.append(f"  {'Labor':<28} {bill.labor_hours:>10.1f} hours")
        return "\n".join(lines)

    def _format_sheets(self, output: EstimateOutput) -> str:
        if not output.sheet_estimates:
            return ""
        lines = ["SHEETS (estimate)", "-" * self.WIDTH]
        for thickness, sheets in output.sheet_estimates.items():
            counts = ", ".join(f"{count} x {name}" for name, count in sheets.items())
            lines.append(f"  {thickness.value:<28} {counts}")
        return "\n".join(lines)

    def format_costs(self, breakdown: CostBreakdown, currency: Currency) -> str:
        def row(label: str, amount: float) -> str:
            return f"  {label:<40} {_money(amount, currency):>20}"

        lines = ["COSTS", "-" * self.WIDTH]
        for thickness in ThicknessClass:
            cost = breakdown.material_cost(thickness)
            if cost > 0:
                lines.append(row(f"Material {thickness.value}", cost))
        lines.append(row("Total material", breakdown.total_material_cost))
        lines.append(row("Edge banding", breakdown.edge_banding_cost))
        lines.append(row("Hardware", breakdown.hardware_cost))
        lines.append(row("Additional features", breakdown.additional_features_cost))
        lines.append(
            row(f"Labor ({breakdown.labor_policy}, {breakdown.labor_hours:g} h)", breakdown.labor_cost)
        )
        lines.append("-" * self.WIDTH)
        lines.append(row("Subtotal", breakdown.subtotal))
        lines.append(row(f"Markup ({breakdown.markup_percentage:g}%)", breakdown.markup_amount))
        lines.append("=" * self.WIDTH)
        lines.append(row("FINAL PRICE", breakdown.final_cost))

        notes: list[str] = []
        if breakdown.lighting_length_ft > 0:
            notes.append(f"Lighting strip: {breakdown.lighting_length_ft:.2f} ft")
        if breakdown.exterior_finish_area_sqft > 0:
            notes.append(f"Finished surface: {breakdown.exterior_finish_area_sqft:.2f} sq ft")
        if breakdown.glass_door_count:
            notes.append(f"Glass doors: {breakdown.glass_door_count}")
        if breakdown.upholstery_cost > 0:
            notes.append(
                f"Upholstery (not included above): {_money(breakdown.upholstery_cost, currency)}"
            )
        if notes:
            lines.append("")
            lines.append("Notes:")
            lines.extend(f"  - {note}" for note in notes)

        return "\n".join(lines)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_jsonable(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


class JsonExporter:
    """Exports an estimate as JSON.

    Amounts are in the base currency (USD); ``display`` holds the final
    price converted to the output's currency.
    """

    def export(self, output: EstimateOutput) -> str:
        """Export estimate output as JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": output.errors}, indent=2)

        bill, breakdown = _results(output)
        data = {
            "kind": output.kind.value,
            "configuration": _jsonable(asdict(output.spec)),
            "quantities": _jsonable(asdict(bill)),
            "costs": _jsonable(asdict(breakdown)),
            "sheet_estimates": _jsonable(output.sheet_estimates),
            "display": {
                "currency": output.currency.value,
                "exchange_rate": output.currency.exchange_rate,
                "final_price": _money(breakdown.final_cost, output.currency),
            },
            "warnings": output.warnings,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
