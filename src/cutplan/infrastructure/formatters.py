"""Output formatters and exporters for cutting plans."""

from __future__ import annotations

import json
from typing import Any

from cutplan.domain import CuttingPlan, PatternGroup


def _round2(value: float) -> float:
    return round(value, 2)


class PlanFormatter:
    """Formats a cutting plan as a plain text table for the terminal."""

    def __init__(self, width: int = 72) -> None:
        self._width = width

    def format(self, plan: CuttingPlan) -> str:
        lines = ["CUTTING PLAN", "=" * self._width]

        if plan.client and (plan.client.code or plan.client.name):
            lines.append(f"Client:   {plan.client.code} {plan.client.name}".rstrip())
        material = plan.stock.label or "(unlabelled)"
        lines.append(f"Material: {material}  bar length {plan.stock.bar_length:g}")
        lines.append("-" * self._width)
        lines.append(f"{'Qty':>4}  {'Pieces':<52} {'Waste':>10}")
        lines.append("-" * self._width)

        for group in plan.groups:
            lines.append(
                f"{group.multiplicity:>3}x  {self._describe(group):<52} "
                f"{group.waste:>10.2f}"
            )

        lines.append("-" * self._width)
        lines.append(
            f"Bars needed: {plan.bars_needed} of {plan.bars_available} "
            f"({plan.bars_remaining} left)"
        )
        lines.append(f"Total waste: {plan.total_waste:.2f}")
        lines.append(f"Utilization: {plan.utilization * 100:.1f}%")
        return "\n".join(lines)

    def _describe(self, group: PatternGroup) -> str:
        parts = []
        for piece in group.pieces:
            if piece.label:
                parts.append(f"{piece.label} {piece.length:.2f}")
            else:
                parts.append(f"{piece.length:.2f}")
        return " | ".join(parts)


class JsonPlanExporter:
    """Exports a cutting plan in the public response shape.

    Lengths and waste are rounded to two decimals; bar length and totals
    are left as computed.
    """

    def to_dict(self, plan: CuttingPlan) -> dict[str, Any]:
        data: dict[str, Any] = {
            "patterns": [self._format_group(g) for g in plan.groups],
            "barsNeeded": plan.bars_needed,
            "barsAvailable": plan.bars_available,
            "totalWaste": plan.total_waste,
            "stockLabel": plan.stock.label,
        }
        if plan.client is not None:
            data["client"] = {"code": plan.client.code, "name": plan.client.name}
        return data

    def export(self, plan: CuttingPlan) -> str:
        """Export the plan as an indented JSON string."""
        return json.dumps(self.to_dict(plan), indent=2)

    def _format_group(self, group: PatternGroup) -> dict[str, Any]:
        return {
            "multiplicity": group.multiplicity,
            "waste": _round2(group.waste),
            "barLength": group.bar_length,
            "pieces": [
                {"label": p.label, "length": _round2(p.length)} for p in group.pieces
            ],
        }
