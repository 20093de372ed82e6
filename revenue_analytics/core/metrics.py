"""Period-over-period metrics derived from aggregated buckets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import pandas as pd


@dataclass(frozen=True)
class PeriodMetrics:
    """Headline numbers for the most recent period."""

    current_period: str | None = None
    previous_period: str | None = None
    current_revenue: float = 0.0
    current_orders: int = 0
    current_avg_order: float = 0.0
    previous_revenue: float = 0.0
    growth_rate: float = 0.0


def growth_rate(current: float, previous: float) -> float:
    """Percentage change from ``previous`` to ``current``, one decimal.

    A zero ``previous`` gives ``inf``, ``-inf`` or ``nan`` depending on the
    sign of ``current``.
    """
    if previous == 0:
        if current > 0:
            return math.inf
        if current < 0:
            return -math.inf
        return math.nan
    change = (current - previous) / previous * 100
    # Ties round away from zero: 6.25 -> 6.3, -6.25 -> -6.3.
    return float(Decimal(change).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_growth_metrics(buckets: pd.DataFrame) -> PeriodMetrics:
    """Compare the last two buckets of a sorted bucket frame."""
    if buckets.empty:
        return PeriodMetrics()

    current = buckets.iloc[-1]
    metrics = {
        "current_period": str(current["period"]),
        "current_revenue": float(current["revenue"]),
        "current_orders": int(current["orders"]),
        "current_avg_order": float(current["avg_order"]),
    }
    if len(buckets) < 2:
        return PeriodMetrics(**metrics)

    previous = buckets.iloc[-2]
    return PeriodMetrics(
        previous_period=str(previous["period"]),
        previous_revenue=float(previous["revenue"]),
        growth_rate=growth_rate(metrics["current_revenue"], float(previous["revenue"])),
        **metrics,
    )


def summary_totals(buckets: pd.DataFrame) -> dict[str, float]:
    """Compute totals across every bucket."""
    if buckets.empty:
        return {"total_revenue": 0.0, "total_orders": 0, "avg_order": 0.0}
    total_revenue = float(buckets["revenue"].sum())
    total_orders = int(buckets["orders"].sum())
    return {
        "total_revenue": total_revenue,
        "total_orders": total_orders,
        "avg_order": total_revenue / total_orders if total_orders else 0.0,
    }
