"""Reusable UI components."""

from __future__ import annotations

import math

import pandas as pd
import streamlit as st

from ..core.aggregation import MODES
from ..core.metrics import PeriodMetrics

MODE_LABELS = {"monthly": "Monthly", "quarterly": "Quarterly"}
TIME_RANGE_KEY = "time_range"


def format_currency(value: float, decimals: int | None = None) -> str:
    """Format ``value`` as dollars with thousands separators.

    Without ``decimals`` up to three fraction digits are kept and trailing
    zeros dropped, e.g. ``$1,234.567`` or ``$200``.
    """
    if decimals is None:
        text = f"{value:,.3f}".rstrip("0").rstrip(".")
    else:
        text = f"{value:,.{decimals}f}"
    return f"${text}"


def format_growth(rate: float, has_previous: bool = True) -> str:
    """Format a growth percentage with an explicit plus sign.

    Without a previous period there is nothing to compare and ``0%`` is shown.
    """
    if not has_previous:
        return "0%"
    if not math.isfinite(rate):
        return "n/a"
    sign = "+" if rate > 0 else ""
    return f"{sign}{rate:.1f}%"


def time_range_selector() -> str:
    """Render the monthly/quarterly switch and return the selected mode.

    The selection lives in ``st.session_state[TIME_RANGE_KEY]``.
    """
    return st.radio(
        "Time range",
        MODES,
        format_func=MODE_LABELS.get,
        horizontal=True,
        label_visibility="collapsed",
        key=TIME_RANGE_KEY,
    )


def render_summary_cards(metrics: PeriodMetrics) -> None:
    """Render the three headline metric cards."""
    has_current = metrics.current_period is not None
    revenue_col, growth_col, aov_col = st.columns(3)
    with revenue_col.container(border=True):
        st.metric("Current Period Revenue", format_currency(metrics.current_revenue))
        st.caption(metrics.current_period or "")
    with growth_col.container(border=True):
        st.metric(
            "Growth Rate",
            format_growth(metrics.growth_rate, has_previous=metrics.previous_period is not None),
        )
        st.caption("Period over period")
    with aov_col.container(border=True):
        st.metric(
            "Avg Order Value",
            format_currency(metrics.current_avg_order, decimals=2) if has_current else "$0",
        )
        st.caption("Current period")


def buckets_table(buckets: pd.DataFrame, totals: dict[str, float]) -> None:
    """Display period buckets with overall totals."""
    with st.expander("Period breakdown"):
        st.caption(
            f"{format_currency(totals['total_revenue'])} across {totals['total_orders']:,} orders, "
            f"{format_currency(totals['avg_order'], decimals=2)} per order overall"
        )
        st.dataframe(
            buckets,
            column_config={
                "period": "Period",
                "revenue": st.column_config.NumberColumn("Revenue", format="$%.2f"),
                "orders": st.column_config.NumberColumn("Orders", format="%d"),
                "avg_order": st.column_config.NumberColumn("Avg Order Value", format="$%.2f"),
            },
            width="stretch",
            hide_index=True,
        )
