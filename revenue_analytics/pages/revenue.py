"""Revenue analytics page."""

from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from ..config import get_settings
from ..core.aggregation import aggregate_orders
from ..core.metrics import compute_growth_metrics, summary_totals
from ..services import orders_repo
from ..ui.charts import orders_and_aov, revenue_trend
from ..ui.components import buckets_table, render_summary_cards, time_range_selector

logger = logging.getLogger(__name__)


@st.cache_data(ttl=get_settings().orders_cache_ttl, show_spinner=False)
def load_orders() -> pd.DataFrame:
    """Load every order, cached between reruns."""
    return orders_repo.fetch_all_orders()


def _orders_or_empty() -> pd.DataFrame:
    with st.spinner("Loading orders..."):
        try:
            return load_orders()
        except (orders_repo.OrdersFetchError, RuntimeError) as exc:
            logger.error("Order data unavailable: %s", exc)
            st.error(f"Could not load orders: {exc}")
            return pd.DataFrame()


def render() -> None:
    """Render the revenue analytics page."""
    title_col, range_col = st.columns([3, 1], vertical_alignment="center")
    with title_col:
        st.title("Revenue Analytics")
        st.caption("Track revenue trends and growth patterns")
    with range_col:
        time_range = time_range_selector()

    orders = _orders_or_empty()
    buckets = aggregate_orders(orders, time_range)
    metrics = compute_growth_metrics(buckets)
    logger.debug("Built %d %s buckets", len(buckets), time_range)

    render_summary_cards(metrics)

    with st.container(border=True):
        st.subheader("Revenue Trend Analysis")
        st.caption("Revenue progression over time")
        if buckets.empty:
            st.info("No orders to chart yet.")
        else:
            st.plotly_chart(revenue_trend(buckets), width="stretch")

    with st.container(border=True):
        st.subheader("Orders & Average Order Value")
        st.caption("Order volume and average transaction size")
        if buckets.empty:
            st.info("No orders to chart yet.")
        else:
            st.plotly_chart(orders_and_aov(buckets), width="stretch")

    if not buckets.empty:
        buckets_table(buckets, summary_totals(buckets))
