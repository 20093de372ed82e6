from __future__ import annotations

import math

import pandas as pd

from revenue_analytics.ui.charts import orders_and_aov, revenue_trend
from revenue_analytics.ui.components import format_currency, format_growth


def _buckets() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "period": ["2024-01", "2024-02"],
            "revenue": [150.0, 200.0],
            "orders": [2, 1],
            "avg_order": [75.0, 200.0],
        }
    )


def test_format_currency() -> None:
    assert format_currency(1234.5) == "$1,234.5"
    assert format_currency(200.0) == "$200"
    assert format_currency(0.0) == "$0"
    assert format_currency(1234.5678) == "$1,234.568"
    assert format_currency(75, decimals=2) == "$75.00"


def test_format_growth() -> None:
    assert format_growth(33.3) == "+33.3%"
    assert format_growth(-25.0) == "-25.0%"
    assert format_growth(0.0) == "0.0%"
    assert format_growth(math.inf) == "n/a"
    assert format_growth(math.nan) == "n/a"
    assert format_growth(0.0, has_previous=False) == "0%"


def test_revenue_trend_plots_revenue_per_period() -> None:
    fig = revenue_trend(_buckets())
    trace = fig.data[0]
    assert trace.name == "Revenue"
    assert list(trace.x) == ["2024-01", "2024-02"]
    assert list(trace.y) == [150.0, 200.0]
    assert fig.layout.yaxis.tickprefix == "$"


def test_orders_and_aov_groups_two_series() -> None:
    fig = orders_and_aov(_buckets())
    assert [trace.name for trace in fig.data] == ["Orders", "Avg Order Value ($)"]
    assert list(fig.data[0].y) == [2, 1]
    assert list(fig.data[1].y) == [75.0, 200.0]
    assert fig.layout.barmode == "group"
