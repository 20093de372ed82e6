"""Charts with a unified theme."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

_theme = {
    "template": "plotly_white",
    "grid": "#e5e7eb",
    "axis": "#6b7280",
    "revenue": "#3b82f6",
    "orders": "#8b5cf6",
    "avg_order": "#10b981",
}


def _style(fig: go.Figure, height: int) -> go.Figure:
    fig.update_layout(
        template=_theme["template"],
        height=height,
        margin=dict(l=10, r=10, t=10, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=-0.25, x=0.5, xanchor="center"),
        font=dict(size=12, color=_theme["axis"]),
        xaxis_title=None,
        yaxis_title=None,
    )
    fig.update_xaxes(type="category", linecolor=_theme["axis"])
    fig.update_yaxes(gridcolor=_theme["grid"], griddash="dash", linecolor=_theme["axis"])
    return fig


def revenue_trend(buckets: pd.DataFrame) -> go.Figure:
    """Return an area chart of revenue per period."""
    fig = px.area(
        buckets,
        x="period",
        y="revenue",
        labels={"period": "Period", "revenue": "Revenue"},
        color_discrete_sequence=[_theme["revenue"]],
    )
    fig.update_traces(
        name="Revenue",
        showlegend=True,
        line=dict(width=3, shape="spline"),
        fillcolor="rgba(59, 130, 246, 0.2)",
        hovertemplate="%{x}<br>Revenue: $%{y:,.2f}<extra></extra>",
    )
    fig = _style(fig, height=400)
    fig.update_yaxes(tickprefix="$", tickformat="~s")
    return fig


def orders_and_aov(buckets: pd.DataFrame) -> go.Figure:
    """Return grouped bars of order count and average order value per period."""
    fig = go.Figure(
        [
            go.Bar(
                x=buckets["period"],
                y=buckets["orders"],
                name="Orders",
                marker_color=_theme["orders"],
            ),
            go.Bar(
                x=buckets["period"],
                y=buckets["avg_order"],
                name="Avg Order Value ($)",
                marker_color=_theme["avg_order"],
                hovertemplate="%{x}<br>Avg Order Value: $%{y:,.2f}<extra></extra>",
            ),
        ]
    )
    fig.update_layout(barmode="group", barcornerradius=8)
    return _style(fig, height=350)
