"""Aggregation of orders into monthly or quarterly revenue buckets."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd

MONTHLY = "monthly"
QUARTERLY = "quarterly"
MODES = (MONTHLY, QUARTERLY)

INVALID_DATE = "Invalid Date"
BUCKET_COLUMNS = ["period", "revenue", "orders", "avg_order"]

# Orders may carry an already computed period label.
_PRECOMPUTED_COLUMN = {MONTHLY: "month", QUARTERLY: "quarter"}


def _as_frame(orders: pd.DataFrame | Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    if isinstance(orders, pd.DataFrame):
        return orders
    return pd.DataFrame(list(orders))


def _check_mode(mode: str) -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown time range {mode!r}, expected one of {MODES}")


def _order_dates(df: pd.DataFrame) -> pd.Series:
    if "order_date" not in df.columns:
        return pd.Series(pd.NaT, index=df.index, dtype="datetime64[ns, UTC]")
    return pd.to_datetime(df["order_date"], utc=True, errors="coerce", format="ISO8601")


def period_labels(orders: pd.DataFrame | Iterable[Mapping[str, Any]], mode: str) -> pd.Series:
    """Return the period label of every order for ``mode``.

    A non-empty precomputed ``month``/``quarter`` value wins. Otherwise the
    label is derived from ``order_date`` in UTC: ``YYYY-MM`` for months and
    ``Q{n} {year}`` for quarters. Orders without a usable date get
    ``INVALID_DATE``.
    """
    _check_mode(mode)
    df = _as_frame(orders)
    dates = _order_dates(df)

    if mode == MONTHLY:
        labels = dates.dt.strftime("%Y-%m").astype("string")
    else:
        quarter = dates.dt.quarter.astype("Int64").astype("string")
        year = dates.dt.year.astype("Int64").astype("string")
        labels = "Q" + quarter + " " + year

    column = _PRECOMPUTED_COLUMN[mode]
    if column in df.columns:
        given = df[column].astype("string")
        has_given = (given.notna() & (given != "")).fillna(False).astype(bool)
        labels = labels.where(~has_given, given)

    return labels.fillna(INVALID_DATE).astype(object)


def aggregate_orders(orders: pd.DataFrame | Iterable[Mapping[str, Any]], mode: str) -> pd.DataFrame:
    """Group orders into period buckets sorted by period label.

    Each bucket holds the summed ``revenue``, the ``orders`` count and the
    resulting ``avg_order``. Missing or non-numeric ``total_amount`` counts
    as 0. Sorting is a plain string comparison of the label.
    """
    _check_mode(mode)
    df = _as_frame(orders)
    if df.empty:
        return pd.DataFrame(columns=BUCKET_COLUMNS)

    if "total_amount" in df.columns:
        amounts = pd.to_numeric(df["total_amount"], errors="coerce").fillna(0.0)
    else:
        amounts = pd.Series(0.0, index=df.index)

    frame = pd.DataFrame(
        {"period": period_labels(df, mode), "revenue": amounts.astype("float64")}
    )
    buckets = frame.groupby("period", as_index=False, sort=False).agg(
        revenue=("revenue", "sum"), orders=("revenue", "size")
    )
    buckets["avg_order"] = buckets["revenue"] / buckets["orders"]
    buckets = buckets.sort_values("period", kind="stable").reset_index(drop=True)
    return buckets[BUCKET_COLUMNS]
