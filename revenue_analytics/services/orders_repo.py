"""Data access layer for orders."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List

import pandas as pd
from supabase import Client

from ..config import get_settings
from .supabase_client import get_supabase

logger = logging.getLogger(__name__)

SCHEMA: Dict[str, str] = {
    "total_amount": "float64",
}
STRING_COLUMNS = ["order_date", "month", "quarter"]


class OrdersFetchError(Exception):
    """Raised when the order collection cannot be read from Supabase."""


def fetch_orders_page(
    client: Client,
    table: str,
    limit: int,
    offset: int,
    attempts: int = 3,
    backoff: float = 0.5,
) -> List[Dict[str, Any]]:
    """Fetch one page of order rows, retrying transient failures."""
    last_error: Exception | None = None
    for attempt in range(1, attempts + 1):
        try:
            response = (
                client.table(table)
                .select("*")
                .range(offset, offset + limit - 1)
                .execute()
            )
            return response.data or []
        except Exception as exc:
            last_error = exc
            logger.warning(
                "Fetching %s rows %d-%d failed (attempt %d/%d): %s",
                table,
                offset,
                offset + limit - 1,
                attempt,
                attempts,
                exc,
            )
            if attempt < attempts and backoff:
                time.sleep(backoff * attempt)
    raise OrdersFetchError(f"Could not load '{table}' from Supabase") from last_error


def fetch_all_orders(
    client: Client | None = None,
    table: str | None = None,
    page_size: int | None = None,
    attempts: int | None = None,
    backoff: float = 0.5,
) -> pd.DataFrame:
    """Load the full order collection as a DataFrame, page by page."""
    settings = get_settings()
    client = client or get_supabase()
    table = table or settings.orders_table
    page_size = page_size or settings.orders_page_size
    attempts = attempts or settings.orders_fetch_attempts

    rows: List[Dict[str, Any]] = []
    offset = 0
    while True:
        page = fetch_orders_page(client, table, page_size, offset, attempts, backoff)
        rows.extend(page)
        if len(page) < page_size:
            break
        offset += page_size
    logger.info("Loaded %d orders from %s", len(rows), table)

    df = pd.DataFrame(rows)
    if df.empty:
        return df
    for col, dtype in SCHEMA.items():
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce").astype(dtype)
    for col in STRING_COLUMNS:
        if col in df.columns:
            df[col] = df[col].astype("string")
    return df
