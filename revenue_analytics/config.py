"""Application settings and Streamlit configuration utilities."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import streamlit as st

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment."""

    supabase_url: str | None = None
    supabase_key: str | None = None
    orders_table: str = "orders"
    orders_page_size: int = 1000
    orders_fetch_attempts: int = 3
    orders_cache_ttl: int = 3600
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _log_level_env(name: str, default: str) -> str:
    level = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return settings built from environment variables."""
    return Settings(
        supabase_url=os.getenv("SUPABASE_URL") or None,
        supabase_key=os.getenv("SUPABASE_KEY") or None,
        orders_table=os.getenv("ORDERS_TABLE") or "orders",
        orders_page_size=_int_env("ORDERS_PAGE_SIZE", 1000),
        orders_fetch_attempts=_int_env("ORDERS_FETCH_ATTEMPTS", 3),
        orders_cache_ttl=_int_env("ORDERS_CACHE_TTL", 3600),
        log_level=_log_level_env("LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)


def configure() -> None:
    """Configure global Streamlit settings, theme and logging."""
    st.set_page_config(page_title="Revenue Analytics", page_icon="💰", layout="wide")
    st.write(
        """<style>
            .stApp {background-color: #f9fafb;}
            [data-testid="stMetricValue"] {font-size: 30px; font-weight: 700;}
            [data-testid="stMetricLabel"] {color: #4b5563;}
        </style>""",
        unsafe_allow_html=True,
    )
    configure_logging(get_settings().log_level)
