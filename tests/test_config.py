from __future__ import annotations

import pytest

from revenue_analytics.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "ORDERS_TABLE", "ORDERS_PAGE_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.supabase_url is None
    assert settings.orders_table == "orders"
    assert settings.orders_page_size == 1000
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDERS_TABLE", "Order")
    monkeypatch.setenv("ORDERS_PAGE_SIZE", "250")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.orders_table == "Order"
    assert settings.orders_page_size == 250
    assert settings.log_level == "DEBUG"


def test_invalid_integer_names_the_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDERS_CACHE_TTL", "soon")
    with pytest.raises(ValueError, match="ORDERS_CACHE_TTL"):
        get_settings()


def test_log_level_is_validated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        get_settings()
