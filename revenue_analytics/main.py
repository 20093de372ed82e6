"""Streamlit application entry point."""

from __future__ import annotations

from revenue_analytics import config
from revenue_analytics.pages import revenue


def main() -> None:
    """Run the main application."""
    config.configure()
    revenue.render()


if __name__ == "__main__":
    main()
