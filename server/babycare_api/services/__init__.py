"""Aggregation services for the dashboard views."""
from .summaries import build_daily_summary, build_weekly_summary, hours_until_next_feeding

__all__ = [
    "build_daily_summary",
    "build_weekly_summary",
    "hours_until_next_feeding",
]
