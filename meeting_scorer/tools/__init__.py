"""
Tools Package

Small stateless helpers used by the schemas and scoring stages:
- time_tool: clock-time and ISO date parsing
- rounding: half-up rounding for scores and rates
"""

from meeting_scorer.tools.rounding import round_half_up
from meeting_scorer.tools.time_tool import (
    parse_clock_time,
    time_to_minutes,
    format_hour,
    parse_iso_date,
    day_of_week,
    date_range,
)

__all__ = [
    "round_half_up",
    "parse_clock_time",
    "time_to_minutes",
    "format_hour",
    "parse_iso_date",
    "day_of_week",
    "date_range",
]
