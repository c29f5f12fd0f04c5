"""
Analytics Package

Derived views over scored slots:
- Trends: best weekday, best start hour, low-participation slots
- Availability: grouping stored rows into slots, non-respondents,
  per-slot attendance rollup
- Event analysis: the full score -> heat map -> recommend pipeline

All functions are pure; nothing is cached between calls.
"""

from meeting_scorer.analytics.trends import analyze_trends
from meeting_scorer.analytics.availability import (
    group_availability,
    find_non_respondents,
    summarize_attendance
)
from meeting_scorer.analytics.event_analysis import analyze_event

__all__ = [
    "analyze_trends",
    "group_availability",
    "find_non_respondents",
    "summarize_attendance",
    "analyze_event"
]
