"""
Global Constants

Status vocabularies and calendar names shared by the schemas and the
scoring stages. These are fixed vocabularies, not tunable thresholds.
"""

from enum import Enum
from typing import List


# ============================================================================
# Response Statuses
# ============================================================================

class ResponseStatus(str, Enum):
    """What a participant said about a slot."""
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    PREFERRED = "preferred"
    MAYBE = "maybe"


class AttendanceStatus(str, Enum):
    """
    Coarse bucket reported in the participant breakdown.

    "preferred" collapses into AVAILABLE; a missing response is UNAVAILABLE.
    """
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    MAYBE = "maybe"


# ============================================================================
# Calendar
# ============================================================================

class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_weekday(cls, weekday: int) -> "DayOfWeek":
        """Map date.weekday() (Monday == 0) to a DayOfWeek."""
        return _WEEKDAY_ORDER[weekday]


_WEEKDAY_ORDER: List[DayOfWeek] = list(DayOfWeek)
