"""
Role Constants

Participant roles and the multipliers that turn a participant's
priority_weight into the effective weight used by the slot scorer.

Roles:
- organizer: Person running the event, weighted most heavily
- required: Attendee the meeting cannot happen without
- optional: Nice-to-have attendee, weighted least
"""

from enum import Enum
from typing import Dict, Optional


# ============================================================================
# Role Constants
# ============================================================================

class ParticipantRole(str, Enum):
    ORGANIZER = "organizer"
    REQUIRED = "required"
    OPTIONAL = "optional"


ROLE_MULTIPLIERS: Dict[ParticipantRole, float] = {
    ParticipantRole.ORGANIZER: 1.5,
    ParticipantRole.REQUIRED: 1.0,
    ParticipantRole.OPTIONAL: 0.7,
}

# Multiplier for anything not in ROLE_MULTIPLIERS
DEFAULT_ROLE_MULTIPLIER = 1.0

DEFAULT_ROLE = ParticipantRole.REQUIRED


# ============================================================================
# Helper Functions
# ============================================================================

def normalize_role(role: Optional[str]) -> Optional[ParticipantRole]:
    """
    Normalize a role string, returning None if it is not a known role.

    Example:
        >>> normalize_role("Organizer")
        <ParticipantRole.ORGANIZER: 'organizer'>
        >>> normalize_role("guest") is None
        True
    """
    if not role or not isinstance(role, str):
        return None
    try:
        return ParticipantRole(role.strip().lower())
    except ValueError:
        return None


def role_multiplier(role: Optional[str]) -> float:
    """
    Look up the weight multiplier for a role.

    Example:
        >>> role_multiplier("organizer")
        1.5
        >>> role_multiplier("optional")
        0.7
        >>> role_multiplier("unknown")
        1.0
    """
    normalized = normalize_role(role)
    if normalized is None:
        return DEFAULT_ROLE_MULTIPLIER
    return ROLE_MULTIPLIERS[normalized]
