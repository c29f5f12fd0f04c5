"""
Schema Loaders

Turn raw dicts (decoded JSON, database rows) into engine models.
pydantic's ValidationError is converted into the package's own
ValidationError so callers only need to handle AppError.
"""

import logging
from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from meeting_scorer.core.errors import ValidationError
from meeting_scorer.schemas.participants import AvailabilityRecord, Participant
from meeting_scorer.schemas.slots import TimeSlotWithResponses

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def _load_many(model: Type[ModelT], raw: Iterable[Dict[str, Any]], label: str) -> List[ModelT]:
    adapter = TypeAdapter(List[model])
    try:
        return adapter.validate_python(list(raw))
    except PydanticValidationError as exc:
        errors = [
            {
                "loc": [str(part) for part in error["loc"]],
                "msg": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logger.warning(f"Rejected {label}: {exc.error_count()} validation error(s)")
        raise ValidationError(f"Invalid {label}", details={"errors": errors}) from exc


def load_participants(raw: Iterable[Dict[str, Any]]) -> List[Participant]:
    """
    Validate a roster.

    Raises:
        ValidationError: If any participant is malformed
    """
    return _load_many(Participant, raw, "participants")


def load_slots(raw: Iterable[Dict[str, Any]]) -> List[TimeSlotWithResponses]:
    """
    Validate candidate slots with their nested responses.

    Raises:
        ValidationError: If any slot or response is malformed
    """
    return _load_many(TimeSlotWithResponses, raw, "time slots")


def load_availability(raw: Iterable[Dict[str, Any]]) -> List[AvailabilityRecord]:
    """
    Validate stored availability rows.

    Raises:
        ValidationError: If any row is malformed
    """
    return _load_many(AvailabilityRecord, raw, "availability records")
