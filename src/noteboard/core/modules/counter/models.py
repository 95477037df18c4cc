"""Auto-incrementing counters for entity ids."""

from enum import StrEnum

from pydantic import BaseModel


class CounterType(StrEnum):
    """Types of entities that receive sequential ids."""

    NOTE = "note"
    COMMENT = "comment"


class Counter(BaseModel):
    """Sequence state for one entity type.

    Values are never handed out twice, even after the entity is deleted.
    """

    counter_type: CounterType
    seq: int = 0  # Current value; next id will be seq + 1
