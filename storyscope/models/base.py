"""Shared base for analysis records"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Immutable value object; every field has a documented default or is required"""
    model_config = ConfigDict(frozen=True)


class Priority(str, Enum):
    """Four-level severity used by gaps and suggestions"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK = {
    Priority.CRITICAL: 4,
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


class Impact(str, Enum):
    """Three-level weight used by pacing recommendations and issues"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
