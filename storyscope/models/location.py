"""Location models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record


class LocationType(str, Enum):
    """Kinds of shooting locations"""
    INDOOR_STUDIO = "indoor-studio"
    INDOOR_PRACTICAL = "indoor-practical"
    OUTDOOR_URBAN = "outdoor-urban"
    OUTDOOR_NATURE = "outdoor-nature"
    OUTDOOR_CONTROLLED = "outdoor-controlled"
    VEHICLE = "vehicle"
    WATER = "water"
    AERIAL = "aerial"

    @property
    def is_indoor(self) -> bool:
        return "indoor" in self.value

    @property
    def is_outdoor(self) -> bool:
        return "outdoor" in self.value


class AccessibilityInfo(Record):
    vehicle_access: bool
    loading_access: bool
    power_available: bool
    restrooms: bool
    parking: bool
    public_transport: bool
    wheelchair_accessible: bool


class PermitRequirements(Record):
    required: bool
    type: List[str] = Field(default_factory=list, description="Permit kinds; empty when none apply")
    cost: float = Field(default=0, ge=0)
    processing_time: int = Field(default=7, ge=0, description="Days")
    contacts: List[str] = Field(default_factory=list)


class AlternativeLocation(Record):
    name: str
    reason: str
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)


class ScoutingNotes(Record):
    best_time_of_day: List[str] = Field(default_factory=list)
    challenges: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)


class LocationDetails(Record):
    """Where the scene is shot and what that implies"""
    type: LocationType = Field(default=LocationType.INDOOR_PRACTICAL)
    name: str = Field(default="Location")
    accessibility: AccessibilityInfo
    permits: PermitRequirements
    alternatives: List[AlternativeLocation] = Field(default_factory=list)
    scouting: ScoutingNotes
