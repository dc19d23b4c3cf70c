"""Character analysis models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record


class CharacterRole(str, Enum):
    """Role a character plays in the story"""
    PROTAGONIST = "protagonist"
    ANTAGONIST = "antagonist"
    MENTOR = "mentor"
    ALLY = "ally"
    THRESHOLD_GUARDIAN = "threshold-guardian"
    HERALD = "herald"
    SHAPESHIFTER = "shapeshifter"
    TRICKSTER = "trickster"
    LOVE_INTEREST = "love-interest"
    SUPPORTING = "supporting"


class CharacterArc(str, Enum):
    """Types of character arcs"""
    POSITIVE_CHANGE = "positive-change"
    NEGATIVE_CHANGE = "negative-change"
    FLAT_ARC = "flat-arc"
    CORRUPTION_ARC = "corruption-arc"
    REDEMPTION_ARC = "redemption-arc"
    GROWTH_ARC = "growth-arc"
    FALL_ARC = "fall-arc"
    DISILLUSIONMENT_ARC = "disillusionment-arc"


class RelationshipType(str, Enum):
    """Kinds of character relationships"""
    ROMANTIC = "romantic"
    FAMILIAL = "familial"
    FRIENDSHIP = "friendship"
    MENTORSHIP = "mentorship"
    RIVALRY = "rivalry"
    ANTAGONISTIC = "antagonistic"
    PROFESSIONAL = "professional"
    ALLIANCE = "alliance"


class CharacterDevelopment(Record):
    """How a character changes between first and last mention"""
    start_state: str = Field(default="neutral")
    end_state: str = Field(default="neutral")
    change_strength: float = Field(..., ge=0.0, le=1.0)
    motivations: List[str] = Field(default_factory=list, max_length=3)
    conflicts: List[str] = Field(default_factory=list, max_length=3)
    growth: List[str] = Field(default_factory=list, max_length=3)
    weaknesses: List[str] = Field(default_factory=list, max_length=2)


class CharacterRelationship(Record):
    """Relationship from one character to another"""
    character: str = Field(..., description="Name of the other character")
    type: RelationshipType
    strength: float = Field(default=0.5, ge=0.0, le=1.0)
    development: str = Field(default="stable")


class CharacterAnalysis(Record):
    """A named character extracted from the text"""
    id: str
    name: str
    role: CharacterRole = Field(default=CharacterRole.SUPPORTING)
    arc_type: CharacterArc = Field(default=CharacterArc.FLAT_ARC)
    development: CharacterDevelopment
    relationships: List[CharacterRelationship] = Field(default_factory=list)
    screen_time: float = Field(..., ge=0.0, le=1.0, description="Share of all name mentions")
    importance: float = Field(..., description="0.4, 0.7 or 1.0 by mention count")
    suggestions: List[str] = Field(default_factory=list)
