"""Narrative structure models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record


class StructureType(str, Enum):
    """Structure types the classifier can detect"""
    THREE_ACT = "three-act"
    HERO_JOURNEY = "hero-journey"
    SAVE_THE_CAT = "save-the-cat"


class PlotPointType(str, Enum):
    """Named structural beats"""
    INCITING_INCIDENT = "inciting-incident"
    PLOT_POINT_1 = "plot-point-1"
    MIDPOINT = "midpoint"
    PLOT_POINT_2 = "plot-point-2"
    CLIMAX = "climax"
    RESOLUTION = "resolution"
    CALL_TO_ADVENTURE = "call-to-adventure"
    REFUSAL_OF_CALL = "refusal-of-call"
    MEETING_MENTOR = "meeting-mentor"
    CROSSING_THRESHOLD = "crossing-threshold"
    TESTS_ALLIES_ENEMIES = "tests-allies-enemies"
    APPROACH_INMOST_CAVE = "approach-inmost-cave"
    ORDEAL = "ordeal"
    REWARD = "reward"
    ROAD_BACK = "road-back"
    RESURRECTION = "resurrection"
    RETURN_ELIXIR = "return-elixir"


class Act(Record):
    """A contiguous span of sentences with a structural role"""
    id: str = Field(..., description="Act ID")
    name: str = Field(..., description="Act name, e.g. 'Act I - Setup'")
    start_position: int = Field(..., ge=0, description="First sentence index")
    end_position: int = Field(..., ge=0, description="Sentence index the act ends at")
    purpose: str = Field(..., description="Narrative purpose of the act")
    content: str = Field(default="", description="Sentences of the act joined with '. '")
    strength: float = Field(..., ge=0.0, le=1.0, description="Indicator-word strength")
    issues: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class NarrativeStructure(Record):
    """Detected structure with its acts and quality metrics"""
    type: StructureType = Field(..., description="Detected structure type")
    acts: List[Act] = Field(default_factory=list)
    completeness: float = Field(..., ge=0.0, le=1.0)
    adherence: float = Field(..., ge=0.0, le=1.0)
    recommendations: List[str] = Field(default_factory=list)


class PlotPointTemplate(Record):
    """Catalog entry for a beat of a structure type"""
    name: str
    type: PlotPointType
    ideal_position: float = Field(..., ge=0.0, le=1.0)


class PlotPoint(Record):
    """A template beat scored against the text around its ideal position"""
    id: str
    name: str
    type: PlotPointType
    position: float = Field(..., ge=0.0, le=1.0, description="Ideal position of the beat")
    description: str = Field(..., description="Context window text or placement hint")
    strength: float = Field(..., ge=0.0, le=1.0)
    present: bool = Field(..., description="strength > 0.3")
    suggestions: List[str] = Field(default_factory=list)
    related_characters: List[str] = Field(default_factory=list)
