"""Synopsis, logline and genre models"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import Record, Impact


class Synopsis(Record):
    """Summaries of increasing length"""
    short: str
    medium: str
    long: str
    one_sheet: str
    treatment: str
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)


class LoglineType(str, Enum):
    TRADITIONAL = "traditional"
    IRONIC = "ironic"
    QUESTION = "question"
    STATEMENT = "statement"


class LoglineElementType(str, Enum):
    PROTAGONIST = "protagonist"
    GOAL = "goal"
    OBSTACLE = "obstacle"
    STAKES = "stakes"


class LoglineElement(Record):
    type: LoglineElementType
    present: bool
    strength: float = Field(..., ge=0.0, le=1.0)
    content: Optional[str] = None


class Logline(Record):
    """One-sentence pitch built from protagonist, goal and obstacle"""
    text: str
    type: LoglineType
    strength: float = Field(..., ge=0.0, le=1.0)
    elements: List[LoglineElement] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class Genre(Record):
    name: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    indicators: List[str] = Field(default_factory=list)


class GenreConvention(Record):
    name: str
    present: bool
    strength: float = Field(..., ge=0.0, le=1.0)
    importance: Impact
    description: str


class GenreAnalysis(Record):
    """Primary and secondary genre with convention checks"""
    primary: Genre
    secondary: List[Genre] = Field(default_factory=list)
    conventions: List[GenreConvention] = Field(default_factory=list)
    adherence: float = Field(..., ge=0.0, le=1.0)
    recommendations: List[str] = Field(default_factory=list)
