"""Story gap and suggestion models"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import Record, Priority


class GapType(str, Enum):
    """Kinds of structural or character omissions"""
    MISSING_MOTIVATION = "missing-motivation"
    PLOT_HOLE = "plot-hole"
    CHARACTER_INCONSISTENCY = "character-inconsistency"
    MISSING_SETUP = "missing-setup"
    UNRESOLVED_THREAD = "unresolved-thread"
    WEAK_TRANSITION = "weak-transition"
    MISSING_STAKES = "missing-stakes"
    UNCLEAR_GOAL = "unclear-goal"
    MISSING_CONFLICT = "missing-conflict"
    WEAK_RESOLUTION = "weak-resolution"


class SuggestionType(str, Enum):
    """Kinds of structural suggestions"""
    ADD_PLOT_POINT = "add-plot-point"
    STRENGTHEN_CHARACTER = "strengthen-character"
    IMPROVE_PACING = "improve-pacing"
    ENHANCE_CONFLICT = "enhance-conflict"
    CLARIFY_STAKES = "clarify-stakes"
    DEVELOP_THEME = "develop-theme"
    IMPROVE_DIALOGUE = "improve-dialogue"
    ADD_SUBTEXT = "add-subtext"
    STRENGTHEN_ENDING = "strengthen-ending"
    IMPROVE_OPENING = "improve-opening"


class StoryGap(Record):
    """A detected omission with a remediation hint"""
    id: str
    type: GapType
    severity: Priority
    description: str
    position: float = Field(..., ge=0.0, le=1.0)
    suggestions: List[str] = Field(default_factory=list)
    impact: str


class StructuralSuggestion(Record):
    """A prioritized improvement"""
    id: str
    type: SuggestionType
    priority: Priority
    description: str
    position: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    implementation: str
    expected_impact: str
    examples: List[str] = Field(default_factory=list)
