"""Pacing models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record, Impact


class PacingType(str, Enum):
    """Five-step ordinal pacing scale"""
    TOO_FAST = "too-fast"
    FAST = "fast"
    OPTIMAL = "optimal"
    SLOW = "slow"
    TOO_SLOW = "too-slow"


class TensionType(str, Enum):
    """Shape of the tension curve at one sentence"""
    RISING = "rising"
    FALLING = "falling"
    PLATEAU = "plateau"
    SPIKE = "spike"


class RecommendationType(str, Enum):
    CUT = "cut"
    EXPAND = "expand"
    RESTRUCTURE = "restructure"
    ADD_TENSION = "add-tension"
    ADD_RELIEF = "add-relief"


class PacingIssueType(str, Enum):
    SAGGING_MIDDLE = "sagging-middle"
    RUSHED_ENDING = "rushed-ending"
    SLOW_START = "slow-start"
    UNEVEN_ACTS = "uneven-acts"
    TENSION_DROP = "tension-drop"


class ActPacing(Record):
    """Actual vs. ideal duration of one act, in sentences"""
    act: int = Field(..., ge=1, description="1-based act number")
    pacing: PacingType
    duration: int = Field(..., ge=0)
    ideal_duration: float = Field(..., ge=0.0)
    issues: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class TensionPoint(Record):
    """Heuristic tension of one sentence"""
    position: float = Field(..., ge=0.0, le=1.0)
    tension: float = Field(..., ge=0.0, le=1.0)
    event: str
    type: TensionType


class PacingRecommendation(Record):
    type: RecommendationType
    position: float = Field(..., ge=0.0, le=1.0)
    description: str
    impact: Impact


class PacingIssue(Record):
    type: PacingIssueType
    severity: Impact
    description: str
    suggestions: List[str] = Field(default_factory=list)


class PacingAnalysis(Record):
    """Overall pacing, per-act pacing and the tension curve"""
    overall_pacing: PacingType
    act_pacing: List[ActPacing] = Field(default_factory=list)
    tension_curve: List[TensionPoint] = Field(default_factory=list)
    recommendations: List[PacingRecommendation] = Field(default_factory=list)
    issues: List[PacingIssue] = Field(default_factory=list)
