"""Logline Generator - traditional and question pitches"""

import logging
from typing import Dict, Any, List

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    Logline,
    LoglineType,
    LoglineElement,
    LoglineElementType,
    PlotPoint,
    PlotPointType,
    CharacterAnalysis,
    CharacterRole,
)
from .synopsis import find_role, find_beat

logger = logging.getLogger(__name__)


def has_goal(lowered: str) -> bool:
    return 'must' in lowered or 'goal' in lowered


def has_obstacle(lowered: str) -> bool:
    return 'against' in lowered or 'despite' in lowered


def has_stakes(lowered: str) -> bool:
    # Substring match, so any word containing "or" counts
    return 'or' in lowered or 'before' in lowered


def logline_strength(text: str, characters: List[CharacterAnalysis]) -> float:
    lowered = text.lower()
    strength = 0.5
    if find_role(characters, CharacterRole.PROTAGONIST):
        strength += 0.2
    if has_goal(lowered):
        strength += 0.1
    if has_obstacle(lowered):
        strength += 0.1
    if has_stakes(lowered):
        strength += 0.1
    return min(strength, 1.0)


def logline_elements(text: str, characters: List[CharacterAnalysis]) -> List[LoglineElement]:
    lowered = text.lower()
    protagonist = find_role(characters, CharacterRole.PROTAGONIST)
    return [
        LoglineElement(
            type=LoglineElementType.PROTAGONIST,
            present=protagonist is not None,
            strength=0.8 if protagonist else 0.0,
            content=protagonist.name if protagonist else None,
        ),
        LoglineElement(
            type=LoglineElementType.GOAL,
            present=has_goal(lowered),
            strength=0.6,
            content="Implied goal present",
        ),
        LoglineElement(
            type=LoglineElementType.OBSTACLE,
            present=has_obstacle(lowered),
            strength=0.7,
            content="Opposition mentioned",
        ),
        LoglineElement(
            type=LoglineElementType.STAKES,
            present=has_stakes(lowered),
            strength=0.4,
            content="Stakes could be clearer",
        ),
    ]


class LoglineGenerator(AnalysisStage):
    """Build pitch lines from protagonist, motivation and antagonist"""

    def __init__(self, *args, **kwargs):
        super().__init__("loglines", *args, **kwargs)

    def generate(self, characters: List[CharacterAnalysis], plot_points: List[PlotPoint]) -> List[Logline]:
        protagonist = find_role(characters, CharacterRole.PROTAGONIST)
        antagonist = find_role(characters, CharacterRole.ANTAGONIST)
        inciting = find_beat(plot_points, PlotPointType.INCITING_INCIDENT)
        motivation = (
            protagonist.development.motivations[0]
            if protagonist and protagonist.development.motivations else None
        )

        trigger = "faced with an unexpected challenge" if inciting and inciting.present else "circumstances change"
        opposition = f"despite opposition from {antagonist.name}" if antagonist else "against all odds"
        traditional = (
            f"When {trigger}, {protagonist.name if protagonist else 'a protagonist'} "
            f"must {motivation or 'overcome obstacles'} {opposition}."
        )

        blocker = f"{antagonist.name} stands in their way" if antagonist else "everything seems impossible"
        question = (
            f"Can {protagonist.name if protagonist else 'the protagonist'} "
            f"{motivation or 'achieve their goal'} when {blocker}?"
        )

        return [
            Logline(
                text=traditional,
                type=LoglineType.TRADITIONAL,
                strength=logline_strength(traditional, characters),
                elements=logline_elements(traditional, characters),
                suggestions=["Consider making the stakes more specific", "Clarify the protagonist's goal"],
            ),
            Logline(
                text=question,
                type=LoglineType.QUESTION,
                strength=logline_strength(question, characters),
                elements=logline_elements(question, characters),
                suggestions=["Make the question more specific", "Raise the stakes"],
            ),
        ]

    def execute(self, context: Dict[str, Any]) -> List[Logline]:
        return self.generate(context["characters"], context["plot_points"])
