"""Gap Detector - missing beats, unmotivated characters and unresolved threads"""

import logging
from typing import Dict, Any, List

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    Priority,
    GapType,
    StoryGap,
    PlotPoint,
    CharacterAnalysis,
    CharacterRole,
)
from storyscope.parser import contains_any

logger = logging.getLogger(__name__)

CONFLICT_WORDS = ['conflict', 'problem', 'issue', 'challenge']
RESOLUTION_WORDS = ['resolved', 'solved', 'fixed', 'settled']


class GapDetector(AnalysisStage):
    """Cross-reference plot points and characters for omissions"""

    def __init__(self, *args, **kwargs):
        super().__init__("gaps", *args, **kwargs)

    def detect(
        self,
        text: str,
        plot_points: List[PlotPoint],
        characters: List[CharacterAnalysis]
    ) -> List[StoryGap]:
        gaps = []

        for point in plot_points:
            if point.present:
                continue
            percent = round(point.position * 100)
            gaps.append(StoryGap(
                id=self.ids("gap"),
                type=GapType.MISSING_SETUP,
                severity=Priority.CRITICAL if "Climax" in point.name else Priority.MEDIUM,
                description=f"Missing {point.name} - this is crucial for story structure",
                position=point.position,
                suggestions=[f"Add a clear {point.name.lower()} around {percent}% through the story"],
                impact="Story structure feels incomplete without this element",
            ))

        for character in characters:
            if character.development.motivations:
                continue
            gaps.append(StoryGap(
                id=self.ids("gap"),
                type=GapType.MISSING_MOTIVATION,
                severity=Priority.HIGH if character.role == CharacterRole.PROTAGONIST else Priority.MEDIUM,
                description=f"{character.name}'s motivations are unclear",
                position=0.1,
                suggestions=[
                    f"Clarify what {character.name} wants and why",
                    f"Show {character.name}'s goals through actions and dialogue",
                ],
                impact="Readers may not connect with or understand this character",
            ))

        lowered = text.lower()
        if contains_any(lowered, CONFLICT_WORDS) and not contains_any(lowered, RESOLUTION_WORDS):
            gaps.append(StoryGap(
                id=self.ids("gap"),
                type=GapType.UNRESOLVED_THREAD,
                severity=Priority.MEDIUM,
                description="Some conflicts appear to be unresolved",
                position=0.9,
                suggestions=[
                    "Ensure all major conflicts have clear resolutions",
                    "Address loose plot threads before the ending",
                ],
                impact="Story may feel incomplete or unsatisfying",
            ))

        logger.debug(f"Found {len(gaps)} story gaps")
        return gaps

    def execute(self, context: Dict[str, Any]) -> List[StoryGap]:
        return self.detect(context["text"], context["plot_points"], context["characters"])
