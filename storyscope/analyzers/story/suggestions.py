"""Suggestion Generator - merge structure, character, pacing and gap signals"""

import logging
from typing import Dict, Any, List

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    Priority,
    GapType,
    SuggestionType,
    StoryGap,
    StructuralSuggestion,
    NarrativeStructure,
    CharacterAnalysis,
    PacingAnalysis,
    PacingType,
)

logger = logging.getLogger(__name__)


def sort_by_priority(suggestions: List[StructuralSuggestion]) -> List[StructuralSuggestion]:
    """Highest priority first; sorted() is stable so ties keep discovery order"""
    return sorted(suggestions, key=lambda suggestion: suggestion.priority.rank, reverse=True)


class SuggestionGenerator(AnalysisStage):
    """Produce the prioritized suggestion list for a story"""

    def __init__(self, *args, **kwargs):
        super().__init__("suggestions", *args, **kwargs)

    def generate(
        self,
        structure: NarrativeStructure,
        characters: List[CharacterAnalysis],
        pacing: PacingAnalysis,
        gaps: List[StoryGap]
    ) -> List[StructuralSuggestion]:
        suggestions = []

        if structure.completeness < 0.8:
            suggestions.append(StructuralSuggestion(
                id=self.ids("suggestion"),
                type=SuggestionType.ADD_PLOT_POINT,
                priority=Priority.HIGH,
                description="Story structure is incomplete - missing key plot points",
                implementation="Add the missing plot points identified in the analysis",
                expected_impact="Improved story flow and reader engagement",
                examples=["Add a clear inciting incident", "Strengthen the climax", "Provide better resolution"],
            ))

        weak = [c for c in characters if c.development.change_strength < 0.5]
        if weak:
            suggestions.append(StructuralSuggestion(
                id=self.ids("suggestion"),
                type=SuggestionType.STRENGTHEN_CHARACTER,
                priority=Priority.MEDIUM,
                description=f"{len(weak)} character(s) need stronger development",
                implementation="Give characters clearer arcs, motivations, and growth",
                expected_impact="More engaging and relatable characters",
                examples=["Show character transformation", "Clarify character goals", "Add character backstory"],
            ))

        overall = pacing.overall_pacing
        if overall != PacingType.OPTIMAL:
            too_quick = "fast" in overall.value
            suggestions.append(StructuralSuggestion(
                id=self.ids("suggestion"),
                type=SuggestionType.IMPROVE_PACING,
                priority=Priority.MEDIUM,
                description=f"Story pacing is {overall.value}",
                implementation=(
                    "Add breathing room and character moments" if too_quick
                    else "Tighten scenes and increase tension"
                ),
                expected_impact="Better reader engagement and story flow",
                examples=(
                    ["Add character reflection scenes", "Expand world-building moments"] if too_quick
                    else ["Cut unnecessary dialogue", "Combine similar scenes", "Increase conflict"]
                ),
            ))

        for gap in gaps:
            if gap.severity not in (Priority.HIGH, Priority.CRITICAL):
                continue
            suggestions.append(StructuralSuggestion(
                id=self.ids("suggestion"),
                type=(
                    SuggestionType.STRENGTHEN_CHARACTER if gap.type == GapType.MISSING_MOTIVATION
                    else SuggestionType.ADD_PLOT_POINT
                ),
                priority=gap.severity,
                description=gap.description,
                position=gap.position,
                implementation=gap.suggestions[0] if gap.suggestions else "Address this story gap",
                expected_impact=gap.impact,
                examples=list(gap.suggestions),
            ))

        logger.debug(f"Generated {len(suggestions)} suggestions")
        return sort_by_priority(suggestions)

    def execute(self, context: Dict[str, Any]) -> List[StructuralSuggestion]:
        return self.generate(
            context["structure"],
            context["characters"],
            context["pacing"],
            context["gaps"],
        )
