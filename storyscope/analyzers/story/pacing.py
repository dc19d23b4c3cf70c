"""Pacing Analyzer - overall pacing, tension curve and per-act pacing"""

import logging
from typing import Dict, Any, List, Optional

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    Impact,
    Act,
    NarrativeStructure,
    PacingType,
    TensionType,
    RecommendationType,
    PacingIssueType,
    ActPacing,
    TensionPoint,
    PacingRecommendation,
    PacingIssue,
    PacingAnalysis,
)
from storyscope.parser import count_present, clamp01

logger = logging.getLogger(__name__)

ACTION_WORDS = ['ran', 'jumped', 'fought', 'rushed', 'quickly', 'suddenly']
TENSION_WORDS = ['conflict', 'fight', 'danger', 'crisis', 'tension', 'dramatic', 'intense']
RELIEF_WORDS = ['calm', 'peaceful', 'resolved', 'safe', 'relief', 'rest']


def pacing_score(sentences: List[str]) -> float:
    """Action density plus inverse sentence length; 0 for no sentences"""
    if not sentences:
        return 0.0
    average_length = sum(len(s) for s in sentences) / len(sentences)
    action_hits = sum(count_present(s.lower(), ACTION_WORDS) for s in sentences)
    return action_hits / len(sentences) + 1 / (average_length / 50)


def label_pacing(score: float) -> PacingType:
    if score > 0.8:
        return PacingType.TOO_FAST
    if score > 0.6:
        return PacingType.FAST
    if score > 0.4:
        return PacingType.OPTIMAL
    if score > 0.2:
        return PacingType.SLOW
    return PacingType.TOO_SLOW


def sentence_tension(sentence: str) -> float:
    lowered = sentence.lower()
    tension_hits = count_present(lowered, TENSION_WORDS)
    relief_hits = count_present(lowered, RELIEF_WORDS)
    return clamp01((tension_hits - relief_hits) * 0.3 + 0.5)


def tension_type(tension: float) -> TensionType:
    if tension > 0.7:
        return TensionType.SPIKE
    if tension > 0.6:
        return TensionType.RISING
    if tension < 0.4:
        return TensionType.FALLING
    return TensionType.PLATEAU


def tension_curve(sentences: List[str]) -> List[TensionPoint]:
    total = len(sentences)
    curve = []
    for index, sentence in enumerate(sentences):
        tension = sentence_tension(sentence)
        curve.append(TensionPoint(
            position=index / total,
            tension=tension,
            event=sentence[:50] + "...",
            type=tension_type(tension),
        ))
    return curve


def act_pacing(acts: List[Act], total: int) -> List[ActPacing]:
    """Compare each act's sentence span with its ideal share of the story"""
    result = []
    for index, act in enumerate(acts):
        number = index + 1
        duration = act.end_position - act.start_position
        ideal = total * 0.5 if index == 1 else total * 0.25

        if duration > ideal * 1.3:
            pacing = PacingType.TOO_SLOW
        elif duration > ideal * 1.1:
            pacing = PacingType.SLOW
        elif duration < ideal * 0.7:
            pacing = PacingType.TOO_FAST
        elif duration < ideal * 0.9:
            pacing = PacingType.FAST
        else:
            pacing = PacingType.OPTIMAL

        issues, suggestions = [], []
        if pacing != PacingType.OPTIMAL:
            verb = "expanding" if "fast" in pacing.value else "tightening"
            issues.append(f"Act {number} is paced {pacing.value}")
            suggestions.append(f"Consider {verb} Act {number}")

        result.append(ActPacing(
            act=number,
            pacing=pacing,
            duration=duration,
            ideal_duration=ideal,
            issues=issues,
            suggestions=suggestions,
        ))
    return result


def middle_tension(curve: List[TensionPoint]) -> Optional[float]:
    """Mean tension over the 40%-60% window, None when the window is empty"""
    window = curve[int(len(curve) * 0.4):int(len(curve) * 0.6)]
    if not window:
        return None
    return sum(point.tension for point in window) / len(window)


def pacing_recommendations(
    overall: PacingType,
    curve: List[TensionPoint]
) -> List[PacingRecommendation]:
    recommendations = []

    if overall == PacingType.TOO_SLOW:
        recommendations.append(PacingRecommendation(
            type=RecommendationType.CUT,
            position=0.5,
            description="Consider cutting unnecessary scenes or dialogue to improve pacing",
            impact=Impact.HIGH,
        ))

    if overall == PacingType.TOO_FAST:
        recommendations.append(PacingRecommendation(
            type=RecommendationType.EXPAND,
            position=0.3,
            description="Add more character development or world-building moments",
            impact=Impact.MEDIUM,
        ))

    middle = middle_tension(curve)
    if middle is not None and middle < 0.4:
        recommendations.append(PacingRecommendation(
            type=RecommendationType.ADD_TENSION,
            position=0.5,
            description="Add conflict or complications to strengthen the middle section",
            impact=Impact.HIGH,
        ))

    return recommendations


def pacing_issues(acts: List[ActPacing], curve: List[TensionPoint]) -> List[PacingIssue]:
    issues = []

    middle = middle_tension(curve)
    if middle is not None and middle < 0.4:
        issues.append(PacingIssue(
            type=PacingIssueType.SAGGING_MIDDLE,
            severity=Impact.HIGH,
            description="The middle section lacks tension and may lose audience interest",
            suggestions=["Add subplot complications", "Introduce new obstacles", "Deepen character conflicts"],
        ))

    if acts and acts[-1].pacing == PacingType.TOO_FAST:
        issues.append(PacingIssue(
            type=PacingIssueType.RUSHED_ENDING,
            severity=Impact.MEDIUM,
            description="The ending feels rushed and may not provide satisfying resolution",
            suggestions=["Expand the climax sequence", "Add more resolution scenes", "Allow time for character reflection"],
        ))

    return issues


class PacingAnalyzer(AnalysisStage):
    """Derive pacing labels and the tension curve from the sentence sequence"""

    def __init__(self, *args, **kwargs):
        super().__init__("pacing", *args, **kwargs)

    def analyze(self, sentences: List[str], structure: NarrativeStructure) -> PacingAnalysis:
        overall = label_pacing(pacing_score(sentences))
        acts = act_pacing(structure.acts, len(sentences))
        curve = tension_curve(sentences)

        logger.debug(f"Overall pacing {overall.value} over {len(sentences)} sentences")

        return PacingAnalysis(
            overall_pacing=overall,
            act_pacing=acts,
            tension_curve=curve,
            recommendations=pacing_recommendations(overall, curve),
            issues=pacing_issues(acts, curve),
        )

    def execute(self, context: Dict[str, Any]) -> PacingAnalysis:
        return self.analyze(context["sentences"], context["structure"])
