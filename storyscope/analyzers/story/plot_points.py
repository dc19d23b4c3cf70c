"""Plot point detection around template beat positions"""

import logging
from typing import Dict, Any, List

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    StructureType,
    PlotPointType,
    PlotPointTemplate,
    PlotPoint,
    NarrativeStructure,
)
from storyscope.parser import TextSegmenter, family_score, unique_names

logger = logging.getLogger(__name__)

PRESENCE_THRESHOLD = 0.3

THREE_ACT_TEMPLATES = [
    PlotPointTemplate(name="Inciting Incident", type=PlotPointType.INCITING_INCIDENT, ideal_position=0.12),
    PlotPointTemplate(name="Plot Point 1", type=PlotPointType.PLOT_POINT_1, ideal_position=0.25),
    PlotPointTemplate(name="Midpoint", type=PlotPointType.MIDPOINT, ideal_position=0.5),
    PlotPointTemplate(name="Plot Point 2", type=PlotPointType.PLOT_POINT_2, ideal_position=0.75),
    PlotPointTemplate(name="Climax", type=PlotPointType.CLIMAX, ideal_position=0.88),
    PlotPointTemplate(name="Resolution", type=PlotPointType.RESOLUTION, ideal_position=0.95),
]

HERO_JOURNEY_TEMPLATES = [
    PlotPointTemplate(name="Call to Adventure", type=PlotPointType.CALL_TO_ADVENTURE, ideal_position=0.1),
    PlotPointTemplate(name="Refusal of Call", type=PlotPointType.REFUSAL_OF_CALL, ideal_position=0.15),
    PlotPointTemplate(name="Meeting the Mentor", type=PlotPointType.MEETING_MENTOR, ideal_position=0.2),
    PlotPointTemplate(name="Crossing Threshold", type=PlotPointType.CROSSING_THRESHOLD, ideal_position=0.25),
    PlotPointTemplate(name="Tests, Allies, Enemies", type=PlotPointType.TESTS_ALLIES_ENEMIES, ideal_position=0.4),
    PlotPointTemplate(name="Approach Inmost Cave", type=PlotPointType.APPROACH_INMOST_CAVE, ideal_position=0.6),
    PlotPointTemplate(name="Ordeal", type=PlotPointType.ORDEAL, ideal_position=0.75),
    PlotPointTemplate(name="Reward", type=PlotPointType.REWARD, ideal_position=0.8),
    PlotPointTemplate(name="Road Back", type=PlotPointType.ROAD_BACK, ideal_position=0.85),
    PlotPointTemplate(name="Resurrection", type=PlotPointType.RESURRECTION, ideal_position=0.9),
    PlotPointTemplate(name="Return with Elixir", type=PlotPointType.RETURN_ELIXIR, ideal_position=0.95),
]

# Beat types without a family only ever score the floor offset
TRIGGER_KEYWORDS: Dict[PlotPointType, List[str]] = {
    PlotPointType.INCITING_INCIDENT: ['suddenly', 'unexpected', 'changed', 'disrupted', 'began'],
    PlotPointType.CLIMAX: ['final', 'ultimate', 'decisive', 'confrontation', 'battle', 'peak'],
    PlotPointType.RESOLUTION: ['resolved', 'ended', 'concluded', 'finally', 'peace', 'settled'],
    PlotPointType.CALL_TO_ADVENTURE: ['called', 'summoned', 'invited', 'opportunity', 'quest'],
    PlotPointType.ORDEAL: ['faced', 'confronted', 'challenged', 'tested', 'trial'],
}


def get_templates(structure_type: StructureType) -> List[PlotPointTemplate]:
    """Beat catalog for a structure type; anything but hero-journey uses three-act"""
    if structure_type == StructureType.HERO_JOURNEY:
        return list(HERO_JOURNEY_TEMPLATES)
    return list(THREE_ACT_TEMPLATES)


def plot_point_strength(context: str, plot_point_type: PlotPointType) -> float:
    return family_score(context.lower(), TRIGGER_KEYWORDS.get(plot_point_type, []), 0.2)


class PlotPointDetector(AnalysisStage):
    """Score each template beat against the sentences near its ideal position"""

    def __init__(self, *args, **kwargs):
        super().__init__("plot_points", *args, **kwargs)

    def detect(self, sentences: List[str], structure_type: StructureType) -> List[PlotPoint]:
        total = len(sentences)
        plot_points = []

        for template in get_templates(structure_type):
            center = TextSegmenter.boundary(total, template.ideal_position)
            context = TextSegmenter.join(TextSegmenter.window(sentences, center))
            strength = plot_point_strength(context, template.type)
            present = strength > PRESENCE_THRESHOLD

            if context:
                description = context
            else:
                percent = round(template.ideal_position * 100)
                description = f"{template.name} should occur around {percent}% through the story"

            plot_points.append(PlotPoint(
                id=self.ids("plot-point"),
                name=template.name,
                type=template.type,
                position=template.ideal_position,
                description=description,
                strength=strength,
                present=present,
                suggestions=[] if present else [f"Consider adding a clear {template.name.lower()}"],
                related_characters=unique_names(context),
            ))

        logger.debug(
            f"Detected {sum(p.present for p in plot_points)}/{len(plot_points)} plot points"
        )
        return plot_points

    def execute(self, context: Dict[str, Any]) -> List[PlotPoint]:
        structure: NarrativeStructure = context["structure"]
        return self.detect(context["sentences"], structure.type)
