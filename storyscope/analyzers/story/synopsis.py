"""Synopsis Generator - template summaries, themes, strengths and weaknesses"""

import logging
from typing import Dict, Any, List, Optional

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    Synopsis,
    StructureType,
    PlotPoint,
    PlotPointType,
    CharacterAnalysis,
    CharacterRole,
)
from storyscope.parser import TextSegmenter, contains_any

logger = logging.getLogger(__name__)

THEME_KEYWORDS = {
    'love': ['love', 'romance', 'relationship', 'heart'],
    'redemption': ['redemption', 'forgiveness', 'second chance'],
    'sacrifice': ['sacrifice', 'give up', 'selfless'],
    'growth': ['growth', 'change', 'transformation', 'learning'],
    'justice': ['justice', 'right', 'wrong', 'fair'],
    'family': ['family', 'parent', 'child', 'sibling'],
    'friendship': ['friend', 'loyalty', 'trust', 'bond'],
    'survival': ['survival', 'endure', 'overcome', 'persevere'],
}

BREAKDOWN_EXCERPT = 200


def extract_themes(text: str, limit: int = 3) -> List[str]:
    lowered = text.lower()
    return [theme for theme, keywords in THEME_KEYWORDS.items() if contains_any(lowered, keywords)][:limit]


def find_role(characters: List[CharacterAnalysis], role: CharacterRole) -> Optional[CharacterAnalysis]:
    return next((c for c in characters if c.role == role), None)


def find_beat(plot_points: List[PlotPoint], beat_type: PlotPointType) -> Optional[PlotPoint]:
    return next((p for p in plot_points if p.type == beat_type), None)


def act_breakdown(sentences: List[str]) -> str:
    """Three 25/50/25 slices, each cut to a short excerpt"""
    total = len(sentences)
    act1_end = TextSegmenter.boundary(total, 0.25)
    act2_end = TextSegmenter.boundary(total, 0.75)
    slices = [
        ("Act I (Setup)", sentences[:act1_end]),
        ("Act II (Confrontation)", sentences[act1_end:act2_end]),
        ("Act III (Resolution)", sentences[act2_end:]),
    ]
    return "\n\n".join(
        f"{label}: {TextSegmenter.join(part)[:BREAKDOWN_EXCERPT]}..." for label, part in slices
    )


def story_strengths(text: str, characters: List[CharacterAnalysis], plot_points: List[PlotPoint]) -> List[str]:
    strengths = []

    if len(characters) > 2:
        strengths.append("Rich character ensemble with multiple perspectives")

    if sum(p.present for p in plot_points) > len(plot_points) * 0.7:
        strengths.append("Strong structural foundation with clear plot points")

    if len(text) > 5000:
        strengths.append("Detailed narrative with substantial content")

    protagonist = find_role(characters, CharacterRole.PROTAGONIST)
    if protagonist and protagonist.development.change_strength > 0.6:
        strengths.append("Compelling protagonist with clear character arc")

    return strengths


def story_weaknesses(text: str, characters: List[CharacterAnalysis], plot_points: List[PlotPoint]) -> List[str]:
    weaknesses = []

    if sum(not p.present for p in plot_points) > len(plot_points) * 0.3:
        weaknesses.append("Missing key structural elements")

    weak = [c for c in characters if c.development.change_strength < 0.4]
    if len(weak) > len(characters) * 0.5:
        weaknesses.append("Characters need stronger development and arcs")

    if len(text) < 2000:
        weaknesses.append("Story may benefit from more detailed development")

    if find_role(characters, CharacterRole.ANTAGONIST) is None:
        weaknesses.append("Lacks a clear antagonist or opposing force")

    return weaknesses


class SynopsisGenerator(AnalysisStage):
    """Fill the synopsis templates from characters and plot points"""

    def __init__(self, *args, **kwargs):
        super().__init__("synopsis", *args, **kwargs)

    def generate(
        self,
        text: str,
        sentences: List[str],
        structure_type: StructureType,
        characters: List[CharacterAnalysis],
        plot_points: List[PlotPoint]
    ) -> Synopsis:
        protagonist = find_role(characters, CharacterRole.PROTAGONIST)
        antagonist = find_role(characters, CharacterRole.ANTAGONIST)
        climax = find_beat(plot_points, PlotPointType.CLIMAX)
        resolution = find_beat(plot_points, PlotPointType.RESOLUTION)
        present_count = sum(p.present for p in plot_points)

        hero = protagonist.name if protagonist else "a protagonist"
        lead = protagonist.name if protagonist else "the main character"
        opposition = f"conflict with {antagonist.name}" if antagonist else "challenges"
        outcome = "reaches a climactic confrontation" if climax and climax.present else "works toward resolution"

        short = f"A story about {hero} who faces {opposition} and {outcome}."

        themes = " and ".join(extract_themes(text)[:2])
        supporting = ""
        if len(characters) > 1:
            names = " and ".join(c.name for c in characters[1:3])
            supporting = f"Supporting characters include {names}."
        medium = (
            f"{short} The story follows {lead} through {present_count} major plot points, "
            f"exploring themes of {themes}. {supporting}"
        )

        motivations = " and ".join(protagonist.development.motivations[:2]) if protagonist else ""
        if antagonist:
            central = f"the opposition between {lead} and {antagonist.name}"
        else:
            central = "internal and external challenges"
        ending = "a clear resolution" if resolution and resolution.present else "an open ending"
        long = (
            f"{medium} The narrative structure follows a {structure_type.value.replace('-', ' ')} format, "
            f"with {present_count} of {len(plot_points)} key plot points present. "
            f"Character development focuses on {motivations or 'personal growth'}, "
            f"while the central conflict revolves around {central}. "
            f"The story concludes with {ending}."
        )

        return Synopsis(
            short=short,
            medium=medium,
            long=long,
            one_sheet=long,
            treatment=f"TREATMENT\n\n{long}\n\nACT BREAKDOWN:\n{act_breakdown(sentences)}",
            strengths=story_strengths(text, characters, plot_points),
            weaknesses=story_weaknesses(text, characters, plot_points),
        )

    def execute(self, context: Dict[str, Any]) -> Synopsis:
        return self.generate(
            context["text"],
            context["sentences"],
            context["structure"].type,
            context["characters"],
            context["plot_points"],
        )
