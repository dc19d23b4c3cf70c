"""Structure analysis - classify the structure type and partition sentences into acts"""

import logging
from typing import Dict, Any, List, Optional, Tuple

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import StructureType, Act, NarrativeStructure
from storyscope.parser import TextSegmenter, count_present

logger = logging.getLogger(__name__)


class StructureClassifier:
    """Pick a structure type by keyword presence in the whole text"""

    KEYWORDS = {
        StructureType.HERO_JOURNEY: [
            'journey', 'quest', 'mentor', 'threshold', 'ordeal', 'return', 'transformation'
        ],
        StructureType.THREE_ACT: [
            'beginning', 'middle', 'end', 'setup', 'confrontation', 'resolution'
        ],
        StructureType.SAVE_THE_CAT: [
            'catalyst', 'debate', 'break into two', 'midpoint', 'dark night', 'finale'
        ],
    }

    def scores(self, text: str) -> Dict[StructureType, int]:
        lowered = text.lower()
        return {
            structure_type: count_present(lowered, keywords)
            for structure_type, keywords in self.KEYWORDS.items()
        }

    def classify(self, text: str) -> StructureType:
        """
        Hero-journey wins ties against both others, save-the-cat must beat
        three-act outright.
        """
        scores = self.scores(text)
        hero = scores[StructureType.HERO_JOURNEY]
        three_act = scores[StructureType.THREE_ACT]
        save_the_cat = scores[StructureType.SAVE_THE_CAT]

        if hero >= three_act and hero >= save_the_cat:
            return StructureType.HERO_JOURNEY
        if save_the_cat > three_act:
            return StructureType.SAVE_THE_CAT
        return StructureType.THREE_ACT


class ActStrengthScorer:
    """Score an act's sentences against its indicator family"""

    INDICATORS = {
        'setup': ['introduce', 'establish', 'begin', 'start', 'meet', 'discover'],
        'confrontation': ['conflict', 'challenge', 'struggle', 'fight', 'oppose', 'difficult'],
        'resolution': ['resolve', 'conclude', 'end', 'final', 'victory', 'defeat', 'transform'],
    }

    def score(self, sentences: List[str], act_kind: str) -> float:
        indicators = self.INDICATORS[act_kind]
        text = ' '.join(sentences).lower()
        return min(count_present(text, indicators) / len(indicators) + 0.3, 1.0)


# (name, purpose, start ratio, end ratio, indicator family); an end ratio of
# None means the act runs to the last sentence.
ActLayout = Tuple[str, str, float, Optional[float], str]

THREE_ACT_LAYOUT: List[ActLayout] = [
    ("Act I - Setup", "Introduce characters, world, and inciting incident", 0.0, 0.25, 'setup'),
    ("Act II - Confrontation", "Develop conflict, obstacles, and character growth", 0.25, 0.75, 'confrontation'),
    ("Act III - Resolution", "Climax, resolution, and character transformation", 0.75, None, 'resolution'),
]

HERO_JOURNEY_LAYOUT: List[ActLayout] = [
    ("Ordinary World", "Establish hero in normal environment", 0.0, 0.1, 'setup'),
    ("Special World", "Hero faces challenges and grows", 0.25, 0.75, 'confrontation'),
    ("Return", "Hero returns transformed", 0.75, None, 'resolution'),
]


class ActSegmenter:
    """Partition the sentence sequence into acts by fixed position ratios"""

    def __init__(self, ids, scorer: ActStrengthScorer = None):
        self.ids = ids
        self.scorer = scorer or ActStrengthScorer()

    @staticmethod
    def layout_for(structure_type: StructureType) -> List[ActLayout]:
        if structure_type == StructureType.HERO_JOURNEY:
            return HERO_JOURNEY_LAYOUT
        return THREE_ACT_LAYOUT

    def segment(self, sentences: List[str], structure_type: StructureType) -> List[Act]:
        total = len(sentences)
        acts = []
        for name, purpose, start_ratio, end_ratio, kind in self.layout_for(structure_type):
            start = TextSegmenter.boundary(total, start_ratio)
            end = total if end_ratio is None else TextSegmenter.boundary(total, end_ratio)
            slice_ = sentences[start:end]
            acts.append(Act(
                id=self.ids("act"),
                name=name,
                start_position=start,
                end_position=end,
                purpose=purpose,
                content=TextSegmenter.join(slice_),
                strength=self.scorer.score(slice_, kind),
            ))
        return acts


def calculate_completeness(acts: List[Act]) -> float:
    """Share of the three expected acts that were found"""
    return min(len(acts) / 3, 1.0)


def calculate_adherence(acts: List[Act], structure_type: StructureType) -> float:
    """
    Mean of length-fit times strength over the acts.

    Act lengths are sentence counts divided by 100, compared against
    fractional expected lengths; the result is clamped into [0, 1].
    """
    if not acts:
        return 0.0

    total = 0.0
    for index, act in enumerate(acts):
        if structure_type == StructureType.THREE_ACT:
            expected = 0.5 if index == 1 else 0.25
        else:
            expected = 1 / len(acts)
        actual = (act.end_position - act.start_position) / 100
        total += (1 - abs(expected - actual)) * act.strength

    return max(0.0, min(1.0, total / len(acts)))


def structure_recommendations(
    acts: List[Act],
    structure_type: StructureType,
    completeness: float,
    adherence: float
) -> List[str]:
    recommendations = []

    if completeness < 0.8:
        label = structure_type.value.replace('-', ' ')
        recommendations.append(f"Consider developing the {label} structure more fully")

    if adherence < 0.6:
        recommendations.append("Story structure could be more balanced - consider adjusting act lengths")

    if acts and acts[0].strength < 0.5:
        recommendations.append("Opening act needs strengthening - consider a stronger hook or clearer setup")

    if len(acts) > 1 and acts[-1].strength < 0.5:
        recommendations.append("Ending needs more impact - consider a stronger resolution or transformation")

    return recommendations


class StructureAnalyzer(AnalysisStage):
    """Build the NarrativeStructure for a manuscript"""

    def __init__(self, *args, **kwargs):
        super().__init__("structure", *args, **kwargs)
        self.classifier = StructureClassifier()
        self.segmenter = ActSegmenter(self.ids)

    def analyze(self, text: str, sentences: List[str]) -> NarrativeStructure:
        structure_type = self.classifier.classify(text)
        acts = self.segmenter.segment(sentences, structure_type)
        completeness = calculate_completeness(acts)
        adherence = calculate_adherence(acts, structure_type)

        logger.debug(
            f"Structure {structure_type.value}: {len(acts)} acts, "
            f"completeness={completeness:.2f}, adherence={adherence:.2f}"
        )

        return NarrativeStructure(
            type=structure_type,
            acts=acts,
            completeness=completeness,
            adherence=adherence,
            recommendations=structure_recommendations(acts, structure_type, completeness, adherence),
        )

    def execute(self, context: Dict[str, Any]) -> NarrativeStructure:
        return self.analyze(context["text"], context["sentences"])
