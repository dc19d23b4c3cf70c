"""Character extraction - named entities with role, arc, development and relationships"""

import logging
import re
from typing import Dict, Any, List, Optional

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    CharacterRole,
    CharacterArc,
    RelationshipType,
    CharacterDevelopment,
    CharacterRelationship,
    CharacterAnalysis,
)
from storyscope.parser import count_names

logger = logging.getLogger(__name__)

MAX_CHARACTERS = 8
MAX_RELATIONSHIPS = 4

# Checked in order; first phrase "<name> <verb>" found decides
ROLE_PHRASES = [
    (CharacterRole.ANTAGONIST, ['opposed', 'enemy']),
    (CharacterRole.MENTOR, ['taught', 'guided']),
    (CharacterRole.ALLY, ['helped', 'supported']),
    (CharacterRole.LOVE_INTEREST, ['loved', 'romance']),
]

ARC_PHRASES = [
    (CharacterArc.POSITIVE_CHANGE, ['changed', 'grew']),
    (CharacterArc.NEGATIVE_CHANGE, ['fell', 'corrupted']),
    (CharacterArc.REDEMPTION_ARC, ['redeemed', 'forgiven']),
]

EMOTIONS = ['happy', 'sad', 'angry', 'confused', 'determined', 'afraid', 'confident']
MOTIVATION_KEYWORDS = ['wanted', 'needed', 'sought', 'desired', 'hoped']
CONFLICT_KEYWORDS = ['fought', 'struggled', 'opposed', 'challenged', 'confronted']
GROWTH_KEYWORDS = ['learned', 'realized', 'understood', 'discovered', 'became']
WEAKNESS_KEYWORDS = ['failed', "couldn't", 'unable', 'weak', 'struggled']

RELATIONSHIP_LINKS = [
    (RelationshipType.ROMANTIC, 'loved'),
    (RelationshipType.FRIENDSHIP, 'friend'),
    (RelationshipType.ANTAGONISTIC, 'enemy'),
]

SENTENCE_SPLIT = re.compile(r'[.!?]+')


def infer_role(name: str, lowered: str, index: int) -> CharacterRole:
    if index == 0:
        return CharacterRole.PROTAGONIST
    name_lower = name.lower()
    for role, verbs in ROLE_PHRASES:
        if any(f"{name_lower} {verb}" in lowered for verb in verbs):
            return role
    return CharacterRole.SUPPORTING


def infer_arc(name: str, lowered: str) -> CharacterArc:
    name_lower = name.lower()
    for arc, verbs in ARC_PHRASES:
        if any(f"{name_lower} {verb}" in lowered for verb in verbs):
            return arc
    return CharacterArc.FLAT_ARC


def extract_state(sentence: str) -> str:
    lowered = sentence.lower()
    return next((emotion for emotion in EMOTIONS if emotion in lowered), "neutral")


def extract_motivations(name: str, text: str) -> List[str]:
    """Spans from the name through a motivation keyword to the end of its sentence"""
    motivations = []
    for keyword in MOTIVATION_KEYWORDS:
        pattern = re.compile(f"{re.escape(name)}[^.]*{keyword}[^.]*", re.IGNORECASE)
        motivations.extend(pattern.findall(text)[:2])
    return motivations[:3]


def extract_phrases(name: str, lowered: str, keywords: List[str], limit: int) -> List[str]:
    """Literal "<name> <keyword>" phrases that occur in the text"""
    name_lower = name.lower()
    return [f"{name} {keyword}" for keyword in keywords if f"{name_lower} {keyword}" in lowered][:limit]


def analyze_development(name: str, text: str) -> CharacterDevelopment:
    lowered = text.lower()
    mentions = [s for s in SENTENCE_SPLIT.split(text) if name in s]
    first = mentions[0] if mentions else ""
    last = mentions[-1] if mentions else ""

    return CharacterDevelopment(
        start_state=extract_state(first),
        end_state=extract_state(last),
        change_strength=0.7 if len(mentions) > 2 else 0.3,
        motivations=extract_motivations(name, text),
        conflicts=extract_phrases(name, lowered, CONFLICT_KEYWORDS, 3),
        growth=extract_phrases(name, lowered, GROWTH_KEYWORDS, 3),
        weaknesses=extract_phrases(name, lowered, WEAKNESS_KEYWORDS, 2),
    )


def relationship_type(first: str, second: str, lowered: str) -> Optional[RelationshipType]:
    a, b = first.lower(), second.lower()
    for kind, link in RELATIONSHIP_LINKS:
        if f"{a} {link} {b}" in lowered or f"{b} {link} {a}" in lowered:
            return kind
    return None


def analyze_relationships(name: str, lowered: str, all_names: List[str]) -> List[CharacterRelationship]:
    relationships = []
    for other in all_names:
        if other == name:
            continue
        kind = relationship_type(name, other, lowered)
        if kind is not None:
            relationships.append(CharacterRelationship(character=other, type=kind))
    return relationships[:MAX_RELATIONSHIPS]


def character_suggestions(name: str, lowered: str, mentions: int) -> List[str]:
    suggestions = []
    name_lower = name.lower()

    if mentions < 3:
        suggestions.append(f"Consider developing {name}'s role more throughout the story")

    if f"{name_lower} changed" not in lowered:
        suggestions.append(f"Consider giving {name} a clearer character arc or transformation")

    if f"{name_lower} wanted" not in lowered:
        suggestions.append(f"Clarify {name}'s motivations and goals")

    return suggestions


def importance_for(mentions: int) -> float:
    if mentions > 5:
        return 1.0
    if mentions > 3:
        return 0.7
    return 0.4


class CharacterExtractor(AnalysisStage):
    """
    Extract characters from two-capitalized-word names.

    Only names mentioned more than once become characters, in order of first
    appearance, and at most eight of them. The first is the protagonist.
    """

    def __init__(self, *args, **kwargs):
        super().__init__("characters", *args, **kwargs)

    def extract(self, text: str) -> List[CharacterAnalysis]:
        counts = count_names(text)
        total_mentions = sum(counts.values())
        all_names = list(counts)
        lowered = text.lower()

        recurring = [(name, mentions) for name, mentions in counts.items() if mentions > 1]
        characters = []

        for index, (name, mentions) in enumerate(recurring[:MAX_CHARACTERS]):
            characters.append(CharacterAnalysis(
                id=self.ids("character"),
                name=name,
                role=infer_role(name, lowered, index),
                arc_type=infer_arc(name, lowered),
                development=analyze_development(name, text),
                relationships=analyze_relationships(name, lowered, all_names),
                screen_time=mentions / total_mentions if total_mentions else 0.0,
                importance=importance_for(mentions),
                suggestions=character_suggestions(name, lowered, mentions),
            ))

        logger.debug(f"Extracted {len(characters)} characters from {len(all_names)} names")
        return characters

    def execute(self, context: Dict[str, Any]) -> List[CharacterAnalysis]:
        return self.extract(context["text"])
