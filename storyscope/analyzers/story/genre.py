"""Genre Classifier - keyword-family genre scoring and convention checks"""

import logging
from typing import Dict, Any, List

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    Impact,
    Genre,
    GenreConvention,
    GenreAnalysis,
    CharacterAnalysis,
    CharacterRole,
)
from storyscope.parser import count_present

logger = logging.getLogger(__name__)

DEFAULT_GENRE = 'drama'

GENRE_KEYWORDS = {
    'drama': ['emotion', 'relationship', 'family', 'personal', 'character'],
    'action': ['fight', 'chase', 'battle', 'explosion', 'weapon'],
    'romance': ['love', 'romance', 'relationship', 'heart', 'kiss'],
    'thriller': ['suspense', 'danger', 'chase', 'mystery', 'tension'],
    'comedy': ['funny', 'laugh', 'humor', 'joke', 'amusing'],
    'horror': ['fear', 'scary', 'monster', 'death', 'terror'],
    'fantasy': ['magic', 'wizard', 'dragon', 'spell', 'mythical'],
    'sci-fi': ['space', 'future', 'technology', 'alien', 'robot'],
}

# (name, importance, description)
GENRE_CONVENTIONS = {
    'drama': [
        ("Character-driven conflict", Impact.HIGH, "Focus on internal character struggles"),
        ("Emotional stakes", Impact.HIGH, "Personal consequences matter more than physical"),
        ("Realistic dialogue", Impact.MEDIUM, "Natural, believable conversations"),
    ],
    'action': [
        ("Physical conflict", Impact.HIGH, "Action sequences and physical challenges"),
        ("Clear antagonist", Impact.HIGH, "Defined enemy or opposing force"),
        ("Rising stakes", Impact.MEDIUM, "Escalating danger and consequences"),
    ],
    'romance': [
        ("Meet cute", Impact.MEDIUM, "Charming first meeting between love interests"),
        ("Relationship obstacles", Impact.HIGH, "Barriers preventing the couple from being together"),
        ("Happy ending", Impact.MEDIUM, "Satisfying romantic resolution"),
    ],
}

GENRE_RECOMMENDATIONS = {
    'drama': [
        "Focus on character development and internal conflict",
        "Ensure emotional stakes are clear and compelling",
        "Develop realistic, nuanced relationships",
    ],
    'action': [
        "Include more physical conflict and action sequences",
        "Clarify the antagonist and their motivations",
        "Escalate stakes throughout the story",
    ],
    'romance': [
        "Develop the romantic relationship with clear obstacles",
        "Include moments of romantic tension and chemistry",
        "Consider the emotional journey of both love interests",
    ],
}


def genre_scores(text: str) -> Dict[str, int]:
    lowered = text.lower()
    return {genre: count_present(lowered, keywords) for genre, keywords in GENRE_KEYWORDS.items()}


def convention_present(name: str, lowered: str, characters: List[CharacterAnalysis]) -> bool:
    """
    Named conventions have explicit checks; the rest count as present when a
    significant word of the convention name appears in the text.
    """
    if name == "Character-driven conflict":
        return any(c.development.conflicts for c in characters)
    if name == "Clear antagonist":
        return any(c.role == CharacterRole.ANTAGONIST for c in characters)
    if name == "Relationship obstacles":
        return 'obstacle' in lowered or 'problem' in lowered
    return any(word in lowered for word in name.lower().split() if len(word) > 3)


def analyze_conventions(genre: str, text: str, characters: List[CharacterAnalysis]) -> List[GenreConvention]:
    lowered = text.lower()
    conventions = []
    for name, importance, description in GENRE_CONVENTIONS.get(genre, GENRE_CONVENTIONS[DEFAULT_GENRE]):
        present = convention_present(name, lowered, characters)
        conventions.append(GenreConvention(
            name=name,
            present=present,
            strength=0.75 if present else 0.5,
            importance=importance,
            description=description,
        ))
    return conventions


class GenreClassifier(AnalysisStage):
    """Score genre families and check the primary genre's conventions"""

    def __init__(self, *args, **kwargs):
        super().__init__("genre", *args, **kwargs)

    def classify(self, text: str, characters: List[CharacterAnalysis]) -> GenreAnalysis:
        # sorted() is stable, so equal scores keep the family order above
        ranked = [
            (name, score)
            for name, score in sorted(genre_scores(text).items(), key=lambda item: item[1], reverse=True)
            if score > 0
        ]

        if ranked:
            primary_name, primary_score = ranked[0]
        else:
            primary_name, primary_score = DEFAULT_GENRE, 0

        primary = Genre(
            name=primary_name,
            confidence=min(primary_score / 5, 1.0),
            indicators=list(GENRE_KEYWORDS[primary_name]),
        )
        secondary = [
            Genre(name=name, confidence=min(score / 5, 1.0), indicators=list(GENRE_KEYWORDS[name]))
            for name, score in ranked[1:3]
        ]

        logger.debug(f"Primary genre {primary.name} ({primary.confidence:.2f})")

        return GenreAnalysis(
            primary=primary,
            secondary=secondary,
            conventions=analyze_conventions(primary.name, text, characters),
            adherence=primary.confidence,
            recommendations=list(GENRE_RECOMMENDATIONS.get(primary.name, GENRE_RECOMMENDATIONS[DEFAULT_GENRE])),
        )

    def execute(self, context: Dict[str, Any]) -> GenreAnalysis:
        return self.classify(context["text"], context["characters"])
