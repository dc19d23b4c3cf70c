"""Keyword scoring helpers shared by the story and scene analyzers"""

from typing import Iterable


def count_present(text: str, keywords: Iterable[str]) -> int:
    """Number of keywords that occur in text at least once (substring match)"""
    return sum(1 for keyword in keywords if keyword in text)


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def family_score(text: str, keywords: Iterable[str], offset: float) -> float:
    """
    Fraction of a keyword family present in text plus a floor offset,
    capped at 1.0. An empty family scores the offset alone.
    """
    keywords = list(keywords)
    hits = count_present(text, keywords)
    return min(hits / max(len(keywords), 1) + offset, 1.0)
