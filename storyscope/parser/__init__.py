"""Text segmentation, keyword scoring and name extraction"""

from .text_segmenter import TextSegmenter
from .keywords import count_present, contains_any, clamp01, family_score
from .names import NAME_PATTERN, find_names, count_names, unique_names

__all__ = [
    "TextSegmenter",
    "count_present",
    "contains_any",
    "clamp01",
    "family_score",
    "NAME_PATTERN",
    "find_names",
    "count_names",
    "unique_names",
]
