"""Character name extraction"""

import re
from collections import Counter
from typing import List

NAME_PATTERN = re.compile(r'\b[A-Z][a-z]+ [A-Z][a-z]+\b')


def find_names(text: str) -> List[str]:
    """All two-capitalized-word matches in order of appearance, repeats included"""
    return NAME_PATTERN.findall(text)


def count_names(text: str) -> Counter:
    """
    Mention counts per name.

    Counter preserves insertion order, so iteration follows first appearance.
    """
    return Counter(find_names(text))


def unique_names(text: str, limit: int = 3) -> List[str]:
    """First `limit` distinct names in order of appearance"""
    seen = list(dict.fromkeys(find_names(text)))
    return seen[:limit]
