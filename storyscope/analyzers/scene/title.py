"""Scene title extraction"""

import re

from .base import SceneGenerator

TITLE_LOCATIONS = ['office', 'park', 'home', 'street', 'restaurant', 'car', 'beach', 'forest']
TITLE_ACTIONS = ['interview', 'meeting', 'walking', 'driving', 'cooking', 'working']
MAX_SENTENCE_TITLE = 50


class SceneTitleExtractor(SceneGenerator):
    """Short first sentence, else "<Action> at <location>", else "Scene"."""

    def __init__(self, *args, **kwargs):
        super().__init__("title", *args, **kwargs)

    def generate(self, description: str) -> str:
        first = re.split(r'[.!?]+', description)[0].strip()
        if first and len(first) < MAX_SENTENCE_TITLE:
            return first

        words = description.lower().split()
        location = next((w for w in TITLE_LOCATIONS if w in words), None)
        action = next((w for w in TITLE_ACTIONS if w in words), None)
        if location and action:
            return f"{action.capitalize()} at {location}"

        return "Scene"
