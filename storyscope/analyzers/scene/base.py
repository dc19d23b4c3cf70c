"""Shared plumbing for scene sub-generators"""

from abc import abstractmethod
from typing import Dict, Any

from storyscope.analyzers.base import AnalysisStage


class SceneGenerator(AnalysisStage):
    """
    Derives one sub-model of a Scene from the raw description.

    Generators read nothing but the description, so they can run in any
    order or concurrently.
    """

    @abstractmethod
    def generate(self, description: str) -> Any:
        """
        Build the sub-model

        Args:
            description: Scene description as written by the user

        Returns:
            Record (or list of records) for this part of the scene
        """
        pass

    def execute(self, context: Dict[str, Any]) -> Any:
        return self.generate(context["text"])


def last_match(words: str, rules, default):
    """
    Apply keyword rules in order; later matches override earlier ones.

    Args:
        words: Lower-cased description
        rules: Sequence of (keywords, value) pairs
        default: Value when no rule matches
    """
    value = default
    for keywords, candidate in rules:
        if any(keyword in words for keyword in keywords):
            value = candidate
    return value
