"""Text Segmenter - Split manuscripts into ordered sentences and positional slices"""

import math
import re
from typing import List


class TextSegmenter:
    """
    Split raw text into the sentence sequence every analysis stage works on.

    Sentences are the text between runs of '.', '!' and '?', trimmed, with
    empty pieces dropped. Position of sentence i is i / len(sentences).
    """

    TERMINATORS = re.compile(r'[.!?]+')

    def split(self, text: str) -> List[str]:
        """
        Split text into non-empty trimmed sentences.

        Args:
            text: Raw manuscript or description

        Returns:
            Sentences in source order; empty list for blank input
        """
        return [piece.strip() for piece in self.TERMINATORS.split(text) if piece.strip()]

    @staticmethod
    def boundary(total: int, ratio: float) -> int:
        """Sentence index at a fractional position, rounded down"""
        return math.floor(total * ratio)

    @staticmethod
    def join(sentences: List[str]) -> str:
        return '. '.join(sentences)

    @staticmethod
    def window(sentences: List[str], center: int, radius: int = 2) -> List[str]:
        """Sentences in [center - radius, center + radius) clipped to the sequence"""
        start = max(0, center - radius)
        end = min(len(sentences), center + radius)
        return sentences[start:end]
