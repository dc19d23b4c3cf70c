"""Narrative pipeline stages"""

from .structure import StructureClassifier, ActSegmenter, ActStrengthScorer, StructureAnalyzer
from .plot_points import PlotPointDetector, get_templates
from .characters import CharacterExtractor
from .pacing import PacingAnalyzer
from .gaps import GapDetector
from .suggestions import SuggestionGenerator
from .synopsis import SynopsisGenerator
from .logline import LoglineGenerator
from .genre import GenreClassifier
from .visualization import VisualizationProjector

__all__ = [
    "StructureClassifier",
    "ActSegmenter",
    "ActStrengthScorer",
    "StructureAnalyzer",
    "PlotPointDetector",
    "get_templates",
    "CharacterExtractor",
    "PacingAnalyzer",
    "GapDetector",
    "SuggestionGenerator",
    "SynopsisGenerator",
    "LoglineGenerator",
    "GenreClassifier",
    "VisualizationProjector",
]
