"""Analysis stages for the story and scene pipelines"""

from .base import AnalysisStage

__all__ = ["AnalysisStage"]
