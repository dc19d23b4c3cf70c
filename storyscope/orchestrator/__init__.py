"""Orchestration of the story and scene pipelines"""

from .workflow import Workflow, StageTask, StageStatus
from .story_analyzer import StoryAnalyzer, analyze_story
from .scene_analyzer import SceneAnalyzer, analyze_scene

__all__ = [
    "StoryAnalyzer",
    "analyze_story",
    "SceneAnalyzer",
    "analyze_scene",
    # Workflow
    "Workflow",
    "StageTask",
    "StageStatus",
]
