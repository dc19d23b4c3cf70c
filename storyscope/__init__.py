"""StoryScope: heuristic story and scene analysis"""

from .errors import StoryScopeError, InvalidInputError, WorkflowError
from .ids import SequentialIds, uuid_ids, utc_now, make_id_factory
from .orchestrator import StoryAnalyzer, SceneAnalyzer, analyze_story, analyze_scene
from .analyzers.scene import get_scene_templates

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "analyze_story",
    "analyze_scene",
    "get_scene_templates",
    "StoryAnalyzer",
    "SceneAnalyzer",
    # Errors
    "StoryScopeError",
    "InvalidInputError",
    "WorkflowError",
    # Ids and clock
    "SequentialIds",
    "uuid_ids",
    "utc_now",
    "make_id_factory",
]
