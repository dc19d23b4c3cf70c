"""Scene pipeline stages"""

from .base import SceneGenerator
from .title import SceneTitleExtractor
from .location import LocationAnalyzer
from .visual import VisualCompositionGenerator
from .lighting import LightingSetupGenerator
from .audio import AudioDesignGenerator
from .shots import ShotListGenerator
from .equipment import EquipmentListGenerator
from .schedule import ScheduleGenerator
from .weather import WeatherGenerator
from .budget import BudgetEstimator
from .templates import get_scene_templates

__all__ = [
    "SceneGenerator",
    "SceneTitleExtractor",
    "LocationAnalyzer",
    "VisualCompositionGenerator",
    "LightingSetupGenerator",
    "AudioDesignGenerator",
    "ShotListGenerator",
    "EquipmentListGenerator",
    "ScheduleGenerator",
    "WeatherGenerator",
    "BudgetEstimator",
    "get_scene_templates",
]
