"""Scene container and scene templates"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import Field, field_serializer

from .base import Record
from .location import LocationDetails
from .visual import VisualComposition, VisualMood, CinematographyStyle
from .lighting import LightingSetup, LightingStyle, LightingMood
from .audio import AudioDesign
from .production import Shot, EquipmentList
from .logistics import ProductionSchedule, WeatherConsiderations, BudgetEstimate


class SceneCategory(str, Enum):
    INTERVIEW = "interview"
    ACTION = "action"
    DIALOGUE = "dialogue"
    MONTAGE = "montage"
    ESTABLISHING = "establishing"
    INTIMATE = "intimate"
    DOCUMENTARY = "documentary"
    COMMERCIAL = "commercial"


class Scene(Record):
    """Complete production breakdown of one scene description"""
    id: str
    title: str
    description: str
    location: LocationDetails
    visual_composition: VisualComposition
    lighting: LightingSetup
    audio: AudioDesign
    shot_list: List[Shot] = Field(default_factory=list)
    equipment: EquipmentList
    schedule: ProductionSchedule
    weather: WeatherConsiderations
    budget: BudgetEstimate
    created_at: datetime
    updated_at: datetime

    @field_serializer('created_at', 'updated_at')
    def serialize_datetime(self, value: datetime) -> str:
        """Serialize datetime to ISO format"""
        return value.isoformat()


class SceneTemplateSettings(Record):
    """Defaults a template applies to a new scene"""
    visual_mood: VisualMood
    cinematography: CinematographyStyle
    lighting_style: LightingStyle
    lighting_mood: LightingMood


class SceneTemplate(Record):
    id: str
    name: str
    description: str
    category: SceneCategory
    default_settings: SceneTemplateSettings
