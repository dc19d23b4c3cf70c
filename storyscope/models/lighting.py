"""Lighting models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record


class LightingStyle(str, Enum):
    NATURAL = "natural"
    DRAMATIC = "dramatic"
    SOFT = "soft"
    HARD = "hard"
    MIXED = "mixed"
    PRACTICAL = "practical"
    MOTIVATED = "motivated"
    STYLIZED = "stylized"


class LightingMood(str, Enum):
    BRIGHT = "bright"
    MOODY = "moody"
    ROMANTIC = "romantic"
    MYSTERIOUS = "mysterious"
    ENERGETIC = "energetic"
    CALM = "calm"
    TENSE = "tense"
    NOSTALGIC = "nostalgic"


class TimeOfDay(str, Enum):
    GOLDEN_HOUR = "golden-hour"
    BLUE_HOUR = "blue-hour"
    MIDDAY = "midday"
    OVERCAST = "overcast"
    NIGHT = "night"
    DAWN = "dawn"
    DUSK = "dusk"
    ARTIFICIAL = "artificial"


class LightType(str, Enum):
    KEY = "key"
    FILL = "fill"
    BACK = "back"
    PRACTICAL = "practical"
    AMBIENT = "ambient"
    ACCENT = "accent"
    HAIR = "hair"
    BACKGROUND = "background"


class LightPurpose(str, Enum):
    SUBJECT_ILLUMINATION = "subject-illumination"
    MOOD_CREATION = "mood-creation"
    BACKGROUND_SEPARATION = "background-separation"
    TEXTURE_ENHANCEMENT = "texture-enhancement"
    COLOR_ACCENT = "color-accent"


class ModifierType(str, Enum):
    SOFTBOX = "softbox"
    UMBRELLA = "umbrella"
    DIFFUSION = "diffusion"
    REFLECTOR = "reflector"
    FLAG = "flag"
    GEL = "gel"
    GRID = "grid"
    BARN_DOORS = "barn-doors"


class ContrastLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"


class LightSource(Record):
    id: str
    type: LightType
    position: str
    intensity: float = Field(..., ge=0.0, le=1.0)
    color: str
    purpose: LightPurpose
    equipment: str


class LightModifier(Record):
    type: ModifierType
    size: str
    effect: str


class ColorTemperature(Record):
    kelvin: int
    description: str
    mixing: bool


class LightingSetup(Record):
    """Lighting plan for the scene"""
    style: LightingStyle = Field(default=LightingStyle.NATURAL)
    mood: LightingMood = Field(default=LightingMood.BRIGHT)
    time_of_day: TimeOfDay = Field(default=TimeOfDay.ARTIFICIAL)
    sources: List[LightSource] = Field(default_factory=list)
    modifiers: List[LightModifier] = Field(default_factory=list)
    color_temperature: ColorTemperature
    contrast: ContrastLevel = Field(default=ContrastLevel.MEDIUM)
