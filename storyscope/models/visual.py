"""Visual composition models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record


class VisualMood(str, Enum):
    DRAMATIC = "dramatic"
    INTIMATE = "intimate"
    ENERGETIC = "energetic"
    PEACEFUL = "peaceful"
    MYSTERIOUS = "mysterious"
    ROMANTIC = "romantic"
    TENSE = "tense"
    NOSTALGIC = "nostalgic"
    HOPEFUL = "hopeful"
    MELANCHOLIC = "melancholic"


class CinematographyStyle(str, Enum):
    DOCUMENTARY = "documentary"
    CINEMATIC = "cinematic"
    HANDHELD = "handheld"
    STATIC = "static"
    DYNAMIC = "dynamic"
    INTIMATE = "intimate"
    EPIC = "epic"
    MINIMALIST = "minimalist"


class CompositionRule(str, Enum):
    RULE_OF_THIRDS = "rule-of-thirds"
    CENTER_COMPOSITION = "center-composition"
    LEADING_LINES = "leading-lines"
    SYMMETRY = "symmetry"
    GOLDEN_RATIO = "golden-ratio"
    FRAME_WITHIN_FRAME = "frame-within-frame"


class MovementType(str, Enum):
    STATIC = "static"
    PAN = "pan"
    TILT = "tilt"
    DOLLY = "dolly"
    TRACK = "track"
    CRANE = "crane"
    HANDHELD = "handheld"
    GIMBAL = "gimbal"
    DRONE = "drone"


class FocusStrategy(str, Enum):
    DEEP_FOCUS = "deep-focus"
    SHALLOW_FOCUS = "shallow-focus"
    RACK_FOCUS = "rack-focus"
    SPLIT_FOCUS = "split-focus"
    SELECTIVE_FOCUS = "selective-focus"


class ColorPalette(Record):
    primary: str
    secondary: str
    accent: str
    background: str
    temperature: str = Field(..., description="warm, cool or neutral")
    saturation: str = Field(..., description="high, medium, low or desaturated")
    contrast: str = Field(..., description="high, medium or low")


class VisualStyle(Record):
    cinematography: CinematographyStyle = Field(default=CinematographyStyle.DOCUMENTARY)
    influences: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)
    techniques: List[str] = Field(default_factory=list)


class FramingGuide(Record):
    composition: List[CompositionRule] = Field(default_factory=list)
    subject_placement: str
    background_treatment: str
    foreground_elements: List[str] = Field(default_factory=list)


class CameraMovement(Record):
    type: MovementType = Field(default=MovementType.STATIC)
    motivation: str
    speed: str = Field(default="medium", description="slow, medium or fast")
    smoothness: str = Field(default="smooth", description="smooth, organic or handheld")


class DepthLayer(Record):
    name: str
    distance: str = Field(..., description="foreground, midground or background")
    elements: List[str] = Field(default_factory=list)
    treatment: str


class DepthStrategy(Record):
    layers: List[DepthLayer] = Field(default_factory=list)
    focus_strategy: FocusStrategy = Field(default=FocusStrategy.SELECTIVE_FOCUS)
    bokeh_quality: str = Field(default="medium", description="sharp, medium, soft or dreamy")


class VisualComposition(Record):
    """Mood, palette, style, framing, movement and depth of the scene"""
    mood: VisualMood = Field(default=VisualMood.PEACEFUL)
    color_palette: ColorPalette
    style: VisualStyle
    framing: FramingGuide
    movement: CameraMovement
    depth: DepthStrategy
