"""Shot list and equipment models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record
from .visual import MovementType


class ShotSize(str, Enum):
    EXTREME_WIDE = "extreme-wide"
    WIDE = "wide"
    MEDIUM_WIDE = "medium-wide"
    MEDIUM = "medium"
    MEDIUM_CLOSE = "medium-close"
    CLOSE_UP = "close-up"
    EXTREME_CLOSE_UP = "extreme-close-up"
    INSERT = "insert"


class CameraAngle(str, Enum):
    EYE_LEVEL = "eye-level"
    HIGH_ANGLE = "high-angle"
    LOW_ANGLE = "low-angle"
    BIRDS_EYE = "birds-eye"
    WORMS_EYE = "worms-eye"
    DUTCH_ANGLE = "dutch-angle"
    OVER_SHOULDER = "over-shoulder"


class ShotMovement(Record):
    type: MovementType
    start: str
    end: str
    speed: str
    equipment: str


class ShotEquipment(Record):
    camera: str
    lens: str
    support: str
    accessories: List[str] = Field(default_factory=list)


class ShotLighting(Record):
    setup: str
    key_changes: List[str] = Field(default_factory=list)
    special_requirements: List[str] = Field(default_factory=list)


class ShotAudio(Record):
    primary: str
    backup: str
    monitoring: str
    notes: List[str] = Field(default_factory=list)


class Shot(Record):
    """One planned camera setup"""
    id: str
    number: str
    description: str
    shot_size: ShotSize
    angle: CameraAngle = Field(default=CameraAngle.EYE_LEVEL)
    movement: ShotMovement
    duration: int = Field(..., gt=0, description="Seconds")
    equipment: ShotEquipment
    lighting: ShotLighting
    audio: ShotAudio
    notes: List[str] = Field(default_factory=list)
    alternatives: List[str] = Field(default_factory=list)


class CameraSpecs(Record):
    sensor: str
    resolution: str
    frame_rates: List[int] = Field(default_factory=list)
    codecs: List[str] = Field(default_factory=list)
    low_light: str


class CameraEquipment(Record):
    body: str
    specifications: CameraSpecs
    alternatives: List[str] = Field(default_factory=list)
    cost: float
    availability: str


class LensEquipment(Record):
    model: str
    focal_length: str
    aperture: str
    purpose: str
    cost: float


class LightingEquipment(Record):
    type: str
    model: str
    power: str
    accessories: List[str] = Field(default_factory=list)
    cost: float


class AudioEquipment(Record):
    type: str
    model: str
    specifications: str
    purpose: str
    cost: float


class SupportEquipment(Record):
    type: str
    model: str
    capacity: str
    purpose: str
    cost: float


class AccessoryEquipment(Record):
    name: str
    purpose: str
    quantity: int
    cost: float


class PowerEquipment(Record):
    type: str
    capacity: str
    duration: str
    cost: float


class StorageEquipment(Record):
    type: str
    capacity: str
    speed: str
    cost: float


class EquipmentList(Record):
    """Rental package for the shoot"""
    camera: CameraEquipment
    lenses: List[LensEquipment] = Field(default_factory=list)
    lighting: List[LightingEquipment] = Field(default_factory=list)
    audio: List[AudioEquipment] = Field(default_factory=list)
    support: List[SupportEquipment] = Field(default_factory=list)
    accessories: List[AccessoryEquipment] = Field(default_factory=list)
    power: List[PowerEquipment] = Field(default_factory=list)
    storage: List[StorageEquipment] = Field(default_factory=list)
