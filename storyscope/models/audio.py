"""Audio design models"""

from enum import Enum
from typing import List

from pydantic import Field

from .base import Record


class MicType(str, Enum):
    BOOM = "boom"
    LAVALIER = "lavalier"
    HANDHELD = "handheld"
    SHOTGUN = "shotgun"
    WIRELESS = "wireless"
    BOUNDARY = "boundary"
    CONTACT = "contact"


class TempoRange(Record):
    min: int
    max: int
    description: str


class LicensingInfo(Record):
    type: str = Field(default="royalty-free", description="royalty-free, licensed, original or public-domain")
    cost: float = Field(default=0, ge=0)
    restrictions: List[str] = Field(default_factory=list)


class MusicSelection(Record):
    genre: List[str] = Field(default_factory=list)
    mood: List[str] = Field(default_factory=list)
    tempo: TempoRange
    instrumentation: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)
    licensing: LicensingInfo


class SoundEffect(Record):
    id: str
    name: str
    description: str
    timing: str
    volume: float = Field(..., ge=0.0, le=1.0)
    source: str


class AmbienceTrack(Record):
    id: str
    environment: str
    description: str
    volume: float = Field(..., ge=0.0, le=1.0)
    duration: str


class MicrophoneSetup(Record):
    type: MicType
    placement: str
    purpose: str
    equipment: str


class DialogueConsiderations(Record):
    recording_quality: str = Field(default="sync", description="sync, wild or adr")
    microphone_setup: List[MicrophoneSetup] = Field(default_factory=list)
    acoustic_treatment: List[str] = Field(default_factory=list)
    backup_plans: List[str] = Field(default_factory=list)


class AudioFormat(Record):
    container: str
    codec: str
    quality: str


class RecordingSetup(Record):
    format: AudioFormat
    sample_rate: int
    bit_depth: int
    channels: int
    equipment: List[str] = Field(default_factory=list)


class AudioDesign(Record):
    """Music, effects, ambience, dialogue and recording plan"""
    music: MusicSelection
    sound_effects: List[SoundEffect] = Field(default_factory=list)
    ambience: List[AmbienceTrack] = Field(default_factory=list)
    dialogue: DialogueConsiderations
    recording: RecordingSetup
