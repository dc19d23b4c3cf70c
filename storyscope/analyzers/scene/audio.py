"""Audio Design Generator - music, effects, ambience, dialogue and recording"""

from typing import List

from storyscope.models import AudioDesign
from storyscope.models.audio import (
    MicType,
    TempoRange,
    LicensingInfo,
    MusicSelection,
    SoundEffect,
    AmbienceTrack,
    MicrophoneSetup,
    DialogueConsiderations,
    AudioFormat,
    RecordingSetup,
)
from .base import SceneGenerator, last_match

# (genres, moods, (min bpm, max bpm, description)); later matches override
MUSIC_RULES = [
    (['dramatic', 'intense'], (
        ["Orchestral", "Cinematic", "Drama"],
        ["Dramatic", "Intense", "Building"],
        (100, 140, "Building tempo"),
    )),
    (['peaceful', 'calm'], (
        ["Ambient", "New Age", "Minimal"],
        ["Peaceful", "Calm", "Meditative"],
        (60, 90, "Slow, peaceful tempo"),
    )),
    (['energetic', 'action'], (
        ["Electronic", "Rock", "Upbeat"],
        ["Energetic", "Driving", "Motivational"],
        (120, 160, "Fast, driving tempo"),
    )),
]
DEFAULT_MUSIC = (
    ["Ambient", "Cinematic"],
    ["Neutral", "Supportive"],
    (80, 120, "Moderate tempo"),
)

# (keywords, name, description, timing, volume, source)
SOUND_EFFECTS = [
    (['door'], "Door Open/Close", "Door opening and closing sound", "As needed during scene", 0.7, "Foley recording"),
    (['car', 'vehicle'], "Vehicle Sounds", "Engine, doors, movement", "Throughout vehicle scenes", 0.6, "Field recording"),
    (['phone', 'call'], "Phone Ring/Notification", "Phone ringing or notification sound", "Specific moments", 0.8,
     "Sound library"),
    (['footsteps', 'walking'], "Footsteps", "Character movement sounds", "During movement", 0.5, "Foley recording"),
]

# (keywords, environment, description, volume)
AMBIENCE = [
    (['office', 'indoor'], "Indoor Office", "Subtle HVAC, distant office sounds", 0.2),
    (['outdoor', 'street', 'city'], "Urban Outdoor", "Traffic, city sounds, wind", 0.3),
    (['nature', 'park', 'forest'], "Natural Environment", "Birds, wind, natural sounds", 0.25),
    (['restaurant', 'cafe'], "Restaurant/Cafe", "Distant conversation, kitchen sounds, ambience", 0.3),
]

ACOUSTIC_TREATMENT = [
    (['echo', 'reverb', 'large'], ["Sound blankets for reflection control", "Portable acoustic panels"]),
    (['noisy', 'traffic', 'busy'], ["Noise isolation techniques", "Directional microphone positioning"]),
    (['outdoor', 'wind'], ["Windscreens and dead cats", "Wind protection setup"]),
]

BACKUP_PLANS = [
    "Multiple microphone sources for redundancy",
    "Backup audio recorder with safety track",
    "ADR session planning if needed",
]
CHALLENGING_BACKUP_PLANS = [
    "Indoor backup location for audio recording",
    "Post-production audio enhancement planning",
]

RECORDING_EQUIPMENT = ["Audio Recorder", "Boom Microphone", "Wireless Lavalier", "Headphones"]


def instrumentation_for(genres: List[str]) -> List[str]:
    if "Orchestral" in genres:
        return ["Strings", "Brass", "Woodwinds", "Percussion", "Piano"]
    if "Electronic" in genres:
        return ["Synthesizers", "Electronic Drums", "Bass", "Pads"]
    if "Ambient" in genres:
        return ["Pads", "Strings", "Piano", "Subtle Percussion"]
    return ["Piano", "Strings", "Light Percussion"]


def music_references(genres: List[str], moods: List[str]) -> List[str]:
    references = []
    if "Orchestral" in genres and "Dramatic" in moods:
        references.extend(["Hans Zimmer - Inception", "Thomas Newman - American Beauty"])
    if "Ambient" in genres:
        references.extend(["Brian Eno - Music for Airports", "Max Richter - Sleep"])
    if "Electronic" in genres and "Energetic" in moods:
        references.extend(["Daft Punk - Tron Legacy", "Junkie XL - Mad Max"])
    return references


def music_selection(words: str) -> MusicSelection:
    genres, moods, (low, high, tempo_description) = last_match(words, MUSIC_RULES, DEFAULT_MUSIC)
    return MusicSelection(
        genre=list(genres),
        mood=list(moods),
        tempo=TempoRange(min=low, max=high, description=tempo_description),
        instrumentation=instrumentation_for(genres),
        references=music_references(genres, moods),
        licensing=LicensingInfo(
            type="royalty-free",
            cost=50,
            restrictions=["Attribution required", "Commercial use allowed"],
        ),
    )


def sound_effects(words: str, ids) -> List[SoundEffect]:
    return [
        SoundEffect(id=ids("sfx"), name=name, description=description, timing=timing, volume=volume, source=source)
        for keywords, name, description, timing, volume, source in SOUND_EFFECTS
        if any(k in words for k in keywords)
    ]


def ambience_tracks(words: str, ids) -> List[AmbienceTrack]:
    return [
        AmbienceTrack(
            id=ids("ambience"),
            environment=environment,
            description=description,
            volume=volume,
            duration="Full scene",
        )
        for keywords, environment, description, volume in AMBIENCE
        if any(k in words for k in keywords)
    ]


def microphone_setup(words: str) -> List[MicrophoneSetup]:
    mics = []

    if 'interview' in words or 'conversation' in words:
        mics.append(MicrophoneSetup(
            type=MicType.LAVALIER,
            placement="On subject, hidden",
            purpose="Primary dialogue capture",
            equipment="Wireless Lavalier System",
        ))
        mics.append(MicrophoneSetup(
            type=MicType.BOOM,
            placement="Overhead, out of frame",
            purpose="Backup and room tone",
            equipment="Shotgun Microphone on Boom Pole",
        ))

    if 'moving' in words or 'walking' in words:
        mics.append(MicrophoneSetup(
            type=MicType.WIRELESS,
            placement="On subject",
            purpose="Mobile dialogue capture",
            equipment="Wireless Transmitter/Receiver",
        ))

    return mics


def dialogue_considerations(words: str) -> DialogueConsiderations:
    treatment = []
    for keywords, steps in ACOUSTIC_TREATMENT:
        if any(k in words for k in keywords):
            treatment.extend(steps)

    backup_plans = list(BACKUP_PLANS)
    if 'outdoor' in words or 'challenging' in words:
        backup_plans.extend(CHALLENGING_BACKUP_PLANS)

    return DialogueConsiderations(
        recording_quality="adr" if 'noisy' in words or 'challenging' in words else "sync",
        microphone_setup=microphone_setup(words),
        acoustic_treatment=treatment,
        backup_plans=backup_plans,
    )


def recording_setup() -> RecordingSetup:
    return RecordingSetup(
        format=AudioFormat(container="WAV", codec="PCM", quality="Uncompressed"),
        sample_rate=48000,
        bit_depth=24,
        channels=2,
        equipment=list(RECORDING_EQUIPMENT),
    )


class AudioDesignGenerator(SceneGenerator):
    """Plan music, effects, ambience and dialogue capture"""

    def __init__(self, *args, **kwargs):
        super().__init__("audio", *args, **kwargs)

    def generate(self, description: str) -> AudioDesign:
        words = description.lower()
        return AudioDesign(
            music=music_selection(words),
            sound_effects=sound_effects(words, self.ids),
            ambience=ambience_tracks(words, self.ids),
            dialogue=dialogue_considerations(words),
            recording=recording_setup(),
        )
