"""Visual Composition Generator - mood, palette, style, framing, movement and depth"""

from typing import Dict, List

from storyscope.models import VisualMood, CinematographyStyle, VisualComposition
from storyscope.models.visual import (
    ColorPalette,
    VisualStyle,
    FramingGuide,
    CameraMovement,
    CompositionRule,
    MovementType,
    FocusStrategy,
    DepthLayer,
    DepthStrategy,
)
from .base import SceneGenerator, last_match

MOOD_RULES = [
    (['dramatic', 'intense'], VisualMood.DRAMATIC),
    (['intimate', 'close', 'personal'], VisualMood.INTIMATE),
    (['energetic', 'dynamic', 'action'], VisualMood.ENERGETIC),
    (['mysterious', 'dark', 'shadow'], VisualMood.MYSTERIOUS),
    (['romantic', 'love', 'tender'], VisualMood.ROMANTIC),
]

CINEMATOGRAPHY_RULES = [
    (['cinematic', 'film'], CinematographyStyle.CINEMATIC),
    (['handheld', 'raw', 'gritty'], CinematographyStyle.HANDHELD),
    (['static', 'formal'], CinematographyStyle.STATIC),
    (['dynamic', 'movement'], CinematographyStyle.DYNAMIC),
]

MOOD_PALETTES: Dict[VisualMood, Dict[str, str]] = {
    VisualMood.DRAMATIC: dict(
        primary='#1a1a1a', secondary='#8b0000', accent='#ffd700', background='#2c2c2c',
        temperature='cool', saturation='high', contrast='high',
    ),
    VisualMood.INTIMATE: dict(
        primary='#8b4513', secondary='#daa520', accent='#fff8dc', background='#2f1b14',
        temperature='warm', saturation='medium', contrast='medium',
    ),
    VisualMood.ENERGETIC: dict(
        primary='#ff4500', secondary='#ffa500', accent='#ffff00', background='#ffffff',
        temperature='warm', saturation='high', contrast='high',
    ),
    VisualMood.PEACEFUL: dict(
        primary='#4682b4', secondary='#87ceeb', accent='#f0f8ff', background='#e6f3ff',
        temperature='cool', saturation='low', contrast='low',
    ),
    VisualMood.MYSTERIOUS: dict(
        primary='#191970', secondary='#483d8b', accent='#9370db', background='#0f0f23',
        temperature='cool', saturation='medium', contrast='high',
    ),
}

# Movement and focus rules stop at the first matching entry
MOVEMENT_RULES = [
    (['follow', 'track', 'walking'], MovementType.TRACK),
    (['reveal', 'pan', 'sweep'], MovementType.PAN),
    (['approach', 'closer', 'dolly'], MovementType.DOLLY),
    (['handheld', 'raw', 'documentary'], MovementType.HANDHELD),
    (['smooth', 'gimbal', 'flowing'], MovementType.GIMBAL),
    (['aerial', 'overhead', 'drone'], MovementType.DRONE),
]

FOCUS_RULES = [
    (['shallow', 'blur', 'intimate'], FocusStrategy.SHALLOW_FOCUS),
    (['rack', 'shift', 'change'], FocusStrategy.RACK_FOCUS),
    (['everything', 'sharp', 'documentary'], FocusStrategy.DEEP_FOCUS),
]


def color_palette(words: str, mood: VisualMood) -> ColorPalette:
    """Mood palette (peaceful when the mood has none) with warm/cool overrides"""
    palette = dict(MOOD_PALETTES.get(mood, MOOD_PALETTES[VisualMood.PEACEFUL]))

    if any(k in words for k in ['warm', 'sunset', 'golden']):
        palette.update(temperature='warm', primary='#d2691e', secondary='#daa520')
    if any(k in words for k in ['cool', 'blue', 'cold']):
        palette.update(temperature='cool', primary='#4682b4', secondary='#87ceeb')

    return ColorPalette(**palette)


def style_influences(mood: VisualMood, cinematography: CinematographyStyle) -> List[str]:
    influences = []
    if mood == VisualMood.DRAMATIC:
        influences.extend(["Film Noir", "Chiaroscuro Lighting", "German Expressionism"])
    if mood == VisualMood.INTIMATE:
        influences.extend(["Dogme 95", "Mumblecore", "Terrence Malick"])
    if cinematography == CinematographyStyle.DOCUMENTARY:
        influences.extend(["Cinema Verite", "Direct Cinema", "Observational Documentary"])
    if cinematography == CinematographyStyle.CINEMATIC:
        influences.extend(["Classical Hollywood", "European Art Cinema", "Contemporary Blockbuster"])
    return influences


def style_references(words: str) -> List[str]:
    references = []
    if 'interview' in words or 'conversation' in words:
        references.extend(["Errol Morris documentaries", "Charlie Rose interviews"])
    if 'nature' in words or 'outdoor' in words:
        references.extend(["Planet Earth series", "Terrence Malick films"])
    if 'urban' in words or 'city' in words:
        references.extend(["Michael Mann films", "Wong Kar-wai cinematography"])
    return references


def suggested_techniques(words: str) -> List[str]:
    techniques = []
    if 'dramatic' in words or 'intense' in words:
        techniques.extend(["High contrast lighting", "Dutch angles", "Close-up emphasis"])
    if 'intimate' in words or 'personal' in words:
        techniques.extend(["Shallow depth of field", "Natural lighting", "Handheld camera"])
    if 'movement' in words or 'dynamic' in words:
        techniques.extend(["Tracking shots", "Gimbal movements", "Rack focus"])
    return techniques


def composition_rules(words: str) -> List[CompositionRule]:
    if 'balanced' in words or 'formal' in words:
        rules = [CompositionRule.CENTER_COMPOSITION, CompositionRule.SYMMETRY]
    else:
        rules = [CompositionRule.RULE_OF_THIRDS]

    if any(k in words for k in ['leading', 'path', 'direction']):
        rules.append(CompositionRule.LEADING_LINES)
    if any(k in words for k in ['frame', 'window', 'door']):
        rules.append(CompositionRule.FRAME_WITHIN_FRAME)

    return rules


def subject_placement(words: str) -> str:
    if any(k in words for k in ['center', 'formal', 'direct']):
        return "Center frame for direct engagement"
    if 'side' in words or 'profile' in words:
        return "Off-center for dynamic composition"
    if 'interview' in words or 'conversation' in words:
        return "Slightly off-center, maintaining eye contact with camera"
    return "Rule of thirds placement for natural composition"


def background_treatment(words: str) -> str:
    if any(k in words for k in ['blur', 'focus', 'intimate']):
        return "Soft blur to isolate subject"
    if any(k in words for k in ['context', 'environment', 'setting']):
        return "Sharp background to show environment"
    if 'clean' in words or 'simple' in words:
        return "Minimal, uncluttered background"
    return "Balanced background that supports but doesn't distract from subject"


def foreground_elements(words: str) -> List[str]:
    elements = []
    if 'depth' in words or 'layers' in words:
        elements.append("Natural foreground elements for depth")
    if 'frame' in words or 'border' in words:
        elements.append("Architectural elements for framing")
    if 'nature' in words or 'outdoor' in words:
        elements.append("Natural elements like branches or foliage")
    return elements


def camera_movement_type(words: str) -> MovementType:
    for keywords, movement in MOVEMENT_RULES:
        if any(k in words for k in keywords):
            return movement
    return MovementType.STATIC


def movement_motivation(words: str) -> str:
    if 'follow' in words:
        return "Following subject movement"
    if 'reveal' in words:
        return "Revealing new information or space"
    if 'intimate' in words or 'close' in words:
        return "Creating intimacy and connection"
    if 'energy' in words or 'dynamic' in words:
        return "Adding energy and dynamism"
    return "Supporting narrative flow"


def movement_speed(words: str) -> str:
    if 'slow' in words or 'gentle' in words:
        return "slow"
    if 'fast' in words or 'quick' in words:
        return "fast"
    return "medium"


def depth_layers(words: str) -> List[DepthLayer]:
    layers = [DepthLayer(
        name="Subject Layer",
        distance="midground",
        elements=["Primary subject"],
        treatment="Sharp focus, well-lit",
    )]

    if any(k in words for k in ['background', 'setting', 'environment']):
        layers.append(DepthLayer(
            name="Background Layer",
            distance="background",
            elements=["Environmental context"],
            treatment="Soft focus or sharp depending on intent",
        ))

    if any(k in words for k in ['foreground', 'frame', 'depth']):
        layers.insert(0, DepthLayer(
            name="Foreground Layer",
            distance="foreground",
            elements=["Framing elements"],
            treatment="Out of focus for depth",
        ))

    return layers


def focus_strategy(words: str) -> FocusStrategy:
    for keywords, strategy in FOCUS_RULES:
        if any(k in words for k in keywords):
            return strategy
    return FocusStrategy.SELECTIVE_FOCUS


class VisualCompositionGenerator(SceneGenerator):
    """Pick the visual language of the scene from its description"""

    def __init__(self, *args, **kwargs):
        super().__init__("visual_composition", *args, **kwargs)

    def generate(self, description: str) -> VisualComposition:
        words = description.lower()
        mood = last_match(words, MOOD_RULES, VisualMood.PEACEFUL)
        cinematography = last_match(words, CINEMATOGRAPHY_RULES, CinematographyStyle.DOCUMENTARY)

        return VisualComposition(
            mood=mood,
            color_palette=color_palette(words, mood),
            style=VisualStyle(
                cinematography=cinematography,
                influences=style_influences(mood, cinematography),
                references=style_references(words),
                techniques=suggested_techniques(words),
            ),
            framing=FramingGuide(
                composition=composition_rules(words),
                subject_placement=subject_placement(words),
                background_treatment=background_treatment(words),
                foreground_elements=foreground_elements(words),
            ),
            movement=CameraMovement(
                type=camera_movement_type(words),
                motivation=movement_motivation(words),
                speed=movement_speed(words),
                smoothness="handheld" if cinematography == CinematographyStyle.HANDHELD else "smooth",
            ),
            depth=DepthStrategy(
                layers=depth_layers(words),
                focus_strategy=focus_strategy(words),
                bokeh_quality="dreamy" if mood in (VisualMood.ROMANTIC, VisualMood.INTIMATE) else "medium",
            ),
        )
