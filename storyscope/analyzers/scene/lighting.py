"""Lighting Setup Generator - style, mood, time of day, sources and modifiers"""

from typing import List

from storyscope.models import LightingStyle, LightingMood, TimeOfDay, LightType, LightingSetup
from storyscope.models.lighting import (
    LightSource,
    LightModifier,
    LightPurpose,
    ModifierType,
    ColorTemperature,
    ContrastLevel,
)
from .base import SceneGenerator, last_match

STYLE_RULES = [
    (['dramatic', 'contrast'], LightingStyle.DRAMATIC),
    (['soft', 'gentle'], LightingStyle.SOFT),
    (['hard', 'sharp'], LightingStyle.HARD),
    (['practical', 'lamp', 'window'], LightingStyle.PRACTICAL),
]

MOOD_RULES = [
    (['moody', 'dark'], LightingMood.MOODY),
    (['romantic', 'warm'], LightingMood.ROMANTIC),
    (['mysterious', 'shadow'], LightingMood.MYSTERIOUS),
    (['energetic', 'vibrant'], LightingMood.ENERGETIC),
]

TIME_OF_DAY_RULES = [
    (['golden', 'sunset'], TimeOfDay.GOLDEN_HOUR),
    (['blue', 'dusk'], TimeOfDay.BLUE_HOUR),
    (['midday', 'noon'], TimeOfDay.MIDDAY),
    (['night', 'evening'], TimeOfDay.NIGHT),
    (['dawn', 'morning'], TimeOfDay.DAWN),
]

TUNGSTEN_KELVIN = 3200
DAYLIGHT_KELVIN = 5600


def light_sources(words: str, style: LightingStyle, ids) -> List[LightSource]:
    """Key and back light always; fill unless dramatic; practical when motivated"""
    sources = [LightSource(
        id=ids("light"),
        type=LightType.KEY,
        position="Camera left, 45 degrees",
        intensity=0.8 if style == LightingStyle.DRAMATIC else 0.6,
        color="#ffffff",
        purpose=LightPurpose.SUBJECT_ILLUMINATION,
        equipment="LED Panel 1x1 or Tungsten Fresnel",
    )]

    if style != LightingStyle.DRAMATIC:
        sources.append(LightSource(
            id=ids("light"),
            type=LightType.FILL,
            position="Camera right, lower intensity",
            intensity=0.3,
            color="#f0f8ff",
            purpose=LightPurpose.SUBJECT_ILLUMINATION,
            equipment="Softbox or Bounce Card",
        ))

    sources.append(LightSource(
        id=ids("light"),
        type=LightType.BACK,
        position="Behind subject, elevated",
        intensity=0.5,
        color="#ffffff",
        purpose=LightPurpose.BACKGROUND_SEPARATION,
        equipment="LED Panel or Hair Light",
    ))

    if any(k in words for k in ['lamp', 'window', 'practical']):
        sources.append(LightSource(
            id=ids("light"),
            type=LightType.PRACTICAL,
            position="In scene as motivated source",
            intensity=0.4,
            color="#ffa500",
            purpose=LightPurpose.MOOD_CREATION,
            equipment="Practical lamp or window light",
        ))

    return sources


def light_modifiers(style: LightingStyle, mood: LightingMood) -> List[LightModifier]:
    modifiers = []

    if style == LightingStyle.SOFT or mood == LightingMood.ROMANTIC:
        modifiers.append(LightModifier(type=ModifierType.SOFTBOX, size="2x3 feet", effect="Soft, even illumination"))
        modifiers.append(LightModifier(type=ModifierType.DIFFUSION, size="4x4 feet", effect="Overall softening"))

    if style == LightingStyle.DRAMATIC:
        modifiers.append(LightModifier(type=ModifierType.BARN_DOORS, size="Standard", effect="Precise light control"))
        modifiers.append(LightModifier(type=ModifierType.FLAG, size="2x3 feet", effect="Shadow creation"))

    if mood == LightingMood.ENERGETIC:
        modifiers.append(LightModifier(type=ModifierType.GEL, size="Full CTO/CTB", effect="Color temperature adjustment"))

    return modifiers


def color_temperature(time_of_day: TimeOfDay) -> ColorTemperature:
    golden = time_of_day == TimeOfDay.GOLDEN_HOUR
    return ColorTemperature(
        kelvin=TUNGSTEN_KELVIN if golden else DAYLIGHT_KELVIN,
        description="Warm tungsten" if golden else "Daylight balanced",
        mixing=time_of_day == TimeOfDay.ARTIFICIAL,
    )


def contrast_for(style: LightingStyle) -> ContrastLevel:
    if style == LightingStyle.DRAMATIC:
        return ContrastLevel.HIGH
    if style == LightingStyle.SOFT:
        return ContrastLevel.LOW
    return ContrastLevel.MEDIUM


class LightingSetupGenerator(SceneGenerator):
    """Plan the lighting for the scene"""

    def __init__(self, *args, **kwargs):
        super().__init__("lighting", *args, **kwargs)

    def generate(self, description: str) -> LightingSetup:
        words = description.lower()
        style = last_match(words, STYLE_RULES, LightingStyle.NATURAL)
        mood = last_match(words, MOOD_RULES, LightingMood.BRIGHT)
        time_of_day = last_match(words, TIME_OF_DAY_RULES, TimeOfDay.ARTIFICIAL)

        return LightingSetup(
            style=style,
            mood=mood,
            time_of_day=time_of_day,
            sources=light_sources(words, style, self.ids),
            modifiers=light_modifiers(style, mood),
            color_temperature=color_temperature(time_of_day),
            contrast=contrast_for(style),
        )
