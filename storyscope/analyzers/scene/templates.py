"""Built-in scene templates"""

from typing import List

from storyscope.models import (
    VisualMood,
    CinematographyStyle,
    LightingStyle,
    LightingMood,
    SceneCategory,
    SceneTemplate,
    SceneTemplateSettings,
)

SCENE_TEMPLATES = [
    SceneTemplate(
        id="interview",
        name="Interview Setup",
        description="Standard interview configuration with proper lighting and audio",
        category=SceneCategory.INTERVIEW,
        default_settings=SceneTemplateSettings(
            visual_mood=VisualMood.INTIMATE,
            cinematography=CinematographyStyle.DOCUMENTARY,
            lighting_style=LightingStyle.SOFT,
            lighting_mood=LightingMood.BRIGHT,
        ),
    ),
    SceneTemplate(
        id="documentary",
        name="Documentary Scene",
        description="Observational documentary style with natural lighting",
        category=SceneCategory.DOCUMENTARY,
        default_settings=SceneTemplateSettings(
            visual_mood=VisualMood.PEACEFUL,
            cinematography=CinematographyStyle.DOCUMENTARY,
            lighting_style=LightingStyle.NATURAL,
            lighting_mood=LightingMood.BRIGHT,
        ),
    ),
    SceneTemplate(
        id="dramatic",
        name="Dramatic Scene",
        description="High-contrast dramatic setup with cinematic lighting",
        category=SceneCategory.INTIMATE,
        default_settings=SceneTemplateSettings(
            visual_mood=VisualMood.DRAMATIC,
            cinematography=CinematographyStyle.CINEMATIC,
            lighting_style=LightingStyle.DRAMATIC,
            lighting_mood=LightingMood.MOODY,
        ),
    ),
]


def get_scene_templates() -> List[SceneTemplate]:
    """Return the built-in templates (records are frozen, the list is a copy)"""
    return list(SCENE_TEMPLATES)
