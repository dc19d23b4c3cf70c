"""Tests for the scene breakdown pipeline"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from storyscope import analyze_scene, get_scene_templates, InvalidInputError
from storyscope.analyzers.scene import (
    SceneTitleExtractor,
    LocationAnalyzer,
    VisualCompositionGenerator,
    LightingSetupGenerator,
    AudioDesignGenerator,
    ShotListGenerator,
    EquipmentListGenerator,
    ScheduleGenerator,
    WeatherGenerator,
    BudgetEstimator,
)
from storyscope.analyzers.scene.base import last_match
from storyscope.models import (
    LocationType,
    VisualMood,
    CinematographyStyle,
    LightingStyle,
    LightingMood,
    TimeOfDay,
    LightType,
    ShotSize,
    SceneCategory,
)
from storyscope.models.lighting import ContrastLevel
from storyscope.models.audio import MicType
from storyscope.models.visual import MovementType, FocusStrategy


TENSE_INTERVIEW = "A tense interview in a dark office with a lamp"


class TestScenePipeline:
    """End-to-end behaviour of analyze_scene"""

    def test_tense_interview(self, fixed_clock):
        scene = analyze_scene(TENSE_INTERVIEW, clock=fixed_clock)

        assert scene.lighting.mood in (LightingMood.MOODY, LightingMood.MYSTERIOUS)
        assert LightType.PRACTICAL in [source.type for source in scene.lighting.sources]
        assert len(scene.shot_list) >= 3
        assert [shot.number for shot in scene.shot_list] == ["1A", "2A", "3A"]
        assert scene.title == TENSE_INTERVIEW
        assert scene.location.name == "Corporate Office"

    def test_empty_description_defaults(self, fixed_clock):
        scene = analyze_scene("", clock=fixed_clock)

        assert scene.title == "Scene"
        assert scene.location.type == LocationType.INDOOR_PRACTICAL
        assert scene.visual_composition.mood == VisualMood.PEACEFUL
        assert scene.visual_composition.style.cinematography == CinematographyStyle.DOCUMENTARY
        assert scene.visual_composition.movement.type == MovementType.STATIC
        assert scene.visual_composition.depth.focus_strategy == FocusStrategy.SELECTIVE_FOCUS
        assert scene.lighting.style == LightingStyle.NATURAL
        assert scene.lighting.mood == LightingMood.BRIGHT
        assert scene.lighting.time_of_day == TimeOfDay.ARTIFICIAL
        assert scene.audio.dialogue.recording_quality == "sync"
        assert [shot.number for shot in scene.shot_list] == ["1A", "3A"]

    def test_budget_identity(self):
        for description in ("", TENSE_INTERVIEW, "An outdoor chase through a busy street at sunset"):
            budget = analyze_scene(description).budget
            subtotal = sum(category.subtotal for category in budget.breakdown)

            assert budget.total == pytest.approx(subtotal * 1.1)
            assert budget.contingency == pytest.approx(subtotal * 0.1)
            assert budget.currency == "USD"

    def test_dates_follow_clock(self, fixed_clock):
        scene = analyze_scene(TENSE_INTERVIEW, clock=fixed_clock)

        assert scene.created_at == fixed_clock()
        assert scene.updated_at == fixed_clock()
        assert scene.schedule.shoot_date == fixed_clock() + timedelta(days=7)
        assert scene.weather.forecast.date == fixed_clock() + timedelta(days=7)

    def test_one_clock_reading_per_scene(self):
        """Every date in a scene derives from the same instant"""
        start = datetime(2024, 3, 1, 12, tzinfo=timezone.utc)
        ticks = count()

        scene = analyze_scene(TENSE_INTERVIEW, clock=lambda: start + timedelta(seconds=next(ticks)))

        assert scene.created_at == start
        assert scene.updated_at == start
        assert scene.schedule.shoot_date == scene.created_at + timedelta(days=7)
        assert scene.weather.forecast.date == scene.created_at + timedelta(days=7)
        assert next(ticks) == 1

    def test_deterministic(self, fixed_clock):
        first = analyze_scene(TENSE_INTERVIEW, clock=fixed_clock)
        second = analyze_scene(TENSE_INTERVIEW, clock=fixed_clock)

        assert first.model_dump_json() == second.model_dump_json()

    def test_parallel_matches_sequential(self, fixed_clock):
        description = "Characters walking through a park, then a phone call by the door"
        sequential = analyze_scene(description, clock=fixed_clock)
        parallel = analyze_scene(description, clock=fixed_clock, parallel=True)

        assert sequential.model_dump_json() == parallel.model_dump_json()

    def test_none_rejected(self):
        with pytest.raises(InvalidInputError):
            analyze_scene(None)


def test_last_match_prefers_later_rules():
    rules = [(['a'], 'first'), (['b'], 'second')]

    assert last_match("a b", rules, 'default') == 'second'
    assert last_match("a", rules, 'default') == 'first'
    assert last_match("c", rules, 'default') == 'default'


def test_title_from_action_and_location(ids):
    extractor = SceneTitleExtractor(ids=ids)
    description = (
        "Two colleagues sit across a desk for an interview in the corner office of a tall tower downtown"
    )

    assert extractor.generate(description) == "Interview at office"


def test_outdoor_location_needs_permits(ids):
    location = LocationAnalyzer(ids=ids).generate("A busy street market outside the station")

    assert location.type == LocationType.OUTDOOR_URBAN
    assert location.permits.required
    assert location.permits.cost == 200
    assert location.permits.type == ["filming permit", "location permit"]
    assert "Crowd control" in location.scouting.challenges
    assert location.alternatives[0].name == "Indoor Studio with Urban Backdrop"


def test_later_location_rule_wins(ids):
    location = LocationAnalyzer(ids=ids).generate("Driving a car through the park")
    assert location.type == LocationType.VEHICLE


def test_visual_palette_overrides(ids):
    visual = VisualCompositionGenerator(ids=ids).generate("A romantic walk at sunset")

    assert visual.mood == VisualMood.ROMANTIC
    assert visual.color_palette.temperature == "warm"
    assert visual.color_palette.primary == "#d2691e"
    assert visual.depth.bokeh_quality == "dreamy"


def test_dramatic_lighting(ids):
    lighting = LightingSetupGenerator(ids=ids).generate("A dramatic confrontation at golden hour")

    assert lighting.style == LightingStyle.DRAMATIC
    assert lighting.contrast == ContrastLevel.HIGH
    assert lighting.color_temperature.kelvin == 3200
    assert not lighting.color_temperature.mixing
    assert [source.type for source in lighting.sources] == [LightType.KEY, LightType.BACK]
    assert lighting.sources[0].intensity == 0.8
    assert [source.id for source in lighting.sources] == ["light-1", "light-2"]


def test_audio_design(ids):
    audio = AudioDesignGenerator(ids=ids).generate(
        "An energetic conversation while walking down a noisy outdoor street"
    )

    assert audio.music.genre == ["Electronic", "Rock", "Upbeat"]
    assert audio.music.tempo.min == 120
    assert audio.music.references == ["Daft Punk - Tron Legacy", "Junkie XL - Mad Max"]
    # "outdoor" contains "door"
    assert [effect.name for effect in audio.sound_effects] == ["Door Open/Close", "Footsteps"]
    assert [track.environment for track in audio.ambience] == ["Urban Outdoor"]
    assert audio.dialogue.recording_quality == "adr"
    assert [mic.type for mic in audio.dialogue.microphone_setup] == [
        MicType.LAVALIER, MicType.BOOM, MicType.WIRELESS
    ]
    assert "Indoor backup location for audio recording" in audio.dialogue.backup_plans
    assert audio.recording.sample_rate == 48000


def test_tracking_shot(ids):
    shots = ShotListGenerator(ids=ids).generate("A person walking to work")

    assert [shot.number for shot in shots] == ["1A", "2A", "3A", "4A"]
    assert shots[-1].shot_size == ShotSize.MEDIUM_WIDE
    assert shots[-1].movement.type == MovementType.TRACK
    assert [shot.id for shot in shots] == ["shot-1", "shot-2", "shot-3", "shot-4"]


def test_equipment_extras(ids):
    equipment = EquipmentListGenerator(ids=ids).generate("A wide outdoor dolly move for the interview")

    assert [lens.focal_length for lens in equipment.lenses] == ["24-70mm", "85mm", "16-35mm"]
    assert [light.type for light in equipment.lighting] == ["LED Panel", "Softbox", "HMI"]
    assert equipment.audio[-1].type == "Handheld Microphone"
    assert [support.type for support in equipment.support] == ["Tripod", "Dolly"]
    assert len(equipment.storage) == 3


def test_schedule(ids, fixed_clock):
    schedule = ScheduleGenerator(ids=ids, clock=fixed_clock).generate("A large complex shoot")

    assert len(schedule.timeline) == 7
    assert schedule.timeline[0].crew == ["All crew"]
    assert schedule.timeline[3].equipment == []
    assert [member.role for member in schedule.crew][-2:] == ["Assistant Camera", "Grip"]
    assert schedule.logistics.permits[0].status == "pending"


def test_indoor_weather_plan(ids, fixed_clock):
    weather = WeatherGenerator(ids=ids, clock=fixed_clock).generate("A quiet kitchen")

    assert [c.condition for c in weather.contingencies] == ["Extreme temperature"]
    assert len(weather.equipment) == 2
    assert weather.alternatives[0].location is None


def test_budget_breakdown(ids):
    budget = BudgetEstimator(ids=ids).generate("")

    assert [category.subtotal for category in budget.breakdown] == [1900, 1200, 850, 150]
    assert budget.total == pytest.approx(4510)


def test_scene_templates():
    templates = get_scene_templates()

    assert [t.id for t in templates] == ["interview", "documentary", "dramatic"]
    assert templates[0].category == SceneCategory.INTERVIEW
    assert templates[2].category == SceneCategory.INTIMATE
    assert templates[2].default_settings.lighting_mood == LightingMood.MOODY
