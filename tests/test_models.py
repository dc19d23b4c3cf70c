"""Tests for Pydantic models"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from storyscope.models import (
    Priority,
    StructureType,
    Act,
    PlotPointType,
    PlotPoint,
    CharacterDevelopment,
    CharacterAnalysis,
    CharacterRole,
    CharacterArc,
    LocationType,
    LightType,
    ShotSize,
)
from storyscope.models.lighting import LightSource, LightPurpose
from storyscope.models.logistics import (
    ProductionSchedule,
    LogisticsInfo,
    TransportationPlan,
    CateringPlan,
    InsuranceInfo,
    WeatherForecast,
    TemperatureRange,
    WindInfo,
)


def test_act_defaults():
    """Test Act model"""
    act = Act(
        id="act-1",
        name="Act I - Setup",
        start_position=0,
        end_position=3,
        purpose="Introduce characters",
        strength=0.5
    )

    assert act.content == ""
    assert act.issues == []
    assert act.suggestions == []


def test_records_are_frozen():
    """Records cannot be mutated after construction"""
    act = Act(id="act-1", name="Act", start_position=0, end_position=1, purpose="p", strength=0.3)

    with pytest.raises(ValidationError):
        act.strength = 0.9


def test_strength_bounds():
    """Scores outside [0, 1] are rejected"""
    with pytest.raises(ValidationError):
        Act(id="act-1", name="Act", start_position=0, end_position=1, purpose="p", strength=1.5)

    with pytest.raises(ValidationError):
        PlotPoint(
            id="plot-point-1",
            name="Midpoint",
            type=PlotPointType.MIDPOINT,
            position=0.5,
            description="",
            strength=-0.1,
            present=False
        )


def test_priority_rank():
    """Test Priority ordering"""
    ranks = [p.rank for p in (Priority.LOW, Priority.MEDIUM, Priority.HIGH, Priority.CRITICAL)]
    assert ranks == [1, 2, 3, 4]


def test_enum_wire_values():
    """Enums serialize to their hyphenated values"""
    assert StructureType.HERO_JOURNEY.value == "hero-journey"
    assert CharacterArc.POSITIVE_CHANGE.value == "positive-change"
    assert LocationType.INDOOR_PRACTICAL.value == "indoor-practical"
    assert ShotSize.MEDIUM_WIDE.value == "medium-wide"


def test_location_type_flags():
    """Test indoor/outdoor classification"""
    assert LocationType.INDOOR_STUDIO.is_indoor
    assert LocationType.OUTDOOR_NATURE.is_outdoor
    assert not LocationType.VEHICLE.is_indoor
    assert not LocationType.VEHICLE.is_outdoor


def test_character_analysis_dump():
    """Test CharacterAnalysis model"""
    character = CharacterAnalysis(
        id="character-1",
        name="Jane Doe",
        role=CharacterRole.PROTAGONIST,
        development=CharacterDevelopment(change_strength=0.2),
        screen_time=0.75,
        importance=1.0
    )

    data = character.model_dump(mode="json")
    assert data["role"] == "protagonist"
    assert data["arc_type"] == "flat-arc"
    assert data["development"]["start_state"] == "neutral"
    assert data["relationships"] == []


def test_light_source_intensity_bounds():
    """Test LightSource validation"""
    with pytest.raises(ValidationError):
        LightSource(
            id="light-1",
            type=LightType.KEY,
            position="Camera left",
            intensity=1.2,
            color="#ffffff",
            purpose=LightPurpose.SUBJECT_ILLUMINATION,
            equipment="LED Panel"
        )


def test_datetime_serialization():
    """Dates serialize to ISO format"""
    shoot_date = datetime(2024, 3, 8, 12, 0, tzinfo=timezone.utc)
    schedule = ProductionSchedule(
        shoot_date=shoot_date,
        logistics=LogisticsInfo(
            transportation=TransportationPlan(crew="Van", equipment="Truck", parking="On-site", costs=0),
            catering=CateringPlan(cost=0),
            insurance=InsuranceInfo(cost=0, provider="Insurer", valid_dates="Shoot date"),
        )
    )

    data = schedule.model_dump()
    assert data["shoot_date"] == "2024-03-08T12:00:00+00:00"
    assert data["call_time"] == "08:00"
    assert data["wrap_time"] == "18:00"


def test_forecast_precipitation_bounds():
    """Test WeatherForecast validation"""
    with pytest.raises(ValidationError):
        WeatherForecast(
            date=datetime(2024, 3, 8, tzinfo=timezone.utc),
            temperature=TemperatureRange(high=20, low=10),
            conditions="Rain",
            precipitation=120,
            wind=WindInfo(speed=5, direction="N", gusts=10),
            visibility="Poor",
            sunrise="06:00",
            sunset="20:00"
        )


def test_development_list_limits():
    """At most three motivations and two weaknesses"""
    with pytest.raises(ValidationError):
        CharacterDevelopment(change_strength=0.3, weaknesses=["weak", "unable", "failed"])

    with pytest.raises(ValidationError):
        CharacterDevelopment(change_strength=0.3, motivations=["a", "b", "c", "d"])

    development = CharacterDevelopment(change_strength=0.3, weaknesses=["weak", "unable"])
    assert development.weaknesses == ["weak", "unable"]


def test_structure_types():
    """Only the structures the classifier detects are part of the wire format"""
    assert [t.value for t in StructureType] == ["three-act", "hero-journey", "save-the-cat"]
