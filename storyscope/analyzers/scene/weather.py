"""Weather Generator - placeholder forecast plus contingency planning"""

from typing import List

from storyscope.models import WeatherConsiderations
from storyscope.models.logistics import (
    TemperatureRange,
    WindInfo,
    WeatherForecast,
    WeatherContingency,
    WeatherEquipment,
    WeatherAlternative,
)
from .base import SceneGenerator
from .schedule import SHOOT_LEAD_TIME


def contingencies(outdoor: bool) -> List[WeatherContingency]:
    plans = []
    if outdoor:
        plans.append(WeatherContingency(
            condition="Rain",
            plan="Move to covered location or reschedule",
            equipment=["Umbrellas", "Rain covers", "Tarps"],
            timeline="Monitor 24h before shoot",
        ))
        plans.append(WeatherContingency(
            condition="High winds",
            plan="Secure equipment, adjust shots",
            equipment=["Sandbags", "Wind screens", "Tie-downs"],
            timeline="Real-time adjustment",
        ))
    plans.append(WeatherContingency(
        condition="Extreme temperature",
        plan="Crew comfort measures, equipment protection",
        equipment=["Heating/cooling", "Equipment covers"],
        timeline="Ongoing monitoring",
    ))
    return plans


def weather_equipment(outdoor: bool) -> List[WeatherEquipment]:
    equipment = [
        WeatherEquipment(item="Rain covers", purpose="Equipment protection", quantity=5),
        WeatherEquipment(item="Umbrellas", purpose="Crew protection", quantity=6),
    ]
    if outdoor:
        equipment.extend([
            WeatherEquipment(item="Sandbags", purpose="Equipment stability", quantity=10),
            WeatherEquipment(item="Tarps", purpose="Area protection", quantity=3),
            WeatherEquipment(item="Wind screens", purpose="Audio protection", quantity=2),
        ])
    return equipment


def alternatives(outdoor: bool) -> List[WeatherAlternative]:
    options = []
    if outdoor:
        options.append(WeatherAlternative(
            scenario="Severe weather",
            location="Indoor backup location",
            schedule="Reschedule to next available day",
            impact="Minimal with proper planning",
        ))
    options.append(WeatherAlternative(
        scenario="Minor weather issues",
        schedule="Adjust shooting order",
        impact="Continue with modifications",
    ))
    return options


class WeatherGenerator(SceneGenerator):
    """
    Weather plan for the shoot date.

    There is no forecast service behind this; the forecast is a fixed
    mild-weather placeholder dated on the shoot day so the contingency
    plans have something to refer to.
    """

    def __init__(self, *args, **kwargs):
        super().__init__("weather", *args, **kwargs)

    def generate(self, description: str) -> WeatherConsiderations:
        outdoor = 'outdoor' in description.lower()

        return WeatherConsiderations(
            forecast=WeatherForecast(
                date=self.clock() + SHOOT_LEAD_TIME,
                temperature=TemperatureRange(high=22, low=15, unit="celsius"),
                conditions="Partly cloudy",
                precipitation=20,
                wind=WindInfo(speed=15, direction="SW", gusts=25),
                visibility="Good",
                sunrise="06:30",
                sunset="19:45",
            ),
            contingencies=contingencies(outdoor),
            equipment=weather_equipment(outdoor),
            alternatives=alternatives(outdoor),
        )
