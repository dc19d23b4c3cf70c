"""Location Analyzer - location type, access, permits and scouting notes"""

from typing import List

from storyscope.models import LocationType, LocationDetails
from storyscope.models.location import (
    AccessibilityInfo,
    PermitRequirements,
    AlternativeLocation,
    ScoutingNotes,
)
from .base import SceneGenerator, last_match

LOCATION_TYPE_RULES = [
    (['outdoor', 'outside', 'park', 'street'], LocationType.OUTDOOR_URBAN),
    (['nature', 'forest', 'beach', 'mountain'], LocationType.OUTDOOR_NATURE),
    (['studio', 'controlled'], LocationType.INDOOR_STUDIO),
    (['car', 'vehicle', 'driving'], LocationType.VEHICLE),
]

# First keyword found names the location
LOCATION_NAMES = [
    ('office', "Corporate Office"),
    ('park', "City Park"),
    ('home', "Residential Home"),
    ('restaurant', "Restaurant"),
    ('cafe', "Coffee Shop"),
    ('street', "Urban Street"),
    ('beach', "Beach Location"),
    ('forest', "Forest Location"),
    ('studio', "Production Studio"),
    ('car', "Vehicle Interior"),
]

BEST_TIMES = [
    (['golden', 'sunset', 'warm'], "Golden Hour (1 hour before sunset)"),
    (['morning', 'fresh', 'dawn'], "Early Morning (7-9 AM)"),
    (['dramatic', 'moody'], "Blue Hour (30 min after sunset)"),
    (['bright', 'energetic'], "Midday (11 AM - 2 PM)"),
]
DEFAULT_BEST_TIMES = ["Golden Hour (1 hour before sunset)", "Early Morning (7-9 AM)"]

OUTDOOR_PERMITS = ["filming permit", "location permit"]
OUTDOOR_PERMIT_COST = 200


def location_name(words: str) -> str:
    return next((name for keyword, name in LOCATION_NAMES if keyword in words), "Location")


def alternatives_for(location_type: LocationType) -> List[AlternativeLocation]:
    if location_type == LocationType.OUTDOOR_URBAN:
        return [AlternativeLocation(
            name="Indoor Studio with Urban Backdrop",
            reason="Weather contingency",
            pros=["Controlled environment", "Consistent lighting", "No permits needed"],
            cons=["Less authentic", "Higher cost", "Limited space"],
        )]
    if location_type == LocationType.INDOOR_PRACTICAL:
        return [AlternativeLocation(
            name="Similar Indoor Location",
            reason="Backup option",
            pros=["Similar aesthetic", "Controlled environment"],
            cons=["May require additional permits", "Different acoustics"],
        )]
    return []


def best_times(words: str) -> List[str]:
    times = [label for keywords, label in BEST_TIMES if any(k in words for k in keywords)]
    return times or list(DEFAULT_BEST_TIMES)


def challenges_for(words: str, location_type: LocationType) -> List[str]:
    challenges = []

    if location_type.is_outdoor:
        challenges.extend(["Weather dependency", "Natural lighting changes"])
        if 'public' in words or 'busy' in words:
            challenges.extend(["Crowd control", "Background noise"])

    if location_type == LocationType.VEHICLE:
        challenges.extend(["Limited space for equipment", "Vibration and movement", "Power limitations"])

    if 'echo' in words or 'large' in words:
        challenges.append("Audio reverberation")

    return challenges


def opportunities_for(words: str, location_type: LocationType) -> List[str]:
    opportunities = []

    if 'natural' in words or 'authentic' in words:
        opportunities.append("Natural, authentic environment")
    if 'beautiful' in words or 'scenic' in words:
        opportunities.append("Visually striking background")
    if location_type.is_indoor:
        opportunities.extend(["Controlled lighting conditions", "Consistent audio environment"])

    return opportunities


class LocationAnalyzer(SceneGenerator):
    """Classify the location and derive access, permits and scouting notes"""

    def __init__(self, *args, **kwargs):
        super().__init__("location", *args, **kwargs)

    def generate(self, description: str) -> LocationDetails:
        words = description.lower()
        location_type = last_match(words, LOCATION_TYPE_RULES, LocationType.INDOOR_PRACTICAL)
        indoor = location_type.is_indoor
        outdoor = location_type.is_outdoor

        return LocationDetails(
            type=location_type,
            name=location_name(words),
            accessibility=AccessibilityInfo(
                vehicle_access='remote' not in words and 'hiking' not in words,
                loading_access=indoor or 'accessible' in words,
                power_available=indoor or 'power' in words,
                restrooms=indoor or 'facilities' in words,
                parking='downtown' not in words and 'busy' not in words,
                public_transport='city' in words or 'urban' in words,
                wheelchair_accessible=indoor or 'accessible' in words,
            ),
            permits=PermitRequirements(
                required=outdoor or 'public' in words,
                type=list(OUTDOOR_PERMITS) if outdoor else [],
                cost=OUTDOOR_PERMIT_COST if outdoor else 0,
                processing_time=7,
            ),
            alternatives=alternatives_for(location_type),
            scouting=ScoutingNotes(
                best_time_of_day=best_times(words),
                challenges=challenges_for(words, location_type),
                opportunities=opportunities_for(words, location_type),
            ),
        )
