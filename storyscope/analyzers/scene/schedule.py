"""Production Schedule Generator - timeline, crew and logistics for the shoot day"""

from datetime import timedelta
from typing import List

from storyscope.models import ProductionSchedule
from storyscope.models.logistics import (
    ScheduleBlock,
    CrewMember,
    TransportationPlan,
    CateringPlan,
    PermitStatus,
    InsuranceInfo,
    LogisticsInfo,
)
from .base import SceneGenerator

SHOOT_LEAD_TIME = timedelta(days=7)

ALL_CREW = ["All crew"]
ALL_EQUIPMENT = ["All equipment"]

# (start, end, activity, location, crew, equipment, notes); None means everyone/everything
TIMELINE = [
    ("08:00", "09:00", "Crew Call & Equipment Setup", "Base camp", None, None,
     ["Safety briefing", "Equipment check"]),
    ("09:00", "10:00", "Location Setup & Lighting", "Primary location",
     ["Gaffer", "Camera", "Audio"], ["Lighting", "Camera", "Audio"], ["Test shots", "Audio levels"]),
    ("10:00", "12:00", "Principal Photography - Setup A", "Primary location", None, None,
     ["Main content capture"]),
    ("12:00", "13:00", "Lunch Break", "Catering area", None, [], ["Equipment secured"]),
    ("13:00", "16:00", "Principal Photography - Setup B", "Primary location", None, None,
     ["Coverage shots", "B-roll"]),
    ("16:00", "17:00", "Pickup Shots & Wrap", "Primary location", None, None, ["Final shots", "Data backup"]),
    ("17:00", "18:00", "Equipment Wrap & Load Out", "Base camp", None, None, ["Equipment check", "Return prep"]),
]

BASE_CREW = [
    ("Director", "08:00", "18:00", 500),
    ("Director of Photography", "08:00", "18:00", 400),
    ("Camera Operator", "08:30", "17:30", 300),
    ("Audio Engineer", "08:30", "17:30", 250),
    ("Gaffer", "08:00", "18:00", 300),
    ("Production Assistant", "07:30", "18:30", 150),
]
LARGE_PRODUCTION_CREW = [
    ("Assistant Camera", "08:30", "17:30", 200),
    ("Grip", "08:30", "17:30", 200),
]
LARGE_PRODUCTION_KEYWORDS = ['complex', 'multiple', 'large']


def timeline(ids) -> List[ScheduleBlock]:
    return [
        ScheduleBlock(
            id=ids("block"),
            start_time=start,
            end_time=end,
            activity=activity,
            location=location,
            crew=list(ALL_CREW if crew is None else crew),
            equipment=list(ALL_EQUIPMENT if equipment is None else equipment),
            notes=list(notes),
        )
        for start, end, activity, location, crew, equipment, notes in TIMELINE
    ]


def crew_list(words: str) -> List[CrewMember]:
    rows = list(BASE_CREW)
    if any(k in words for k in LARGE_PRODUCTION_KEYWORDS):
        rows.extend(LARGE_PRODUCTION_CREW)
    return [
        CrewMember(role=role, call_time=call, wrap_time=wrap, rate=rate)
        for role, call, wrap, rate in rows
    ]


def logistics() -> LogisticsInfo:
    return LogisticsInfo(
        transportation=TransportationPlan(
            crew="Individual vehicles + production van",
            equipment="Equipment truck",
            parking="Arranged on-site parking",
            costs=200,
        ),
        catering=CateringPlan(
            meals=["Breakfast", "Lunch", "Snacks"],
            dietary=["Vegetarian", "Gluten-free options"],
            cost=300,
            vendor="Local catering service",
        ),
        permits=[PermitStatus(type="Location filming permit", status="pending", cost=150,
                              valid_dates="Shoot date only")],
        insurance=InsuranceInfo(
            coverage=["Equipment", "Liability", "Crew"],
            cost=100,
            provider="Production insurance",
            valid_dates="Shoot date + 1 day",
        ),
    )


class ScheduleGenerator(SceneGenerator):
    """Lay out a single shoot day one week from now"""

    def __init__(self, *args, **kwargs):
        super().__init__("schedule", *args, **kwargs)

    def generate(self, description: str) -> ProductionSchedule:
        return ProductionSchedule(
            shoot_date=self.clock() + SHOOT_LEAD_TIME,
            call_time="08:00",
            wrap_time="18:00",
            timeline=timeline(self.ids),
            crew=crew_list(description.lower()),
            logistics=logistics(),
        )
