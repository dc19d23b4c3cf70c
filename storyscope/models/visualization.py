"""Chart-ready series derived from a story analysis"""

from typing import List

from pydantic import Field

from .base import Record


class ActVisualization(Record):
    name: str
    start: int
    end: int
    color: str
    strength: float


class PlotPointVisualization(Record):
    name: str
    position: float
    strength: float
    present: bool
    color: str


class TimelinePoint(Record):
    position: float
    event: str
    importance: float
    type: str


class StructureChartData(Record):
    acts: List[ActVisualization] = Field(default_factory=list)
    plot_points: List[PlotPointVisualization] = Field(default_factory=list)
    timeline: List[TimelinePoint] = Field(default_factory=list)


class ChartPoint(Record):
    """Point on a 0-100 scaled chart"""
    x: float
    y: float


class EventPoint(ChartPoint):
    event: str


class StatePoint(ChartPoint):
    state: str


class SeverityRange(Record):
    start: float
    end: float
    severity: str


class TensionCurveData(Record):
    points: List[EventPoint] = Field(default_factory=list)
    ideal: List[ChartPoint] = Field(default_factory=list)
    gaps: List[SeverityRange] = Field(default_factory=list)


class CharacterArcData(Record):
    character: str
    points: List[StatePoint] = Field(default_factory=list)
    color: str
    development: float


class PacingBar(Record):
    name: str
    duration: int
    ideal: float
    color: str


class PacingIssueMarker(Record):
    position: float
    type: str
    severity: str


class PacingChartData(Record):
    acts: List[PacingBar] = Field(default_factory=list)
    issues: List[PacingIssueMarker] = Field(default_factory=list)


class PlotPointMapEntry(Record):
    name: str
    position: float
    present: bool
    strength: float
    connections: List[str] = Field(default_factory=list)


class PlotPointMapData(Record):
    structure: str
    points: List[PlotPointMapEntry] = Field(default_factory=list)


class StoryVisualization(Record):
    """All chart series for one analysis"""
    structure_chart: StructureChartData
    tension_curve: TensionCurveData
    character_arcs: List[CharacterArcData] = Field(default_factory=list)
    pacing_chart: PacingChartData
    plot_point_map: PlotPointMapData
