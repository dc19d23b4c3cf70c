"""Visualization Projector - reshape analysis results into chart series"""

from typing import Dict, Any, List

from storyscope.analyzers.base import AnalysisStage
from storyscope.models import (
    NarrativeStructure,
    PlotPoint,
    CharacterAnalysis,
    PacingAnalysis,
    PacingType,
    StoryVisualization,
)
from storyscope.models.visualization import (
    ActVisualization,
    PlotPointVisualization,
    TimelinePoint,
    StructureChartData,
    ChartPoint,
    EventPoint,
    StatePoint,
    TensionCurveData,
    CharacterArcData,
    PacingBar,
    PacingIssueMarker,
    PacingChartData,
    PlotPointMapEntry,
    PlotPointMapData,
)

PRESENT_COLOR = "#10b981"
MISSING_COLOR = "#ef4444"
WARNING_COLOR = "#f59e0b"
MAX_ARCS = 4

IDEAL_TENSION = [(0, 20), (12, 40), (25, 35), (50, 60), (75, 45), (88, 90), (100, 25)]


def structure_chart(structure: NarrativeStructure, plot_points: List[PlotPoint]) -> StructureChartData:
    return StructureChartData(
        acts=[
            ActVisualization(
                name=act.name,
                start=act.start_position,
                end=act.end_position,
                color=f"hsl({index * 120}, 70%, 60%)",
                strength=act.strength,
            )
            for index, act in enumerate(structure.acts)
        ],
        plot_points=[
            PlotPointVisualization(
                name=point.name,
                position=point.position,
                strength=point.strength,
                present=point.present,
                color=PRESENT_COLOR if point.present else MISSING_COLOR,
            )
            for point in plot_points
        ],
        timeline=[
            TimelinePoint(
                position=point.position,
                event=point.name,
                importance=point.strength,
                type=point.type.value,
            )
            for point in plot_points
        ],
    )


def tension_chart(pacing: PacingAnalysis) -> TensionCurveData:
    return TensionCurveData(
        points=[
            EventPoint(x=point.position * 100, y=point.tension * 100, event=point.event)
            for point in pacing.tension_curve
        ],
        ideal=[ChartPoint(x=x, y=y) for x, y in IDEAL_TENSION],
    )


def character_arcs(characters: List[CharacterAnalysis]) -> List[CharacterArcData]:
    arcs = []
    for index, character in enumerate(characters[:MAX_ARCS]):
        change = character.development.change_strength
        arcs.append(CharacterArcData(
            character=character.name,
            points=[
                StatePoint(x=0, y=30, state=character.development.start_state),
                StatePoint(x=50, y=50 + change * 30, state="developing"),
                StatePoint(x=100, y=30 + change * 50, state=character.development.end_state),
            ],
            color=f"hsl({index * 90}, 70%, 50%)",
            development=change,
        ))
    return arcs


def pacing_chart(pacing: PacingAnalysis) -> PacingChartData:
    return PacingChartData(
        acts=[
            PacingBar(
                name=f"Act {act.act}",
                duration=act.duration,
                ideal=act.ideal_duration,
                color=PRESENT_COLOR if act.pacing == PacingType.OPTIMAL else WARNING_COLOR,
            )
            for act in pacing.act_pacing
        ],
        issues=[
            PacingIssueMarker(position=index * 25 + 25, type=issue.type.value, severity=issue.severity.value)
            for index, issue in enumerate(pacing.issues)
        ],
    )


def plot_point_map(structure: NarrativeStructure, plot_points: List[PlotPoint]) -> PlotPointMapData:
    return PlotPointMapData(
        structure=structure.type.value,
        points=[
            PlotPointMapEntry(
                name=point.name,
                position=point.position,
                present=point.present,
                strength=point.strength,
            )
            for point in plot_points
        ],
    )


class VisualizationProjector(AnalysisStage):
    """Chart-ready series; no derivation beyond scaling and coloring"""

    def __init__(self, *args, **kwargs):
        super().__init__("visualization", *args, **kwargs)

    def project(
        self,
        structure: NarrativeStructure,
        plot_points: List[PlotPoint],
        characters: List[CharacterAnalysis],
        pacing: PacingAnalysis
    ) -> StoryVisualization:
        return StoryVisualization(
            structure_chart=structure_chart(structure, plot_points),
            tension_curve=tension_chart(pacing),
            character_arcs=character_arcs(characters),
            pacing_chart=pacing_chart(pacing),
            plot_point_map=plot_point_map(structure, plot_points),
        )

    def execute(self, context: Dict[str, Any]) -> StoryVisualization:
        return self.project(
            context["structure"],
            context["plot_points"],
            context["characters"],
            context["pacing"],
        )
