"""Story analysis container"""

from datetime import datetime
from typing import List

from pydantic import Field, field_serializer

from .base import Record
from .structure import NarrativeStructure, PlotPoint
from .character import CharacterAnalysis
from .pacing import PacingAnalysis
from .feedback import StoryGap, StructuralSuggestion
from .synopsis import Synopsis, Logline, GenreAnalysis
from .visualization import StoryVisualization


class StoryAnalysis(Record):
    """Complete result of analyzing one manuscript"""
    id: str
    title: str
    content: str
    upload_date: datetime

    structure: NarrativeStructure
    plot_points: List[PlotPoint] = Field(default_factory=list)
    characters: List[CharacterAnalysis] = Field(default_factory=list)
    pacing: PacingAnalysis
    gaps: List[StoryGap] = Field(default_factory=list)
    suggestions: List[StructuralSuggestion] = Field(default_factory=list)
    synopsis: Synopsis
    loglines: List[Logline] = Field(default_factory=list)
    genre: GenreAnalysis
    visual_data: StoryVisualization

    @field_serializer('upload_date')
    def serialize_datetime(self, value: datetime) -> str:
        """Serialize datetime to ISO format"""
        return value.isoformat()
