"""Pydantic schemas for StoryScope analysis results"""

from .base import Record, Priority, Impact
from .structure import (
    StructureType,
    PlotPointType,
    Act,
    NarrativeStructure,
    PlotPointTemplate,
    PlotPoint,
)
from .character import (
    CharacterRole,
    CharacterArc,
    RelationshipType,
    CharacterDevelopment,
    CharacterRelationship,
    CharacterAnalysis,
)
from .pacing import (
    PacingType,
    TensionType,
    RecommendationType,
    PacingIssueType,
    ActPacing,
    TensionPoint,
    PacingRecommendation,
    PacingIssue,
    PacingAnalysis,
)
from .feedback import GapType, SuggestionType, StoryGap, StructuralSuggestion
from .synopsis import (
    Synopsis,
    LoglineType,
    LoglineElementType,
    LoglineElement,
    Logline,
    Genre,
    GenreConvention,
    GenreAnalysis,
)
from .visualization import StoryVisualization
from .story import StoryAnalysis
from .location import LocationType, LocationDetails
from .visual import VisualMood, CinematographyStyle, VisualComposition
from .lighting import LightingStyle, LightingMood, TimeOfDay, LightType, LightingSetup
from .audio import AudioDesign
from .production import ShotSize, CameraAngle, Shot, EquipmentList
from .logistics import ProductionSchedule, WeatherConsiderations, BudgetEstimate
from .scene import Scene, SceneCategory, SceneTemplate, SceneTemplateSettings

__all__ = [
    # Base
    "Record",
    "Priority",
    "Impact",
    # Structure
    "StructureType",
    "PlotPointType",
    "Act",
    "NarrativeStructure",
    "PlotPointTemplate",
    "PlotPoint",
    # Character
    "CharacterRole",
    "CharacterArc",
    "RelationshipType",
    "CharacterDevelopment",
    "CharacterRelationship",
    "CharacterAnalysis",
    # Pacing
    "PacingType",
    "TensionType",
    "RecommendationType",
    "PacingIssueType",
    "ActPacing",
    "TensionPoint",
    "PacingRecommendation",
    "PacingIssue",
    "PacingAnalysis",
    # Feedback
    "GapType",
    "SuggestionType",
    "StoryGap",
    "StructuralSuggestion",
    # Synopsis, logline, genre
    "Synopsis",
    "LoglineType",
    "LoglineElementType",
    "LoglineElement",
    "Logline",
    "Genre",
    "GenreConvention",
    "GenreAnalysis",
    # Story
    "StoryVisualization",
    "StoryAnalysis",
    # Scene
    "LocationType",
    "LocationDetails",
    "VisualMood",
    "CinematographyStyle",
    "VisualComposition",
    "LightingStyle",
    "LightingMood",
    "TimeOfDay",
    "LightType",
    "LightingSetup",
    "AudioDesign",
    "ShotSize",
    "CameraAngle",
    "Shot",
    "EquipmentList",
    "ProductionSchedule",
    "WeatherConsiderations",
    "BudgetEstimate",
    "Scene",
    "SceneCategory",
    "SceneTemplate",
    "SceneTemplateSettings",
]
