"""Scene pipeline: prose scene description to Scene"""

import logging
from typing import Optional

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
from storyscope.errors import require_text
from storyscope.ids import IdFactory, Clock, SequentialIds, utc_now
from storyscope.models import Scene
from .workflow import Workflow

logger = logging.getLogger(__name__)

SCENE_STAGES = [
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
]


class SceneAnalyzer:
    """Orchestrates the scene generators and assembles the Scene"""

    def __init__(
        self,
        ids: Optional[IdFactory] = None,
        clock: Optional[Clock] = None,
        parallel: bool = False
    ):
        self.ids = ids
        self.clock = clock or utc_now
        self.parallel = parallel

    def _create_workflow(self, ids: IdFactory, clock: Clock) -> Workflow:
        """Every generator reads only the description, so none has dependencies"""
        workflow = Workflow()
        for stage_class in SCENE_STAGES:
            workflow.add_stage(stage_class(ids=ids, clock=clock))
        return workflow

    def analyze(self, description: str) -> Scene:
        """
        Break a scene description down into a production plan

        Args:
            description: Prose description of the scene (may be empty)

        Returns:
            Complete scene

        Raises:
            InvalidInputError: If description is None or not a string
        """
        require_text(description, "description")

        ids = self.ids or SequentialIds()
        # Every dated field of the scene comes from one clock reading
        now = self.clock()
        workflow = self._create_workflow(ids, lambda: now)
        results = workflow.run({"text": description}, parallel=self.parallel)

        scene = Scene(
            id=ids("scene"),
            title=results["title"],
            description=description,
            location=results["location"],
            visual_composition=results["visual_composition"],
            lighting=results["lighting"],
            audio=results["audio"],
            shot_list=results["shot_list"],
            equipment=results["equipment"],
            schedule=results["schedule"],
            weather=results["weather"],
            budget=results["budget"],
            created_at=now,
            updated_at=now,
        )

        logger.info(
            f"Analyzed scene {scene.title!r}: {scene.location.type.value} location, "
            f"{len(scene.shot_list)} shots, budget {scene.budget.total:.2f} {scene.budget.currency}"
        )
        return scene


def analyze_scene(
    description: str,
    *,
    ids: Optional[IdFactory] = None,
    clock: Optional[Clock] = None,
    parallel: bool = False
) -> Scene:
    """Analyze a scene description with a one-off SceneAnalyzer"""
    return SceneAnalyzer(ids=ids, clock=clock, parallel=parallel).analyze(description)
