"""Narrative pipeline: manuscript text to StoryAnalysis"""

import logging
from typing import Optional

from storyscope.analyzers.story import (
    StructureAnalyzer,
    PlotPointDetector,
    CharacterExtractor,
    PacingAnalyzer,
    GapDetector,
    SuggestionGenerator,
    SynopsisGenerator,
    LoglineGenerator,
    GenreClassifier,
    VisualizationProjector,
)
from storyscope.errors import require_text
from storyscope.ids import IdFactory, Clock, SequentialIds, utc_now
from storyscope.models import StoryAnalysis
from storyscope.parser import TextSegmenter
from .workflow import Workflow

logger = logging.getLogger(__name__)


class StoryAnalyzer:
    """Orchestrates the narrative analysis stages"""

    def __init__(
        self,
        ids: Optional[IdFactory] = None,
        clock: Optional[Clock] = None,
        parallel: bool = False
    ):
        """
        Initialize story analyzer

        Args:
            ids: Id factory; a fresh SequentialIds per analysis when omitted
            clock: Callable returning the current time
            parallel: Run independent stages on a thread pool
        """
        self.ids = ids
        self.clock = clock or utc_now
        self.parallel = parallel
        self.segmenter = TextSegmenter()

    def _create_workflow(self, ids: IdFactory, clock: Clock) -> Workflow:
        """Create the stage workflow with dependencies"""
        stage_args = dict(ids=ids, clock=clock)
        workflow = Workflow()

        # Structure and characters only read the text
        workflow.add_stage(StructureAnalyzer(**stage_args))
        workflow.add_stage(CharacterExtractor(**stage_args))

        workflow.add_stage(PlotPointDetector(**stage_args), ["structure"])
        workflow.add_stage(PacingAnalyzer(**stage_args), ["structure"])
        workflow.add_stage(GenreClassifier(**stage_args), ["characters"])

        workflow.add_stage(GapDetector(**stage_args), ["plot_points", "characters"])
        workflow.add_stage(SynopsisGenerator(**stage_args), ["structure", "characters", "plot_points"])
        workflow.add_stage(LoglineGenerator(**stage_args), ["characters", "plot_points"])
        workflow.add_stage(
            VisualizationProjector(**stage_args),
            ["structure", "plot_points", "characters", "pacing"]
        )

        workflow.add_stage(SuggestionGenerator(**stage_args), ["structure", "characters", "pacing", "gaps"])

        return workflow

    def analyze(self, title: str, content: str) -> StoryAnalysis:
        """
        Analyze a manuscript

        Args:
            title: Manuscript title (may be empty)
            content: Manuscript text (may be empty)

        Returns:
            Complete story analysis

        Raises:
            InvalidInputError: If title or content is None or not a string
        """
        require_text(title, "title")
        require_text(content, "content")

        ids = self.ids or SequentialIds()
        sentences = self.segmenter.split(content)
        logger.debug(f"Analyzing story {title!r}: {len(content)} characters, {len(sentences)} sentences")

        now = self.clock()
        workflow = self._create_workflow(ids, lambda: now)
        results = workflow.run(
            {"title": title, "text": content, "sentences": sentences},
            parallel=self.parallel,
        )

        analysis = StoryAnalysis(
            id=ids("story"),
            title=title,
            content=content,
            upload_date=now,
            structure=results["structure"],
            plot_points=results["plot_points"],
            characters=results["characters"],
            pacing=results["pacing"],
            gaps=results["gaps"],
            suggestions=results["suggestions"],
            synopsis=results["synopsis"],
            loglines=results["loglines"],
            genre=results["genre"],
            visual_data=results["visualization"],
        )

        logger.info(
            f"Analyzed story {title!r}: {analysis.structure.type.value} structure, "
            f"{len(analysis.characters)} characters, {len(analysis.gaps)} gaps, "
            f"{len(analysis.suggestions)} suggestions"
        )
        return analysis


def analyze_story(
    title: str,
    content: str,
    *,
    ids: Optional[IdFactory] = None,
    clock: Optional[Clock] = None,
    parallel: bool = False
) -> StoryAnalysis:
    """Analyze a manuscript with a one-off StoryAnalyzer"""
    return StoryAnalyzer(ids=ids, clock=clock, parallel=parallel).analyze(title, content)
