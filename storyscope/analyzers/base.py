"""Base class for analysis stages"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from storyscope.ids import IdFactory, Clock, SequentialIds, utc_now


class AnalysisStage(ABC):
    """
    One step of a story or scene pipeline.

    Stages are stateless apart from the injected id factory and clock; the
    orchestrator hands each one a read-only context holding the input text
    and the outputs of the stages it depends on, keyed by stage name.
    """

    def __init__(
        self,
        name: str,
        ids: Optional[IdFactory] = None,
        clock: Optional[Clock] = None
    ):
        """
        Initialize stage

        Args:
            name: Stage name, also the key its output is stored under
            ids: Id factory called with an id kind ("act", "shot", ...)
            clock: Callable returning the current time
        """
        self.name = name
        self.ids = ids or SequentialIds()
        self.clock = clock or utc_now

    @abstractmethod
    def execute(self, context: Dict[str, Any]) -> Any:
        """
        Run the stage

        Args:
            context: Input text plus outputs of earlier stages

        Returns:
            The stage's result record(s)
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"
