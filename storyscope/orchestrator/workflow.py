"""Workflow dependency management"""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Dict, List, Set, Any, Optional

from storyscope.analyzers import AnalysisStage
from storyscope.errors import WorkflowError

logger = logging.getLogger(__name__)


class StageStatus(str, Enum):
    """Stage execution status"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class StageTask:
    """Represents a stage in the workflow"""

    def __init__(self, stage: AnalysisStage, dependencies: Optional[List[str]] = None):
        """
        Initialize stage task

        Args:
            stage: The analysis stage; its name identifies the task
            dependencies: Names of the stages whose output this one reads
        """
        self.stage = stage
        self.name = stage.name
        self.dependencies = dependencies or []
        self.status = StageStatus.PENDING
        self.output: Any = None
        self.error: Optional[Exception] = None

    def mark_completed(self, output: Any):
        """Mark task as completed with output"""
        self.status = StageStatus.COMPLETED
        self.output = output

    def mark_failed(self, error: Exception):
        """Mark task as failed with error"""
        self.status = StageStatus.FAILED
        self.error = error


class Workflow:
    """Manages stage dependencies and execution order"""

    def __init__(self):
        """Initialize workflow"""
        self.tasks: Dict[str, StageTask] = {}

    def add_stage(self, stage: AnalysisStage, dependencies: Optional[List[str]] = None):
        """Add a stage to the workflow"""
        if stage.name in self.tasks:
            raise WorkflowError(f"Duplicate stage: {stage.name}")
        self.tasks[stage.name] = StageTask(stage, dependencies)

    def get_execution_waves(self) -> List[List[str]]:
        """
        Group stages into waves (topological sort).

        Every stage in a wave depends only on stages in earlier waves, so the
        members of one wave may run concurrently. Names inside a wave are
        sorted.

        Raises:
            WorkflowError: If a dependency is unknown or the graph has a cycle
        """
        completed: Set[str] = set()
        waves = []

        while len(completed) < len(self.tasks):
            ready = [
                task.name
                for task in self.tasks.values()
                if task.name not in completed
                and all(dep in completed for dep in task.dependencies)
            ]

            if not ready:
                # Circular dependency or missing stage
                remaining = sorted(
                    task.name
                    for task in self.tasks.values()
                    if task.name not in completed
                )
                raise WorkflowError(f"Cannot resolve dependencies for stages: {remaining}")

            waves.append(sorted(ready))
            completed.update(ready)

        return waves

    def run(
        self,
        context: Dict[str, Any],
        parallel: bool = False,
        max_workers: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Execute the workflow

        Args:
            context: Initial inputs (text, sentences, ...); not modified
            parallel: Run the stages of each wave on a thread pool
            max_workers: Thread pool size when parallel

        Returns:
            The initial context extended with every stage output, keyed by
            stage name
        """
        waves = self.get_execution_waves()
        context = dict(context)

        for wave in waves:
            tasks = [self.tasks[name] for name in wave]
            # Every stage in the wave sees the same snapshot
            snapshot = dict(context)

            if parallel and len(tasks) > 1:
                with ThreadPoolExecutor(max_workers=max_workers or len(tasks)) as pool:
                    futures = [pool.submit(self._execute_task, task, snapshot) for task in tasks]
                    outputs = [future.result() for future in futures]
            else:
                outputs = [self._execute_task(task, snapshot) for task in tasks]

            for task, output in zip(tasks, outputs):
                context[task.name] = output

        return context

    def _execute_task(self, task: StageTask, context: Dict[str, Any]) -> Any:
        """Run one stage and record its status"""
        logger.debug(f"Running stage {task.name}")
        task.status = StageStatus.RUNNING

        try:
            output = task.stage.execute(context)
        except Exception as e:
            task.mark_failed(e)
            raise RuntimeError(f"Stage {task.name} failed: {str(e)}") from e

        task.mark_completed(output)
        return output
