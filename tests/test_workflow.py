"""Tests for workflow dependency resolution and execution"""

import pytest

from storyscope.analyzers import AnalysisStage
from storyscope.errors import WorkflowError
from storyscope.orchestrator import Workflow, StageStatus


class EchoStage(AnalysisStage):
    """Returns its own name plus the outputs it can see"""

    def execute(self, context):
        seen = sorted(key for key in context if key != "text")
        return f"{self.name}<{','.join(seen)}>"


class FailingStage(AnalysisStage):
    def execute(self, context):
        raise KeyError("missing input")


def build(edges):
    workflow = Workflow()
    for name, dependencies in edges.items():
        workflow.add_stage(EchoStage(name), dependencies)
    return workflow


def test_waves_group_independent_stages():
    workflow = build({
        "d": ["b", "c"],
        "c": ["a"],
        "b": ["a"],
        "a": [],
        "e": [],
    })

    assert workflow.get_execution_waves() == [["a", "e"], ["b", "c"], ["d"]]


def test_cycle_is_rejected():
    workflow = build({"a": ["b"], "b": ["a"], "c": []})

    with pytest.raises(WorkflowError, match=r"\['a', 'b'\]"):
        workflow.get_execution_waves()


def test_unknown_dependency_is_rejected():
    workflow = build({"a": ["ghost"]})

    with pytest.raises(WorkflowError):
        workflow.run({"text": ""})


def test_duplicate_stage_is_rejected():
    workflow = build({"a": []})

    with pytest.raises(WorkflowError):
        workflow.add_stage(EchoStage("a"))


def test_run_merges_outputs():
    workflow = build({"a": [], "b": [], "c": ["a", "b"]})
    context = {"text": "hello"}

    result = workflow.run(context)

    # Stages in one wave share a snapshot and do not see each other
    assert result["a"] == "a<>"
    assert result["b"] == "b<>"
    assert result["c"] == "c<a,b>"
    assert result["text"] == "hello"
    assert context == {"text": "hello"}


def test_parallel_matches_sequential():
    edges = {"a": [], "b": [], "c": [], "d": ["a", "c"], "e": ["d", "b"]}

    sequential = build(edges).run({"text": ""})
    parallel = build(edges).run({"text": ""}, parallel=True, max_workers=2)

    assert sequential == parallel


def test_failing_stage():
    workflow = build({"a": []})
    workflow.add_stage(FailingStage("broken"), ["a"])

    with pytest.raises(RuntimeError, match="Stage broken failed"):
        workflow.run({"text": ""})

    task = workflow.tasks["broken"]
    assert task.status == StageStatus.FAILED
    assert isinstance(task.error, KeyError)
    assert workflow.tasks["a"].status == StageStatus.COMPLETED
    assert workflow.tasks["a"].output == "a<>"
