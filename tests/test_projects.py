"""Tests for the project composer."""

from __future__ import annotations

import pytest
from conftest import FailingStore

from fusiondash.core.projects import ProjectComposer
from fusiondash.errors import NotFoundError
from fusiondash.models.project import Project


@pytest.fixture
def projects(store):
    return ProjectComposer(store)


async def test_list_projects(projects):
    views = await projects.list_projects()
    assert [v.id for v in views] == ["p1", "p2"]
    assert views[0].priority_score == 85
    assert views[1].actual_cost == 0


async def test_list_projects_prefetched(projects):
    views = await projects.list_projects([Project(id="z", title="Given")])
    assert [v.title for v in views] == ["Given"]


async def test_detail_joins_names(projects):
    detail = await projects.project_detail("p1")
    assert detail.project_lead == "Ada Lovelace"
    assert [(s.name, s.role) for s in detail.team] == [
        ("Ada Lovelace", "Lead"),
        ("Grace Hopper", "PM"),
        ("Unknown", "Advisor"),
    ]
    assert detail.discussions[0].author == "Grace Hopper"
    assert detail.versions[0].author == "Ada Lovelace"


async def test_detail_metrics(projects):
    detail = await projects.project_detail("p1")
    assert detail.metrics.time.baseline == 480
    assert detail.metrics.time.current == 240
    assert detail.metrics.cost.current == 50000
    assert detail.metrics.impact.baseline == 80


async def test_detail_milestones_ordered(projects):
    detail = await projects.project_detail("p1")
    assert [m.title for m in detail.milestones] == ["Design", "Launch"]


async def test_detail_tasks(projects):
    detail = await projects.project_detail("p1")
    build, copy = detail.tasks
    assert build.skills == ["React", "UX"]
    assert build.assigned == "Ada Lovelace"
    assert build.desc == "Multi-step form"
    assert copy.skills == []
    assert copy.assigned == "Unknown"


async def test_detail_edge_from_linked_idea(projects):
    detail = await projects.project_detail("p1")
    assert len(detail.edge.outcomes) == 2
    assert detail.edge.confidence == "high"
    assert detail.edge.owner == "Grace Hopper"


async def test_detail_without_linked_idea(projects):
    detail = await projects.project_detail("p2")
    assert detail.project_lead == "Unknown"
    assert detail.edge.outcomes == []
    assert detail.edge.confidence == "medium"
    assert detail.team == []
    assert detail.tasks == []


async def test_detail_missing_project(projects):
    with pytest.raises(NotFoundError, match="Project not found: nope"):
        await projects.project_detail("nope")


async def test_engineering_business_context(projects):
    view = await projects.project_for_engineering("p1")
    assert view.business_context.problem == "Signup drop-off"
    assert view.business_context.expected_outcome == "More activations"
    assert view.business_context.success_metrics == ["Activation +10%"]
    assert view.business_context.constraints == []
    assert view.timeline == "Q2"
    assert view.budget == "$100K"


async def test_engineering_linked_idea(projects):
    view = await projects.project_for_engineering("p1")
    assert view.linked_idea.id == "i1"
    assert view.linked_idea.title == "Self-serve onboarding"
    assert view.linked_idea.score == 85
    assert [s.type for s in view.team] == ["core", "extended", ""]


async def test_engineering_without_link(projects):
    view = await projects.project_for_engineering("p2")
    assert view.linked_idea.id == ""
    assert view.linked_idea.score == 0
    assert view.business_context.problem == ""
    assert view.business_context.success_metrics == []


async def test_engineering_missing_project(projects):
    with pytest.raises(NotFoundError):
        await projects.project_for_engineering("nope")


async def test_clarifications_names(projects):
    pending, answered = await projects.clarifications("p1")
    assert pending.asked_by == "Linus Torvalds"
    assert pending.status == "pending"
    assert answered.answered_by == "Grace Hopper"
    assert answered.answer == "Phase 2"


async def test_clarifications_omit_unanswered_fields(projects):
    pending, answered = await projects.clarifications("p1")
    pending_data = pending.model_dump(by_alias=True)
    assert "answer" not in pending_data
    assert "answeredBy" not in pending_data
    assert "answeredAt" not in pending_data
    assert pending_data["askedBy"] == "Linus Torvalds"

    answered_data = answered.model_dump(by_alias=True)
    assert answered_data["answeredAt"] == "2024-04-04"


async def test_clarifications_empty(projects):
    assert await projects.clarifications("p2") == []


async def test_detail_propagates_read_failure(snapshot):
    error = OSError("upstream down")
    store = FailingStore(snapshot, "projects/p1/milestones", error)
    with pytest.raises(OSError) as exc_info:
        await ProjectComposer(store).project_detail("p1")
    assert exc_info.value is error


async def test_detail_propagates_nested_edge_failure(snapshot):
    error = OSError("edge store down")
    store = FailingStore(snapshot, "edges/e1/outcomes", error)
    with pytest.raises(OSError) as exc_info:
        await ProjectComposer(store).project_detail("p1")
    assert exc_info.value is error
