"""Shared test fixtures for the fusion dashboard."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any

import aiosqlite
import pytest

from fusiondash.config import Config
from fusiondash.storage.memory_store import MemoryStore


def make_snapshot() -> dict[str, Any]:
    """A small but complete workspace: every table, a few dangling references."""
    return {
        "users": [
            {
                "id": "current",
                "first_name": "Casey",
                "last_name": "Morgan",
                "email": "casey@acme.test",
                "role": "Admin",
                "department": "Product",
                "performance_score": 95,
                "status": "active",
                "phone": "+1 555 0100",
                "bio": "Runs the portfolio.",
            },
            {
                "id": "u1",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@acme.test",
                "role": "Engineer",
                "department": "Engineering",
                "status": "active",
                "availability": 80,
                "performance_score": 92,
                "projects_completed": 7,
                "current_projects": 2,
                "strengths": '["Python", "Architecture"]',
                "team_dimensions": '{"collaboration": 8, "delivery": 9.5, "notes": "x"}',
                "last_active": "2024-04-04",
            },
            {
                "id": "u2",
                "first_name": "Grace",
                "last_name": "Hopper",
                "email": "grace@acme.test",
                "role": "Product Manager",
                "department": "Product",
                "status": "active",
                "performance_score": 88,
                "strengths": ["Roadmaps"],
                "team_dimensions": {"delivery": 7},
            },
            {
                "id": "u3",
                "first_name": "Linus",
                "last_name": "Torvalds",
                "role": "Contractor",
                "department": "",
                "status": "inactive",
                "performance_score": 75,
            },
            {
                "id": "u4",
                "first_name": "Margaret",
                "last_name": "Hamilton",
                "role": "Engineer",
                "department": "Engineering",
                "status": "pending",
                "performance_score": 0,
            },
        ],
        "ideas": [
            {
                "id": "i1",
                "title": "Self-serve onboarding",
                "score": 85,
                "estimated_impact": 90,
                "estimated_time": 120,
                "estimated_cost": 40000,
                "priority": 1,
                "status": "approved",
                "submitted_by_id": "u1",
                "edge_status": "complete",
                "problem_statement": "Signup drop-off",
                "proposed_solution": "Guided wizard",
                "expected_outcome": "More activations",
                "category": "Growth",
                "readiness": "ready",
                "waiting_days": 2,
                "impact_label": "High",
                "effort_label": "Medium",
                "description": "Wizard for new accounts",
                "submitted_at": "2024-03-01",
                "risks": (
                    '[{"title": "Scope creep", "severity": "high", "mitigation": "Timebox"},'
                    ' "bogus"]'
                ),
                "assumptions": ["Users want help"],
                "alignments": '["Q3 growth"]',
                "effort_time_estimate": "6 weeks",
                "effort_team_size": "3",
                "cost_estimate": "$40K",
                "cost_breakdown": "Eng + design",
            },
            {
                "id": "i2",
                "title": "Invoice OCR",
                "score": 70,
                "status": "pending_review",
                "submitted_by_id": "ghost",
                "edge_status": "",
                "readiness": "needs-info",
                "risks": "{not json",
                "assumptions": '{"a": 1}',
            },
            {
                "id": "i3",
                "title": "Dark mode",
                "score": 40,
                "status": "draft",
                "submitted_by_id": "",
                "edge_status": "missing",
                "readiness": "",
            },
        ],
        "idea_scores": [
            {
                "id": "s1",
                "idea_id": "i1",
                "overall": 88,
                "impact_score": 90,
                "impact_breakdown": (
                    '[{"label": "Reach", "score": 45, "maxScore": 50, "reason": "All new users"}]'
                ),
                "feasibility_score": 80,
                "feasibility_breakdown": [],
                "efficiency_score": 70,
                "estimated_time": "6 weeks",
                "estimated_cost": "$50K",
                "recommendation": "Proceed",
            },
        ],
        "edges": [
            {
                "id": "e1",
                "idea_id": "i1",
                "owner_id": "u2",
                "status": "complete",
                "confidence": "high",
                "impact_short_term": "Faster signup",
                "updated_at": "2024-03-05",
            },
            {"id": "e2", "idea_id": "i2", "owner_id": "", "status": "", "confidence": ""},
            {"id": "e3", "idea_id": "gone", "owner_id": "ghost", "status": "draft", "confidence": "low"},
        ],
        "edge_outcomes": [
            {"id": "o1", "edge_id": "e1", "description": "Activation up"},
            {"id": "o2", "edge_id": "e1", "description": "Churn down"},
            {"id": "o3", "edge_id": "e2", "description": "Fewer manual entries"},
        ],
        "edge_metrics": [
            {"id": "m1", "outcome_id": "o1", "name": "Activation rate", "target": "40", "unit": "%", "current": "30"},
            {"id": "m2", "outcome_id": "o1", "name": "Time to value", "target": "2", "unit": "days", "current": "5"},
            {"id": "m3", "outcome_id": "o2", "name": "Churn", "target": "3", "unit": "%", "current": "4"},
        ],
        "projects": [
            {
                "id": "p1",
                "title": "Onboarding revamp",
                "description": "Ship the onboarding wizard",
                "status": "approved",
                "progress": 95,
                "start_date": "2024-04-01",
                "target_end_date": "2024-06-30",
                "lead_id": "u1",
                "estimated_time": 480,
                "actual_time": 240,
                "estimated_cost": 100000,
                "actual_cost": 50000,
                "estimated_impact": 80,
                "actual_impact": 60,
                "priority": 1,
                "priority_score": 85,
                "linked_idea_id": "i1",
                "business_context": json.dumps(
                    {
                        "problem": "Signup drop-off",
                        "expectedOutcome": "More activations",
                        "successMetrics": ["Activation +10%"],
                        "constraints": "not a list",
                    }
                ),
                "timeline_label": "Q2",
                "budget_label": "$100K",
            },
            {
                "id": "p2",
                "title": "Invoice OCR pilot",
                "status": "under_review",
                "progress": 10,
                "lead_id": "ghost",
                "estimated_time": 240,
                "estimated_cost": 20000,
                "estimated_impact": 60,
                "priority": 2,
                "priority_score": 70,
                "linked_idea_id": None,
                "business_context": "",
            },
        ],
        "project_team": [
            {"id": "t1", "project_id": "p1", "user_id": "u1", "role": "Lead", "type": "core"},
            {"id": "t2", "project_id": "p1", "user_id": "u2", "role": "PM", "type": "extended"},
            {"id": "t3", "project_id": "p1", "user_id": "ghost", "role": "Advisor", "type": ""},
        ],
        "milestones": [
            {"id": "ms1", "project_id": "p1", "title": "Launch", "status": "upcoming", "date": "2024-06-30", "sort_order": 2},
            {"id": "ms2", "project_id": "p1", "title": "Design", "status": "done", "date": "2024-04-15", "sort_order": 1},
        ],
        "project_tasks": [
            {
                "id": "k1",
                "project_id": "p1",
                "name": "Build wizard",
                "priority": "high",
                "description": "Multi-step form",
                "skills": '["React", "UX"]',
                "hours": 40,
                "assigned_to_id": "u1",
            },
            {"id": "k2", "project_id": "p1", "name": "Copy", "priority": "low", "skills": "", "assigned_to_id": ""},
        ],
        "discussions": [
            {"id": "d1", "project_id": "p1", "author_id": "u2", "date": "2024-04-02", "message": "Kickoff done"},
        ],
        "project_versions": [
            {"id": "v1", "project_id": "p1", "version": "1.0", "date": "2024-04-01", "changes": "Initial", "author_id": "u1"},
        ],
        "clarifications": [
            {
                "id": "c1",
                "project_id": "p1",
                "question": "Which SSO providers?",
                "asked_by_id": "u3",
                "asked_at": "2024-04-03",
                "status": "pending",
                "answer": None,
                "answered_by_id": None,
                "answered_at": None,
            },
            {
                "id": "c2",
                "project_id": "p1",
                "question": "Mobile support?",
                "asked_by_id": "u1",
                "asked_at": "2024-04-03",
                "status": "answered",
                "answer": "Phase 2",
                "answered_by_id": "u2",
                "answered_at": "2024-04-04",
            },
        ],
        "activities": [
            {"id": "a1", "type": "score", "actor_id": "u1", "action": "scored", "target": "Invoice OCR", "timestamp": "2024-03-02", "score": 72},
            {"id": "a2", "type": "comment", "actor_id": "u2", "action": "commented on", "target": "Dark mode", "timestamp": "2024-03-03", "comment": "Nice"},
            {"id": "a3", "type": "approval", "actor_id": "ghost", "action": "approved", "target": "Self-serve onboarding", "timestamp": "2024-03-04", "status": "approved"},
            {"id": "a4", "type": "submit", "actor_id": "u1", "action": "submitted", "target": "Dark mode", "timestamp": "2024-03-05"},
        ],
        "account_config": {
            "id": "acct",
            "plan": "Enterprise",
            "plan_status": "active",
            "next_billing": "2024-05-01",
            "seats": 50,
            "used_seats": 12,
            "projects_limit": 100,
            "projects_current": 2,
            "ideas_limit": 500,
            "ideas_current": 3,
            "storage_limit": 100,
            "storage_current": 12.5,
            "ai_credits_limit": 1000,
            "ai_credits_current": 250,
            "health_score": 92,
            "health_status": "healthy",
            "last_activity": "2024-04-04",
            "active_users": 9,
        },
        "company_settings": {
            "id": "company",
            "name": "Acme Corp",
            "domain": "acme.test",
            "industry": "Software",
            "size": "51-200",
            "timezone": "UTC",
            "language": "en",
            "enforce_sso": 1,
            "two_factor": True,
            "ip_whitelist": False,
            "data_retention": "365 days",
        },
        "notification_categories": [
            {"id": "nc1", "label": "Ideas", "icon": "lightbulb"},
            {"id": "nc2", "label": "Projects", "icon": "folder"},
            {"id": "nc3", "label": "Billing", "icon": "card"},
        ],
        "notification_prefs": [
            {"id": "np1", "category_id": "nc1", "label": "New idea", "description": "A new idea was submitted", "email": True, "push": False},
            {"id": "np2", "category_id": "nc2", "label": "Milestone reached", "description": "", "email": False, "push": True},
            {"id": "np3", "category_id": "nc1", "label": "Idea scored", "description": "", "email": True, "push": True},
        ],
        "crunch_columns": [
            {
                "id": "cc1",
                "original_name": "cust_id",
                "friendly_name": "Customer ID",
                "data_type": "string",
                "description": "Customer key",
                "sample_values": '["C-1", "C-2"]',
                "is_acronym": False,
                "acronym_expansion": "",
            },
            {
                "id": "cc2",
                "original_name": "mrr",
                "friendly_name": "Monthly Recurring Revenue",
                "data_type": "number",
                "sample_values": [100, 200],
                "is_acronym": 1,
                "acronym_expansion": "Monthly Recurring Revenue",
            },
        ],
        "processes": [
            {"id": "pr1", "name": "Idea intake", "description": "From submission to review", "department": "Product"},
            {"id": "pr2", "name": "Release", "department": "Engineering"},
        ],
        "process_steps": [
            {"id": "st2", "process_id": "pr1", "title": "Triage", "owner": "Grace Hopper", "role": "PM", "tools": [], "duration": "1d", "sort_order": 2, "type": "review"},
            {"id": "st1", "process_id": "pr1", "title": "Submit", "owner": "Anyone", "role": "Submitter", "tools": '["Form"]', "duration": "10m", "sort_order": 1, "type": "start"},
            {"id": "st3", "process_id": "pr2", "title": "Tag", "sort_order": 1},
        ],
    }


class CountingStore(MemoryStore):
    """MemoryStore that records how often each resource is read."""

    def __init__(self, tables: dict[str, Any] | None = None) -> None:
        super().__init__(tables)
        self.reads: Counter[str] = Counter()

    async def read(self, resource: str) -> Any:
        self.reads[resource] += 1
        return await super().read(resource)


class FailingStore(MemoryStore):
    """MemoryStore whose read of one resource raises ``error``."""

    def __init__(self, tables: dict[str, Any], resource: str, error: Exception) -> None:
        super().__init__(tables)
        self.resource = resource
        self.error = error

    async def read(self, resource: str) -> Any:
        if resource == self.resource:
            raise self.error
        return await super().read(resource)


def _sql_value(value: Any) -> Any:
    if isinstance(value, list | dict):
        return json.dumps(value)
    return value


async def seed_sqlite(path: Path, tables: dict[str, Any]) -> None:
    """Write a snapshot into a fresh SQLite file, one table per key."""
    async with aiosqlite.connect(path) as db:
        for table, rows in tables.items():
            rows = [rows] if isinstance(rows, dict) else rows
            columns = sorted({column for row in rows for column in row}) or ["id"]
            quoted = ", ".join(f'"{c}"' for c in columns)
            await db.execute(f"CREATE TABLE {table} ({quoted})")
            placeholders = ", ".join("?" for _ in columns)
            for row in rows:
                await db.execute(
                    f"INSERT INTO {table} ({quoted}) VALUES ({placeholders})",
                    [_sql_value(row.get(c)) for c in columns],
                )
        await db.commit()


@pytest.fixture
def snapshot() -> dict[str, Any]:
    return make_snapshot()


@pytest.fixture
def store(snapshot: dict[str, Any]) -> MemoryStore:
    return MemoryStore(snapshot)


@pytest.fixture
def counting_store(snapshot: dict[str, Any]) -> CountingStore:
    return CountingStore(snapshot)


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot: dict[str, Any]) -> Path:
    path = tmp_path / "fusion.json"
    path.write_text(json.dumps(snapshot))
    return path


@pytest.fixture
async def sqlite_file(tmp_path: Path, snapshot: dict[str, Any]) -> Path:
    path = tmp_path / "fusion.db"
    await seed_sqlite(path, snapshot)
    return path


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(workspace_path=tmp_path)
