"""Tests for the team composer."""

from __future__ import annotations

from fusiondash.config import Config
from fusiondash.core.team import TeamComposer
from fusiondash.storage import MemoryStore


def _user(user_id: str, score: float = 50, department: str = "Ops") -> dict:
    return {
        "id": user_id,
        "first_name": user_id.upper(),
        "department": department,
        "performance_score": score,
    }


async def test_team_members_filters(store):
    members = await TeamComposer(store).team_members()
    assert [m.id for m in members] == ["u1", "u2"]


async def test_team_members_parses_profile(store):
    ada, grace = await TeamComposer(store).team_members()
    assert ada.name == "Ada Lovelace"
    assert ada.strengths == ["Python", "Architecture"]
    assert ada.team_dimensions == {"collaboration": 8, "delivery": 9.5}
    assert grace.strengths == ["Roadmaps"]
    assert grace.team_dimensions == {"delivery": 7}


async def test_team_members_top_n_in_store_order():
    users = [_user(f"x{i}", score=10 * i) for i in range(1, 9)]
    members = await TeamComposer(MemoryStore({"users": users})).team_members()
    assert [m.id for m in members] == ["x1", "x2", "x3", "x4", "x5", "x6"]


async def test_team_members_configured_limit():
    users = [_user(f"x{i}") for i in range(5)]
    composer = TeamComposer(MemoryStore({"users": users}), config=Config(team_top_n=2))
    assert len(await composer.team_members()) == 2


async def test_team_members_excludes_incomplete_profiles():
    users = [
        _user("current"),
        _user("no-dept", department=""),
        _user("zero", score=0),
        _user("negative", score=-5),
        _user("ok"),
    ]
    members = await TeamComposer(MemoryStore({"users": users})).team_members()
    assert [m.id for m in members] == ["ok"]


async def test_managed_users_excludes_only_current(store):
    users = await TeamComposer(store).managed_users()
    assert [u.id for u in users] == ["u1", "u2", "u3", "u4"]
    assert users[2].status == "inactive"
    assert users[3].status == "pending"
    assert users[0].last_active == "2024-04-04"


async def test_managed_users_wire_shape(store):
    users = await TeamComposer(store).managed_users()
    data = users[0].model_dump(by_alias=True)
    assert data["lastActive"] == "2024-04-04"
    assert data["name"] == "Ada Lovelace"
