import logging

import pytest

from planner.schemas.common import GoalType
from planner.services.goals import (
    build_goal_hierarchy,
    get_goal_tier_summary,
    is_broader_tier,
    summarize_goal_tiers,
)
from conftest import new_id


def test_tier_order():
    assert is_broader_tier(GoalType.LIFE, GoalType.QUARTERLY)
    assert is_broader_tier(GoalType.THREE_YEAR, GoalType.ANNUAL)
    assert not is_broader_tier(GoalType.QUARTERLY, GoalType.ANNUAL)
    assert not is_broader_tier(GoalType.ANNUAL, GoalType.ANNUAL)


def test_hierarchy_groups_and_links(make_goal):
    life = make_goal(type="LIFE", title="Be healthy")
    annual = make_goal(type="ANNUAL", parent_goal_id=life.id)
    quarterly = make_goal(type="QUARTERLY", parent_goal_id=annual.id)
    orphan = make_goal(type="QUARTERLY", parent_goal_id="8b7c7f0e-2c1b-4a5e-9d3f-1b2c3d4e5f60")

    hierarchy = build_goal_hierarchy([life, annual, quarterly, orphan])

    assert [g.id for g in hierarchy.life_goals] == [life.id]
    assert hierarchy.three_year_goals == []
    assert [g.id for g in hierarchy.life_goals[0].children] == [annual.id]
    assert hierarchy.annual_goals[0].parent.id == life.id
    assert [g.id for g in hierarchy.annual_goals[0].children] == [quarterly.id]
    assert [g.id for g in hierarchy.quarterly_goals] == [quarterly.id, orphan.id]
    assert hierarchy.quarterly_goals[1].parent is None


def test_hierarchy_ignores_self_parenting(make_goal):
    goal = make_goal(type="ANNUAL")
    looped = goal.model_copy(update={"parent_goal_id": goal.id})

    node = build_goal_hierarchy([looped]).annual_goals[0]
    assert node.parent is None
    assert node.children == []


def test_hierarchy_breaks_mutual_parent_links(make_goal):
    first_id, second_id = new_id(), new_id()
    first = make_goal(id=first_id, type="ANNUAL", parent_goal_id=second_id)
    second = make_goal(id=second_id, type="ANNUAL", parent_goal_id=first_id)

    hierarchy = build_goal_hierarchy([first, second])
    nodes = {node.id: node for node in hierarchy.annual_goals}

    assert nodes[first_id].parent.id == second_id
    assert nodes[second_id].parent is None
    assert [child.id for child in nodes[second_id].children] == [first_id]
    assert len(hierarchy.to_json()["annualGoals"]) == 2


def test_hierarchy_breaks_longer_cycles(make_goal):
    ids = [new_id() for _ in range(3)]
    goals = [
        make_goal(id=ids[0], type="LIFE", parent_goal_id=ids[2]),
        make_goal(id=ids[1], type="ANNUAL", parent_goal_id=ids[0]),
        make_goal(id=ids[2], type="QUARTERLY", parent_goal_id=ids[1]),
    ]
    hierarchy = build_goal_hierarchy(goals)

    assert hierarchy.quarterly_goals[0].parent is None
    assert hierarchy.to_json()["lifeGoals"][0]["id"] == ids[0]


def test_hierarchy_serializes_with_camel_case_keys(make_goal):
    data = build_goal_hierarchy([make_goal(type="LIFE")]).to_json()
    assert set(data) == {"lifeGoals", "threeYearGoals", "annualGoals", "quarterlyGoals"}


def test_tier_summary_flags_overflows():
    summary = summarize_goal_tiers({"LIFE": 4, GoalType.ANNUAL: 5})

    assert [(s.type, s.count, s.limit, s.over_limit) for s in summary] == [
        (GoalType.LIFE, 4, 3, True),
        (GoalType.THREE_YEAR, 0, 10, False),
        (GoalType.ANNUAL, 5, 5, False),
        (GoalType.QUARTERLY, 0, 20, False),
    ]


@pytest.mark.asyncio
async def test_get_goal_tier_summary(mock_db, user_id, caplog):
    mock_db.execute.return_value.all.return_value = [("LIFE", 4), ("ANNUAL", 2)]

    with caplog.at_level(logging.INFO, logger="planner.services.goals"):
        summary = await get_goal_tier_summary(mock_db, user_id)

    assert {s.type: s.count for s in summary}[GoalType.ANNUAL] == 2
    assert [s.type for s in summary if s.over_limit] == [GoalType.LIFE]
    assert "4 LIFE goals" in caplog.text

    stmt = mock_db.execute.await_args.args[0]
    assert "GROUP BY goals.type" in str(stmt)
