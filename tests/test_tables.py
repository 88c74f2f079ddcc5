import uuid
from datetime import date, datetime, timezone
from types import SimpleNamespace

import pytest

from planner.schemas.common import DEFAULT_TIMEZONE, TaskStatus
from planner.schemas.tables import (
    TABLES,
    Goal,
    Profile,
    ProfileInsert,
    Task,
    TaskUpdate,
    WeeklyPlan,
    WeeklyPlanItemUpdate,
)
from planner.schemas.validation import validate
from conftest import TIMESTAMP, new_id


def test_table_names():
    assert set(TABLES) == {
        "profiles", "goals", "tasks", "weekly_plans", "weekly_plan_items", "reviews",
    }


def test_task_row_round_trips_unchanged(task_row):
    assert Task.model_validate(task_row).to_json() == task_row


def test_goal_row_round_trips_unchanged(goal_row):
    assert Goal.model_validate(goal_row).to_json() == goal_row


def test_row_defaults_are_applied(user_id):
    task = Task.model_validate({
        "id": new_id(),
        "user_id": user_id,
        "title": "Call the bank",
        "priority": "C",
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    })
    assert task.status is TaskStatus.PENDING
    assert task.is_mit is False


@pytest.mark.parametrize("table", sorted(TABLES))
def test_insert_shapes_drop_server_fields(table):
    shapes = TABLES[table]
    insert_fields = set(shapes.insert.model_fields)

    assert not insert_fields & {"id", "created_at", "updated_at"}
    assert insert_fields == set(shapes.row.model_fields) - {"id", "created_at", "updated_at"}


@pytest.mark.parametrize("table", sorted(set(TABLES) - {"weekly_plan_items"}))
def test_update_shapes_need_only_a_timestamp(table):
    update = TABLES[table].update

    assert validate(update, {"updated_at": TIMESTAMP}).success

    result = validate(update, {})
    assert [issue.path for issue in result.errors] == ["updated_at"]
    assert not set(update.model_fields) & {"id", "user_id", "created_at"}


def test_update_shape_keeps_field_constraints():
    result = validate(TaskUpdate, {"updated_at": TIMESTAMP, "rank": 7, "priority": "D"})
    assert sorted(issue.path for issue in result.errors) == ["priority", "rank"]

    patch = TaskUpdate.model_validate({"updated_at": TIMESTAMP, "status": "COMPLETED"})
    assert patch.to_payload() == {"updated_at": TIMESTAMP, "status": "COMPLETED"}


def test_weekly_plan_item_update_is_fully_optional():
    assert validate(WeeklyPlanItemUpdate, {}).success
    assert not validate(WeeklyPlanItemUpdate, {"priority": "X"}).success


def test_profile_insert_defaults_timezone(user_id):
    profile = ProfileInsert.model_validate({"user_id": user_id, "first_name": "Ada", "last_name": "Lovelace"})
    assert profile.timezone == DEFAULT_TIMEZONE


def test_profile_avatar_url_is_kept_as_given(user_id):
    row = {
        "id": new_id(),
        "user_id": user_id,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "timezone": "Europe/London",
        "avatar_url": "https://cdn.planner.io/avatars/ada.png",
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }
    assert Profile.model_validate(row).to_json() == row

    row["avatar_url"] = "not a url"
    assert validate(Profile, row).messages_for("avatar_url") == ["Invalid url"]


def week_plan(user_id, start, end):
    return {
        "id": new_id(),
        "user_id": user_id,
        "week_start_date": start,
        "week_end_date": end,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


def test_week_start_date_rejects_month_thirteen(user_id):
    result = validate(WeeklyPlan, week_plan(user_id, "2024-13-01", "2024-13-07"))
    assert sorted(issue.path for issue in result.errors) == ["week_end_date", "week_start_date"]


def test_week_start_date_is_not_calendar_checked(user_id):
    assert validate(WeeklyPlan, week_plan(user_id, "2024-02-30", "2024-03-06")).success


def test_rows_read_from_storage_objects(user_id):
    created = datetime(2024, 3, 4, 9, 30, tzinfo=timezone.utc)
    stored = SimpleNamespace(
        id=uuid.uuid4(),
        user_id=uuid.UUID(user_id),
        week_start_date=date(2024, 3, 4),
        week_end_date=date(2024, 3, 10),
        focus_areas=["Health"],
        notes=None,
        created_at=created,
        updated_at=created,
    )
    plan = WeeklyPlan.model_validate(stored)

    assert plan.user_id == user_id
    assert plan.week_start_date == "2024-03-04"
    assert plan.created_at == "2024-03-04T09:30:00+00:00"
