import uuid
import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.ext.asyncio import AsyncSession
from planner.schemas.tables import Goal, Task

TIMESTAMP = "2024-03-04T09:30:00Z"


def new_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def user_id():
    return new_id()


@pytest.fixture
def goal_row(user_id):
    return {
        "id": new_id(),
        "user_id": user_id,
        "title": "Run a marathon",
        "description": "Finish under four hours",
        "type": "ANNUAL",
        "target_date": "2024-10-20T08:00:00Z",
        "is_completed": False,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


@pytest.fixture
def task_row(user_id):
    return {
        "id": new_id(),
        "user_id": user_id,
        "title": "Draft quarterly plan",
        "priority": "A",
        "rank": 1,
        "status": "PENDING",
        "is_mit": True,
        "due_date": "2024-03-05T17:00:00Z",
        "estimated_minutes": 45,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


@pytest.fixture
def make_task(user_id):
    """Factory for validated task rows; keyword arguments override the defaults."""
    def _make(**overrides) -> Task:
        row = {
            "id": new_id(),
            "user_id": user_id,
            "title": "Task",
            "priority": "B",
            "created_at": TIMESTAMP,
            "updated_at": TIMESTAMP,
        }
        row.update(overrides)
        return Task.model_validate(row)
    return _make


@pytest.fixture
def make_goal(user_id):
    def _make(**overrides) -> Goal:
        row = {
            "id": new_id(),
            "user_id": user_id,
            "title": "Goal",
            "type": "ANNUAL",
            "created_at": TIMESTAMP,
            "updated_at": TIMESTAMP,
        }
        row.update(overrides)
        return Goal.model_validate(row)
    return _make


@pytest.fixture
def mock_db():
    db = AsyncMock(spec=AsyncSession)
    db.execute.return_value = MagicMock()
    return db
