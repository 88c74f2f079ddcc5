"""
Row schemas for the backing tables.

Each row schema is the persisted shape of one table. ``<Row>Insert`` drops the
server-assigned id and timestamps; ``<Row>Update`` drops the identity columns,
makes every remaining column optional and requires a fresh ``updated_at``.
"""
from typing import Dict, List, NamedTuple, Optional, Type

from pydantic import BaseModel, Field, StrictBool, StrictInt

from planner.schemas.base import BaseSchema, extend, make_partial, omit
from planner.schemas.common import (
    DEFAULT_TIMEZONE,
    DateStr,
    DateTimeStr,
    GoalType,
    OptionalDateTimeStr,
    PositiveMinutes,
    Priority,
    Rank,
    ReviewType,
    TaskStatus,
    UUIDStr,
    UrlStr,
    constrained_text,
)

RequiredTitle = constrained_text(1, min_message="Title is required")

SERVER_GENERATED_FIELDS = ("id", "created_at", "updated_at")
IMMUTABLE_FIELDS = ("id", "user_id", "created_at")


class Profile(BaseSchema):
    id: UUIDStr
    user_id: UUIDStr
    first_name: str
    last_name: str
    timezone: str = DEFAULT_TIMEZONE
    avatar_url: Optional[UrlStr] = None
    created_at: DateTimeStr
    updated_at: DateTimeStr

class Goal(BaseSchema):
    id: UUIDStr
    user_id: UUIDStr
    title: RequiredTitle
    description: Optional[str] = None
    type: GoalType
    parent_goal_id: Optional[UUIDStr] = None
    target_date: OptionalDateTimeStr = None
    is_completed: StrictBool = False
    completed_at: OptionalDateTimeStr = None
    created_at: DateTimeStr
    updated_at: DateTimeStr

class Task(BaseSchema):
    id: UUIDStr
    user_id: UUIDStr
    title: RequiredTitle
    description: Optional[str] = None
    priority: Priority
    rank: Optional[Rank] = None
    status: TaskStatus = TaskStatus.PENDING
    is_mit: StrictBool = False  # Most Important Task
    goal_id: Optional[UUIDStr] = None
    due_date: OptionalDateTimeStr = None
    completed_at: OptionalDateTimeStr = None
    estimated_minutes: Optional[PositiveMinutes] = None
    actual_minutes: Optional[PositiveMinutes] = None
    created_at: DateTimeStr
    updated_at: DateTimeStr

class WeeklyPlan(BaseSchema):
    id: UUIDStr
    user_id: UUIDStr
    week_start_date: DateStr
    week_end_date: DateStr
    focus_areas: Optional[List[str]] = None
    notes: Optional[str] = None
    created_at: DateTimeStr
    updated_at: DateTimeStr

class WeeklyPlanItem(BaseSchema):
    """A task scheduled into a week, with its own priority snapshot."""
    id: UUIDStr
    weekly_plan_id: UUIDStr
    task_id: UUIDStr
    priority: Priority
    rank: Optional[Rank] = None
    is_mit: StrictBool = False
    created_at: DateTimeStr

class Review(BaseSchema):
    id: UUIDStr
    user_id: UUIDStr
    type: ReviewType
    period_start: DateStr
    period_end: DateStr
    accomplishments: Optional[List[str]] = None
    challenges: Optional[List[str]] = None
    lessons_learned: Optional[List[str]] = None
    next_period_focus: Optional[List[str]] = None
    satisfaction_score: Optional[StrictInt] = Field(None, ge=1, le=10)
    notes: Optional[str] = None
    created_at: DateTimeStr
    updated_at: DateTimeStr


def insert_shape(row: Type[BaseModel], name: str) -> Type[BaseSchema]:
    generated = [field for field in SERVER_GENERATED_FIELDS if field in row.model_fields]
    return omit(row, *generated, name=name)


def update_shape(row: Type[BaseModel], name: str) -> Type[BaseSchema]:
    mutable = make_partial(omit(row, *IMMUTABLE_FIELDS), name=name)
    return extend(mutable, name=name, updated_at=(DateTimeStr, ...))


ProfileInsert = insert_shape(Profile, "ProfileInsert")
GoalInsert = insert_shape(Goal, "GoalInsert")
TaskInsert = insert_shape(Task, "TaskInsert")
WeeklyPlanInsert = insert_shape(WeeklyPlan, "WeeklyPlanInsert")
WeeklyPlanItemInsert = insert_shape(WeeklyPlanItem, "WeeklyPlanItemInsert")
ReviewInsert = insert_shape(Review, "ReviewInsert")

ProfileUpdate = update_shape(Profile, "ProfileUpdate")
GoalUpdate = update_shape(Goal, "GoalUpdate")
TaskUpdate = update_shape(Task, "TaskUpdate")
WeeklyPlanUpdate = update_shape(WeeklyPlan, "WeeklyPlanUpdate")
ReviewUpdate = update_shape(Review, "ReviewUpdate")
# Plan items have no updated_at column
WeeklyPlanItemUpdate = make_partial(WeeklyPlanItem, name="WeeklyPlanItemUpdate")


class TableShapes(NamedTuple):
    row: Type[BaseSchema]
    insert: Type[BaseSchema]
    update: Type[BaseSchema]

TABLES: Dict[str, TableShapes] = {
    "profiles": TableShapes(Profile, ProfileInsert, ProfileUpdate),
    "goals": TableShapes(Goal, GoalInsert, GoalUpdate),
    "tasks": TableShapes(Task, TaskInsert, TaskUpdate),
    "weekly_plans": TableShapes(WeeklyPlan, WeeklyPlanInsert, WeeklyPlanUpdate),
    "weekly_plan_items": TableShapes(WeeklyPlanItem, WeeklyPlanItemInsert, WeeklyPlanItemUpdate),
    "reviews": TableShapes(Review, ReviewInsert, ReviewUpdate),
}
