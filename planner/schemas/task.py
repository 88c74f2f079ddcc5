from pydantic import Field, StrictBool, StrictInt
from typing import List, Literal, Optional
from planner.schemas.base import BaseSchema, extend, make_partial
from planner.schemas.common import (
    DateStr, DateTimeStr, Description, GoalType, OptionalDateTimeStr, Percentage,
    PositiveMinutes, Priority, Rank, SortDirection, TaskStatus, Title, UUIDStr,
)
from planner.schemas.tables import Task

MAX_ESTIMATED_MINUTES = 480  # 8 hours
MAX_DAILY_MITS = 3

class CreateTask(BaseSchema):
    title: Title
    description: Optional[Description] = None
    priority: Priority
    rank: Optional[Rank] = None
    is_mit: StrictBool = False
    goal_id: Optional[UUIDStr] = None
    due_date: OptionalDateTimeStr = None
    estimated_minutes: Optional[StrictInt] = Field(None, gt=0, le=MAX_ESTIMATED_MINUTES)

UpdateTask = extend(
    make_partial(CreateTask, name="UpdateTask"),
    name="UpdateTask",
    status=(Optional[TaskStatus], None),
    actual_minutes=(Optional[PositiveMinutes], None),
)

class GoalSummary(BaseSchema):
    id: str
    title: str
    type: GoalType

class TaskWithGoal(Task):
    goal: Optional[GoalSummary] = None

class DateTimeRange(BaseSchema):
    start: DateTimeStr
    end: DateTimeStr

class TaskFilters(BaseSchema):
    priority: Optional[Priority] = None
    status: Optional[TaskStatus] = None
    is_mit: Optional[StrictBool] = None
    goal_id: Optional[UUIDStr] = None
    has_due_date: Optional[StrictBool] = None
    is_overdue: Optional[StrictBool] = None
    search: Optional[str] = None
    date_range: Optional[DateTimeRange] = None

class TaskSort(BaseSchema):
    field: Literal["created_at", "updated_at", "due_date", "priority", "title"] = "created_at"
    direction: SortDirection = "desc"

class SwissCheeseNudge(BaseSchema):
    """A small time-boxed first step suggested for a task being put off."""
    task_id: UUIDStr
    suggested_duration: Literal["5", "10", "15"]  # minutes
    suggested_action: str
    reason: str

class TimeBlock(BaseSchema):
    task_id: UUIDStr
    start_time: DateTimeStr
    duration_minutes: StrictInt = Field(..., gt=0, le=MAX_ESTIMATED_MINUTES)
    is_completed: StrictBool = False

class PriorityBreakdown(BaseSchema):
    A: int = 0
    B: int = 0
    C: int = 0

class TaskAnalytics(BaseSchema):
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    overdue_tasks: int
    completion_rate: Percentage
    average_completion_time: Optional[float] = None  # minutes
    priority_breakdown: PriorityBreakdown
    mit_completion_rate: Percentage

class DailyMITs(BaseSchema):
    date: DateStr
    tasks: List[UUIDStr] = Field(..., max_length=MAX_DAILY_MITS)

class TaskTemplate(BaseSchema):
    id: str
    title: str
    description: str
    priority: Priority
    estimated_minutes: int
    category: str
    tags: List[str]
