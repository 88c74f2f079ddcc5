from pydantic import Field, StrictBool
from typing import Dict, List, Literal, Optional
from planner.schemas.base import BaseSchema, extend, make_partial
from planner.schemas.common import (
    Description, GoalType, OptionalDateTimeStr, Percentage, SortDirection, Title, UUIDStr,
)
from planner.schemas.tables import Goal

class CreateGoal(BaseSchema):
    title: Title
    description: Optional[Description] = None
    type: GoalType
    parent_goal_id: Optional[UUIDStr] = None
    target_date: OptionalDateTimeStr = None

UpdateGoal = extend(
    make_partial(CreateGoal, name="UpdateGoal"),
    name="UpdateGoal",
    is_completed=(Optional[StrictBool], None),
)

class GoalWithChildren(Goal):
    children: Optional[List["GoalWithChildren"]] = None
    parent: Optional[Goal] = None

GoalWithChildren.model_rebuild()

class GoalHierarchy(BaseSchema):
    life_goals: List[GoalWithChildren] = Field(default_factory=list, alias="lifeGoals")
    three_year_goals: List[GoalWithChildren] = Field(default_factory=list, alias="threeYearGoals")
    annual_goals: List[GoalWithChildren] = Field(default_factory=list, alias="annualGoals")
    quarterly_goals: List[GoalWithChildren] = Field(default_factory=list, alias="quarterlyGoals")

class GoalProgress(BaseSchema):
    goal_id: UUIDStr
    total_tasks: int = Field(..., ge=0)
    completed_tasks: int = Field(..., ge=0)
    progress_percentage: Percentage
    last_activity: OptionalDateTimeStr = None

class GoalFilters(BaseSchema):
    type: Optional[GoalType] = None
    is_completed: Optional[StrictBool] = None
    has_target_date: Optional[StrictBool] = None
    parent_goal_id: Optional[UUIDStr] = None
    search: Optional[str] = None

class GoalSort(BaseSchema):
    field: Literal["created_at", "updated_at", "target_date", "title"] = "created_at"
    direction: SortDirection = "desc"

# Advisory caps shown on the dashboard, never enforced on write
GOAL_LIMITS: Dict[GoalType, int] = {
    GoalType.LIFE: 3,
    GoalType.THREE_YEAR: 10,
    GoalType.ANNUAL: 5,
    GoalType.QUARTERLY: 20,
}

class GoalTierSummary(BaseSchema):
    type: GoalType
    count: int
    limit: int
    over_limit: bool  # count > limit

class GoalTemplate(BaseSchema):
    id: str
    title: str
    description: str
    type: GoalType
    category: str
    is_popular: bool = Field(..., alias="isPopular")
