from pydantic import Field, StrictInt
from typing import Annotated, List, Literal, Optional
from planner.schemas.base import BaseSchema, make_partial
from planner.schemas.common import (
    DateStr, NonEmptyStr, OptionalDateTimeStr, Percentage, ReviewType, SortDirection,
    UUIDStr, constrained_text,
)

MAX_REVIEW_ENTRIES = 10

ReviewEntries = Annotated[List[NonEmptyStr], Field(max_length=MAX_REVIEW_ENTRIES)]
SatisfactionScore = Annotated[StrictInt, Field(ge=1, le=10)]

# The free-text lists of a review, in the order prompts are asked
ReviewCategory = Literal["accomplishments", "challenges", "lessons_learned", "next_period_focus"]
REVIEW_CATEGORIES = ("accomplishments", "challenges", "lessons_learned", "next_period_focus")

class CreateReview(BaseSchema):
    type: ReviewType
    period_start: DateStr
    period_end: DateStr
    accomplishments: Optional[ReviewEntries] = None
    challenges: Optional[ReviewEntries] = None
    lessons_learned: Optional[ReviewEntries] = None
    next_period_focus: Optional[ReviewEntries] = None
    satisfaction_score: Optional[SatisfactionScore] = None
    notes: Optional[constrained_text(max_length=2000)] = None

UpdateReview = make_partial(CreateReview, name="UpdateReview")

class ReviewPrompt(BaseSchema):
    id: str
    question: str
    category: ReviewCategory
    type: ReviewType
    # advisory: nothing rejects a review that leaves a required prompt unanswered
    is_required: bool = Field(..., alias="isRequired")

class ProductivityIndicators(BaseSchema):
    task_completion_rate: Percentage
    mit_success_rate: Percentage
    goal_progress_rate: Percentage

class ReviewInsights(BaseSchema):
    review_id: UUIDStr
    satisfaction_trend: Literal["improving", "declining", "stable"]
    common_challenges: List[str]
    recurring_themes: List[str]
    goal_alignment_score: Percentage
    productivity_indicators: ProductivityIndicators

class DateRange(BaseSchema):
    start: DateStr
    end: DateStr

class SatisfactionRange(BaseSchema):
    min: SatisfactionScore
    max: SatisfactionScore

class ReviewFilters(BaseSchema):
    type: Optional[ReviewType] = None
    date_range: Optional[DateRange] = None
    satisfaction_range: Optional[SatisfactionRange] = None

class ReviewSort(BaseSchema):
    field: Literal["created_at", "period_start", "satisfaction_score"] = "period_start"
    direction: SortDirection = "desc"

class ReviewStats(BaseSchema):
    total_reviews: int
    weekly_reviews: int
    monthly_reviews: int
    average_satisfaction: float = Field(..., ge=0, le=10)
    completion_streak: int
    last_review_date: OptionalDateTimeStr = None
    next_review_due: OptionalDateTimeStr = None

class ReviewPeriod(BaseSchema):
    start: DateStr
    end: DateStr
    type: ReviewType

class ReviewTemplate(BaseSchema):
    type: ReviewType
    prompts: List[ReviewPrompt]
    estimated_minutes: int = Field(..., alias="estimatedMinutes")
    description: str
