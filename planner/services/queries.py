"""
Listing queries for goals, tasks and reviews.

Each builder turns the filter / sort / pagination schemas into a SQLAlchemy
``Select`` scoped to a single user. Statements are returned unexecuted.
"""
import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Optional
from sqlalchemy import Select, and_, not_, or_, select
from planner.models.goal import Goal
from planner.models.review import Review
from planner.models.task import Task
from planner.schemas.common import Pagination, TaskStatus, parse_date, parse_timestamp
from planner.schemas.goal import GoalFilters, GoalSort
from planner.schemas.review import ReviewFilters, ReviewSort
from planner.schemas.task import TaskFilters, TaskSort

CLOSED_STATUSES = (TaskStatus.COMPLETED.value, TaskStatus.CANCELLED.value)


def _order_and_page(stmt: Select, column, direction: str, pagination: Optional[Pagination]) -> Select:
    stmt = stmt.order_by(column.desc() if direction == "desc" else column.asc())
    if pagination is not None:
        stmt = stmt.offset(pagination.offset).limit(pagination.limit)
    return stmt


def _presence(column, present: bool):
    return column.isnot(None) if present else column.is_(None)


def _text_search(term: str, *columns):
    return or_(*(column.icontains(term, autoescape=True) for column in columns))


def _date_bound(value: str, upper: bool) -> date:
    # DateStr only checks ranges, so a bound may name a day past the month's end;
    # treat it as the month's last day (upper) or the day after it (lower)
    try:
        return parse_date(value)
    except ValueError:
        year, month, _ = (int(part) for part in value.split("-"))
        last_day = date(year, month, calendar.monthrange(year, month)[1])
        return last_day if upper else last_day + timedelta(days=1)


def goal_query(
    user_id: str,
    filters: Optional[GoalFilters] = None,
    sort: Optional[GoalSort] = None,
    pagination: Optional[Pagination] = None,
) -> Select:
    filters = filters or GoalFilters()
    sort = sort or GoalSort()

    stmt = select(Goal).where(Goal.user_id == user_id)
    if filters.type is not None:
        stmt = stmt.where(Goal.type == filters.type.value)
    if filters.is_completed is not None:
        stmt = stmt.where(Goal.is_completed.is_(filters.is_completed))
    if filters.has_target_date is not None:
        stmt = stmt.where(_presence(Goal.target_date, filters.has_target_date))
    if filters.parent_goal_id is not None:
        stmt = stmt.where(Goal.parent_goal_id == filters.parent_goal_id)
    if filters.search:
        stmt = stmt.where(_text_search(filters.search, Goal.title, Goal.description))

    return _order_and_page(stmt, getattr(Goal, sort.field), sort.direction, pagination)


def task_query(
    user_id: str,
    filters: Optional[TaskFilters] = None,
    sort: Optional[TaskSort] = None,
    pagination: Optional[Pagination] = None,
    now: Optional[datetime] = None,
) -> Select:
    filters = filters or TaskFilters()
    sort = sort or TaskSort()
    now = now or datetime.now(timezone.utc)

    stmt = select(Task).where(Task.user_id == user_id)
    if filters.priority is not None:
        stmt = stmt.where(Task.priority == filters.priority.value)
    if filters.status is not None:
        stmt = stmt.where(Task.status == filters.status.value)
    if filters.is_mit is not None:
        stmt = stmt.where(Task.is_mit.is_(filters.is_mit))
    if filters.goal_id is not None:
        stmt = stmt.where(Task.goal_id == filters.goal_id)
    if filters.has_due_date is not None:
        stmt = stmt.where(_presence(Task.due_date, filters.has_due_date))
    if filters.is_overdue is not None:
        overdue = and_(
            Task.due_date.isnot(None),
            Task.due_date < now,
            Task.status.notin_(CLOSED_STATUSES),
        )
        stmt = stmt.where(overdue if filters.is_overdue else not_(overdue))
    if filters.search:
        stmt = stmt.where(_text_search(filters.search, Task.title, Task.description))
    if filters.date_range is not None:
        stmt = stmt.where(
            Task.due_date >= parse_timestamp(filters.date_range.start),
            Task.due_date <= parse_timestamp(filters.date_range.end),
        )

    return _order_and_page(stmt, getattr(Task, sort.field), sort.direction, pagination)


def review_query(
    user_id: str,
    filters: Optional[ReviewFilters] = None,
    sort: Optional[ReviewSort] = None,
    pagination: Optional[Pagination] = None,
) -> Select:
    """
    Reviews for ``user_id``.

    ``date_range`` keeps reviews whose whole period lies inside the range.
    A bound past the end of its month, such as 2024-02-30, falls on the month boundary.
    """
    filters = filters or ReviewFilters()
    sort = sort or ReviewSort()

    stmt = select(Review).where(Review.user_id == user_id)
    if filters.type is not None:
        stmt = stmt.where(Review.type == filters.type.value)
    if filters.date_range is not None:
        stmt = stmt.where(
            Review.period_start >= _date_bound(filters.date_range.start, upper=False),
            Review.period_end <= _date_bound(filters.date_range.end, upper=True),
        )
    if filters.satisfaction_range is not None:
        stmt = stmt.where(
            Review.satisfaction_score.between(
                filters.satisfaction_range.min, filters.satisfaction_range.max
            )
        )

    return _order_and_page(stmt, getattr(Review, sort.field), sort.direction, pagination)
