from datetime import datetime, timezone
from typing import Iterable, Optional
from planner.schemas.common import Priority, TaskStatus, parse_timestamp
from planner.schemas.goal import GoalProgress
from planner.schemas.tables import Task
from planner.schemas.task import PriorityBreakdown, TaskAnalytics

CLOSED_STATUSES = (TaskStatus.COMPLETED, TaskStatus.CANCELLED)


def _percent(part: int, whole: int) -> float:
    if not whole:
        return 0.0
    return round(part / whole * 100, 1)


def is_overdue(task: Task, now: datetime) -> bool:
    if task.status in CLOSED_STATUSES or task.due_date is None:
        return False
    return parse_timestamp(task.due_date) < now


def calculate_goal_progress(goal_id: str, tasks: Iterable[Task]) -> GoalProgress:
    """Share of the goal's tasks that are completed (0 when it has none)."""
    linked = [task for task in tasks if task.goal_id == goal_id]
    completed = sum(1 for task in linked if task.status == TaskStatus.COMPLETED)
    last_activity = max((task.updated_at for task in linked), key=parse_timestamp, default=None)

    return GoalProgress(
        goal_id=goal_id,
        total_tasks=len(linked),
        completed_tasks=completed,
        progress_percentage=_percent(completed, len(linked)),
        last_activity=last_activity,
    )


def average_completion_minutes(tasks: Iterable[Task]) -> Optional[float]:
    durations = [
        (parse_timestamp(task.completed_at) - parse_timestamp(task.created_at)).total_seconds() / 60
        for task in tasks
        if task.status == TaskStatus.COMPLETED and task.completed_at
    ]
    if not durations:
        return None
    return round(sum(durations) / len(durations), 1)


def calculate_task_analytics(tasks: Iterable[Task], now: Optional[datetime] = None) -> TaskAnalytics:
    """
    Summarize a user's tasks.

    Open tasks (pending or in progress) are counted either as overdue, when
    their due date has passed, or as pending, never both. Cancelled tasks only
    count towards the total and the priority breakdown.
    """
    now = now or datetime.now(timezone.utc)
    tasks = list(tasks)

    completed = 0
    overdue = 0
    pending = 0
    breakdown = {priority.value: 0 for priority in Priority}
    mits = 0
    mits_completed = 0

    for task in tasks:
        breakdown[task.priority.value] += 1
        if task.is_mit:
            mits += 1
        if task.status == TaskStatus.COMPLETED:
            completed += 1
            if task.is_mit:
                mits_completed += 1
        elif task.status == TaskStatus.CANCELLED:
            continue
        elif is_overdue(task, now):
            overdue += 1
        else:
            pending += 1

    return TaskAnalytics(
        total_tasks=len(tasks),
        completed_tasks=completed,
        pending_tasks=pending,
        overdue_tasks=overdue,
        completion_rate=_percent(completed, len(tasks)),
        average_completion_time=average_completion_minutes(tasks),
        priority_breakdown=PriorityBreakdown(**breakdown),
        mit_completion_rate=_percent(mits_completed, mits),
    )
