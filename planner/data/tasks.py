from typing import List
from planner.schemas.common import Priority
from planner.schemas.task import TaskTemplate

TASK_TEMPLATES: List[TaskTemplate] = [
    TaskTemplate(
        id="email-check",
        title="Check and respond to emails",
        description="Process inbox and respond to important messages",
        priority=Priority.B,
        estimated_minutes=30,
        category="Communication",
        tags=["daily", "communication"],
    ),
    TaskTemplate(
        id="weekly-review",
        title="Weekly review and planning",
        description="Review past week and plan upcoming week",
        priority=Priority.A,
        estimated_minutes=60,
        category="Planning",
        tags=["weekly", "review", "planning"],
    ),
    TaskTemplate(
        id="exercise",
        title="Exercise/Physical activity",
        description="Engage in physical exercise or activity",
        priority=Priority.A,
        estimated_minutes=45,
        category="Health",
        tags=["daily", "health", "exercise"],
    ),
    TaskTemplate(
        id="reading",
        title="Read for learning/development",
        description="Read books, articles, or educational content",
        priority=Priority.B,
        estimated_minutes=30,
        category="Learning",
        tags=["learning", "development"],
    ),
]


def templates_tagged(tag: str) -> List[TaskTemplate]:
    return [template for template in TASK_TEMPLATES if tag in template.tags]
