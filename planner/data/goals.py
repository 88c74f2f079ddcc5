from typing import List
from planner.schemas.common import GoalType
from planner.schemas.goal import GoalTemplate

# Offered during onboarding to pre-fill the new goal form
GOAL_TEMPLATES: List[GoalTemplate] = [
    GoalTemplate(
        id="health-fitness",
        title="Improve Physical Health",
        description="Focus on exercise, nutrition, and overall wellness",
        type=GoalType.ANNUAL,
        category="Health",
        is_popular=True,
    ),
    GoalTemplate(
        id="career-growth",
        title="Advance Career",
        description="Develop skills, seek promotions, or change careers",
        type=GoalType.ANNUAL,
        category="Career",
        is_popular=True,
    ),
    GoalTemplate(
        id="financial-security",
        title="Build Financial Security",
        description="Save money, invest, and plan for the future",
        type=GoalType.THREE_YEAR,
        category="Finance",
        is_popular=True,
    ),
    GoalTemplate(
        id="relationships",
        title="Strengthen Relationships",
        description="Spend quality time with family and friends",
        type=GoalType.LIFE,
        category="Relationships",
        is_popular=True,
    ),
    GoalTemplate(
        id="learning",
        title="Learn New Skills",
        description="Acquire knowledge and develop new competencies",
        type=GoalType.ANNUAL,
        category="Education",
        is_popular=False,
    ),
]


def popular_goal_templates() -> List[GoalTemplate]:
    return [template for template in GOAL_TEMPLATES if template.is_popular]
