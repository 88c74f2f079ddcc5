from typing import List
from planner.schemas.common import ReviewType
from planner.schemas.review import CreateReview, ReviewPrompt, ReviewTemplate


def _prompt(id: str, question: str, category: str, type: ReviewType, required: bool) -> ReviewPrompt:
    return ReviewPrompt(id=id, question=question, category=category, type=type, is_required=required)


WEEKLY_REVIEW_PROMPTS: List[ReviewPrompt] = [
    _prompt("weekly-accomplishments-1", "What were your biggest wins this week?",
            "accomplishments", ReviewType.WEEKLY, True),
    _prompt("weekly-accomplishments-2", "Which goals did you make progress on?",
            "accomplishments", ReviewType.WEEKLY, False),
    _prompt("weekly-challenges-1", "What obstacles did you encounter?",
            "challenges", ReviewType.WEEKLY, True),
    _prompt("weekly-challenges-2", "What took longer than expected?",
            "challenges", ReviewType.WEEKLY, False),
    _prompt("weekly-lessons-1", "What did you learn about yourself this week?",
            "lessons_learned", ReviewType.WEEKLY, True),
    _prompt("weekly-lessons-2", "What would you do differently?",
            "lessons_learned", ReviewType.WEEKLY, False),
    _prompt("weekly-focus-1", "What are your top 3 priorities for next week?",
            "next_period_focus", ReviewType.WEEKLY, True),
]

MONTHLY_REVIEW_PROMPTS: List[ReviewPrompt] = [
    _prompt("monthly-accomplishments-1", "What were your major achievements this month?",
            "accomplishments", ReviewType.MONTHLY, True),
    _prompt("monthly-accomplishments-2", "Which annual goals did you advance?",
            "accomplishments", ReviewType.MONTHLY, False),
    _prompt("monthly-challenges-1", "What were the biggest challenges you faced?",
            "challenges", ReviewType.MONTHLY, True),
    _prompt("monthly-challenges-2", "What patterns of difficulty emerged?",
            "challenges", ReviewType.MONTHLY, False),
    _prompt("monthly-lessons-1", "What important insights did you gain?",
            "lessons_learned", ReviewType.MONTHLY, True),
    _prompt("monthly-lessons-2", "How has your approach to time management evolved?",
            "lessons_learned", ReviewType.MONTHLY, False),
    _prompt("monthly-focus-1", "What are your key focus areas for next month?",
            "next_period_focus", ReviewType.MONTHLY, True),
]

REVIEW_TEMPLATES: List[ReviewTemplate] = [
    ReviewTemplate(
        type=ReviewType.WEEKLY,
        prompts=WEEKLY_REVIEW_PROMPTS,
        estimated_minutes=15,
        description="A quick weekly reflection to assess progress and plan ahead",
    ),
    ReviewTemplate(
        type=ReviewType.MONTHLY,
        prompts=MONTHLY_REVIEW_PROMPTS,
        estimated_minutes=30,
        description="A comprehensive monthly review to evaluate goals and adjust strategy",
    ),
]


def template_for(review_type: ReviewType) -> ReviewTemplate:
    for template in REVIEW_TEMPLATES:
        if template.type == review_type:
            return template
    raise KeyError(review_type)


def unanswered_required_prompts(review: CreateReview) -> List[ReviewPrompt]:
    """Required prompts whose category has no entries in ``review``.

    Informational only; a review with unanswered prompts is still valid.
    """
    prompts = template_for(review.type).prompts
    return [
        prompt for prompt in prompts
        if prompt.is_required and not getattr(review, prompt.category)
    ]
