import calendar
from datetime import date, timedelta
from typing import Tuple
from planner.schemas.common import ReviewType
from planner.schemas.review import ReviewPeriod


def week_bounds(day: date) -> Tuple[str, str]:
    """Monday..Sunday (inclusive) of the week containing ``day``, as YYYY-MM-DD."""
    start = day - timedelta(days=day.weekday())
    end = start + timedelta(days=6)
    return start.isoformat(), end.isoformat()


def month_bounds(day: date) -> Tuple[str, str]:
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1).isoformat(), day.replace(day=last_day).isoformat()


def review_period(review_type: ReviewType, day: date) -> ReviewPeriod:
    if review_type == ReviewType.WEEKLY:
        start, end = week_bounds(day)
    else:
        start, end = month_bounds(day)
    return ReviewPeriod(start=start, end=end, type=review_type)


def previous_period(period: ReviewPeriod) -> ReviewPeriod:
    """The period immediately before ``period``, of the same type."""
    day_before = date.fromisoformat(period.start) - timedelta(days=1)
    return review_period(period.type, day_before)
