import logging
from typing import Dict, Iterable, List, Mapping, Optional, Union
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from planner.models.goal import Goal as GoalRow
from planner.schemas.common import GoalType
from planner.schemas.goal import GOAL_LIMITS, GoalHierarchy, GoalTierSummary, GoalWithChildren
from planner.schemas.tables import Goal

logger = logging.getLogger(__name__)

# Broadest first
GOAL_TIER_ORDER: List[GoalType] = [
    GoalType.LIFE,
    GoalType.THREE_YEAR,
    GoalType.ANNUAL,
    GoalType.QUARTERLY,
]


def is_broader_tier(parent: GoalType, child: GoalType) -> bool:
    """Whether ``parent`` sits above ``child`` in the goal tiers.

    Advisory: goals may be parented under any tier.
    """
    return GOAL_TIER_ORDER.index(parent) < GOAL_TIER_ORDER.index(child)


def _creates_cycle(child_id: str, parent_id: str, links: Dict[str, str]) -> bool:
    # Follow the links accepted so far from the would-be parent back to the root
    seen = set()
    current: Optional[str] = parent_id
    while current is not None and current not in seen:
        if current == child_id:
            return True
        seen.add(current)
        current = links.get(current)
    return False


def build_goal_hierarchy(goals: Iterable[Goal]) -> GoalHierarchy:
    """Group goals by tier, linking each to its parent and children.

    Parent links are not validated on write, so a link that would close a
    cycle (including a goal naming itself) is left out; the goal listed first
    keeps its parent.
    """
    goals = list(goals)
    nodes: Dict[str, GoalWithChildren] = {
        goal.id: GoalWithChildren(**goal.model_dump(), children=[]) for goal in goals
    }
    by_id = {goal.id: goal for goal in goals}
    links: Dict[str, str] = {}

    for node in nodes.values():
        parent_id = node.parent_goal_id
        if not parent_id or parent_id not in nodes or _creates_cycle(node.id, parent_id, links):
            continue
        links[node.id] = parent_id
        node.parent = by_id[parent_id]
        nodes[parent_id].children.append(node)

    tiers: Dict[GoalType, List[GoalWithChildren]] = {tier: [] for tier in GOAL_TIER_ORDER}
    for node in nodes.values():
        tiers[node.type].append(node)

    return GoalHierarchy(
        life_goals=tiers[GoalType.LIFE],
        three_year_goals=tiers[GoalType.THREE_YEAR],
        annual_goals=tiers[GoalType.ANNUAL],
        quarterly_goals=tiers[GoalType.QUARTERLY],
    )


def summarize_goal_tiers(counts: Mapping[Union[GoalType, str], int]) -> List[GoalTierSummary]:
    """Per-tier counts against the advisory GOAL_LIMITS, for the dashboard tiles."""
    normalized = {GoalType(key): value for key, value in counts.items()}
    summary = []
    for tier in GOAL_TIER_ORDER:
        count = normalized.get(tier, 0)
        limit = GOAL_LIMITS[tier]
        summary.append(GoalTierSummary(type=tier, count=count, limit=limit, over_limit=count > limit))
    return summary


async def get_goal_tier_summary(db: AsyncSession, user_id: str) -> List[GoalTierSummary]:
    result = await db.execute(
        select(GoalRow.type, func.count(GoalRow.id))
        .where(GoalRow.user_id == user_id)
        .group_by(GoalRow.type)
    )
    counts = {goal_type: count for goal_type, count in result.all()}
    summary = summarize_goal_tiers(counts)

    for tier in summary:
        if tier.over_limit:
            logger.info("User %s has %d %s goals (suggested max %d)", user_id, tier.count, tier.type.value, tier.limit)
    return summary
