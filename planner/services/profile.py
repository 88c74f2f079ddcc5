import logging
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession
from planner.config import settings
from planner.models.profile import Profile
from planner.schemas.auth import AuthUser, ProfileForm
from planner.schemas.common import parse_timestamp
from planner.schemas.tables import ProfileInsert, ProfileUpdate

logger = logging.getLogger(__name__)


def profile_for_new_user(user: AuthUser) -> ProfileInsert:
    """Insert payload for a first login, named from the sign-up metadata."""
    metadata = user.user_metadata or {}
    return ProfileInsert(
        user_id=user.id,
        first_name=metadata.get("first_name") or "",
        last_name=metadata.get("last_name") or "",
        timezone=settings.DEFAULT_TIMEZONE,
    )


async def ensure_profile(db: AsyncSession, user: AuthUser) -> bool:
    """
    Create the user's profile if it does not exist yet.

    A single INSERT ... ON CONFLICT DO NOTHING, so two first logins racing
    each other still leave exactly one row. Returns True when this call
    created the profile.
    """
    payload = profile_for_new_user(user)
    stmt = (
        insert(Profile)
        .values(**payload.model_dump(exclude_none=True))
        .on_conflict_do_nothing(index_elements=[Profile.user_id])
        .returning(Profile.id)
    )
    result = await db.execute(stmt)
    await db.commit()

    created = result.scalar_one_or_none() is not None
    if created:
        logger.info("Created profile for user %s", user.id)
    else:
        logger.debug("Profile already exists for user %s", user.id)
    return created


def profile_update_from_form(form: ProfileForm, now: Optional[datetime] = None) -> ProfileUpdate:
    """Only the fields present on the submitted form; an omitted avatar or timezone keeps its stored value."""
    now = now or datetime.now(timezone.utc)
    changes = form.model_dump(include=form.model_fields_set)
    return ProfileUpdate(**changes, updated_at=now.isoformat())


async def update_profile(db: AsyncSession, user_id: str, form: ProfileForm, now: Optional[datetime] = None) -> bool:
    """Apply the settings form to the user's profile. Returns False when no profile matched."""
    changes = profile_update_from_form(form, now).model_dump(exclude_unset=True)
    changes["updated_at"] = parse_timestamp(changes["updated_at"])

    result = await db.execute(
        update(Profile).where(Profile.user_id == user_id).values(**changes)
    )
    await db.commit()

    if not result.rowcount:
        logger.warning("No profile to update for user %s", user_id)
        return False
    return True
