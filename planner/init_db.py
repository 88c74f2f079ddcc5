"""Create the planner tables (local development only; use Alembic in prod)."""
import asyncio
import logging
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncEngine
from planner.config import settings
from planner.core.logging import setup_logging
from planner.database import Base, engine
from planner.models import goal, profile, review, task, weekly_plan  # noqa: F401  registers tables

logger = logging.getLogger(__name__)

def is_duplicate_ddl_error(error: sa_exc.DBAPIError) -> bool:
    msg = str(getattr(error, "orig", error))
    return "duplicate key value violates unique constraint" in msg or "already exists" in msg

async def create_tables(db_engine: AsyncEngine = engine) -> None:
    # ignore duplicate-object errors from previous partial runs
    async with db_engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except (sa_exc.IntegrityError, sa_exc.ProgrammingError) as e:
            if is_duplicate_ddl_error(e):
                logger.warning("Ignored duplicate DDL error during create_all: %s", getattr(e, "orig", e))
            else:
                raise
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))

def main() -> None:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    asyncio.run(create_tables())

if __name__ == "__main__":
    main()
