from apscheduler.schedulers.asyncio import AsyncIOScheduler
from sqlalchemy.exc import SQLAlchemyError

from salesflow.core.config import SNAPSHOT_REFRESH_SECONDS
from salesflow.core.db import AsyncSessionLocal
from salesflow.services.process_flow.snapshot_store import snapshot_store
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)

scheduler = AsyncIOScheduler()


@scheduler.scheduled_job(
    "interval",
    seconds=SNAPSHOT_REFRESH_SECONDS,
    id="refresh_snapshot",
    max_instances=1,
    coalesce=True,
)
async def refresh_snapshot_job():
    async with AsyncSessionLocal() as db:
        try:
            await snapshot_store.refresh(db)
        except SQLAlchemyError:
            # Keep serving the previous snapshot until the next run
            logger.exception("Snapshot refresh failed")
