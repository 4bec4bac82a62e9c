from sqlalchemy.exc import SQLAlchemyError

from salesflow.core.db import AsyncSessionLocal
from salesflow.core.exceptions import SnapshotUnavailableError
from salesflow.schemas.process_flow.snapshot_schemas import Snapshot
from salesflow.services.process_flow.snapshot_store import snapshot_store
from salesflow.utils.logger import get_logger

logger = get_logger("process_flow.snapshot")


async def get_snapshot() -> Snapshot:
    # Warm store: no database session at all
    snapshot = snapshot_store.snapshot
    if snapshot is not None:
        return snapshot

    logger.info("Snapshot store empty, loading on demand")
    try:
        async with AsyncSessionLocal() as db:
            return await snapshot_store.get_or_load(db)
    except SQLAlchemyError as exc:
        logger.exception("On-demand snapshot load failed")
        raise SnapshotUnavailableError(type(exc).__name__) from exc


def snapshot_meta() -> dict:
    return {
        "snapshot_version": snapshot_store.version,
        "refreshed_at": (
            snapshot_store.refreshed_at.isoformat()
            if snapshot_store.refreshed_at
            else None
        ),
    }
