# salesflow/services/process_flow/snapshot_store.py
"""
Holds the most recent entity snapshot for request handlers.

The scheduler replaces the whole snapshot on each refresh; readers always
get a complete, immutable one together with its version.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from salesflow.schemas.process_flow.snapshot_schemas import Snapshot
from salesflow.services.process_flow.snapshot_loader import load_snapshot
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)


class SnapshotStore:
    def __init__(self):
        self._snapshot: Optional[Snapshot] = None
        self._version = 0
        self._refreshed_at: Optional[datetime] = None
        self._lock = asyncio.Lock()

    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    @property
    def version(self) -> int:
        return self._version

    @property
    def refreshed_at(self) -> Optional[datetime]:
        return self._refreshed_at

    def replace(self, snapshot: Snapshot) -> int:
        self._snapshot = snapshot
        self._version += 1
        self._refreshed_at = datetime.now(timezone.utc)
        return self._version

    async def _load(self, db: AsyncSession) -> Snapshot:
        snapshot = await load_snapshot(db)
        version = self.replace(snapshot)
        logger.info("Snapshot refreshed", extra={"snapshot_version": version})
        return snapshot

    async def refresh(self, db: AsyncSession) -> Snapshot:
        async with self._lock:
            return await self._load(db)

    async def get_or_load(self, db: AsyncSession) -> Snapshot:
        if self._snapshot is not None:
            return self._snapshot
        async with self._lock:
            # Another cold request may have loaded it while we waited
            if self._snapshot is not None:
                return self._snapshot
            return await self._load(db)

    def clear(self) -> None:
        self._snapshot = None
        self._refreshed_at = None


snapshot_store = SnapshotStore()
