import time
import logging
from fastapi import Request

from salesflow.services.process_flow.snapshot_store import snapshot_store

logger = logging.getLogger("access")


async def request_logging_middleware(request: Request, call_next):
    started = time.perf_counter()

    response = await call_next(request)

    elapsed_ms = (time.perf_counter() - started) * 1000
    # Version of the snapshot the response was computed from (0 = none loaded)
    snapshot_version = snapshot_store.version
    response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.2f}"
    response.headers["X-Snapshot-Version"] = str(snapshot_version)

    log = logger.warning if response.status_code >= 500 else logger.info
    log(
        "%s %s",
        request.method,
        request.url.path,
        extra={
            "client_addr": request.client.host if request.client else "unknown",
            "status_code": response.status_code,
            "process_time_ms": round(elapsed_ms, 2),
            "snapshot_version": snapshot_version,
        },
    )

    return response
