from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from salesflow.schemas.process_flow.process_flow_schemas import UrgentTask
from salesflow.schemas.process_flow.snapshot_schemas import Snapshot
from salesflow.services.process_flow.process_flow_service import urgent_tasks_for
from salesflow.utils.get_snapshot import get_snapshot, snapshot_meta
from salesflow.utils.response import success_response, APIResponse

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)


@router.get(
    "/urgent-tasks",
    response_model=APIResponse[List[UrgentTask]],
)
async def list_urgent_tasks_api(
    snapshot: Snapshot = Depends(get_snapshot),
    limit: Optional[int] = Query(None, ge=1, le=100),
    acknowledged: List[str] = Query([], description="Task keys already handled"),
):
    tasks = urgent_tasks_for(snapshot, limit=limit, acknowledged=acknowledged)
    return success_response(
        "Urgent tasks retrieved successfully",
        tasks,
        meta=snapshot_meta(),
    )
