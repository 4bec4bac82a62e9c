from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from salesflow.core.config import STRICT_QUOTATION_STATUS
from salesflow.core.exceptions import UnknownQuotationStatusError
from salesflow.schemas.process_flow.process_flow_schemas import (
    ActivityEvent,
    ProcessFlowState,
    StepOverview,
)
from salesflow.schemas.process_flow.snapshot_schemas import Snapshot
from salesflow.services.process_flow.entity_resolver import resolve_entities
from salesflow.services.process_flow.process_flow_service import (
    activity_timeline_for,
    recompute,
)
from salesflow.services.process_flow.stage_calculator import calculate_stage
from salesflow.services.process_flow.step_overview import build_step_overview
from salesflow.utils.get_snapshot import get_snapshot, snapshot_meta
from salesflow.utils.logger import get_logger
from salesflow.utils.response import success_response, APIResponse

router = APIRouter(
    prefix="/process-flow",
    tags=["Process Flow"],
)
logger = get_logger(__name__)


@router.get(
    "",
    response_model=APIResponse[ProcessFlowState],
)
async def get_process_flow_api(
    snapshot: Snapshot = Depends(get_snapshot),
    customer_id: Optional[str] = Query(None, description="Scope to one customer"),
    quotation_id: Optional[str] = Query(None, description="Quotation id or number"),
    task_limit: Optional[int] = Query(None, ge=1, le=100),
    acknowledged: List[str] = Query([], description="Task keys already handled"),
):
    state = recompute(
        snapshot,
        customer_id,
        quotation_id,
        task_limit=task_limit,
        acknowledged=acknowledged,
    )

    if (
        STRICT_QUOTATION_STATUS
        and state.next_action is not None
        and not state.next_action.recognized
    ):
        raise UnknownQuotationStatusError(
            state.target_quotation.id,
            state.unknown_status,
        )

    return success_response(
        "Process flow retrieved successfully",
        state,
        meta=snapshot_meta(),
    )


@router.get(
    "/activities",
    response_model=APIResponse[List[ActivityEvent]],
)
async def list_process_flow_activities_api(
    snapshot: Snapshot = Depends(get_snapshot),
    customer_id: Optional[str] = Query(None),
    quotation_id: Optional[str] = Query(None),
):
    activities = activity_timeline_for(snapshot, customer_id, quotation_id)
    return success_response(
        "Process flow activities retrieved successfully",
        activities,
        meta=snapshot_meta(),
    )


@router.get(
    "/steps",
    response_model=APIResponse[List[StepOverview]],
)
async def list_process_flow_steps_api(
    snapshot: Snapshot = Depends(get_snapshot),
    customer_id: Optional[str] = Query(None),
    quotation_id: Optional[str] = Query(None),
):
    stage = calculate_stage(resolve_entities(snapshot, customer_id, quotation_id))
    return success_response(
        "Workflow steps retrieved successfully",
        build_step_overview(stage.current_step, stage.completed_steps),
    )
