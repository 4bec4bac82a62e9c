from fastapi import APIRouter, Depends

from salesflow.schemas.process_flow.process_flow_schemas import WorkflowValidation
from salesflow.schemas.process_flow.snapshot_schemas import Snapshot
from salesflow.services.process_flow.workflow_validation import validate_workflow_step
from salesflow.utils.get_snapshot import get_snapshot
from salesflow.utils.response import success_response, APIResponse

router = APIRouter(
    prefix="/workflow",
    tags=["Workflow"],
)


@router.get(
    "/validate/{step}/{entity_id}",
    response_model=APIResponse[WorkflowValidation],
)
async def validate_workflow_step_api(
    step: str,
    entity_id: str,
    snapshot: Snapshot = Depends(get_snapshot),
):
    result = validate_workflow_step(snapshot, step, entity_id)
    return success_response(result.message, result)
