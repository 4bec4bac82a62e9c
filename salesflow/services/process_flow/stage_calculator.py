from salesflow.constants.workflow_steps import INITIAL_STEP, WorkflowStep
from salesflow.schemas.process_flow.process_flow_schemas import (
    ResolvedEntities,
    StageResult,
)
from salesflow.services.process_flow.status_registry import describe_status


def calculate_stage(resolved: ResolvedEntities) -> StageResult:
    """
    Turn resolved entity presence plus the quotation status into the current
    step and the set of completed steps.

    Rules run in pipeline order and only ever add completed steps. A missing
    enquiry leaves step 2 open but does not stop later rules.
    """
    completed: set[int] = set()
    current_step = int(INITIAL_STEP)
    next_action = None
    unknown_status = None

    if resolved.customer is not None:
        completed.add(WorkflowStep.customer)
        current_step = int(WorkflowStep.enquiry)

    if resolved.related_enquiry is not None:
        completed.add(WorkflowStep.enquiry)
        current_step = int(WorkflowStep.sourcing)

    if resolved.target_quotation is not None:
        completed.add(WorkflowStep.sourcing)
        current_step = int(WorkflowStep.quotation)

        next_action = describe_status(resolved.target_quotation.status)
        completed.update(next_action.extra_completed_steps)
        current_step = next_action.current_step
        if not next_action.recognized:
            unknown_status = resolved.target_quotation.status or ""

    if resolved.related_sales_order is not None:
        completed.add(WorkflowStep.sales_order)
        current_step = int(WorkflowStep.supplier_lpo)

    return StageResult(
        current_step=current_step,
        completed_steps=tuple(sorted(int(s) for s in completed)),
        next_action=next_action,
        unknown_status=unknown_status,
    )
