# salesflow/services/process_flow/process_flow_service.py

from typing import Iterable, List, Optional

from salesflow.constants.workflow_steps import STEP_NAMES, WorkflowStep
from salesflow.core.config import URGENT_TASK_LIMIT
from salesflow.schemas.process_flow.process_flow_schemas import (
    ActivityEvent,
    ProcessFlowState,
    UrgentTask,
)
from salesflow.schemas.process_flow.snapshot_schemas import Snapshot
from salesflow.services.process_flow.activity_timeline import build_activity_timeline
from salesflow.services.process_flow.entity_resolver import resolve_entities
from salesflow.services.process_flow.stage_calculator import calculate_stage
from salesflow.services.process_flow.step_overview import (
    build_step_overview,
    progress_percent,
)
from salesflow.services.process_flow.urgent_tasks import (
    derive_urgent_tasks,
    filter_acknowledged,
)
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)


def recompute(
    snapshot: Snapshot,
    customer_id: Optional[str] = None,
    quotation_id: Optional[str] = None,
    *,
    task_limit: Optional[int] = None,
    acknowledged: Iterable[str] = (),
) -> ProcessFlowState:
    """
    Full process-flow projection of one snapshot.

    Pure: nothing is cached or written, so callers re-run it whenever their
    snapshot changes and may memoize on the snapshot themselves.
    """
    resolved = resolve_entities(snapshot, customer_id, quotation_id)
    stage = calculate_stage(resolved)

    state = ProcessFlowState(
        current_step=stage.current_step,
        current_step_name=STEP_NAMES[WorkflowStep(stage.current_step)],
        completed_steps=stage.completed_steps,
        progress_percent=progress_percent(stage.current_step, stage.completed_steps),
        next_action=stage.next_action,
        unknown_status=stage.unknown_status,
        target_quotation=resolved.target_quotation,
        customer=resolved.customer,
        related_enquiry=resolved.related_enquiry,
        related_sales_order=resolved.related_sales_order,
        activity_timeline=list(build_activity_timeline(resolved)),
        urgent_tasks=urgent_tasks_for(
            snapshot, limit=task_limit, acknowledged=acknowledged
        ),
        steps=build_step_overview(stage.current_step, stage.completed_steps),
    )

    logger.debug(
        "Process flow recomputed",
        extra={
            "current_step": state.current_step,
            "completed_steps": list(state.completed_steps),
        },
    )
    return state


def activity_timeline_for(
    snapshot: Snapshot,
    customer_id: Optional[str] = None,
    quotation_id: Optional[str] = None,
) -> List[ActivityEvent]:
    resolved = resolve_entities(snapshot, customer_id, quotation_id)
    return list(build_activity_timeline(resolved))


def urgent_tasks_for(
    snapshot: Snapshot,
    *,
    limit: Optional[int] = None,
    acknowledged: Iterable[str] = (),
) -> List[UrgentTask]:
    limit = URGENT_TASK_LIMIT if limit is None else limit
    acknowledged = set(acknowledged)

    # Acknowledged tasks must not use up the cap
    uncapped = len(snapshot.quotations) + len(snapshot.sales_orders)
    tasks = derive_urgent_tasks(
        snapshot.quotations,
        snapshot.sales_orders,
        customers=snapshot.customers,
        limit=uncapped if acknowledged else limit,
    )
    return filter_acknowledged(tasks, acknowledged)[:limit]
