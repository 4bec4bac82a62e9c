# salesflow/services/process_flow/workflow_validation.py
"""
Gatekeeping for moving an entity into the next console step.

Each step names the entity it inspects and the status that entity must be
in. Unknown steps and missing entities both answer can_proceed=False.
"""

from salesflow.models.enums.enquiry_status import EnquiryStatus
from salesflow.models.enums.quotation_status import QuotationStatus
from salesflow.schemas.process_flow.process_flow_schemas import WorkflowValidation
from salesflow.schemas.process_flow.snapshot_schemas import Snapshot
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)

# step -> (entity, required status, ok message, blocked message)
WORKFLOW_GATES = {
    "quotation": (
        "enquiry",
        EnquiryStatus.in_progress.value,
        "Can proceed to quotation",
        "Enquiry must be in progress",
    ),
    "acceptance": (
        "quotation",
        QuotationStatus.sent.value,
        "Can proceed to acceptance",
        "Quotation must be sent to customer",
    ),
    "po-upload": (
        "quotation",
        QuotationStatus.accepted.value,
        "Can proceed to PO upload",
        "Quote must be accepted by customer",
    ),
    "sales-order": (
        "quotation",
        QuotationStatus.accepted.value,
        "Can proceed to sales order creation",
        "PO document must be uploaded and validated",
    ),
}

INVALID_STEP_MESSAGE = "Invalid workflow step"


def _entity_status(snapshot: Snapshot, entity: str, entity_id: str):
    if entity == "enquiry":
        record = next(
            (e for e in snapshot.enquiries
             if entity_id in (e.id, e.enquiry_number)),
            None,
        )
        return record.status if record else None

    record = next((q for q in snapshot.quotations if q.matches(entity_id)), None)
    if record is None:
        return None
    status = QuotationStatus.parse(record.status)
    return status.value if status else record.status


def validate_workflow_step(
    snapshot: Snapshot,
    step: str,
    entity_id: str,
) -> WorkflowValidation:
    gate = WORKFLOW_GATES.get(step)
    if gate is None:
        logger.info("Workflow validation for unknown step %r", step)
        return WorkflowValidation(
            can_proceed=False,
            message=INVALID_STEP_MESSAGE,
            step=step,
            entity_id=entity_id,
        )

    entity, required_status, ok_message, blocked_message = gate
    can_proceed = _entity_status(snapshot, entity, entity_id) == required_status

    return WorkflowValidation(
        can_proceed=can_proceed,
        message=ok_message if can_proceed else blocked_message,
        step=step,
        entity_id=entity_id,
    )
