# salesflow/services/process_flow/status_registry.py
"""
Quotation status -> stage delta and recommended next action.

Every `QuotationStatus` member must have an entry; the module refuses to
import otherwise. Statuses outside the enum are reported through the
`recognized=False` descriptor instead of being mistaken for a Draft.
"""

from typing import Optional

from salesflow.constants.workflow_steps import WorkflowStep
from salesflow.models.enums.quotation_status import QuotationStatus
from salesflow.schemas.process_flow.process_flow_schemas import StatusAction
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)


def _action(
    status: QuotationStatus,
    current_step: WorkflowStep,
    label: str,
    description: str,
    action_verb: str,
    extra_completed_steps=(),
) -> StatusAction:
    return StatusAction(
        status=status.value,
        extra_completed_steps=tuple(int(s) for s in extra_completed_steps),
        current_step=int(current_step),
        label=label,
        description=description,
        action_verb=action_verb,
    )


STATUS_ACTIONS = {
    QuotationStatus.draft: _action(
        QuotationStatus.draft,
        WorkflowStep.quotation,
        "Complete Draft Quotation",
        "Complete pricing & terms, submit for review",
        "Submit",
    ),
    QuotationStatus.under_review: _action(
        QuotationStatus.under_review,
        WorkflowStep.quotation,
        "Awaiting Approval",
        "Await internal approval",
        "Approve",
    ),
    QuotationStatus.approved: _action(
        QuotationStatus.approved,
        WorkflowStep.quotation,
        "Send Quotation",
        "Send quotation to customer",
        "Send",
    ),
    QuotationStatus.sent: _action(
        QuotationStatus.sent,
        WorkflowStep.acceptance,
        "Awaiting Customer",
        "Await customer acceptance",
        "Follow Up",
        extra_completed_steps=(WorkflowStep.quotation,),
    ),
    QuotationStatus.accepted: _action(
        QuotationStatus.accepted,
        WorkflowStep.sales_order,
        "Create Sales Order",
        "Create sales order",
        "Create",
        extra_completed_steps=(
            WorkflowStep.quotation,
            WorkflowStep.acceptance,
            WorkflowStep.customer_po_upload,
        ),
    ),
    QuotationStatus.rejected: _action(
        QuotationStatus.rejected,
        WorkflowStep.quotation,
        "Revise Quotation",
        "Revise pricing/terms and resubmit",
        "Revise",
    ),
    QuotationStatus.rejected_by_customer: _action(
        QuotationStatus.rejected_by_customer,
        WorkflowStep.acceptance,
        "Customer Rejected",
        "Review feedback, issue revised quotation",
        "Revise",
        extra_completed_steps=(WorkflowStep.quotation,),
    ),
    QuotationStatus.expired: _action(
        QuotationStatus.expired,
        WorkflowStep.quotation,
        "Quotation Expired",
        "Issue new revision",
        "Renew",
    ),
}

_missing = set(QuotationStatus) - set(STATUS_ACTIONS)
if _missing:
    raise RuntimeError(
        "No status action for: "
        + ", ".join(sorted(s.value for s in _missing))
    )


def unknown_status_action(raw_status: Optional[str]) -> StatusAction:
    return StatusAction(
        status=raw_status,
        extra_completed_steps=(),
        current_step=int(WorkflowStep.quotation),
        recognized=False,
    )


def describe_status(raw_status: Optional[str]) -> StatusAction:
    status = QuotationStatus.parse(raw_status)
    if status is None:
        logger.warning("Unmapped quotation status %r", raw_status)
        return unknown_status_action(raw_status)
    return STATUS_ACTIONS[status]
