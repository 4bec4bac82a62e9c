from datetime import datetime
from typing import Iterator, List, Optional

from salesflow.constants.activity_templates import (
    ACTIVITY_TEMPLATES,
    CLOSING_ACTORS,
    DEFAULT_ACTORS,
    ActivityKind,
)
from salesflow.models.enums.quotation_status import (
    CLOSING_QUOTATION_STATUSES,
    QuotationStatus,
)
from salesflow.schemas.process_flow.process_flow_schemas import (
    ActivityEvent,
    ResolvedEntities,
)
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)

# Statuses a quotation can only hold after it went out to the customer
_SENT_OR_LATER = frozenset({
    QuotationStatus.sent,
    QuotationStatus.accepted,
    QuotationStatus.rejected_by_customer,
    QuotationStatus.expired,
})


def _event(
    kind: ActivityKind,
    timestamp: Optional[datetime],
    entity_id: str,
    actor_hint: str,
    **context,
) -> Optional[ActivityEvent]:
    if timestamp is None:
        logger.debug("Skipping %s for %s: no timestamp", kind.value, entity_id)
        return None

    action, template = ACTIVITY_TEMPLATES[kind]
    return ActivityEvent(
        kind=kind,
        action=action.format(**context),
        description=template.format(**context),
        timestamp=timestamp,
        actor_hint=actor_hint,
        entity_id=entity_id,
    )


def _format_total(amount) -> str:
    if amount is None:
        return "no total"
    return f"{amount:,.2f}"


def _collect_events(resolved: ResolvedEntities) -> List[ActivityEvent]:
    customer = resolved.customer
    enquiry = resolved.related_enquiry
    quotation = resolved.target_quotation
    sales_order = resolved.related_sales_order

    customer_name = (customer.name if customer else None) or "Unknown customer"
    events = []

    if enquiry is not None:
        events.append(_event(
            ActivityKind.ENQUIRY_CREATED,
            enquiry.created_at,
            enquiry.id,
            enquiry.created_by or DEFAULT_ACTORS[ActivityKind.ENQUIRY_CREATED],
            enquiry_number=enquiry.display_number,
            customer_name=customer_name,
        ))

    if quotation is not None:
        status = QuotationStatus.parse(quotation.status)
        quote_context = {
            "quote_number": quotation.display_number,
            "customer_name": customer_name,
        }

        events.append(_event(
            ActivityKind.QUOTATION_CREATED,
            quotation.created_at,
            quotation.id,
            quotation.created_by or DEFAULT_ACTORS[ActivityKind.QUOTATION_CREATED],
            **quote_context,
        ))

        if status in _SENT_OR_LATER:
            sent_at = quotation.sent_at
            if sent_at is None and status is QuotationStatus.sent:
                sent_at = quotation.updated_at
            events.append(_event(
                ActivityKind.QUOTATION_SENT,
                sent_at,
                quotation.id,
                quotation.created_by or DEFAULT_ACTORS[ActivityKind.QUOTATION_SENT],
                **quote_context,
            ))

        if status in CLOSING_QUOTATION_STATUSES:
            events.append(_event(
                ActivityKind.QUOTATION_CLOSED,
                quotation.updated_at,
                quotation.id,
                CLOSING_ACTORS[status.value],
                status=status.value,
                status_lower=status.value.lower(),
                total=_format_total(quotation.total_amount),
                **quote_context,
            ))

    if sales_order is not None:
        events.append(_event(
            ActivityKind.SALES_ORDER_CREATED,
            sales_order.created_at,
            sales_order.id,
            sales_order.created_by or DEFAULT_ACTORS[ActivityKind.SALES_ORDER_CREATED],
            order_number=sales_order.display_number,
            quote_number=quotation.display_number if quotation else "manual entry",
        ))

    return [e for e in events if e is not None]


def build_activity_timeline(resolved: ResolvedEntities) -> Iterator[ActivityEvent]:
    """
    Yield the process-flow activity trail newest first.

    At most one event per transition: enquiry created, quotation created,
    quotation sent, quotation closed (accepted/rejected/expired) and sales
    order created. Events without a usable timestamp are left out. The
    generator is single-pass; call again for a fresh sequence.
    """
    events = _collect_events(resolved)
    # sorted() is stable, so same-instant events keep pipeline order
    yield from sorted(events, key=lambda e: e.timestamp, reverse=True)
