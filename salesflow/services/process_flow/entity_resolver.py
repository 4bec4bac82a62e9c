from datetime import datetime
from typing import Callable, Iterable, Optional, TypeVar

from salesflow.schemas.process_flow.process_flow_schemas import ResolvedEntities
from salesflow.schemas.process_flow.snapshot_schemas import (
    CustomerRecord,
    EnquiryRecord,
    QuotationRecord,
    SalesOrderRecord,
    Snapshot,
)
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)

R = TypeVar("R")


def latest_by(
    records: Iterable[R],
    date_of: Callable[[R], Optional[datetime]],
) -> Optional[R]:
    """
    Most recent record by `date_of`. Undated records lose to dated ones and
    ties keep the first record encountered.
    """
    latest = None
    latest_date = None

    for record in records:
        record_date = date_of(record)
        if latest is None:
            latest, latest_date = record, record_date
            continue
        if record_date is None:
            continue
        if latest_date is None or record_date > latest_date:
            latest, latest_date = record, record_date

    return latest


def _find_target_quotation(
    snapshot: Snapshot,
    customer_id: Optional[str],
    quotation_id: Optional[str],
) -> Optional[QuotationRecord]:
    if quotation_id is not None:
        quotation = next(
            (q for q in snapshot.quotations if q.matches(quotation_id)),
            None,
        )
        if quotation is None:
            logger.debug("No quotation matches %s", quotation_id)
        return quotation

    candidates = snapshot.quotations
    if customer_id is not None:
        candidates = [q for q in candidates if q.owner_id == customer_id]

    return latest_by(candidates, lambda q: q.effective_date)


def _find_customer(
    snapshot: Snapshot,
    customer_id: Optional[str],
    quotation: Optional[QuotationRecord],
) -> Optional[CustomerRecord]:
    if customer_id is not None:
        customer = snapshot.find_customer(customer_id)
        if customer is None:
            logger.debug("Customer %s not in snapshot", customer_id)
        return customer

    if quotation is None:
        return None
    if quotation.customer is not None:
        return quotation.customer
    return snapshot.find_customer(quotation.customer_id)


def _find_enquiry(
    snapshot: Snapshot,
    customer: Optional[CustomerRecord],
    quotation: Optional[QuotationRecord],
) -> Optional[EnquiryRecord]:
    if quotation is not None and quotation.enquiry_id is not None:
        linked = next(
            (e for e in snapshot.enquiries if e.id == quotation.enquiry_id),
            None,
        )
        if linked is not None:
            return linked

    if customer is None:
        return None

    return latest_by(
        (e for e in snapshot.enquiries if e.customer_id == customer.id),
        lambda e: e.effective_date,
    )


def _find_sales_order(
    snapshot: Snapshot,
    quotation: Optional[QuotationRecord],
) -> Optional[SalesOrderRecord]:
    if quotation is None:
        return None
    return next(
        (so for so in snapshot.sales_orders if so.references(quotation.id)),
        None,
    )


def resolve_entities(
    snapshot: Snapshot,
    customer_id: Optional[str] = None,
    quotation_id: Optional[str] = None,
) -> ResolvedEntities:
    """
    Pick the quotation a process-flow view reports on, plus its customer,
    enquiry and sales order. Missing matches come back as None.

    An explicit `quotation_id` (id or quote number) wins over the customer
    filter. The customer is the explicit `customer_id` when given, otherwise
    the target quotation's embedded or referenced customer.
    """
    quotation = _find_target_quotation(snapshot, customer_id, quotation_id)
    customer = _find_customer(snapshot, customer_id, quotation)
    enquiry = _find_enquiry(snapshot, customer, quotation)
    sales_order = _find_sales_order(snapshot, quotation)

    logger.debug(
        "Resolved process flow entities",
        extra={
            "customer_id": customer.id if customer else None,
            "quotation_id": quotation.id if quotation else None,
            "enquiry_id": enquiry.id if enquiry else None,
            "sales_order_id": sales_order.id if sales_order else None,
        },
    )

    return ResolvedEntities(
        target_quotation=quotation,
        customer=customer,
        related_enquiry=enquiry,
        related_sales_order=sales_order,
    )
