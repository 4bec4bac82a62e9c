from typing import Iterable, Iterator, List, Optional

from salesflow.core.config import URGENT_TASK_LIMIT
from salesflow.models.enums.quotation_status import QuotationStatus
from salesflow.models.enums.sales_order_status import SalesOrderStatus
from salesflow.schemas.process_flow.process_flow_schemas import (
    TaskPriority,
    UrgentTask,
)
from salesflow.schemas.process_flow.snapshot_schemas import (
    CustomerRecord,
    QuotationRecord,
    SalesOrderRecord,
)
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)

# status -> (title, priority, action verb)
QUOTATION_TASK_RULES = {
    QuotationStatus.draft: ("Quote approval required", TaskPriority.urgent, "Review"),
    QuotationStatus.under_review: ("Quote review pending", TaskPriority.high, "Review"),
    QuotationStatus.sent: ("Customer follow-up due", TaskPriority.medium, "Follow Up"),
    QuotationStatus.accepted: ("Sales order creation", TaskPriority.urgent, "Create"),
    QuotationStatus.expired: ("Quotation renewal", TaskPriority.high, "Renew"),
}

SALES_ORDER_TASK_RULES = {
    SalesOrderStatus.draft: ("PO validation pending", TaskPriority.high, "Validate"),
}


def _customer_label(customer_id, names: dict) -> str:
    return names.get(customer_id) or "Unknown customer"


def _quotation_tasks(
    quotations: Iterable[QuotationRecord],
    converted_ids: set,
    names: dict,
) -> Iterator[UrgentTask]:
    for q in quotations:
        status = QuotationStatus.parse(q.status)
        rule = QUOTATION_TASK_RULES.get(status)
        if rule is None:
            continue
        if status is QuotationStatus.accepted and q.id in converted_ids:
            continue

        title, priority, verb = rule
        customer_name = (q.customer.name if q.customer else None) or _customer_label(
            q.owner_id, names
        )
        yield UrgentTask(
            title=title,
            description=f"{q.display_number} - {customer_name}",
            priority=priority,
            action_verb=verb,
            entity_type="quotation",
            entity_id=q.id,
        )


def _sales_order_tasks(
    sales_orders: Iterable[SalesOrderRecord],
    names: dict,
) -> Iterator[UrgentTask]:
    for so in sales_orders:
        rule = SALES_ORDER_TASK_RULES.get(SalesOrderStatus.parse(so.status))
        if rule is None:
            continue

        title, priority, verb = rule
        yield UrgentTask(
            title=title,
            description=f"{so.display_number} - {_customer_label(so.customer_id, names)}",
            priority=priority,
            action_verb=verb,
            entity_type="sales_order",
            entity_id=so.id,
        )


def derive_urgent_tasks(
    quotations: Iterable[QuotationRecord],
    sales_orders: Iterable[SalesOrderRecord],
    *,
    customers: Iterable[CustomerRecord] = (),
    limit: Optional[int] = None,
) -> List[UrgentTask]:
    """
    Outstanding actions across every quotation and sales order.

    Tasks come out in discovery order (quotations first, then sales orders),
    deduplicated on `title|description` with the first occurrence kept, and
    cut to `limit` (config URGENT_TASK_LIMIT by default). Accepted quotations
    that already have a sales order do not ask for another one.
    """
    limit = URGENT_TASK_LIMIT if limit is None else limit
    if limit < 1:
        return []

    quotations = list(quotations)
    sales_orders = list(sales_orders)
    names = {c.id: c.name for c in customers if c.name}

    converted_ids = set()
    for so in sales_orders:
        converted_ids.update(i for i in (so.quote_id, so.quotation_id) if i)

    seen = set()
    tasks = []
    candidates = [
        *_quotation_tasks(quotations, converted_ids, names),
        *_sales_order_tasks(sales_orders, names),
    ]
    for task in candidates:
        if task.key in seen:
            continue
        seen.add(task.key)
        tasks.append(task)
        if len(tasks) >= limit:
            break

    logger.debug(
        "Derived urgent tasks",
        extra={"candidates": len(candidates), "returned": len(tasks)},
    )
    return tasks


def filter_acknowledged(
    tasks: Iterable[UrgentTask],
    acknowledged_keys: Iterable[str],
) -> List[UrgentTask]:
    """Drop tasks the caller has already acknowledged (by task key)."""
    acknowledged = set(acknowledged_keys)
    return [t for t in tasks if t.key not in acknowledged]
