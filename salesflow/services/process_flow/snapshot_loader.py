# salesflow/services/process_flow/snapshot_loader.py

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from salesflow.models.billing.quotation_models import Quotation
from salesflow.models.billing.sales_order_models import SalesOrder
from salesflow.models.masters.customer_models import Customer
from salesflow.models.sales.enquiry_models import Enquiry
from salesflow.schemas.process_flow.snapshot_schemas import (
    CustomerRecord,
    EnquiryRecord,
    QuotationRecord,
    SalesOrderRecord,
    Snapshot,
)
from salesflow.utils.logger import get_logger

logger = get_logger(__name__)


def _map_customer(c: Customer) -> CustomerRecord:
    return CustomerRecord(
        id=c.id,
        name=c.name,
        customer_type=c.customer_type,
        classification=c.classification,
        created_at=c.created_at,
    )


def _map_enquiry(e: Enquiry) -> EnquiryRecord:
    return EnquiryRecord(
        id=e.id,
        enquiry_number=e.enquiry_number,
        customer_id=e.customer_id,
        status=e.status,
        enquiry_date=e.enquiry_date,
        created_at=e.created_at,
        created_by=e.created_by_name,
    )


def _map_quotation(q: Quotation) -> QuotationRecord:
    return QuotationRecord(
        id=q.id,
        quote_number=q.quote_number,
        customer_id=q.customer_id,
        enquiry_id=q.enquiry_id,
        status=q.status,
        quote_date=q.quote_date,
        sent_at=q.sent_at,
        created_at=q.created_at,
        updated_at=q.updated_at,
        total_amount=q.total_amount,
        created_by=q.created_by_name,
    )


def _map_sales_order(so: SalesOrder) -> SalesOrderRecord:
    return SalesOrderRecord(
        id=so.id,
        order_number=so.order_number,
        customer_id=so.customer_id,
        quotation_id=so.quotation_id,
        status=so.status,
        order_date=so.order_date,
        created_at=so.created_at,
        created_by=so.created_by_name,
    )


async def _fetch_active(db: AsyncSession, model):
    result = await db.execute(
        select(model)
        .where(model.is_deleted.is_(False))
        .order_by(model.id)
    )
    return result.scalars().all()


async def load_snapshot(db: AsyncSession) -> Snapshot:
    """Read every live customer, enquiry, quotation and sales order."""
    customers = await _fetch_active(db, Customer)
    enquiries = await _fetch_active(db, Enquiry)
    quotations = await _fetch_active(db, Quotation)
    sales_orders = await _fetch_active(db, SalesOrder)

    snapshot = Snapshot(
        customers=[_map_customer(c) for c in customers],
        enquiries=[_map_enquiry(e) for e in enquiries],
        quotations=[_map_quotation(q) for q in quotations],
        sales_orders=[_map_sales_order(so) for so in sales_orders],
    )

    logger.info(
        "Snapshot loaded",
        extra={
            "customers": len(snapshot.customers),
            "enquiries": len(snapshot.enquiries),
            "quotations": len(snapshot.quotations),
            "sales_orders": len(snapshot.sales_orders),
        },
    )
    return snapshot
