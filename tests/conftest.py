"""
Pytest configuration.

Environment is pinned before anything under `salesflow` is imported, since
the config module reads it at import time.
"""
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("DB_TYPE", "sqlite")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENABLE_SCHEDULER", "false")
os.environ.setdefault("URGENT_TASK_LIMIT", "5")

import pytest

from salesflow.schemas.process_flow.snapshot_schemas import (
    CustomerRecord,
    EnquiryRecord,
    QuotationRecord,
    SalesOrderRecord,
    Snapshot,
)


def make_customer(id="C1", name="Al Rawi Trading", **extra):
    return CustomerRecord(id=id, name=name, **extra)


def make_enquiry(id="E1", customer_id="C1", enquiry_date="2024-01-01T09:00:00Z", **extra):
    extra.setdefault("created_at", enquiry_date)
    extra.setdefault("enquiry_number", f"ENQ-{id}")
    return EnquiryRecord(id=id, customer_id=customer_id, enquiry_date=enquiry_date, **extra)


def make_quotation(id="Q1", customer_id="C1", status="Draft", quote_date="2024-01-05T10:00:00Z", **extra):
    extra.setdefault("created_at", quote_date)
    extra.setdefault("quote_number", f"QT-2024-{id}")
    return QuotationRecord(
        id=id,
        customer_id=customer_id,
        status=status,
        quote_date=quote_date,
        **extra,
    )


def make_sales_order(id="SO1", quotation_id="Q1", customer_id="C1", **extra):
    extra.setdefault("order_number", f"SO-2024-{id}")
    extra.setdefault("status", "Confirmed")
    extra.setdefault("created_at", "2024-01-20T12:00:00Z")
    return SalesOrderRecord(id=id, quotation_id=quotation_id, customer_id=customer_id, **extra)


def make_snapshot(customers=(), enquiries=(), quotations=(), sales_orders=()):
    return Snapshot(
        customers=list(customers),
        enquiries=list(enquiries),
        quotations=list(quotations),
        sales_orders=list(sales_orders),
    )


@pytest.fixture
def customer():
    return make_customer()


@pytest.fixture
def full_snapshot():
    """Customer C1 with an enquiry, an accepted quotation and its sales order."""
    return make_snapshot(
        customers=[make_customer(), make_customer(id="C2", name="Gulf Construction Co.")],
        enquiries=[make_enquiry()],
        quotations=[
            make_quotation(
                status="Accepted",
                enquiry_id="E1",
                sent_at="2024-01-08T10:00:00Z",
                updated_at="2024-01-12T15:30:00Z",
                total_amount="12500.00",
            ),
        ],
        sales_orders=[make_sales_order()],
    )
