from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from salesflow.schemas.process_flow.snapshot_schemas import (
    QuotationRecord,
    SalesOrderRecord,
    Snapshot,
)
from salesflow.utils.dates import coerce_timestamp


def test_camel_case_fields_are_accepted():
    q = QuotationRecord.model_validate({
        "id": 42,
        "quoteNumber": "QT-2024-042",
        "customerId": 7,
        "enquiryId": "E1",
        "quoteDate": "2024-01-05T10:00:00Z",
        "totalAmount": "1500.50",
    })

    assert q.id == "42"
    assert q.customer_id == "7"
    assert q.owner_id == "7"
    assert q.quote_date == datetime(2024, 1, 5, 10, tzinfo=timezone.utc)
    assert q.total_amount == Decimal("1500.50")
    assert q.status == "Draft"


def test_output_uses_field_names():
    dumped = QuotationRecord(id="Q1", quote_number="QT-1").model_dump()

    assert "quote_number" in dumped
    assert "quoteNumber" not in dumped


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-01-05T10:00:00Z", datetime(2024, 1, 5, 10, tzinfo=timezone.utc)),
        ("2024-01-05", datetime(2024, 1, 5, tzinfo=timezone.utc)),
        (date(2024, 1, 5), datetime(2024, 1, 5, tzinfo=timezone.utc)),
        ("yesterday", None),
        ("", None),
        (12345, None),
        (None, None),
    ],
)
def test_coerce_timestamp(raw, expected):
    assert coerce_timestamp(raw) == expected


def test_malformed_timestamp_does_not_reject_record():
    q = QuotationRecord(id="Q1", created_at="31/12/2024")

    assert q.created_at is None
    assert q.effective_date is None


def test_effective_date_prefers_quote_date():
    q = QuotationRecord(id="Q1", quote_date="2024-02-01", created_at="2024-01-01")

    assert q.effective_date.month == 2


def test_sales_order_reference_helpers():
    so = SalesOrderRecord(id="SO1", quoteId="Q1")

    assert so.references("Q1")
    assert not so.references("Q2")
    assert not so.references(None)
    assert so.display_number == "SO1"


def test_snapshot_is_immutable():
    snapshot = Snapshot(quotations=[{"id": "Q1"}])

    assert isinstance(snapshot.quotations, tuple)
    with pytest.raises(ValidationError):
        snapshot.quotations = ()
