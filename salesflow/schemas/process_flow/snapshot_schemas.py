# salesflow/schemas/process_flow/snapshot_schemas.py
"""
Read-only entity records the process-flow engine consumes.

Records accept both snake_case and the console's camelCase field names
(`customerId`, `quoteNumber`, ...). Identifiers are normalised to strings
and timestamps go through `coerce_timestamp`, so a malformed date never
rejects a whole snapshot.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional, Tuple

from pydantic import AliasGenerator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from salesflow.utils.dates import coerce_timestamp


def _coerce_identifier(value):
    if value is None:
        return None
    return str(value)


Identifier = Annotated[str, BeforeValidator(_coerce_identifier)]
OptionalIdentifier = Annotated[Optional[str], BeforeValidator(_coerce_identifier)]
Timestamp = Annotated[Optional[datetime], BeforeValidator(coerce_timestamp)]


class SnapshotRecord(BaseModel):
    model_config = ConfigDict(
        # camelCase accepted on input, field names used on output
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# =====================================================
# ENTITIES
# =====================================================

class CustomerRecord(SnapshotRecord):
    id: Identifier
    name: Optional[str] = None
    customer_type: Optional[str] = None
    classification: Optional[str] = None
    created_at: Timestamp = None


class EnquiryRecord(SnapshotRecord):
    id: Identifier
    enquiry_number: Optional[str] = None
    customer_id: OptionalIdentifier = None
    status: Optional[str] = None
    enquiry_date: Timestamp = None
    created_at: Timestamp = None
    created_by: Optional[str] = None

    @property
    def effective_date(self) -> Optional[datetime]:
        return self.enquiry_date or self.created_at

    @property
    def display_number(self) -> str:
        return self.enquiry_number or self.id


class QuotationRecord(SnapshotRecord):
    id: Identifier
    quote_number: Optional[str] = None
    customer_id: OptionalIdentifier = None
    customer: Optional[CustomerRecord] = None
    enquiry_id: OptionalIdentifier = None
    status: Optional[str] = "Draft"
    quote_date: Timestamp = None
    sent_at: Timestamp = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    total_amount: Optional[Decimal] = None
    created_by: Optional[str] = None

    @property
    def effective_date(self) -> Optional[datetime]:
        return self.quote_date or self.created_at

    @property
    def display_number(self) -> str:
        return self.quote_number or self.id

    @property
    def owner_id(self) -> Optional[str]:
        if self.customer is not None:
            return self.customer.id
        return self.customer_id

    def matches(self, identifier: str) -> bool:
        return identifier in (self.id, self.quote_number)


class SalesOrderRecord(SnapshotRecord):
    id: Identifier
    order_number: Optional[str] = None
    customer_id: OptionalIdentifier = None
    quote_id: OptionalIdentifier = None
    quotation_id: OptionalIdentifier = None
    status: Optional[str] = None
    order_date: Timestamp = None
    created_at: Timestamp = None
    created_by: Optional[str] = None

    @property
    def display_number(self) -> str:
        return self.order_number or self.id

    def references(self, quotation_id: str) -> bool:
        return quotation_id is not None and quotation_id in (
            self.quote_id,
            self.quotation_id,
        )


# =====================================================
# SNAPSHOT
# =====================================================

class Snapshot(SnapshotRecord):
    customers: Tuple[CustomerRecord, ...] = ()
    enquiries: Tuple[EnquiryRecord, ...] = ()
    quotations: Tuple[QuotationRecord, ...] = ()
    sales_orders: Tuple[SalesOrderRecord, ...] = ()

    def find_customer(self, customer_id: Optional[str]) -> Optional[CustomerRecord]:
        if customer_id is None:
            return None
        return next((c for c in self.customers if c.id == customer_id), None)
