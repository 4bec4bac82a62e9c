from decimal import Decimal

from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, DateTime, Index, CheckConstraint
from salesflow.core.db import Base
from salesflow.models.base.mixins import TimestampMixin, SoftDeleteMixin, ActorMixin
from salesflow.models.enums.quotation_status import QuotationStatus

class Quotation(Base, TimestampMixin, SoftDeleteMixin, ActorMixin):
    __tablename__ = "quotations"

    id = Column(Integer, primary_key=True)
    quote_number = Column(String(50), nullable=False, unique=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True)
    enquiry_id = Column(Integer, ForeignKey("enquiries.id"), nullable=True, index=True)

    # Stored as text so statuses added by the CRUD layer still load
    status = Column(String(30), nullable=False, default=QuotationStatus.draft.value, index=True)
    quote_date = Column(DateTime(timezone=True), nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=True)

    total_amount = Column(Numeric(14, 2), nullable=False, default=Decimal("0.00"))

    __table_args__ = (
        Index("ix_quotation_customer_status", "customer_id", "status"),
        CheckConstraint("total_amount >= 0", name="ck_quotation_total_non_negative"),
    )

    def __repr__(self):
        return f"<Quotation {self.quote_number} status={self.status}>"
