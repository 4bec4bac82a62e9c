from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Index
from salesflow.core.db import Base
from salesflow.models.base.mixins import TimestampMixin, SoftDeleteMixin, ActorMixin
from salesflow.models.enums.enquiry_status import EnquiryStatus

class Enquiry(Base, TimestampMixin, SoftDeleteMixin, ActorMixin):
    __tablename__ = "enquiries"

    id = Column(Integer, primary_key=True)
    enquiry_number = Column(String(50), nullable=False, unique=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True)
    enquiry_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(30), nullable=False, default=EnquiryStatus.new.value)
    source = Column(String(30), nullable=True)

    __table_args__ = (
        Index("ix_enquiry_customer_date", "customer_id", "enquiry_date"),
    )

    def __repr__(self):
        return f"<Enquiry {self.enquiry_number} status={self.status}>"
