# salesflow/models/billing/sales_order_models.py

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Index,
    Numeric,
)

from salesflow.core.db import Base
from salesflow.models.base.mixins import TimestampMixin, SoftDeleteMixin, ActorMixin
from salesflow.models.enums.sales_order_status import SalesOrderStatus

class SalesOrder(Base, TimestampMixin, SoftDeleteMixin, ActorMixin):
    __tablename__ = "sales_orders"

    id = Column(Integer, primary_key=True)
    order_number = Column(String(50), nullable=False, unique=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    quotation_id = Column(Integer, ForeignKey("quotations.id"), nullable=True, index=True)

    status = Column(String(30), nullable=False, default=SalesOrderStatus.draft.value)
    order_date = Column(DateTime(timezone=True), nullable=True)
    total_amount = Column(Numeric(14, 2), nullable=True)

    __table_args__ = (
        Index(
            "ix_sales_order_customer_status",
            "customer_id",
            "status"
        ),
    )

    def __repr__(self):
        return (
            f"<SalesOrder {self.order_number} "
            f"quotation_id={self.quotation_id} "
            f"status={self.status}>"
        )
