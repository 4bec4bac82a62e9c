from sqlalchemy import Column, Integer, String, Boolean, Index
from salesflow.core.db import Base
from salesflow.models.base.mixins import TimestampMixin, SoftDeleteMixin

class Customer(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)

    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=True, index=True)
    customer_type = Column(String(50), nullable=True)
    classification = Column(String(50), nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)

    __table_args__ = (Index("ix_customer_active", "is_active"),)

    def __repr__(self):
        return f"<Customer id={self.id} name={self.name} active={self.is_active}>"
