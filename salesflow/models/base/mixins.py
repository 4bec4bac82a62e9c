from sqlalchemy import Column, Boolean, DateTime, String
from sqlalchemy.sql import func


class TimestampMixin:
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        onupdate=func.now()
    )


class SoftDeleteMixin:
    is_deleted = Column(Boolean, default=False, nullable=False)


class ActorMixin:
    # Display name of whoever created the row; the CRUD layer owns users
    created_by_name = Column(String(255), nullable=True)
