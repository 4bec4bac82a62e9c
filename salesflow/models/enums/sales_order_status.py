# salesflow/models/enums/sales_order_status.py
import enum


class SalesOrderStatus(str, enum.Enum):
    draft = "Draft"
    confirmed = "Confirmed"
    processing = "Processing"
    shipped = "Shipped"
    delivered = "Delivered"
    cancelled = "Cancelled"

    @classmethod
    def parse(cls, value: str | None) -> "SalesOrderStatus | None":
        if value is None:
            return None
        normalized = " ".join(str(value).split()).lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        return None
