# salesflow/models/enums/quotation_status.py
import enum


class QuotationStatus(str, enum.Enum):
    draft = "Draft"
    under_review = "Under Review"
    approved = "Approved"
    sent = "Sent"
    accepted = "Accepted"
    rejected = "Rejected"
    rejected_by_customer = "Rejected by Customer"
    expired = "Expired"

    @classmethod
    def parse(cls, value: str | None) -> "QuotationStatus | None":
        """Case- and whitespace-insensitive lookup. Unknown values give None."""
        if value is None:
            return None
        normalized = " ".join(str(value).split()).lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        return None


# Statuses from which no automatic progression happens without a revision
TERMINAL_QUOTATION_STATUSES = frozenset({
    QuotationStatus.rejected,
    QuotationStatus.rejected_by_customer,
    QuotationStatus.expired,
})

# Statuses that close the customer-facing negotiation (timeline "closed" event)
CLOSING_QUOTATION_STATUSES = TERMINAL_QUOTATION_STATUSES | {QuotationStatus.accepted}
