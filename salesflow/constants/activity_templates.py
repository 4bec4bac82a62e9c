from enum import Enum


class ActivityKind(str, Enum):
    ENQUIRY_CREATED = "enquiry_created"
    QUOTATION_CREATED = "quotation_created"
    QUOTATION_SENT = "quotation_sent"
    QUOTATION_CLOSED = "quotation_closed"
    SALES_ORDER_CREATED = "sales_order_created"


# kind -> (action, description template)
ACTIVITY_TEMPLATES = {
    ActivityKind.ENQUIRY_CREATED: (
        "Enquiry received",
        "Enquiry {enquiry_number} received from {customer_name}",
    ),
    ActivityKind.QUOTATION_CREATED: (
        "Quotation created",
        "Quotation {quote_number} prepared for {customer_name}",
    ),
    ActivityKind.QUOTATION_SENT: (
        "Quotation sent",
        "Quotation {quote_number} sent to {customer_name}",
    ),
    ActivityKind.QUOTATION_CLOSED: (
        "Quotation {status_lower}",
        "Quotation {quote_number} marked {status} ({total})",
    ),
    ActivityKind.SALES_ORDER_CREATED: (
        "Sales order created",
        "Sales order {order_number} created from {quote_number}",
    ),
}

# Fallback actor per event when the record carries no creator
DEFAULT_ACTORS = {
    ActivityKind.ENQUIRY_CREATED: "Sales Team",
    ActivityKind.QUOTATION_CREATED: "Sales Team",
    ActivityKind.QUOTATION_SENT: "Sales Team",
    ActivityKind.SALES_ORDER_CREATED: "Sales Team",
}

# Who closed the negotiation, by quotation status value
CLOSING_ACTORS = {
    "Accepted": "Customer",
    "Rejected by Customer": "Customer",
    "Rejected": "Sales Manager",
    "Expired": "System",
}
