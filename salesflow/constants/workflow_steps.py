# salesflow/constants/workflow_steps.py
"""
Customer-to-order pipeline catalogue.

Step ids are fixed. The process-flow engine infers steps 1..8 from the
entity snapshot; the later steps exist for display and progress only.
"""
from enum import IntEnum

class WorkflowStep(IntEnum):
    customer = 1
    enquiry = 2
    sourcing = 3
    quotation = 4
    acceptance = 5
    customer_po_upload = 6
    sales_order = 7
    supplier_lpo = 8
    goods_receipt = 9
    inventory = 10
    delivery_note = 11
    invoice = 12

# (step, display name, console path)
WORKFLOW_STEPS = (
    (WorkflowStep.customer, "Customer", "/customers"),
    (WorkflowStep.enquiry, "Enquiry", "/enquiries"),
    (WorkflowStep.sourcing, "Sourcing", "/sourcing"),
    (WorkflowStep.quotation, "Quotation", "/quotations"),
    (WorkflowStep.acceptance, "Acceptance", "/customer-acceptance"),
    (WorkflowStep.customer_po_upload, "Customer PO Upload", "/customer-po-upload"),
    (WorkflowStep.sales_order, "Sales Order", "/sales-orders"),
    (WorkflowStep.supplier_lpo, "Supplier LPO", "/supplier-lpo"),
    (WorkflowStep.goods_receipt, "Goods Receipt", "/goods-receipt"),
    (WorkflowStep.inventory, "Inventory", "/inventory"),
    (WorkflowStep.delivery_note, "Delivery Note", "/delivery-note"),
    (WorkflowStep.invoice, "Invoice", "/invoicing"),
)

STEP_NAMES = {step: name for step, name, _ in WORKFLOW_STEPS}

# Nothing resolved yet: the customer step itself is pending
INITIAL_STEP = WorkflowStep.customer
