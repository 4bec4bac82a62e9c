# Masters
from salesflow.models.masters.customer_models import Customer

# Sales
from salesflow.models.sales.enquiry_models import Enquiry

# Billing
from salesflow.models.billing.quotation_models import Quotation
from salesflow.models.billing.sales_order_models import SalesOrder
