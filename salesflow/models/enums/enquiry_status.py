# salesflow/models/enums/enquiry_status.py
import enum


class EnquiryStatus(str, enum.Enum):
    new = "New"
    in_progress = "In Progress"
    quoted = "Quoted"
    closed = "Closed"
