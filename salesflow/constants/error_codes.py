from enum import Enum


class ErrorCode(str, Enum):
    # ---------------- GENERIC ----------------
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # ---------------- DATA ACCESS ----------------
    DATABASE_ERROR = "DATABASE_ERROR"
    SNAPSHOT_UNAVAILABLE = "SNAPSHOT_UNAVAILABLE"

    # ---------------- PROCESS FLOW ----------------
    UNKNOWN_QUOTATION_STATUS = "UNKNOWN_QUOTATION_STATUS"
