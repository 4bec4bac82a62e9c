from fastapi import HTTPException
from salesflow.constants.error_codes import ErrorCode


class AppException(HTTPException):
    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode,
        details: dict | None = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error_code = error_code
        self.details = details


class UnknownQuotationStatusError(AppException):
    """Raised at the HTTP boundary when strict status checking is enabled."""

    def __init__(self, quotation_id: str, status: str):
        super().__init__(
            422,
            f"Quotation {quotation_id} has unmapped status '{status}'",
            ErrorCode.UNKNOWN_QUOTATION_STATUS,
            details={"quotation_id": quotation_id, "status": status},
        )


class SnapshotUnavailableError(AppException):
    def __init__(self, reason: str):
        super().__init__(
            503,
            "Entity snapshot is not available",
            ErrorCode.SNAPSHOT_UNAVAILABLE,
            details={"reason": reason},
        )
