"""Error responses shared by all routes."""

from typing import Any

from fastapi.responses import JSONResponse

from hedera_recon.core.clock import utc_now_iso

MISSING_PARAMETERS = "Missing required parameters: payerID, query, and accountFrom"
INVALID_PARAMETERS = "Invalid parameters: payerID and accountFrom must be integers"


class FilterValidationError(Exception):
    """Raised when transaction filter parameters are missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def error_response(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    """Build the ``{success: false, error, [message], timestamp}`` body."""
    body: dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    body["timestamp"] = utc_now_iso()
    return JSONResponse(status_code=status_code, content=body)
