from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class APIException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class SubscriptionError(Exception):
    """Raised when the server refuses a push subscription."""

    def __init__(self, message: str = "Failed to subscribe to push notifications", status: int = None):
        super().__init__(message)
        self.status = status


class PushDeliveryError(Exception):
    """Raised by a push sender when the push service rejects a message."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def subscription_gone(self) -> bool:
        return self.status_code in (404, 410)


def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }

async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, exc.status_code)
    )
