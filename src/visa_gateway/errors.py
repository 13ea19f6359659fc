"""
visa_gateway.errors

Error types surfaced to API callers.

Responsibilities:
- Classify failures (caller fault, evaluator fault, local fault).
- Own the JSON body and status code each failure is reported with.
- Register FastAPI exception handlers that render them.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR


class GatewayError(Exception):
    """
    Base class for failures that end a request with a structured error body.
    """

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Frontend API route failed"

    def __init__(self, details: str | None = None) -> None:
        super().__init__(details or self.error)
        self.details = details

    def body(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details}


class ValidationError(GatewayError):
    # Caller supplied a visa type outside the category table.
    status_code = HTTP_400_BAD_REQUEST
    error = "Invalid visa type"

    def body(self) -> dict[str, Any]:
        return {"error": self.error}


class BackendError(GatewayError):
    # Evaluator was reached but answered with a non-2xx status.
    error = "Backend error"


class InternalError(GatewayError):
    error = "Frontend API route failed"

    @classmethod
    def from_exception(cls, exc: BaseException) -> InternalError:
        return cls(str(exc) or "Unknown error")


def register_error_handlers(app: FastAPI) -> None:
    # Subclasses resolve to this handler through the exception MRO.
    @app.exception_handler(GatewayError)
    async def _gateway_error_handler(_: Request, exc: GatewayError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.body())


# --- Module Notes -----------------------------------------------------------
# Nothing here retries; every error is reported to the caller as-is.
