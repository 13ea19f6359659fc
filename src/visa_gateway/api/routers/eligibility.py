"""
visa_gateway.api.routers.eligibility

Public endpoints used by the visa eligibility form.

Responsibilities:
- Accept form submissions and relay the evaluator's decision.
- List the visa types the gateway understands.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from visa_gateway.api.deps import eligibility_service
from visa_gateway.errors import GatewayError, InternalError
from visa_gateway.observability.logging import get_logger
from visa_gateway.services.eligibility_service import EligibilityService
from visa_gateway.translation.categories import CATEGORY_BY_LABEL

log = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["eligibility"])


class VisaTypeResponse(BaseModel):
    label: str
    category: str


@router.post("/check-eligibility")
async def check_eligibility(
    request: Request,
    service: EligibilityService = Depends(eligibility_service),
) -> JSONResponse:
    # Body is read by hand: a malformed body is an internal failure here, not a 422.
    try:
        submission = await request.json()
        result = await service.check(submission)
    except GatewayError:
        raise
    except Exception as e:
        log.exception("eligibility.failed")
        raise InternalError.from_exception(e) from e
    return JSONResponse(content=result)


@router.get("/visa-types", response_model=list[VisaTypeResponse])
async def list_visa_types() -> list[VisaTypeResponse]:
    return [
        VisaTypeResponse(label=label, category=category.value)
        for label, category in CATEGORY_BY_LABEL.items()
    ]


# --- Module Notes -----------------------------------------------------------
# Translation and evaluator calls live in EligibilityService; this module only
# adapts HTTP to it.
