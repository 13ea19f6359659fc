"""
visa_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the evaluator client and service.
- Encapsulate app.state access patterns (shared httpx client).
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from visa_gateway.evaluator_client import EvaluatorClient
from visa_gateway.services.eligibility_service import EligibilityService


def http_client_from_app(request: Request) -> httpx.AsyncClient:
    # Created by the lifespan in `visa_gateway.api.app.create_app`.
    return request.app.state.evaluator_http  # type: ignore[attr-defined]


def evaluator_client(http: httpx.AsyncClient = Depends(http_client_from_app)) -> EvaluatorClient:
    return EvaluatorClient(http=http)


def eligibility_service(
    client: EvaluatorClient = Depends(evaluator_client),
) -> EligibilityService:
    return EligibilityService(client=client)


# --- Module Notes -----------------------------------------------------------
# Tests swap the evaluator via `app.dependency_overrides[evaluator_client]`.
