"""
visa_gateway.api.routers.health

Liveness endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only; the evaluator is not probed.
    return {"status": "ok"}
