"""
visa_gateway.evaluator_client

HTTP client boundary to the external eligibility evaluator.

Responsibilities:
- Own the shared `httpx.AsyncClient` configuration (base url, timeout).
- POST evaluator profiles to `/evaluate` and hand back the raw response.
"""

from __future__ import annotations

import httpx

from visa_gateway.settings import Settings
from visa_gateway.translation.profile import EvaluatorProfile


def create_http_client(
    settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    # One pooled client per process; created/closed by the app lifespan.
    # Redirects are followed so the 2xx check applies to the final response.
    return httpx.AsyncClient(
        base_url=settings.backend_url,
        timeout=httpx.Timeout(settings.evaluator_timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )


class EvaluatorClient:
    """
    The eligibility service talks to the evaluator only through this class.
    Status handling is left to the caller, which relays non-2xx bodies verbatim.
    """

    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def evaluate(self, profile: EvaluatorProfile) -> httpx.Response:
        # `json=` sets `Content-Type: application/json`; kept explicit for the contract.
        return await self._http.post(
            "/evaluate",
            headers={"Content-Type": "application/json"},
            json=profile.model_dump(mode="json"),
        )


# --- Module Notes -----------------------------------------------------------
# No retries here: a failed call is reported once and the caller may resubmit.
