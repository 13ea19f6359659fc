"""
visa_gateway.services.eligibility_service

Translate-and-forward service for eligibility checks.

Responsibilities:
- Validate and translate a form submission into an evaluator profile.
- Make exactly one evaluator call per submission.
- Map the evaluator outcome onto the gateway error types or a pass-through result.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from visa_gateway.errors import BackendError, InternalError, ValidationError
from visa_gateway.evaluator_client import EvaluatorClient
from visa_gateway.observability.logging import bind_request_context, get_logger
from visa_gateway.translation.profile import build_profile

log = get_logger(__name__)


class EligibilityService:
    def __init__(self, *, client: EvaluatorClient) -> None:
        self._client = client

    async def check(self, submission: Any) -> Any:
        """
        Returns the evaluator's parsed JSON body unchanged.

        Raises:
            ValidationError: unknown visa type; the evaluator is not called.
            BackendError: evaluator answered with a non-2xx status.
            InternalError: null body, transport failure, or an unparseable evaluator body.
        """
        if submission is None:
            # JSON `null` is an unreadable request rather than an unknown visa type.
            raise InternalError("Request body is null")
        if not isinstance(submission, Mapping):
            log.info("eligibility.rejected", reason="body is not an object")
            raise ValidationError()

        try:
            profile = build_profile(submission)
        except ValidationError:
            log.info("eligibility.rejected", visa_type=submission.get("visaType"))
            raise

        category = next(iter(profile.extra))
        bind_request_context(visa_category=category)
        log.info("eligibility.forward", category=category, fields=sorted(profile.extra[category]))
        try:
            response = await self._client.evaluate(profile)
        except httpx.HTTPError as e:
            log.warning("eligibility.transport_failed", error=str(e))
            raise InternalError.from_exception(e) from e

        if not response.is_success:
            log.warning("eligibility.backend_error", status_code=response.status_code)
            raise BackendError(response.text)

        try:
            return response.json()
        except ValueError as e:
            # json.JSONDecodeError is a ValueError subclass.
            raise InternalError.from_exception(e) from e
