"""
visa_gateway.translation.profile

Evaluator profile model and the submission → profile transform.

Responsibilities:
- Define the JSON document the evaluator accepts (`EvaluatorProfile`).
- Coerce the top-level scalar fields to text.
- Group renamed category fields under the resolved category code.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from visa_gateway.translation.categories import resolve_category
from visa_gateway.translation.fields import rename_known_fields

SCALAR_FIELDS: tuple[str, ...] = ("age", "nationality", "education", "employment", "income")


class EvaluatorProfile(BaseModel):
    """
    Body of `POST <backend_url>/evaluate`.

    `visa_type` carries the form label verbatim while `extra` is keyed by the
    normalized category code; the evaluator reads both.
    """

    model_config = ConfigDict(frozen=True)

    age: str
    nationality: str
    education: str
    employment: str
    income: str
    visa_type: str
    extra: dict[str, dict[str, Any]]


def coerce_scalar(value: Any) -> str:
    """
    Render a scalar form value as text.

    Missing and falsy values (None, 0, "", False, empty collections) all
    become "". Booleans and whole floats are rendered the way a JSON client
    would print them ("true", "25").
    """
    if not value:
        return ""
    if isinstance(value, bool):
        return "true"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def build_profile(submission: Mapping[str, Any]) -> EvaluatorProfile:
    """
    Translate one form submission.

    Raises `ValidationError` when `visaType` is not a known label.
    """
    category = resolve_category(submission.get("visaType"))
    scalars = {name: coerce_scalar(submission.get(name)) for name in SCALAR_FIELDS}
    return EvaluatorProfile(
        **scalars,
        visa_type=submission["visaType"],
        extra={category.value: rename_known_fields(submission)},
    )
