"""
visa_gateway.translation

Form submission → evaluator profile translation.

Responsibilities:
- Static visa category and field rename tables.
- Pure functions that build the evaluator profile from a submission.
"""

from visa_gateway.translation.categories import VisaCategory, resolve_category
from visa_gateway.translation.fields import FIELD_RENAMES, rename_known_fields
from visa_gateway.translation.profile import EvaluatorProfile, build_profile, coerce_scalar

__all__ = [
    "FIELD_RENAMES",
    "EvaluatorProfile",
    "VisaCategory",
    "build_profile",
    "coerce_scalar",
    "rename_known_fields",
    "resolve_category",
]
