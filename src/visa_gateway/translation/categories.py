"""
visa_gateway.translation.categories

Visa category enumeration.

Responsibilities:
- Map human-readable visa-type labels to short category codes.
- Reject labels outside the table.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Any

from visa_gateway.errors import ValidationError


class VisaCategory(str, enum.Enum):
    F1 = "f1"
    H1 = "h1"
    B1B2 = "b1b2"
    K1 = "k1"


# Label (as shown on the form) -> category code.
CATEGORY_BY_LABEL: MappingProxyType[str, VisaCategory] = MappingProxyType(
    {
        "F1 Student": VisaCategory.F1,
        "H1B Work": VisaCategory.H1,
        "B1/B2 Visitor": VisaCategory.B1B2,
        "K1 Fiance": VisaCategory.K1,
    }
)


def resolve_category(label: Any) -> VisaCategory:
    # Non-string labels (missing key, numbers, objects) are unknown by definition.
    if not isinstance(label, str) or label not in CATEGORY_BY_LABEL:
        raise ValidationError()
    return CATEGORY_BY_LABEL[label]
