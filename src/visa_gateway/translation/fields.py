"""
visa_gateway.translation.fields

Field rename table.

Responsibilities:
- Declare, per visa category, which form fields the evaluator understands
  and what it calls them.
- Flatten those declarations into one lookup keyed by form field name.
- Apply the lookup to a submission (unmapped fields are dropped).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from visa_gateway.translation.categories import VisaCategory

CATEGORY_FIELDS: Mapping[VisaCategory, Mapping[str, str]] = MappingProxyType(
    {
        VisaCategory.F1: MappingProxyType(
            {
                "universityAcceptance": "university_acceptance",
                "schoolName": "school_name",
                "formI20Issued": "i20_issued",
                "proofOfFundsAmount": "proof_of_funds_amount",
                "testScores": "test_scores",
            }
        ),
        VisaCategory.H1: MappingProxyType(
            {
                "jobOffer": "job_offer",
                "employerName": "employer_name",
                "yearsExperience": "years_experience",
                "degreeEquiv": "degree_equiv",
            }
        ),
        VisaCategory.B1B2: MappingProxyType(
            {
                "travelPurpose": "travel_purpose",
                "tripDurationDays": "trip_duration_days",
                "invitationHost": "invitation_host",
                "returnTicket": "return_ticket",
            }
        ),
        VisaCategory.K1: MappingProxyType(
            {
                "usCitizenSponsor": "us_citizen_sponsor",
                "metInPerson": "met_in_person",
                "relationshipLengthMonths": "relationship_length_months",
                "evidenceList": "evidence_list",
            }
        ),
    }
)


def _flatten(tables: Mapping[VisaCategory, Mapping[str, str]]) -> dict[str, str]:
    flat: dict[str, str] = {}
    for category, table in tables.items():
        for source, target in table.items():
            if source in flat:
                raise RuntimeError(
                    f"form field {source!r} is mapped twice (again under {category.value})"
                )
            flat[source] = target
    return flat


# Lookup is flat: any known field is renamed regardless of the submitted visa type.
FIELD_RENAMES: Mapping[str, str] = MappingProxyType(_flatten(CATEGORY_FIELDS))


def rename_known_fields(submission: Mapping[str, Any]) -> dict[str, Any]:
    """
    Copy every field found in `FIELD_RENAMES` under its evaluator name.

    Fields the table does not know are silently dropped. Values are copied
    as-is, nested structures included.
    """
    return {
        FIELD_RENAMES[key]: value for key, value in submission.items() if key in FIELD_RENAMES
    }
