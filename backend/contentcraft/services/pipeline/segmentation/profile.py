"""
HCP profile parsing

Free-form HCP descriptions carry optional labelled fields such as
"specialty: Oncology, prescription_rate: 0.55". Parsing is isolated here
so the rest of the pipeline works with an explicit optional-field record.
"""

import re
from dataclasses import dataclass
from typing import Optional

_SPECIALTY_FIELD = re.compile(r"specialty:\s*([^,\n]+)", re.IGNORECASE)
_PRESCRIPTION_RATE_FIELD = re.compile(r"prescription_rate:\s*([\d.]+)", re.IGNORECASE)
_PRACTICE_SIZE_FIELD = re.compile(r"practice_size:\s*([^,\n]+)", re.IGNORECASE)
_YEARS_EXPERIENCE_FIELD = re.compile(r"years_experience:\s*(\d+)", re.IGNORECASE)

# Practitioner title found anywhere in the text -> specialty
SPECIALTY_KEYWORDS = {
    "cardiologist": "Cardiology",
    "oncologist": "Oncology",
    "neurologist": "Neurology",
    "pediatrician": "Pediatrics",
    "dermatologist": "Dermatology",
}


@dataclass(frozen=True)
class HCPProfile:
    specialty: Optional[str] = None
    prescription_rate: Optional[float] = None
    practice_size: Optional[str] = None
    years_experience: Optional[int] = None


def _parse_rate(raw: str) -> Optional[float]:
    try:
        return float(raw)
    except ValueError:
        return None


def parse_hcp_profile(text: Optional[str]) -> HCPProfile:
    """Extract the optional profile fields from raw HCP text.

    An explicit `specialty:` field wins over a practitioner title found in
    the text. Fields that do not match are left as None.

    Example:
        >>> parse_hcp_profile("Cardiologist, prescription_rate: 0.8").specialty
        'Cardiology'
    """
    if not text:
        return HCPProfile()

    specialty = None
    match = _SPECIALTY_FIELD.search(text)
    if match:
        specialty = match.group(1).strip() or None
    if specialty is None:
        lowered = text.lower()
        for keyword, name in SPECIALTY_KEYWORDS.items():
            if keyword in lowered:
                specialty = name
                break

    rate = None
    match = _PRESCRIPTION_RATE_FIELD.search(text)
    if match:
        rate = _parse_rate(match.group(1))

    practice_size = None
    match = _PRACTICE_SIZE_FIELD.search(text)
    if match:
        practice_size = match.group(1).strip() or None

    years = None
    match = _YEARS_EXPERIENCE_FIELD.search(text)
    if match:
        years = int(match.group(1))

    return HCPProfile(
        specialty=specialty,
        prescription_rate=rate,
        practice_size=practice_size,
        years_experience=years,
    )
