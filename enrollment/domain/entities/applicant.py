from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApplicantFields:
    # Raw user input, trimmed only when validated
    full_name: str = ""
    email: str = ""
    phone: str = ""
    country: str = ""
    preferred_date: str = ""
    preferred_time: str = ""
