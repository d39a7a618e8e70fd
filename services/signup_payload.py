# -*- coding: utf-8 -*-
"""
Signup payload - turns the wizard answers into the register request body.

Only populated fields are serialized; the backend treats a missing key and
an empty string differently, so blank optional answers are never sent.
"""

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from models.signup import SignupData

_DIGITS = re.compile(r"\d+")

DEFAULT_INDUSTRY_WORD = "innovative"


@dataclass
class SignupPayload:
    """Body of POST /auth/register."""

    # Required
    email: str
    password: str
    company_name: str

    # User profile
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    user_phone: Optional[str] = None

    # Company profile
    industry: Optional[str] = None
    country: Optional[str] = None
    website: Optional[str] = None
    company_size_category: Optional[str] = None
    team_size: Optional[int] = None
    founded_year: Optional[int] = None
    annual_revenue_range: Optional[str] = None
    business_type: Optional[str] = None
    timezone: Optional[str] = None
    currency: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None

    # Marketing copy
    description: Optional[str] = None
    mission_statement: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, dropping every field that was not populated."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def _clean(value: Optional[str]) -> Optional[str]:
    """Stripped value, or None when blank."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_team_size(company_size: Optional[str]) -> Optional[int]:
    """First run of digits in a size bucket ("51-200" -> 51, "1000+" -> 1000)."""
    if not company_size:
        return None
    match = _DIGITS.search(company_size)
    if match is None:
        return None
    return int(match.group(0))


def parse_founded_year(founded_year: Optional[str]) -> Optional[int]:
    value = _clean(founded_year)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def build_signup_payload(data: SignupData) -> SignupPayload:
    """
    Build the register payload from the signup answers.

    email and company_name are trimmed, the password is sent verbatim.
    Team invites are not part of the payload.
    """
    job_title = _clean(data.job_title)
    company_size = _clean(data.company_size)

    payload = SignupPayload(
        email=(data.email or "").strip(),
        password=data.password,
        company_name=(data.company_name or "").strip(),
        first_name=_clean(data.first_name),
        last_name=_clean(data.last_name),
        job_title=job_title,
        # No separate department field in the wizard
        department=job_title,
        user_phone=_clean(data.user_phone),
        industry=_clean(data.industry),
        country=_clean(data.country),
        website=_clean(data.website),
        company_size_category=company_size,
        team_size=parse_team_size(company_size),
        founded_year=parse_founded_year(data.founded_year),
        annual_revenue_range=_clean(data.annual_revenue_range),
        business_type=_clean(data.business_type),
        timezone=_clean(data.timezone),
        currency=_clean(data.currency),
        phone=_clean(data.phone),
        address=_clean(data.address),
        city=_clean(data.city),
        state_province=_clean(data.state_province),
        postal_code=_clean(data.postal_code),
    )

    if payload.company_name:
        industry_word = payload.industry or DEFAULT_INDUSTRY_WORD
        if payload.description is None:
            payload.description = (
                f"{payload.company_name} is a {industry_word} company focused on "
                f"delivering excellent products and services."
            )
        if payload.mission_statement is None:
            payload.mission_statement = (
                f"To empower businesses through {industry_word} solutions "
                f"and exceptional service."
            )

    return payload
