# -*- coding: utf-8 -*-
"""
Signup data model.

SignupData accumulates the answers of every signup wizard step.
Steps only ever merge into it, so moving back and forth never loses input.
"""

from dataclasses import dataclass, field, fields, asdict
from datetime import datetime
from typing import Any, Dict, List


INVITE_ROLES = ("Admin", "Manager", "Employee", "Viewer")
DEFAULT_INVITE_ROLE = "Employee"

JOB_TITLE_SUGGESTIONS = [
    "CEO", "CTO", "COO", "CFO", "VP Engineering", "Product Manager",
    "Engineering Manager", "Developer", "Designer", "Marketing Manager",
    "Sales Manager", "Operations Manager", "HR Manager", "Other",
]

INDUSTRIES = [
    "Technology", "Healthcare", "Finance", "Education", "E-commerce", "Manufacturing",
    "Real Estate", "Marketing", "Consulting", "Media", "Non-profit", "Other",
]

COMPANY_SIZES = ["1-10", "11-50", "51-200", "201-500", "501-1000", "1000+"]

COUNTRIES = [
    "United States", "Canada", "United Kingdom", "Germany", "France", "Australia",
    "India", "Singapore", "Nigeria", "Ghana", "South Africa", "Brazil", "Mexico", "Other",
]

REVENUE_RANGES = [
    "under_100k", "100k-500k", "500k-1M", "1M-5M", "5M-10M", "10M-50M", "over_100M",
]

BUSINESS_TYPES = [
    "Privately Held", "Publicly Traded", "Partnership", "Sole Proprietorship",
    "Non-Profit", "Government", "b2b", "b2c", "saas", "other",
]

TIMEZONES = [
    "Africa/Accra", "America/New_York", "America/Los_Angeles", "Europe/London",
    "Europe/Berlin", "Asia/Tokyo", "Asia/Singapore", "Australia/Sydney", "Other",
]

CURRENCIES = ["USD", "EUR", "GBP", "GHS", "NGN", "ZAR", "CAD", "AUD", "JPY", "Other"]


def founded_years(count: int = 50) -> List[str]:
    """Selectable founding years, newest first."""
    current = datetime.now().year
    return [str(current - i) for i in range(count)]


@dataclass
class TeamInvite:
    """A colleague to invite once the account exists."""
    email: str
    role: str = DEFAULT_INVITE_ROLE
    name: str = ""

    def __post_init__(self):
        if self.role not in INVITE_ROLES:
            raise ValueError(f"Unknown invite role: {self.role}")

    @property
    def display_name(self) -> str:
        return self.name or self.email

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TeamInvite':
        return cls(
            email=data.get("email", ""),
            role=data.get("role") or DEFAULT_INVITE_ROLE,
            name=data.get("name") or "",
        )


# Shown in the invite list while the user has added nobody. Display only.
PLACEHOLDER_INVITES = (
    TeamInvite(email="jane.smith@company.com", role="Manager", name="Jane Smith"),
    TeamInvite(email="mike.johnson@company.com", role="Employee", name="Mike Johnson"),
    TeamInvite(email="sarah.wilson@company.com", role="Employee", name="Sarah Wilson"),
)

# camelCase names used by the web client and the API docs
_CAMEL_CASE_ALIASES = {
    "confirmPassword": "confirm_password",
    "firstName": "first_name",
    "lastName": "last_name",
    "jobTitle": "job_title",
    "userPhone": "user_phone",
    "companyName": "company_name",
    "companySize": "company_size",
    "foundedYear": "founded_year",
    "annualRevenueRange": "annual_revenue_range",
    "businessType": "business_type",
    "stateProvince": "state_province",
    "postalCode": "postal_code",
}


def _to_invites(value) -> List[TeamInvite]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"invites must be a list, got {type(value).__name__}")
    invites = []
    for invite in value:
        if isinstance(invite, TeamInvite):
            invites.append(invite)
        elif isinstance(invite, dict):
            invites.append(TeamInvite.from_dict(invite))
        else:
            raise ValueError(f"Invalid invite: {invite!r}")
    return invites


@dataclass
class SignupData:
    """All signup wizard answers."""

    # Step 1: Credentials
    email: str = ""
    password: str = ""
    confirm_password: str = ""

    # Step 2: Personal profile
    first_name: str = ""
    last_name: str = ""
    job_title: str = ""
    user_phone: str = ""

    # Step 3: Company profile
    company_name: str = ""
    industry: str = ""
    company_size: str = ""
    country: str = ""
    website: str = ""
    founded_year: str = ""
    annual_revenue_range: str = ""
    business_type: str = ""
    timezone: str = ""
    currency: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state_province: str = ""
    postal_code: str = ""

    # Step 4: Team invites (duplicates allowed)
    invites: List[TeamInvite] = field(default_factory=list)

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def update(self, partial: Dict[str, Any]) -> None:
        """
        Shallow-merge partial into this record.

        Keys missing from partial keep their value. Unknown keys raise KeyError,
        invites that are not a list raise ValueError. On error nothing changes.
        """
        known = self.field_names()
        resolved = {}
        for key, value in partial.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name not in known:
                raise KeyError(f"Unknown signup field: {key}")
            if name == "invites":
                value = _to_invites(value)
            resolved[name] = value

        for name, value in resolved.items():
            setattr(self, name, value)

    def display_invites(self) -> List[TeamInvite]:
        """Invites to list on screen: the user's own, or the placeholders when there are none."""
        if self.invites:
            return list(self.invites)
        return list(PLACEHOLDER_INVITES)

    def has_real_invites(self) -> bool:
        return len(self.invites) > 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["invites"] = [invite.to_dict() for invite in self.invites]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SignupData':
        signup = cls()
        signup.update(data)
        return signup
