# -*- coding: utf-8 -*-
"""
User entity returned by the account API.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Signed-in user as described by the backend."""

    user_id: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    job_title: Optional[str] = None
    company_id: Optional[str] = None
    role: Optional[str] = None

    # API tokens (kept in memory only)
    _api_token: Optional[str] = None
    _refresh_token: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

    def to_dict(self) -> dict:
        """Convert to dictionary (tokens excluded)."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "job_title": self.job_title,
            "company_id": self.company_id,
            "role": self.role,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Build from an API user object (snake_case or camelCase keys)."""
        return cls(
            user_id=str(data.get("id") or data.get("user_id") or data.get("userId") or ""),
            email=data.get("email") or "",
            first_name=data.get("first_name") or data.get("firstName") or "",
            last_name=data.get("last_name") or data.get("lastName") or "",
            job_title=data.get("job_title") or data.get("jobTitle"),
            company_id=data.get("company_id") or data.get("companyId"),
            role=data.get("role"),
        )
