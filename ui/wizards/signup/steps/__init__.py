# -*- coding: utf-8 -*-
"""Signup wizard steps."""

from .credentials_step import CredentialsStep
from .profile_step import ProfileStep
from .company_step import CompanyStep
from .invite_team_step import InviteTeamStep

__all__ = [
    'CredentialsStep',
    'ProfileStep',
    'CompanyStep',
    'InviteTeamStep',
]
