# -*- coding: utf-8 -*-
"""
StartupFlo Data Models
"""

from .signup import SignupData, TeamInvite, PLACEHOLDER_INVITES, INVITE_ROLES
from .user import User

__all__ = [
    "SignupData",
    "TeamInvite",
    "PLACEHOLDER_INVITES",
    "INVITE_ROLES",
    "User",
]
