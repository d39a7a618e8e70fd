# -*- coding: utf-8 -*-
"""Signup wizard: account, profile, company and team steps."""

from .signup_context import SignupContext
from .signup_wizard import SignupWizard

__all__ = ['SignupContext', 'SignupWizard']
