# -*- coding: utf-8 -*-
"""Wizard services package."""

from .step_validator import SignupStepValidator

__all__ = ["SignupStepValidator"]
