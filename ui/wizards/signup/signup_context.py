# -*- coding: utf-8 -*-
"""
Signup Context - Manages state and data for the signup wizard.

Extends WizardContext with the SignupData aggregate that every step
merges its answers into.
"""

from typing import Any, Dict

from ui.wizards.framework import WizardContext
from models.signup import SignupData
from utils.logger import get_logger, mask_sensitive

logger = get_logger(__name__)


class SignupContext(WizardContext):
    """Context for the signup wizard."""

    def __init__(self, signup: SignupData = None):
        super().__init__()
        self.signup: SignupData = signup or SignupData()

    def update_data(self, partial: Dict[str, Any]):
        """Shallow-merge answers into the signup record."""
        self.signup.update(partial)
        self.touch()

    def get_data(self, key: str, default: Any = None) -> Any:
        return getattr(self.signup, key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary (passwords masked)."""
        base_data = super().to_dict()
        base_data["signup"] = mask_sensitive(self.signup.to_dict())
        return base_data
