# -*- coding: utf-8 -*-
"""
Step validation service for the Signup Wizard.

Validates the signup answers for each step without UI coupling.
"""

from typing import Any, Dict, List, Union

from app.config import Config
from models.signup import SignupData
from services.validation import (
    AlwaysValid,
    CredentialsValidator,
    RequiredFieldsValidator,
    ValidationStrategy,
)


class SignupStepValidator:
    """Validates signup wizard steps (1-based step numbers)."""

    # Step constants
    STEP_CREDENTIALS = 1
    STEP_PROFILE = 2
    STEP_COMPANY = 3
    STEP_INVITES = 4

    _STRATEGIES: Dict[int, ValidationStrategy] = {
        STEP_CREDENTIALS: CredentialsValidator(Config.PASSWORD_MIN_LENGTH),
        STEP_PROFILE: RequiredFieldsValidator([
            ("first_name", "validation.first_name_required"),
            ("last_name", "validation.last_name_required"),
            ("job_title", "validation.job_title_required"),
            ("user_phone", "validation.phone_required"),
        ]),
        STEP_COMPANY: RequiredFieldsValidator([
            ("company_name", "validation.company_name_required"),
            ("industry", "validation.industry_required"),
            ("company_size", "validation.company_size_required"),
            ("country", "validation.country_required"),
            ("timezone", "validation.timezone_required"),
            ("currency", "validation.currency_required"),
            ("founded_year", "validation.founded_year_required"),
            ("business_type", "validation.business_type_required"),
        ]),
        STEP_INVITES: AlwaysValid(),
    }

    @staticmethod
    def _as_record(data: Union[SignupData, Dict[str, Any]]) -> Dict[str, Any]:
        if isinstance(data, SignupData):
            return data.to_dict()
        return data

    @classmethod
    def validate(cls, step: int, data: Union[SignupData, Dict[str, Any]]) -> List[str]:
        """
        Validate the answers a step is responsible for.

        Args:
            step: Step number (1-4)
            data: SignupData (or its dict form)

        Returns:
            List of error messages, empty when the step may advance
        """
        strategy = cls._STRATEGIES.get(step)
        if strategy is None:
            # Unknown step
            return []
        return strategy.validate(cls._as_record(data))

    @classmethod
    def validate_credentials(cls, data) -> List[str]:
        return cls.validate(cls.STEP_CREDENTIALS, data)

    @classmethod
    def validate_profile(cls, data) -> List[str]:
        return cls.validate(cls.STEP_PROFILE, data)

    @classmethod
    def validate_company(cls, data) -> List[str]:
        return cls.validate(cls.STEP_COMPANY, data)

    @classmethod
    def validate_invites(cls, data) -> List[str]:
        return cls.validate(cls.STEP_INVITES, data)
