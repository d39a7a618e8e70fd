# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for signup step validation.

Each strategy maps a record (the signup answers as a dict) to a list of
human-readable error messages. An empty list means the record is valid.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

from services.translation_manager import tr


EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any]) -> List[str]:
        """
        Validate a record and return list of error messages.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            List of error messages (empty list if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        return len(self.validate(record)) == 0


class RequiredFieldsValidator(ValidationStrategy):
    """
    Checks that every listed field holds a non-blank string.

    Each missing field contributes its own message, in declaration order.
    """

    def __init__(self, required_fields: Sequence[Tuple[str, str]]):
        """
        Args:
            required_fields: (field name, translation key of the error message) pairs
        """
        self.required_fields = list(required_fields)

    def validate(self, record: Dict[str, Any]) -> List[str]:
        errors = []
        for field_name, message_key in self.required_fields:
            value = record.get(field_name)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append(tr(message_key))
        return errors


class CredentialsValidator(ValidationStrategy):
    """
    Email / password / confirmation rules.

    All three checks run; errors are collected, not short-circuited.
    """

    def __init__(self, min_password_length: int = 8):
        self.min_password_length = min_password_length

    def validate(self, record: Dict[str, Any]) -> List[str]:
        errors = []

        email = record.get("email") or ""
        if not email:
            errors.append(tr("validation.email_required"))
        elif not EMAIL_PATTERN.search(email):
            errors.append(tr("validation.email_invalid"))

        password = record.get("password") or ""
        if not password:
            errors.append(tr("validation.password_required"))
        elif len(password) < self.min_password_length:
            errors.append(tr("validation.password_too_short", min=self.min_password_length))

        confirm_password = record.get("confirm_password") or ""
        if not confirm_password:
            errors.append(tr("validation.confirm_required"))
        elif password != confirm_password:
            errors.append(tr("validation.passwords_mismatch"))

        return errors


class AlwaysValid(ValidationStrategy):
    """For steps with nothing to block on."""

    def validate(self, record: Dict[str, Any]) -> List[str]:
        return []
