# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    RequiredFieldsValidator,
    CredentialsValidator,
    AlwaysValid,
    EMAIL_PATTERN,
)

__all__ = [
    'ValidationStrategy',
    'RequiredFieldsValidator',
    'CredentialsValidator',
    'AlwaysValid',
    'EMAIL_PATTERN',
]
