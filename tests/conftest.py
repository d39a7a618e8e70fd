# -*- coding: utf-8 -*-
"""Shared fixtures for the StartupFlo test suite."""

import os
import threading

# Must be set before the QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from models.signup import SignupData
from models.user import User
from services.api_auth_service import AccountService
from services.api_client import reset_api_client


@pytest.fixture(autouse=True)
def fresh_api_client():
    """Every test starts without a shared API client or session."""
    reset_api_client()
    yield
    reset_api_client()


COMPLETE_SIGNUP = {
    "email": "a@b.co",
    "password": "secret123",
    "confirm_password": "secret123",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "job_title": "CEO",
    "user_phone": "555",
    "company_name": "Acme",
    "industry": "Technology",
    "company_size": "11-50",
    "country": "Ghana",
    "timezone": "Africa/Accra",
    "currency": "GHS",
    "founded_year": "2020",
    "business_type": "b2b",
}


@pytest.fixture
def complete_signup():
    """Signup answers that pass every step."""
    return SignupData.from_dict(COMPLETE_SIGNUP)


class FakeAccountService(AccountService):
    """Records register calls; returns a user or raises the configured error."""

    def __init__(self, error: Exception = None):
        self.error = error
        self.payloads = []

    def register(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return User(user_id="u-1", email=payload.email,
                    first_name=payload.first_name or "", last_name=payload.last_name or "")


class BlockingAccountService(FakeAccountService):
    """Holds register() open until release is set."""

    def __init__(self, error: Exception = None):
        super().__init__(error)
        self.started = threading.Event()
        self.release = threading.Event()

    def register(self, payload):
        self.started.set()
        self.release.wait(5)
        return super().register(payload)


@pytest.fixture
def account_service():
    return FakeAccountService()
