# -*- coding: utf-8 -*-
"""
API Authentication Service - account creation against the REST API.

The signup wizard only depends on the AccountService interface; the
ApiAuthService implementation talks to Config.API_BASE_URL + /auth/register.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from models.user import User
from services.api_client import AuthEndpoints, StartupFloApiClient, get_api_client
from services.exceptions import ApiException
from services.signup_payload import SignupPayload
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class AccountService(ABC):
    """Creates accounts. Injected into the signup submission coordinator."""

    @abstractmethod
    def register(self, payload: Union[SignupPayload, Dict[str, Any]]) -> User:
        """
        Create the company and its first user.

        Raises:
            ApiException / NetworkException on failure
        """
        pass


class ApiAuthService(AccountService):
    """Account service that delegates to the REST API."""

    def __init__(self, api_client: Optional[StartupFloApiClient] = None):
        self.api_client = api_client or get_api_client()
        self.current_user: Optional[User] = None

    def register(self, payload: Union[SignupPayload, Dict[str, Any]]) -> User:
        """
        POST /auth/register

        Expected success response:
            {
                "user": {"id": "...", "email": "...", "first_name": "...", ...},
                "tokens": {"accessToken": "...", "refreshToken": "...", "expiresIn": 3600}
            }

        A bare user object is accepted as well.
        Any other JSON value raises ApiException.
        """
        body = payload.to_dict() if isinstance(payload, SignupPayload) else dict(payload)
        logger.info(f"Registering account for: {body.get('email')}")

        data = self.api_client.register(body)
        if not isinstance(data, dict):
            logger.error(f"Register response is not a JSON object: {type(data).__name__}")
            raise ApiException(tr("error.signup.unexpected_response"), context=AuthEndpoints.REGISTER)

        user = self._build_user(data)

        tokens = data.get("tokens") or {}
        token = tokens.get("accessToken") or tokens.get("access_token") or data.get("token")
        if token:
            self.api_client.set_access_token(
                token,
                refresh_token=tokens.get("refreshToken") or tokens.get("refresh_token"),
                expires_in=int(tokens.get("expiresIn") or tokens.get("expires_in") or 3600),
            )
            user._api_token = token
            user._refresh_token = self.api_client.refresh_token
        else:
            logger.warning("Register response carried no access token")

        self.current_user = user
        logger.info(f"Account created: {user.email} ({user.user_id})")
        return user

    @staticmethod
    def _build_user(data: Dict[str, Any]) -> User:
        """Build a User model from the API response JSON."""
        user_data = data.get("user") if isinstance(data.get("user"), dict) else data
        return User.from_dict(user_data)
