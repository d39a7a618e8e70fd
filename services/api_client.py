# -*- coding: utf-8 -*-
"""
StartupFlo API Client
=====================

Thin requests-based client for the StartupFlo backend. Only the account
endpoints used by the desktop client are wrapped here.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger, mask_sensitive

logger = get_logger(__name__)


class AuthEndpoints:
    REGISTER = "/auth/register"


@dataclass
class ApiConfig:
    """
    API connection settings.

    Values left as None are read from Config (which reads .env).
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class StartupFloApiClient:
    """
    Client for the StartupFlo REST API.

    Usage:
        client = StartupFloApiClient(ApiConfig(base_url="http://localhost:8000/api"))
        body = client.register({"email": "...", "password": "...", "company_name": "..."})
    """

    def __init__(self, config: ApiConfig):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.token_expires_at: Optional[datetime] = None

        if not config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    # ==================== Session ====================

    def set_access_token(self, token: str, refresh_token: Optional[str] = None,
                         expires_in: int = 3600):
        """Keep the session tokens returned by the backend (memory only)."""
        self.access_token = token
        if refresh_token:
            self.refresh_token = refresh_token
        self.token_expires_at = datetime.now() + timedelta(seconds=expires_in)
        logger.debug(f"Access token updated (expires in {expires_in}s)")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    # ==================== Transport ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Perform an HTTP request and decode the JSON body.

        Raises:
            ApiException: the server answered with an error status
            NetworkException: the request never got a response
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {json.dumps(mask_sensitive(json_data), ensure_ascii=False, default=str)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            if isinstance(result, dict):
                res_str = json.dumps(mask_sensitive(result), ensure_ascii=False, default=str)
                if len(res_str) > 1000:
                    logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
                else:
                    logger.debug(f"[API RES] Body: {res_str}")

            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {},
                context=endpoint
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=endpoint
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                context=endpoint
            )

    # ==================== Accounts ====================

    def register(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a company and its first user.

        POST /auth/register

        Returns:
            Response body: {"user": {...}, "tokens": {...}}
        """
        return self._request("POST", AuthEndpoints.REGISTER, json_data=payload) or {}


_api_client_instance: Optional[StartupFloApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> StartupFloApiClient:
    """
    Shared ApiClient instance (Singleton).

    Args:
        config: only used on first call
    """
    global _api_client_instance

    if _api_client_instance is None:
        if config is None:
            config = ApiConfig()
        _api_client_instance = StartupFloApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the shared client (tests)."""
    global _api_client_instance
    _api_client_instance = None
