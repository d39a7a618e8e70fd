# -*- coding: utf-8 -*-
"""
Tests for StartupFloApiClient and ApiAuthService.

HTTP is mocked by patching requests.request.
"""

from unittest import mock

import pytest
import requests

from services.api_auth_service import ApiAuthService
from services.api_client import ApiConfig, StartupFloApiClient, get_api_client
from services.exceptions import ApiException, NetworkException
from services.signup_payload import build_signup_payload


def _response(status_code=200, body=None):
    response = mock.MagicMock()
    response.status_code = status_code
    response.text = "" if body is None else "{...}"
    response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


@pytest.fixture
def client():
    return StartupFloApiClient(ApiConfig(base_url="http://api.test/api/", timeout=5, verify_ssl=True))


class TestRequest:
    """Test transport and error conversion."""

    def test_register_posts_payload(self, client):
        with mock.patch("services.api_client.requests.request",
                        return_value=_response(201, {"user": {"id": 1}})) as request:
            body = client.register({"email": "a@b.co"})

        assert body == {"user": {"id": 1}}
        kwargs = request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://api.test/api/auth/register"
        assert kwargs["json"] == {"email": "a@b.co"}
        assert kwargs["timeout"] == 5

    def test_empty_body(self, client):
        with mock.patch("services.api_client.requests.request", return_value=_response(204)):
            assert client.register({}) == {}

    def test_http_error_carries_body(self, client):
        response = _response(409, {"message": "Email already exists"})
        with mock.patch("services.api_client.requests.request", return_value=response):
            with pytest.raises(ApiException) as excinfo:
                client.register({"email": "a@b.co"})

        assert excinfo.value.status_code == 409
        assert excinfo.value.response_data == {"message": "Email already exists"}

    def test_connection_error(self, client):
        with mock.patch("services.api_client.requests.request",
                        side_effect=requests.exceptions.ConnectionError("Network down")):
            with pytest.raises(NetworkException) as excinfo:
                client.register({})
        assert "Network down" in excinfo.value.message

    def test_timeout(self, client):
        with mock.patch("services.api_client.requests.request",
                        side_effect=requests.exceptions.Timeout("timed out")):
            with pytest.raises(NetworkException):
                client.register({})


class TestSession:
    """Test token handling."""

    def test_bearer_header_after_login(self, client):
        assert "Authorization" not in client._headers()
        client.set_access_token("tok")
        assert client._headers()["Authorization"] == "Bearer tok"

    def test_shared_instance(self):
        assert get_api_client() is get_api_client()


class TestApiAuthService:
    """Test account registration through the API."""

    def test_register_builds_user_and_keeps_token(self, client, complete_signup):
        body = {
            "user": {"id": 7, "email": "a@b.co", "firstName": "Ada", "lastName": "Lovelace"},
            "tokens": {"accessToken": "tok", "refreshToken": "ref", "expiresIn": 60},
        }
        service = ApiAuthService(api_client=client)
        with mock.patch("services.api_client.requests.request", return_value=_response(201, body)) as request:
            user = service.register(build_signup_payload(complete_signup))

        sent = request.call_args.kwargs["json"]
        assert sent["email"] == "a@b.co"
        assert "confirm_password" not in sent
        assert user.user_id == "7"
        assert user.full_name == "Ada Lovelace"
        assert client.access_token == "tok"
        assert client.refresh_token == "ref"
        assert service.current_user is user

    def test_bare_user_response(self, client):
        service = ApiAuthService(api_client=client)
        with mock.patch("services.api_client.requests.request",
                        return_value=_response(201, {"id": "u-2", "email": "a@b.co"})):
            user = service.register({"email": "a@b.co", "password": "x", "company_name": "Acme"})

        assert user.user_id == "u-2"
        assert client.access_token is None

    def test_register_error_propagates(self, client):
        service = ApiAuthService(api_client=client)
        with mock.patch("services.api_client.requests.request",
                        side_effect=requests.exceptions.ConnectionError("Network down")):
            with pytest.raises(NetworkException):
                service.register({"email": "a@b.co"})

    @pytest.mark.parametrize("body", [[{"id": "u-2"}], "created", 42])
    def test_non_object_response_rejected(self, client, body):
        service = ApiAuthService(api_client=client)
        with mock.patch("services.api_client.requests.request", return_value=_response(201, body)):
            with pytest.raises(ApiException) as raised:
                service.register({"email": "a@b.co", "password": "x", "company_name": "Acme"})

        assert raised.value.message == "The server sent an unexpected response. Please try again."
        assert raised.value.context == "/auth/register"
        assert service.current_user is None
