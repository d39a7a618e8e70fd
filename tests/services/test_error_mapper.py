# -*- coding: utf-8 -*-
"""
Tests for map_exception.
"""

from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException


def test_server_message_wins():
    error = ApiException("409 Conflict", status_code=409,
                         response_data={"message": "Email already exists", "error": "Conflict"})
    assert map_exception(error) == "Email already exists"


def test_server_error_field_second():
    error = ApiException("400 Bad Request", status_code=400, response_data={"error": "Bad input"})
    assert map_exception(error) == "Bad input"


def test_blank_server_fields_skipped():
    error = ApiException("500 Server Error", status_code=500, response_data={"message": "  "})
    assert map_exception(error) == "500 Server Error"


def test_transport_message():
    assert map_exception(NetworkException("Network down")) == "Network down"
    assert map_exception(RuntimeError("Network down")) == "Network down"


def test_fallback_message():
    assert map_exception(RuntimeError()) == "Failed to create account"


def test_custom_default():
    assert map_exception(RuntimeError(), "Something broke") == "Something broke"
