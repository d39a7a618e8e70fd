# -*- coding: utf-8 -*-
"""Maps exceptions raised by the API layer to messages shown to the user."""

from typing import Any, Optional

from services.translation_manager import tr


def _body_text(response_data: Any, key: str) -> Optional[str]:
    if not isinstance(response_data, dict):
        return None
    value = response_data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def map_exception(error: Exception, default: Optional[str] = None) -> str:
    """
    Pick the most specific human-readable message for an error.

    Order: server "message" field, server "error" field, the exception's own
    message, then the default ("Failed to create account").
    """
    response_data = getattr(error, "response_data", None)

    message = _body_text(response_data, "message") or _body_text(response_data, "error")
    if message:
        return message

    own_message = getattr(error, "message", None)
    if not isinstance(own_message, str) or not own_message:
        own_message = str(error)
    if own_message:
        return own_message

    return default or tr("error.signup.failed")
