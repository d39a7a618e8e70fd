# -*- coding: utf-8 -*-
"""
StartupFlo Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ApiAuthService",
    "StartupFloApiClient",
    "SubmissionCoordinator",
    "SignupStepValidator",
    "build_signup_payload",
    "map_exception",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ApiAuthService":
        from .api_auth_service import ApiAuthService
        return ApiAuthService
    elif name == "StartupFloApiClient":
        from .api_client import StartupFloApiClient
        return StartupFloApiClient
    elif name == "SubmissionCoordinator":
        from .signup_coordinator import SubmissionCoordinator
        return SubmissionCoordinator
    elif name == "SignupStepValidator":
        from .wizard import SignupStepValidator
        return SignupStepValidator
    elif name == "build_signup_payload":
        from .signup_payload import build_signup_payload
        return build_signup_payload
    elif name == "map_exception":
        from .error_mapper import map_exception
        return map_exception
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
