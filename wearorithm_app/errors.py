"""Exceptions raised by the Wearorithm use cases.

Each exception carries the HTTP status the API layer should answer with; the
message is returned to the client verbatim as ``{"message": ...}``.
"""

from __future__ import annotations


class WearorithmError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailed(WearorithmError):
    status_code = 400


class AuthenticationFailed(WearorithmError):
    status_code = 401


class PermissionDenied(WearorithmError):
    status_code = 403


class NotFound(WearorithmError):
    status_code = 404


class GatewayError(WearorithmError):
    """The generative model call failed or returned an unusable payload."""

    status_code = 500


__all__ = [
    "WearorithmError",
    "ValidationFailed",
    "AuthenticationFailed",
    "PermissionDenied",
    "NotFound",
    "GatewayError",
]
