# verify_api/utils/exceptions.py — Custom exception classes

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from verify_api.contracts.verify import ApiError


class VerifyError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(VerifyError, ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecodeError(VerifyError, ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecipientTypeError(DecodeError, TypeError):
    def __init__(self, json_type: str):
        super().__init__(f"recipient is unknown type {json_type}")
        self.json_type = json_type


class TransportError(VerifyError):
    """Raised when the service could not be reached or answered with a non-2xx status.

    ``status_code`` is ``None`` for network-level failures. ``errors`` holds the
    entries of the service's ``{"errors": [...]}`` body when one was returned.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: list[ApiError] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


class NotFoundError(TransportError):
    def __init__(self, resource: str, *, errors: list[ApiError] | None = None):
        super().__init__(
            f"{resource} not found",
            status_code=404,
            errors=errors,
        )
        self.resource = resource
