# verify_api/__init__.py — Verify API client

from verify_api.contracts.verify import ApiError, Verify, VerifyMessage, VerifyParams, VerifyRequest
from verify_api.providers.client import HttpTransport, Transport
from verify_api.providers.verify import (
    build_verify_request,
    create,
    decode_verify,
    decode_verify_message,
    delete,
    read,
    read_verify_email_message,
    verify_token,
)
from verify_api.utils.exceptions import (
    DecodeError,
    NotFoundError,
    RecipientTypeError,
    TransportError,
    ValidationError,
    VerifyError,
)

__all__ = [
    "ApiError",
    "Verify",
    "VerifyMessage",
    "VerifyParams",
    "VerifyRequest",
    "HttpTransport",
    "Transport",
    "build_verify_request",
    "create",
    "decode_verify",
    "decode_verify_message",
    "delete",
    "read",
    "read_verify_email_message",
    "verify_token",
    "DecodeError",
    "NotFoundError",
    "RecipientTypeError",
    "TransportError",
    "ValidationError",
    "VerifyError",
]
