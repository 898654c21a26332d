from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import ValidationError as PydanticValidationError

from verify_api.contracts.verify import Verify, VerifyMessage, VerifyParams, VerifyRequest
from verify_api.providers.client import Transport
from verify_api.utils.exceptions import DecodeError, RecipientTypeError, ValidationError

logger = logging.getLogger(__name__)

_PATH = "verify"
_EMAIL_MESSAGES_PATH = f"{_PATH}/messages/email"


def build_verify_request(recipient: str, params: VerifyParams | None = None) -> VerifyRequest:
    if not recipient:
        raise ValidationError("recipient is required")
    if params is None:
        return VerifyRequest(recipient=recipient)
    return VerifyRequest(recipient=recipient, **params.model_dump())


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    # repr() is the shortest round-tripping form; normalize + "f" drops exponent and trailing zeros.
    return format(Decimal(repr(value)).normalize(), "f")


def normalize_recipient(value: Any) -> str:
    """Return the recipient as a string whether the service sent a JSON string or number.

    SMS verifications still report the recipient as a number (the legacy phone
    number encoding), so numbers are rendered with full precision and no
    exponent. Any other JSON type raises ``RecipientTypeError``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        normalized = _format_number(value)
        logger.debug("Normalized numeric recipient", extra={"source_type": type(value).__name__})
        return normalized
    raise RecipientTypeError(_json_type_name(value))


def _reject_constant(name: str) -> Any:
    raise DecodeError(f"unsupported JSON constant {name}")


def _load_object(raw: str | bytes | None, resource: str) -> dict[str, Any]:
    if raw is None or not raw.strip():
        raise DecodeError(f"cannot decode {resource} from an empty response")
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"malformed {resource} payload: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON object for {resource}, got {_json_type_name(payload)}")
    return payload


def decode_verify(raw: str | bytes | None) -> Verify:
    payload = _load_object(raw, "verify")
    payload["recipient"] = normalize_recipient(payload.get("recipient"))
    try:
        return Verify.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodeError(f"invalid verify payload: {exc}") from exc


def decode_verify_message(raw: str | bytes | None) -> VerifyMessage:
    payload = _load_object(raw, "verify message")
    try:
        return VerifyMessage.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodeError(f"invalid verify message payload: {exc}") from exc


def _resource_path(base: str, id: str) -> str:
    if not id:
        raise ValidationError("id is required")
    return f"{base}/{quote(id, safe='')}"


def create(transport: Transport, recipient: str, params: VerifyParams | None = None) -> Verify:
    """Create a new one-time password challenge for ``recipient``."""
    request = build_verify_request(recipient, params)
    return decode_verify(transport.send("POST", _PATH, request.to_wire()))


def read(transport: Transport, id: str) -> Verify:
    return decode_verify(transport.send("GET", _resource_path(_PATH, id), None))


def delete(transport: Transport, id: str) -> None:
    transport.send("DELETE", _resource_path(_PATH, id), None)


def verify_token(transport: Transport, id: str, token: str) -> Verify:
    """Check ``token`` against the challenge ``id``; the outcome is reported in ``status``."""
    path = f"{_resource_path(_PATH, id)}?{urlencode({'token': token})}"
    return decode_verify(transport.send("GET", path, None))


def read_verify_email_message(transport: Transport, id: str) -> VerifyMessage:
    return decode_verify_message(transport.send("GET", _resource_path(_EMAIL_MESSAGES_PATH, id), None))
