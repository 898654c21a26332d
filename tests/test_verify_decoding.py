from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from verify_api.providers.verify import decode_verify, decode_verify_message, normalize_recipient
from verify_api.utils.exceptions import DecodeError, RecipientTypeError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('{"recipient": 31612345678}', "31612345678"),
        ('{"recipient": "31612345678"}', "31612345678"),
        ('{"recipient": 31612345678.0}', "31612345678"),
        ('{"recipient": 3.1612345678e10}', "31612345678"),
        ('{"recipient": 1.5}', "1.5"),
        ('{"recipient": "jane@example.com"}', "jane@example.com"),
    ],
)
def test_decode_verify_normalizes_recipient(raw: str, expected: str):
    assert decode_verify(raw).recipient == expected


def test_decode_verify_accepts_bytes():
    result = decode_verify(b'{"id":"abc","status":"sent","recipient":31612345678}')

    assert result.id == "abc"
    assert result.status == "sent"
    assert result.recipient == "31612345678"


@pytest.mark.parametrize(
    ("raw", "json_type"),
    [
        ('{"recipient": true}', "boolean"),
        ('{"recipient": {"msisdn": 31612345678}}', "object"),
        ('{"recipient": [31612345678]}', "array"),
        ('{"recipient": null}', "null"),
        ('{"id": "abc"}', "null"),
    ],
)
def test_decode_verify_rejects_unexpected_recipient_type(raw: str, json_type: str):
    with pytest.raises(RecipientTypeError) as exc_info:
        decode_verify(raw)

    assert exc_info.value.json_type == json_type
    assert str(exc_info.value) == f"recipient is unknown type {json_type}"
    assert isinstance(exc_info.value, TypeError)
    assert isinstance(exc_info.value, DecodeError)


@pytest.mark.parametrize("raw", [None, "", b"", "   "])
def test_decode_verify_absent_payload_fails_explicitly(raw):
    with pytest.raises(DecodeError, match="empty response"):
        decode_verify(raw)


@pytest.mark.parametrize(
    "raw",
    [
        '{"id": "abc", "recipient": ',
        '{"recipient": NaN}',
        "[1, 2, 3]",
        '"31612345678"',
    ],
)
def test_decode_verify_malformed_payload_fails(raw: str):
    with pytest.raises(DecodeError):
        decode_verify(raw)


def test_decode_verify_shape_violation_fails_with_cause():
    with pytest.raises(DecodeError) as exc_info:
        decode_verify('{"recipient": "31612345678", "messages": ["not", "a", "map"]}')

    assert isinstance(exc_info.value.__cause__, PydanticValidationError)


def test_decode_verify_parses_timestamps_and_ignores_unknown_fields():
    result = decode_verify(
        '{"id":"abc","recipient":"31612345678","createdDatetime":"2017-05-30T12:39:50+00:00",'
        '"validUntilDatetime":"2017-05-30T12:40:20+00:00","newServiceField":true}'
    )

    assert result.created_datetime == datetime(2017, 5, 30, 12, 39, 50, tzinfo=timezone.utc)
    assert result.valid_until_datetime == datetime(2017, 5, 30, 12, 40, 20, tzinfo=timezone.utc)


def test_decoded_verify_is_immutable():
    result = decode_verify('{"id":"abc","status":"sent","recipient":"31612345678"}')

    with pytest.raises(PydanticValidationError):
        result.status = "verified"


def test_decode_verify_keeps_unknown_status_values():
    assert decode_verify('{"status":"failed_permanently","recipient":"1"}').status == "failed_permanently"


def test_normalize_recipient_large_number_keeps_all_digits():
    assert normalize_recipient(123456789012345678901234567890) == "123456789012345678901234567890"


def test_decode_verify_message():
    result = decode_verify_message('{"id":"msg-1","status":"delivered"}')

    assert result.id == "msg-1"
    assert result.status == "delivered"


def test_decode_verify_message_absent_payload_fails():
    with pytest.raises(DecodeError):
        decode_verify_message(None)


def test_decode_verify_message_shape_violation_fails():
    with pytest.raises(DecodeError):
        decode_verify_message('{"id": {"nested": true}}')
