from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

# Values omitted from a request body, matching the service's "absent if empty" rule.
_EMPTY_WIRE_VALUES = (None, "", 0)


class VerifyParams(BaseModel):
    model_config = _WIRE_CONFIG

    originator: str | None = None
    reference: str | None = None
    type: str | None = None
    template: str | None = None
    data_coding: str | None = None
    report_url: str | None = None
    voice: str | None = None
    language: str | None = None
    timeout: int | None = None
    token_length: int | None = None
    subject: str | None = None


class VerifyRequest(VerifyParams):
    recipient: str

    def to_wire(self) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True)
        return {key: value for key, value in payload.items() if value not in _EMPTY_WIRE_VALUES}


class Verify(BaseModel):
    model_config = _WIRE_CONFIG

    id: str | None = None
    href: str | None = None
    reference: str | None = None
    status: str | None = None
    messages: dict[str, str] | None = None
    created_datetime: datetime | None = None
    valid_until_datetime: datetime | None = None
    recipient: str


class VerifyMessage(BaseModel):
    model_config = _WIRE_CONFIG

    id: str | None = None
    status: str | None = None


class ApiError(BaseModel):
    model_config = _WIRE_CONFIG

    code: int | None = None
    description: str | None = None
    parameter: str | None = None
