from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from verify_api.config import Settings, get_settings
from verify_api.contracts.verify import ApiError
from verify_api.providers.common import as_int, as_str, now_ms, parse_json_or_raw
from verify_api.utils.exceptions import NotFoundError, TransportError

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL: str = Settings.model_fields["verify_base_url"].default
_DEFAULT_TIMEOUT_SECONDS: float = Settings.model_fields["verify_timeout_seconds"].default
_DEFAULT_USER_AGENT: str = Settings.model_fields["verify_user_agent"].default


class Transport(Protocol):
    """Single request/response capability the verify operations are built on.

    ``send`` returns the raw response body (``None`` when the service sent none)
    and raises ``TransportError`` for network failures and non-2xx statuses.
    """

    def send(self, method: str, path: str, body: dict[str, Any] | None) -> str | bytes | None: ...


def parse_api_errors(body: dict[str, Any]) -> list[ApiError]:
    raw_errors = body.get("errors")
    if not isinstance(raw_errors, list):
        return []
    errors: list[ApiError] = []
    for item in raw_errors:
        if not isinstance(item, dict):
            continue
        errors.append(
            ApiError(
                code=as_int(item.get("code")),
                description=as_str(item.get("description")),
                parameter=as_str(item.get("parameter")),
            )
        )
    return errors


def _describe_failure(status_code: int, errors: list[ApiError]) -> str:
    details = "; ".join(
        f"{error.description or 'unknown error'} (code {error.code})"
        + (f" [{error.parameter}]" if error.parameter else "")
        for error in errors
    )
    if details:
        return f"Verify API returned HTTP {status_code}: {details}"
    return f"Verify API returned HTTP {status_code}"


class HttpTransport:
    """httpx-backed ``Transport`` speaking JSON to the Verify REST API."""

    def __init__(
        self,
        *,
        access_key: str | None,
        base_url: str = _DEFAULT_BASE_URL,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = _DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
    ) -> None:
        cleaned_key = as_str(access_key)
        if not cleaned_key:
            raise ValueError("access_key must be set and non-empty")
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)
        self._headers = {
            "Authorization": f"AccessKey {cleaned_key}",
            "Accept": "application/json",
            "User-Agent": user_agent,
        }

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> HttpTransport:
        settings = settings or get_settings()
        return cls(
            access_key=settings.verify_access_key,
            base_url=settings.verify_base_url,
            timeout_seconds=settings.verify_timeout_seconds,
            user_agent=settings.verify_user_agent,
        )

    def send(self, method: str, path: str, body: dict[str, Any] | None) -> str | None:
        url = f"{self._base_url}/{path.lstrip('/')}"
        # Query strings carry the one-time token; keep them out of logs and error text.
        resource = path.split("?", 1)[0]
        start_ms = now_ms()
        logger.debug("Verify API request", extra={"method": method, "path": resource})
        try:
            response = self._client.request(method, url, headers=self._headers, json=body)
        except httpx.HTTPError as exc:
            logger.warning(
                "Verify API request errored",
                extra={"method": method, "path": resource, "error_type": exc.__class__.__name__},
            )
            raise TransportError(f"{exc.__class__.__name__} calling {method} {resource}") from exc

        duration_ms = now_ms() - start_ms
        if response.status_code >= 400:
            parsed = parse_json_or_raw(response.text, response.json)
            errors = parse_api_errors(parsed)
            logger.warning(
                "Verify API request failed",
                extra={
                    "method": method,
                    "path": resource,
                    "http_status": response.status_code,
                    "duration_ms": duration_ms,
                    "raw_response": parsed,
                },
            )
            if response.status_code == 404:
                raise NotFoundError(resource, errors=errors)
            raise TransportError(
                _describe_failure(response.status_code, errors),
                status_code=response.status_code,
                errors=errors,
            )

        logger.debug(
            "Verify API response",
            extra={"method": method, "path": resource, "http_status": response.status_code, "duration_ms": duration_ms},
        )
        return response.text or None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
