"""Shared pieces of the LibreNMS client: errors, value parsing and the HTTP layer."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode, urljoin, urlsplit

import requests

API_VERSION = "v0"
AUTH_HEADER = "X-Auth-Token"

_INVALID_BASE_URL = "invalid base URL format, expected: 'http[s]://<host>[:port]/'"


class LibreNMSError(Exception):
    """Base class for every error raised by the client."""


class ApiError(LibreNMSError):
    """The API answered with a non-2xx HTTP status."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        url: str,
        message: str = "",
        status: str = "",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        self.message = message
        self.status = status
        text = f"{status_code} {reason} {url}"
        if message:
            text += f": {message}"
        super().__init__(text)


@dataclass
class BaseResponse:
    """Fields common to every API response."""

    status: str = ""
    message: str = ""
    count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "BaseResponse":
        data = data or {}
        return cls(
            status=data.get("status") or "",
            message=data.get("message") or "",
            count=data.get("count") or 0,
        )


def api_base_url(base_url: str) -> str:
    """Return the API root for a server URL of the form http[s]://<host>[:port]/."""
    if not base_url.endswith("/"):
        base_url += "/"
    try:
        parts = urlsplit(base_url)
    except ValueError as exc:
        raise LibreNMSError(f"{_INVALID_BASE_URL}: {exc}") from exc
    if parts.path != "/":
        raise LibreNMSError(_INVALID_BASE_URL)
    return urljoin(base_url, f"api/{API_VERSION}/")


def parse_bool(value: Any) -> bool:
    """Read a boolean the API may send as true/false or as 0/1."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    raise LibreNMSError(f"failed to unmarshal Bool: unexpected value {value!r}")


def parse_float(value: Any) -> float:
    """Read a number the API may send either as a number or as a string."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise LibreNMSError(f"failed to unmarshal Float64: unexpected value {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        if value != value.strip() or "_" in value:
            raise LibreNMSError(f"failed to parse Float64 from string: {value!r}")
        try:
            return float(value)
        except ValueError as exc:
            raise LibreNMSError(f"failed to parse Float64 from string: {value!r}") from exc
    raise LibreNMSError(f"failed to unmarshal Float64: unexpected value {value!r}")


def _format_float(value: float) -> str:
    """Shortest decimal form of a float, without exponent notation."""
    if math.isnan(value) or math.isinf(value):
        raise LibreNMSError(f"unsupported float value: {value}")
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(value, "f").rstrip("0").rstrip(".")
    elif text.endswith(".0"):
        text = text[:-2]
    return text


class BaseClient:
    """HTTP plumbing shared by every resource of the LibreNMS API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
        log_level: int = logging.INFO,
    ) -> None:
        self._base_url = api_base_url(base_url)
        self._token = token
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        if logger is None:
            logger = logging.getLogger("librenms_client")
            logger.setLevel(log_level)
        self._log = logger

    @property
    def base_url(self) -> str:
        """The API root every request path is resolved against."""
        return self._base_url

    def close(self) -> None:
        """Release the HTTP session if the client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "BaseClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request to a path relative to the API root and return the decoded JSON object."""
        url = urljoin(self._base_url, path)
        headers = {"Accept": "application/json", AUTH_HEADER: self._token}
        data: bytes | None = None
        if body is not None:
            data = (json.dumps(body, ensure_ascii=False) + "\n").encode("utf-8")
            headers["Content-Type"] = "application/json"
        if params:
            query = urlencode(sorted((key, str(val)) for key, val in params.items()))
            url = url.split("?", 1)[0] + "?" + query

        self._log.debug("http request method=%s url=%s", method, url)
        try:
            response = self._session.request(method, url, data=data, headers=headers)
        except requests.RequestException as exc:
            raise LibreNMSError(f"{method} {url}: {exc}") from exc
        self._log.debug(
            "http response status=%d status_text=%r content_type=%r",
            response.status_code,
            f"{response.status_code} {response.reason}",
            response.headers.get("Content-Type", ""),
        )

        self._check_response(response)
        return self._decode(response)

    @staticmethod
    def _check_response(response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return
        url = response.request.url if response.request is not None else response.url
        message = ""
        status = ""
        text = response.text
        if text:
            try:
                payload = json.loads(text)
            except ValueError:
                payload = None
                message = text
            if isinstance(payload, dict):
                message = str(payload.get("message") or "")
                status = str(payload.get("status") or "")
            elif payload is not None:
                message = text
        raise ApiError(response.status_code, response.reason or "", url or "", message, status)

    @staticmethod
    def _decode(response: requests.Response) -> dict[str, Any]:
        text = response.text.lstrip()
        if not text:
            return {}
        try:
            payload, _ = json.JSONDecoder().raw_decode(text)
        except ValueError as exc:
            raise LibreNMSError(f"failure decoding response: {exc}") from exc
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise LibreNMSError(
                f"failure decoding response: expected a JSON object, got {type(payload).__name__}"
            )
        return payload