"""Alerts: listing, fetching, acknowledging and unmuting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from librenms_client.core import BaseResponse, parse_bool

ALERT_ENDPOINT = "alerts"


@dataclass
class Alert:
    """A LibreNMS alert. Fields the API may send as null are optional."""

    id: int = 0
    alerted: bool = False
    device_id: int = 0
    hostname: str = ""
    info: str = ""
    name: str = ""
    note: str | None = None
    notes: str | None = None
    open: bool = False
    procedure_url: str | None = None
    rule_id: int = 0
    severity: str = ""  # "ok", "warning", "critical"
    state: int = 0  # 0 = ok, 1 = alert, 2 = ack
    timestamp: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Alert":
        return cls(
            id=data.get("id") or 0,
            alerted=parse_bool(data.get("alerted")),
            device_id=data.get("device_id") or 0,
            hostname=data.get("hostname") or "",
            info=data.get("info") or "",
            name=data.get("name") or "",
            note=data.get("note"),
            notes=data.get("notes"),
            open=parse_bool(data.get("open")),
            procedure_url=data.get("proc"),
            rule_id=data.get("rule_id") or 0,
            severity=data.get("severity") or "",
            state=data.get("state") or 0,
            timestamp=data.get("timestamp") or "",
        )


@dataclass
class AlertAckRequest:
    """Payload for acknowledging an alert.

    With ``until_clear`` false the alert re-alerts if it gets worse, better or changes.
    """

    note: str = ""
    until_clear: bool = False

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.note:
            payload["note"] = self.note
        payload["until_clear"] = self.until_clear
        return payload


@dataclass
class AlertsQuery:
    """Filters for listing alerts; only fields that are set are sent."""

    order: str | None = None
    rule_id: int | None = None
    severity: str | None = None  # "ok", "warning", "critical"
    state: int | None = None  # 0 = ok, 1 = alert, 2 = ack

    def params(self) -> dict[str, str]:
        """Query parameters for the fields that are set, including zero values."""
        values: dict[str, str] = {}
        if self.order is not None:
            values["order"] = self.order
        if self.rule_id is not None:
            values["alert_rule"] = str(self.rule_id)
        if self.severity is not None:
            values["severity"] = self.severity
        if self.state is not None:
            values["state"] = str(self.state)
        return values


@dataclass
class AlertsResponse(BaseResponse):
    """Response holding a list of alerts."""

    alerts: list[Alert] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "AlertsResponse":
        data = data or {}
        base = BaseResponse.from_dict(data)
        return cls(
            status=base.status,
            message=base.message,
            count=base.count,
            alerts=[Alert.from_dict(item) for item in data.get("alerts") or []],
        )


class AlertsMixin:
    """Alert operations of the API client."""

    _request: Callable[..., dict[str, Any]]

    def ack_alert(self, alert_id: int, payload: AlertAckRequest | None = None) -> BaseResponse:
        """Acknowledge an alert by its ID."""
        body = payload.to_dict() if payload is not None else None
        data = self._request("PUT", f"{ALERT_ENDPOINT}/{alert_id}", body=body)
        return BaseResponse.from_dict(data)

    def get_alert(self, alert_id: int) -> AlertsResponse:
        """Fetch one alert by its ID."""
        return AlertsResponse.from_dict(self._request("GET", f"{ALERT_ENDPOINT}/{alert_id}"))

    def get_alerts(self, query: AlertsQuery | None = None) -> AlertsResponse:
        """List alerts, optionally filtered."""
        query = query if query is not None else AlertsQuery()
        data = self._request("GET", ALERT_ENDPOINT, params=query.params())
        return AlertsResponse.from_dict(data)

    def unmute_alert(self, alert_id: int) -> BaseResponse:
        """Unmute an alert by its ID."""
        data = self._request("PUT", f"{ALERT_ENDPOINT}/unmute/{alert_id}")
        return BaseResponse.from_dict(data)