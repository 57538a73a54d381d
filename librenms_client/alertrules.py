"""Alert rules: create, read, update and delete."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from librenms_client.core import BaseResponse, LibreNMSError, parse_bool

ALERT_RULE_ENDPOINT = "rules"


@dataclass
class AlertRule:
    """An alert rule as returned by the API."""

    id: int = 0
    builder: str = ""
    devices: list[int] = field(default_factory=list)
    disabled: bool = False
    extra: str = ""
    groups: list[int] = field(default_factory=list)
    invert_map: bool = False
    locations: list[int] = field(default_factory=list)
    name: str = ""
    notes: str | None = None
    procedure_url: str | None = None
    query: str = ""
    rule: str = ""
    severity: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AlertRule":
        return cls(
            id=data.get("id") or 0,
            builder=data.get("builder") or "",
            devices=list(data.get("devices") or []),
            disabled=parse_bool(data.get("disabled")),
            extra=data.get("extra") or "",
            groups=list(data.get("groups") or []),
            invert_map=parse_bool(data.get("invert_map")),
            locations=list(data.get("locations") or []),
            name=data.get("name") or "",
            notes=data.get("notes"),
            procedure_url=data.get("proc"),
            query=data.get("query") or "",
            rule=data.get("rule") or "",
            severity=data.get("severity") or "",
        )


@dataclass
class AlertRuleCreateRequest:
    """Payload for creating an alert rule. ``builder`` holds encoded JSON."""

    builder: str = ""
    count: int = 0  # max alerts in the UI
    delay: str = ""
    devices: list[int] | None = None
    disabled: bool = False
    groups: list[int] | None = None
    interval: str = ""
    locations: list[int] | None = None
    mute: bool = False
    name: str = ""
    notes: str = ""
    procedure_url: str = ""
    query: str = ""
    rule: str = ""
    severity: str = ""  # ok, warning, critical

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"builder": self.builder}
        if self.count:
            payload["count"] = self.count
        if self.delay:
            payload["delay"] = self.delay
        payload["devices"] = self.devices
        if self.disabled:
            payload["disabled"] = 1
        payload["groups"] = self.groups
        if self.interval:
            payload["interval"] = self.interval
        payload["locations"] = self.locations
        if self.mute:
            payload["mute"] = True
        payload["name"] = self.name
        if self.notes:
            payload["notes"] = self.notes
        if self.procedure_url:
            payload["proc"] = self.procedure_url
        if self.query:
            payload["query"] = self.query
        if self.rule:
            payload["rule"] = self.rule
        payload["severity"] = self.severity
        return payload


@dataclass
class AlertRuleUpdateRequest(AlertRuleCreateRequest):
    """Payload for updating an alert rule; ``id`` names the rule."""

    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["rule_id"] = self.id
        return payload


@dataclass
class AlertRuleResponse(BaseResponse):
    """Response holding a list of alert rules."""

    rules: list[AlertRule] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "AlertRuleResponse":
        data = data or {}
        base = BaseResponse.from_dict(data)
        return cls(
            status=base.status,
            message=base.message,
            count=base.count,
            rules=[AlertRule.from_dict(item) for item in data.get("rules") or []],
        )


class AlertRulesMixin:
    """Alert rule operations of the API client."""

    _request: Callable[..., dict[str, Any]]

    def create_alert_rule(self, payload: AlertRuleCreateRequest) -> BaseResponse:
        """Create an alert rule. An empty device list is sent as [-1]."""
        if not payload.devices:
            payload.devices = [-1]
        data = self._request("POST", ALERT_RULE_ENDPOINT, body=payload.to_dict())
        return BaseResponse.from_dict(data)

    def delete_alert_rule(self, rule_id: int) -> BaseResponse:
        """Delete an alert rule by its ID."""
        data = self._request("DELETE", f"{ALERT_RULE_ENDPOINT}/{rule_id}")
        return BaseResponse.from_dict(data)

    def get_alert_rule(self, rule_id: int) -> AlertRuleResponse:
        """Fetch one alert rule by its ID."""
        data = self._request("GET", f"{ALERT_RULE_ENDPOINT}/{rule_id}")
        return AlertRuleResponse.from_dict(data)

    def get_alert_rules(self) -> AlertRuleResponse:
        """List all alert rules."""
        return AlertRuleResponse.from_dict(self._request("GET", ALERT_RULE_ENDPOINT))

    def update_alert_rule(self, payload: AlertRuleUpdateRequest) -> BaseResponse:
        """Update an alert rule. An empty device list is sent as [-1]."""
        if payload.id < 1:
            raise LibreNMSError("rule ID is required for updating an alert rule")
        if not payload.devices:
            payload.devices = [-1]
        data = self._request("PUT", ALERT_RULE_ENDPOINT, body=payload.to_dict())
        return BaseResponse.from_dict(data)