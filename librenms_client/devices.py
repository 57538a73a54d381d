"""Devices: add, list, fetch, update and delete."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from librenms_client.core import BaseResponse, parse_bool, parse_float

DEVICE_ENDPOINT = "devices"


def _optional_float(value: Any) -> float | None:
    return None if value is None else parse_float(value)


@dataclass
class Device:
    """A device known to LibreNMS. Fields the API may send as null are optional."""

    device_id: int = 0
    agent_uptime: int = 0
    auth_algorithm: str | None = None
    auth_level: str | None = None
    auth_name: str | None = None
    auth_pass: str | None = None
    bgp_local_as: int | None = None
    community: str | None = None
    crypto_algorithm: str | None = None
    crypto_pass: str | None = None
    disable_notify: bool = False
    disabled: bool = False
    display: str | None = None
    features: str | None = None
    hardware: str = ""
    hostname: str = ""
    icon: str = ""
    ignore: bool = False
    ignore_status: bool = False
    inserted: str = ""
    ip: str = ""
    last_discovered: str | None = None
    last_discovered_time_taken: float = 0.0
    last_ping: str | None = None
    last_ping_time_taken: float = 0.0
    last_poll_attempted: str | None = None
    last_polled: str | None = None
    last_polled_time_taken: float = 0.0
    latitude: float | None = None
    longitude: float | None = None
    location: str | None = None
    location_id: int | None = None
    max_depth: int | None = None
    notes: str | None = None
    os: str = ""
    override_sys_location: bool = False
    overwrite_ip: str = ""
    poller_group: int = 0
    port: int = 0
    port_association_mode: int = 0
    purpose: str | None = None
    retries: int | None = None
    serial: str | None = None
    snmp_disable: bool = False
    snmp_version: str = ""
    status: bool = False  # /devices sends 0/1, /devices/:id sends true/false
    status_reason: str = ""
    sys_contact: str | None = None
    sys_descr: str | None = None
    sys_name: str = ""
    sys_object_id: str | None = None
    timeout: int | None = None
    transport: str = ""
    type: str = ""
    uptime: int | None = None
    version: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Device":
        return cls(
            device_id=data.get("device_id") or 0,
            agent_uptime=data.get("agent_uptime") or 0,
            auth_algorithm=data.get("authalgo"),
            auth_level=data.get("authlevel"),
            auth_name=data.get("authname"),
            auth_pass=data.get("authpass"),
            bgp_local_as=data.get("bgpLocalAs"),
            community=data.get("community"),
            crypto_algorithm=data.get("cryptoalgo"),
            crypto_pass=data.get("cryptopass"),
            disable_notify=parse_bool(data.get("disable_notify")),
            disabled=parse_bool(data.get("disabled")),
            display=data.get("display"),
            features=data.get("features"),
            hardware=data.get("hardware") or "",
            hostname=data.get("hostname") or "",
            icon=data.get("icon") or "",
            ignore=parse_bool(data.get("ignore")),
            ignore_status=parse_bool(data.get("ignore_status")),
            inserted=data.get("inserted") or "",
            ip=data.get("ip") or "",
            last_discovered=data.get("last_discovered"),
            last_discovered_time_taken=float(data.get("last_discovered_timetaken") or 0),
            last_ping=data.get("last_ping"),
            last_ping_time_taken=float(data.get("last_ping_timetaken") or 0),
            last_poll_attempted=data.get("last_poll_attempted"),
            last_polled=data.get("last_pulled"),
            last_polled_time_taken=float(data.get("last_polled_timetaken") or 0),
            latitude=_optional_float(data.get("lat")),
            longitude=_optional_float(data.get("lng")),
            location=data.get("location"),
            location_id=data.get("location_id"),
            max_depth=data.get("max_depth"),
            notes=data.get("notes"),
            os=data.get("os") or "",
            override_sys_location=parse_bool(data.get("override_sysLocation")),
            overwrite_ip=data.get("overwrite_ip") or "",
            poller_group=data.get("poller_group") or 0,
            port=data.get("port") or 0,
            port_association_mode=data.get("port_association_mode") or 0,
            purpose=data.get("purpose"),
            retries=data.get("retries"),
            serial=data.get("serial"),
            snmp_disable=parse_bool(data.get("snmp_disable")),
            snmp_version=data.get("snmpver") or "",
            status=parse_bool(data.get("status")),
            status_reason=data.get("status_reason") or "",
            sys_contact=data.get("sysContact"),
            sys_descr=data.get("sysDescr"),
            sys_name=data.get("sysName") or "",
            sys_object_id=data.get("sysObjectID"),
            timeout=data.get("timeout"),
            transport=data.get("transport") or "",
            type=data.get("type") or "",
            uptime=data.get("uptime"),
            version=data.get("version"),
        )


_CREATE_FIELDS = (
    ("display", "display"),
    ("force_add", "force_add"),
    ("hardware", "hardware"),
    ("location", "location"),
    ("location_id", "location_id"),
    ("os", "os"),
    ("override_sys_location", "override_sysLocation"),
    ("ping_fallback", "ping_fallback"),
    ("poller_group", "poller_group"),
    ("port", "port"),
    ("port_assoc_mode", "port_association_mode"),
    ("snmp_auth_algo", "authalgo"),
    ("snmp_auth_level", "authlevel"),
    ("snmp_auth_name", "authname"),
    ("snmp_auth_pass", "authpass"),
    ("snmp_crypto_algo", "cryptoalgo"),
    ("snmp_crypto_pass", "cryptopass"),
    ("snmp_community", "community"),
    ("snmp_disable", "snmp_disable"),
    ("snmp_version", "snmpver"),
    ("sys_name", "sysName"),
    ("transport", "transport"),
)


@dataclass
class DeviceCreateRequest:
    """Payload for adding a device; empty fields are left out."""

    hostname: str = ""
    display: str = ""
    force_add: bool = False
    hardware: str = ""
    location: str = ""
    location_id: int = 0
    os: str = ""
    override_sys_location: bool = False
    ping_fallback: bool = False
    poller_group: int = 0
    port: int = 0
    port_assoc_mode: int = 0  # ifIndex(1), ifName(2), ifDescr(3), ifAlias(4)
    snmp_auth_algo: str = ""  # MD5, SHA, SHA-224, SHA-256, SHA384, SHA-512
    snmp_auth_level: str = ""  # noAuthNoPriv, authNoPriv, authPriv
    snmp_auth_name: str = ""
    snmp_auth_pass: str = ""
    snmp_crypto_algo: str = ""  # DES, AES, AES-192, AES-256, AES-256-C
    snmp_crypto_pass: str = ""
    snmp_community: str = ""
    snmp_disable: bool = False
    snmp_version: str = ""  # v1, v2c, v3
    sys_name: str = ""
    transport: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"hostname": self.hostname}
        for attr, key in _CREATE_FIELDS:
            value = getattr(self, attr)
            if value:
                payload[key] = value
        return payload


@dataclass
class DeviceUpdateRequest:
    """Payload for updating device fields: ``fields[i]`` is set to ``data[i]``."""

    fields: list[str] = field(default_factory=list)
    data: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"field": list(self.fields), "data": list(self.data)}


@dataclass
class DeviceResponse(BaseResponse):
    """Response holding a list of devices."""

    devices: list[Device] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DeviceResponse":
        data = data or {}
        base = BaseResponse.from_dict(data)
        return cls(
            status=base.status,
            message=base.message,
            count=base.count,
            devices=[Device.from_dict(item) for item in data.get("devices") or []],
        )


_QUERY_FIELDS = (
    ("device_id", "device_id"),
    ("display", "display"),
    ("hostname", "hostname"),
    ("ipv4", "ipv4"),
    ("ipv6", "ipv6"),
    ("location", "location"),
    ("location_id", "location_id"),
    ("mac_address", "mac"),
    ("order", "order"),
    ("os", "os"),
    ("sys_name", "sysName"),
    ("type", "type"),
)


@dataclass
class DevicesQuery:
    """Filters for listing devices; empty fields are not sent."""

    device_id: int = 0
    display: str = ""
    hostname: str = ""
    ipv4: str = ""
    ipv6: str = ""
    location: str = ""
    location_id: int = 0
    mac_address: str = ""
    order: str = ""
    os: str = ""
    sys_name: str = ""
    type: str = ""

    def params(self) -> dict[str, str]:
        """Query parameters for the fields that are set."""
        return {
            key: str(getattr(self, attr))
            for attr, key in _QUERY_FIELDS
            if getattr(self, attr)
        }


class DevicesMixin:
    """Device operations of the API client."""

    _request: Callable[..., dict[str, Any]]

    def create_device(self, payload: DeviceCreateRequest) -> DeviceResponse:
        """Add a device by hostname or IP."""
        data = self._request("POST", f"{DEVICE_ENDPOINT}/", body=payload.to_dict())
        return DeviceResponse.from_dict(data)

    def delete_device(self, identifier: str) -> DeviceResponse:
        """Delete a device by its ID or hostname."""
        data = self._request("DELETE", f"{DEVICE_ENDPOINT}/{identifier}")
        return DeviceResponse.from_dict(data)

    def get_device(self, identifier: str) -> DeviceResponse:
        """Fetch a device by its ID or hostname."""
        data = self._request("GET", f"{DEVICE_ENDPOINT}/{identifier}")
        return DeviceResponse.from_dict(data)

    def get_devices(self, query: DevicesQuery | None = None) -> DeviceResponse:
        """List devices, optionally filtered."""
        params = query.params() if query is not None else {}
        data = self._request("GET", DEVICE_ENDPOINT, params=params)
        return DeviceResponse.from_dict(data)

    def update_device(self, identifier: str, payload: DeviceUpdateRequest) -> BaseResponse:
        """Update fields of a device given by its ID or hostname."""
        data = self._request("PATCH", f"{DEVICE_ENDPOINT}/{identifier}", body=payload.to_dict())
        return BaseResponse.from_dict(data)