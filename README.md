# librenms-client

Python building blocks for talking to the LibreNMS HTTP API (`/api/v0/`).
The package covers alerts, alert rules, devices and locations. It is built on
`requests`.

## Installation

```
pip install librenms-client
```

To run the test suite:

```
pip install "librenms-client[test]"
pytest
```

## Modules

- `librenms_client.core`: `BaseClient` (HTTP session, auth header, request and
  error handling), `BaseResponse`, the errors `LibreNMSError` and `ApiError`,
  and the helpers `api_base_url`, `parse_bool` and `parse_float`.
- `librenms_client.alerts`: `AlertsMixin` with `get_alert`, `get_alerts`,
  `ack_alert` and `unmute_alert`; data classes `Alert`, `AlertAckRequest`,
  `AlertsQuery`, `AlertsResponse`.
- `librenms_client.alertrules`: `AlertRulesMixin` with `create_alert_rule`,
  `get_alert_rule`, `get_alert_rules`, `update_alert_rule` and
  `delete_alert_rule`; data classes `AlertRule`, `AlertRuleCreateRequest`,
  `AlertRuleUpdateRequest`, `AlertRuleResponse`.
- `librenms_client.devices`: `DevicesMixin` with `create_device`,
  `get_device`, `get_devices`, `update_device` and `delete_device`; data
  classes `Device`, `DeviceCreateRequest`, `DeviceUpdateRequest`,
  `DevicesQuery`, `DeviceResponse`.
- `librenms_client.locations`: `LocationsMixin` with `create_location`,
  `get_location`, `get_locations`, `update_location` and `delete_location`;
  data classes `Location`, `LocationCreateRequest`, `LocationUpdateRequest`,
  `LocationResponse`, `LocationsResponse`.

## Putting a client together

The package has no ready-made client class. Combine `BaseClient` with the
mixins you need:

```python
from librenms_client.alertrules import AlertRulesMixin
from librenms_client.alerts import AlertsMixin
from librenms_client.core import BaseClient
from librenms_client.devices import DevicesMixin
from librenms_client.locations import LocationsMixin


class LibreNMS(AlertsMixin, AlertRulesMixin, DevicesMixin, LocationsMixin, BaseClient):
    pass
```

`BaseClient(base_url, token, *, session=None, logger=None, log_level=logging.INFO)`
takes the server URL in the form `http[s]://<host>[:port]/`; a missing trailing
slash is added, and any other path raises `LibreNMSError`. Requests go to
`<base_url>api/v0/` with the token in the `X-Auth-Token` header. Pass your own
`requests.Session` to reuse one; otherwise the client creates a session and
closes it on `close()` or when leaving a `with` block.

```python
from librenms_client.devices import DeviceCreateRequest, DevicesQuery

with LibreNMS("https://librenms.example.com/", "token") as client:
    devices = client.get_devices(DevicesQuery(os="linux"))
    for device in devices.devices:
        print(device.device_id, device.hostname)

    client.create_device(
        DeviceCreateRequest(hostname="192.0.2.10", snmp_version="v2c", snmp_community="public")
    )
```

### Alerts

`AlertsQuery` sends only the fields that are set, so `state=0` is sent as a
filter:

```python
from librenms_client.alerts import AlertAckRequest, AlertsQuery

alerts = client.get_alerts(AlertsQuery(state=1))
client.ack_alert(alerts.alerts[0].id, AlertAckRequest(until_clear=True))
client.unmute_alert(alerts.alerts[0].id)
```

### Alert rules

`create_alert_rule` and `update_alert_rule` replace an empty `devices` list on
the request with `[-1]` before sending. `update_alert_rule` raises
`LibreNMSError("rule ID is required for updating an alert rule")` when the
request's `id` is below 1.

### Device updates

`DeviceUpdateRequest(fields=[...], data=[...])` sets `fields[i]` to `data[i]`:

```python
from librenms_client.devices import DeviceUpdateRequest

client.update_device("192.0.2.10", DeviceUpdateRequest(
    fields=["hardware", "port_association_mode"], data=["New Hardware", 2],
))
```

### Location updates

`LocationUpdateRequest` sends only the fields you set; the server fails when
asked to patch a field that has not changed.

```python
from librenms_client.locations import LocationUpdateRequest

client.update_location(2, LocationUpdateRequest(name="Rack 4"))
```

## Value parsing

The API sends some booleans as `0`/`1` and some numbers as strings.
`parse_bool` accepts `true`/`false` or integers (non-zero is true), and
`parse_float` accepts numbers or numeric strings; both treat `null` as
false/`0.0` and raise `LibreNMSError` on anything else.

## Errors

A non-2xx reply raises `librenms_client.core.ApiError`, which carries
`status_code`, `reason`, `url`, and the `message` and `status` from a JSON
error body (or the raw body as `message` when it is not JSON). Connection
failures and undecodable responses raise `LibreNMSError`, the base class of
every error the package raises.

## Logging

Requests and responses are logged at DEBUG level to the `librenms_client`
logger, whose level is set from `log_level` unless you pass your own `logger`.

## What the package does not do

It has no single assembled client class, no command-line tool, and no
support for device groups or services; only alerts, alert rules, devices and
locations are covered.