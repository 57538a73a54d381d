import json

import pytest
import responses

from librenms_client.alerts import (
    Alert,
    AlertAckRequest,
    AlertsMixin,
    AlertsQuery,
    AlertsResponse,
)
from librenms_client.core import ApiError, BaseClient, BaseResponse, api_base_url

SERVER = "http://librenms.test/"
API = "http://librenms.test/api/v0/"


class _AlertsClient(AlertsMixin, BaseClient):
    pass


def _alert(alert_id, rule_id, device_id=6, severity="critical"):
    return {
        "id": alert_id,
        "alerted": 1,
        "device_id": device_id,
        "hostname": "host.example.com",
        "info": "",
        "name": "Port down",
        "note": None,
        "notes": None,
        "open": 1,
        "proc": None,
        "rule_id": rule_id,
        "severity": severity,
        "state": 1,
        "timestamp": "2025-06-01 12:00:00",
    }


ALERTS_BODY = {
    "status": "ok",
    "count": 6,
    "alerts": [_alert(15, 3)] + [_alert(i, 4) for i in range(16, 21)],
}
ALERT_BODY = {"status": "ok", "count": 1, "alerts": [_alert(9, 2, severity="warning")]}


@pytest.fixture
def client():
    with _AlertsClient(SERVER, "token") as api_client:
        yield api_client


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def test_ack_alert(client, rsps):
    rsps.add(
        responses.PUT,
        API + "alerts/9",
        json={"status": "ok", "message": "Alert has been acknowledged"},
    )
    resp = client.ack_alert(9, AlertAckRequest(until_clear=True))
    assert resp.status == "ok"
    assert resp.message == "Alert has been acknowledged"
    request = rsps.calls[0].request
    assert json.loads(request.body) == {"until_clear": True}
    assert request.headers["X-Auth-Token"] == "token"
    assert request.headers["Content-Type"] == "application/json"


def test_ack_alert_nil_payload(client, rsps):
    rsps.add(
        responses.PUT,
        api_base_url(SERVER) + "alerts/9",
        json={"status": "ok", "message": "Alert has been acknowledged"},
    )
    resp = client.ack_alert(9, None)
    assert resp.status == "ok"
    assert resp.message == "Alert has been acknowledged"
    assert not rsps.calls[0].request.body


def test_get_alert(client, rsps):
    rsps.add(responses.GET, api_base_url(SERVER) + "alerts/9", json=ALERT_BODY)
    resp = client.get_alert(9)
    assert resp.status == "ok"
    assert resp.count == 1
    assert len(resp.alerts) == 1
    alert = resp.alerts[0]
    assert alert.id == 9
    assert alert.device_id == 6
    assert alert.severity == "warning"
    assert alert == Alert.from_dict(ALERT_BODY["alerts"][0])


def test_get_alerts(client, rsps):
    rsps.add(responses.GET, API + "alerts", json=ALERTS_BODY)
    resp = client.get_alerts(AlertsQuery(state=1))
    assert resp.status == "ok"
    assert resp.count == 6
    assert len(resp.alerts) == 6
    assert resp.alerts[0].id == 15
    assert resp.alerts[0].rule_id == 3
    assert rsps.calls[0].request.url == API + "alerts?state=1"


def test_get_alerts_nil_query(client, rsps):
    rsps.add(responses.GET, api_base_url(SERVER) + "alerts", json=ALERTS_BODY)
    resp = client.get_alerts(None)
    assert resp.status == "ok"
    assert resp.count == 6
    assert len(resp.alerts) == 6
    assert resp.alerts[0].id == 15
    assert resp.alerts[0].rule_id == 3
    assert rsps.calls[0].request.url == API + "alerts"


def test_unmute_alert(client, rsps):
    body = {"status": "ok", "message": "Alert has been unmuted"}
    rsps.add(responses.PUT, api_base_url(SERVER) + "alerts/unmute/9", json=body)
    resp = client.unmute_alert(9)
    expected = BaseResponse.from_dict(body)
    assert resp.status == "ok"
    assert resp.message == "Alert has been unmuted"
    assert (resp.status, resp.message, resp.count) == (
        expected.status,
        expected.message,
        expected.count,
    )


def test_get_alert_not_found_raises(client, rsps):
    body = {"status": "error", "message": "Alert does not exist"}
    rsps.add(responses.GET, api_base_url(SERVER) + "alerts/99", json=body, status=404)
    with pytest.raises(ApiError, match="Alert does not exist") as excinfo:
        client.get_alert(99)
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Alert does not exist"
    assert excinfo.value.message == BaseResponse.from_dict(body).message


def test_query_params_keep_zero_values():
    query = AlertsQuery(order="timestamp desc", rule_id=0, severity="ok", state=0)
    assert query.params() == {
        "order": "timestamp desc",
        "alert_rule": "0",
        "severity": "ok",
        "state": "0",
    }


def test_empty_query_has_no_params():
    assert AlertsQuery().params() == {}


def test_ack_request_omits_empty_note():
    assert AlertAckRequest().to_dict() == {"until_clear": False}
    assert AlertAckRequest(note="looking", until_clear=True).to_dict() == {
        "note": "looking",
        "until_clear": True,
    }


def test_alert_from_dict_reads_numeric_bools():
    alert = Alert.from_dict({"id": 3, "alerted": 0, "open": True, "note": None, "proc": "http://example.com/runbook"})
    assert alert.id == 3
    assert alert.alerted is False
    assert alert.open is True
    assert alert.note is None
    assert alert.procedure_url == "http://example.com/runbook"


def test_alerts_response_handles_null_list():
    resp = AlertsResponse.from_dict({"status": "ok", "count": 0, "alerts": None})
    assert resp.alerts == []
    assert resp.status == "ok"