import json

import pytest
import responses

from librenms_client.core import ApiError, BaseClient, BaseResponse, api_base_url
from librenms_client.locations import (
    Location,
    LocationCreateRequest,
    LocationResponse,
    LocationsMixin,
    LocationsResponse,
    LocationUpdateRequest,
)

SERVER = "http://librenms.example.com/"
API = "http://librenms.example.com/api/v0/"


class _Client(LocationsMixin, BaseClient):
    pass


@pytest.fixture
def client():
    with _Client(SERVER, "token") as api:
        yield api


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


GET_LOCATION = {
    "status": "ok",
    "get_location": {
        "id": 1,
        "location": "test location",
        "lat": "-122.08427",
        "lng": "37.4220648",
        "timestamp": "2025-06-01 12:00:00",
        "fixed_coordinates": True,
    },
}

GET_LOCATIONS = {
    "status": "ok",
    "locations": [
        {"id": 1, "location": "Sitting on the Dock of the Bay", "lat": None, "lng": None, "fixed_coordinates": 0},
        {"id": 2, "location": "Second", "lat": "10.5", "lng": "20.25", "fixed_coordinates": 0},
        {"id": 3, "location": "Third", "lat": None, "lng": None, "fixed_coordinates": 0},
        {"id": 4, "location": "Fourth", "lat": 1.5, "lng": 2.5, "fixed_coordinates": 0},
        {"id": 5, "location": "test location", "lat": "-122.08427000", "lng": "37.42206480", "fixed_coordinates": 1},
    ],
    "count": 5,
}


def test_get_location(client, mocked):
    mocked.add(responses.GET, api_base_url(SERVER) + "location/2", json=GET_LOCATION)
    resp = client.get_location(2)
    assert resp.status == "ok"
    assert resp.location.id == 1
    assert resp.location.name == "test location"
    assert resp.location.fixed_coordinates is True
    assert resp.location.longitude == 37.4220648
    assert resp.location == Location.from_dict(GET_LOCATION["get_location"])


def test_get_locations(client, mocked):
    mocked.add(responses.GET, api_base_url(SERVER) + "resources/locations", json=GET_LOCATIONS)
    resp = client.get_locations()
    assert resp.status == "ok"
    assert resp.count == 5
    assert len(resp.locations) == 5
    first = resp.locations[0]
    assert first.id == 1
    assert first.name == "Sitting on the Dock of the Bay"
    assert first.fixed_coordinates is False
    last = resp.locations[4]
    assert last.id == 5
    assert last.name == "test location"
    assert last.fixed_coordinates is True
    assert last.longitude == 37.42206480
    assert resp.locations == [Location.from_dict(item) for item in GET_LOCATIONS["locations"]]


def test_create_location(client, mocked):
    mocked.add(
        responses.POST,
        API + "locations",
        json={"status": "ok", "message": "Location added with id #6"},
    )
    request = LocationCreateRequest(
        name="Test Location", fixed_coordinates=False, latitude=37.7749, longitude=-122.4194
    )
    resp = client.create_location(request)
    assert resp.status == "ok"
    assert json.loads(mocked.calls[0].request.body) == {
        "location": "Test Location",
        "fixed_coordinates": 0,
        "lat": 37.7749,
        "lng": -122.4194,
    }


def test_delete_location(client, mocked):
    body = {"status": "ok", "message": "Location test location has been deleted successfully"}
    mocked.add(responses.DELETE, api_base_url(SERVER) + "locations/2", json=body)
    resp = client.delete_location(2)
    expected = BaseResponse.from_dict(body)
    assert resp.status == "ok"
    assert resp.message == "Location test location has been deleted successfully"
    assert (resp.status, resp.message, resp.count) == (
        expected.status,
        expected.message,
        expected.count,
    )


def test_update_location(client, mocked):
    mocked.add(
        responses.PATCH,
        API + "locations/2",
        json={"status": "ok", "message": "Location updated successfully"},
    )
    resp = client.update_location(2, LocationUpdateRequest(name="Updated Test Location"))
    assert resp.status == "ok"
    assert json.loads(mocked.calls[0].request.body) == {"location": "Updated Test Location"}


def test_update_location_server_error(client, mocked):
    mocked.add(responses.PATCH, API + "locations/2", status=500, body="boom")
    with pytest.raises(ApiError) as info:
        client.update_location(2, LocationUpdateRequest(latitude=1.0))
    assert info.value.status_code == 500
    assert info.value.message == "boom"


def test_create_request_fixed_coordinates_as_number():
    request = LocationCreateRequest(name="x", fixed_coordinates=True, latitude=1, longitude=2)
    assert request.to_dict() == {"location": "x", "fixed_coordinates": 1, "lat": 1.0, "lng": 2.0}


def test_update_request_keeps_false_and_zero():
    request = LocationUpdateRequest(fixed_coordinates=False, latitude=0.0)
    assert request.to_dict() == {"fixed_coordinates": False, "lat": 0.0}
    assert LocationUpdateRequest().to_dict() == {}


def test_location_from_dict_defaults():
    location = Location.from_dict({"id": 3, "location": "Rack"})
    assert location == Location(id=3, name="Rack")


def test_location_response_from_empty():
    resp = LocationResponse.from_dict({})
    assert resp.status == ""
    assert resp.location == Location()


def test_locations_response_from_dict():
    resp = LocationsResponse.from_dict(GET_LOCATIONS)
    assert [loc.id for loc in resp.locations] == [1, 2, 3, 4, 5]
    assert resp.locations[1].latitude == 10.5