"""Locations: create, list, fetch, update and delete."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from librenms_client.core import BaseResponse, parse_bool, parse_float


@dataclass
class Location:
    """A location known to LibreNMS."""

    id: int = 0
    fixed_coordinates: bool = False
    latitude: float = 0.0
    longitude: float = 0.0
    name: str = ""
    timestamp: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Location":
        data = data or {}
        return cls(
            id=data.get("id") or 0,
            fixed_coordinates=parse_bool(data.get("fixed_coordinates")),
            latitude=parse_float(data.get("lat")),
            longitude=parse_float(data.get("lng")),
            name=data.get("location") or "",
            timestamp=data.get("timestamp") or "",
        )


@dataclass
class LocationCreateRequest:
    """Payload for creating a location."""

    name: str = ""
    fixed_coordinates: bool = False
    latitude: float = 0.0
    longitude: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "location": self.name,
            "fixed_coordinates": 1 if self.fixed_coordinates else 0,
            "lat": float(self.latitude),
            "lng": float(self.longitude),
        }


@dataclass
class LocationUpdateRequest:
    """Payload for updating a location.

    Set only the fields that change; patching unchanged fields makes the server fail.
    """

    name: str | None = None
    fixed_coordinates: bool | None = None
    latitude: float | None = None
    longitude: float | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.name is not None:
            payload["location"] = self.name
        if self.fixed_coordinates is not None:
            payload["fixed_coordinates"] = self.fixed_coordinates
        if self.latitude is not None:
            payload["lat"] = self.latitude
        if self.longitude is not None:
            payload["lng"] = self.longitude
        return payload


@dataclass
class LocationResponse:
    """Response holding a single location."""

    status: str = ""
    location: Location = field(default_factory=Location)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "LocationResponse":
        data = data or {}
        return cls(
            status=data.get("status") or "",
            location=Location.from_dict(data.get("get_location")),
        )


@dataclass
class LocationsResponse(BaseResponse):
    """Response holding a list of locations."""

    locations: list[Location] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "LocationsResponse":
        data = data or {}
        base = BaseResponse.from_dict(data)
        return cls(
            status=base.status,
            message=base.message,
            count=base.count,
            locations=[Location.from_dict(item) for item in data.get("locations") or []],
        )


class LocationsMixin:
    """Location operations of the API client."""

    _request: Callable[..., dict[str, Any]]

    def create_location(self, location: LocationCreateRequest) -> BaseResponse:
        """Create a location."""
        data = self._request("POST", "locations", body=location.to_dict())
        return BaseResponse.from_dict(data)

    def delete_location(self, location_id: int) -> BaseResponse:
        """Delete a location by its ID."""
        data = self._request("DELETE", f"locations/{location_id}")
        return BaseResponse.from_dict(data)

    def get_location(self, location_id: int) -> LocationResponse:
        """Fetch a location by its ID."""
        return LocationResponse.from_dict(self._request("GET", f"location/{location_id}"))

    def get_locations(self) -> LocationsResponse:
        """List all locations."""
        return LocationsResponse.from_dict(self._request("GET", "resources/locations"))

    def update_location(self, location_id: int, location: LocationUpdateRequest) -> BaseResponse:
        """Update a location by its ID."""
        data = self._request("PATCH", f"locations/{location_id}", body=location.to_dict())
        return BaseResponse.from_dict(data)