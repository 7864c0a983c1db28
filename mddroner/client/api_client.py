from __future__ import annotations

from typing import Any, TypedDict

import httpx

from .config import get_settings


class BookingPayload(TypedDict, total=False):
    route: str
    name: str
    phone: str
    carModel: str
    carPlate: str | None
    bookingDate: str
    specialRequests: str | None
    multipleVehicles: bool
    videoUpgrade: bool


class Location(TypedDict, total=False):
    key: str
    name: str
    description: str


class PriceEstimate(TypedDict, total=False):
    basePrice: int
    vehiclesAmount: int
    videoAmount: int
    total: int


_settings = get_settings()

# Replaced in tests with an ``httpx.MockTransport``.
_transport: httpx.AsyncBaseTransport | None = None


def _request_path(path: str) -> str:
    """Return a path relative to the configured API base URL."""

    if path.startswith("http://") or path.startswith("https://"):
        return path
    return path.lstrip("/")


def _client() -> httpx.AsyncClient:
    base_url = _settings.api_base_url.rstrip("/") + "/"
    return httpx.AsyncClient(base_url=base_url, timeout=_settings.timeout, transport=_transport)


async def _get(path: str, params: dict[str, Any] | None = None) -> Any:
    async with _client() as client:
        response = await client.get(_request_path(path), params=params)
        response.raise_for_status()
        return response.json()


async def _post(path: str, json: dict[str, Any]) -> Any:
    async with _client() as client:
        response = await client.post(_request_path(path), json=json)
        response.raise_for_status()
        return response.json()


async def submit_booking(payload: BookingPayload) -> dict[str, Any]:
    return await _post("/bookings", dict(payload))


async def fetch_locations() -> list[Location]:
    return await _get("/locations")


async def fetch_estimate(
    *,
    multiple_vehicles: bool = False,
    extra_vehicle_count: int | None = None,
    video_upgrade: bool = False,
    video_location_count: int | None = None,
) -> PriceEstimate:
    params: dict[str, Any] = {
        "multipleVehicles": multiple_vehicles,
        "videoUpgrade": video_upgrade,
    }
    if extra_vehicle_count is not None:
        params["extraVehicleCount"] = extra_vehicle_count
    if video_location_count is not None:
        params["videoLocationCount"] = video_location_count
    return await _get("/pricing/estimate", params=params)


__all__ = [
    "BookingPayload",
    "Location",
    "PriceEstimate",
    "submit_booking",
    "fetch_locations",
    "fetch_estimate",
]
