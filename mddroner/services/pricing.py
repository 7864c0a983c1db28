"""Price estimate shown on the booking form.

The estimate is display-only and never stored with the booking.
"""

from typing import Any

from ..core.constants import BASE_PRICE, EXTRA_VEHICLE_PRICE, VIDEO_LOCATION_PRICE


def _positive_count(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return 0
    elif isinstance(value, float):
        if not value.is_integer():
            return 0
        value = int(value)
    elif not isinstance(value, int):
        return 0
    return value if value > 0 else 0


def vehicles_amount(extra_vehicle_count: Any, multiple_vehicles: bool) -> int:
    if not multiple_vehicles:
        return 0
    return EXTRA_VEHICLE_PRICE * _positive_count(extra_vehicle_count)


def video_amount(video_location_count: Any, video_upgrade: bool) -> int:
    if not video_upgrade:
        return 0
    return VIDEO_LOCATION_PRICE * _positive_count(video_location_count)


def estimate(
    base_price: int = BASE_PRICE,
    extra_vehicle_count: Any = None,
    video_location_count: Any = None,
    multiple_vehicles: bool = False,
    video_upgrade: bool = False,
) -> int:
    return (
        base_price
        + vehicles_amount(extra_vehicle_count, multiple_vehicles)
        + video_amount(video_location_count, video_upgrade)
    )
