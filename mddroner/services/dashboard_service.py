"""Admin dashboard views over the full booking list."""

import csv
import io
from typing import Iterable, Sequence

from ..core.constants import NO_LABEL, STATUS_FILTER_ALL, YES_LABEL
from ..core.localtime import format_local
from ..db import models

CSV_HEADERS = [
    "ID",
    "地點",
    "姓名",
    "電話",
    "車型",
    "車牌",
    "日期",
    "狀態",
    "多台車",
    "動態影片",
    "備註",
    "建立時間",
]


def _status_value(status: models.BookingStatus | str) -> str:
    return status.value if isinstance(status, models.BookingStatus) else str(status)


def filter_bookings(
    bookings: Iterable[models.Booking], month: str, status: str = STATUS_FILTER_ALL
) -> list[models.Booking]:
    return [
        booking
        for booking in bookings
        if booking.booking_date[:7] == month
        and (status == STATUS_FILTER_ALL or _status_value(booking.status) == status)
    ]


def count_by_status(bookings: Sequence[models.Booking]) -> dict[str, int]:
    counts = {"total": len(bookings)}
    for status in models.BookingStatus:
        counts[status.value] = sum(
            1 for booking in bookings if _status_value(booking.status) == status.value
        )
    return counts


def _csv_row(booking: models.Booking) -> list[str]:
    return [
        str(booking.id),
        booking.route,
        booking.name,
        booking.phone,
        booking.car_model,
        booking.car_plate or "",
        booking.booking_date,
        _status_value(booking.status),
        YES_LABEL if booking.multiple_vehicles else NO_LABEL,
        YES_LABEL if booking.video_upgrade else NO_LABEL,
        booking.notes or "",
        format_local(booking.created_at),
    ]


def bookings_to_csv(bookings: Iterable[models.Booking]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for booking in bookings:
        writer.writerow(_csv_row(booking))
    return buffer.getvalue().rstrip("\n")


def export_filename(month: str) -> str:
    return f"bookings-{month}.csv"
