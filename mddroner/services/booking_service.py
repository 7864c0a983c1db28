import logging
from typing import Callable

from sqlalchemy.orm import Session

from ..core.constants import OWNER_NOTIFICATION_TITLE
from ..core.localtime import utc_now
from ..db import models, schemas
from . import booking_store, notification_service

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("route", "name", "phone", "car_model", "booking_date")

Notifier = Callable[[str, str], None]


class BookingError(Exception):
    pass


class BookingValidationError(BookingError):
    def __init__(self, fields: list[str]) -> None:
        super().__init__("Missing required fields: " + ", ".join(fields))
        self.fields = fields


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def missing_fields(payload: schemas.BookingSubmit) -> list[str]:
    return [field for field in REQUIRED_FIELDS if _is_blank(getattr(payload, field))]


def _normalize_optional(value: str | None) -> str | None:
    if _is_blank(value):
        return None
    return value


def submit_booking(
    db: Session,
    payload: schemas.BookingSubmit,
    notifier: Notifier = notification_service.notify_owner,
) -> models.Booking:
    """Validate, persist and announce a booking coming from the public form.

    Persistence errors propagate and skip the notification. A failed
    notification is logged and does not fail the submission: the booking is
    already stored at that point.
    """

    missing = missing_fields(payload)
    if missing:
        raise BookingValidationError(missing)

    booking = booking_store.create_booking(
        db,
        route=payload.route,
        name=payload.name,
        phone=payload.phone,
        car_model=payload.car_model,
        car_plate=_normalize_optional(payload.car_plate),
        booking_date=payload.booking_date,
        special_requests=_normalize_optional(payload.special_requests),
        multiple_vehicles=payload.multiple_vehicles,
        video_upgrade=payload.video_upgrade,
    )

    content = notification_service.build_booking_summary(booking, utc_now())
    try:
        notifier(OWNER_NOTIFICATION_TITLE, content)
    except Exception:
        logger.exception(
            "Failed to notify owner about booking",
            extra={"booking_id": booking.id},
        )
    return booking
