"""Persistence of booking rows.

Every read and write of the ``bookings`` table goes through this module.
"""

import logging
from typing import Any

from sqlalchemy.orm import Session

from ..core.localtime import utc_now
from ..db import models

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class BookingNotFound(Exception):
    def __init__(self, booking_id: int) -> None:
        super().__init__(f"Booking {booking_id} not found")
        self.booking_id = booking_id


def create_booking(db: Session, **fields: Any) -> models.Booking:
    fields.pop("status", None)
    now = utc_now()
    booking = models.Booking(
        **fields,
        status=models.BookingStatus.pending,
        created_at=now,
        updated_at=now,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info("Created booking", extra={"booking_id": booking.id})
    return booking


def list_bookings(db: Session) -> list[models.Booking]:
    return db.query(models.Booking).order_by(models.Booking.id).all()


def get_booking(db: Session, booking_id: int) -> models.Booking | None:
    return db.get(models.Booking, booking_id)


def update_booking(
    db: Session,
    booking_id: int,
    *,
    status: models.BookingStatus | None = _UNSET,
    notes: str | None = _UNSET,
) -> models.Booking:
    booking = db.get(models.Booking, booking_id)
    if booking is None:
        raise BookingNotFound(booking_id)
    if status is not _UNSET and status is not None:
        booking.status = models.BookingStatus(status)
    if notes is not _UNSET:
        booking.notes = notes
    booking.updated_at = utc_now()
    db.commit()
    db.refresh(booking)
    logger.info(
        "Updated booking",
        extra={"booking_id": booking.id, "status": booking.status.value},
    )
    return booking


def delete_booking(db: Session, booking_id: int) -> None:
    booking = db.get(models.Booking, booking_id)
    if booking is None:
        logger.info("Booking already absent", extra={"booking_id": booking_id})
        return
    db.delete(booking)
    db.commit()
    logger.info("Deleted booking", extra={"booking_id": booking_id})
