import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ...api import deps
from ...core.constants import STATUS_FILTER_ALL
from ...core.localtime import current_month
from ...db.session import get_db
from ...db import models, schemas
from ...services import booking_service, booking_store, dashboard_service
from ...services.booking_service import Notifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])

MONTH_PATTERN = r"^\d{4}-\d{2}$"
STATUS_FILTER_PATTERN = "^(all|" + "|".join(s.value for s in models.BookingStatus) + ")$"


@router.post("", response_model=schemas.SuccessResponse)
def submit_booking(
    payload: schemas.BookingSubmit,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(deps.get_notifier),
):
    try:
        booking_service.submit_booking(db, payload, notifier=notifier)
    except booking_service.BookingValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "fields": [to_camel(f) for f in exc.fields]},
        ) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to submit booking")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to submit booking, please try again",
        ) from exc
    return schemas.SuccessResponse()


@router.get("", response_model=list[schemas.Booking])
def list_bookings(db: Session = Depends(get_db)):
    return booking_store.list_bookings(db)


@router.get("/dashboard", response_model=schemas.BookingDashboard)
def booking_dashboard(
    month: str | None = Query(None, pattern=MONTH_PATTERN),
    status_filter: str = Query(STATUS_FILTER_ALL, alias="status", pattern=STATUS_FILTER_PATTERN),
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_admin),
):
    month = month or current_month()
    bookings = booking_store.list_bookings(db)
    return {
        "month": month,
        "status": status_filter,
        "counts": dashboard_service.count_by_status(bookings),
        "bookings": [
            schemas.Booking.model_validate(booking)
            for booking in dashboard_service.filter_bookings(bookings, month, status_filter)
        ],
    }


@router.get("/export")
def export_bookings(
    month: str | None = Query(None, pattern=MONTH_PATTERN),
    status_filter: str = Query(STATUS_FILTER_ALL, alias="status", pattern=STATUS_FILTER_PATTERN),
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_admin),
):
    month = month or current_month()
    bookings = dashboard_service.filter_bookings(
        booking_store.list_bookings(db), month, status_filter
    )
    filename = dashboard_service.export_filename(month)
    return Response(
        content=dashboard_service.bookings_to_csv(bookings),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{booking_id}", response_model=schemas.Booking | None)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_admin),
):
    return booking_store.get_booking(db, booking_id)


@router.patch("/{booking_id}", response_model=schemas.SuccessResponse)
def update_booking(
    booking_id: int,
    payload: schemas.BookingUpdate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_admin),
):
    try:
        booking_store.update_booking(db, booking_id, **payload.model_dump(exclude_unset=True))
    except booking_store.BookingNotFound as exc:
        raise HTTPException(status_code=404, detail="Booking not found") from exc
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update booking", extra={"booking_id": booking_id})
        raise
    return schemas.SuccessResponse()


@router.delete("/{booking_id}", response_model=schemas.SuccessResponse)
def delete_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_admin),
):
    try:
        booking_store.delete_booking(db, booking_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete booking", extra={"booking_id": booking_id})
        raise
    return schemas.SuccessResponse()
