from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..models.booking import BookingStatus


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class BookingSubmit(CamelModel):
    """Public booking form payload.

    Required text fields default to an empty string so that the submission
    service can report every missing field at once instead of failing on the
    first absent key.
    """

    route: str = ""
    name: str = ""
    phone: str = ""
    car_model: str = ""
    car_plate: str | None = None
    booking_date: str = ""
    special_requests: str | None = None
    multiple_vehicles: bool = False
    video_upgrade: bool = False


class BookingUpdate(CamelModel):
    status: BookingStatus | None = None
    notes: str | None = None


class Booking(CamelModel):
    id: int
    route: str
    name: str
    phone: str
    car_model: str
    car_plate: str | None = None
    booking_date: str
    special_requests: str | None = None
    multiple_vehicles: bool
    video_upgrade: bool
    status: BookingStatus
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class BookingCounts(BaseModel):
    total: int
    pending: int
    confirmed: int
    completed: int
    cancelled: int


class BookingDashboard(BaseModel):
    month: str
    status: str
    counts: BookingCounts
    bookings: list[Booking]


class SuccessResponse(BaseModel):
    success: bool = True
