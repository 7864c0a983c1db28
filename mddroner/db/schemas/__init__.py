from .booking import (
    Booking,
    BookingSubmit,
    BookingUpdate,
    BookingCounts,
    BookingDashboard,
    SuccessResponse,
)
from .pricing import PriceEstimate
from .location import Location
from .user import Identity
