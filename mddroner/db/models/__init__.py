from .booking import Booking, BookingStatus
from .user import User, UserRole
