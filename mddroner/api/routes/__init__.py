from . import (
    auth,
    bookings,
    misc,
    pricing,
)

__all__ = [
    "auth",
    "bookings",
    "misc",
    "pricing",
]
