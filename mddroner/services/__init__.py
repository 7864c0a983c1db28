from . import (
    admin,
    booking_service,
    booking_store,
    dashboard_service,
    notification_service,
    pricing,
)
__all__ = [
    "admin",
    "booking_service",
    "booking_store",
    "dashboard_service",
    "notification_service",
    "pricing",
]
