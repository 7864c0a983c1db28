"""Four-step booking form: locations, contact, add-ons, review.

The wizard owns an immutable ``BookingDraft``; every edit replaces the draft
with a new copy, so a failed submission never loses what the customer typed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Awaitable, Callable

from ..core.constants import LOCATIONS, ROUTE_SEPARATOR
from ..services import pricing
from . import api_client
from .api_client import BookingPayload

logger = logging.getLogger(__name__)

Submitter = Callable[[BookingPayload], Awaitable[Any]]

CONTACT_FIELDS = ("name", "phone", "car_model", "car_plate", "booking_date")
REQUIRED_CONTACT_FIELDS = ("name", "phone", "car_model", "booking_date")
ADD_ON_FIELDS = (
    "multiple_vehicles",
    "extra_vehicle_count",
    "video_upgrade",
    "video_location_count",
    "special_requests",
)


class WizardStep(IntEnum):
    locations = 1
    contact = 2
    add_ons = 3
    review = 4


class WizardError(Exception):
    pass


@dataclass(frozen=True)
class BookingDraft:
    locations: tuple[str, ...] = ()
    name: str = ""
    phone: str = ""
    car_model: str = ""
    car_plate: str = ""
    booking_date: str = ""
    special_requests: str = ""
    multiple_vehicles: bool = False
    extra_vehicle_count: int | None = None
    video_upgrade: bool = False
    video_location_count: int | None = None

    @property
    def route_label(self) -> str:
        return ROUTE_SEPARATOR.join(LOCATIONS[key]["name"] for key in self.locations)

    def missing_contact_fields(self) -> list[str]:
        return [field for field in REQUIRED_CONTACT_FIELDS if not getattr(self, field).strip()]

    def estimate(self) -> int:
        return pricing.estimate(
            extra_vehicle_count=self.extra_vehicle_count,
            video_location_count=self.video_location_count,
            multiple_vehicles=self.multiple_vehicles,
            video_upgrade=self.video_upgrade,
        )

    def to_payload(self) -> BookingPayload:
        return {
            "route": self.route_label,
            "name": self.name,
            "phone": self.phone,
            "carModel": self.car_model,
            "carPlate": self.car_plate or None,
            "bookingDate": self.booking_date,
            "specialRequests": self.special_requests or None,
            "multipleVehicles": self.multiple_vehicles,
            "videoUpgrade": self.video_upgrade,
        }


class BookingWizard:
    def __init__(
        self,
        submitter: Submitter | None = None,
        *,
        multi_location: bool = True,
    ) -> None:
        self._submitter = submitter or api_client.submit_booking
        self._multi_location = multi_location
        self._step = WizardStep.locations
        self._draft = BookingDraft()

    @property
    def step(self) -> WizardStep:
        return self._step

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    def select_locations(self, *keys: str) -> BookingDraft:
        unknown = [key for key in keys if key not in LOCATIONS]
        if unknown:
            raise WizardError(f"Unknown location: {', '.join(unknown)}")
        if not self._multi_location and len(keys) > 1:
            raise WizardError("Only one location can be selected")
        # Keep catalogue order and drop duplicates.
        ordered = tuple(key for key in LOCATIONS if key in keys)
        self._draft = replace(self._draft, locations=ordered)
        return self._draft

    def toggle_location(self, key: str) -> BookingDraft:
        if key in self._draft.locations:
            remaining = [k for k in self._draft.locations if k != key]
            return self.select_locations(*remaining)
        if not self._multi_location:
            return self.select_locations(key)
        return self.select_locations(*self._draft.locations, key)

    def update_contact(self, **values: Any) -> BookingDraft:
        return self._update(CONTACT_FIELDS, values)

    def set_add_ons(self, **values: Any) -> BookingDraft:
        return self._update(ADD_ON_FIELDS, values)

    def _update(self, allowed: tuple[str, ...], values: dict[str, Any]) -> BookingDraft:
        unexpected = sorted(set(values) - set(allowed))
        if unexpected:
            raise WizardError(f"Unexpected fields: {', '.join(unexpected)}")
        self._draft = replace(self._draft, **values)
        return self._draft

    def can_advance(self) -> bool:
        if self._step == WizardStep.locations:
            return bool(self._draft.locations)
        if self._step == WizardStep.contact:
            return not self._draft.missing_contact_fields()
        return self._step == WizardStep.add_ons

    def advance(self) -> WizardStep:
        if self._step == WizardStep.review:
            raise WizardError("Already at the review step")
        if not self.can_advance():
            if self._step == WizardStep.locations:
                raise WizardError("Select at least one location")
            missing = self._draft.missing_contact_fields()
            raise WizardError(f"Missing required fields: {', '.join(missing)}")
        self._step = WizardStep(self._step + 1)
        return self._step

    def back(self) -> WizardStep:
        if self._step == WizardStep.locations:
            raise WizardError("Already at the first step")
        self._step = WizardStep(self._step - 1)
        return self._step

    def reset(self) -> None:
        self._step = WizardStep.locations
        self._draft = BookingDraft()

    async def submit(self) -> Any:
        if self._step != WizardStep.review:
            raise WizardError("Bookings can only be submitted from the review step")
        if not self._draft.locations or self._draft.missing_contact_fields():
            raise WizardError("Booking draft is incomplete")
        try:
            result = await self._submitter(self._draft.to_payload())
        except Exception:
            logger.exception("Booking submission failed; keeping the draft for retry")
            raise
        self.reset()
        return result


__all__ = [
    "BookingDraft",
    "BookingWizard",
    "WizardError",
    "WizardStep",
]
