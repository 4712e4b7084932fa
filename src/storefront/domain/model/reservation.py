"""Table reservations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError


class ReservationStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class ReservationRequest:
    guest_count: int
    reservation_date: str  # YYYY-MM-DD, as the backend expects it
    reservation_time: str  # HH:MM
    guest_name: str | None = None
    phone_number: str | None = None
    special_requests: str | None = None

    def validate(self) -> None:
        if not self.reservation_date or not self.reservation_date.strip() \
                or not self.reservation_time or not self.reservation_time.strip():
            raise ValidationError(
                "Please provide both date and time for your reservation."
            )
        if self.guest_count < 1:
            raise ValidationError("Guest count must be at least 1")

    def to_payload(self) -> dict:
        payload: dict = {
            "guestCount": self.guest_count,
            "reservationDate": self.reservation_date.strip(),
            "reservationTime": self.reservation_time.strip(),
        }
        optional = {
            "guestName": self.guest_name,
            "phoneNumber": self.phone_number,
            "specialRequests": self.special_requests,
        }
        payload.update({k: v for k, v in optional.items() if v})
        return payload


@dataclass(frozen=True)
class Reservation:
    id: int
    guest_count: int
    reservation_date: str
    reservation_time: str
    status: ReservationStatus
    phone_number: str | None = None
    guest_name: str | None = None
    special_requests: str | None = None
    created_at: str | None = None
