"""Abstract gateway for table reservations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.reservation import Reservation, ReservationRequest


class ReservationGateway(ABC):

    @abstractmethod
    def create(self, request: ReservationRequest) -> Reservation:
        """Book a table."""

    @abstractmethod
    def list_by_phone(self, phone_number: str) -> list[Reservation]:
        """Return reservations made with a phone number."""

    @abstractmethod
    def cancel(self, reservation_id: int) -> None:
        """Cancel a reservation."""
