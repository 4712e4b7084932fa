"""REST implementation of ReservationGateway (``/reservations/*``)."""

from __future__ import annotations

from storefront.domain.gateway.reservation_gateway import ReservationGateway
from storefront.domain.model.reservation import (
    Reservation,
    ReservationRequest,
    ReservationStatus,
)
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.parsing import parse_list, parse_one


class RestReservationGateway(ReservationGateway):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def create(self, request: ReservationRequest) -> Reservation:
        data = self._client.post("/reservations/add", json=request.to_payload())
        return parse_one(data, self._to_domain)

    def list_by_phone(self, phone_number: str) -> list[Reservation]:
        data = self._client.get(f"/reservations/getByPhone/{phone_number}")
        return parse_list(data, self._to_domain)

    def cancel(self, reservation_id: int) -> None:
        self._client.delete(f"/reservations/delete/{reservation_id}")

    @staticmethod
    def _to_domain(raw: dict) -> Reservation:
        return Reservation(
            id=int(raw["id"]),
            guest_count=int(raw["guestCount"]),
            reservation_date=raw["reservationDate"],
            reservation_time=raw["reservationTime"],
            status=ReservationStatus(raw.get("status") or "PENDING"),
            phone_number=raw.get("phoneNumber"),
            guest_name=raw.get("guestName"),
            special_requests=raw.get("specialRequests"),
            created_at=raw.get("createdAt"),
        )
