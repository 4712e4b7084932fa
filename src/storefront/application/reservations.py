"""Application services: book, list and cancel table reservations.

All three need a signed-in user; the phone number on file is used
whenever the form does not supply one.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from storefront.application.dto import FailureReason, OperationResult, failure_from
from storefront.application.session_manager import SessionManager
from storefront.domain.exceptions import GatewayError, NotAuthenticatedError, ValidationError
from storefront.domain.gateway.reservation_gateway import ReservationGateway
from storefront.domain.model.reservation import ReservationRequest

logger = logging.getLogger(__name__)

LOGIN_MESSAGE = "Please log in to manage reservations."


class BookReservationHandler:

    def __init__(
        self,
        session_manager: SessionManager,
        reservation_gateway: ReservationGateway,
    ) -> None:
        self._session_manager = session_manager
        self._reservation_gateway = reservation_gateway

    def handle(self, request: ReservationRequest) -> OperationResult:
        try:
            user = self._session_manager.require_user()
        except NotAuthenticatedError:
            return OperationResult.fail(FailureReason.LOGIN_REQUIRED, LOGIN_MESSAGE)

        try:
            request.validate()
        except ValidationError as exc:
            return OperationResult.fail(FailureReason.VALIDATION, str(exc))

        if not request.phone_number:
            request = replace(request, phone_number=user.phone_number)
        if not request.guest_name and user.name:
            request = replace(request, guest_name=user.name)

        try:
            reservation = self._reservation_gateway.create(request)
        except GatewayError as exc:
            logger.warning("Reservation failed: %s", exc)
            return failure_from(exc, "Failed to create reservation. Please try again.")

        logger.info("Reservation #%s booked", reservation.id)
        return OperationResult.ok(
            "Your table has been reserved. See you soon!", data=reservation
        )


class ListReservationsHandler:

    def __init__(
        self,
        session_manager: SessionManager,
        reservation_gateway: ReservationGateway,
    ) -> None:
        self._session_manager = session_manager
        self._reservation_gateway = reservation_gateway

    def handle(self) -> OperationResult:
        try:
            user = self._session_manager.require_user()
        except NotAuthenticatedError:
            return OperationResult.fail(FailureReason.LOGIN_REQUIRED, LOGIN_MESSAGE)
        try:
            reservations = self._reservation_gateway.list_by_phone(user.phone_number)
        except GatewayError as exc:
            return failure_from(exc, "Failed to load reservations.")
        return OperationResult.ok(f"{len(reservations)} reservations", data=reservations)


class CancelReservationHandler:

    def __init__(
        self,
        session_manager: SessionManager,
        reservation_gateway: ReservationGateway,
    ) -> None:
        self._session_manager = session_manager
        self._reservation_gateway = reservation_gateway

    def handle(self, reservation_id: int) -> OperationResult:
        if not self._session_manager.is_authenticated:
            return OperationResult.fail(FailureReason.LOGIN_REQUIRED, LOGIN_MESSAGE)
        try:
            self._reservation_gateway.cancel(reservation_id)
        except GatewayError as exc:
            return failure_from(exc, "Failed to cancel reservation")
        return OperationResult.ok(f"Reservation #{reservation_id} cancelled.")
