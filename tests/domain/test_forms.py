"""Unit tests for the reservation and review forms."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.engagement import ReviewRequest
from storefront.domain.model.reservation import ReservationRequest


class TestReservationRequest:

    def test_missing_date_or_time(self):
        with pytest.raises(ValidationError, match="both date and time"):
            ReservationRequest(guest_count=2, reservation_date="", reservation_time="19:00").validate()

    def test_guest_count(self):
        with pytest.raises(ValidationError, match="at least 1"):
            ReservationRequest(
                guest_count=0, reservation_date="2026-11-01", reservation_time="19:00",
            ).validate()

    def test_payload_omits_empty_optionals(self):
        request = ReservationRequest(
            guest_count=4, reservation_date="2026-11-01", reservation_time="19:00",
            guest_name="Nimal",
        )
        assert request.to_payload() == {
            "guestCount": 4,
            "reservationDate": "2026-11-01",
            "reservationTime": "19:00",
            "guestName": "Nimal",
        }


class TestReviewRequest:

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_range(self, rating):
        with pytest.raises(ValidationError, match="between 1 and 5"):
            ReviewRequest(rating=rating, comment="ok").validate()

    def test_comment_required(self):
        with pytest.raises(ValidationError, match="write a comment"):
            ReviewRequest(rating=4, comment="   ").validate()

    def test_payload(self):
        request = ReviewRequest(rating=5, comment=" Great ", reviewer_name="N")
        assert request.to_payload() == {"rating": 5, "comment": "Great", "reviewerName": "N"}
