"""Rewards, inbox notifications and reviews.

These are read/write pass-throughs to the backend; the only client-side
rule is the review form check.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError


@dataclass(frozen=True)
class RewardTransaction:
    points: int
    transaction_type: str  # EARNED, REDEEMED, BONUS, ADMIN_ADD
    description: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class Rewards:
    total_points: int
    history: tuple[RewardTransaction, ...] = ()


@dataclass(frozen=True)
class Notification:
    id: int
    title: str
    message: str
    notification_type: str = "GENERAL"
    is_read: bool = False
    created_at: str | None = None


@dataclass(frozen=True)
class Review:
    id: int
    rating: int
    comment: str | None = None
    reviewer_name: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class ReviewRequest:
    rating: int
    comment: str
    reviewer_name: str | None = None

    def validate(self) -> None:
        if not 1 <= self.rating <= 5:
            raise ValidationError("Rating must be between 1 and 5")
        if not self.comment or not self.comment.strip():
            raise ValidationError("Please write a comment")

    def to_payload(self) -> dict:
        payload: dict = {"rating": self.rating, "comment": self.comment.strip()}
        if self.reviewer_name:
            payload["reviewerName"] = self.reviewer_name
        return payload
