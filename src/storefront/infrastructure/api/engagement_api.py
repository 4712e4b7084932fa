"""REST implementation of EngagementGateway.

Covers ``/rwdpts/*`` (reward points), ``/notification/*`` and ``/reviews/*``.
"""

from __future__ import annotations

from storefront.domain.gateway.engagement_gateway import EngagementGateway
from storefront.domain.model.engagement import (
    Notification,
    Review,
    ReviewRequest,
    RewardTransaction,
    Rewards,
)
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.parsing import parse_list, parse_one


class RestEngagementGateway(EngagementGateway):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- Rewards --------------------------------------------------------------

    def get_my_rewards(self) -> Rewards:
        return parse_one(self._client.get("/rwdpts/getrwdpts"), self._to_rewards)

    # --- Notifications --------------------------------------------------------

    def list_notifications(self) -> list[Notification]:
        return parse_list(self._client.get("/notification/user"), self._to_notification)

    def mark_notification_read(self, notification_id: int) -> Notification:
        data = self._client.put(f"/notification/markRead/{notification_id}")
        return parse_one(data, self._to_notification)

    # --- Reviews --------------------------------------------------------------

    def list_latest_reviews(self) -> list[Review]:
        return parse_list(self._client.get("/reviews/latest"), self._to_review)

    def add_review(self, phone_number: str, request: ReviewRequest) -> Review:
        data = self._client.post(f"/reviews/add/{phone_number}", json=request.to_payload())
        return parse_one(data, self._to_review)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_rewards(raw: dict) -> Rewards:
        return Rewards(
            total_points=int(raw.get("totalPoints") or 0),
            history=tuple(
                RewardTransaction(
                    points=int(h["points"]),
                    transaction_type=h.get("transactionType") or "EARNED",
                    description=h.get("description"),
                    created_at=h.get("createdAt"),
                )
                for h in raw.get("history") or []
            ),
        )

    @staticmethod
    def _to_notification(raw: dict) -> Notification:
        return Notification(
            id=int(raw["id"]),
            title=raw["title"],
            message=raw.get("message") or "",
            notification_type=raw.get("notificationType") or "GENERAL",
            is_read=bool(raw.get("isRead", False)),
            created_at=raw.get("createdAt"),
        )

    @staticmethod
    def _to_review(raw: dict) -> Review:
        return Review(
            id=int(raw["id"]),
            rating=int(raw["rating"]),
            comment=raw.get("comment"),
            reviewer_name=raw.get("reviewerName"),
            created_at=raw.get("createdAt"),
        )
