"""Abstract gateway for rewards, inbox notifications and reviews."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.engagement import (
    Notification,
    Review,
    ReviewRequest,
    Rewards,
)


class EngagementGateway(ABC):

    @abstractmethod
    def get_my_rewards(self) -> Rewards:
        """Return the signed-in user's points balance and history."""

    @abstractmethod
    def list_notifications(self) -> list[Notification]:
        """Return the signed-in user's inbox."""

    @abstractmethod
    def mark_notification_read(self, notification_id: int) -> Notification:
        """Flag one notification as read."""

    @abstractmethod
    def list_latest_reviews(self) -> list[Review]:
        """Return the most recent approved reviews."""

    @abstractmethod
    def add_review(self, phone_number: str, request: ReviewRequest) -> Review:
        """Post a review on behalf of a phone number."""
