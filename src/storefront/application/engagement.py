"""Application services: rewards balance, inbox and reviews."""

from __future__ import annotations

from storefront.application.dto import FailureReason, OperationResult, failure_from
from storefront.application.session_manager import SessionManager
from storefront.domain.exceptions import GatewayError, NotAuthenticatedError, ValidationError
from storefront.domain.gateway.engagement_gateway import EngagementGateway
from storefront.domain.model.engagement import ReviewRequest


class RewardsHandler:

    def __init__(self, session_manager: SessionManager, gateway: EngagementGateway) -> None:
        self._session_manager = session_manager
        self._gateway = gateway

    def handle(self) -> OperationResult:
        if not self._session_manager.is_authenticated:
            return OperationResult.fail(
                FailureReason.LOGIN_REQUIRED, "Please log in to see your rewards."
            )
        try:
            rewards = self._gateway.get_my_rewards()
        except GatewayError as exc:
            return failure_from(exc, "Failed to load rewards.")
        return OperationResult.ok(f"{rewards.total_points} points", data=rewards)


class NotificationsHandler:

    def __init__(self, session_manager: SessionManager, gateway: EngagementGateway) -> None:
        self._session_manager = session_manager
        self._gateway = gateway

    def inbox(self) -> OperationResult:
        if not self._session_manager.is_authenticated:
            return OperationResult.fail(
                FailureReason.LOGIN_REQUIRED, "Please log in to see your inbox."
            )
        try:
            notifications = self._gateway.list_notifications()
        except GatewayError as exc:
            return failure_from(exc, "Failed to load notifications.")
        unread = sum(1 for n in notifications if not n.is_read)
        return OperationResult.ok(f"{unread} unread", data=notifications)

    def mark_read(self, notification_id: int) -> OperationResult:
        try:
            notification = self._gateway.mark_notification_read(notification_id)
        except GatewayError as exc:
            return failure_from(exc, "Failed to update notification.")
        return OperationResult.ok("Marked as read", data=notification)


class ReviewsHandler:

    def __init__(self, session_manager: SessionManager, gateway: EngagementGateway) -> None:
        self._session_manager = session_manager
        self._gateway = gateway

    def latest(self) -> OperationResult:
        try:
            reviews = self._gateway.list_latest_reviews()
        except GatewayError as exc:
            return failure_from(exc, "Failed to load reviews.")
        return OperationResult.ok(f"{len(reviews)} reviews", data=reviews)

    def add(self, request: ReviewRequest) -> OperationResult:
        try:
            user = self._session_manager.require_user()
        except NotAuthenticatedError:
            return OperationResult.fail(
                FailureReason.LOGIN_REQUIRED, "Please log in to write a review."
            )
        try:
            request.validate()
        except ValidationError as exc:
            return OperationResult.fail(FailureReason.VALIDATION, str(exc))
        try:
            review = self._gateway.add_review(user.phone_number, request)
        except GatewayError as exc:
            return failure_from(exc, "Failed to submit review.")
        return OperationResult.ok("Thanks for your review!", data=review)
