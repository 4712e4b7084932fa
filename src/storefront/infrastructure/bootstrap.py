"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  The ``Storefront``
it returns is the explicit application context: build it once at
start-up, hand it to whoever needs it, ``close()`` it at shutdown.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import httpx

from storefront.application.browse_menu import BrowseMenuHandler
from storefront.application.cart_service import CartService
from storefront.application.engagement import (
    NotificationsHandler,
    ReviewsHandler,
    RewardsHandler,
)
from storefront.application.order_history import OrderHistoryHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.push_registration import PushRegistrationService
from storefront.application.reservations import (
    BookReservationHandler,
    CancelReservationHandler,
    ListReservationsHandler,
)
from storefront.application.restaurant import RestaurantHandler
from storefront.application.session_manager import SessionManager
from storefront.infrastructure.api.account_api import RestAccountGateway
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.engagement_api import RestEngagementGateway
from storefront.infrastructure.api.menu_api import RestMenuGateway
from storefront.infrastructure.api.order_api import RestOrderGateway
from storefront.infrastructure.api.reservation_api import RestReservationGateway
from storefront.infrastructure.api.restaurant_api import RestRestaurantGateway
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_storage import JsonStorage
from storefront.infrastructure.persistence.stored_token_repository import (
    StoredTokenRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Storefront:
    session: SessionManager
    cart: CartService
    menu: BrowseMenuHandler
    place_order: PlaceOrderHandler
    order_history: OrderHistoryHandler
    book_reservation: BookReservationHandler
    list_reservations: ListReservationsHandler
    cancel_reservation: CancelReservationHandler
    rewards: RewardsHandler
    notifications: NotificationsHandler
    reviews: ReviewsHandler
    restaurant: RestaurantHandler
    api_client: ApiClient
    executor: ThreadPoolExecutor

    def close(self) -> None:
        # Let an in-flight push registration finish before the client goes away
        self.executor.shutdown(wait=True)
        self.api_client.close()


def build_storefront(
    settings: Settings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Storefront:
    """Build every service and restore the session.

    ``transport`` replaces the network layer (tests pass an
    ``httpx.MockTransport``).
    """
    settings = settings or get_settings()

    storage = JsonStorage(settings.storage_path, lock_timeout=settings.storage_lock_timeout)
    token_repo = StoredTokenRepository(storage, key=settings.token_key)
    cart_repo = JsonCartRepository(storage, key=settings.cart_key, currency=settings.currency)

    client = ApiClient(
        settings.api_base_url,
        token_repo,
        timeout=settings.request_timeout,
        transport=transport,
    )
    accounts = RestAccountGateway(client)
    orders = RestOrderGateway(client, currency=settings.currency)
    reservations = RestReservationGateway(client)
    engagement = RestEngagementGateway(client)

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="storefront-bg")
    push = PushRegistrationService(accounts, executor, push_token=settings.push_token)

    session = SessionManager(accounts, token_repo, push_registration=push)
    cart = CartService(cart_repo, currency=settings.currency)

    storefront = Storefront(
        session=session,
        cart=cart,
        menu=BrowseMenuHandler(RestMenuGateway(client, currency=settings.currency)),
        place_order=PlaceOrderHandler(session, cart, orders),
        order_history=OrderHistoryHandler(session, orders),
        book_reservation=BookReservationHandler(session, reservations),
        list_reservations=ListReservationsHandler(session, reservations),
        cancel_reservation=CancelReservationHandler(session, reservations),
        rewards=RewardsHandler(session, engagement),
        notifications=NotificationsHandler(session, engagement),
        reviews=ReviewsHandler(session, engagement),
        restaurant=RestaurantHandler(RestRestaurantGateway(client)),
        api_client=client,
        executor=executor,
    )

    session.bootstrap()
    logger.debug(
        "Storefront ready (api=%s, storage=%s, state=%s)",
        settings.api_base_url, settings.storage_path, session.session.state.value,
    )
    return storefront
