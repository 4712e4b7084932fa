"""Application service: register the device for push notifications.

Runs after a successful sign-in, sign-up or session restore.  It is
spawned on a background executor and nobody waits for it: whatever
happens is logged from the completion callback and never reaches the
authentication result.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future

from storefront.domain.gateway.account_gateway import AccountGateway

logger = logging.getLogger(__name__)


class PushRegistrationService:

    def __init__(
        self,
        account_gateway: AccountGateway,
        executor: Executor,
        push_token: str | None = None,
    ) -> None:
        self._account_gateway = account_gateway
        self._executor = executor
        self._push_token = push_token

    def register(self) -> bool:
        """Send the device token to the backend.

        Returns False when this device has no push token configured.
        Gateway errors propagate to the caller.
        """
        if not self._push_token:
            logger.info("No push token configured; skipping push registration")
            return False
        self._account_gateway.update_push_token(self._push_token)
        logger.info("Registered push token %s...", self._push_token[:10])
        return True

    def register_async(self) -> Future | None:
        """Fire and forget ``register()``."""
        try:
            future = self._executor.submit(self.register)
        except RuntimeError as exc:
            # Executor already shut down
            logger.warning("Push registration not scheduled: %s", exc)
            return None
        future.add_done_callback(_log_outcome)
        return future


def _log_outcome(future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.warning("Push registration failed: %s", exc)
