"""Application service: authentication lifecycle.

States::

    BOOTSTRAPPING --bootstrap()--> AUTHENTICATED | GUEST
    GUEST --sign_in()/sign_up()--> AUTHENTICATED
    AUTHENTICATED --sign_out() or a 401 anywhere--> GUEST

The session value is replaced as a whole on every transition.  A 401
seen by the HTTP client clears the token store without telling this
class; the next ``session`` read notices the missing token and falls
back to GUEST.
"""

from __future__ import annotations

import logging

from storefront.application.dto import FailureReason, OperationResult, failure_from
from storefront.application.push_registration import PushRegistrationService
from storefront.domain.exceptions import (
    GatewayError,
    NotAuthenticatedError,
    PersistenceError,
    RemoteRejectedError,
    ValidationError,
)
from storefront.domain.gateway.account_gateway import AccountGateway, AuthGrant
from storefront.domain.model.session import (
    Registration,
    Session,
    SessionState,
    User,
    UserRole,
    validate_credentials,
)
from storefront.domain.repository.token_repository import TokenRepository

logger = logging.getLogger(__name__)


class SessionManager:

    def __init__(
        self,
        account_gateway: AccountGateway,
        token_repo: TokenRepository,
        push_registration: PushRegistrationService | None = None,
    ) -> None:
        self._account_gateway = account_gateway
        self._token_repo = token_repo
        self._push_registration = push_registration
        self._session = Session.bootstrapping()

    # --- Queries --------------------------------------------------------------

    @property
    def session(self) -> Session:
        self._reconcile()
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def current_user(self) -> User | None:
        return self.session.user

    def require_user(self) -> User:
        """Return the signed-in user or raise NotAuthenticatedError."""
        session = self.session
        if not session.is_authenticated or session.user is None:
            raise NotAuthenticatedError("Please log in first.")
        return session.user

    # --- Bootstrap ------------------------------------------------------------

    def bootstrap(self) -> Session:
        """Restore the session from the stored token.

        The token is checked against ``/users/me``; any failure discards
        it.  Runs once; later calls return the current session.
        """
        if self._session.state != SessionState.BOOTSTRAPPING:
            return self.session

        try:
            token = self._token_repo.get()
        except PersistenceError as exc:
            logger.warning("Error restoring token: %s", exc)
            token = None

        if not token:
            logger.info("No token found, starting as guest")
            self._session = Session.guest()
            return self._session

        try:
            user = self._account_gateway.fetch_profile()
        except GatewayError as exc:
            logger.info("Stored token rejected (%s); starting as guest", exc)
            self._forget_token()
            self._session = Session.guest()
            return self._session

        self._session = Session.authenticated(token, user)
        logger.info("Session restored for user #%s", user.id)
        self._after_authentication()
        return self._session

    # --- Commands -------------------------------------------------------------

    def sign_in(self, phone_number: str, password: str) -> OperationResult:
        try:
            validate_credentials(phone_number, password)
        except ValidationError as exc:
            return OperationResult.fail(FailureReason.VALIDATION, str(exc))

        phone_number = phone_number.strip()
        try:
            grant = self._account_gateway.login(phone_number, password.strip())
        except GatewayError as exc:
            logger.warning("Sign-in failed: %s", exc)
            return _auth_failure(exc, "Login failed. Please try again.")

        user = User(
            id=grant.id or 0,
            phone_number=phone_number,
            name=grant.name or "",
            role=_parse_role(grant.role),
        )
        self._establish(grant, user)
        return OperationResult.ok("Login successful", data=user)

    def sign_up(self, registration: Registration) -> OperationResult:
        try:
            registration.validate()
        except ValidationError as exc:
            return OperationResult.fail(FailureReason.VALIDATION, str(exc))

        try:
            grant = self._account_gateway.signup(registration)
        except GatewayError as exc:
            logger.warning("Sign-up failed: %s", exc)
            return _auth_failure(exc, "Signup failed. Please try again.")

        user = User(
            id=grant.id or 0,
            phone_number=registration.phone_number.strip(),
            name=grant.name or registration.name or "",
            email=registration.email,
            role=_parse_role(grant.role),
        )
        self._establish(grant, user)
        return OperationResult.ok("Account created successfully", data=user)

    def sign_out(self) -> None:
        """Drop the session.  Always ends as GUEST."""
        self._forget_token()
        self._session = Session.guest()
        logger.info("Signed out")

    def update_user(self, user: User) -> None:
        """Replace the local user record without re-authenticating."""
        if not self._session.is_authenticated:
            raise NotAuthenticatedError("No signed-in user to update")
        self._session = Session.authenticated(self._session.token, user)

    def update_profile(self, changes: dict) -> OperationResult:
        if not self.is_authenticated:
            return OperationResult.fail(
                FailureReason.LOGIN_REQUIRED, "Please log in to edit your profile."
            )
        if "name" in changes and not (changes["name"] or "").strip():
            return OperationResult.fail(FailureReason.VALIDATION, "Name cannot be empty")

        try:
            user = self._account_gateway.update_profile(changes)
        except GatewayError as exc:
            logger.warning("Profile update failed: %s", exc)
            return failure_from(exc, "Failed to update profile. Please try again.")

        self.update_user(user)
        return OperationResult.ok("Profile updated successfully", data=user)

    # --- Internal helpers -----------------------------------------------------

    def _establish(self, grant: AuthGrant, user: User) -> None:
        try:
            self._token_repo.set(grant.token)
        except PersistenceError as exc:
            logger.warning("Token not persisted; session ends with this process: %s", exc)
        self._session = Session.authenticated(grant.token, user)
        logger.info("Signed in as user #%s", user.id)
        self._after_authentication()

    def _after_authentication(self) -> None:
        if self._push_registration is not None:
            self._push_registration.register_async()

    def _forget_token(self) -> None:
        try:
            self._token_repo.remove()
        except PersistenceError as exc:
            logger.warning("Failed to remove stored token: %s", exc)

    def _reconcile(self) -> None:
        if not self._session.is_authenticated:
            return
        try:
            stored = self._token_repo.get()
        except PersistenceError as exc:
            logger.warning("Could not read token store: %s", exc)
            return
        if stored != self._session.token:
            logger.info("Stored token was cleared; session is now guest")
            self._session = Session.guest()


def _auth_failure(exc: GatewayError, fallback: str) -> OperationResult:
    if isinstance(exc, RemoteRejectedError) and not exc.is_server_fault:
        return OperationResult.fail(
            FailureReason.INVALID_CREDENTIALS, exc.message or fallback
        )
    return failure_from(exc, fallback)


def _parse_role(raw: str | None) -> UserRole:
    try:
        return UserRole(raw or "USER")
    except ValueError:
        return UserRole.USER
