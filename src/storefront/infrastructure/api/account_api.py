"""REST implementation of AccountGateway (``/auth/*``, ``/users/*``)."""

from __future__ import annotations

from storefront.domain.gateway.account_gateway import AccountGateway, AuthGrant
from storefront.domain.model.session import Registration, User, UserRole
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.parsing import parse_one


class RestAccountGateway(AccountGateway):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- AccountGateway interface ---------------------------------------------

    def login(self, phone_number: str, password: str) -> AuthGrant:
        data = self._client.post(
            "/auth/login", json={"phoneNumber": phone_number, "password": password}
        )
        return parse_one(data, self._to_grant)

    def signup(self, registration: Registration) -> AuthGrant:
        payload = {
            "phoneNumber": registration.phone_number.strip(),
            "password": registration.password,
        }
        if registration.name and registration.name.strip():
            payload["name"] = registration.name.strip()
        if registration.email and registration.email.strip():
            payload["email"] = registration.email.strip()
        if registration.date_of_birth:
            payload["dateOfBirth"] = registration.date_of_birth
        data = self._client.post("/auth/signup", json=payload)
        return parse_one(data, self._to_grant)

    def fetch_profile(self) -> User:
        return parse_one(self._client.get("/users/me"), self._to_user)

    def update_profile(self, changes: dict) -> User:
        return parse_one(self._client.put("/users/update", json=changes), self._to_user)

    def update_push_token(self, push_token: str) -> None:
        self._client.post("/users/update-push-token", json=push_token)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_grant(raw: dict) -> AuthGrant:
        token = raw["token"]
        if not isinstance(token, str) or not token:
            raise ValueError("missing token")
        return AuthGrant(
            token=token,
            id=raw.get("id"),
            name=raw.get("name"),
            role=raw.get("role"),
        )

    @staticmethod
    def _to_user(raw: dict) -> User:
        return User(
            id=int(raw["id"]),
            phone_number=raw["phoneNumber"],
            name=raw.get("name") or "",
            role=UserRole(raw.get("role") or "USER"),
            email=raw.get("email"),
            email_verified=raw.get("emailVerified"),
            date_of_birth=raw.get("dateOfBirth"),
        )
