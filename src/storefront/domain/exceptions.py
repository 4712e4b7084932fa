"""Domain-level exceptions.

Business rule violations and pre-flight checks are subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.  Remote failures are GatewayError subclasses;
application handlers turn those into structured results instead of
letting them reach the caller.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or a required input was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class NotAuthenticatedError(DomainException):
    """The operation needs a signed-in user."""


class PersistenceError(DomainException):
    """Local storage could not be read or written."""


# ---------------------------------------------------------------------------
# Remote (REST backend) failures
# ---------------------------------------------------------------------------


class GatewayError(DomainException):
    """Base class for failures talking to the backend."""


class NetworkUnreachableError(GatewayError):
    """The request never reached the server."""


class RemoteRejectedError(GatewayError):
    """The server answered, but refused the request.

    Covers non-2xx statuses as well as 2xx envelopes with ``success=false``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_server_fault(self) -> bool:
        return self.status_code is not None and self.status_code >= 500


class SessionExpiredError(RemoteRejectedError):
    """The server answered 401; the stored token has already been dropped."""

    def __init__(self, message: str = "Session expired. Please login again.") -> None:
        super().__init__(message, status_code=401)


class MalformedResponseError(GatewayError):
    """The response body did not match the ``{success, message, data}`` envelope."""
