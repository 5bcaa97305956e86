"""Error taxonomy shared by services, adapters and the HTTP layer."""


class ReserviaError(Exception):
    """Base error rendered to clients as an error envelope."""

    error_kind = "error"
    status_code = 500
    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class Unauthorized(ReserviaError):
    """No session token accompanied the request."""

    error_kind = "unauthorized"
    status_code = 401
    default_message = "unauthorized access"


class Forbidden(ReserviaError):
    """The session token was present but rejected."""

    error_kind = "forbidden"
    status_code = 403
    default_message = "forbidden access"


class InvalidId(ReserviaError):
    """A document identifier was not well formed."""

    error_kind = "invalid_id"
    status_code = 400
    default_message = "Invalid id format"


class InvalidInput(ReserviaError):
    """Query or body values failed validation."""

    error_kind = "invalid_input"
    status_code = 400
    default_message = "Invalid input"


class NotFound(ReserviaError):
    error_kind = "not_found"
    status_code = 404
    default_message = "Not found"


class StoreUnavailable(ReserviaError):
    """The document store rejected or failed an operation."""

    error_kind = "store_error"
    status_code = 500
    default_message = "Internal Server Error"


class SessionUnavailable(ReserviaError):
    """Session tokens cannot be issued with the current configuration."""

    error_kind = "session_error"
    status_code = 500
    default_message = "Session signing is unavailable"


class TokenError(Exception):
    """Base class for session token failures."""


class SigningError(TokenError):
    """The signing secret is missing or unusable."""


class InvalidSignature(TokenError):
    """The token is malformed or was not signed with our secret."""


class Expired(TokenError):
    """The token signature is valid but its lifetime has passed."""
