"""
Error taxonomy for the Numista client.

Every failure raised by the library derives from ClientError:

- ConfigurationError: the client could not be built (no API key, bad argument)
- TransportError: the request never produced an HTTP response
- ApiError: Numista answered with a non-success status
- DecodeError: the response body did not match the expected model

Nothing here retries. The CLI is the only place these are turned into
messages and exit codes.
"""

from enum import Enum


class ClientError(Exception):
    """Base class for all errors raised by planchet."""

    pass


class ConfigurationError(ClientError):
    """Raised before any network activity when configuration is incomplete."""

    pass


class TransportError(ClientError):
    """Raised for connection failures, timeouts and TLS errors."""

    pass


class KnownApiError(str, Enum):
    """Statuses the Numista API documents with a specific meaning."""

    INVALID_PARAMETER = "invalid_parameter"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    # Only for the client_credentials grant
    NO_USER_ASSOCIATED_WITH_API_KEY = "no_user_associated_with_api_key"

    @classmethod
    def from_status(cls, status: int) -> "KnownApiError | None":
        return _STATUS_KINDS.get(status)


_STATUS_KINDS: dict[int, KnownApiError] = {
    400: KnownApiError.INVALID_PARAMETER,
    401: KnownApiError.UNAUTHORIZED,
    404: KnownApiError.NOT_FOUND,
    429: KnownApiError.RATE_LIMIT_EXCEEDED,
    501: KnownApiError.NO_USER_ASSOCIATED_WITH_API_KEY,
}


class ApiError(ClientError):
    """
    Numista returned a non-success HTTP status.

    Attributes:
        status: HTTP status code
        message: error_message from the response body, or "" if there was none
        kind: Documented meaning of the status, if any
    """

    def __init__(self, status: int, message: str = "") -> None:
        self.status = status
        self.message = message
        self.kind = KnownApiError.from_status(status)
        text = f"API error (status {status})"
        super().__init__(f"{text}: {message}" if message else text)


class DecodeError(ClientError):
    """
    A response body did not match the expected schema.

    Usually means the API changed or a model is out of date,
    not that the caller did something wrong.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Could not decode field '{field}': {reason}")
