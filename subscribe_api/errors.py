"""Error taxonomy for the subscribe endpoint.

Each error knows the HTTP status it maps to and converts to the public
``SubscribeErr`` envelope. Only ``UpstreamError`` carries ``errors`` back to
the caller; everything else exposes a fixed message.
"""

from typing import Any, Optional

from subscribe_api.models.schema import SubscribeErr

_NO_ERRORS = object()


class SubscribeError(Exception):
    """Base class. Defaults to a generic 500."""

    default_message = "Server error. Please try again."
    status_code = 500
    outcome = "server_error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None,
                 errors: Any = _NO_ERRORS):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        # upstream may send "errors": null, which is passed on as-is
        self.has_errors = errors is not _NO_ERRORS
        self.errors = errors if self.has_errors else None
        super().__init__(self.message)

    def to_result(self) -> SubscribeErr:
        if self.has_errors:
            return SubscribeErr(message=self.message, errors=self.errors)
        return SubscribeErr(message=self.message)


class ValidationError(SubscribeError):
    default_message = "Please enter a valid email address."
    status_code = 422
    outcome = "invalid"


class ServerConfigError(SubscribeError):
    default_message = "Server configuration error (missing API key)."
    status_code = 500
    outcome = "config_error"


class UpstreamError(SubscribeError):
    """The mailing-list provider rejected the request; its status is mirrored."""

    default_message = "Signup failed"
    outcome = "upstream_error"


class UnexpectedError(SubscribeError):
    pass
