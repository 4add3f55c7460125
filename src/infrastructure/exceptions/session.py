"""
Session Error Taxonomy

One flat set of exceptions shared by every session component (codec, actions,
stream pumps, routers, controller, builder). Failures are classified into this
set at the boundary where they are first observed; components never define
their own error types.
"""

from typing import Any, Optional

import msgspec


class SessionError(Exception):
    """Base exception for all venue session errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(SessionError):
    """An outbound command is missing a required field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing `{field}` from request")


class AuthFailedError(SessionError):
    """Venue rejected the credentials."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"authorization failed code: `{code}`")


class DecodeError(SessionError):
    """Payload could not be parsed as UTF-8 or JSON, or did not match its record."""


class SendError(SessionError):
    """The outbound queue or the socket rejected a write."""


class UnsupportedMethodError(SessionError):
    """Inbound envelope carries a method name the stream does not classify."""

    def __init__(self, envelope: Any) -> None:
        self.envelope = envelope
        super().__init__(f"unsupported method: {getattr(envelope, 'method', '')!r}")


class UnsupportedSubscriptionError(SessionError):
    """Subscription push for a channel the stream does not classify."""

    def __init__(self, envelope: Any, channel: Optional[str] = None) -> None:
        self.envelope = envelope
        self.channel = channel
        super().__init__(f"unsupported subscription channel: {channel!r}")


class NumericParseError(SessionError):
    """A wire-format numeric string failed to parse."""


class MissingConfigurationError(SessionError):
    """A required session parameter (URL, credentials) was never supplied."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing `{field}` from config")


class UnclassifiedError(SessionError):
    """Transport-level error not otherwise mapped."""


class SessionConnectionError(SessionError):
    """Establishing a stream connection failed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"connection to {url} failed: {reason}")


def classify_error(error: BaseException) -> SessionError:
    """Map a foreign exception onto the session taxonomy."""
    if isinstance(error, SessionError):
        return error
    if isinstance(error, UnicodeDecodeError):
        return DecodeError(f"failed to convert frame to utf8: {error}")
    if isinstance(error, (msgspec.DecodeError, msgspec.ValidationError)):
        return DecodeError(f"failed to decode payload: {error}")
    if isinstance(error, ValueError):
        return NumericParseError(f"failed to parse number: {error}")
    return UnclassifiedError(f"{type(error).__name__}: {error}")
