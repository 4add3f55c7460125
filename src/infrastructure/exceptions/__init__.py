from .session import (
    SessionError,
    InvalidRequestError,
    AuthFailedError,
    DecodeError,
    SendError,
    UnsupportedMethodError,
    UnsupportedSubscriptionError,
    NumericParseError,
    MissingConfigurationError,
    UnclassifiedError,
    SessionConnectionError,
    classify_error,
)
from .exchange import (
    ExchangeRestError,
    ExchangeConnectionRestError,
    ExchangeServerError,
    AuthenticationError,
    TooManyRequestsError,
)
from .system import ConfigurationError

__all__ = [
    'SessionError',
    'InvalidRequestError',
    'AuthFailedError',
    'DecodeError',
    'SendError',
    'UnsupportedMethodError',
    'UnsupportedSubscriptionError',
    'NumericParseError',
    'MissingConfigurationError',
    'UnclassifiedError',
    'SessionConnectionError',
    'classify_error',
    'ExchangeRestError',
    'ExchangeConnectionRestError',
    'ExchangeServerError',
    'AuthenticationError',
    'TooManyRequestsError',
    'ConfigurationError',
]
