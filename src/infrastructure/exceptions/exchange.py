class ExchangeRestError(Exception):
    """Base exception for all venue REST API errors."""
    def __init__(self, code: int, message: str, api_code: int | None = None) -> None:
        self.api_code = api_code
        self.message = message
        self.status_code = code
        super().__init__(f"HTTP {code}: {message}")


class ExchangeConnectionRestError(ExchangeRestError):
    """Network connection errors that may be temporary."""
    pass


class ExchangeServerError(ExchangeRestError):
    """Server-side errors (5xx) that may be temporary."""
    pass


class AuthenticationError(ExchangeRestError):
    """Authentication failed - API key, signature, or permission issues."""
    pass


class TooManyRequestsError(ExchangeRestError):
    """HTTP 429 Too Many Requests."""
    pass
