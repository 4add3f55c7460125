from typing import ClassVar, List

from .base import Action, FrameSender
from ..codec import build_request, encode_request


class Subscribe(Action):
    """Subscribe to channels, e.g. ``ticker.BTC_USDT`` or ``user.order.BTC_USDT``."""
    method: ClassVar[str] = "subscribe"
    channels: List[str]


class Unsubscribe(Action):
    method: ClassVar[str] = "unsubscribe"
    channels: List[str]


class GetInstruments(Action):
    method: ClassVar[str] = "public/get-instruments"


class Auth(Action):
    """
    Authenticate the user stream.

    Carries its own credentials, so it is accepted without the session's
    AUTH capability. The venue answers with a ``public/auth`` frame whose code
    tells whether the credentials were accepted.
    """
    method: ClassVar[str] = "public/auth"
    api_key: str
    secret_key: str

    @classmethod
    def from_credentials(cls, credentials) -> "Auth":
        return cls(api_key=credentials.api_key, secret_key=credentials.secret_key)

    def params(self):
        return None

    def process(self, output: FrameSender, id: int) -> None:
        request = build_request(id, self.method, api_key=self.api_key, secret_key=self.secret_key)
        output.send(encode_request(request))

    def __repr__(self) -> str:
        return f"Auth(api_key={self.api_key[:4]}..., secret_key=***)"
