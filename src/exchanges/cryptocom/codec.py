"""
Wire codec: outbound ApiRequest frames and inbound Envelope frames.
"""

from typing import Any, Callable, Optional, Type, TypeVar, Union

import msgspec

from infrastructure.exceptions.session import DecodeError, InvalidRequestError
from utils.time_utils import get_epoch_ms
from .auth import sign_request
from .structs.envelope import ApiRequest, Envelope

T = TypeVar("T")
R = TypeVar("R")

_encoder = msgspec.json.Encoder()
_envelope_decoder = msgspec.json.Decoder(Envelope)


def build_request(id: int, method: str, params: Optional[dict] = None, *,
                  api_key: Optional[str] = None, secret_key: Optional[str] = None,
                  with_nonce: bool = True) -> ApiRequest:
    """
    Build an outbound command.

    With ``secret_key`` the request is signed and carries ``api_key`` and
    ``sig``; signing always includes a nonce.

    Raises:
        InvalidRequestError: ``method`` is empty, or signing without ``api_key``
    """
    if not method:
        raise InvalidRequestError("method")

    nonce = get_epoch_ms() if with_nonce or secret_key else None

    sig = None
    if secret_key is not None:
        if not api_key:
            raise InvalidRequestError("api_key")
        sig = sign_request(secret_key, method, id, api_key, params, nonce)

    return ApiRequest(id=id, method=method, params=params, api_key=api_key, sig=sig, nonce=nonce)


def encode_request(request: ApiRequest) -> str:
    return _encoder.encode(request).decode("utf-8")


def decode_frame(raw: Union[str, bytes]) -> Envelope:
    """Decode one inbound frame. Binary frames are UTF-8 decoded first."""
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"failed to convert frame to utf8: {e}") from e
    try:
        return _envelope_decoder.decode(raw)
    except msgspec.DecodeError as e:
        raise DecodeError(f"failed to decode envelope: {e}") from e


def decode_result(value: Any, type: Type[T]) -> T:
    """Convert a decoded ``result`` value into its typed record."""
    try:
        return msgspec.convert(value, type)
    except msgspec.ValidationError as e:
        raise DecodeError(f"failed to decode {type.__name__}: {e}") from e


def result_decoder(raw_type: Type[T], cook: Optional[Callable[[T], R]] = None) -> Callable[[Any], Any]:
    """Decoder for a result shape: convert to ``raw_type``, then cook if given."""
    if cook is None:
        return lambda value: decode_result(value, raw_type)
    return lambda value: cook(decode_result(value, raw_type))
