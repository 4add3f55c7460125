"""
Request signing.

The venue signs ``method + id + api_key + flattened params + nonce`` with
HMAC-SHA256 over the secret key, hex encoded.
"""

import hashlib
import hmac
from decimal import Decimal
from typing import Any, Optional


def params_to_str(value: Any) -> str:
    """
    Flatten a params value into the canonical signing string.

    Objects contribute ``key + value`` for each key in ascending order, arrays
    are concatenated element-wise, numbers use their plain decimal form,
    strings are inserted verbatim, ``None`` is ``"null"`` and booleans are
    ``"true"``/``"false"``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "".join(params_to_str(item) for item in value)
    if isinstance(value, dict):
        return "".join(f"{key}{params_to_str(value[key])}" for key in sorted(value))
    raise TypeError(f"Cannot canonicalize params value of type {type(value).__name__}")


def sign_request(secret_key: str, method: str, id: int, api_key: str,
                 params: Optional[dict], nonce: int) -> str:
    payload = f"{method}{id}{api_key}{params_to_str(params or {})}{nonce}"
    return hmac.new(
        secret_key.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256
    ).hexdigest()
