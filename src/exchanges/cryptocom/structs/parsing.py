from typing import Optional

from infrastructure.exceptions.session import NumericParseError


def parse_float(value: str, field: str) -> float:
    """Parse a wire-format decimal string."""
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise NumericParseError(f"failed to parse float from `{field}`: {value!r}") from e


def parse_optional_float(value: Optional[str], field: str) -> Optional[float]:
    if value is None:
        return None
    return parse_float(value, field)


def parse_int(value: str, field: str) -> int:
    """Parse a wire-format unsigned integer string."""
    try:
        parsed = int(value)
    except (TypeError, ValueError) as e:
        raise NumericParseError(f"failed to parse integer from `{field}`: {value!r}") from e
    if parsed < 0:
        raise NumericParseError(f"negative value in `{field}`: {value!r}")
    return parsed
