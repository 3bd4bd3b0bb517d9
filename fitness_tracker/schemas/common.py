import math
from typing import Any

from pydantic import BaseModel


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_optional_int(value: Any) -> int | None:
    """Parse form input such as ``"12"`` into an int; blank input means absent."""
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError("expected a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected a whole number, got {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"expected a whole number, got {value!r}") from None
    raise ValueError(f"expected a whole number, got {type(value).__name__}")


def parse_optional_float(value: Any) -> float | None:
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError("expected a number")
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValueError(f"expected a number, got {value!r}") from None
    else:
        raise ValueError(f"expected a number, got {type(value).__name__}")
    if not math.isfinite(number):
        raise ValueError(f"expected a finite number, got {value!r}")
    return number


class CreatedResponse(BaseModel):
    id: int
