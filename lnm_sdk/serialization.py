"""Helpers for the JSON wire form of model values."""

from __future__ import annotations

import math
from typing import Any, Optional, Union

from .price import Price

__all__ = ["serialize_float_without_decimal", "deserialize_optional_price"]


def serialize_float_without_decimal(value: Any) -> Union[int, float]:
    """Return an int for whole numbers, otherwise the float itself."""
    as_float = float(getattr(value, "value", value))
    if math.isfinite(as_float) and as_float.is_integer():
        return int(as_float)
    return as_float


def deserialize_optional_price(value: Optional[float]) -> Optional[Price]:
    """Read an optional price; ``None`` and ``0`` both mean no price."""
    if value is None:
        return None
    if not isinstance(value, bool) and isinstance(value, (int, float)) and value == 0:
        return None
    return Price(value)