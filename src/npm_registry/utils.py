"""Small helpers shared by the client."""

from __future__ import annotations

import math
from numbers import Real

from npm_registry.errors import InvalidArgumentError


def is_number(value: object) -> bool:
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    return not math.isnan(value)


def clamp(value: float, minimum: float = 0, maximum: float = 1) -> float:
    """Bound *value* into ``[minimum, maximum]``.

    Raises:
        InvalidArgumentError: If any argument is not a real number (NaN included), or if
            ``minimum`` is greater than ``maximum``.
    """
    for label, arg in (("value", value), ("minimum", minimum), ("maximum", maximum)):
        if not is_number(arg):
            raise InvalidArgumentError(f"{label} must be a number, got {type(arg).__name__}")
    if minimum > maximum:
        raise InvalidArgumentError(f"minimum ({minimum}) is greater than maximum ({maximum})")

    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value
