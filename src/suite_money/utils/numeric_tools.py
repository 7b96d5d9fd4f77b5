from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from suite_money.errors import MalformedInputError

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so `0.1` becomes
    `Decimal("0.1")` and not the exact binary expansion.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is not a supported scalar (bool is rejected).
        MalformedInputError: If $value is not a finite number.
    """
    # Raise: bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise MalformedInputError(f"Cannot convert $value ('{value}') to Decimal") from e

    # Raise: NaN and infinities have no unscaled/scale representation
    if not result.is_finite():
        raise MalformedInputError(f"$value must be a finite number, but provided value is: {value!r}")

    return result


def require_int(value: int, name: str) -> None:
    """Check that a whole-unit argument is an int.

    Raises:
        TypeError: If $value is not an int (bool is rejected).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"${name} must be an int, but provided value is: {value!r}")
