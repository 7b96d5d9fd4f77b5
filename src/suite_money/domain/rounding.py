from __future__ import annotations

from enum import Enum

from suite_money.errors import DivisionByZeroError, RoundingRequiredError


class RoundingMode(Enum):
    """Rounding behaviour applied whenever digits must be discarded.

    UNNECESSARY asserts that no rounding is needed and fails if any nonzero digit
    would be discarded.
    """

    UP = "UP"  # Away from zero when any nonzero fraction is discarded
    DOWN = "DOWN"  # Toward zero (truncation)
    CEILING = "CEILING"  # Toward positive infinity
    FLOOR = "FLOOR"  # Toward negative infinity
    HALF_UP = "HALF_UP"  # Nearest neighbour, ties away from zero
    HALF_DOWN = "HALF_DOWN"  # Nearest neighbour, ties toward zero
    HALF_EVEN = "HALF_EVEN"  # Nearest neighbour, ties to the even neighbour
    UNNECESSARY = "UNNECESSARY"  # Exact result required

    @classmethod
    def from_str(cls, name: str) -> RoundingMode:
        """Get the rounding mode by its name (case-insensitive).

        Raises:
            ValueError: If $name is not a rounding mode.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Unknown rounding mode $name = '{name}'. Available modes: {[m.name for m in cls]}") from e


def round_quotient(numerator: int, denominator: int, rounding_mode: RoundingMode) -> int:
    """Divide two integers and round the quotient to an integer.

    This is the single place where digits are discarded; every rescale and division in the
    library ends up here.

    Args:
        numerator: Dividend.
        denominator: Divisor, must not be zero.
        rounding_mode: How to resolve a nonzero remainder.

    Returns:
        int: The rounded quotient.

    Raises:
        DivisionByZeroError: If $denominator is zero.
        RoundingRequiredError: If $rounding_mode is UNNECESSARY and the remainder is nonzero.
    """
    # Raise: $rounding_mode must be a RoundingMode so every branch below is well defined
    if not isinstance(rounding_mode, RoundingMode):
        raise TypeError(f"$rounding_mode must be a RoundingMode, but provided value is: {rounding_mode!r}")

    if denominator == 0:
        raise DivisionByZeroError(f"Cannot divide {numerator} by zero")

    negative = (numerator < 0) != (denominator < 0)
    quotient, remainder = divmod(abs(numerator), abs(denominator))
    if remainder == 0:
        return -quotient if negative else quotient

    # Work on magnitudes; decide whether to step the magnitude away from zero
    if rounding_mode is RoundingMode.UNNECESSARY:
        raise RoundingRequiredError(f"Rounding necessary: {numerator}/{denominator} has a nonzero remainder")
    if rounding_mode is RoundingMode.DOWN:
        increment = False
    elif rounding_mode is RoundingMode.UP:
        increment = True
    elif rounding_mode is RoundingMode.CEILING:
        increment = not negative
    elif rounding_mode is RoundingMode.FLOOR:
        increment = negative
    else:
        doubled = 2 * remainder
        divisor = abs(denominator)
        if doubled != divisor:
            increment = doubled > divisor
        elif rounding_mode is RoundingMode.HALF_UP:
            increment = True
        elif rounding_mode is RoundingMode.HALF_DOWN:
            increment = False
        else:
            increment = quotient % 2 == 1

    if increment:
        quotient += 1
    return -quotient if negative else quotient


def rescale(unscaled: int, from_scale: int, to_scale: int, rounding_mode: RoundingMode) -> int:
    """Re-express an unscaled value at another scale.

    Widening (to_scale >= from_scale) is always exact. Narrowing discards digits and
    applies $rounding_mode.

    Examples:
        >>> rescale(125, 3, 2, RoundingMode.HALF_EVEN)
        12
        >>> rescale(125, 3, 2, RoundingMode.HALF_UP)
        13
        >>> rescale(-5, 0, 2, RoundingMode.UNNECESSARY)
        -500
    """
    if to_scale >= from_scale:
        return unscaled * 10 ** (to_scale - from_scale)
    return round_quotient(unscaled, 10 ** (from_scale - to_scale), rounding_mode)
