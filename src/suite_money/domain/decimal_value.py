from __future__ import annotations

import re
from decimal import Decimal
from typing import TypeAlias

from suite_money.domain.rounding import RoundingMode, rescale, round_quotient
from suite_money.errors import DivisionByZeroError, MalformedInputError, ScaleOutOfRangeError
from suite_money.utils.numeric_tools import DecimalLike, as_decimal

# Plain decimal text: optional sign, digits, optional point, digits (at least one digit overall)
_PLAIN_TEXT_PATTERN = re.compile(r"[+-]?[0-9]*\.?[0-9]*")

# Supported range of scales for a rescaled or divided value, shared by every money representation
MIN_SCALE = -1000
MAX_SCALE = 1000

# Largest number of decimal places a value may be shifted by; covers the product of two in-range values
MAX_SCALE_SHIFT = 2 * (MAX_SCALE - MIN_SCALE)


class DecimalValue:
    """Exact fixed-point number: an unscaled integer plus a scale.

    The represented value is `unscaled * 10 ** -scale`. A negative scale stands for trailing
    zeros before the decimal point (`DecimalValue(12, -2)` is 1200).

    Arithmetic is done on Python ints, so it never depends on a `decimal` context precision.
    Only `divide` and `set_scale` can discard digits, and both require a `RoundingMode`.

    Two notions of equality exist:
    - `==` / `hash` are structural: 2.00 and 2 are different values.
    - `is_equal`, `compare_to` and the ordering operators are numeric: 2.00 equals 2.
    """

    __slots__ = ("_unscaled", "_scale")

    def __init__(self, unscaled: int, scale: int = 0) -> None:
        """Initialize a DecimalValue from its unscaled integer and scale.

        Raises:
            TypeError: If $unscaled or $scale is not an int.
        """
        # Raise: both parts must be plain ints (bool excluded)
        if isinstance(unscaled, bool) or not isinstance(unscaled, int):
            raise TypeError(f"$unscaled must be an int, but provided value is: {unscaled!r}")
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise TypeError(f"$scale must be an int, but provided value is: {scale!r}")

        self._unscaled = unscaled
        self._scale = scale

    # region Factories

    @classmethod
    def of(cls, value: AmountLike) -> DecimalValue:
        """Convert a Decimal-like scalar into a DecimalValue without any rounding.

        The scale of the result is taken from the input: `Decimal("2.50")` keeps scale 2,
        ints get scale 0, floats go through their shortest string form (`2.5` → scale 1).
        """
        if isinstance(value, DecimalValue):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value, 0)

        sign, digits, exponent = as_decimal(value).as_tuple()
        unscaled = int("".join(map(str, digits)) or "0")
        return cls(-unscaled if sign else unscaled, -exponent)

    @classmethod
    def parse(cls, text: str) -> DecimalValue:
        """Parse plain decimal text like '-12.340' keeping every written digit.

        Only the form `[+-]?[0-9]*[.]?[0-9]*` with at least one digit is accepted; exponents,
        whitespace and digit separators are rejected.

        Raises:
            MalformedInputError: If $text is not plain decimal text.
        """
        if not isinstance(text, str):
            raise TypeError(f"$text must be a str, but provided value is: {text!r}")
        if _PLAIN_TEXT_PATTERN.fullmatch(text) is None or not any(ch.isdigit() for ch in text):
            raise MalformedInputError(f"Cannot parse $text ('{text}') as a plain decimal amount")

        negative = text.startswith("-")
        body = text.lstrip("+-")
        integer_part, _, fraction_part = body.partition(".")
        unscaled = int((integer_part + fraction_part) or "0")
        return cls(-unscaled if negative else unscaled, len(fraction_part))

    # endregion

    # region Properties

    @property
    def unscaled(self) -> int:
        """Get the unscaled integer."""
        return self._unscaled

    @property
    def scale(self) -> int:
        """Get the number of digits to the right of the decimal point."""
        return self._scale

    @property
    def signum(self) -> int:
        """Get -1, 0 or 1 according to the sign of the value."""
        return (self._unscaled > 0) - (self._unscaled < 0)

    def is_zero(self) -> bool:
        return self._unscaled == 0

    # endregion

    # region Arithmetic

    def add(self, other: DecimalValue) -> DecimalValue:
        """Exact sum; the result scale is the larger of both scales."""
        scale = max(self._scale, other._scale)
        return DecimalValue(self._aligned(scale) + other._aligned(scale), scale)

    def subtract(self, other: DecimalValue) -> DecimalValue:
        """Exact difference; the result scale is the larger of both scales."""
        scale = max(self._scale, other._scale)
        return DecimalValue(self._aligned(scale) - other._aligned(scale), scale)

    def multiply(self, other: DecimalValue) -> DecimalValue:
        """Exact product; the result scale is the sum of both scales."""
        return DecimalValue(self._unscaled * other._unscaled, self._scale + other._scale)

    def divide(self, divisor: DecimalValue, scale: int, rounding_mode: RoundingMode) -> DecimalValue:
        """Quotient expressed at $scale, rounded with $rounding_mode.

        Raises:
            DivisionByZeroError: If $divisor is zero.
            RoundingRequiredError: If $rounding_mode is UNNECESSARY and the quotient is inexact.
            ScaleOutOfRangeError: If $scale is outside [MIN_SCALE, MAX_SCALE] or the operand
                scales are too far apart.
        """
        if divisor.is_zero():
            raise DivisionByZeroError(f"Cannot divide {self} by zero")
        check_scale(scale)

        # (u1 * 10^-s1) / (u2 * 10^-s2) * 10^scale  ==  u1 * 10^(scale - s1 + s2) / u2
        shift = scale - self._scale + divisor._scale
        numerator = self._unscaled * _power_of_ten(max(shift, 0))
        denominator = divisor._unscaled * _power_of_ten(max(-shift, 0))
        return DecimalValue(round_quotient(numerator, denominator, rounding_mode), scale)

    def negate(self) -> DecimalValue:
        return DecimalValue(-self._unscaled, self._scale)

    def abs(self) -> DecimalValue:
        return self if self._unscaled >= 0 else self.negate()

    def set_scale(self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> DecimalValue:
        """Re-express this value at $scale.

        Widening is exact. Narrowing applies $rounding_mode to the discarded digits.

        Raises:
            RoundingRequiredError: If $rounding_mode is UNNECESSARY and nonzero digits would be discarded.
            ScaleOutOfRangeError: If $scale is outside [MIN_SCALE, MAX_SCALE] or too far from the
                current scale.
        """
        if scale == self._scale:
            return self
        check_scale(scale)
        _check_shift(abs(scale - self._scale))
        return DecimalValue(rescale(self._unscaled, self._scale, scale, rounding_mode), scale)

    def _aligned(self, scale: int) -> int:
        """Unscaled value at a scale >= the current scale."""
        return self._unscaled * _power_of_ten(scale - self._scale)

    # endregion

    # region Comparison

    def compare_to(self, other: DecimalValue) -> int:
        """Numeric three-way comparison ignoring scale (-1, 0 or 1)."""
        scale = max(self._scale, other._scale)
        left = self._aligned(scale)
        right = other._aligned(scale)
        return (left > right) - (left < right)

    def is_equal(self, other: DecimalValue) -> bool:
        """Numeric equality ignoring scale (2.00 equals 2)."""
        return self.compare_to(other) == 0

    def __eq__(self, other) -> bool:
        """Structural equality: same unscaled value AND same scale."""
        if not isinstance(other, DecimalValue):
            return False
        return self._unscaled == other._unscaled and self._scale == other._scale

    def __hash__(self) -> int:
        return hash((self._unscaled, self._scale))

    def __lt__(self, other: DecimalValue) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: DecimalValue) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: DecimalValue) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: DecimalValue) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.compare_to(other) >= 0

    # endregion

    # region Conversion

    def to_decimal(self) -> Decimal:
        """Return the exact `Decimal` with the same digits and exponent."""
        digits = tuple(int(ch) for ch in str(abs(self._unscaled)))
        return Decimal((1 if self._unscaled < 0 else 0, digits, -self._scale))

    def to_plain_string(self) -> str:
        """Render without exponent: '-0.05', '1200', '28.951'."""
        sign = "-" if self._unscaled < 0 else ""
        digits = str(abs(self._unscaled))
        if self._scale <= 0:
            return sign + digits + "0" * (-self._scale) if self._unscaled != 0 else "0"
        digits = digits.rjust(self._scale + 1, "0")
        return f"{sign}{digits[:-self._scale]}.{digits[-self._scale:]}"

    def __str__(self) -> str:
        return self.to_plain_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.to_plain_string()}')"

    # endregion


# Anything a factory accepts as an amount
AmountLike: TypeAlias = DecimalValue | DecimalLike


def check_scale(scale: int) -> int:
    """Check that $scale lies in the supported range and return it.

    Raises:
        ScaleOutOfRangeError: If $scale is outside [MIN_SCALE, MAX_SCALE].
    """
    if not MIN_SCALE <= scale <= MAX_SCALE:
        raise ScaleOutOfRangeError(f"$scale ({scale}) is outside the supported range [{MIN_SCALE}, {MAX_SCALE}]")
    return scale


def _check_shift(places: int) -> None:
    # Raise: the power of ten is only built for shifts within the limit
    if places > MAX_SCALE_SHIFT:
        raise ScaleOutOfRangeError(f"Cannot shift a value by {places} decimal places, the limit is {MAX_SCALE_SHIFT}")


def _power_of_ten(places: int) -> int:
    _check_shift(places)
    return 10 ** places
