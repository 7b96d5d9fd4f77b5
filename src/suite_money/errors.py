"""Exception taxonomy for monetary values and the currency registry.

Every error derives from `MoneyError` and from the builtin exception closest to its meaning,
so callers can catch either the library-wide base or the familiar builtin.
"""


class MoneyError(Exception):
    """Base class for all errors raised by suite_money."""

    pass


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when an operation combines amounts of different currencies."""

    pass


class UnknownCurrencyError(MoneyError, ValueError):
    """Raised when a currency code is not registered."""

    pass


class DuplicateCurrencyError(MoneyError, ValueError):
    """Raised when a registration conflicts with an already registered currency."""

    pass


class UnsupportedCurrencyError(MoneyError, ValueError):
    """Raised when an operation needs a minor-unit scale on a pseudo-currency."""

    pass


class InvalidScaleError(MoneyError, ValueError):
    """Raised when a scale or a number of decimal places is not acceptable."""

    pass


class ScaleOutOfRangeError(MoneyError, ArithmeticError):
    """Raised when an amount's scale leaves the supported range."""

    pass


class RoundingRequiredError(MoneyError, ArithmeticError):
    """Raised when rounding mode UNNECESSARY would discard nonzero digits."""

    pass


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised on division by a zero divisor."""

    pass


class NegativeRateError(MoneyError, ValueError):
    """Raised when converting with a negative conversion multiplier."""

    pass


class MoneyOverflowError(MoneyError, OverflowError):
    """Raised when a bounded amount would leave the signed 64-bit range."""

    pass


class MalformedInputError(MoneyError, ValueError):
    """Raised when text or data-file input cannot be parsed."""

    pass
