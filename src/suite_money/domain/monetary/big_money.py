from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from suite_money.domain.currency.currency_unit import CurrencyUnit, to_currency_unit
from suite_money.domain.decimal_value import MAX_SCALE, MIN_SCALE, AmountLike, DecimalValue
from suite_money.domain.monetary.protocol import BigMoneyProvider
from suite_money.domain.monetary.text_form import format_money_text, parse_money_text
from suite_money.domain.rounding import RoundingMode
from suite_money.errors import (
    CurrencyMismatchError,
    NegativeRateError,
    ScaleOutOfRangeError,
)
from suite_money.utils.numeric_tools import require_int

_ONE = DecimalValue(1, 0)


class BigMoney:
    """Amount of money in one currency with an unrestricted scale.

    BigMoney is the exact pivot type: every other money representation converts to it, and all
    arithmetic on them is done here first. Operations never round unless a `RoundingMode` is
    passed explicitly, so the scale of a result follows the operands:

    - plus/minus: the larger of both scales (`USD 25.95 + USD 3.001 = USD 28.951`)
    - multiplied_by: the sum of both scales
    - divided_by: the scale of the dividend

    Instances are immutable. An operation that would not change the value returns `self`.

    Equality (`==`) is structural: the same currency, scale and unscaled amount. Use
    `is_equal` or `compare_to` for a numeric comparison that ignores the scale.
    """

    __slots__ = ("_currency", "_amount")

    def __init__(self, currency: CurrencyUnit, amount: DecimalValue) -> None:
        """Initialize BigMoney from a currency and an exact amount.

        Prefer the factories (`of`, `of_major`, `of_minor`, `parse`, ...), which accept currency
        codes and Decimal-like amounts.

        Raises:
            TypeError: If $currency is not a CurrencyUnit or $amount is not a DecimalValue.
            ScaleOutOfRangeError: If the scale of $amount is outside [MIN_SCALE, MAX_SCALE].
        """
        # Raise: the constructor takes resolved types only
        if not isinstance(currency, CurrencyUnit):
            raise TypeError(f"$currency must be a CurrencyUnit, but provided value is: {currency!r}")
        if not isinstance(amount, DecimalValue):
            raise TypeError(f"$amount must be a DecimalValue, but provided value is: {amount!r}")

        # Raise: scale bound applies to every amount
        if not MIN_SCALE <= amount.scale <= MAX_SCALE:
            raise ScaleOutOfRangeError(f"Scale of $amount ({amount.scale}) is outside the supported range [{MIN_SCALE}, {MAX_SCALE}]")

        self._currency = currency
        self._amount = amount

    # region Factories

    @classmethod
    def of(cls, currency: CurrencyUnit | str, amount: AmountLike) -> BigMoney:
        """Create BigMoney keeping the scale of $amount exactly (`"2.50"` has scale 2)."""
        return cls(to_currency_unit(currency), DecimalValue.of(amount))

    @classmethod
    def of_currency_scale(
        cls,
        currency: CurrencyUnit | str,
        amount: AmountLike,
        rounding_mode: RoundingMode = RoundingMode.UNNECESSARY,
    ) -> BigMoney:
        """Create BigMoney at the scale of the currency's minor unit.

        Raises:
            UnsupportedCurrencyError: If $currency is a pseudo-currency.
            RoundingRequiredError: If rounding is needed and $rounding_mode is UNNECESSARY.
        """
        currency = to_currency_unit(currency)
        scale = currency.require_minor_unit_scale()
        return cls(currency, DecimalValue.of(amount).set_scale(scale, rounding_mode))

    @classmethod
    def of_major(cls, currency: CurrencyUnit | str, amount_major: int) -> BigMoney:
        """Create BigMoney from a whole number of major units; the scale is 0."""
        require_int(amount_major, "amount_major")
        return cls(to_currency_unit(currency), DecimalValue(amount_major, 0))

    @classmethod
    def of_minor(cls, currency: CurrencyUnit | str, amount_minor: int) -> BigMoney:
        """Create BigMoney from a number of minor units; the scale is the currency's decimal places.

        `BigMoney.of_minor("USD", 2595)` is `USD 25.95`.

        Raises:
            UnsupportedCurrencyError: If $currency is a pseudo-currency.
        """
        require_int(amount_minor, "amount_minor")
        currency = to_currency_unit(currency)
        return cls(currency, DecimalValue(amount_minor, currency.require_minor_unit_scale()))

    @classmethod
    def zero(cls, currency: CurrencyUnit | str) -> BigMoney:
        """Create a zero amount at scale 0."""
        return cls(to_currency_unit(currency), DecimalValue(0, 0))

    @classmethod
    def from_money(cls, money: BigMoneyProvider) -> BigMoney:
        """Convert any money representation to BigMoney."""
        return as_big_money(money, "from_money")

    @classmethod
    def parse(cls, text: str) -> BigMoney:
        """Parse the canonical text form ("USD 25.95"), keeping every written digit.

        Raises:
            MalformedInputError: If $text is not canonical money text.
            UnknownCurrencyError: If the currency code is not registered.
        """
        currency, amount = parse_money_text(text)
        return cls(currency, amount)

    @classmethod
    def total(cls, monies: Iterable[BigMoneyProvider]) -> BigMoney:
        """Sum a non-empty collection of amounts in one currency.

        Raises:
            ValueError: If $monies is empty.
            CurrencyMismatchError: If the currencies differ.
        """
        result: BigMoney | None = None
        for money in monies:
            big = as_big_money(money, "total")
            result = big if result is None else result.plus(big)

        # Raise: total of nothing has no currency
        if result is None:
            raise ValueError("Cannot call `total` because $monies is empty")
        return result

    # endregion

    # region Properties

    @property
    def currency_unit(self) -> CurrencyUnit:
        """Get the currency."""
        return self._currency

    @property
    def amount(self) -> DecimalValue:
        """Get the exact amount."""
        return self._amount

    @property
    def scale(self) -> int:
        """Get the scale of the amount."""
        return self._amount.scale

    @property
    def amount_major(self) -> DecimalValue:
        """Get the whole major units, truncated toward zero (`USD -2.35` → -2)."""
        return self._amount.set_scale(0, RoundingMode.DOWN)

    @property
    def amount_major_int(self) -> int:
        return self.amount_major.unscaled

    @property
    def amount_minor(self) -> DecimalValue:
        """Get the amount in whole minor units, truncated toward zero (`USD -2.35` → -235).

        Raises:
            UnsupportedCurrencyError: If the currency is a pseudo-currency.
        """
        scale = self._currency.require_minor_unit_scale()
        return DecimalValue(self._amount.set_scale(scale, RoundingMode.DOWN).unscaled, 0)

    @property
    def amount_minor_int(self) -> int:
        return self.amount_minor.unscaled

    @property
    def minor_part(self) -> int:
        """Get the minor units beyond the whole major units (`USD -2.35` → -35)."""
        scale = self._currency.require_minor_unit_scale()
        return self.amount_minor_int - self.amount_major_int * 10**scale

    def is_currency_scale(self) -> bool:
        """Check whether the scale equals the currency's decimal places."""
        return self._amount.scale == self._currency.decimal_places

    def is_zero(self) -> bool:
        return self._amount.is_zero()

    def is_positive(self) -> bool:
        return self._amount.signum > 0

    def is_positive_or_zero(self) -> bool:
        return self._amount.signum >= 0

    def is_negative(self) -> bool:
        return self._amount.signum < 0

    def is_negative_or_zero(self) -> bool:
        return self._amount.signum <= 0

    # endregion

    # region Derived values

    def with_currency_unit(self, currency: CurrencyUnit | str) -> BigMoney:
        """Return the same amount in another currency; no conversion is applied."""
        currency = to_currency_unit(currency)
        if currency == self._currency:
            return self
        return BigMoney(currency, self._amount)

    def with_amount(self, amount: AmountLike) -> BigMoney:
        """Return a value in the same currency with $amount, keeping its scale exactly."""
        return self._with(DecimalValue.of(amount))

    def with_scale(self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> BigMoney:
        """Re-express the amount at $scale, rounding with $rounding_mode when narrowing.

        Raises:
            RoundingRequiredError: If nonzero digits would be discarded and $rounding_mode is
                UNNECESSARY.
            ScaleOutOfRangeError: If $scale is outside [MIN_SCALE, MAX_SCALE].
        """
        require_int(scale, "scale")
        return self._with(self._amount.set_scale(scale, rounding_mode))

    def with_currency_scale(self, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> BigMoney:
        """Re-express the amount at the currency's decimal places.

        Raises:
            UnsupportedCurrencyError: If the currency is a pseudo-currency.
            RoundingRequiredError: If rounding is needed and $rounding_mode is UNNECESSARY.
        """
        return self.with_scale(self._currency.require_minor_unit_scale(), rounding_mode)

    def rounded(self, scale: int, rounding_mode: RoundingMode) -> BigMoney:
        """Round as if the amount had $scale decimal places, keeping the current scale.

        `BigMoney.of("USD", "0.125").rounded(2, RoundingMode.HALF_EVEN)` is `USD 0.120`.
        Rounding to a scale equal to or larger than the current one changes nothing.
        """
        require_int(scale, "scale")
        if scale >= self.scale:
            return self
        rounded_amount = self._amount.set_scale(scale, rounding_mode).set_scale(self.scale)
        return self._with(rounded_amount)

    # endregion

    # region Arithmetic

    def plus(self, other: BigMoneyProvider | AmountLike) -> BigMoney:
        """Add money in the same currency, or a bare amount; exact, at the larger scale.

        Raises:
            CurrencyMismatchError: If $other is money in another currency.
        """
        amount = self._operand_amount(other, "plus")
        if amount.is_zero() and amount.scale <= self.scale:
            return self
        return self._with(self._amount.add(amount))

    def minus(self, other: BigMoneyProvider | AmountLike) -> BigMoney:
        """Subtract money in the same currency, or a bare amount; exact, at the larger scale.

        Raises:
            CurrencyMismatchError: If $other is money in another currency.
        """
        amount = self._operand_amount(other, "minus")
        if amount.is_zero() and amount.scale <= self.scale:
            return self
        return self._with(self._amount.subtract(amount))

    def plus_major(self, amount_major: int) -> BigMoney:
        require_int(amount_major, "amount_major")
        return self.plus(DecimalValue(amount_major, 0))

    def minus_major(self, amount_major: int) -> BigMoney:
        require_int(amount_major, "amount_major")
        return self.minus(DecimalValue(amount_major, 0))

    def plus_minor(self, amount_minor: int) -> BigMoney:
        """Add a number of minor units; the scale becomes at least the currency's decimal places."""
        require_int(amount_minor, "amount_minor")
        return self.plus(DecimalValue(amount_minor, self._currency.require_minor_unit_scale()))

    def minus_minor(self, amount_minor: int) -> BigMoney:
        """Subtract a number of minor units; the scale becomes at least the currency's decimal places."""
        require_int(amount_minor, "amount_minor")
        return self.minus(DecimalValue(amount_minor, self._currency.require_minor_unit_scale()))

    def multiplied_by(self, multiplier: AmountLike) -> BigMoney:
        """Multiply exactly; the result scale is the sum of both scales.

        An int multiplier has scale 0, so it keeps the scale unchanged.
        """
        factor = DecimalValue.of(multiplier)
        if factor == _ONE:
            return self
        return self._with(self._amount.multiply(factor))

    def multiply_retain_scale(self, multiplier: AmountLike, rounding_mode: RoundingMode) -> BigMoney:
        """Multiply and round the product back to the current scale."""
        factor = DecimalValue.of(multiplier)
        if factor == _ONE:
            return self
        return self._with(self._amount.multiply(factor).set_scale(self.scale, rounding_mode))

    def divided_by(self, divisor: AmountLike, rounding_mode: RoundingMode) -> BigMoney:
        """Divide, expressing the quotient at the current scale.

        Raises:
            DivisionByZeroError: If $divisor is zero.
            RoundingRequiredError: If the quotient is inexact and $rounding_mode is UNNECESSARY.
        """
        factor = DecimalValue.of(divisor)
        if factor == _ONE:
            return self
        return self._with(self._amount.divide(factor, self.scale, rounding_mode))

    def negated(self) -> BigMoney:
        if self.is_zero():
            return self
        return self._with(self._amount.negate())

    def abs(self) -> BigMoney:
        return self if self.is_positive_or_zero() else self.negated()

    def converted_to(
        self,
        currency: CurrencyUnit | str,
        multiplier: AmountLike,
        rounding_mode: RoundingMode | None = None,
    ) -> BigMoney:
        """Convert to another currency by multiplying with a conversion rate.

        Without $rounding_mode the product is exact (scale = current scale + multiplier scale).
        With $rounding_mode it is rounded to the target currency's decimal places.

        Raises:
            CurrencyMismatchError: If $currency is the current currency and $multiplier is not 1.
            NegativeRateError: If $multiplier is negative.
            UnsupportedCurrencyError: If rounding is requested into a pseudo-currency.
        """
        currency = to_currency_unit(currency)
        factor = DecimalValue.of(multiplier)

        # Raise: conversion must change the currency (a rate of 1 to itself is a no-op)
        if currency == self._currency:
            if factor.is_equal(_ONE):
                return self
            raise CurrencyMismatchError(f"Cannot call `converted_to` because target $currency ({currency}) is the same as the current currency")

        # Raise: a conversion rate is never negative
        if factor.signum < 0:
            raise NegativeRateError(f"Cannot call `converted_to` because $multiplier ({factor}) is negative")

        amount = self._amount.multiply(factor)
        if rounding_mode is not None:
            amount = amount.set_scale(currency.require_minor_unit_scale(), rounding_mode)
        return BigMoney(currency, amount)

    # endregion

    # region Comparison

    def is_same_currency(self, other: BigMoneyProvider) -> bool:
        return self._currency == as_big_money(other, "is_same_currency")._currency

    def compare_to(self, other: BigMoneyProvider) -> int:
        """Numeric three-way comparison ignoring scale (-1, 0 or 1).

        Raises:
            CurrencyMismatchError: If $other is in another currency.
        """
        return self._amount.compare_to(self._same_currency_big_money(other, "compare_to")._amount)

    def is_equal(self, other: BigMoneyProvider) -> bool:
        """Numeric equality ignoring scale (`USD 2.00` equals `USD 2`)."""
        return self.compare_to(other) == 0

    def is_greater_than(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) > 0

    def is_greater_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) >= 0

    def is_less_than(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) < 0

    def is_less_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self.compare_to(other) <= 0

    # endregion

    # region Conversion

    def to_big_money(self) -> BigMoney:
        return self

    def __str__(self) -> str:
        """Return canonical text like 'USD 25.95'."""
        return format_money_text(self._currency, self._amount)

    def __repr__(self) -> str:
        """Return string like "BigMoney('USD 25.95')"."""
        return f"{self.__class__.__name__}('{self}')"

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        """Structural equality: same currency, scale and unscaled amount."""
        if not isinstance(other, BigMoney):
            return False
        return self._currency == other._currency and self._amount == other._amount

    def __hash__(self) -> int:
        return hash((self._currency, self._amount))

    def __lt__(self, other) -> bool:
        if not isinstance(other, BigMoneyProvider):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, BigMoneyProvider):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, BigMoneyProvider):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, BigMoneyProvider):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other):
        """Add money in the same currency or a bare amount."""
        if not is_money_operand(other):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other):
        """Right addition, so `sum(monies)` works (it starts from int 0)."""
        return self.__add__(other)

    def __sub__(self, other):
        if not is_money_operand(other):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other):
        """Multiply by a number (exact)."""
        if isinstance(other, BigMoneyProvider) or not is_money_operand(other):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return self.negated()

    def __abs__(self):
        return self.abs()

    # endregion

    # region Helpers

    def _with(self, amount: DecimalValue) -> BigMoney:
        if amount == self._amount:
            return self
        return BigMoney(self._currency, amount)

    def _same_currency_big_money(self, other: BigMoneyProvider, method_name: str) -> BigMoney:
        big = as_big_money(other, method_name)

        # Raise: amounts in different currencies are never combined
        if big._currency != self._currency:
            raise CurrencyMismatchError(f"Cannot call `{method_name}` because currencies differ: {self._currency} and {big._currency}")
        return big

    def _operand_amount(self, other: BigMoneyProvider | AmountLike, method_name: str) -> DecimalValue:
        if isinstance(other, BigMoneyProvider):
            return self._same_currency_big_money(other, method_name)._amount
        return DecimalValue.of(other)

    # endregion


def as_big_money(money: BigMoneyProvider, method_name: str) -> BigMoney:
    """Get the BigMoney behind any money representation.

    Raises:
        TypeError: If $money does not provide `to_big_money()`.
    """
    if isinstance(money, BigMoney):
        return money
    if not isinstance(money, BigMoneyProvider):
        raise TypeError(f"Cannot call `{method_name}` because $money must provide `to_big_money()`, but provided value is: {money!r}")

    big = money.to_big_money()
    if not isinstance(big, BigMoney):
        raise TypeError(f"Cannot call `{method_name}` because `to_big_money()` of {money!r} returned {big!r}")
    return big


def is_money_operand(value) -> bool:
    """Check whether an operator may treat $value as money or as a numeric amount."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (BigMoneyProvider, DecimalValue, Decimal, int, float))
