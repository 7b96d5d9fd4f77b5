from __future__ import annotations

from typing import Self

from suite_money.domain.currency.currency_unit import CurrencyUnit
from suite_money.domain.decimal_value import AmountLike, DecimalValue
from suite_money.domain.monetary.big_money import BigMoney, is_money_operand
from suite_money.domain.monetary.protocol import BigMoneyProvider
from suite_money.domain.monetary.scale_policy import ScalePolicy
from suite_money.domain.rounding import RoundingMode
from suite_money.errors import InvalidScaleError


class ScaledMoney:
    """Money whose scale is governed by a `ScalePolicy`.

    Every operation is computed exactly on the underlying `BigMoney` and the result is then
    brought back to the policy's scale with the `RoundingMode` passed to the operation. The
    default mode is UNNECESSARY, so an operation that would have to round fails with
    `RoundingRequiredError` instead of silently losing precision.

    `Money` (scale of the currency) and `FixedMoney` (scale chosen by the caller) are the two
    ready-made variants; they only add factories on top of this class.
    """

    __slots__ = ("_money", "_policy")

    def __init__(self, money: BigMoney, policy: ScalePolicy) -> None:
        """Wrap $money under $policy.

        Raises:
            TypeError: If $money is not a BigMoney.
            InvalidScaleError: If the scale of $money does not satisfy $policy.
        """
        if not isinstance(money, BigMoney):
            raise TypeError(f"$money must be a BigMoney, but provided value is: {money!r}")

        # Raise: the policy's scale is an invariant of every instance
        if not policy.accepts(money):
            raise InvalidScaleError(f"Cannot create `{self.__class__.__name__}` because scale of $money ({money}) does not satisfy {policy!r}")

        self._money = money
        self._policy = policy

    # region Properties

    @property
    def currency_unit(self) -> CurrencyUnit:
        return self._money.currency_unit

    @property
    def amount(self) -> DecimalValue:
        return self._money.amount

    @property
    def scale(self) -> int:
        return self._money.scale

    @property
    def scale_policy(self) -> ScalePolicy:
        return self._policy

    @property
    def amount_major(self) -> DecimalValue:
        return self._money.amount_major

    @property
    def amount_major_int(self) -> int:
        return self._money.amount_major_int

    @property
    def amount_minor(self) -> DecimalValue:
        return self._money.amount_minor

    @property
    def amount_minor_int(self) -> int:
        return self._money.amount_minor_int

    @property
    def minor_part(self) -> int:
        return self._money.minor_part

    def is_zero(self) -> bool:
        return self._money.is_zero()

    def is_positive(self) -> bool:
        return self._money.is_positive()

    def is_positive_or_zero(self) -> bool:
        return self._money.is_positive_or_zero()

    def is_negative(self) -> bool:
        return self._money.is_negative()

    def is_negative_or_zero(self) -> bool:
        return self._money.is_negative_or_zero()

    # endregion

    # region Derived values

    def with_currency_unit(self, currency: CurrencyUnit | str, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Self:
        """Return the same amount in another currency, adjusted to the policy's scale."""
        return self._retain(self._money.with_currency_unit(currency), rounding_mode)

    def with_amount(self, amount: AmountLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Self:
        """Return $amount in the same currency, adjusted to the policy's scale."""
        return self._retain(self._money.with_amount(amount), rounding_mode)

    def rounded(self, scale: int, rounding_mode: RoundingMode) -> Self:
        """Round as if the amount had $scale decimal places, keeping the current scale.

        `Money.of("USD", "2.35").rounded(1, RoundingMode.HALF_UP)` is `USD 2.40`.
        """
        return self._with(self._money.rounded(scale, rounding_mode))

    # endregion

    # region Arithmetic

    def plus(self, other: BigMoneyProvider | AmountLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Self:
        """Add money in the same currency, or a bare amount.

        Raises:
            CurrencyMismatchError: If $other is money in another currency.
            RoundingRequiredError: If the exact sum does not fit the scale and $rounding_mode is
                UNNECESSARY.
        """
        return self._retain(self._money.plus(other), rounding_mode)

    def minus(self, other: BigMoneyProvider | AmountLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Self:
        """Subtract money in the same currency, or a bare amount.

        Raises:
            CurrencyMismatchError: If $other is money in another currency.
            RoundingRequiredError: If the exact difference does not fit the scale and
                $rounding_mode is UNNECESSARY.
        """
        return self._retain(self._money.minus(other), rounding_mode)

    def plus_major(self, amount_major: int) -> Self:
        return self._retain(self._money.plus_major(amount_major), RoundingMode.UNNECESSARY)

    def minus_major(self, amount_major: int) -> Self:
        return self._retain(self._money.minus_major(amount_major), RoundingMode.UNNECESSARY)

    def plus_minor(self, amount_minor: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Self:
        return self._retain(self._money.plus_minor(amount_minor), rounding_mode)

    def minus_minor(self, amount_minor: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Self:
        return self._retain(self._money.minus_minor(amount_minor), rounding_mode)

    def multiplied_by(self, multiplier: AmountLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Self:
        """Multiply and bring the product back to the policy's scale.

        An int multiplier never needs rounding.

        Raises:
            RoundingRequiredError: If the product does not fit the scale and $rounding_mode is
                UNNECESSARY.
        """
        return self._retain(self._money.multiplied_by(multiplier), rounding_mode)

    def divided_by(self, divisor: AmountLike, rounding_mode: RoundingMode) -> Self:
        """Divide, expressing the quotient at the current scale.

        Raises:
            DivisionByZeroError: If $divisor is zero.
            RoundingRequiredError: If the quotient is inexact and $rounding_mode is UNNECESSARY.
        """
        return self._retain(self._money.divided_by(divisor, rounding_mode), rounding_mode)

    def negated(self) -> Self:
        return self._with(self._money.negated())

    def abs(self) -> Self:
        return self._with(self._money.abs())

    def converted_to(
        self,
        currency: CurrencyUnit | str,
        multiplier: AmountLike,
        rounding_mode: RoundingMode = RoundingMode.UNNECESSARY,
    ) -> Self:
        """Convert to another currency and bring the result to the policy's scale.

        `Money.of("USD", "10.00").converted_to("EUR", "0.92", RoundingMode.DOWN)` is `EUR 9.20`.

        Raises:
            CurrencyMismatchError: If $currency is the current currency and $multiplier is not 1.
            NegativeRateError: If $multiplier is negative.
            RoundingRequiredError: If the result does not fit the scale and $rounding_mode is
                UNNECESSARY.
        """
        return self._retain(self._money.converted_to(currency, multiplier), rounding_mode)

    # endregion

    # region Comparison

    def is_same_currency(self, other: BigMoneyProvider) -> bool:
        return self._money.is_same_currency(other)

    def compare_to(self, other: BigMoneyProvider) -> int:
        """Numeric three-way comparison ignoring scale (-1, 0 or 1).

        Raises:
            CurrencyMismatchError: If $other is in another currency.
        """
        return self._money.compare_to(other)

    def is_equal(self, other: BigMoneyProvider) -> bool:
        return self._money.is_equal(other)

    def is_greater_than(self, other: BigMoneyProvider) -> bool:
        return self._money.is_greater_than(other)

    def is_greater_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self._money.is_greater_than_or_equal(other)

    def is_less_than(self, other: BigMoneyProvider) -> bool:
        return self._money.is_less_than(other)

    def is_less_than_or_equal(self, other: BigMoneyProvider) -> bool:
        return self._money.is_less_than_or_equal(other)

    # endregion

    # region Conversion

    def to_big_money(self) -> BigMoney:
        return self._money

    def __str__(self) -> str:
        """Return canonical text like 'USD 25.95'."""
        return str(self._money)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._money}')"

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        """Structural equality: same class, policy, currency, scale and unscaled amount."""
        if type(other) is not type(self):
            return False
        return self._money == other._money and self._policy == other._policy

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._money, self._policy))

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
        """Add money in the same currency or a bare amount, without rounding."""
        if not is_money_operand(other):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if not is_money_operand(other):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other):
        """Multiply by a number, without rounding."""
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

    def _with(self, money: BigMoney) -> Self:
        if money == self._money:
            return self
        return type(self)(money, self._policy)

    def _retain(self, money: BigMoney, rounding_mode: RoundingMode) -> Self:
        return self._with(self._policy.retain(money, rounding_mode))

    # endregion
