from __future__ import annotations

from suite_money.domain.currency.currency_unit import CurrencyUnit, to_currency_unit
from suite_money.domain.decimal_value import AmountLike, DecimalValue
from suite_money.domain.monetary.big_money import BigMoney, as_big_money
from suite_money.domain.monetary.protocol import BigMoneyProvider
from suite_money.domain.monetary.scale_policy import FixedScale, ScalePolicy
from suite_money.domain.monetary.scaled_money import ScaledMoney
from suite_money.domain.monetary.text_form import parse_money_text
from suite_money.domain.rounding import RoundingMode
from suite_money.errors import CurrencyMismatchError, InvalidScaleError
from suite_money.utils.numeric_tools import require_int


class FixedMoney(ScaledMoney):
    """Money at a scale chosen by the caller, independent of the currency.

    Useful for prices quoted with more (or fewer) decimals than the currency uses, for example
    fuel prices at 3 decimal places (`USD 1.239`). The scale is fixed when the value is created,
    stays the same through every operation including currency conversion, and is never negative.
    """

    __slots__ = ()

    def __init__(self, money: BigMoney, policy: ScalePolicy | None = None) -> None:
        """Wrap $money at its own scale, or at the scale of $policy.

        Raises:
            TypeError: If $policy is given and is not a FixedScale.
            InvalidScaleError: If the scale is negative or differs from $policy.
        """
        if policy is None:
            if not isinstance(money, BigMoney):
                raise TypeError(f"$money must be a BigMoney, but provided value is: {money!r}")
            policy = FixedScale(money.scale)
        if not isinstance(policy, FixedScale):
            raise TypeError(f"$policy of `FixedMoney` must be a FixedScale, but provided value is: {policy!r}")
        super().__init__(money, policy)

    # region Factories

    @classmethod
    def of(
        cls,
        currency: CurrencyUnit | str,
        amount: AmountLike,
        scale: int,
        rounding_mode: RoundingMode = RoundingMode.UNNECESSARY,
    ) -> FixedMoney:
        """Create FixedMoney with $amount adjusted to $scale.

        Raises:
            InvalidScaleError: If $scale is negative.
            RoundingRequiredError: If $amount has more decimal places than $scale and
                $rounding_mode is UNNECESSARY.
        """
        policy = FixedScale(scale)
        amount_value = DecimalValue.of(amount).set_scale(scale, rounding_mode)
        return cls(BigMoney(to_currency_unit(currency), amount_value), policy)

    @classmethod
    def of_scaled(cls, currency: CurrencyUnit | str, unscaled_amount: int, scale: int) -> FixedMoney:
        """Create FixedMoney from an unscaled integer (`of_scaled("USD", 1239, 3)` is `USD 1.239`)."""
        require_int(unscaled_amount, "unscaled_amount")
        policy = FixedScale(scale)
        return cls(BigMoney(to_currency_unit(currency), DecimalValue(unscaled_amount, scale)), policy)

    @classmethod
    def of_major(cls, currency: CurrencyUnit | str, amount_major: int, scale: int = 0) -> FixedMoney:
        """Create FixedMoney from whole major units at $scale."""
        require_int(amount_major, "amount_major")
        return cls.of(currency, amount_major, scale)

    @classmethod
    def zero(cls, currency: CurrencyUnit | str, scale: int = 0) -> FixedMoney:
        return cls.of(currency, 0, scale)

    @classmethod
    def from_money(
        cls,
        money: BigMoneyProvider,
        scale: int | None = None,
        rounding_mode: RoundingMode = RoundingMode.UNNECESSARY,
    ) -> FixedMoney:
        """Convert any money representation to FixedMoney.

        Without $scale the scale of $money is kept; a negative scale (`USD 1200` stored as
        12 x 10^2) is widened to 0, which is exact.

        Raises:
            InvalidScaleError: If $scale is negative.
            RoundingRequiredError: If narrowing to $scale needs rounding and $rounding_mode is
                UNNECESSARY.
        """
        big = as_big_money(money, "from_money")
        if scale is None:
            scale = max(big.scale, 0)
        policy = FixedScale(scale)
        return cls(big.with_scale(scale, rounding_mode), policy)

    @classmethod
    def parse(cls, text: str) -> FixedMoney:
        """Parse the canonical text form; the scale is the number of written decimal places.

        Raises:
            MalformedInputError: If $text is not canonical money text.
            UnknownCurrencyError: If the currency code is not registered.
        """
        currency, amount = parse_money_text(text)
        return cls(BigMoney(currency, amount))

    @classmethod
    def non_null(cls, money: FixedMoney | None, currency: CurrencyUnit | str, scale: int = 0) -> FixedMoney:
        """Return $money, or a zero in $currency at $scale if it is None.

        Raises:
            CurrencyMismatchError: If $money is in another currency.
            InvalidScaleError: If $money has another scale.
        """
        currency = to_currency_unit(currency)
        if money is None:
            return cls.zero(currency, scale)

        # Raise: a present value must match the expected currency and scale
        if money.currency_unit != currency:
            raise CurrencyMismatchError(f"Cannot call `non_null` because $money ({money}) is not in {currency}")
        if money.scale != scale:
            raise InvalidScaleError(f"Cannot call `non_null` because $money ({money}) does not have scale {scale}")
        return money

    # endregion

    @property
    def fixed_scale(self) -> int:
        return self._policy.scale

    def with_scale(self, scale: int, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> FixedMoney:
        """Return the value re-expressed at another fixed scale.

        Raises:
            InvalidScaleError: If $scale is negative.
            RoundingRequiredError: If narrowing needs rounding and $rounding_mode is UNNECESSARY.
        """
        policy = FixedScale(scale)
        if scale == self.scale:
            return self
        return type(self)(self._money.with_scale(scale, rounding_mode), policy)
