from __future__ import annotations

from suite_money.domain.currency.currency_unit import CurrencyUnit, to_currency_unit
from suite_money.domain.decimal_value import AmountLike, DecimalValue
from suite_money.domain.monetary.big_money import BigMoney, as_big_money
from suite_money.domain.monetary.protocol import BigMoneyProvider
from suite_money.domain.monetary.scale_policy import CURRENCY_SCALE, CurrencyScale, ScalePolicy
from suite_money.domain.monetary.scaled_money import ScaledMoney
from suite_money.domain.monetary.text_form import parse_money_text
from suite_money.domain.rounding import RoundingMode


class Money(ScaledMoney):
    """Money at the standard scale of its currency (`USD 25.95`, `JPY 3`, `BHD 1.250`).

    The scale always equals the currency's decimal places. Results of arithmetic are rounded back
    to that scale with the `RoundingMode` passed to the operation, by default UNNECESSARY.
    Pseudo-currencies such as gold ("XAU") have no standard scale and cannot be used.

    Example:
        >>> price = Money.of("USD", "25.95")
        >>> str(price.multiplied_by(3))
        'USD 77.85'
    """

    __slots__ = ()

    def __init__(self, money: BigMoney, policy: ScalePolicy = CURRENCY_SCALE) -> None:
        """Wrap $money, which must already be at the scale of its currency.

        Raises:
            TypeError: If $policy is not a CurrencyScale.
            InvalidScaleError: If the scale of $money is not the currency's scale.
            UnsupportedCurrencyError: If the currency is a pseudo-currency.
        """
        if not isinstance(policy, CurrencyScale):
            raise TypeError(f"$policy of `Money` must be a CurrencyScale, but provided value is: {policy!r}")
        super().__init__(money, policy)

    # region Factories

    @classmethod
    def of(cls, currency: CurrencyUnit | str, amount: AmountLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Money:
        """Create Money, adjusting $amount to the currency's scale.

        `Money.of("USD", "25.9")` is `USD 25.90`; `Money.of("USD", "25.951")` needs a rounding mode.

        Raises:
            RoundingRequiredError: If $amount has more decimal places than the currency and
                $rounding_mode is UNNECESSARY.
            UnsupportedCurrencyError: If $currency is a pseudo-currency.
        """
        return cls(BigMoney.of_currency_scale(currency, amount, rounding_mode))

    @classmethod
    def of_major(cls, currency: CurrencyUnit | str, amount_major: int) -> Money:
        """Create Money from whole major units (`Money.of_major("USD", 25)` is `USD 25.00`)."""
        return cls(BigMoney.of_major(currency, amount_major).with_currency_scale())

    @classmethod
    def of_minor(cls, currency: CurrencyUnit | str, amount_minor: int) -> Money:
        """Create Money from minor units (`Money.of_minor("USD", 2595)` is `USD 25.95`)."""
        return cls(BigMoney.of_minor(currency, amount_minor))

    @classmethod
    def zero(cls, currency: CurrencyUnit | str) -> Money:
        """Create a zero amount at the currency's scale."""
        currency = to_currency_unit(currency)
        return cls(BigMoney(currency, DecimalValue(0, currency.require_minor_unit_scale())))

    @classmethod
    def from_money(cls, money: BigMoneyProvider, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> Money:
        """Convert any money representation, rounding to the currency's scale with $rounding_mode."""
        if isinstance(money, Money):
            return money
        return cls(as_big_money(money, "from_money").with_currency_scale(rounding_mode))

    @classmethod
    def parse(cls, text: str) -> Money:
        """Parse the canonical text form ("USD 25.95").

        Fewer decimal places than the currency are padded ("USD 25.9" is `USD 25.90`); more
        decimal places fail.

        Raises:
            MalformedInputError: If $text is not canonical money text.
            UnknownCurrencyError: If the currency code is not registered.
            RoundingRequiredError: If the amount has more decimal places than the currency.
        """
        currency, amount = parse_money_text(text)
        return cls.of(currency, amount)

    # endregion
