from __future__ import annotations

from suite_money.domain.currency.currency_unit import CurrencyUnit, to_currency_unit
from suite_money.domain.decimal_value import AmountLike, DecimalValue
from suite_money.domain.monetary.big_money import BigMoney, as_big_money, is_money_operand
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.protocol import BigMoneyProvider
from suite_money.domain.monetary.text_form import parse_money_text
from suite_money.domain.rounding import RoundingMode
from suite_money.errors import CurrencyMismatchError, MoneyOverflowError
from suite_money.utils.numeric_tools import require_int

# Range of a signed 64-bit integer
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


def _checked(amount_minor: int, operation: str) -> int:
    # Raise: amount must fit a signed 64-bit integer
    if not LONG_MIN <= amount_minor <= LONG_MAX:
        raise MoneyOverflowError(f"Cannot call `{operation}` because the result ({amount_minor} minor units) is outside the 64-bit range [{LONG_MIN}, {LONG_MAX}]")
    return amount_minor


class MinorUnitMoney:
    """Money stored as a single count of minor units, bounded to the signed 64-bit range.

    `USD 25.95` is stored as 2595 cents. The scale is always the currency's decimal places, so
    pseudo-currencies are not supported. This is the compact form for storage and interchange
    with systems that keep amounts in 64-bit integers; every result is computed exactly and then
    checked, and one that leaves the 64-bit range raises `MoneyOverflowError` instead of
    wrapping around.
    """

    __slots__ = ("_currency", "_amount_minor")

    def __init__(self, currency: CurrencyUnit, amount_minor: int) -> None:
        """Initialize MinorUnitMoney from a currency and a count of minor units.

        Raises:
            TypeError: If $currency is not a CurrencyUnit or $amount_minor is not an int.
            UnsupportedCurrencyError: If $currency is a pseudo-currency.
            MoneyOverflowError: If $amount_minor is outside the 64-bit range.
        """
        if not isinstance(currency, CurrencyUnit):
            raise TypeError(f"$currency must be a CurrencyUnit, but provided value is: {currency!r}")
        require_int(amount_minor, "amount_minor")
        currency.require_minor_unit_scale()

        self._currency = currency
        self._amount_minor = _checked(amount_minor, "MinorUnitMoney")

    # region Factories

    @classmethod
    def of(cls, currency: CurrencyUnit | str, amount: AmountLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> MinorUnitMoney:
        """Create MinorUnitMoney from an amount in major units (`of("USD", "25.95")` is 2595 cents).

        Raises:
            RoundingRequiredError: If $amount has more decimal places than the currency and
                $rounding_mode is UNNECESSARY.
            MoneyOverflowError: If the amount does not fit 64 bits.
        """
        currency = to_currency_unit(currency)
        scale = currency.require_minor_unit_scale()
        return cls(currency, DecimalValue.of(amount).set_scale(scale, rounding_mode).unscaled)

    @classmethod
    def of_major(cls, currency: CurrencyUnit | str, amount_major: int) -> MinorUnitMoney:
        require_int(amount_major, "amount_major")
        currency = to_currency_unit(currency)
        return cls(currency, _checked(amount_major * 10 ** currency.require_minor_unit_scale(), "of_major"))

    @classmethod
    def of_minor(cls, currency: CurrencyUnit | str, amount_minor: int) -> MinorUnitMoney:
        return cls(to_currency_unit(currency), amount_minor)

    @classmethod
    def zero(cls, currency: CurrencyUnit | str) -> MinorUnitMoney:
        return cls(to_currency_unit(currency), 0)

    @classmethod
    def from_money(cls, money: BigMoneyProvider, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> MinorUnitMoney:
        """Convert any money representation, rounding to the currency's scale with $rounding_mode."""
        if isinstance(money, MinorUnitMoney):
            return money
        big = as_big_money(money, "from_money")
        return cls.of(big.currency_unit, big.amount, rounding_mode)

    @classmethod
    def parse(cls, text: str) -> MinorUnitMoney:
        """Parse the canonical text form ("USD 25.95").

        Raises:
            MalformedInputError: If $text is not canonical money text.
            RoundingRequiredError: If the amount has more decimal places than the currency.
            MoneyOverflowError: If the amount does not fit 64 bits.
        """
        currency, amount = parse_money_text(text)
        return cls.of(currency, amount)

    # endregion

    # region Properties

    @property
    def currency_unit(self) -> CurrencyUnit:
        return self._currency

    @property
    def amount_minor(self) -> int:
        """Get the amount as a count of minor units."""
        return self._amount_minor

    @property
    def scale(self) -> int:
        return self._currency.decimal_places

    @property
    def amount(self) -> DecimalValue:
        """Get the amount in major units at the currency's scale."""
        return DecimalValue(self._amount_minor, self.scale)

    @property
    def amount_major(self) -> int:
        """Get the whole major units, truncated toward zero (`USD -2.35` → -2)."""
        major, _ = self._split()
        return major

    @property
    def minor_part(self) -> int:
        """Get the minor units beyond the whole major units (`USD -2.35` → -35)."""
        _, minor = self._split()
        return minor

    def is_zero(self) -> bool:
        return self._amount_minor == 0

    def is_positive(self) -> bool:
        return self._amount_minor > 0

    def is_positive_or_zero(self) -> bool:
        return self._amount_minor >= 0

    def is_negative(self) -> bool:
        return self._amount_minor < 0

    def is_negative_or_zero(self) -> bool:
        return self._amount_minor <= 0

    # endregion

    # region Arithmetic

    def plus(self, other: BigMoneyProvider) -> MinorUnitMoney:
        """Add money in the same currency.

        Raises:
            CurrencyMismatchError: If $other is in another currency.
            RoundingRequiredError: If $other has more decimal places than the currency.
            MoneyOverflowError: If the sum does not fit 64 bits.
        """
        return self._with(self._amount_minor + self._minor_units_of(other, "plus"), "plus")

    def minus(self, other: BigMoneyProvider) -> MinorUnitMoney:
        """Subtract money in the same currency.

        Raises:
            CurrencyMismatchError: If $other is in another currency.
            RoundingRequiredError: If $other has more decimal places than the currency.
            MoneyOverflowError: If the difference does not fit 64 bits.
        """
        return self._with(self._amount_minor - self._minor_units_of(other, "minus"), "minus")

    def plus_major(self, amount_major: int) -> MinorUnitMoney:
        require_int(amount_major, "amount_major")
        return self._with(self._amount_minor + amount_major * 10**self.scale, "plus_major")

    def minus_major(self, amount_major: int) -> MinorUnitMoney:
        require_int(amount_major, "amount_major")
        return self._with(self._amount_minor - amount_major * 10**self.scale, "minus_major")

    def plus_minor(self, amount_minor: int) -> MinorUnitMoney:
        require_int(amount_minor, "amount_minor")
        return self._with(self._amount_minor + amount_minor, "plus_minor")

    def minus_minor(self, amount_minor: int) -> MinorUnitMoney:
        require_int(amount_minor, "amount_minor")
        return self._with(self._amount_minor - amount_minor, "minus_minor")

    def multiplied_by(self, multiplier: AmountLike, rounding_mode: RoundingMode = RoundingMode.UNNECESSARY) -> MinorUnitMoney:
        """Multiply; an int multiplier is exact, a decimal one is rounded with $rounding_mode.

        Raises:
            RoundingRequiredError: If the product has more decimal places than the currency and
                $rounding_mode is UNNECESSARY.
            MoneyOverflowError: If the product does not fit 64 bits.
        """
        if isinstance(multiplier, int) and not isinstance(multiplier, bool):
            return self._with(self._amount_minor * multiplier, "multiplied_by")

        product = self.amount.multiply(DecimalValue.of(multiplier)).set_scale(self.scale, rounding_mode)
        return self._with(product.unscaled, "multiplied_by")

    def divided_by(self, divisor: AmountLike, rounding_mode: RoundingMode | None = None) -> MinorUnitMoney:
        """Divide, keeping the currency's scale.

        Without $rounding_mode the quotient is truncated toward zero.

        Raises:
            DivisionByZeroError: If $divisor is zero.
            RoundingRequiredError: If the quotient is inexact and $rounding_mode is UNNECESSARY.
            MoneyOverflowError: If the quotient does not fit 64 bits.
        """
        if rounding_mode is None:
            rounding_mode = RoundingMode.DOWN
        quotient = self.amount.divide(DecimalValue.of(divisor), self.scale, rounding_mode)
        return self._with(quotient.unscaled, "divided_by")

    def negated(self) -> MinorUnitMoney:
        return self._with(-self._amount_minor, "negated")

    def abs(self) -> MinorUnitMoney:
        return self if self._amount_minor >= 0 else self.negated()

    # endregion

    # region Comparison

    def is_same_currency(self, other: BigMoneyProvider) -> bool:
        return self._currency == as_big_money(other, "is_same_currency").currency_unit

    def compare_to(self, other: BigMoneyProvider) -> int:
        """Numeric three-way comparison (-1, 0 or 1).

        Raises:
            CurrencyMismatchError: If $other is in another currency.
        """
        if isinstance(other, MinorUnitMoney):
            self._check_currency(other._currency, "compare_to")
            return (self._amount_minor > other._amount_minor) - (self._amount_minor < other._amount_minor)
        return self.to_big_money().compare_to(other)

    def is_equal(self, other: BigMoneyProvider) -> bool:
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
        return BigMoney(self._currency, self.amount)

    def to_money(self) -> Money:
        return Money(self.to_big_money())

    def __str__(self) -> str:
        """Return canonical text like 'USD 25.95' or 'USD -0.05'."""
        sign = "-" if self._amount_minor < 0 else ""
        factor = 10**self.scale
        major, minor = divmod(abs(self._amount_minor), factor)
        if self.scale == 0:
            return f"{self._currency.code} {sign}{major}"
        return f"{self._currency.code} {sign}{major}.{minor:0{self.scale}d}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        if not isinstance(other, MinorUnitMoney):
            return False
        return self._currency == other._currency and self._amount_minor == other._amount_minor

    def __hash__(self) -> int:
        return hash((self._currency, self._amount_minor))

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
        """Add money in the same currency."""
        if not isinstance(other, BigMoneyProvider):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other):
        # sum() starts from the int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return self.__add__(other)

    def __sub__(self, other):
        if not isinstance(other, BigMoneyProvider):
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

    def _with(self, amount_minor: int, operation: str) -> MinorUnitMoney:
        if amount_minor == self._amount_minor:
            return self
        return MinorUnitMoney(self._currency, _checked(amount_minor, operation))

    def _split(self) -> tuple[int, int]:
        """Split into (major, minor), both carrying the sign of the amount."""
        major, minor = divmod(abs(self._amount_minor), 10**self.scale)
        if self._amount_minor < 0:
            return -major, -minor
        return major, minor

    def _check_currency(self, currency: CurrencyUnit, method_name: str) -> None:
        # Raise: amounts in different currencies are never combined
        if currency != self._currency:
            raise CurrencyMismatchError(f"Cannot call `{method_name}` because currencies differ: {self._currency} and {currency}")

    def _minor_units_of(self, other: BigMoneyProvider, method_name: str) -> int:
        if isinstance(other, MinorUnitMoney):
            self._check_currency(other._currency, method_name)
            return other._amount_minor

        big = as_big_money(other, method_name)
        self._check_currency(big.currency_unit, method_name)
        return big.amount.set_scale(self.scale, RoundingMode.UNNECESSARY).unscaled

    # endregion
