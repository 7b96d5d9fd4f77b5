import pytest

from suite_money.domain.monetary.big_money import BigMoney
from suite_money.domain.monetary.minor_unit_money import LONG_MAX, LONG_MIN, MinorUnitMoney
from suite_money.domain.monetary.money import Money
from suite_money.domain.rounding import RoundingMode
from suite_money.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    MoneyOverflowError,
    RoundingRequiredError,
    UnsupportedCurrencyError,
)

USD_25_95 = MinorUnitMoney.parse("USD 25.95")
USD_10_00 = MinorUnitMoney.of_minor("USD", 1000)


def test_stored_as_minor_units():
    assert USD_25_95.amount_minor == 2595
    assert USD_25_95.scale == 2
    assert MinorUnitMoney.of("USD", "25.95") == USD_25_95
    assert MinorUnitMoney.of_major("JPY", 7).amount_minor == 7
    assert MinorUnitMoney.of_major("BHD", 7).amount_minor == 7000
    assert MinorUnitMoney.zero("USD").is_zero()


def test_overflow_at_upper_bound():
    largest = MinorUnitMoney.of_minor("USD", LONG_MAX)

    with pytest.raises(MoneyOverflowError):
        largest.plus_minor(1)
    with pytest.raises(MoneyOverflowError):
        largest.plus(MinorUnitMoney.of_minor("USD", 1))
    with pytest.raises(MoneyOverflowError):
        largest.multiplied_by(2)
    with pytest.raises(MoneyOverflowError):
        MinorUnitMoney.of_minor("USD", LONG_MAX + 1)
    with pytest.raises(MoneyOverflowError):
        MinorUnitMoney.of_major("USD", LONG_MAX // 10)


def test_overflow_at_lower_bound():
    smallest = MinorUnitMoney.of_minor("USD", LONG_MIN)

    with pytest.raises(MoneyOverflowError):
        smallest.minus_minor(1)
    with pytest.raises(MoneyOverflowError):
        smallest.negated()
    with pytest.raises(MoneyOverflowError):
        smallest.abs()
    with pytest.raises(MoneyOverflowError):
        smallest.divided_by(-1)


def test_of_needs_rounding_mode_for_extra_digits():
    with pytest.raises(RoundingRequiredError):
        MinorUnitMoney.of("USD", "1.234")
    assert MinorUnitMoney.of("USD", "1.235", RoundingMode.HALF_UP).amount_minor == 124


def test_pseudo_currency_is_not_supported():
    with pytest.raises(UnsupportedCurrencyError):
        MinorUnitMoney.of_minor("XAU", 1)


@pytest.mark.parametrize(
    "currency, amount_minor, text",
    [
        ("USD", 2595, "USD 25.95"),
        ("USD", -2595, "USD -25.95"),
        ("USD", -5, "USD -0.05"),
        ("USD", 0, "USD 0.00"),
        ("JPY", -3, "JPY -3"),
        ("BHD", 1250, "BHD 1.250"),
    ],
)
def test_text_places_sign_once(currency, amount_minor, text):
    money = MinorUnitMoney.of_minor(currency, amount_minor)

    assert str(money) == text
    assert MinorUnitMoney.parse(text) == money


def test_plus_and_minus():
    assert str(USD_25_95.plus(USD_10_00)) == "USD 35.95"
    assert str(USD_25_95.minus(Money.parse("USD 0.95"))) == "USD 25.00"
    assert str(USD_25_95.plus_major(1)) == "USD 26.95"
    assert str(USD_25_95.minus_major(30)) == "USD -4.05"
    assert USD_25_95.plus_minor(0) is USD_25_95

    with pytest.raises(CurrencyMismatchError):
        USD_25_95.plus(MinorUnitMoney.of_minor("EUR", 1))
    with pytest.raises(RoundingRequiredError):
        USD_25_95.plus(BigMoney.parse("USD 0.001"))


def test_multiplied_by():
    assert str(USD_10_00.multiplied_by(3)) == "USD 30.00"
    assert str(USD_10_00.multiplied_by("1.5")) == "USD 15.00"
    assert str(USD_10_00.multiplied_by("0.3333", RoundingMode.HALF_UP)) == "USD 3.33"

    with pytest.raises(RoundingRequiredError):
        USD_10_00.multiplied_by("0.3333")


def test_divided_by_truncates_without_mode():
    assert str(USD_10_00.divided_by(3)) == "USD 3.33"
    assert str(USD_10_00.negated().divided_by(3)) == "USD -3.33"
    assert str(MinorUnitMoney.of_minor("USD", 2).divided_by(3)) == "USD 0.00"
    assert str(MinorUnitMoney.of_minor("USD", 2).divided_by(3, RoundingMode.HALF_UP)) == "USD 0.01"

    with pytest.raises(RoundingRequiredError):
        USD_10_00.divided_by(3, RoundingMode.UNNECESSARY)
    with pytest.raises(DivisionByZeroError):
        USD_10_00.divided_by(0)


def test_amount_parts():
    money = MinorUnitMoney.of_minor("USD", -235)

    assert money.amount_major == -2
    assert money.minor_part == -35
    assert str(money.amount) == "-2.35"


def test_conversions():
    assert USD_25_95.to_big_money() == BigMoney.parse("USD 25.95")
    assert USD_25_95.to_money() == Money.parse("USD 25.95")
    assert MinorUnitMoney.from_money(Money.parse("USD 25.95")) == USD_25_95
    assert MinorUnitMoney.from_money(BigMoney.parse("USD 1.234"), RoundingMode.HALF_UP).amount_minor == 123
    assert MinorUnitMoney.from_money(USD_25_95) is USD_25_95


def test_comparison():
    assert USD_10_00 < USD_25_95
    assert USD_25_95.compare_to(Money.parse("USD 25.95")) == 0
    assert USD_25_95.is_equal(BigMoney.parse("USD 25.950"))
    assert USD_25_95.is_greater_than(USD_10_00)
    assert sorted([USD_25_95, USD_10_00]) == [USD_10_00, USD_25_95]

    with pytest.raises(CurrencyMismatchError):
        USD_25_95.compare_to(MinorUnitMoney.of_minor("EUR", 1))


def test_operators():
    assert USD_25_95 + USD_10_00 == MinorUnitMoney.of_minor("USD", 3595)
    assert USD_25_95 - USD_10_00 == MinorUnitMoney.of_minor("USD", 1595)
    assert -USD_10_00 == MinorUnitMoney.of_minor("USD", -1000)
    assert abs(-USD_10_00) == USD_10_00
    assert 2 * USD_10_00 == MinorUnitMoney.of_minor("USD", 2000)
    assert len({USD_10_00, MinorUnitMoney.of("USD", 10)}) == 1


def test_builtin_sum():
    assert sum([USD_25_95, USD_10_00]) == MinorUnitMoney.of_minor("USD", 3595)
    assert sum([USD_10_00]) is USD_10_00

    with pytest.raises(CurrencyMismatchError):
        sum([USD_10_00, MinorUnitMoney.of_minor("EUR", 1)])
    with pytest.raises(TypeError):
        1 + USD_10_00


def test_repr():
    assert repr(USD_25_95) == "MinorUnitMoney('USD 25.95')"
