from decimal import Decimal

import pytest

from suite_money.domain.decimal_value import DecimalValue
from suite_money.domain.monetary.big_money import BigMoney
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.scale_policy import CURRENCY_SCALE, FixedScale
from suite_money.domain.rounding import RoundingMode
from suite_money.errors import (
    CurrencyMismatchError,
    InvalidScaleError,
    RoundingRequiredError,
    ScaleOutOfRangeError,
    UnsupportedCurrencyError,
)

USD_25_95 = Money.parse("USD 25.95")
USD_10_00 = Money.parse("USD 10.00")


def test_sum_needing_rounding_fails_unless_mode_given():
    with pytest.raises(RoundingRequiredError):
        USD_25_95.plus(BigMoney.parse("USD 3.001"))

    assert str(USD_25_95.plus(BigMoney.parse("USD 3.001"), RoundingMode.HALF_UP)) == "USD 28.95"


def test_of_minor_equals_of():
    assert Money.of_minor("USD", 2595) == Money.of("USD", "25.95")


def test_jpy_multiplied_by_int():
    assert str(Money.of("JPY", 2).multiplied_by(3)) == "JPY 6"


def test_converted_to_rounds_to_target_currency_scale():
    assert str(USD_10_00.converted_to("EUR", "0.92", RoundingMode.DOWN)) == "EUR 9.20"
    assert str(USD_10_00.converted_to("JPY", "150.5")) == "JPY 1505"

    with pytest.raises(RoundingRequiredError):
        USD_10_00.converted_to("EUR", "0.9237")
    assert str(USD_10_00.converted_to("EUR", "0.9237", RoundingMode.DOWN)) == "EUR 9.23"


def test_of_adjusts_amount_to_currency_scale():
    assert str(Money.of("USD", "25.9")) == "USD 25.90"
    assert str(Money.of("USD", 25)) == "USD 25.00"
    assert str(Money.of("BHD", "1.25")) == "BHD 1.250"
    assert str(Money.of("USD", "25.951", RoundingMode.HALF_UP)) == "USD 25.95"

    with pytest.raises(RoundingRequiredError):
        Money.of("USD", "25.951")


def test_of_huge_exponent_fails_fast():
    with pytest.raises(ScaleOutOfRangeError):
        Money.of("USD", Decimal("1E+1000000000"))
    with pytest.raises(ScaleOutOfRangeError):
        USD_25_95.rounded(-(10**9), RoundingMode.HALF_UP)


def test_other_factories():
    assert str(Money.of_major("USD", 25)) == "USD 25.00"
    assert str(Money.zero("BHD")) == "BHD 0.000"
    assert str(Money.zero("JPY")) == "JPY 0"
    assert str(Money.from_money(BigMoney.parse("USD 1.234"), RoundingMode.HALF_UP)) == "USD 1.23"
    assert Money.from_money(USD_25_95) is USD_25_95

    with pytest.raises(RoundingRequiredError):
        Money.from_money(BigMoney.parse("USD 1.234"))


def test_pseudo_currency_is_not_supported():
    with pytest.raises(UnsupportedCurrencyError):
        Money.of("XAU", 1)
    with pytest.raises(UnsupportedCurrencyError):
        Money.zero("XAU")


def test_constructor_checks_scale_and_policy():
    assert Money(BigMoney.parse("USD 1.20")).scale_policy == CURRENCY_SCALE

    with pytest.raises(InvalidScaleError):
        Money(BigMoney.parse("USD 1.234"))
    with pytest.raises(TypeError):
        Money(BigMoney.parse("USD 1.23"), FixedScale(2))


@pytest.mark.parametrize("text", ["USD 25.95", "USD -0.05", "JPY -3", "BHD 1.250", "EUR 0.00"])
def test_parse_of_str_gives_back_value(text):
    money = Money.parse(text)
    assert Money.parse(str(money)) == money


def test_parse_pads_to_currency_scale():
    assert str(Money.parse("USD 25.9")) == "USD 25.90"

    with pytest.raises(RoundingRequiredError):
        Money.parse("USD 25.951")


def test_arithmetic_keeps_currency_scale():
    assert str(USD_25_95.plus(Money.parse("USD 1.05"))) == "USD 27.00"
    assert str(USD_25_95.minus("0.95")) == "USD 25.00"
    assert str(USD_25_95.plus_major(1)) == "USD 26.95"
    assert str(USD_25_95.minus_minor(5)) == "USD 25.90"
    assert str(USD_25_95.multiplied_by(Decimal("1.5"), RoundingMode.HALF_EVEN)) == "USD 38.92"
    assert str(USD_10_00.divided_by(3, RoundingMode.HALF_EVEN)) == "USD 3.33"
    assert isinstance(USD_10_00.divided_by(3, RoundingMode.HALF_EVEN), Money)

    with pytest.raises(RoundingRequiredError):
        USD_25_95.multiplied_by(Decimal("1.5"))


@pytest.mark.parametrize(
    "rounding_mode",
    [RoundingMode.HALF_UP, RoundingMode.HALF_EVEN, RoundingMode.UP, RoundingMode.DOWN, RoundingMode.CEILING, RoundingMode.FLOOR],
)
@pytest.mark.parametrize("factor", [3, 7, "0.3"])
@pytest.mark.parametrize("text", ["USD 10.00", "USD -7.31", "JPY 1000"])
def test_divided_then_multiplied_stays_close_to_original(text, factor, rounding_mode):
    money = Money.parse(text)

    result = money.divided_by(factor, rounding_mode).multiplied_by(factor, rounding_mode)

    # Factor units from the quotient, plus one unit from rounding the product back to currency scale
    unit = DecimalValue(1, money.scale)
    bound = unit.multiply(DecimalValue.of(factor)).add(unit)
    assert isinstance(result, Money)
    assert result.minus(money).abs().amount.compare_to(bound) <= 0


def test_no_op_returns_self():
    assert USD_25_95.plus(0) is USD_25_95
    assert USD_25_95.multiplied_by(1) is USD_25_95
    assert USD_25_95.rounded(2, RoundingMode.HALF_UP) is USD_25_95


def test_rounded():
    assert str(Money.parse("USD 2.35").rounded(1, RoundingMode.HALF_UP)) == "USD 2.40"
    assert str(Money.parse("USD 2.35").rounded(0, RoundingMode.DOWN)) == "USD 2.00"


def test_with_currency_unit():
    assert str(USD_25_95.with_currency_unit("EUR")) == "EUR 25.95"
    assert str(USD_25_95.with_currency_unit("JPY", RoundingMode.DOWN)) == "JPY 25"
    assert str(USD_25_95.with_currency_unit("BHD")) == "BHD 25.950"

    with pytest.raises(RoundingRequiredError):
        USD_25_95.with_currency_unit("JPY")


def test_with_amount():
    assert str(USD_25_95.with_amount("3.5")) == "USD 3.50"
    assert str(USD_25_95.with_amount("3.555", RoundingMode.HALF_UP)) == "USD 3.56"


def test_amount_parts():
    money = Money.parse("USD -2.35")

    assert money.amount_major_int == -2
    assert money.amount_minor_int == -235
    assert money.minor_part == -35
    assert money.scale == 2


def test_equality_is_per_representation():
    big = BigMoney.parse("USD 25.95")

    assert USD_25_95 != big
    assert USD_25_95.is_equal(big)
    assert USD_25_95.to_big_money() == big
    assert len({USD_25_95, Money.of_minor("USD", 2595)}) == 1


def test_comparison():
    assert USD_10_00 < USD_25_95
    assert USD_25_95.compare_to(BigMoney.parse("USD 25.950")) == 0
    assert sorted([USD_25_95, USD_10_00]) == [USD_10_00, USD_25_95]

    with pytest.raises(CurrencyMismatchError):
        USD_25_95.compare_to(Money.parse("EUR 1.00"))
    with pytest.raises(CurrencyMismatchError):
        USD_25_95 < Money.parse("EUR 1.00")


def test_operators():
    assert USD_25_95 + USD_10_00 == Money.parse("USD 35.95")
    assert USD_25_95 - USD_10_00 == Money.parse("USD 15.95")
    assert -USD_10_00 == Money.parse("USD -10.00")
    assert abs(-USD_10_00) == USD_10_00
    assert USD_10_00 * 3 == Money.parse("USD 30.00")
    assert sum([USD_25_95, USD_10_00]) == Money.parse("USD 35.95")

    with pytest.raises(RoundingRequiredError):
        USD_10_00 * Decimal("0.3333")


def test_str_and_repr():
    assert str(USD_25_95) == "USD 25.95"
    assert repr(USD_25_95) == "Money('USD 25.95')"
