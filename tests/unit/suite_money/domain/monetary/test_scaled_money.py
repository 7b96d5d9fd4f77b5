import pytest

from suite_money.domain.monetary.big_money import BigMoney
from suite_money.domain.monetary.scale_policy import (
    CURRENCY_SCALE,
    UNCONSTRAINED_SCALE,
    CurrencyScale,
    FixedScale,
    UnconstrainedScale,
)
from suite_money.domain.monetary.scaled_money import ScaledMoney
from suite_money.domain.rounding import RoundingMode
from suite_money.errors import InvalidScaleError, RoundingRequiredError, UnsupportedCurrencyError


def test_unconstrained_policy_keeps_exact_scale():
    money = ScaledMoney(BigMoney.parse("USD 1.5"), UNCONSTRAINED_SCALE)

    result = money.plus(BigMoney.parse("USD 0.001")).multiplied_by("1.1")

    assert str(result) == "USD 1.6511"
    assert type(result) is ScaledMoney
    assert result.scale_policy == UnconstrainedScale()


def test_currency_policy():
    assert CURRENCY_SCALE.accepts(BigMoney.parse("USD 1.00"))
    assert not CURRENCY_SCALE.accepts(BigMoney.parse("USD 1.0"))
    assert CURRENCY_SCALE == CurrencyScale()

    retained = CURRENCY_SCALE.retain(BigMoney.parse("JPY 2.5"), RoundingMode.HALF_UP)
    assert str(retained) == "JPY 3"

    with pytest.raises(UnsupportedCurrencyError):
        CURRENCY_SCALE.accepts(BigMoney.parse("XAU 1"))


def test_fixed_policy():
    policy = FixedScale(3)

    assert policy.accepts(BigMoney.parse("USD 1.000"))
    assert not policy.accepts(BigMoney.parse("USD 1.00"))
    assert str(policy.retain(BigMoney.parse("USD 1.23456"), RoundingMode.FLOOR)) == "USD 1.234"

    with pytest.raises(RoundingRequiredError):
        policy.retain(BigMoney.parse("USD 1.23456"), RoundingMode.UNNECESSARY)


@pytest.mark.parametrize("scale", [-1, 1.5, True, "2"])
def test_fixed_policy_rejects_invalid_scale(scale):
    with pytest.raises(InvalidScaleError):
        FixedScale(scale)


def test_policy_is_checked_on_construction():
    with pytest.raises(InvalidScaleError):
        ScaledMoney(BigMoney.parse("USD 1.5"), FixedScale(2))
    with pytest.raises(TypeError):
        ScaledMoney("USD 1.50", FixedScale(2))


def test_operations_route_through_big_money():
    money = ScaledMoney(BigMoney.parse("USD 10.00"), FixedScale(2))

    assert money.to_big_money() == BigMoney.parse("USD 10.00")
    assert str(money.divided_by(4, RoundingMode.HALF_EVEN)) == "USD 2.50"
    assert str(money.negated()) == "USD -10.00"
    assert money.abs() is money
    assert money.is_positive()
    assert money.amount_major_int == 10
