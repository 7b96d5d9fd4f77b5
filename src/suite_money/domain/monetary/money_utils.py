"""Helpers combining money values that may be None.

All functions accept any money representation (`BigMoney`, `Money`, `FixedMoney`,
`MinorUnitMoney`); the result has the type of the operands.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from suite_money.domain.currency.currency_unit import CurrencyUnit
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.protocol import BigMoneyProvider

M = TypeVar("M", bound=BigMoneyProvider)


def is_zero(money: BigMoneyProvider | None) -> bool:
    """Check whether $money is None or zero."""
    return money is None or money.to_big_money().is_zero()


def default_to_zero(
    money: M | None,
    currency: CurrencyUnit | str,
    zero: Callable[[CurrencyUnit | str], M] = Money.zero,
) -> M:
    """Return $money, or the zero made by $zero for $currency if it is None.

    The default factory is `Money.zero`. Pass `BigMoney.zero`, `MinorUnitMoney.zero` or a
    `FixedMoney` factory to get a zero of the representation in use;
    `default_to_zero(None, "XAU", BigMoney.zero)` works for a pseudo-currency too.

    Raises:
        UnsupportedCurrencyError: If $money is None and $zero needs a minor-unit scale
            $currency does not have (the default `Money.zero` on a pseudo-currency).
    """
    if money is None:
        return zero(currency)
    return money


def max_money(money1: M | None, money2: M | None) -> M | None:
    """Return the larger of both values; None operands are ignored.

    Raises:
        CurrencyMismatchError: If both are present and the currencies differ.
    """
    if money1 is None:
        return money2
    if money2 is None:
        return money1
    return money1 if money1.to_big_money().compare_to(money2) >= 0 else money2


def min_money(money1: M | None, money2: M | None) -> M | None:
    """Return the smaller of both values; None operands are ignored.

    Raises:
        CurrencyMismatchError: If both are present and the currencies differ.
    """
    if money1 is None:
        return money2
    if money2 is None:
        return money1
    return money1 if money1.to_big_money().compare_to(money2) <= 0 else money2


def add(money1: M | None, money2: M | None) -> M | None:
    """Add both values, treating None as zero; None if both are None.

    Raises:
        CurrencyMismatchError: If both are present and the currencies differ.
    """
    if money1 is None:
        return money2
    if money2 is None:
        return money1
    return money1.plus(money2)


def subtract(money1: M | None, money2: M | None) -> M | None:
    """Subtract $money2 from $money1, treating None as zero; None if both are None.

    Raises:
        CurrencyMismatchError: If both are present and the currencies differ.
    """
    if money2 is None:
        return money1
    if money1 is None:
        return money2.negated()
    return money1.minus(money2)
