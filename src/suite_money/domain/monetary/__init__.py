"""Monetary domain package.

This package contains the money representations: `BigMoney` with an unrestricted scale,
`Money` at the currency's scale, `FixedMoney` at a caller-chosen scale and the compact
`MinorUnitMoney`, all sharing one exact decimal model and explicit rounding.
"""

from suite_money.domain.monetary.big_money import BigMoney
from suite_money.domain.monetary.fixed_money import FixedMoney
from suite_money.domain.monetary.minor_unit_money import MinorUnitMoney
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.protocol import BigMoneyProvider
from suite_money.domain.monetary.scale_policy import CurrencyScale, FixedScale, ScalePolicy, UnconstrainedScale
from suite_money.domain.monetary.scaled_money import ScaledMoney

__all__ = [
    "BigMoney",
    "BigMoneyProvider",
    "CurrencyScale",
    "FixedMoney",
    "FixedScale",
    "MinorUnitMoney",
    "Money",
    "ScalePolicy",
    "ScaledMoney",
    "UnconstrainedScale",
]
