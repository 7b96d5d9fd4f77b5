__version__ = "0.0.1"

from suite_money.domain.currency.currency_unit import CurrencyUnit
from suite_money.domain.currency.currency_registry import CurrencyRegistry, get_default_registry, register_currency
from suite_money.domain.decimal_value import DecimalValue
from suite_money.domain.rounding import RoundingMode
from suite_money.domain.monetary.big_money import BigMoney
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.fixed_money import FixedMoney
from suite_money.domain.monetary.minor_unit_money import MinorUnitMoney

__all__ = [
    "CurrencyUnit",
    "CurrencyRegistry",
    "get_default_registry",
    "register_currency",
    "DecimalValue",
    "RoundingMode",
    "BigMoney",
    "Money",
    "FixedMoney",
    "MinorUnitMoney",
]
