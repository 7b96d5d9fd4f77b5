from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from suite_money.domain.monetary.big_money import BigMoney


# region Interface


@runtime_checkable
class BigMoneyProvider(Protocol):
    """Anything that can present itself as a `BigMoney`.

    Every money representation implements it, so operations accept any of them as the
    "other" operand. Formatting and persistence code should read values only through
    `to_big_money()` (currency unit plus exact amount) and rebuild them through the public
    factories.
    """

    def to_big_money(self) -> BigMoney:
        """Return this value as a BigMoney with the same currency, amount and scale."""
        ...


# endregion
