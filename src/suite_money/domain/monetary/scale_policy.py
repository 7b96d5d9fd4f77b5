from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TYPE_CHECKING

from suite_money.domain.rounding import RoundingMode
from suite_money.errors import InvalidScaleError

if TYPE_CHECKING:
    from suite_money.domain.monetary.big_money import BigMoney


# region Interface


class ScalePolicy(Protocol):
    """Rule deciding which scale a `ScaledMoney` keeps after every operation."""

    def accepts(self, money: BigMoney) -> bool:
        """Check whether $money already has the scale this policy requires."""
        ...

    def retain(self, money: BigMoney, rounding_mode: RoundingMode) -> BigMoney:
        """Bring the result of an operation back to the required scale.

        Raises:
            RoundingRequiredError: If digits must be discarded and $rounding_mode is UNNECESSARY.
        """
        ...


# endregion

# region Implementations


@dataclass(frozen=True)
class UnconstrainedScale:
    """Keep whatever scale the exact result has."""

    def accepts(self, money: BigMoney) -> bool:
        return True

    def retain(self, money: BigMoney, rounding_mode: RoundingMode) -> BigMoney:
        return money


@dataclass(frozen=True)
class CurrencyScale:
    """Keep the scale equal to the decimal places of the money's currency.

    The currency is read from each result, so a conversion lands on the target currency's scale.
    """

    def accepts(self, money: BigMoney) -> bool:
        return money.scale == money.currency_unit.require_minor_unit_scale()

    def retain(self, money: BigMoney, rounding_mode: RoundingMode) -> BigMoney:
        return money.with_currency_scale(rounding_mode)


@dataclass(frozen=True)
class FixedScale:
    """Keep a constant, non-negative scale regardless of currency."""

    scale: int

    def __post_init__(self) -> None:
        # Raise: a fixed scale counts decimal places, so it is never negative
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
            raise InvalidScaleError(f"$scale of a fixed scale must be a non-negative int, but provided value is: {self.scale!r}")

    def accepts(self, money: BigMoney) -> bool:
        return money.scale == self.scale

    def retain(self, money: BigMoney, rounding_mode: RoundingMode) -> BigMoney:
        return money.with_scale(self.scale, rounding_mode)


# Shared instances of the stateless policies
UNCONSTRAINED_SCALE = UnconstrainedScale()
CURRENCY_SCALE = CurrencyScale()

# endregion
