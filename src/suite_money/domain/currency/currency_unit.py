from __future__ import annotations

from suite_money.errors import UnsupportedCurrencyError


class CurrencyUnit:
    """A currency as registered in a `CurrencyRegistry`.

    Instances are created only by the registry, one per code, and never change afterwards.
    Equality, hashing and ordering use the code alone.

    Attributes:
        code (str): ISO-4217 alphabetic code (e.g., "USD", "JPY").
        numeric_code (int | None): ISO-4217 numeric code, None when the currency has none.
        decimal_places (int): Digits of the minor unit in [0, 3], or -1 for a pseudo-currency
            (e.g., gold "XAU") that has no minor unit.
    """

    __slots__ = ("_code", "_numeric_code", "_decimal_places")

    def __init__(self, code: str, numeric_code: int | None, decimal_places: int) -> None:
        # Validated by `CurrencyRegistry.register`; callers use `CurrencyUnit.of` instead
        self._code = code
        self._numeric_code = numeric_code
        self._decimal_places = decimal_places

    # region Lookup

    @classmethod
    def of(cls, code: str) -> CurrencyUnit:
        """Get a currency from the default registry by its alphabetic code.

        Raises:
            UnknownCurrencyError: If $code is not registered.
        """
        from suite_money.domain.currency.currency_registry import get_default_registry

        return get_default_registry().lookup(code)

    @classmethod
    def of_numeric(cls, numeric_code: int) -> CurrencyUnit:
        """Get a currency from the default registry by its numeric code."""
        from suite_money.domain.currency.currency_registry import get_default_registry

        return get_default_registry().lookup_numeric(numeric_code)

    @classmethod
    def of_country(cls, country_code: str) -> CurrencyUnit:
        """Get the currency of a country (ISO-3166 alpha-2 code) from the default registry."""
        from suite_money.domain.currency.currency_registry import get_default_registry

        return get_default_registry().lookup_country(country_code)

    @classmethod
    def registered_currencies(cls) -> list[CurrencyUnit]:
        """Get all currencies of the default registry, sorted by code."""
        from suite_money.domain.currency.currency_registry import get_default_registry

        return get_default_registry().registered_currencies()

    # endregion

    @property
    def code(self) -> str:
        """Get the alphabetic currency code."""
        return self._code

    @property
    def numeric_code(self) -> int | None:
        """Get the numeric currency code, None if there is none."""
        return self._numeric_code

    @property
    def numeric_3_code(self) -> str:
        """Get the numeric code zero-padded to 3 digits ("008"), or "" if there is none."""
        if self._numeric_code is None:
            return ""
        return f"{self._numeric_code:03d}"

    @property
    def decimal_places(self) -> int:
        """Get the digits of the minor unit; -1 for a pseudo-currency."""
        return self._decimal_places

    @property
    def is_pseudo_currency(self) -> bool:
        return self._decimal_places < 0

    def require_minor_unit_scale(self) -> int:
        """Get the scale of the minor unit, failing fast for pseudo-currencies.

        Raises:
            UnsupportedCurrencyError: If this is a pseudo-currency.
        """
        if self._decimal_places < 0:
            raise UnsupportedCurrencyError(f"Currency {self._code} is a pseudo-currency and has no minor unit scale")
        return self._decimal_places

    def __eq__(self, other) -> bool:
        """Check equality with another CurrencyUnit."""
        if not isinstance(other, CurrencyUnit):
            return False
        return self._code == other._code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self._code)

    def __lt__(self, other: CurrencyUnit) -> bool:
        if not isinstance(other, CurrencyUnit):
            return NotImplemented
        return self._code < other._code

    def __str__(self) -> str:
        """Return string representation."""
        return self._code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self._code}', {self._numeric_code}, {self._decimal_places})"


def to_currency_unit(currency: CurrencyUnit | str) -> CurrencyUnit:
    """Accept a CurrencyUnit or a code and return the CurrencyUnit.

    Raises:
        TypeError: If $currency is neither.
        UnknownCurrencyError: If the code is not registered.
    """
    if isinstance(currency, CurrencyUnit):
        return currency
    if isinstance(currency, str):
        return CurrencyUnit.of(currency)
    raise TypeError(f"$currency must be a CurrencyUnit or a currency code, but provided value is: {currency!r}")
