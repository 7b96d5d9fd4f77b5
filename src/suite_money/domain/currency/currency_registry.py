from __future__ import annotations

import logging
import re
from threading import Lock
from typing import Iterable

from bidict import bidict

from suite_money.config import Settings, load_settings
from suite_money.domain.currency.currency_data import (
    CurrencyRecord,
    read_bundled_currency_data,
    read_currency_data_file,
    read_currency_records,
)
from suite_money.domain.currency.currency_unit import CurrencyUnit
from suite_money.errors import (
    DuplicateCurrencyError,
    InvalidScaleError,
    MalformedInputError,
    UnknownCurrencyError,
)

logger = logging.getLogger(__name__)

_CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")
_COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{2}")


class CurrencyRegistry:
    """Lookup table of currencies by alphabetic code, numeric code and country.

    The registry is meant to be populated once at startup and only read afterwards.
    Registrations are serialized by an internal lock; lookups take no lock because
    entries are never replaced or removed.

    Registering the same currency again with identical data is a no-op that returns the
    existing `CurrencyUnit`. Any conflicting registration raises `DuplicateCurrencyError`.
    """

    def __init__(self) -> None:
        self._currencies_by_code: dict[str, CurrencyUnit] = {}
        # Numeric codes are unique per currency, so the mapping is kept bi-directional
        self._codes_by_numeric_code_bidict: bidict[int, str] = bidict()
        self._currencies_by_country: dict[str, CurrencyUnit] = {}
        self._country_codes_by_code: dict[str, tuple[str, ...]] = {}
        self._lock = Lock()

    # region Registration

    def register(
        self,
        code: str,
        numeric_code: int | None,
        decimal_places: int,
        country_codes: Iterable[str] = (),
    ) -> CurrencyUnit:
        """Register a currency, or return the existing one if the data is identical.

        Args:
            code: Three upper-case ASCII letters (e.g., "USD").
            numeric_code: ISO-4217 numeric code in [0, 999], or None when there is none.
            decimal_places: Digits of the minor unit in [0, 3], or -1 for a pseudo-currency.
            country_codes: ISO-3166 alpha-2 codes of countries using this currency.

        Returns:
            CurrencyUnit: The registered currency.

        Raises:
            MalformedInputError: If $code, $numeric_code or a country code is invalid.
            InvalidScaleError: If $decimal_places is outside [-1, 3].
            DuplicateCurrencyError: If the registration conflicts with an existing one.
        """
        country_codes = tuple(country_codes)
        self._validate(code, numeric_code, decimal_places, country_codes)

        with self._lock:
            existing = self._currencies_by_code.get(code)
            if existing is not None:
                return self._check_identical(existing, numeric_code, decimal_places, country_codes)

            # Raise: check every uniqueness constraint before mutating anything
            if numeric_code is not None and numeric_code in self._codes_by_numeric_code_bidict:
                owner = self._codes_by_numeric_code_bidict[numeric_code]
                raise DuplicateCurrencyError(f"Cannot register {code} because $numeric_code ({numeric_code}) is already used by {owner}")
            for country_code in country_codes:
                owner_currency = self._currencies_by_country.get(country_code)
                if owner_currency is not None:
                    raise DuplicateCurrencyError(f"Cannot register {code} because country '{country_code}' is already assigned to {owner_currency.code}")
            if len(set(country_codes)) != len(country_codes):
                raise DuplicateCurrencyError(f"Cannot register {code} because $country_codes {country_codes} contains duplicates")

            currency = CurrencyUnit(code, numeric_code, decimal_places)
            self._currencies_by_code[code] = currency
            if numeric_code is not None:
                self._codes_by_numeric_code_bidict[numeric_code] = code
            for country_code in country_codes:
                self._currencies_by_country[country_code] = currency
            self._country_codes_by_code[code] = country_codes

        logger.debug(f"Registered currency {code} (numeric {numeric_code}, decimal places {decimal_places}, {len(country_codes)} country(ies))")
        return currency

    def load_records(self, records: Iterable[CurrencyRecord]) -> int:
        """Register every record; return the number of records processed."""
        count = 0
        for record in records:
            self.register(record.code, record.numeric_code, record.decimal_places, record.country_codes)
            count += 1
        return count

    def load_lines(self, lines: Iterable[str], source: str = "<lines>", strict: bool = True) -> int:
        """Parse data-file lines and register their records.

        Raises:
            MalformedInputError: If $strict and a line is malformed.
        """
        count = self.load_records(read_currency_records(lines, source=source, strict=strict))
        logger.info(f"Loaded {count} currency record(s) from {source}")
        return count

    @staticmethod
    def _validate(code: str, numeric_code: int | None, decimal_places: int, country_codes: tuple[str, ...]) -> None:
        # Raise: $code must be exactly three upper-case ASCII letters
        if not isinstance(code, str) or _CURRENCY_CODE_PATTERN.fullmatch(code) is None:
            raise MalformedInputError(f"$code must be three upper-case ASCII letters, but provided value is: {code!r}")

        # Raise: $numeric_code is optional but bounded to three digits
        if numeric_code is not None and (isinstance(numeric_code, bool) or not isinstance(numeric_code, int) or not 0 <= numeric_code <= 999):
            raise MalformedInputError(f"$numeric_code must be None or an integer in [0, 999], but provided value is: {numeric_code!r}")

        # Raise: $decimal_places in [-1, 3]; -1 marks a pseudo-currency
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or not -1 <= decimal_places <= 3:
            raise InvalidScaleError(f"$decimal_places must be an integer in [-1, 3], but provided value is: {decimal_places!r}")

        for country_code in country_codes:
            if not isinstance(country_code, str) or _COUNTRY_CODE_PATTERN.fullmatch(country_code) is None:
                raise MalformedInputError(f"Country code must be two upper-case ASCII letters, but provided value is: {country_code!r}")

    def _check_identical(
        self,
        existing: CurrencyUnit,
        numeric_code: int | None,
        decimal_places: int,
        country_codes: tuple[str, ...],
    ) -> CurrencyUnit:
        same = (
            existing.numeric_code == numeric_code
            and existing.decimal_places == decimal_places
            and set(self._country_codes_by_code[existing.code]) == set(country_codes)
        )
        if not same:
            raise DuplicateCurrencyError(f"Currency {existing.code} is already registered with different data: {existing!r}")
        return existing

    # endregion

    # region Lookup

    def lookup(self, code: str) -> CurrencyUnit:
        """Get a currency by its alphabetic code.

        Raises:
            UnknownCurrencyError: If $code is not registered.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        currency = self._currencies_by_code.get(code)
        if currency is None:
            raise UnknownCurrencyError(f"Unknown currency: '{code}'")
        return currency

    def lookup_numeric(self, numeric_code: int) -> CurrencyUnit:
        """Get a currency by its numeric code.

        Raises:
            UnknownCurrencyError: If no currency has $numeric_code.
        """
        code = self._codes_by_numeric_code_bidict.get(numeric_code)
        if code is None:
            raise UnknownCurrencyError(f"Unknown numeric currency code: {numeric_code!r}")
        return self._currencies_by_code[code]

    def lookup_country(self, country_code: str) -> CurrencyUnit:
        """Get the currency used by a country.

        Raises:
            UnknownCurrencyError: If no currency is assigned to $country_code.
        """
        currency = self._currencies_by_country.get(country_code)
        if currency is None:
            raise UnknownCurrencyError(f"Unknown currency for country: {country_code!r}")
        return currency

    def numeric_code_of(self, code: str) -> int | None:
        """Get the numeric code registered for alphabetic $code, None if it has none."""
        self.lookup(code)
        return self._codes_by_numeric_code_bidict.inverse.get(code)

    def country_codes(self, currency: CurrencyUnit | str) -> tuple[str, ...]:
        """Get the country codes assigned to a currency."""
        code = currency.code if isinstance(currency, CurrencyUnit) else currency
        self.lookup(code)
        return self._country_codes_by_code[code]

    def registered_currencies(self) -> list[CurrencyUnit]:
        """Get all registered currencies, sorted by code."""
        return sorted(self._currencies_by_code.values())

    def __contains__(self, code: object) -> bool:
        return code in self._currencies_by_code

    def __len__(self) -> int:
        return len(self._currencies_by_code)

    # endregion


# region Default registry

_default_registry: CurrencyRegistry | None = None
_default_registry_lock = Lock()


def build_registry(settings: Settings) -> CurrencyRegistry:
    """Create a registry holding the bundled currencies plus the configured extension file.

    Raises:
        MalformedInputError: If a data file is malformed and $settings asks for strict loading.
        OSError: If the configured extension file cannot be read.
    """
    registry = CurrencyRegistry()
    registry.load_lines(read_bundled_currency_data(), source="bundled currency data", strict=settings.strict_currency_data)

    if settings.currency_data_extension is not None:
        extension = settings.currency_data_extension
        registry.load_lines(read_currency_data_file(extension), source=str(extension), strict=settings.strict_currency_data)

    return registry


def get_default_registry() -> CurrencyRegistry:
    """Get the process-wide registry, building it on first use.

    The first call loads the data files under a lock, so concurrent first use is safe.
    Later calls return the same instance without locking.
    """
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = build_registry(load_settings())
            logger.info(f"Initialized default currency registry with {len(_default_registry)} currency(ies)")
        return _default_registry


def register_currency(code: str, numeric_code: int | None, decimal_places: int, country_codes: Iterable[str] = ()) -> CurrencyUnit:
    """Register a currency in the process-wide registry.

    Call this during application startup, before values of the currency are created.
    """
    return get_default_registry().register(code, numeric_code, decimal_places, country_codes)


# endregion
