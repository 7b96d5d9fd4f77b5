import logging

import pytest

from suite_money.domain.currency.currency_registry import CurrencyRegistry
from suite_money.errors import (
    DuplicateCurrencyError,
    InvalidScaleError,
    MalformedInputError,
    UnknownCurrencyError,
)


def test_register_and_lookup(registry):
    usd = registry.lookup("USD")

    assert usd.code == "USD"
    assert usd.numeric_code == 840
    assert usd.decimal_places == 2
    assert registry.lookup_numeric(840) is usd
    assert registry.lookup_country("EC") is usd
    assert registry.numeric_code_of("USD") == 840
    assert registry.country_codes(usd) == ("US", "EC")
    assert "USD" in registry
    assert "EUR" not in registry
    assert len(registry) == 3


def test_registered_currencies_are_sorted_by_code(registry):
    assert [c.code for c in registry.registered_currencies()] == ["JPY", "USD", "XAU"]


def test_identical_registration_returns_existing_unit(registry):
    usd = registry.lookup("USD")

    # Country order does not matter
    assert registry.register("USD", 840, 2, ["EC", "US"]) is usd
    assert len(registry) == 3


@pytest.mark.parametrize(
    "code, numeric_code, decimal_places, country_codes",
    [
        ("USD", 840, 3, ["US", "EC"]),  # different decimal places
        ("USD", 841, 2, ["US", "EC"]),  # different numeric code
        ("USD", 840, 2, ["US"]),  # different countries
        ("EUR", 840, 2, []),  # numeric code owned by USD
        ("EUR", 978, 2, ["JP"]),  # country owned by JPY
        ("EUR", 978, 2, ["DE", "DE"]),  # duplicate country
    ],
)
def test_conflicting_registration_is_rejected(registry, code, numeric_code, decimal_places, country_codes):
    with pytest.raises(DuplicateCurrencyError):
        registry.register(code, numeric_code, decimal_places, country_codes)

    # Nothing was registered partially
    assert len(registry) == 3
    assert "EUR" not in registry
    assert registry.lookup_country("JP").code == "JPY"


@pytest.mark.parametrize(
    "code, numeric_code, country_codes",
    [
        ("usd", 1, []),
        ("US", 1, []),
        ("EURO", 1, []),
        (123, 1, []),
        ("ABC", 1000, []),
        ("ABC", -1, []),
        ("ABC", "978", []),
        ("ABC", 1, ["D"]),
        ("ABC", 1, ["de"]),
    ],
)
def test_invalid_registration_data_is_malformed(registry, code, numeric_code, country_codes):
    with pytest.raises(MalformedInputError):
        registry.register(code, numeric_code, 2, country_codes)


@pytest.mark.parametrize("decimal_places", [-2, 4, 2.0])
def test_invalid_decimal_places(registry, decimal_places):
    with pytest.raises(InvalidScaleError):
        registry.register("ABC", 1, decimal_places)


def test_currency_without_numeric_code(registry):
    currency = registry.register("ABC", None, 2)

    assert currency.numeric_code is None
    assert currency.numeric_3_code == ""
    assert registry.numeric_code_of("ABC") is None


def test_unknown_lookups_fail(registry):
    with pytest.raises(UnknownCurrencyError):
        registry.lookup("EUR")
    with pytest.raises(UnknownCurrencyError):
        registry.lookup_numeric(978)
    with pytest.raises(UnknownCurrencyError):
        registry.lookup_country("DE")
    with pytest.raises(UnknownCurrencyError):
        registry.country_codes("EUR")
    with pytest.raises(TypeError):
        registry.lookup(840)


def test_load_lines_registers_records():
    registry = CurrencyRegistry()

    count = registry.load_lines(
        [
            "# test data",
            "",
            "GBP,826,2,GBIM",
            "BHD,48,3,BH  # three decimals",
            "XTS,963,-1",
            "CHE,947,2 # fund code without countries",
        ],
        source="test",
    )

    assert count == 4
    assert registry.lookup("BHD").decimal_places == 3
    assert registry.lookup_country("IM").code == "GBP"
    assert registry.lookup("XTS").is_pseudo_currency


def test_load_lines_strict_mode_reports_position():
    registry = CurrencyRegistry()

    with pytest.raises(MalformedInputError, match="test:2"):
        registry.load_lines(["GBP,826,2,GB", "GBP;826;2"], source="test")


def test_load_lines_lenient_mode_skips_and_warns(caplog):
    registry = CurrencyRegistry()

    with caplog.at_level(logging.WARNING):
        count = registry.load_lines(["GBP,826,2,GB", "broken", "JPY,392,0,JP"], source="test", strict=False)

    assert count == 2
    assert "JPY" in registry
    assert "test:2" in caplog.text
