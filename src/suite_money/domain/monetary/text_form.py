"""Canonical text form of monetary values: "<CODE> <amount>", e.g. "USD 25.95" or "JPY -3"."""

from __future__ import annotations

from suite_money.domain.currency.currency_unit import CurrencyUnit
from suite_money.domain.decimal_value import DecimalValue
from suite_money.errors import MalformedInputError

# Three letters, one space and at least one character of amount
MIN_TEXT_LENGTH = 5


def parse_money_text(text: str) -> tuple[CurrencyUnit, DecimalValue]:
    """Split canonical money text into its currency and exact amount.

    The amount keeps every written digit, so "USD 2.50" has scale 2.

    Raises:
        MalformedInputError: If $text is too short, the fourth character is not a space, or
            the amount is not plain decimal text.
        UnknownCurrencyError: If the currency code is not registered.
    """
    if not isinstance(text, str):
        raise TypeError(f"$text must be a str, but provided value is: {text!r}")

    # Raise: the code/amount separator sits at a fixed position
    if len(text) < MIN_TEXT_LENGTH or text[3] != " ":
        raise MalformedInputError(f"Money text '{text}' cannot be parsed; expected format '<CODE> <amount>'")

    currency = CurrencyUnit.of(text[:3])
    try:
        amount = DecimalValue.parse(text[4:])
    except MalformedInputError as e:
        raise MalformedInputError(f"Money text '{text}' cannot be parsed: {e}") from e
    return currency, amount


def format_money_text(currency: CurrencyUnit, amount: DecimalValue) -> str:
    """Render canonical money text without exponent ("USD 25.95")."""
    return f"{currency.code} {amount.to_plain_string()}"
