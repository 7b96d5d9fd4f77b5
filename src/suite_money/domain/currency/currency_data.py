"""Reading of currency data files.

One record per line:

    CODE,numericCode,decimalPlaces[,COUNTRYCODES][ #comment]

`numericCode` is -1 when the currency has none, `decimalPlaces` is -1 for a pseudo-currency,
and COUNTRYCODES concatenates ISO-3166 alpha-2 codes ("USASEC..."). Blank lines and lines
holding only a comment are ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Iterable

from suite_money.errors import MalformedInputError

logger = logging.getLogger(__name__)

_RECORD_PATTERN = re.compile(r"([A-Z]{3}),(-1|[0-9]{1,3}),(-1|[0-3])(?:,([A-Z]*))? *(#.*)?")

BUNDLED_DATA_FILE = "currency_data.csv"


@dataclass(frozen=True)
class CurrencyRecord:
    """One parsed line of a currency data file."""

    code: str
    numeric_code: int | None
    decimal_places: int
    country_codes: tuple[str, ...]


def parse_currency_record(line: str) -> CurrencyRecord | None:
    """Parse one data line.

    Returns:
        CurrencyRecord | None: The record, or None for a blank or comment-only line.

    Raises:
        MalformedInputError: If the line is not a valid record.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    match = _RECORD_PATTERN.fullmatch(stripped)
    if match is None:
        raise MalformedInputError(f"Invalid currency record: '{stripped}'")

    code, numeric_str, decimal_places_str, countries, _comment = match.groups()
    countries = countries or ""

    # Raise: country codes are concatenated pairs, an odd length means a truncated code
    if len(countries) % 2 == 1:
        raise MalformedInputError(f"Invalid currency record: '{stripped}' has a truncated country code in '{countries}'")

    numeric_code = int(numeric_str)
    return CurrencyRecord(
        code=code,
        numeric_code=None if numeric_code < 0 else numeric_code,
        decimal_places=int(decimal_places_str),
        country_codes=tuple(countries[i : i + 2] for i in range(0, len(countries), 2)),
    )


def read_currency_records(lines: Iterable[str], source: str = "<lines>", strict: bool = True) -> list[CurrencyRecord]:
    """Parse every record of a data source.

    Args:
        lines: Lines of the data source.
        source: Name of the data source, used in messages.
        strict: If True, the first malformed line raises. If False, malformed lines are
            skipped and each one is logged as a warning.

    Returns:
        list[CurrencyRecord]: Records in file order.

    Raises:
        MalformedInputError: If $strict and a line is malformed.
    """
    records: list[CurrencyRecord] = []
    for line_number, line in enumerate(lines, start=1):
        try:
            record = parse_currency_record(line)
        except MalformedInputError as e:
            if strict:
                raise MalformedInputError(f"{source}:{line_number}: {e}") from e
            logger.warning(f"Skipped malformed currency record at {source}:{line_number}: {e}")
            continue
        if record is not None:
            records.append(record)
    return records


def read_bundled_currency_data() -> list[str]:
    """Read the lines of the currency data file shipped with the package."""
    data_file = resources.files("suite_money.domain.currency").joinpath("data").joinpath(BUNDLED_DATA_FILE)
    return data_file.read_text(encoding="utf-8").splitlines()


def read_currency_data_file(path: Path) -> list[str]:
    """Read the lines of a currency data file from disk."""
    return Path(path).read_text(encoding="utf-8").splitlines()
