from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from suite_money.errors import MalformedInputError

# Environment variables (may also come from a `.env` file in the working directory)
ENV_CURRENCY_DATA_EXTENSION = "SUITE_MONEY_CURRENCY_DATA_EXTENSION"
ENV_STRICT_CURRENCY_DATA = "SUITE_MONEY_STRICT_CURRENCY_DATA"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Process-wide settings read once when the default currency registry is built.

    Attributes:
        currency_data_extension: Optional path of an extra currency data file, loaded after
            the bundled one. Use it to add currencies the bundled file does not know.
        strict_currency_data: If True, a malformed data line raises `MalformedInputError`.
            If False, it is skipped and reported as a warning.
    """

    currency_data_extension: Path | None = None
    strict_currency_data: bool = True


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise MalformedInputError(f"Environment variable ${name} must be a boolean (true/false), but provided value is: '{raw}'")


def load_settings() -> Settings:
    """Build `Settings` from the environment, after loading a `.env` file if present.

    Values already set in the environment win over the `.env` file.

    Returns:
        Settings: Current settings.

    Raises:
        MalformedInputError: If a boolean variable holds something else than true/false.
    """
    load_dotenv()

    extension = os.environ.get(ENV_CURRENCY_DATA_EXTENSION, "").strip()
    strict_raw = os.environ.get(ENV_STRICT_CURRENCY_DATA)

    return Settings(
        currency_data_extension=Path(extension) if extension else None,
        strict_currency_data=True if strict_raw is None else _parse_bool(ENV_STRICT_CURRENCY_DATA, strict_raw),
    )
