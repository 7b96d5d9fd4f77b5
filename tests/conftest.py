from __future__ import annotations

import pytest

from suite_money.domain.currency.currency_registry import CurrencyRegistry


@pytest.fixture
def registry() -> CurrencyRegistry:
    """Fresh registry, isolated from the process-wide default one."""
    registry = CurrencyRegistry()
    registry.register("USD", 840, 2, ["US", "EC"])
    registry.register("JPY", 392, 0, ["JP"])
    registry.register("XAU", 959, -1)
    return registry
