from __future__ import annotations

import logging
from decimal import Decimal

from suite_money import BigMoney, FixedMoney, MinorUnitMoney, Money, RoundingMode
from suite_money.domain.monetary import money_utils


logger = logging.getLogger(__name__)

# Unit prices in USD; fuel is quoted with 3 decimal places
LINES = [
    ("Coffee beans", Money.parse("USD 12.49"), 3),
    ("Filter papers", Money.parse("USD 3.95"), 2),
    ("Delivery fuel (litres)", FixedMoney.parse("USD 1.239"), 14),
]
VAT_RATE = Decimal("0.21")
USD_TO_EUR = Decimal("0.9237")


def run() -> None:
    # Line totals are exact, whatever the scale of the unit price
    subtotal = None
    for name, unit_price, quantity in LINES:
        line_total = unit_price.to_big_money().multiplied_by(quantity)
        logger.info(f"{name}: {quantity} x {unit_price} = {line_total}")
        subtotal = money_utils.add(subtotal, line_total)

    # Invoice total is rounded once, at the end, to whole cents
    subtotal = Money.from_money(subtotal, RoundingMode.HALF_UP)
    vat = subtotal.multiplied_by(VAT_RATE, RoundingMode.HALF_UP)
    total = subtotal.plus(vat)
    logger.info(f"Subtotal {subtotal}, VAT {vat}, total {total}")

    # Split in three; the remainder goes to the first share
    share = total.divided_by(3, RoundingMode.DOWN)
    remainder = total.minus(share.multiplied_by(3))
    logger.info(f"Three shares of {share}, first share {share.plus(remainder)}")

    # Same total for a customer paying in EUR
    total_eur = total.converted_to("EUR", USD_TO_EUR, RoundingMode.HALF_EVEN)
    logger.info(f"Total in EUR at {USD_TO_EUR}: {total_eur} (exact {BigMoney.from_money(total).converted_to('EUR', USD_TO_EUR)})")

    # Compact form for a ledger that stores cents in a 64-bit column
    ledger_entry = MinorUnitMoney.from_money(total)
    logger.info(f"Ledger entry: {ledger_entry.amount_minor} minor units of {ledger_entry.currency_unit}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
