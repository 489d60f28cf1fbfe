"""
Unit price conversion: cost basis -> display-currency sell price.
"""

from decimal import ROUND_FLOOR, Decimal

from models.catalog import Item
from models.pricing import StoreSettings

HUNDRED = Decimal("100")
HALF = Decimal("0.5")


def round_to_step(value: Decimal, step: Decimal) -> Decimal:
    """
    Round to the nearest multiple of step.

    Halves always go towards positive infinity: 5 becomes 10, while -5
    becomes 0 and -15 becomes -10.
    """
    if step <= 0:
        return value
    return (value / step + HALF).to_integral_value(rounding=ROUND_FLOOR) * step


def apply_markup(amount: Decimal, markup_percentage: Decimal) -> Decimal:
    return amount * (Decimal("1") + markup_percentage / HUNDRED)


def compute_sell_price(item: Item, settings: StoreSettings) -> Decimal:
    """
    Sell price of a single item in the display currency.

    The converted cost gets the item's markup and is rounded to the nearest
    multiple of the store rounding step (10 by default). Inputs are not
    validated, so a negative cost yields a negative price.
    """
    raw = settings.exchange_rate.convert(item.cost_basis)
    with_markup = apply_markup(raw, item.markup_percentage)
    return round_to_step(with_markup, settings.rounding_step)
