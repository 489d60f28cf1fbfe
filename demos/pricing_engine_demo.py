"""
Demonstration of the pricing engine: price the dummy catalog, fill a cart and
compute checkout totals with the best promotional discount.
"""

import asyncio

from config.config import PricingConfig
from connectors.dummy_catalog import DummyCatalog
from models.enums import DeliveryMethod
from pricing import (
    add_to_cart,
    build_price_list,
    compute_order_totals,
    index_items,
    validate_catalog,
)
from utils.logger import get_logger

logger = get_logger("demos.pricing_engine")


async def run_demo() -> None:
    config = PricingConfig.from_env()
    logger.setLevel(config.log_level)
    catalog = DummyCatalog()

    settings, items, bundles, offers = await asyncio.gather(
        catalog.get_settings(),
        catalog.get_items(),
        catalog.get_bundles(),
        catalog.get_active_offers(),
    )
    item_index = index_items(items)
    logger.info(
        f"Loaded {len(items)} items, {len(bundles)} bundles and {len(offers)} active offers "
        f"(rate {settings.exchange_rate.rate} {settings.exchange_rate.display_currency}/"
        f"{settings.exchange_rate.base_currency})."
    )

    issues = validate_catalog(items, bundles, offers, settings)
    if issues:
        print(f"{len(issues)} catalog issue(s) found; see log for details.")

    print("\n--- Price List ---")
    print(build_price_list(items, bundles, settings).to_string(index=False))

    extras = await catalog.get_extras(["E1"])
    cart = []
    cart = add_to_cart(cart, item_index["I1"], 4, settings, item_index)
    cart = add_to_cart(cart, item_index["I2"], 1, settings, item_index)
    pantry = await catalog.get_bundle("B1")
    if pantry is not None:
        # price the basket from just the items it references
        pantry_items = await catalog.resolve_items(pantry.item_ids())
        cart = add_to_cart(cart, pantry, 1, settings, pantry_items, extras)

    print("\n--- Cart ---")
    for line in cart:
        print(f"{line.name:<20} x{line.quantity:<3} @ {line.unit_price:>8} ({line.cart_id})")

    for method in (DeliveryMethod.DELIVERY, DeliveryMethod.PICKUP):
        totals = compute_order_totals(cart, offers, settings, method=method)
        print(f"\n--- Totals ({method.value}) ---")
        print(f"Subtotal:     {totals.subtotal}")
        print(f"Discount:     {totals.discount} {totals.applied_offer_ids}")
        print(f"Delivery fee: {totals.delivery_fee}")
        print(f"Total:        {totals.total}")


if __name__ == "__main__":
    asyncio.run(run_demo())
