"""
Bundle price aggregation and store product price dispatch.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from models.catalog import Bundle, BundleContent, Item, StoreProduct
from models.pricing import StoreSettings

from .unit_price import compute_sell_price

ZERO = Decimal("0")


def index_items(items: Iterable[Item]) -> dict[str, Item]:
    """Build the id -> Item lookup the bundle functions expect."""
    return {item.product_id: item for item in items}


def lookup_item(items: Mapping[str, Item], item_id: str) -> Item | None:
    return items.get(item_id)


def content_price(
    content: BundleContent, items: Mapping[str, Item], settings: StoreSettings
) -> Decimal:
    """
    Price of one bundle line. An item missing from the lookup contributes zero.
    """
    item = lookup_item(items, content.item_id)
    if item is None:
        return ZERO
    return compute_sell_price(item, settings) * content.quantity


def compute_bundle_price(
    bundle: Bundle, items: Mapping[str, Item], settings: StoreSettings
) -> Decimal:
    """
    Base sell price of a bundle: the sum of its lines, each item rounded
    individually before it is multiplied and added.
    """
    return sum(
        (content_price(content, items, settings) for content in bundle.contents),
        ZERO,
    )


def compute_store_product_price(
    product: StoreProduct, items: Mapping[str, Item], settings: StoreSettings
) -> Decimal:
    """Unit price of any sellable product, item or bundle."""
    if isinstance(product, Bundle):
        return compute_bundle_price(product, items, settings)
    return compute_sell_price(product, settings)
