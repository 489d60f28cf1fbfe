"""
Cart data models: the priced CartLine and the OrderTotals summary.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from models.catalog import ExtraItem
from models.enums import ProductType


def make_cart_id(product_id: str, extras: tuple[ExtraItem, ...] = ()) -> str:
    """
    Build the key that identifies a cart line.

    The same product with a different set of extras is a different line; the
    order extras were picked in does not matter.
    """
    if not extras:
        return product_id
    extra_key = "+".join(sorted(extra.extra_id for extra in extras))
    return f"{product_id}-{extra_key}"


@dataclass(frozen=True)
class CartLine:
    """
    A product in the cart with its already resolved display-currency unit price.
    """

    product_id: str
    category: str
    unit_price: Decimal
    quantity: int = 1
    product_type: ProductType = ProductType.ITEM
    selected_extras: tuple[ExtraItem, ...] = ()
    stock: int | None = None  # None means no stock cap
    name: str = ""

    @property
    def cart_id(self) -> str:
        return make_cart_id(self.product_id, self.selected_extras)

    def extras_total(self) -> Decimal:
        """Sum of the selected extras for one unit."""
        return sum((extra.price for extra in self.selected_extras), Decimal("0"))


@dataclass(frozen=True)
class OrderTotals:
    """Final figures for a cart at checkout."""

    subtotal: Decimal
    discount: Decimal
    delivery_fee: Decimal
    total: Decimal
    applied_offer_ids: list[str] = field(default_factory=list)
