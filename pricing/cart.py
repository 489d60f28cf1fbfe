"""
Cart assembly and order totals.

Turns catalog products into priced cart lines and combines subtotal, the best
discount and the delivery fee into the figures shown at checkout.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from models.cart import CartLine, OrderTotals, make_cart_id
from models.catalog import Bundle, ExtraItem, Item, StoreProduct
from models.enums import DeliveryMethod
from models.pricing import StoreSettings
from models.promotions import Offer

from .bundles import compute_store_product_price
from .discounts import select_best_discount

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def line_total_with_extras(line: CartLine) -> Decimal:
    """Unit price plus the selected extras, times quantity."""
    return (line.unit_price + line.extras_total()) * line.quantity


def cart_subtotal(lines: Iterable[CartLine]) -> Decimal:
    return sum((line_total_with_extras(line) for line in lines), ZERO)


def _cap_quantity(quantity: int, stock: int | None) -> int:
    if stock is None:
        return quantity
    return min(quantity, stock)


def _extras_for(product: StoreProduct, extras: Sequence[ExtraItem]) -> tuple[ExtraItem, ...]:
    # Only bundles take extras.
    if isinstance(product, Bundle):
        return tuple(extras)
    return ()


def build_cart_line(
    product: StoreProduct,
    quantity: int,
    settings: StoreSettings,
    items: Mapping[str, Item],
    extras: Sequence[ExtraItem] = (),
) -> CartLine | None:
    """
    Price a product into a new cart line, or return None if it is out of stock.
    """
    if product.stock <= 0:
        return None
    return CartLine(
        product_id=product.product_id,
        category=product.category,
        unit_price=compute_store_product_price(product, items, settings),
        quantity=_cap_quantity(quantity, product.stock),
        product_type=product.product_type,
        selected_extras=_extras_for(product, extras),
        stock=product.stock,
        name=product.name,
    )


def add_to_cart(
    lines: Sequence[CartLine],
    product: StoreProduct,
    quantity: int,
    settings: StoreSettings,
    items: Mapping[str, Item],
    extras: Sequence[ExtraItem] = (),
) -> list[CartLine]:
    """
    Return a new cart with the product added.

    Adding a product that already has a line with the same extras increases that
    line's quantity, capped at stock, and keeps its original unit price.
    """
    cart_id = make_cart_id(product.product_id, _extras_for(product, extras))
    new_lines = list(lines)

    for index, line in enumerate(new_lines):
        if line.cart_id == cart_id:
            merged = _cap_quantity(line.quantity + quantity, line.stock)
            new_lines[index] = replace(line, quantity=merged)
            return new_lines

    line = build_cart_line(product, quantity, settings, items, extras)
    if line is None:
        logger.info(f"Product {product.product_id} is out of stock; not added to cart.")
        return new_lines
    new_lines.append(line)
    return new_lines


def remove_from_cart(lines: Sequence[CartLine], cart_id: str) -> list[CartLine]:
    return [line for line in lines if line.cart_id != cart_id]


def update_quantity(lines: Sequence[CartLine], cart_id: str, quantity: int) -> list[CartLine]:
    """Set a line's quantity (capped at stock); zero or less removes the line."""
    if quantity <= 0:
        return remove_from_cart(lines, cart_id)
    return [
        replace(line, quantity=_cap_quantity(quantity, line.stock))
        if line.cart_id == cart_id
        else line
        for line in lines
    ]


def resolve_delivery_fee(
    method: DeliveryMethod,
    settings: StoreSettings,
    customer_fee: Decimal | None = None,
) -> Decimal:
    """
    Pickup is free; otherwise a customer-specific fee beats the store default.
    """
    if method == DeliveryMethod.PICKUP:
        return ZERO
    if customer_fee is not None:
        return customer_fee
    return settings.delivery_fee or ZERO


def compute_order_totals(
    lines: Sequence[CartLine],
    offers: Iterable[Offer],
    settings: StoreSettings,
    method: DeliveryMethod = DeliveryMethod.DELIVERY,
    now: datetime | None = None,
    customer_fee: Decimal | None = None,
) -> OrderTotals:
    """
    Subtotal, best discount, delivery fee and final total for a cart.

    The discount is evaluated on line totals that include extras.
    """
    subtotal = cart_subtotal(lines)
    result = select_best_discount(lines, offers, now=now, line_total=line_total_with_extras)
    delivery_fee = resolve_delivery_fee(method, settings, customer_fee)
    total = subtotal - result.discount_value + delivery_fee

    logger.debug(
        f"Order totals: subtotal={subtotal} discount={result.discount_value} "
        f"(offer={result.applied_offer_id}) delivery={delivery_fee} total={total}"
    )
    return OrderTotals(
        subtotal=subtotal,
        discount=result.discount_value,
        delivery_fee=delivery_fee,
        total=total,
        applied_offer_ids=result.applied_offer_ids,
    )
