"""
Promotional discount selection.

Every active offer is evaluated against the cart and the single most valuable
one wins. Offers never stack.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone
from decimal import Decimal
from functools import reduce

from models.cart import CartLine
from models.enums import DiscountScope
from models.promotions import (
    BuyXGetYDiscount,
    DiscountResult,
    FixedDiscount,
    Offer,
    PercentageDiscount,
    as_utc,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

LineTotal = Callable[[CartLine], Decimal]


def bare_line_total(line: CartLine) -> Decimal:
    """Unit price times quantity, extras ignored."""
    return line.unit_price * line.quantity


def is_offer_active(offer: Offer, now: datetime) -> bool:
    """An offer is active when it carries a discount and expires strictly after now."""
    return offer.discount is not None and as_utc(offer.expires_at) > as_utc(now)


def discountable_amount(
    discount: PercentageDiscount | FixedDiscount,
    lines: Sequence[CartLine],
    line_total: LineTotal,
    subtotal: Decimal,
) -> Decimal:
    """Total of the cart lines a percentage or fixed discount covers."""
    if discount.scope == DiscountScope.ALL:
        return subtotal
    if discount.scope == DiscountScope.CATEGORY:
        matching = [line for line in lines if line.category == discount.target]
    elif discount.scope == DiscountScope.PRODUCT:
        matching = [line for line in lines if line.product_id == discount.target]
    else:
        raise ValueError(f"Unknown discount scope: {discount.scope!r}")
    return sum((line_total(line) for line in matching), ZERO)


def buy_x_get_y_value(discount: BuyXGetYDiscount, lines: Sequence[CartLine]) -> Decimal:
    """
    Value of the free units earned on the first line for the target product.

    Only the bare unit price is given away; extras on free units are still paid.
    """
    line = next((line for line in lines if line.product_id == discount.target), None)
    if line is None or line.quantity < discount.buy_quantity:
        return ZERO
    applications = line.quantity // discount.buy_quantity
    free_units = applications * discount.get_quantity
    return free_units * line.unit_price


def compute_discount_value(
    discount: PercentageDiscount | FixedDiscount | BuyXGetYDiscount,
    lines: Sequence[CartLine],
    line_total: LineTotal,
    subtotal: Decimal,
) -> Decimal:
    """Candidate value a single discount would produce for the cart."""
    if isinstance(discount, BuyXGetYDiscount):
        return buy_x_get_y_value(discount, lines)

    if isinstance(discount, (PercentageDiscount, FixedDiscount)):
        amount = discountable_amount(discount, lines, line_total, subtotal)
        if not amount > 0:
            return ZERO
        if isinstance(discount, PercentageDiscount):
            return amount * (discount.value / HUNDRED)
        return min(discount.value, amount)

    raise TypeError(f"Unsupported discount type: {type(discount).__name__}")


def _keep_greater(
    best: tuple[Decimal, Offer], current: tuple[Decimal, Offer]
) -> tuple[Decimal, Offer]:
    # strict > so that on a tie the earlier offer stays
    return current if current[0] > best[0] else best


def select_best_discount(
    cart_lines: Iterable[CartLine],
    offers: Iterable[Offer],
    now: datetime | None = None,
    line_total: LineTotal | None = None,
) -> DiscountResult:
    """
    Pick the single most valuable discount among the active offers.

    Args:
        cart_lines: Lines with resolved unit prices.
        offers: Candidate offers, in priority order for tie-breaking.
        now: Reference instant for expiry checks (defaults to the current UTC time).
        line_total: How a line contributes to the discountable amount
            (defaults to unit price times quantity).

    Returns:
        The winning discount value and offer id, or a zero result with no offer.
    """
    line_total = line_total or bare_line_total
    now = now or datetime.now(timezone.utc)

    lines = list(cart_lines)
    subtotal = sum((line_total(line) for line in lines), ZERO)
    active_offers = [offer for offer in offers if is_offer_active(offer, now)]

    if not active_offers or not lines:
        return DiscountResult()

    candidates = [
        (compute_discount_value(offer.discount, lines, line_total, subtotal), offer)
        for offer in active_offers
    ]
    eligible = [candidate for candidate in candidates if candidate[0] > 0]
    if not eligible:
        return DiscountResult()

    value, offer = reduce(_keep_greater, eligible)
    return DiscountResult(discount_value=value, applied_offer_id=offer.offer_id)
