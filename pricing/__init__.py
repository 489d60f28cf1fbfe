"""Pricing and promotional discount engine for the retail catalog"""

from .unit_price import compute_sell_price, round_to_step
from .bundles import (
    compute_bundle_price,
    compute_store_product_price,
    index_items,
)
from .discounts import select_best_discount, is_offer_active
from .cart import (
    add_to_cart,
    build_cart_line,
    cart_subtotal,
    compute_order_totals,
    line_total_with_extras,
    remove_from_cart,
    resolve_delivery_fee,
    update_quantity,
)
from .validation import ValidationIssue, validate_catalog
from .reports import build_price_list, export_price_list_csv


__all__ = [
    # Unit prices
    "compute_sell_price",
    "round_to_step",
    # Bundles
    "compute_bundle_price",
    "compute_store_product_price",
    "index_items",
    # Discounts
    "select_best_discount",
    "is_offer_active",
    # Cart
    "add_to_cart",
    "build_cart_line",
    "cart_subtotal",
    "compute_order_totals",
    "line_total_with_extras",
    "remove_from_cart",
    "resolve_delivery_fee",
    "update_quantity",
    # Validation
    "ValidationIssue",
    "validate_catalog",
    # Reports
    "build_price_list",
    "export_price_list_csv",
]
