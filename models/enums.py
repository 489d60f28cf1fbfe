"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class ProductType(str, Enum):
    """Kinds of sellable catalog products"""

    ITEM = "item"
    BUNDLE = "bundle"


class DiscountScope(str, Enum):
    """Which cart lines a percentage or fixed discount applies to"""

    ALL = "all"
    CATEGORY = "category"  # target is a category name
    PRODUCT = "product"  # target is an item or bundle id


class DeliveryMethod(str, Enum):
    """How an order reaches the customer"""

    DELIVERY = "delivery"
    PICKUP = "pickup"
