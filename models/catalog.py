"""
Catalog data models for the retail pricing engine.
Includes Item, BundleContent, Bundle and ExtraItem dataclasses.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Union

from models.enums import ProductType


@dataclass(frozen=True)
class Item:
    """
    A single catalog item priced from its cost basis.

    cost_basis is in the base currency; markup_percentage is added on top of the
    converted cost (25 means +25%).
    """

    product_id: str
    name: str
    category: str
    cost_basis: Decimal
    markup_percentage: Decimal = Decimal("0")
    stock: int = 0

    product_type: ClassVar[ProductType] = ProductType.ITEM


@dataclass(frozen=True)
class BundleContent:
    """One line of a bundle: an item reference and how many units it holds."""

    item_id: str
    quantity: int = 1


@dataclass(frozen=True)
class Bundle:
    """
    A named, fixed-quantity group of items sold as one product.
    """

    product_id: str
    name: str
    category: str
    contents: tuple[BundleContent, ...] = ()
    stock: int = 0
    available_extras: tuple[str, ...] = ()

    product_type: ClassVar[ProductType] = ProductType.BUNDLE

    def item_ids(self) -> list[str]:
        """Return the referenced item ids in content order."""
        return [content.item_id for content in self.contents]


@dataclass(frozen=True)
class ExtraItem:
    """Add-on with a fixed price already in the display currency."""

    extra_id: str
    name: str
    price: Decimal


StoreProduct = Union[Item, Bundle]
