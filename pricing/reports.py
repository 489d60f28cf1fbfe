"""
Catalog price list report built with pandas.
"""

from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from models.catalog import Bundle, Item
from models.pricing import StoreSettings

from .bundles import compute_bundle_price, index_items
from .unit_price import compute_sell_price

PRICE_LIST_COLUMNS = [
    "product_id",
    "product_type",
    "name",
    "category",
    "cost_basis",
    "markup_percentage",
    "sell_price",
    "stock",
]


def build_price_list(
    items: Iterable[Item], bundles: Iterable[Bundle], settings: StoreSettings
) -> pd.DataFrame:
    """
    One row per sellable product with its current display-currency sell price.

    Bundles have no cost basis or markup of their own, so those cells are empty.
    """
    item_list = list(items)
    item_index = index_items(item_list)

    rows = [
        {
            "product_id": item.product_id,
            "product_type": item.product_type.value,
            "name": item.name,
            "category": item.category,
            "cost_basis": item.cost_basis,
            "markup_percentage": item.markup_percentage,
            "sell_price": compute_sell_price(item, settings),
            "stock": item.stock,
        }
        for item in item_list
    ]
    rows.extend(
        {
            "product_id": bundle.product_id,
            "product_type": bundle.product_type.value,
            "name": bundle.name,
            "category": bundle.category,
            "cost_basis": None,
            "markup_percentage": None,
            "sell_price": compute_bundle_price(bundle, item_index, settings),
            "stock": bundle.stock,
        }
        for bundle in bundles
    )
    return pd.DataFrame(rows, columns=PRICE_LIST_COLUMNS)


def export_price_list_csv(frame: pd.DataFrame, path: str | Path) -> Path:
    """Write the price list to CSV and return the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=False)
    return path
