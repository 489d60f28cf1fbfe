"""
Module: connectors.dummy_catalog

Provides a dummy in-memory catalog store (items, bundles, extras, offers and
store settings) standing in for the remote document database.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

from models.catalog import Bundle, BundleContent, ExtraItem, Item
from models.pricing import ExchangeRate, StoreSettings
from models.promotions import Offer, as_utc

logger = logging.getLogger(__name__)


def _in_days(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


class DummyCatalog:
    """
    Dummy catalog connector for demonstration and testing purposes.
    """

    _items = {
        "I1": Item("I1", "Rice 1kg", "food", Decimal("1.20"), Decimal("25"), stock=40),
        "I2": Item("I2", "Cooking Oil 1L", "food", Decimal("2.50"), Decimal("20"), stock=25),
        "I3": Item("I3", "Sugar 1kg", "food", Decimal("0.90"), Decimal("30"), stock=60),
        "I4": Item("I4", "Dish Soap", "household", Decimal("1.10"), Decimal("35"), stock=0),
    }
    _bundles = {
        "B1": Bundle(
            "B1",
            "Pantry Basket",
            "baskets",
            contents=(BundleContent("I1", 2), BundleContent("I2", 1), BundleContent("I3", 2)),
            stock=10,
            available_extras=("E1", "E2"),
        ),
        "B2": Bundle(
            "B2",
            "Cleaning Basket",
            "baskets",
            contents=(BundleContent("I4", 3), BundleContent("I_DELETED", 1)),
            stock=5,
        ),
    }
    _extras = {
        "E1": ExtraItem("E1", "Gift wrap", Decimal("200")),
        "E2": ExtraItem("E2", "Greeting card", Decimal("150")),
    }
    # Offers are kept as raw documents, the way the store returns them.
    _offer_documents: list[dict[str, Any]] = [
        {
            "offer_id": "O1",
            "title": "10% off food",
            "expires_at": _in_days(7),
            "discount": {"kind": "percentage", "scope": "category", "target": "food", "value": 10},
        },
        {
            "offer_id": "O2",
            "title": "1000 off any basket order",
            "expires_at": _in_days(3),
            "discount": {"kind": "fixed", "scope": "category", "target": "baskets", "value": 1000},
        },
        {
            "offer_id": "O3",
            "title": "Buy 3 rice, get 1 free",
            "expires_at": _in_days(14),
            "discount": {"kind": "buyXgetY", "target": "I1", "buy_quantity": 3, "get_quantity": 1},
        },
        {
            "offer_id": "O4",
            "title": "Last season sale",
            "expires_at": _in_days(-1),
            "discount": {"kind": "percentage", "scope": "all", "value": 50},
        },
        {"offer_id": "O5", "title": "Banner only", "expires_at": _in_days(30)},
    ]
    _settings = StoreSettings(
        exchange_rate=ExchangeRate(Decimal("450")),
        delivery_fee=Decimal("500"),
    )

    async def get_item(self, item_id: str) -> Item | None:
        """Get an item by ID."""
        await asyncio.sleep(0.01)
        return self._items.get(item_id)

    async def get_items(self) -> list[Item]:
        await asyncio.sleep(0.01)
        return list(self._items.values())

    async def resolve_items(self, item_ids: list[str]) -> dict[str, Item]:
        """Fetch the items for the given IDs; unknown IDs are left out."""
        await asyncio.sleep(0.01)
        found = {iid: self._items[iid] for iid in item_ids if iid in self._items}
        missing = set(item_ids) - set(found)
        if missing:
            logger.warning(f"DUMMY: Unknown item ids requested: {sorted(missing)}")
        return found

    async def get_bundle(self, bundle_id: str) -> Bundle | None:
        """Get a bundle by ID."""
        await asyncio.sleep(0.01)
        return self._bundles.get(bundle_id)

    async def get_bundles(self) -> list[Bundle]:
        await asyncio.sleep(0.01)
        return list(self._bundles.values())

    async def get_extras(self, extra_ids: list[str] | None = None) -> list[ExtraItem]:
        """Get extras, optionally restricted to the given IDs."""
        await asyncio.sleep(0.01)
        if extra_ids is None:
            return list(self._extras.values())
        return [self._extras[eid] for eid in extra_ids if eid in self._extras]

    async def get_active_offers(self, now: datetime | None = None) -> list[Offer]:
        """Get offers expiring after now, parsed from their stored documents."""
        await asyncio.sleep(0.01)
        now = now or datetime.now(timezone.utc)
        offers = [Offer.model_validate(doc) for doc in self._offer_documents]
        return [offer for offer in offers if as_utc(offer.expires_at) > as_utc(now)]

    async def get_settings(self) -> StoreSettings:
        await asyncio.sleep(0.01)
        return self._settings
