from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from models.enums import DiscountScope
from models.promotions import (
    BuyXGetYDiscount,
    DiscountResult,
    FixedDiscount,
    Offer,
    PercentageDiscount,
    as_utc,
    end_of_day,
)


def test_offer_document_parses_discount_variant():
    offer = Offer.model_validate(
        {
            "offer_id": "A",
            "title": "Food week",
            "expires_at": "2024-06-30T23:59:59Z",
            "discount": {"kind": "percentage", "scope": "category", "target": "food", "value": "12.5"},
        }
    )
    assert isinstance(offer.discount, PercentageDiscount)
    assert offer.discount.scope == DiscountScope.CATEGORY
    assert offer.discount.value == Decimal("12.5")
    assert offer.expires_at.tzinfo is not None


def test_buy_x_get_y_defaults_and_bounds():
    discount = BuyXGetYDiscount(target="p1", buy_quantity=2)
    assert discount.get_quantity == 1
    with pytest.raises(ValidationError):
        BuyXGetYDiscount(target="p1", buy_quantity=0)


def test_unknown_kind_is_rejected():
    with pytest.raises(ValidationError):
        Offer.model_validate(
            {"offer_id": "A", "expires_at": "2024-06-30T00:00:00Z", "discount": {"kind": "coupon", "value": 5}}
        )


def test_variant_fields_do_not_mix():
    with pytest.raises(ValidationError):
        # a buyXgetY discount needs a target product and buy quantity
        Offer.model_validate(
            {"offer_id": "A", "expires_at": "2024-06-30T00:00:00Z", "discount": {"kind": "buyXgetY", "value": 5}}
        )


def test_offer_without_discount():
    offer = Offer(offer_id="banner", expires_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert offer.discount is None


def test_discount_models_are_frozen():
    discount = FixedDiscount(value=Decimal("10"))
    with pytest.raises(ValidationError):
        discount.value = Decimal("20")


def test_discount_result_defaults():
    result = DiscountResult()
    assert result.discount_value == 0
    assert result.applied_offer_ids == []
    assert DiscountResult(Decimal("5"), "A").applied_offer_ids == ["A"]


def test_end_of_day():
    expiry = end_of_day(date(2024, 6, 30))
    assert expiry == datetime(2024, 6, 30, 23, 59, 59, 999999, tzinfo=timezone.utc)


def test_as_utc():
    naive = datetime(2024, 6, 1, 12, 0)
    assert as_utc(naive) == datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    aware = datetime(2024, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert as_utc(aware) is aware
