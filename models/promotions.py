"""
Promotional offer models.

Offers arrive as documents from the catalog store, so they are Pydantic models.
A discount is a tagged union on the ``kind`` field; each variant carries only
the fields that make sense for it.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import DiscountScope


class PercentageDiscount(BaseModel):
    """Percent off the discountable amount (value is 0-100)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["percentage"] = "percentage"
    scope: DiscountScope = DiscountScope.ALL
    target: str | None = None  # category name or product id, per scope
    value: Decimal


class FixedDiscount(BaseModel):
    """Fixed display-currency amount off, capped at the discountable amount."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    scope: DiscountScope = DiscountScope.ALL
    target: str | None = None
    value: Decimal


class BuyXGetYDiscount(BaseModel):
    """get_quantity free units of a product for every buy_quantity bought."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["buyXgetY"] = "buyXgetY"
    target: str
    buy_quantity: int = Field(ge=1)
    get_quantity: int = Field(default=1, ge=1)


Discount = Annotated[
    Union[PercentageDiscount, FixedDiscount, BuyXGetYDiscount],
    Field(discriminator="kind"),
]


class Offer(BaseModel):
    """A time-bounded promotional record, optionally carrying a discount."""

    model_config = ConfigDict(frozen=True)

    offer_id: str
    title: str = ""
    expires_at: datetime
    discount: Optional[Discount] = None


@dataclass(frozen=True)
class DiscountResult:
    """Outcome of discount selection: at most one offer ever applies."""

    discount_value: Decimal = Decimal("0")
    applied_offer_id: str | None = None

    @property
    def applied_offer_ids(self) -> list[str]:
        return [self.applied_offer_id] if self.applied_offer_id else []


def as_utc(moment: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware ones are returned unchanged."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def end_of_day(day: date) -> datetime:
    """Expiry instant for an offer that runs through the given calendar day (UTC)."""
    return datetime.combine(day, time.max, tzinfo=timezone.utc)
