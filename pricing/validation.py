"""
Catalog integrity checks.

The pricing functions never reject bad data: a negative cost gives a negative
price and a bundle pointing at a deleted item is silently under-priced. This
module is the separate pass that reports such records to catalog administrators.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from models.catalog import Bundle, Item
from models.pricing import StoreSettings
from models.promotions import FixedDiscount, Offer, PercentageDiscount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationIssue:
    record_id: str
    field: str
    message: str


def validate_item(item: Item) -> list[ValidationIssue]:
    issues = []
    if item.cost_basis <= 0:
        issues.append(ValidationIssue(item.product_id, "cost_basis", "Cost must be greater than zero."))
    if item.markup_percentage < 0:
        issues.append(
            ValidationIssue(item.product_id, "markup_percentage", "Markup cannot be negative.")
        )
    if item.stock < 0:
        issues.append(ValidationIssue(item.product_id, "stock", "Stock cannot be negative."))
    if not item.category:
        issues.append(ValidationIssue(item.product_id, "category", "A category is required."))
    return issues


def validate_bundle(bundle: Bundle, items: Mapping[str, Item]) -> list[ValidationIssue]:
    """Check a bundle's contents, including that every item reference resolves."""
    issues = []
    if not bundle.contents:
        issues.append(ValidationIssue(bundle.product_id, "contents", "Bundle has no contents."))
    for content in bundle.contents:
        if content.quantity < 1:
            issues.append(
                ValidationIssue(
                    bundle.product_id,
                    "contents",
                    f"Item {content.item_id} has quantity {content.quantity}; must be at least 1.",
                )
            )
        if content.item_id not in items:
            issues.append(
                ValidationIssue(
                    bundle.product_id,
                    "contents",
                    f"Item {content.item_id} does not exist; it is priced at zero.",
                )
            )
    if bundle.stock < 0:
        issues.append(ValidationIssue(bundle.product_id, "stock", "Stock cannot be negative."))
    return issues


def validate_offer(offer: Offer) -> list[ValidationIssue]:
    discount = offer.discount
    if isinstance(discount, PercentageDiscount) and not 0 <= discount.value <= 100:
        return [
            ValidationIssue(offer.offer_id, "discount.value", "Percentage must be between 0 and 100.")
        ]
    if isinstance(discount, FixedDiscount) and discount.value < 0:
        return [ValidationIssue(offer.offer_id, "discount.value", "Fixed discount cannot be negative.")]
    return []


def validate_settings(settings: StoreSettings) -> list[ValidationIssue]:
    if settings.exchange_rate.rate <= 0:
        return [ValidationIssue("settings", "exchange_rate", "Exchange rate must be greater than zero.")]
    return []


def validate_catalog(
    items: Iterable[Item],
    bundles: Iterable[Bundle] = (),
    offers: Iterable[Offer] = (),
    settings: StoreSettings | None = None,
) -> list[ValidationIssue]:
    """Run every check over a catalog snapshot and log each issue found."""
    item_list = list(items)
    item_index = {item.product_id: item for item in item_list}

    issues: list[ValidationIssue] = []
    for item in item_list:
        issues.extend(validate_item(item))
    for bundle in bundles:
        issues.extend(validate_bundle(bundle, item_index))
    for offer in offers:
        issues.extend(validate_offer(offer))
    if settings is not None:
        issues.extend(validate_settings(settings))

    for issue in issues:
        logger.warning(f"Catalog issue in {issue.record_id} ({issue.field}): {issue.message}")
    if not issues:
        logger.info(f"Catalog valid: {len(item_list)} items checked.")
    return issues
