import logging
from decimal import Decimal

from models.catalog import Bundle, BundleContent
from pricing.bundles import index_items
from pricing.validation import (
    ValidationIssue,
    validate_bundle,
    validate_catalog,
    validate_item,
    validate_offer,
    validate_settings,
)
from tests.factories import make_item, make_offer, make_settings


def test_valid_item_has_no_issues():
    assert validate_item(make_item(cost="1.5", markup="20", stock=3)) == []


def test_invalid_item_reports_every_field():
    item = make_item("BAD", cost="0", markup="-5", category="", stock=-1)
    fields = [issue.field for issue in validate_item(item)]
    assert fields == ["cost_basis", "markup_percentage", "stock", "category"]


def test_bundle_with_dangling_reference():
    items = index_items([make_item("A")])
    bundle = Bundle("B1", "Basket", "baskets", contents=(BundleContent("A", 1), BundleContent("GONE", 2)))
    issues = validate_bundle(bundle, items)
    assert len(issues) == 1
    assert issues[0].record_id == "B1"
    assert "GONE" in issues[0].message


def test_bundle_with_no_contents_or_bad_quantity():
    items = index_items([make_item("A")])
    assert validate_bundle(Bundle("B1", "Empty", "baskets"), items)[0].field == "contents"
    zero_qty = Bundle("B2", "Zero", "baskets", contents=(BundleContent("A", 0),))
    assert "quantity 0" in validate_bundle(zero_qty, items)[0].message


def test_offer_value_ranges():
    assert validate_offer(make_offer("P", {"kind": "percentage", "scope": "all", "value": 100})) == []
    assert validate_offer(make_offer("P", {"kind": "percentage", "scope": "all", "value": 120}))[0].record_id == "P"
    assert validate_offer(make_offer("F", {"kind": "fixed", "scope": "all", "value": -1}))[0].field == "discount.value"
    assert validate_offer(make_offer("N", None)) == []


def test_settings_rate_must_be_positive():
    assert validate_settings(make_settings("450")) == []
    assert validate_settings(make_settings("0")) == [
        ValidationIssue("settings", "exchange_rate", "Exchange rate must be greater than zero.")
    ]


def test_validate_catalog_logs_each_issue(caplog):
    items = [make_item("A"), make_item("BAD", cost="-1")]
    bundles = [Bundle("B1", "Basket", "baskets", contents=(BundleContent("MISSING", 1),))]
    with caplog.at_level(logging.WARNING, logger="pricing.validation"):
        issues = validate_catalog(items, bundles, settings=make_settings())
    assert {issue.record_id for issue in issues} == {"BAD", "B1"}
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_validate_catalog_clean():
    assert validate_catalog([make_item("A", cost=Decimal("2"))]) == []
