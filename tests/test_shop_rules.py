"""Test the four shop discount rules."""
from decimal import Decimal

import pytest
from patterns.rules_engine import RuleEvaluationError
from verticals.shop.models import FactSet
from verticals.shop.rules import DiscountRules, DiscountType, build_rule_set


def _facts(total, weekly, current):
    return FactSet(
        customer_id="cust-001",
        total_purchases=Decimal(total),
        weekly_purchases=Decimal(weekly),
        current_purchase_amount=Decimal(current),
    )


def _types(outcomes):
    return [o.discount_type for o in outcomes]


def test_rule_set_priorities():
    rules = build_rule_set()
    assert [(r.name, r.priority) for r in rules.rules] == [
        ("big-spender-discount", 1),
        ("weekly-spender-discount", 2),
        ("daily-big-purchase-discount", 3),
        ("no-discount", 4),
    ]


def test_small_purchase_only_no_discount():
    outcomes = DiscountRules().evaluate(_facts(50, 50, 50))
    assert _types(outcomes) == [DiscountType.NO_DISCOUNT.value]
    assert outcomes[0].discount_percentage == 0
    assert outcomes[0].message == "No discount available for this purchase."


def test_big_spender_is_exclusive_threshold():
    assert _types(DiscountRules().evaluate(_facts(500, 50, 50))) == ["no-discount"]
    outcomes = DiscountRules().evaluate(_facts("500.01", 50, 50))
    assert _types(outcomes) == ["big-spender-discount"]
    assert outcomes[0].discount_percentage == 20
    assert not outcomes[0].applied_immediately


def test_weekly_spender_is_inclusive_threshold():
    outcomes = DiscountRules().evaluate(_facts(100, 100, 50))
    assert _types(outcomes) == ["weekly-spender-discount"]
    assert outcomes[0].discount_percentage == 5
    assert outcomes[0].message == "Great weekly shopping! 5% off your next purchase!"


def test_daily_big_purchase_applied_immediately():
    outcomes = DiscountRules().evaluate(_facts(0, 0, 200))
    assert "daily-big-purchase-discount" in _types(outcomes)
    daily = outcomes[_types(outcomes).index("daily-big-purchase-discount")]
    assert daily.discount_percentage == 10
    assert daily.applied_immediately
    assert daily.purchase_amount == Decimal("200")


def test_multiple_rules_fire_in_priority_order():
    outcomes = DiscountRules().evaluate(_facts(550, 550, 300))
    assert _types(outcomes) == [
        "big-spender-discount",
        "weekly-spender-discount",
        "daily-big-purchase-discount",
    ]
    assert all(o.customer_id == "cust-001" for o in outcomes)


@pytest.mark.parametrize("total,weekly,current", [
    ("101", "99", "100"),
    ("200", "50", "150"),
    ("500", "99", "199.99"),
])
def test_coverage_gap_matches_nothing(total, weekly, current):
    assert DiscountRules().evaluate(_facts(total, weekly, current)) == []


def test_missing_fact_raises():
    class Broken(FactSet):
        def as_facts(self):
            return {"customer_id": self.customer_id}

    broken = Broken("cust-001", Decimal(0), Decimal(0), Decimal(0))
    with pytest.raises(RuleEvaluationError):
        DiscountRules().evaluate(broken)
