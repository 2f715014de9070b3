"""Shop discount rules.

Four static threshold rules built on the rules engine pattern. Each rule is
checked against the full fact set, so one purchase can earn several
discounts. Some fact sets (for example total 200, current 150, weekly 50)
match no rule at all; that gap is kept as-is. The purchase pipeline never
produces such a set with the default thresholds, since the weekly bucket
always holds at least the current amount.
"""

from enum import Enum

from patterns.domain_config import ShopConfig
from patterns.rules_engine import Condition, Operator, Rule, RuleOutcome, RuleSet
from verticals.shop.models.domain import DiscountOutcome, FactSet


class DiscountType(str, Enum):
    BIG_SPENDER = "big-spender-discount"
    WEEKLY_SPENDER = "weekly-spender-discount"
    DAILY_BIG_PURCHASE = "daily-big-purchase-discount"
    NO_DISCOUNT = "no-discount"


def build_rule_set(config: ShopConfig | None = None) -> RuleSet:
    """Build the four discount rules from configured thresholds."""
    config = config or ShopConfig.default()
    limits = config.thresholds
    pct = config.percentages

    return RuleSet([
        Rule(
            name=DiscountType.BIG_SPENDER.value,
            priority=1,
            conditions=(
                Condition("total_purchases", Operator.GREATER_THAN, limits.big_spender_total),
            ),
            outcome=RuleOutcome(
                event_type=DiscountType.BIG_SPENDER.value,
                discount_percentage=pct.big_spender,
                applied_immediately=False,
                message=f"Congratulations! You qualify for {pct.big_spender}% off your next purchase!",
            ),
        ),
        Rule(
            name=DiscountType.WEEKLY_SPENDER.value,
            priority=2,
            conditions=(
                Condition("weekly_purchases", Operator.GREATER_THAN_INCLUSIVE, limits.weekly_spender_total),
            ),
            outcome=RuleOutcome(
                event_type=DiscountType.WEEKLY_SPENDER.value,
                discount_percentage=pct.weekly_spender,
                applied_immediately=False,
                message=f"Great weekly shopping! {pct.weekly_spender}% off your next purchase!",
            ),
        ),
        Rule(
            name=DiscountType.DAILY_BIG_PURCHASE.value,
            priority=3,
            conditions=(
                Condition("current_purchase_amount", Operator.GREATER_THAN_INCLUSIVE, limits.daily_big_purchase),
            ),
            outcome=RuleOutcome(
                event_type=DiscountType.DAILY_BIG_PURCHASE.value,
                discount_percentage=pct.daily_big_purchase,
                applied_immediately=True,
                message=f"Instant {pct.daily_big_purchase}% discount applied to this purchase!",
            ),
        ),
        Rule(
            name=DiscountType.NO_DISCOUNT.value,
            priority=4,
            conditions=(
                Condition("current_purchase_amount", Operator.LESS_THAN, limits.small_purchase_ceiling),
                Condition("total_purchases", Operator.LESS_THAN_INCLUSIVE, limits.big_spender_total),
                Condition("weekly_purchases", Operator.LESS_THAN, limits.weekly_spender_total),
            ),
            outcome=RuleOutcome(
                event_type=DiscountType.NO_DISCOUNT.value,
                discount_percentage=0,
                applied_immediately=False,
                message="No discount available for this purchase.",
            ),
        ),
    ])


class DiscountRules:
    """Turns a fact set into discount outcomes, one per matching rule."""

    def __init__(self, rule_set: RuleSet | None = None, config: ShopConfig | None = None):
        self.rule_set = rule_set if rule_set is not None else build_rule_set(config)

    def evaluate(self, fact_set: FactSet) -> list[DiscountOutcome]:
        """Return outcomes in priority order; empty when nothing matched.

        Raises RuleEvaluationError if a rule cannot be evaluated.
        """
        result = self.rule_set.evaluate(fact_set.as_facts())
        return [
            DiscountOutcome(
                customer_id=fact_set.customer_id,
                discount_type=match.outcome.event_type,
                discount_percentage=match.outcome.discount_percentage,
                purchase_amount=fact_set.current_purchase_amount,
                applied_immediately=match.outcome.applied_immediately,
                message=match.outcome.message,
            )
            for match in result.matched
        ]
