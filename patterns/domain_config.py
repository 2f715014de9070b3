"""Dataclass-based domain configuration pattern.

Each vertical defines its thresholds, limits, and flags as a frozen
dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values (sensible out-of-the-box)
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides (from env vars)

Example domain: a shop with discount thresholds and a weekly spend window.
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiscountThresholds:
    """Purchase amounts that trigger each discount rule."""

    big_spender_total: Decimal = Decimal("500")  # lifetime total, exclusive
    weekly_spender_total: Decimal = Decimal("100")  # inclusive
    daily_big_purchase: Decimal = Decimal("200")  # inclusive
    small_purchase_ceiling: Decimal = Decimal("100")  # exclusive


@dataclass(frozen=True)
class DiscountPercentages:
    """Discount granted by each rule."""

    big_spender: int = 20
    weekly_spender: int = 5
    daily_big_purchase: int = 10


@dataclass(frozen=True)
class WeeklyWindowConfig:
    """Single-bucket rolling spend window."""

    window_days: int = 7


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ShopConfig:
    """Complete configuration for the shop vertical.

    Usage::

        config = ShopConfig.default()
        if facts.total_purchases > config.thresholds.big_spender_total:
            grant_discount(config.percentages.big_spender)
    """

    thresholds: DiscountThresholds = field(default_factory=DiscountThresholds)
    percentages: DiscountPercentages = field(default_factory=DiscountPercentages)
    weekly_window: WeeklyWindowConfig = field(default_factory=WeeklyWindowConfig)

    currency: str = "$"
    log_level: str = "INFO"

    @classmethod
    def default(cls) -> "ShopConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "SHOP_") -> "ShopConfig":
        """Create config from environment variables.

        Example: SHOP_BIG_SPENDER_TOTAL=750 SHOP_WEEKLY_WINDOW_DAYS=14
        """
        defaults = DiscountThresholds()
        thresholds = DiscountThresholds(
            big_spender_total=_env_decimal(
                f"{prefix}BIG_SPENDER_TOTAL", defaults.big_spender_total
            ),
            weekly_spender_total=_env_decimal(
                f"{prefix}WEEKLY_SPENDER_TOTAL", defaults.weekly_spender_total
            ),
            daily_big_purchase=_env_decimal(
                f"{prefix}DAILY_BIG_PURCHASE", defaults.daily_big_purchase
            ),
            small_purchase_ceiling=defaults.small_purchase_ceiling,
        )

        overrides = {"thresholds": thresholds}
        window_days = os.getenv(f"{prefix}WEEKLY_WINDOW_DAYS")
        if window_days:
            overrides["weekly_window"] = WeeklyWindowConfig(window_days=int(window_days))
        currency = os.getenv(f"{prefix}CURRENCY")
        if currency:
            overrides["currency"] = currency
        log_level = os.getenv(f"{prefix}LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        return cls(**overrides)


def _env_decimal(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    return Decimal(raw) if raw else default
