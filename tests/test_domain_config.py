"""Test shop configuration defaults and env overrides."""
from decimal import Decimal

from patterns.domain_config import ShopConfig


def test_defaults_match_discount_table():
    config = ShopConfig.default()
    assert config.thresholds.big_spender_total == Decimal("500")
    assert config.thresholds.weekly_spender_total == Decimal("100")
    assert config.thresholds.daily_big_purchase == Decimal("200")
    assert config.thresholds.small_purchase_ceiling == Decimal("100")
    assert config.percentages.big_spender == 20
    assert config.percentages.weekly_spender == 5
    assert config.percentages.daily_big_purchase == 10
    assert config.weekly_window.window_days == 7


def test_from_env_without_variables_is_default(monkeypatch):
    for name in ("BIG_SPENDER_TOTAL", "WEEKLY_SPENDER_TOTAL", "DAILY_BIG_PURCHASE",
                 "WEEKLY_WINDOW_DAYS", "CURRENCY", "LOG_LEVEL"):
        monkeypatch.delenv(f"SHOP_{name}", raising=False)
    assert ShopConfig.from_env() == ShopConfig.default()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("SHOP_BIG_SPENDER_TOTAL", "750")
    monkeypatch.setenv("SHOP_WEEKLY_WINDOW_DAYS", "14")
    monkeypatch.setenv("SHOP_CURRENCY", "€")
    monkeypatch.setenv("SHOP_LOG_LEVEL", "debug")
    config = ShopConfig.from_env()
    assert config.thresholds.big_spender_total == Decimal("750")
    assert config.thresholds.weekly_spender_total == Decimal("100")
    assert config.weekly_window.window_days == 14
    assert config.currency == "€"
    assert config.log_level == "DEBUG"


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("PROMO_DAILY_BIG_PURCHASE", "300")
    config = ShopConfig.from_env(prefix="PROMO_")
    assert config.thresholds.daily_big_purchase == Decimal("300")
