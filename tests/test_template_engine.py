"""Test formatting helpers and the shop renderer."""
from decimal import Decimal

from core.engine.template_engine import TemplateEngine, fmt_money, fmt_pct
from verticals.shop import renderer  # noqa: F401


def test_fmt_money():
    assert fmt_money(Decimal("50")) == "$50"
    assert fmt_money(Decimal("19.5")) == "$19.50"
    assert fmt_money(1200, currency="€") == "€1,200"
    assert fmt_money(None) == "N/A"


def test_fmt_pct():
    assert fmt_pct(20) == "20%"
    assert fmt_pct(Decimal("7.5")) == "7.5%"
    assert fmt_pct(None) == "N/A"


def test_shop_renderer_registered():
    assert "shop" in TemplateEngine.list_verticals()


def test_render_discount_notice():
    text = TemplateEngine.render(
        "discount",
        {
            "message": "Instant 10% discount applied to this purchase!",
            "customer_id": "cust-002",
            "discount_percentage": 10,
            "applied_immediately": True,
        },
        vertical="shop",
    )
    assert text.splitlines() == [
        "Instant 10% discount applied to this purchase!",
        "   Customer: cust-002",
        "   Discount: 10%",
        "   Applied: Immediately",
        "---",
    ]


def test_render_next_purchase():
    text = TemplateEngine.render(
        "discount",
        {"message": "m", "customer_id": "c", "discount_percentage": 5, "applied_immediately": False},
        vertical="shop",
    )
    assert "   Applied: Next Purchase" in text


def test_render_no_match():
    text = TemplateEngine.render("no_match", {}, vertical="shop")
    assert text == "No rules matched for this purchase."


def test_unknown_vertical_falls_back_to_generic():
    text = TemplateEngine.render("discount", {"customer_id": "c", "_hidden": 1}, vertical="nope")
    assert text.splitlines() == ["[discount]", "   customer_id: c"]
