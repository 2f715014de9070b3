"""Template engine renderer for the shop vertical.

Registers a shop-specific renderer that turns discount outcomes into the
console notice shown to the shopper.
"""

from typing import Any, Dict

from core.engine.template_engine import fmt_pct, render_generic, register_renderer

NO_MATCH_TEXT = "No rules matched for this purchase."


def render_shop(kind: str, payload: Dict[str, Any]) -> str:
    """Render shop notifications into text."""
    if kind == "discount":
        applied = "Immediately" if payload["applied_immediately"] else "Next Purchase"
        lines = [
            payload["message"],
            f"   Customer: {payload['customer_id']}",
            f"   Discount: {fmt_pct(payload['discount_percentage'])}",
            f"   Applied: {applied}",
            "---",
        ]
        return "\n".join(lines)

    if kind == "no_match":
        return NO_MATCH_TEXT

    return render_generic(kind, payload)


# Auto-register on import
register_renderer("shop", render_shop)
