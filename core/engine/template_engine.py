"""Template Engine — formats notification payloads into human-readable text.

Each vertical registers its own renderer function; the engine dispatches
based on the vertical name. A generic fallback handles any unregistered
vertical.

This is useful for:
- Deterministic testing (plain strings, no console coupling)
- Swapping the sink (console, log, email) without touching the rules
"""

from decimal import Decimal
from typing import Any, Callable, Dict, Optional


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_money(value: Decimal | float | int | None, currency: str = "$") -> str:
    """Format a number as currency, dropping a zero fractional part."""
    if value is None:
        return "N/A"
    if value == int(value):
        return f"{currency}{int(value):,}"
    return f"{currency}{value:,.2f}"


def fmt_pct(value: Decimal | float | int | None) -> str:
    """Format a number as a percentage."""
    if value is None:
        return "N/A"
    if value == int(value):
        return f"{int(value)}%"
    return f"{value:.1f}%"


# ---------------------------------------------------------------------------
# Generic fallback renderer
# ---------------------------------------------------------------------------

def render_generic(kind: str, payload: Dict[str, Any]) -> str:
    """Generic fallback renderer for any notification payload.

    Produces one `key: value` line per public key.
    """
    lines = [f"[{kind}]"]
    for key, value in payload.items():
        if key.startswith("_"):
            continue
        lines.append(f"   {key}: {value}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Renderer type and registry
# ---------------------------------------------------------------------------

VerticalRenderer = Callable[[str, Dict[str, Any]], str]

_VERTICAL_RENDERERS: Dict[str, VerticalRenderer] = {}


def register_renderer(vertical: str, renderer: VerticalRenderer) -> None:
    """Register a vertical-specific renderer.

    Example::

        def render_shop(kind, payload):
            if kind == "discount":
                ...
            return render_generic(kind, payload)

        register_renderer("shop", render_shop)
    """
    _VERTICAL_RENDERERS[vertical] = renderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class TemplateEngine:
    """Formats notification payloads into text.

    Usage::

        engine = TemplateEngine()
        text = engine.render(
            kind="discount",
            payload={"message": "...", "customer_id": "cust-001"},
            vertical="shop",
        )
    """

    @staticmethod
    def render(
        kind: str,
        payload: Dict[str, Any],
        vertical: Optional[str] = None,
    ) -> str:
        """Render a payload into a human-readable string.

        Args:
            kind: Notification kind (e.g. "discount", "no_match").
            payload: Values to render.
            vertical: The vertical whose renderer should be used.

        Returns:
            Rendered text.
        """
        renderer = _VERTICAL_RENDERERS.get(vertical) if vertical else None
        if renderer is None:
            return render_generic(kind, payload)
        return renderer(kind, payload)

    @staticmethod
    def list_verticals() -> list[str]:
        """Return list of verticals with registered renderers."""
        return list(_VERTICAL_RENDERERS.keys())
