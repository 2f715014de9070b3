"""Console listener for discount notifications."""

import dataclasses
import sys
from typing import TextIO

from core.engine.template_engine import TemplateEngine
from verticals.shop import renderer  # noqa: F401  registers the "shop" renderer
from verticals.shop.models.domain import DiscountOutcome, FactSet


class ConsoleNotifier:
    """Writes rendered notices to a text stream (stdout unless given)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def on_discount(self, outcome: DiscountOutcome, message: str) -> None:
        payload = dataclasses.asdict(outcome)
        payload["message"] = message
        self._write(TemplateEngine.render("discount", payload, vertical="shop"))

    def on_no_match(self, fact_set: FactSet) -> None:
        self._write(TemplateEngine.render("no_match", fact_set.as_facts(), vertical="shop"))

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
