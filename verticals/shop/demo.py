"""Shopping discount demo.

Registers two customers and replays five purchases one after another::

    python -m verticals.shop.demo
"""

import logging
import sys
from typing import TextIO

from core.observability.logging_setup import setup_logging
from patterns.domain_config import ShopConfig
from verticals.shop.engine import ShopEngine
from verticals.shop.models.schemas import CustomerRegistration

logger = logging.getLogger(__name__)

# (customer id, name)
DEMO_CUSTOMERS = [
    ("cust-001", "Alice Johnson"),
    ("cust-002", "Bob Smith"),
]

# (title, customer id, amount)
DEMO_PURCHASES = [
    ("Test 1: Small purchase ($50)", "cust-001", 50),
    ("Test 2: Medium purchase ($150)", "cust-001", 150),
    ("Test 3: Large single purchase ($250)", "cust-002", 250),
    ("Test 4: Another purchase pushing total over $500", "cust-001", 400),
    ("Test 5: Purchase that triggers multiple rules ($300)", "cust-002", 300),
]


def run_demo(engine: ShopEngine | None = None, stream: TextIO | None = None) -> ShopEngine:
    """Run every demo purchase in order and return the engine used."""
    stream = stream or sys.stdout
    engine = engine or ShopEngine(stream=stream)

    stream.write("Shopping Discount Rule Engine Demo\n")
    stream.write("=" * 50 + "\n")

    for customer_id, name in DEMO_CUSTOMERS:
        engine.register_customer(CustomerRegistration(id=customer_id, name=name))

    stream.write("\nTesting Rule Scenarios:\n")
    for title, customer_id, amount in DEMO_PURCHASES:
        stream.write(f"\n{title}\n")
        engine.submit_purchase(customer_id, amount)

    return engine


def main() -> None:
    config = ShopConfig.from_env()
    setup_logging(config.log_level)
    logger.info("Starting shop demo")
    run_demo(ShopEngine(config=config))


if __name__ == "__main__":
    main()
