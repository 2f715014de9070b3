"""
Notification Dispatcher — In-Process Listener Fan-Out.

Delivers rule outcomes to registered listeners with:
- Plain function calls, in registration order
- Separate callbacks for matches and the no-match signal
- Runtime subscribe/unsubscribe

Listener errors are not caught; they surface to whoever dispatched.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Optional
import logging
import uuid

logger = logging.getLogger(__name__)

MatchListener = Callable[[Any, str], None]
NoMatchListener = Callable[[Any], None]


@dataclass
class Subscription:
    """A registered listener pair."""
    on_match: MatchListener
    on_no_match: Optional[NoMatchListener] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class NotificationDispatcher:
    """Fans notifications out to subscribed listeners."""

    def __init__(self):
        self._subscriptions: dict[str, Subscription] = {}

    def subscribe(
        self,
        on_match: MatchListener,
        on_no_match: Optional[NoMatchListener] = None,
    ) -> str:
        """Register listeners. Returns the subscription ID."""
        subscription = Subscription(on_match=on_match, on_no_match=on_no_match)
        self._subscriptions[subscription.id] = subscription
        return subscription.id

    def unsubscribe(self, subscription_id: str) -> bool:
        """Remove a subscription."""
        return self._subscriptions.pop(subscription_id, None) is not None

    def dispatch(self, outcome: Any, message: str) -> None:
        """Deliver one matched outcome and its message to every listener."""
        for subscription in list(self._subscriptions.values()):
            subscription.on_match(outcome, message)

    def dispatch_no_match(self, payload: Any) -> None:
        """Signal that nothing matched for `payload`."""
        listeners = [
            s.on_no_match for s in self._subscriptions.values()
            if s.on_no_match is not None
        ]
        if not listeners:
            logger.debug("No listeners for no-match signal")
        for listener in listeners:
            listener(payload)

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)
