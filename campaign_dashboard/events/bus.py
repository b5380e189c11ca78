"""
Campaign Event Bus

In-process publish/subscribe channel scoped to the application's
lifetime. Views subscribe while mounted and unsubscribe on unmount.
"""

import inspect
import logging
import uuid
from typing import Any, Callable, Dict, List, Tuple, Union

from .models import CampaignEventType

logger = logging.getLogger(__name__)

Handler = Callable[[], Any]


class CampaignEventBus:
    """Fire-and-forget broadcast of payload-free campaign events"""

    def __init__(self):
        # subscription id -> (event type value, handler), in subscription order
        self._subscriptions: Dict[str, Tuple[str, Handler]] = {}

    @staticmethod
    def _key(event_type: Union[CampaignEventType, str]) -> str:
        return event_type.value if isinstance(event_type, CampaignEventType) else event_type

    def subscribe(
        self, event_type: Union[CampaignEventType, str], handler: Handler
    ) -> str:
        """
        Register a handler for an event type.

        Args:
            event_type: Event to listen for
            handler: Zero-argument callable, sync or async

        Returns:
            Subscription id to pass to unsubscribe()
        """
        subscription_id = f"sub_{uuid.uuid4().hex[:12]}"
        self._subscriptions[subscription_id] = (self._key(event_type), handler)
        logger.debug(f"Subscribed {subscription_id} to {self._key(event_type)}")
        return subscription_id

    def unsubscribe(self, subscription_id: str) -> bool:
        """Remove a subscription; unknown ids are ignored"""
        removed = self._subscriptions.pop(subscription_id, None)
        if removed:
            logger.debug(f"Unsubscribed {subscription_id} from {removed[0]}")
        return removed is not None

    def subscriber_count(self, event_type: Union[CampaignEventType, str]) -> int:
        key = self._key(event_type)
        return sum(1 for event_key, _ in self._subscriptions.values() if event_key == key)

    async def publish(self, event_type: Union[CampaignEventType, str]) -> int:
        """
        Invoke every handler subscribed to event_type.

        Handler failures are logged and never reach the publisher.

        Returns:
            Number of handlers that completed without error
        """
        key = self._key(event_type)
        # Snapshot so handlers may unsubscribe while we iterate
        handlers: List[Handler] = [
            handler for event_key, handler in list(self._subscriptions.values())
            if event_key == key
        ]

        delivered = 0
        for handler in handlers:
            try:
                result = handler()
                if inspect.isawaitable(result):
                    await result
                delivered += 1
            except Exception as e:
                logger.error(f"Error handling event {key}: {e}", exc_info=True)

        logger.debug(f"Published {key} to {delivered}/{len(handlers)} handlers")
        return delivered


__all__ = ["CampaignEventBus"]
