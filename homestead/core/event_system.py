"""
homestead/core/event_system.py
Event bus shared by the clock, the garden and the host.
"""
from typing import Any, Callable, Dict, List

from homestead.utils.logger import Logger

EventCallback = Callable[[str, Any], None]


class EventSystem:
    """
    Publish/subscribe bus for one game session.

    Subscribers are called in registration order with ``(event_type, data)``.
    A subscriber that raises is logged and skipped; dispatch continues with
    the next one.
    """

    def __init__(self):
        self.subscribers: Dict[str, List[EventCallback]] = {}

    def subscribe(self, event_type: str, callback: EventCallback) -> None:
        callbacks = self.subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, event_type: str, callback: EventCallback) -> None:
        callbacks = self.subscribers.get(event_type)
        if not callbacks or callback not in callbacks:
            return
        callbacks.remove(callback)
        if not callbacks:
            del self.subscribers[event_type]

    def publish(self, event_type: str, data: Any = None) -> None:
        """
        Delivers ``data`` to every subscriber of ``event_type``.

        Args:
            event_type: Name of the event, e.g. "day_changed".
            data: Payload handed to each callback unchanged.
        """
        # Copy so a callback may unsubscribe itself mid-dispatch
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event_type, data)
            except Exception as e:
                Logger.error("EventSystem", f"Subscriber {getattr(callback, '__name__', callback)} failed on '{event_type}': {e}")
