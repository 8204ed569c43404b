"""
Observer hooks for site build progress.
Listeners subscribe by event name and receive the event's keyword arguments.
"""
import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class EventDispatcher:
    def __init__(self):
        self._listeners: Dict[str, List[Callable[..., None]]] = {}

    def subscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        self._listeners.setdefault(event_name, []).append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        callbacks = self._listeners.get(event_name, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def dispatch(self, event_name: str, **kwargs) -> None:
        for listener in list(self._listeners.get(event_name, [])):
            try:
                listener(**kwargs)
            except Exception:
                # a broken listener must not abort the build
                logger.exception("Listener for %s failed", event_name)
