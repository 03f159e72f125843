"""Process-wide broadcast hub.

Components that never hold a reference to each other can still talk through
the hub: one side registers a callback, the other sends an event and names
itself as the origin::

    from easyevent import Event, hub

    hub.register(Event.CHANGE, on_change)
    hub.send(Event(Event.CHANGE), origin=self)
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, ClassVar, Hashable

from .config import DispatcherConfig
from .dispatcher import EventCallback, EventDispatcher
from .events import Event
from .exceptions import IllegalConstruction

logger = logging.getLogger(__name__)

_CONSTRUCTION_TOKEN = object()
_instance_lock = Lock()


class BroadcastHub:
    """Singleton wrapper around one shared EventDispatcher."""

    _instance: ClassVar["BroadcastHub | None"] = None

    def __init__(self, token: object = None) -> None:
        if token is not _CONSTRUCTION_TOKEN:
            raise IllegalConstruction(
                "BroadcastHub cannot be constructed directly; use BroadcastHub.instance()"
            )
        self._dispatcher = EventDispatcher(origin=self, config=DispatcherConfig.from_env())

    @classmethod
    def instance(cls) -> "BroadcastHub":
        if cls._instance is None:
            with _instance_lock:
                if cls._instance is None:
                    cls._instance = cls(_CONSTRUCTION_TOKEN)
                    logger.debug("Created broadcast hub")
        return cls._instance

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    def register(
        self,
        category: Hashable,
        callback: EventCallback,
        context: Any = None,
        priority: int = 0,
    ) -> None:
        self._dispatcher.add_listener(category, callback, context, priority)

    def register_once(
        self,
        category: Hashable,
        callback: EventCallback,
        context: Any = None,
        priority: int = 0,
    ) -> None:
        self._dispatcher.add_once_listener(category, callback, context, priority)

    def unregister(self, category: Hashable, callback: EventCallback) -> None:
        self._dispatcher.remove_listener(category, callback)

    def has_listener(self, category: Hashable) -> bool:
        return self._dispatcher.has_listener(category)

    def send(self, event: Event, origin: Any = None) -> None:
        """Dispatch ``event`` to hub listeners.

        An explicit ``origin`` replaces whatever origin the event already had.
        """
        if origin is not None:
            event._force_origin(origin)
        self._dispatcher.dispatch(event)

    def __repr__(self) -> str:
        return f"BroadcastHub(categories={len(self._dispatcher.categories())})"


def get_hub() -> BroadcastHub:
    """Return the process-wide hub, creating it on first use."""
    return BroadcastHub.instance()


def register(
    category: Hashable,
    callback: EventCallback,
    context: Any = None,
    priority: int = 0,
) -> None:
    get_hub().register(category, callback, context, priority)


def register_once(
    category: Hashable,
    callback: EventCallback,
    context: Any = None,
    priority: int = 0,
) -> None:
    get_hub().register_once(category, callback, context, priority)


def unregister(category: Hashable, callback: EventCallback) -> None:
    get_hub().unregister(category, callback)


def has_listener(category: Hashable) -> bool:
    return get_hub().has_listener(category)


def send(event: Event, origin: Any = None) -> None:
    get_hub().send(event, origin)


__all__ = [
    "BroadcastHub",
    "get_hub",
    "has_listener",
    "register",
    "register_once",
    "send",
    "unregister",
]
