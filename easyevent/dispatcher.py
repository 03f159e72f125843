"""Listener registry and synchronous event dispatch."""

from __future__ import annotations

import inspect
import itertools
import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Callable, Dict, Hashable, List

from .config import DispatcherConfig
from .events import Event
from .exceptions import InvalidListener

logger = logging.getLogger(__name__)

EventCallback = Callable[..., Any]


@dataclass(slots=True, eq=False)
class Listener:
    """A single registration of a callback for one category.

    When ``context`` is set and the callback declares two required positional
    parameters, it is called as ``callback(context, event)``, the same way an
    unbound method receives its instance. Every other callback gets the event
    only.
    """

    callback: EventCallback
    context: Any = None
    priority: int = 0
    once: bool = False
    sequence: int = 0
    takes_context: bool = field(default=False, repr=False)
    spent: bool = field(default=False, repr=False)

    def invoke(self, event: Event) -> Any:
        if self.takes_context:
            return self.callback(self.context, event)
        return self.callback(event)


def _accepts_context(callback: EventCallback) -> bool:
    try:
        parameters = inspect.signature(callback).parameters.values()
    except (TypeError, ValueError):
        return False
    required = [
        parameter
        for parameter in parameters
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD)
        and parameter.default is parameter.empty
    ]
    return len(required) >= 2


def _ordering(listener: Listener) -> tuple[int, int]:
    return -listener.priority, listener.sequence


class EventDispatcher:
    """Register callbacks per category and fan events out to them.

    Use it as a base class, or hold an instance and pass the owning object as
    ``origin`` so dispatched events report the owner as their source.
    """

    def __init__(self, origin: Any = None, *, config: DispatcherConfig | None = None) -> None:
        self._origin = origin
        self._config = config or DispatcherConfig()
        self._listeners: Dict[Hashable, List[Listener]] = {}
        self._sequence = itertools.count()
        self._lock = RLock()

    @property
    def config(self) -> DispatcherConfig:
        return self._config

    def add_listener(
        self,
        category: Hashable,
        callback: EventCallback,
        context: Any = None,
        priority: int = 0,
    ) -> None:
        """Register ``callback`` for ``category``.

        Registering an already known callback again only updates its priority;
        the stored context and one-shot flag are left untouched.
        """
        self._register(category, callback, context, priority, once=False)

    def add_once_listener(
        self,
        category: Hashable,
        callback: EventCallback,
        context: Any = None,
        priority: int = 0,
    ) -> None:
        """Register ``callback`` to run on the next matching dispatch only."""
        self._register(category, callback, context, priority, once=True)

    once = add_once_listener

    def remove_listener(self, category: Hashable, callback: EventCallback) -> None:
        with self._lock:
            listeners = self._listeners.get(category)
            if not listeners:
                return
            for index, listener in enumerate(listeners):
                if listener.callback == callback:
                    del listeners[index]
                    logger.debug("Removed listener %r from %s", callback, category)
                    break
            if not listeners:
                del self._listeners[category]

    def remove_all_listeners(self) -> None:
        with self._lock:
            self._listeners.clear()

    def has_listener(self, category: Hashable) -> bool:
        with self._lock:
            return category in self._listeners

    def listeners(self, category: Hashable) -> tuple[Listener, ...]:
        """Return registrations for ``category`` in invocation order."""
        with self._lock:
            return tuple(self._listeners.get(category, ()))

    def categories(self) -> tuple[Hashable, ...]:
        with self._lock:
            return tuple(self._listeners)

    def dispatch(self, event: Event) -> None:
        """Invoke every listener registered for ``event.category``.

        Listeners run against a copy of the registry taken before the first
        call, so changes made by a callback only apply to later dispatches.
        """
        with self._lock:
            listeners = self._listeners.get(event.category)
            if not listeners:
                return
            event._assign_origin(self._origin if self._origin is not None else self)
            snapshot = list(listeners)

        if self._config.log_dispatch:
            logger.debug("Dispatching %s to %d listeners", event, len(snapshot))

        for listener in snapshot:
            if listener.once and not self._consume(event.category, listener):
                continue
            try:
                listener.invoke(event)
            except Exception:
                if self._config.listener_errors == "raise":
                    raise
                logger.exception(
                    "Listener %r failed while handling %s", listener.callback, event
                )

    def snapshot(self) -> dict[str, list[str]]:
        """Export the registry for debugging."""
        with self._lock:
            return {
                str(category): [
                    getattr(listener.callback, "__qualname__", repr(listener.callback))
                    for listener in listeners
                ]
                for category, listeners in self._listeners.items()
            }

    def _register(
        self,
        category: Hashable,
        callback: EventCallback,
        context: Any,
        priority: int,
        *,
        once: bool,
    ) -> None:
        if not callable(callback):
            raise InvalidListener(callback)
        with self._lock:
            listeners = self._listeners.setdefault(category, [])
            for listener in listeners:
                if listener.callback == callback:
                    if listener.priority != priority:
                        listener.priority = priority
                        listeners.sort(key=_ordering)
                        logger.debug(
                            "Moved listener %r on %s to priority %d", callback, category, priority
                        )
                    return
            listeners.append(
                Listener(
                    callback=callback,
                    context=context,
                    priority=priority,
                    once=once,
                    sequence=next(self._sequence),
                    takes_context=context is not None and _accepts_context(callback),
                )
            )
            listeners.sort(key=_ordering)
            logger.debug(
                "Added %slistener %r to %s (priority %d)",
                "one-shot " if once else "",
                callback,
                category,
                priority,
            )

    def _consume(self, category: Hashable, listener: Listener) -> bool:
        # a one-shot registration may sit in several in-flight snapshots
        with self._lock:
            if listener.spent:
                return False
            listener.spent = True
            listeners = self._listeners.get(category)
            if listeners and listener in listeners:
                listeners.remove(listener)
                if not listeners:
                    del self._listeners[category]
            return True


__all__ = ["EventCallback", "EventDispatcher", "Listener"]
