"""Inspection helpers for dispatcher registries."""

from __future__ import annotations

from dataclasses import dataclass

from .dispatcher import EventDispatcher, Listener
from .events import Category


@dataclass(slots=True)
class ListenerInfo:
    category: str
    callback: str
    priority: int
    once: bool
    context: str | None


@dataclass(slots=True)
class RegistryIssue:
    severity: str
    message: str


def callback_name(callback: object) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


def describe_registry(dispatcher: EventDispatcher) -> list[ListenerInfo]:
    """Flatten the registry into rows, in invocation order per category."""
    rows: list[ListenerInfo] = []
    for category in dispatcher.categories():
        for listener in dispatcher.listeners(category):
            rows.append(
                ListenerInfo(
                    category=str(category),
                    callback=callback_name(listener.callback),
                    priority=listener.priority,
                    once=listener.once,
                    context=None if listener.context is None else repr(listener.context),
                )
            )
    return rows


def check_registry(dispatcher: EventDispatcher) -> list[RegistryIssue]:
    issues: list[RegistryIssue] = []
    categories = dispatcher.categories()
    if not categories:
        issues.append(RegistryIssue("error", "No listeners registered."))

    for category in categories:
        if not isinstance(category, Category):
            issues.append(
                RegistryIssue(
                    "warning",
                    f"Category {category!r} is not a Category; other components may reuse the same key.",
                )
            )
        for listener in dispatcher.listeners(category):
            if _context_ignored(listener):
                issues.append(
                    RegistryIssue(
                        "warning",
                        f"Context for {callback_name(listener.callback)} on {category} "
                        "is ignored because the callback only takes the event.",
                    )
                )
    return issues


def _context_ignored(listener: Listener) -> bool:
    return listener.context is not None and not listener.takes_context


__all__ = [
    "ListenerInfo",
    "RegistryIssue",
    "callback_name",
    "check_registry",
    "describe_registry",
]
