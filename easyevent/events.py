"""Event values and category identifiers."""

from __future__ import annotations

from typing import Any, Hashable


class Category:
    """Opaque event category compared by identity.

    Two categories minted with the same name are still different keys, so
    unrelated components cannot collide by picking the same label.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Category({self._name})"

    __str__ = __repr__


ADDED = Category("ADDED")
CHANGE = Category("CHANGE")
CLOSE = Category("CLOSE")
CLOSING = Category("CLOSING")
CANCEL = Category("CANCEL")
CLEAR = Category("CLEAR")
COMPLETE = Category("COMPLETE")
CONNECT = Category("CONNECT")
OPEN = Category("OPEN")
SELECT = Category("SELECT")
SELECT_ALL = Category("SELECT_ALL")


class Event:
    """A dispatched value: category, optional payload and the origin it came from.

    ``origin`` stays ``None`` until the first dispatcher (or an explicit
    sender) handles the event.
    """

    __slots__ = ("_category", "_payload", "_origin")

    ADDED = ADDED
    CHANGE = CHANGE
    CLOSE = CLOSE
    CLOSING = CLOSING
    CANCEL = CANCEL
    CLEAR = CLEAR
    COMPLETE = COMPLETE
    CONNECT = CONNECT
    OPEN = OPEN
    SELECT = SELECT
    SELECT_ALL = SELECT_ALL

    def __init__(self, category: Hashable, payload: Any = None) -> None:
        self._category = category
        self._payload = payload
        self._origin: Any = None

    @property
    def category(self) -> Hashable:
        return self._category

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def origin(self) -> Any:
        return self._origin

    def clone(self) -> "Event":
        """Return a copy with the same category and payload and no origin."""
        return type(self)(self._category, self._payload)

    def _assign_origin(self, origin: Any) -> None:
        # first assignment wins; re-dispatch keeps the original source
        if self._origin is None:
            self._origin = origin

    def _force_origin(self, origin: Any) -> None:
        self._origin = origin

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self._category}, payload={self._payload!r})"

    __str__ = __repr__


__all__ = [
    "ADDED",
    "CANCEL",
    "CHANGE",
    "CLEAR",
    "CLOSE",
    "CLOSING",
    "COMPLETE",
    "CONNECT",
    "Category",
    "Event",
    "OPEN",
    "SELECT",
    "SELECT_ALL",
]
