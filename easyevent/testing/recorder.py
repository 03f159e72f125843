"""Callable listener that remembers what it received."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List

from ..events import Event


@dataclass(slots=True, eq=False)
class EventRecorder:
    __test__ = False

    name: str = "recorder"
    journal: List[str] | None = None
    side_effect: Callable[[Event], Any] | None = None
    events: List[Event] = field(default_factory=list)

    def __call__(self, event: Event) -> None:
        self.events.append(event)
        if self.journal is not None:
            self.journal.append(self.name)
        if self.side_effect is not None:
            self.side_effect(event)

    @property
    def calls(self) -> int:
        return len(self.events)

    @property
    def last(self) -> Event | None:
        return self.events[-1] if self.events else None
