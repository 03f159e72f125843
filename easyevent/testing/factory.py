"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Hashable, Iterable

from faker import Faker

from ..events import Category, Event


@dataclass(slots=True)
class EventFactory:
    faker: Faker = field(default_factory=Faker)
    rng: Random = field(default_factory=Random)

    def category(self) -> Category:
        return Category(self.faker.unique.word().upper())

    def build(self, category: Hashable | None = None) -> Event:
        category = category if category is not None else self.category()
        payload = {
            "path": self.faker.file_path(),
            "size": self.rng.randint(1, 4096),
            "label": self.faker.word(),
        }
        return Event(category, payload)

    def batch(self, count: int, category: Hashable | None = None) -> Iterable[Event]:
        for _ in range(count):
            yield self.build(category=category)
