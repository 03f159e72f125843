"""Pytest fixtures for easyevent."""

from __future__ import annotations

from typing import Iterator

import pytest

from ..config import DispatcherConfig
from ..dispatcher import EventDispatcher
from ..hub import BroadcastHub, get_hub


@pytest.fixture()
def dispatcher() -> EventDispatcher:
    return EventDispatcher(config=DispatcherConfig())


@pytest.fixture()
def clean_hub() -> Iterator[BroadcastHub]:
    """Yield the shared hub and drop every listener registered during the test."""
    hub = get_hub()
    hub.dispatcher.remove_all_listeners()
    yield hub
    hub.dispatcher.remove_all_listeners()
