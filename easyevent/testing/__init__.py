"""Testing utilities for easyevent."""

from .factory import EventFactory
from .fixtures import clean_hub, dispatcher
from .recorder import EventRecorder

__all__ = [
    "EventFactory",
    "EventRecorder",
    "clean_hub",
    "dispatcher",
]
