"""easyevent public API."""

from . import hub
from .config import DispatcherConfig
from .dispatcher import EventDispatcher, Listener
from .events import Category, Event
from .exceptions import EasyEventError, IllegalConstruction, InvalidListener
from .hub import BroadcastHub, get_hub

__all__ = [
    "BroadcastHub",
    "Category",
    "DispatcherConfig",
    "EasyEventError",
    "Event",
    "EventDispatcher",
    "IllegalConstruction",
    "InvalidListener",
    "Listener",
    "get_hub",
    "hub",
]
