"""Configuration models for easyevent dispatchers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, get_args


ListenerErrorPolicy = Literal["raise", "log"]

_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class DispatcherConfig:
    """Behaviour switches shared by every dispatcher built from this config.

    ``listener_errors`` decides what happens when a callback raises during
    dispatch: ``"raise"`` lets the error reach the dispatch caller and skips
    the rest of the pass, ``"log"`` logs it and moves on to the next listener.
    """

    listener_errors: ListenerErrorPolicy = "raise"
    log_dispatch: bool = True

    def __post_init__(self) -> None:
        if self.listener_errors not in get_args(ListenerErrorPolicy):
            raise ValueError(
                f"Unsupported listener error policy {self.listener_errors!r}"
            )

    @classmethod
    def from_env(cls) -> "DispatcherConfig":
        """Create config from environment variables prefixed with EASYEVENT_."""
        prefix = "EASYEVENT_"
        policy = os.getenv(f"{prefix}LISTENER_ERRORS", "raise").strip().lower() or "raise"
        return cls(
            listener_errors=policy,  # type: ignore[arg-type]
            log_dispatch=os.getenv(f"{prefix}LOG_DISPATCH", "true").lower() in _TRUTHY,
        )
