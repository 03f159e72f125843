"""Exceptions raised by easyevent."""


class EasyEventError(RuntimeError):
    """Base class for easyevent exceptions."""


class InvalidListener(EasyEventError, TypeError):
    """Raised when a listener callback is not callable."""

    def __init__(self, callback: object) -> None:
        super().__init__(f"Listener must be callable, got {callback!r}")
        self.callback = callback


class IllegalConstruction(EasyEventError):
    """Raised when the broadcast hub is instantiated directly."""
