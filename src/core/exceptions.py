"""
Dispatch error types.

The base Dispatcher only raises at construction time; SlotError is
reserved for StrictDispatcher.
"""


class DispatchError(Exception):
    """Base class for all dispatcher errors."""
    pass


class ConfigurationError(DispatchError, ValueError):
    """Raised for invalid capacity, action wiring or settings."""
    pass


class SlotError(DispatchError, IndexError):
    """Raised by StrictDispatcher for out-of-range or unbound slots."""

    def __init__(self, slot: int, reason: str):
        self.slot = slot
        self.reason = reason
        super().__init__(f"slot {slot}: {reason}")
