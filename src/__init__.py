"""
remote-dispatch - slot-based command dispatch with undo.

Bind reversible actions to numbered slots, press them, and undo the most
recent press.
"""

from src.core import (
    Action,
    SimpleAction,
    CompositeAction,
    Dispatcher,
    StrictDispatcher,
    ConfigManager,
    ConfigurationError,
    SlotError,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "SimpleAction",
    "CompositeAction",
    "Dispatcher",
    "StrictDispatcher",
    "ConfigManager",
    "ConfigurationError",
    "SlotError",
]
