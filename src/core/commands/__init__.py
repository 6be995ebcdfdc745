"""
Dispatch Command System.

Provides Command pattern infrastructure:
- Action: Reversible unit of work (apply/reverse)
- SimpleAction: One target, one forward/inverse operation pair
- CompositeAction: Ordered group of actions, reversed back to front
- Dispatcher: Slot table with single-level undo and an operation log
- StrictDispatcher: Dispatcher that raises on bad slot access
"""
from .base import Action
from .actions import SimpleAction, CompositeAction
from .dispatcher import Dispatcher, StrictDispatcher, SlotBinding

__all__ = [
    # Base interface
    "Action",
    # Implementations
    "SimpleAction",
    "CompositeAction",
    # Controller
    "Dispatcher",
    "StrictDispatcher",
    "SlotBinding",
]
