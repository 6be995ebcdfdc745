"""
Dispatch Core.

Provides:
- Action / SimpleAction / CompositeAction: reversible units of work
- Dispatcher: slot-based dispatch with single-level undo and a text log
- ConfigManager: Configuration loading with validation
- Signal: Synchronous observer notifications
- setup_logging: Loguru configuration

Usage:
    from src.core import Dispatcher, SimpleAction

    remote = Dispatcher(capacity=2)
    remote.bind(0, SimpleAction(light, "on", "off"), SimpleAction(light, "off", "on"))
    remote.press_on(0)
    remote.press_undo()
"""
from .exceptions import DispatchError, ConfigurationError, SlotError
from .config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    DispatcherSettings,
)
from .events import Signal
from .logging import setup_logging
from .commands import (
    Action,
    SimpleAction,
    CompositeAction,
    Dispatcher,
    StrictDispatcher,
    SlotBinding,
)

__all__ = [
    # Errors
    "DispatchError",
    "ConfigurationError",
    "SlotError",

    # Configuration
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "DispatcherSettings",

    # Events / logging
    "Signal",
    "setup_logging",

    # Commands
    "Action",
    "SimpleAction",
    "CompositeAction",
    "Dispatcher",
    "StrictDispatcher",
    "SlotBinding",
]
