"""
Event System - synchronous observer notifications.

Usage:
    from src.core.events import Signal

    on_logged = Signal("LogEntry")
    on_logged.connect(print)
    on_logged.emit("ON slot 0 executed")
"""
from .observer import Signal


__all__ = ["Signal"]
