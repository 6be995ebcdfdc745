"""
Dispatcher - slot-based action dispatch with single-level undo.

Provides Dispatcher, which maps a fixed number of slots to on/off actions,
remembers the last applied action and keeps an append-only text log, and
StrictDispatcher, which reports misuse instead of ignoring it.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from loguru import logger

from .base import Action
from ..events import Signal
from ..exceptions import ConfigurationError, SlotError

ON_ENTRY = "ON slot {slot} executed"
OFF_ENTRY = "OFF slot {slot} executed"
UNDO_ENTRY = "UNDO executed"


@dataclass(frozen=True)
class SlotBinding:
    """On/off action pair held by one slot. Either side may be unset."""
    on_action: Optional[Action] = None
    off_action: Optional[Action] = None


class Dispatcher:
    """
    Controller owning a fixed table of slots.

    Out-of-range slots and unset actions are ignored silently: no state
    change, no log entry. Only the most recent action can be undone, and
    only once.

    Usage:
        remote = Dispatcher(capacity=4)
        remote.bind(0, light_on, light_off)

        remote.press_on(0)    # light on, logged as "ON slot 0 executed"
        remote.press_undo()   # light off, logged as "UNDO executed"
        remote.press_undo()   # nothing to undo, ignored

        remote.on_logged.connect(print)
    """

    def __init__(self, capacity: int):
        """
        Initialize dispatcher.

        Args:
            capacity: Number of slots, fixed for the dispatcher's lifetime

        Raises:
            ConfigurationError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigurationError(f"Dispatcher capacity must be a positive integer, got {capacity!r}")

        self._slots: List[SlotBinding] = [SlotBinding() for _ in range(capacity)]
        self._last_action: Optional[Action] = None
        self._log: List[str] = []
        self.on_logged = Signal("DispatcherLog")

    @classmethod
    def from_settings(cls, settings) -> "Dispatcher":
        """Create a dispatcher from DispatcherSettings."""
        return cls(settings.capacity)

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def last_action(self) -> Optional[Action]:
        return self._last_action

    @property
    def can_undo(self) -> bool:
        return self._last_action is not None

    @property
    def log(self) -> Tuple[str, ...]:
        """Log entries in chronological order (read-only copy)."""
        return tuple(self._log)

    def get_log(self) -> Tuple[str, ...]:
        return self.log

    def show_log(self, writer: Callable[[str], object] = print) -> None:
        """Write every log entry, oldest first, through writer."""
        for entry in self._log:
            writer(entry)

    def is_valid_slot(self, slot: int) -> bool:
        return 0 <= slot < len(self._slots)

    def binding(self, slot: int) -> Optional[SlotBinding]:
        """Get the binding at slot, or None when out of range."""
        if not self.is_valid_slot(slot):
            return None
        return self._slots[slot]

    def bind(self, slot: int, on_action: Optional[Action] = None,
             off_action: Optional[Action] = None) -> None:
        """
        Bind actions to a slot, replacing both sides.

        An omitted action clears that side. Out-of-range slots are ignored.
        """
        if not self.is_valid_slot(slot):
            logger.debug(f"Ignored bind: slot {slot} out of range [0, {self.capacity})")
            return
        self._slots[slot] = SlotBinding(on_action, off_action)
        logger.debug(f"Bound slot {slot}: on={_describe(on_action)}, off={_describe(off_action)}")

    def press_on(self, slot: int) -> None:
        """Apply the slot's on-action."""
        self._dispatch(slot, "on", ON_ENTRY)

    def press_off(self, slot: int) -> None:
        """Apply the slot's off-action."""
        self._dispatch(slot, "off", OFF_ENTRY)

    def press_undo(self) -> None:
        """
        Reverse the last applied action.

        Clears the last action afterwards, so a second consecutive undo
        is ignored.
        """
        action = self._last_action
        if action is None:
            logger.debug("Ignored undo: nothing to undo")
            return

        try:
            action.reverse()
        except Exception as e:
            logger.error(f"Undo of {action.description} failed: {e}")
            raise

        self._last_action = None
        logger.debug(f"Undone: {action.description}")
        self._append(UNDO_ENTRY)

    def _dispatch(self, slot: int, side: str, template: str) -> None:
        binding = self.binding(slot)
        if binding is None:
            logger.debug(f"Ignored {side} press: slot {slot} out of range [0, {self.capacity})")
            return

        action = binding.on_action if side == "on" else binding.off_action
        if action is None:
            logger.debug(f"Ignored {side} press: slot {slot} has no {side}-action")
            return

        try:
            action.apply()
        except Exception as e:
            logger.error(f"Action {action.description} on slot {slot} failed: {e}")
            raise

        self._last_action = action
        logger.debug(f"Executed: {action.description} (slot {slot}, {side})")
        self._append(template.format(slot=slot))

    def _append(self, entry: str) -> None:
        self._log.append(entry)
        self.on_logged.emit(entry)


class StrictDispatcher(Dispatcher):
    """
    Dispatcher that raises SlotError instead of ignoring bad slot access.

    Undo with nothing to undo is still a no-op.
    """

    def _check_slot(self, slot: int) -> None:
        if not self.is_valid_slot(slot):
            raise SlotError(slot, f"out of range [0, {self.capacity})")

    def bind(self, slot: int, on_action: Optional[Action] = None,
             off_action: Optional[Action] = None) -> None:
        self._check_slot(slot)
        super().bind(slot, on_action, off_action)

    def press_on(self, slot: int) -> None:
        self._check_slot(slot)
        if self._slots[slot].on_action is None:
            raise SlotError(slot, "no on-action bound")
        super().press_on(slot)

    def press_off(self, slot: int) -> None:
        self._check_slot(slot)
        if self._slots[slot].off_action is None:
            raise SlotError(slot, "no off-action bound")
        super().press_off(slot)


def _describe(action: Optional[Action]) -> str:
    return action.description if action is not None else "-"
