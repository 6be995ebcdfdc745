"""
Concrete Actions.

- SimpleAction: wraps one target's forward/inverse operation pair
- CompositeAction: groups actions into one unit, reversed back to front
"""
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

from .base import Action
from ..exceptions import ConfigurationError

Operation = Union[str, Callable[[], Any]]


class SimpleAction(Action):
    """
    Action wrapping a single target and a pair of inverse operations.

    Operations are either method names on the target or zero-argument
    callables. Names are resolved once, at construction.

    Example:
        light_on = SimpleAction(light, "on", "off")
        light_off = SimpleAction(light, "off", "on")
    """

    def __init__(self, target: Any, forward: Operation, backward: Operation,
                 description: Optional[str] = None):
        """
        Initialize simple action.

        Args:
            target: Object the operations act on
            forward: Operation run by apply()
            backward: Operation run by reverse()
            description: Label for logging (default: "<target>.<forward>")

        Raises:
            ConfigurationError: If an operation does not resolve to a callable
        """
        self.target = target
        self._forward = self._resolve(target, forward)
        self._backward = self._resolve(target, backward)
        self._description = description or f"{_label(target)}.{_name(forward)}"

    @staticmethod
    def _resolve(target: Any, operation: Operation) -> Callable[[], Any]:
        resolved = getattr(target, operation, None) if isinstance(operation, str) else operation
        if not callable(resolved):
            raise ConfigurationError(
                f"{_label(target)} has no callable operation {operation!r}"
            )
        return resolved

    @property
    def description(self) -> str:
        return self._description

    def apply(self) -> None:
        self._forward()

    def reverse(self) -> None:
        self._backward()


class CompositeAction(Action):
    """
    Groups multiple actions as a single reversible unit.

    apply() runs children in stored order; reverse() runs their reverse
    in the opposite order, last child first. An empty composite is a no-op.

    Example:
        all_off = CompositeAction([light_off, tv_off], "All off")
        all_off.apply()    # light off, then tv off
        all_off.reverse()  # tv on, then light on
    """

    def __init__(self, actions: Iterable[Action] = (),
                 description: str = "Composite Action"):
        self._actions: Tuple[Action, ...] = tuple(actions)
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    @property
    def actions(self) -> Tuple[Action, ...]:
        return self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def apply(self) -> None:
        """Apply all children in order."""
        for action in self._actions:
            action.apply()

    def reverse(self) -> None:
        """Reverse all children in reverse order."""
        for action in reversed(self._actions):
            action.reverse()


def _label(target: Any) -> str:
    return getattr(target, "name", None) or type(target).__name__


def _name(operation: Operation) -> str:
    if isinstance(operation, str):
        return operation
    return getattr(operation, "__name__", repr(operation))
