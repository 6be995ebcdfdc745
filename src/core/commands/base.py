"""
Dispatch Action - Base Interface.

Provides:
- Action: reversible unit of work bound to dispatcher slots
"""
from abc import ABC, abstractmethod


class Action(ABC):
    """
    Reversible unit of work.

    Actions are shared references: the same instance may be bound to
    several slots or nested inside a CompositeAction.

    Example:
        class DimLightAction(Action):
            def __init__(self, light, level):
                self.light = light
                self.level = level
                self.previous = None

            def apply(self):
                self.previous = self.light.level
                self.light.level = self.level

            def reverse(self):
                self.light.level = self.previous
    """

    @property
    def description(self) -> str:
        """
        Human-readable description for logging.

        Returns:
            Description string (default: class name)
        """
        return self.__class__.__name__

    @abstractmethod
    def apply(self) -> None:
        """Perform the forward effect."""
        pass

    @abstractmethod
    def reverse(self) -> None:
        """
        Perform the inverse effect.

        Must undo exactly what apply() did.
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description!r}>"
