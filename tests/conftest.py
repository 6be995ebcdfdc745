import pytest
from typing import List

from src.core.commands import Action, Dispatcher
from src.devices import Light, Television, on_action, off_action


class RecordingAction(Action):
    """Action that records apply/reverse calls into a shared journal."""

    def __init__(self, name: str, journal: List[str]):
        self.name = name
        self.journal = journal

    @property
    def description(self) -> str:
        return self.name

    def apply(self):
        self.journal.append(f"{self.name}.apply")

    def reverse(self):
        self.journal.append(f"{self.name}.reverse")


@pytest.fixture
def journal():
    return []


@pytest.fixture
def make_action(journal):
    def factory(name: str) -> RecordingAction:
        return RecordingAction(name, journal)
    return factory


@pytest.fixture
def remote():
    return Dispatcher(capacity=2)


@pytest.fixture
def light():
    return Light("Living room")


@pytest.fixture
def tv():
    return Television("LG")


@pytest.fixture
def wired_remote(remote, light, tv):
    remote.bind(0, on_action(light), off_action(light))
    remote.bind(1, on_action(tv), off_action(tv))
    return remote
