import pytest

from src.core.commands import StrictDispatcher
from src.core.exceptions import DispatchError, SlotError


@pytest.fixture
def strict():
    return StrictDispatcher(2)


@pytest.mark.parametrize("slot", [-1, 2])
def test_out_of_range_raises(strict, make_action, slot):
    with pytest.raises(SlotError) as exc:
        strict.bind(slot, make_action("on"))
    assert exc.value.slot == slot

    with pytest.raises(SlotError):
        strict.press_on(slot)
    with pytest.raises(SlotError):
        strict.press_off(slot)


def test_unset_side_raises(strict, make_action, journal):
    strict.bind(0, make_action("macro"))

    with pytest.raises(SlotError, match="no off-action"):
        strict.press_off(0)
    with pytest.raises(SlotError, match="no on-action"):
        strict.press_on(1)

    assert journal == []
    assert strict.log == ()


def test_valid_presses_behave_like_dispatcher(strict, make_action, journal):
    strict.bind(0, make_action("on"), make_action("off"))

    strict.press_on(0)
    strict.press_undo()
    strict.press_undo()

    assert journal == ["on.apply", "on.reverse"]
    assert strict.log == ("ON slot 0 executed", "UNDO executed")


def test_slot_error_hierarchy():
    err = SlotError(3, "out of range [0, 2)")
    assert isinstance(err, DispatchError)
    assert isinstance(err, IndexError)
    assert str(err) == "slot 3: out of range [0, 2)"
