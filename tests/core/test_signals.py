from unittest.mock import MagicMock
from src.core.events import Signal


def test_signal_event():
    """Verify Signal behavior."""
    sig = Signal("test_signal")
    mock_handler = MagicMock()

    sig.connect(mock_handler)
    sig.emit("data", 123)

    mock_handler.assert_called_once_with("data", 123)

    sig.disconnect(mock_handler)
    sig.emit("data2")
    assert mock_handler.call_count == 1


def test_connect_is_idempotent():
    sig = Signal()
    handler = MagicMock()
    sig.connect(handler)
    sig.connect(handler)

    sig.emit()

    assert len(sig) == 1
    handler.assert_called_once_with()


def test_failing_subscriber_does_not_block_others():
    sig = Signal("log")
    broken = MagicMock(side_effect=RuntimeError("nope"))
    after = MagicMock()
    sig.connect(broken)
    sig.connect(after)

    sig.emit("UNDO executed")

    after.assert_called_once_with("UNDO executed")


def test_subscriber_can_disconnect_during_emit():
    sig = Signal()
    seen = []

    def once(value):
        seen.append(value)
        sig.disconnect(once)

    sig.connect(once)
    sig.emit(1)
    sig.emit(2)

    assert seen == [1]


def test_clear():
    sig = Signal()
    sig.connect(MagicMock())
    sig.clear()
    assert len(sig) == 0
