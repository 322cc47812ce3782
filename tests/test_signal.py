import pytest

from circlecore.signal import Signal


def test_emit_passes_arguments_to_slot():
    received = []
    signal = Signal()
    signal.connect(lambda *args: received.append(args))
    signal.emit("key", 42)
    assert received == [("key", 42)]


def test_slots_called_in_connection_order():
    order = []
    signal = Signal()
    signal.connect(lambda: order.append("first"))
    signal.connect(lambda: order.append("second"))
    signal.emit()
    assert order == ["first", "second"]


def test_disconnect_stops_delivery():
    calls = []

    def slot():
        calls.append(True)

    signal = Signal()
    signal.connect(slot)
    signal.disconnect(slot)
    signal.emit()
    assert calls == []
    assert len(signal) == 0


def test_disconnect_unknown_slot_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_connect_non_callable_raises():
    signal = Signal()
    with pytest.raises(TypeError):
        signal.connect("not callable")


def test_slot_may_disconnect_itself_during_emit():
    signal = Signal()
    calls = []

    def once():
        calls.append("once")
        signal.disconnect(once)

    signal.connect(once)
    signal.connect(lambda: calls.append("always"))
    signal.emit()
    signal.emit()
    assert calls == ["once", "always", "always"]