import pytest

from nodekit.event import Event


def test_on_receives_every_emit():
    ev = Event()
    seen = []
    ev.on(seen.append)
    ev.emit(1)
    ev.emit(2)
    assert seen == [1, 2]


def test_call_is_on():
    ev = Event()
    seen = []
    ev(seen.append)
    ev.emit("x")
    assert seen == ["x"]
    assert ev.size() == 1


def test_once_fires_once_and_is_removed():
    ev = Event()
    seen = []
    ev.once(seen.append)
    assert ev.size() == 1
    ev.emit("a")
    ev.emit("b")
    assert seen == ["a"]
    assert ev.empty()


def test_listeners_called_in_registration_order():
    ev = Event()
    order = []
    ev.on(lambda: order.append("first"))
    ev.once(lambda: order.append("second"))
    ev.on(lambda: order.append("third"))
    ev.emit()
    assert order == ["first", "second", "third"]


def test_multiple_arguments_forwarded():
    ev = Event()
    got = []
    ev.on(lambda a, b: got.append((a, b)))
    ev.emit("k", "v")
    assert got == [("k", "v")]


def test_off_removes_listener():
    ev = Event()
    seen = []
    handle = ev.on(seen.append)
    ev.off(handle)
    ev.emit(1)
    assert seen == []
    assert ev.empty()


def test_off_unknown_handle_is_ignored():
    ev = Event()
    ev.on(lambda: None)
    ev.off(object())
    assert ev.size() == 1


def test_none_callback_not_registered():
    ev = Event()
    assert ev.on(None) is None
    assert ev.once(None) is None
    assert ev.empty()


def test_clear():
    ev = Event()
    ev.on(lambda: None)
    ev.on(lambda: None)
    assert len(ev) == 2
    ev.clear()
    assert ev.size() == 0


@pytest.mark.parametrize("pause", ["stop", "skip"])
def test_pause_and_resume(pause):
    ev = Event()
    seen = []
    ev.on(seen.append)
    getattr(ev, pause)()
    assert ev.is_paused()
    ev.emit(1)
    assert seen == []
    ev.resume()
    assert not ev.is_paused()
    ev.emit(2)
    assert seen == [2]


def test_once_kept_while_paused():
    ev = Event()
    seen = []
    ev.once(seen.append)
    ev.stop()
    ev.emit(1)
    assert ev.size() == 1
    ev.resume()
    ev.emit(2)
    assert seen == [2]


def test_listener_removing_later_listener_during_emit():
    ev = Event()
    seen = []
    handles = {}
    ev.on(lambda: ev.off(handles["late"]))
    handles["late"] = ev.on(lambda: seen.append("late"))
    ev.emit()
    assert seen == []
    assert ev.size() == 1