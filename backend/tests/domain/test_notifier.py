import pytest

from bankdemo.domain.notifier import Notifier


def test_notify_calls_subscribers_in_attachment_order():
    calls: list[tuple[str, str]] = []
    n = Notifier()
    n.subscribe(lambda m: calls.append(("first", m)))
    n.subscribe(lambda m: calls.append(("second", m)))

    n.notify("hello")

    assert calls == [("first", "hello"), ("second", "hello")]


def test_same_subscriber_twice_is_called_twice():
    received: list[str] = []
    n = Notifier()
    n.subscribe(received.append)
    n.subscribe(received.append)

    n.notify("x")

    assert received == ["x", "x"]
    assert len(n.subscribers) == 2


def test_notify_without_subscribers_is_noop():
    n = Notifier()
    n.notify("nobody listens")
    # un notifier vide reste vrai dans un test booléen
    assert n
    assert n.subscribers == ()


def test_subscribe_rejects_non_callable():
    with pytest.raises(TypeError):
        Notifier().subscribe("not a callback")


def test_failing_subscriber_propagates_and_stops_fan_out():
    received: list[str] = []

    def boom(message: str) -> None:
        raise RuntimeError("subscriber failed")

    n = Notifier()
    n.subscribe(boom)
    n.subscribe(received.append)

    with pytest.raises(RuntimeError):
        n.notify("m")

    assert received == []
