"""Tests for the lock-guarded event manager."""

from __future__ import annotations

import threading

from mocks import MockObserver, MockSubject
from observer_core import LockedEventManager


def test_concurrent_attach_keeps_every_observer() -> None:
    manager = LockedEventManager(MockSubject())
    observers = [MockObserver() for _ in range(200)]

    def attach_slice(start: int) -> None:
        for observer in observers[start::4]:
            manager.attach(observer, start)

    threads = [threading.Thread(target=attach_slice, args=(start,)) for start in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    attached = manager.get_attached()
    assert len(attached) == len(observers)
    assert {id(observer) for observer in attached} == {id(observer) for observer in observers}
    assert attached[:50] == observers[3::4]


def test_observers_may_reenter_during_notify() -> None:
    manager = LockedEventManager(MockSubject())
    late = MockObserver()

    def reenter() -> None:
        manager.detach(first)
        manager.attach(late)

    first = MockObserver(on_update=reenter)
    manager.attach(first)

    assert manager.notify("test") == [True]
    assert manager.get_attached() == [late]
    assert late.notified == 0
    assert manager.has_observer(late)
    assert first not in manager
