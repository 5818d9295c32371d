"""Tests for live values, subscriptions and the subscription manager."""

import pytest

from scrollback.entries import WatchEntry
from scrollback.live import LiveHandle, LiveValue, NotALiveValueError, Subscription, ensure_live, read_live
from scrollback.subscriptions import SubscriptionManager

from conftest import BrokenLive, Spy


class TestSubscription:
    def test_unsubscribe_is_idempotent(self):
        spy = Spy()
        sub = Subscription(lambda: spy("released"))
        sub.unsubscribe()
        sub.unsubscribe()
        assert spy.calls == ["released"]
        assert sub.closed

    def test_without_release(self):
        sub = Subscription()
        sub.unsubscribe()
        assert sub.closed


class TestLiveValue:
    def test_fire_immediately(self):
        spy = Spy()
        LiveValue(5).subscribe(spy)
        assert spy.calls == [5]

    def test_no_immediate_delivery(self):
        spy = Spy()
        LiveValue(5).subscribe(spy, fire_immediately=False)
        assert spy.calls == []

    def test_set_pushes_changes_only(self):
        spy = Spy()
        live = LiveValue(5)
        live.subscribe(spy, fire_immediately=False)
        live.set(5)
        live.set(6)
        live.set(6, force=True)
        assert spy.calls == [6, 6]

    def test_unsubscribe_stops_pushes(self):
        spy = Spy()
        live = LiveValue(0)
        sub = live.subscribe(spy, fire_immediately=False)
        sub.unsubscribe()
        live.set(1)
        assert spy.calls == []
        assert live.subscriber_count == 0

    def test_satisfies_protocol(self):
        assert isinstance(LiveValue(), LiveHandle)


class TestProbes:
    def test_read_live(self):
        assert read_live(LiveValue("v")) == "v"

    def test_read_live_missing_reader(self):
        with pytest.raises(NotALiveValueError):
            read_live(42)

    def test_read_live_failing_reader(self):
        with pytest.raises(NotALiveValueError):
            read_live(BrokenLive())

    def test_ensure_live_requires_subscribe(self):
        class ReadOnly:
            def read(self):
                return 1

        with pytest.raises(NotALiveValueError):
            ensure_live(ReadOnly())

    def test_not_a_live_value_is_type_error(self):
        assert issubclass(NotALiveValueError, TypeError)


class TestSubscriptionManager:
    def test_watch_bind_and_release(self):
        mgr = SubscriptionManager()
        live = LiveValue(1)
        entry = WatchEntry("x")
        spy = Spy()
        mgr.bind_watch(entry, live, spy)
        assert spy.calls == [1]
        assert mgr.watch_count == 1
        assert mgr.release_entries([entry]) == 1
        live.set(2)
        assert spy.calls == [1]
        assert mgr.watch_count == 0

    def test_release_unknown_entry(self):
        assert SubscriptionManager().release_watch(WatchEntry("x")) is False

    def test_driver_subscribed_once_without_immediate_tick(self):
        mgr = SubscriptionManager()
        driver = LiveValue(0)
        spy = Spy()
        assert mgr.ensure_driver(driver, spy) is True
        assert mgr.ensure_driver(driver, spy) is False
        assert spy.calls == []
        driver.set(1)
        assert spy.calls == [1]
        assert mgr.release_driver() is True
        assert mgr.release_driver() is False
        driver.set(2)
        assert spy.calls == [1]

    def test_rebinding_releases_previous(self):
        mgr = SubscriptionManager()
        first, second = LiveValue(1), LiveValue(2)
        spy = Spy()
        mgr.bind("max_lines", first, spy)
        mgr.bind("max_lines", second, spy)
        first.set(10)
        second.set(20)
        assert spy.calls == [1, 2, 20]

    def test_release_all(self):
        mgr = SubscriptionManager()
        live, driver, cfg = LiveValue(1), LiveValue(0), LiveValue(3)
        mgr.bind_watch(WatchEntry("x"), live, Spy())
        mgr.ensure_driver(driver, Spy())
        mgr.bind("max_lines", cfg, Spy())
        mgr.release_all()
        assert live.subscriber_count == 0
        assert driver.subscriber_count == 0
        assert cfg.subscriber_count == 0
        assert not mgr.driver_active
