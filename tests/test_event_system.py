# tests/test_event_system.py
import unittest

from tests.fixtures import PROJECT_ROOT  # noqa: F401
from homestead.core.event_system import EventSystem
from homestead.utils.logger import Logger, LogLevel


class TestEventSystem(unittest.TestCase):

    def setUp(self):
        Logger.set_level(LogLevel.CRITICAL)
        self.events = EventSystem()
        self.calls = []

    def test_subscribers_called_in_order(self):
        self.events.subscribe("day_changed", lambda t, d: self.calls.append(("first", d)))
        self.events.subscribe("day_changed", lambda t, d: self.calls.append(("second", d)))
        self.events.publish("day_changed", {"day": 2})
        self.assertEqual(self.calls, [("first", {"day": 2}), ("second", {"day": 2})])

    def test_failing_subscriber_does_not_stop_dispatch(self):
        def broken(event_type, data):
            raise RuntimeError("boom")
        self.events.subscribe("time_update", broken)
        self.events.subscribe("time_update", lambda t, d: self.calls.append(t))
        self.events.publish("time_update", {})
        self.assertEqual(self.calls, ["time_update"])

    def test_unsubscribe_during_dispatch(self):
        def once(event_type, data):
            self.calls.append(data)
            self.events.unsubscribe(event_type, once)
        self.events.subscribe("tick", once)
        self.events.publish("tick", 1)
        self.events.publish("tick", 2)
        self.assertEqual(self.calls, [1])
        self.assertNotIn("tick", self.events.subscribers)

    def test_duplicate_subscription_ignored(self):
        callback = lambda t, d: self.calls.append(d)
        self.events.subscribe("tick", callback)
        self.events.subscribe("tick", callback)
        self.events.publish("tick", "x")
        self.assertEqual(self.calls, ["x"])

    def test_publish_without_subscribers(self):
        self.events.publish("season_changed", {"season": 1})
        self.events.unsubscribe("season_changed", lambda t, d: None)
        self.assertEqual(self.calls, [])


if __name__ == '__main__':
    unittest.main()
