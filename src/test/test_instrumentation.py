import unittest
from unittest.mock import patch

from city_link import instrumentation


class TrackerTestCase(unittest.TestCase):
    def test_counter_is_shared_by_name(self):
        tracker = instrumentation.setup()
        tracker.get_counter("visits").increase()
        tracker.get_counter("visits").increase(2)
        self.assertEqual(3, tracker.get_counter_value("visits"))

    def test_unknown_counter_reads_zero(self):
        self.assertEqual(0, instrumentation.setup().get_counter_value("missing"))

    def test_timer(self):
        tracker = instrumentation.setup()
        with patch("city_link.instrumentation.time.perf_counter", side_effect=[1.0, 3.5]):
            with tracker.get_timer("seconds"):
                pass
        self.assertEqual(2.5, tracker.get_counter_value("seconds"))

    def test_timer_name_taken_by_counter(self):
        tracker = instrumentation.setup()
        tracker.get_counter("visits")
        with self.assertRaises(Exception):
            tracker.get_timer("visits")

    def test_snapshot_is_sorted(self):
        tracker = instrumentation.setup()
        tracker.get_counter("b").increase()
        tracker.get_counter("a").increase(2)
        self.assertEqual([("a", 2), ("b", 1)], list(tracker.snapshot().items()))

    def test_ensure_tracker(self):
        tracker = instrumentation.setup()
        self.assertIs(tracker, instrumentation.ensure_tracker(tracker))
        self.assertIsInstance(instrumentation.ensure_tracker(None), instrumentation.Tracker)


if __name__ == '__main__':
    unittest.main()
