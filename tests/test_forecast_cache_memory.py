import threading
import unittest

from surfcast.app_types import CacheEntry, ForecastRecord
from surfcast.forecast_cache import InMemoryForecastCache


def _record(spot_id: str = "spot", generated_at: int = 0) -> ForecastRecord:
    return ForecastRecord(spot_id, "Somewhere", "1 ft", "2 mph", "Offshore", "Low", generated_at)


class TestInMemoryForecastCache(unittest.TestCase):
    def test_get_missing_returns_none(self):
        cache = InMemoryForecastCache()
        self.assertIsNone(cache.get("spot"))
        self.assertEqual(len(cache), 0)

    def test_put_replaces_existing_entry(self):
        cache = InMemoryForecastCache()
        first = CacheEntry(_record(generated_at=1), expires_at=100)
        second = CacheEntry(_record(generated_at=2), expires_at=200)
        cache.put("spot", first)
        cache.put("spot", second)
        self.assertIs(cache.get("spot"), second)
        self.assertEqual(len(cache), 1)

    def test_stale_entries_are_kept_until_replaced(self):
        cache = InMemoryForecastCache()
        stale = CacheEntry(_record(), expires_at=10)
        cache.put("spot", stale)
        self.assertIs(cache.get("spot"), stale)
        self.assertFalse(stale.is_fresh(10))
        self.assertTrue(stale.is_fresh(9))

    def test_clear(self):
        cache = InMemoryForecastCache()
        cache.put("a", CacheEntry(_record("a"), expires_at=1))
        cache.put("b", CacheEntry(_record("b"), expires_at=1))
        cache.clear()
        self.assertEqual(len(cache), 0)

    def test_concurrent_writers_leave_one_whole_entry(self):
        cache = InMemoryForecastCache()
        entries = [CacheEntry(_record(generated_at=i), expires_at=i + 100) for i in range(50)]

        torn = []

        def writer(entry):
            for _ in range(100):
                cache.put("spot", entry)
                got = cache.get("spot")
                if got.expires_at != got.record.generated_at + 100:
                    torn.append(got)

        threads = [threading.Thread(target=writer, args=(e,)) for e in entries]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(torn, [])
        self.assertIn(cache.get("spot"), entries)
        self.assertEqual(len(cache), 1)


if __name__ == "__main__":
    unittest.main()
