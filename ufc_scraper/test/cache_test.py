import sys
import os
import unittest
from datetime import timedelta
from unittest.mock import AsyncMock

# Add project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pendulum
from redis.exceptions import ConnectionError as RedisConnectionError

from ufc_scraper.cache import EventCache
from ufc_scraper.config import Config
from ufc_scraper.fallback import fallback_events

NOW = pendulum.datetime(2024, 11, 1, tz='UTC')


class TestEventCache(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = AsyncMock()
        self.cache = EventCache(Config(), client=self.client)

    async def test_miss(self):
        self.client.get.return_value = None
        self.assertIsNone(await self.cache.get_events())
        self.client.get.assert_awaited_once_with("ufc:events")

    async def test_stores_under_single_key_with_ttl(self):
        events = fallback_events(NOW)
        await self.cache.set_events(events)

        args, kwargs = self.client.set.call_args
        self.assertEqual("ufc:events", args[0])
        self.assertEqual(timedelta(hours=24), kwargs["ex"])

        self.client.get.return_value = args[1]
        self.assertEqual(events, await self.cache.get_events())

    async def test_read_error_is_a_miss(self):
        self.client.get.side_effect = RedisConnectionError("redis down")
        self.assertIsNone(await self.cache.get_events())

    async def test_corrupt_payload_is_a_miss(self):
        self.client.get.return_value = '{"not": "a list"}'
        self.assertIsNone(await self.cache.get_events())

    async def test_write_error_propagates(self):
        self.client.set.side_effect = RedisConnectionError("redis down")
        with self.assertRaises(RedisConnectionError):
            await self.cache.set_events(fallback_events(NOW))


if __name__ == '__main__':
    unittest.main(argv=['first-arg-is-ignored'], exit=False)
