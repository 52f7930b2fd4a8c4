# =================================================================
# ufc_scraper/cache.py - Redis storage for the scraped event set
# =================================================================

import logging
from datetime import timedelta
from typing import List, Optional
import redis.asyncio as redis
from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError
from .config import Config
from .models import Event

logger = logging.getLogger(__name__)

EVENT_LIST = TypeAdapter(List[Event])


class EventCache:
    """The whole event set lives under one key with a TTL."""

    def __init__(self, config: Config, client: Optional[redis.Redis] = None):
        self.config = config
        self.key = config.cache_key
        self.ttl = timedelta(hours=config.cache_ttl_hours)
        self.client = client if client is not None else redis.from_url(config.redis_url, decode_responses=True)

    async def get_events(self) -> Optional[List[Event]]:
        """Cached events, or None on a miss, a Redis error or an unreadable payload."""
        try:
            raw = await self.client.get(self.key)
        except RedisError as e:
            logger.error(f"❌ Redis read failed for {self.key}: {str(e)}")
            return None

        if raw is None:
            logger.debug(f"Cache miss for {self.key}")
            return None

        try:
            return EVENT_LIST.validate_json(raw)
        except ValidationError as e:
            logger.error(f"❌ Invalid cached events under {self.key}: {str(e)}")
            return None

    async def set_events(self, events: List[Event]):
        try:
            await self.client.set(self.key, EVENT_LIST.dump_json(events), ex=self.ttl)
            logger.info(f"💾 Cached {len(events)} events under {self.key} for {self.ttl}")
        except RedisError as e:
            logger.error(f"❌ Redis write failed for {self.key}: {str(e)}")
            raise

    async def close(self):
        await self.client.aclose()
