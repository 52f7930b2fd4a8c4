# =================================================================
# ufc_scraper/event_service.py - Cache-backed access to scraped events
# =================================================================

import logging
from typing import List, Optional
from redis.exceptions import RedisError
from .cache import EventCache
from .config import Config
from .event_scraper import EventScraper
from .models import Event, ScrapeReport

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, config: Config, cache: EventCache, scraper: Optional[EventScraper] = None):
        self.config = config
        self.cache = cache
        self.scraper = scraper or EventScraper(config)

    async def get_all(self) -> List[Event]:
        """Cached events; an empty cache triggers a fresh scrape."""
        events = await self.cache.get_events()
        if events:
            return events

        logger.info("📭 Event cache empty, scraping fresh events")
        report = await self._scrape()
        try:
            await self.cache.set_events(report.events)
        except RedisError:
            logger.warning(f"⚠️ Serving {len(report.events)} scraped events without caching them")
        return report.events

    async def refresh(self) -> ScrapeReport:
        """Scrape now and overwrite the cache, raising if the cache write fails."""
        report = await self._scrape()
        await self.cache.set_events(report.events)
        return report

    async def load_latest(self) -> List[Event]:
        report = await self.refresh()
        return report.events

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        for event in await self.get_all():
            if event.id == event_id:
                return event
        return None

    async def _scrape(self) -> ScrapeReport:
        report = await self.scraper.scrape_or_fallback()
        if report.fallback:
            logger.warning("⚠️ Scrape returned fallback events")
        return report
