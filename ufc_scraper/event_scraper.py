# =================================================================
# ufc_scraper/event_scraper.py - Listing -> detail pages -> events
# =================================================================

import logging
from datetime import datetime
from typing import Optional, Set
import pendulum
from parsel import Selector
from .config import Config
from .fallback import fallback_events
from .fights import FightExtractor
from .listing import ListingEntry, ListingExtractor
from .models import Event, ItemResult, ScrapeReport
from .utils import clean_text, generate_event_id
from .web_scraper import NetworkError, WebScraper

logger = logging.getLogger(__name__)


class EventScraper:
    def __init__(self, config: Config, web_scraper: Optional[WebScraper] = None):
        self.config = config
        self.web_scraper = web_scraper
        self.listing = ListingExtractor(config)
        self.fights = FightExtractor(config)

    async def scrape(self, now: Optional[datetime] = None) -> ScrapeReport:
        """Scrape the listing page and every event's detail page.

        Raises NetworkError when the listing page itself cannot be fetched.
        Problems with a single event only skip that event.
        """
        if self.web_scraper is not None:
            return await self._scrape(self.web_scraper, now)
        async with WebScraper(self.config) as scraper:
            return await self._scrape(scraper, now)

    async def scrape_or_fallback(self, now: Optional[datetime] = None) -> ScrapeReport:
        """Like scrape(), but a failed listing fetch yields the fallback events."""
        try:
            return await self.scrape(now)
        except NetworkError as e:
            logger.error(f"❌ Listing fetch failed, using fallback events: {str(e)}")
            return self._fallback_report(now)

    async def _scrape(self, scraper: WebScraper, now: Optional[datetime]) -> ScrapeReport:
        now = now or pendulum.now('UTC')
        logger.info(f"🚀 Scraping events from {self.config.events_url}")

        html = await scraper.fetch(self.config.events_url, timeout=self.config.listing_timeout)
        entries = self.listing.extract(Selector(text=html), now)
        logger.info(f"📅 Found {len(entries)} event nodes")

        report = ScrapeReport()
        issued_ids: Set[str] = set()

        # One detail page at a time, in listing order
        for entry in entries:
            if not entry.is_ok:
                report.add(entry)
                continue

            try:
                event = await self._build_event(scraper, entry.value, report)
            except Exception as e:
                logger.warning(f"⚠️ Failed to build event {entry.value.header.detail_url}: {str(e)}")
                report.add(ItemResult.skipped(f"parse error: {e}", entry.index))
                continue

            report.add(ItemResult.ok(self._dedupe(event, issued_ids), entry.index))

        if not report.events:
            logger.warning("⚠️ No events could be scraped, using fallback events")
            fallback = self._fallback_report(now)
            fallback.skipped = report.skipped
            fallback.skipped_fights = report.skipped_fights
            fallback.detail_failures = report.detail_failures
            return fallback

        logger.info(f"✅ Scraped {len(report.events)} events ({report.skipped_count} skipped, {report.skipped_fight_count} bouts skipped)")
        return report

    async def _build_event(self, scraper: WebScraper, entry: ListingEntry, report: ScrapeReport) -> Event:
        header = entry.header
        results = []
        try:
            html = await scraper.fetch(header.detail_url, timeout=self.config.detail_timeout)
            results = self.fights.extract_results(Selector(text=html))
        except NetworkError as e:
            report.detail_failures += 1
            logger.warning(f"⚠️ Skipping detail page {header.detail_url}: {str(e)}")

        fights = report.add_fights(results)
        if not fights:
            fights = report.add_fights(self.fights.card_fight_results(entry.node))

        title = clean_text(header.title)
        return Event(
            id=generate_event_id(title, self.config.series_name, self.config.max_slug_length),
            date=header.date,
            title=title,
            location=clean_text(header.location),
            fights=fights,
        )

    def _dedupe(self, event: Event, issued_ids: Set[str]) -> Event:
        """Give a repeated id the first free ``-<n>`` suffix, within the slug length limit."""
        if event.id not in issued_ids:
            issued_ids.add(event.id)
            return event

        count = 2
        while True:
            suffix = f"-{count}"
            base = event.id[:self.config.max_slug_length - len(suffix)].rstrip('-')
            new_id = f"{base}{suffix}"
            if new_id not in issued_ids:
                break
            count += 1

        issued_ids.add(new_id)
        logger.info(f"🔁 Duplicate event id {event.id}, renamed to {new_id}")
        return event.model_copy(update={"id": new_id})

    def _fallback_report(self, now: Optional[datetime]) -> ScrapeReport:
        report = ScrapeReport()
        report.events = fallback_events(now, self.config.default_date_offset_days)
        report.fallback = True
        return report
