# main.py - Simple entry point
import asyncio
from ufc_scraper.config import Config
from ufc_scraper.event_scraper import EventScraper
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

async def main():
    """Scrape upcoming events once and log what was found"""
    config = Config()
    scraper = EventScraper(config)

    report = await scraper.scrape_or_fallback()

    for event in report.events:
        logger.info(f"🥊 {event.id}: {event.title} | {event.date.isoformat()} | {event.location} | {len(event.fights)} fights")
        for fight in sorted(event.fights, key=lambda f: f.order, reverse=True):
            names = " vs ".join(fighter.name for fighter in fight.fighters)
            logger.info(f"    #{fight.order} {fight.weight_class}: {names}")

    if report.fallback:
        logger.warning("⚠️ Fallback events returned, scraping yielded nothing")
    logger.info(f"✅ {len(report.events)} events, {report.skipped_count} skipped, {report.skipped_fight_count} bouts skipped, {report.detail_failures} detail pages failed")

if __name__ == "__main__":
    asyncio.run(main())
