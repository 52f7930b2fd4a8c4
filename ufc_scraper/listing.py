# =================================================================
# ufc_scraper/listing.py - Event cards on the events listing page
# =================================================================

import logging
from datetime import datetime
from typing import List, NamedTuple, Optional
from parsel import Selector, SelectorList
from .config import Config
from .models import EventHeader, ItemResult
from .cascade import SelectorCascade, first_attr, run_query
from .utils import clean_text, parse_event_date, resolve_url

logger = logging.getLogger(__name__)

EVENT_NODES = SelectorCascade(
    "event nodes",
    ".c-card-event--result",
    ".c-card-event, .event-card",
    ".view-upcoming-events .views-row",
    "article[class*='event']",
)

TITLE = SelectorCascade(
    "title",
    ".c-card-event--result__headline",
    "h3",
    "h2",
    "[class*='event-title']",
    "[class*='title']",
)

DATE = SelectorCascade(
    "date",
    ".c-card-event--result__date",
    "[class*='date']",
    "[class*='time']",
)

# Epoch seconds, most specific first
TIMESTAMP_ATTRS = ("data-main-card-timestamp", "data-prelims-card-timestamp", "data-timestamp")

VENUE = SelectorCascade("venue", ".field--name-taxonomy-term-title", ".venue")
CITY = SelectorCascade("city", ".locality", ".city")
AREA = SelectorCascade("administrative area", ".administrative-area", ".state")
COUNTRY = SelectorCascade("country", ".country")
LEGACY_LOCATION = SelectorCascade("location", "[class*='location']", "[class*='city']")

DETAIL_LINK = SelectorCascade(
    "detail link",
    ".c-card-event--result__headline a",
    "a[href*='/event/']",
    "a[class*='details'], a.e-button--black",
    "a[href]",
)


class ListingEntry(NamedTuple):
    node: Selector
    header: EventHeader


class ListingExtractor:
    def __init__(self, config: Config):
        self.config = config

    def find_event_nodes(self, doc: Selector) -> SelectorList:
        nodes = EVENT_NODES.select(doc)
        if len(nodes) > self.config.max_events:
            logger.info(f"✂️ Listing has {len(nodes)} event nodes, keeping the first {self.config.max_events}")
        return nodes[:self.config.max_events]

    def extract(self, doc: Selector, now: Optional[datetime] = None) -> List[ItemResult[ListingEntry]]:
        """One result per event node, in page order."""
        nodes = self.find_event_nodes(doc)
        if not nodes:
            logger.warning("⚠️ No event nodes found on listing page")

        results = []
        for index, node in enumerate(nodes):
            try:
                header = self.extract_header(node, now)
            except Exception as e:
                logger.warning(f"⚠️ Failed to parse event node {index}: {str(e)}")
                results.append(ItemResult.skipped(f"parse error: {e}", index))
                continue

            if header is None:
                logger.info(f"⏭️ Event node {index} has no detail link, skipping")
                results.append(ItemResult.skipped("missing detail link", index))
                continue

            results.append(ItemResult.ok(ListingEntry(node, header), index))
        return results

    def extract_header(self, node: Selector, now: Optional[datetime] = None) -> Optional[EventHeader]:
        """Header fields for one card, or None when it has no detail page."""
        detail_url = self.extract_detail_url(node)
        if not detail_url:
            return None

        return EventHeader(
            title=self.extract_title(node),
            date=self.extract_date(node, now),
            location=self.extract_location(node),
            detail_url=detail_url,
        )

    def extract_title(self, node: Selector) -> str:
        return TITLE.text(node, self.config.default_title)

    def extract_date(self, node: Selector, now: Optional[datetime] = None) -> datetime:
        timestamp = None
        for attr in TIMESTAMP_ATTRS:
            timestamp = first_attr(node, [f"[{attr}]"], attr)
            if timestamp:
                break

        text = first_attr(node, ["[datetime]"], "datetime") or DATE.text(node)
        return parse_event_date(
            text,
            timestamp=timestamp,
            now=now,
            formats=self.config.date_formats,
            default_days=self.config.default_date_offset_days,
        )

    def extract_location(self, node: Selector) -> str:
        venue = VENUE.text(node)
        locality = " ".join(part for part in (CITY.text(node), AREA.text(node), COUNTRY.text(node)) if part)
        location = " - ".join(part for part in (venue, locality) if part)
        if location:
            return clean_text(location)
        return LEGACY_LOCATION.text(node, self.config.default_location)

    def extract_detail_url(self, node: Selector) -> Optional[str]:
        for query in DETAIL_LINK:
            for link in run_query(node, query):
                url = resolve_url(self.config.base_url, link.attrib.get("href"))
                if url:
                    return url
        return None
