# =================================================================
# ufc_scraper/fallback.py - Fixed event set used when scraping yields nothing
# =================================================================

import logging
from datetime import datetime
from typing import List, Optional
from .models import Event, Fight, Fighter
from .utils import default_event_date

logger = logging.getLogger(__name__)

FALLBACK_EVENT_ID = "ufc-upcoming-1"


def fallback_events(now: Optional[datetime] = None, days: int = 30) -> List[Event]:
    """One placeholder event, dated ``days`` out, with a TBD main event."""
    logger.info("🧩 Building fallback events")
    return [
        Event(
            id=FALLBACK_EVENT_ID,
            date=default_event_date(now, days),
            title="Upcoming UFC Event",
            location="Las Vegas, Nevada, USA",
            fights=[
                Fight(
                    weight_class="Main Event",
                    order=1,
                    fighters=[
                        Fighter(name="Fighter A", country="USA", record="TBD"),
                        Fighter(name="Fighter B", country="Brazil", record="TBD"),
                    ],
                )
            ],
        )
    ]
