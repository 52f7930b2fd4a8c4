# =================================================================
# ufc_scraper/config.py - All configuration in one place
# =================================================================

import os
from dotenv import load_dotenv
from .utils import DEFAULT_DATE_FORMATS

class Config:
    def __init__(self):
        load_dotenv()

        # Scraping
        self.base_url = os.getenv("UFC_BASE_URL", "https://www.ufc.com")
        self.events_path = os.getenv("UFC_EVENTS_PATH", "/events")
        self.user_agent = os.getenv(
            "USER_AGENT",
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        )
        self.max_events = int(os.getenv("MAX_EVENTS", 10))
        self.max_simple_fights = 5
        self.listing_timeout = float(os.getenv("LISTING_TIMEOUT", 30))
        self.detail_timeout = float(os.getenv("DETAIL_TIMEOUT", 15))
        self.retry_attempts = int(os.getenv("RETRY_ATTEMPTS", 3))
        self.retry_wait_min = 2
        self.retry_wait_max = 10

        # Cache
        self.redis_url = os.getenv("REDIS_URL", "redis://localhost:6379/0")
        self.cache_key = os.getenv("CACHE_KEY", "ufc:events")
        self.cache_ttl_hours = int(os.getenv("CACHE_TTL_HOURS", 24))

        # Normalization
        self.series_name = "UFC"
        self.default_title = "UFC Event"
        self.default_location = "TBD"
        self.default_date_offset_days = 30
        self.max_slug_length = 50
        self.date_formats = list(DEFAULT_DATE_FORMATS)

    @property
    def events_url(self) -> str:
        return f"{self.base_url}{self.events_path}"
