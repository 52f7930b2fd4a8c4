# =================================================================
# ufc_scraper/utils.py - Field normalizers
# =================================================================

import re
import uuid
import logging
from datetime import datetime
from typing import Iterable, Optional, Union
from urllib.parse import urljoin, urlparse
import pendulum

logger = logging.getLogger(__name__)

DATE_TOKEN_RE = re.compile(r'(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})|(\w+)\s+(\d{1,2}),?\s+(\d{4})')
RANK_RE = re.compile(r'^#(\d+)')
RECORD_RE = re.compile(r'(\d+)\s*-\s*(\d+)\s*-\s*(\d+)')
# A day and a four-digit year, in either order
FULL_DATE_RE = re.compile(r'\b\d{1,2}\b.*\b\d{4}\b|\b\d{4}\b.*\b\d{1,2}\b')

DEFAULT_DATE_FORMATS = [
    "YYYY-MM-DD",
    "MM/DD/YYYY",
    "DD/MM/YYYY",
    "MMM DD, YYYY",
    "MMMM DD, YYYY",
    "DD MMM YYYY",
    "DD MMMM YYYY",
    "MMM D, YYYY",
    "MMMM D, YYYY",
    "D MMMM YYYY",
]


def clean_text(text: Optional[str]) -> str:
    """Trim and collapse every whitespace run to a single space."""
    if not text:
        return ""
    return re.sub(r'\s+', ' ', text).strip()


def default_event_date(now: Optional[datetime] = None, days: int = 30) -> datetime:
    """Placeholder date for events whose date could not be read."""
    now = pendulum.instance(now) if now else pendulum.now('UTC')
    return now.add(days=days)


def parse_epoch(value: Union[int, str, None]) -> Optional[datetime]:
    """Unix epoch seconds (int or numeric string) to a UTC datetime."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not re.fullmatch(r'-?\d+', value):
            return None
    try:
        return pendulum.from_timestamp(int(value), tz='UTC')
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"Timestamp {value!r} out of range: {e}")
        return None


def _general_parse(text: str) -> Optional[datetime]:
    # The lenient parser fills missing parts from the wall clock
    if not FULL_DATE_RE.search(text):
        return None
    try:
        parsed = pendulum.parse(text, strict=False)
    except (ValueError, OverflowError, TypeError):
        return None
    # Durations and bare times are not event dates
    if isinstance(parsed, datetime):
        return parsed.in_timezone('UTC')
    return None


def _format_parse(text: str, formats: Iterable[str]) -> Optional[datetime]:
    match = DATE_TOKEN_RE.search(text)
    if not match:
        return None

    value = match.group(0)
    for fmt in formats:
        try:
            return pendulum.from_format(value, fmt, tz='UTC')
        except ValueError:
            continue
    return None


def parse_event_date(
    text: Optional[str] = None,
    timestamp: Union[int, str, None] = None,
    now: Optional[datetime] = None,
    formats: Optional[Iterable[str]] = None,
    default_days: int = 30,
) -> datetime:
    """Turn whatever the page gives us into a UTC datetime.

    A machine timestamp always wins. Free text goes through a general
    parse, then a regex + fixed format list. Anything unreadable becomes
    ``now + default_days``, which marks the date as unknown rather than
    failing the event.
    """
    parsed = parse_epoch(timestamp)
    if parsed:
        return parsed

    clean_date = clean_text(text)
    if clean_date:
        parsed = _general_parse(clean_date) or _format_parse(clean_date, formats or DEFAULT_DATE_FORMATS)
        if parsed:
            return parsed
        logger.debug(f"Unparseable date {clean_date!r}, using +{default_days} days")

    return default_event_date(now, default_days)


def slugify(text: str, max_length: int = 50) -> str:
    slug = re.sub(r'[^\w\s-]', '', text.lower())
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-{2,}', '-', slug)
    slug = slug.strip('-')
    return slug[:max_length]


def generate_event_id(title: Optional[str], series: str = "UFC", max_length: int = 50) -> str:
    """Stable id for an event title: ``ufc-310`` for numbered shows, else a slug."""
    if not title or not title.strip():
        return str(uuid.uuid4())

    series_match = re.search(rf'{re.escape(series)}\s+(\d+)', title, re.IGNORECASE)
    if series_match:
        return f"{series.lower()}-{series_match.group(1)}"

    return slugify(title, max_length) or str(uuid.uuid4())


def parse_rank(text: Optional[str]) -> Optional[int]:
    """``"#3"`` -> 3; champion marks, blanks and anything else -> None."""
    match = RANK_RE.match(clean_text(text))
    return int(match.group(1)) if match else None


def normalize_record(record_str: Optional[str]) -> Optional[str]:
    if not record_str:
        return None
    match = RECORD_RE.search(record_str)
    if match:
        win, loss, draw = match.groups()
        return f"{win}-{loss}-{draw}"
    return None


def resolve_url(base_url: str, href: Optional[str]) -> Optional[str]:
    """Absolute links pass through, site paths are joined to ``base_url``."""
    href = (href or "").strip()
    if not href or href.startswith(('#', 'javascript:', 'mailto:')):
        return None

    parsed = urlparse(href)
    if parsed.scheme in ('http', 'https') and parsed.netloc:
        return href
    if parsed.scheme:
        return None
    return urljoin(base_url.rstrip('/') + '/', href)
