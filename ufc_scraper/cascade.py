# =================================================================
# ufc_scraper/cascade.py - Ordered selector fallbacks
# =================================================================

import logging
from typing import Iterable, Optional, Tuple
from cssselect import SelectorError
from parsel import Selector, SelectorList
from .utils import clean_text

logger = logging.getLogger(__name__)

XPATH_PREFIXES = ("/", "./", "(")


def run_query(node: Selector, query: str) -> SelectorList:
    """Run a single CSS or XPath query; a broken query is just a miss."""
    try:
        if query.startswith(XPATH_PREFIXES):
            return node.xpath(query)
        return node.css(query)
    except (ValueError, SelectorError) as e:
        logger.debug(f"Invalid selector {query!r}: {e}")
        return SelectorList([])


def select(node: Selector, queries: Iterable[str]) -> SelectorList:
    """Return the matches of the first query that finds anything."""
    for query in queries:
        matches = run_query(node, query)
        if matches:
            return matches
    return SelectorList([])


def node_text(node: Selector) -> str:
    return clean_text(" ".join(node.xpath(".//text()").getall()))


def first_text(node: Selector, queries: Iterable[str], default: str = "") -> str:
    """Text of the first match with non-blank content, else ``default``."""
    for query in queries:
        for match in run_query(node, query):
            text = node_text(match)
            if text:
                return text
    return default


def first_attr(node: Selector, queries: Iterable[str], attr: str, default: Optional[str] = None) -> Optional[str]:
    for query in queries:
        for match in run_query(node, query):
            value = match.attrib.get(attr)
            if value and value.strip():
                return value.strip()
    return default


class SelectorCascade:
    """A named, immutable chain of queries ordered from current markup to legacy markup."""

    def __init__(self, name: str, *queries: str):
        if not queries:
            raise ValueError(f"Cascade {name!r} needs at least one query")
        self.name = name
        self.queries: Tuple[str, ...] = tuple(queries)

    def then(self, *queries: str) -> "SelectorCascade":
        return SelectorCascade(self.name, *(self.queries + tuple(queries)))

    def select(self, node: Selector) -> SelectorList:
        return select(node, self.queries)

    def text(self, node: Selector, default: str = "") -> str:
        return first_text(node, self.queries, default)

    def attr(self, node: Selector, attr: str, default: Optional[str] = None) -> Optional[str]:
        return first_attr(node, self.queries, attr, default)

    def __iter__(self):
        return iter(self.queries)

    def __len__(self) -> int:
        return len(self.queries)

    def __repr__(self) -> str:
        return f"SelectorCascade({self.name!r}, {len(self.queries)} queries)"
