# =================================================================
# ufc_scraper/fights.py - Fight card extraction
# =================================================================

import logging
from typing import List, Optional
from parsel import Selector, SelectorList
from .config import Config
from .models import Fight, Fighter, ItemResult
from .cascade import SelectorCascade, first_text, node_text
from .utils import normalize_record, parse_rank

logger = logging.getLogger(__name__)

CORNERS = ("red", "blue")
PLACEHOLDER = "TBD"

# Detail page: one stable list item per bout, listed from last bout to main event
DETAIL_FIGHT_NODES = SelectorCascade("detail fights", "li.l-listing__item", ".c-listing-fight")
WEIGHT_CLASS_TEXT = SelectorCascade("weight class", ".c-listing-fight__class-text")
RANKS = SelectorCascade(
    "ranks",
    ".c-listing-fight__ranks-row .c-listing-fight__corner-rank",
    ".c-listing-fight__corner-rank",
)

# Event cards and legacy pages
SIMPLE_FIGHT_NODES = SelectorCascade("fights", ".fight", ".bout", ".matchup")
SIMPLE_FIGHTER_NAMES = SelectorCascade("fighter names", ".fighter-name", "span.name", "div.athlete")
SIMPLE_WEIGHT_CLASS = SelectorCascade("weight class", "[class*='weight']", "[class*='division']")
FIGHTER_SCAN = SelectorCascade("fighters", ".fighter-name", ".fighter", ".athlete")


class FightExtractor:
    def __init__(self, config: Config):
        self.config = config

    # -----------------------------------------------------------------
    # Detail page
    # -----------------------------------------------------------------

    def detail_fight_results(self, doc: Selector) -> List[ItemResult[Fight]]:
        nodes = DETAIL_FIGHT_NODES.select(doc)
        total = len(nodes)
        results = []
        for index, node in enumerate(nodes):
            order = total - index
            try:
                fight = self.extract_detail_fight(node, order)
            except Exception as e:
                logger.warning(f"⚠️ Failed to parse fight {index} of {total}: {str(e)}")
                results.append(ItemResult.skipped(f"parse error: {e}", index))
                continue

            if fight is None:
                results.append(ItemResult.skipped("incomplete bout", index))
            else:
                results.append(ItemResult.ok(fight, index))
        return results

    def extract_detail_fight(self, node: Selector, order: int) -> Optional[Fight]:
        ranks = RANKS.select(node)
        fighters = []
        for corner_index, corner in enumerate(CORNERS):
            fighter = self._detail_fighter(node, corner, ranks, corner_index)
            if fighter:
                fighters.append(fighter)

        if len(fighters) != 2:
            logger.debug(f"Dropping bout #{order}: {len(fighters)} fighter(s) found")
            return None

        return Fight(
            weight_class=WEIGHT_CLASS_TEXT.text(node),
            order=order,
            fighters=fighters,
        )

    def _detail_fighter(self, node: Selector, corner: str, ranks: SelectorList, corner_index: int) -> Optional[Fighter]:
        name = self._corner_name(node, corner)
        if not name:
            return None

        ranking = parse_rank(node_text(ranks[corner_index])) if len(ranks) > corner_index else None
        country = first_text(node, [
            f".c-listing-fight__country--{corner} .c-listing-fight__country-text",
            f".c-listing-fight__country--{corner}",
        ])
        record = normalize_record(first_text(node, [
            f".c-listing-fight__corner-record--{corner}",
            f".c-listing-fight__record--{corner}",
        ]))
        return Fighter(name=name, country=country, ranking=ranking, record=record)

    @staticmethod
    def _corner_name(node: Selector, corner: str) -> str:
        corner_name = f".c-listing-fight__corner-name--{corner}"
        given = first_text(node, [f"{corner_name} .c-listing-fight__corner-given-name"])
        family = first_text(node, [f"{corner_name} .c-listing-fight__corner-family-name"])
        if given and family:
            return f"{given} {family}"
        # Single-name fighters have no given/family split
        return first_text(node, [corner_name])

    # -----------------------------------------------------------------
    # Event card / legacy markup
    # -----------------------------------------------------------------

    def card_fight_results(self, node: Selector) -> List[ItemResult[Fight]]:
        """Fights from generic fight/bout markup, or one synthesized main event."""
        fight_nodes = SIMPLE_FIGHT_NODES.select(node)[:self.config.max_simple_fights]
        if not fight_nodes:
            return [ItemResult.ok(fight, 0) for fight in self._scan_main_event(node)]

        total = len(fight_nodes)
        results = []
        for index, fight_node in enumerate(fight_nodes):
            try:
                fight = self.extract_simple_fight(fight_node, total - index)
            except Exception as e:
                logger.warning(f"⚠️ Failed to parse fight {index} of {total}: {str(e)}")
                results.append(ItemResult.skipped(f"parse error: {e}", index))
                continue

            if fight is None:
                results.append(ItemResult.skipped("incomplete bout", index))
            else:
                results.append(ItemResult.ok(fight, index))
        return results

    def extract_card_fights(self, node: Selector) -> List[Fight]:
        return [r.value for r in self.card_fight_results(node) if r.is_ok]

    def extract_simple_fight(self, node: Selector, order: int) -> Optional[Fight]:
        names = [name for name in (node_text(n) for n in SIMPLE_FIGHTER_NAMES.select(node)) if name][:2]
        if len(names) != 2:
            logger.debug(f"Dropping bout #{order}: {len(names)} fighter(s) found")
            return None

        default_weight = "Main Event" if order == 1 else "Fight"
        return Fight(
            weight_class=SIMPLE_WEIGHT_CLASS.text(node, default_weight),
            order=order,
            fighters=[Fighter(name=name, country=PLACEHOLDER, record=PLACEHOLDER) for name in names],
        )

    def _scan_main_event(self, node: Selector) -> List[Fight]:
        names = [name for name in (node_text(n) for n in FIGHTER_SCAN.select(node)) if name]
        if len(names) < 2:
            return []

        return [Fight(
            weight_class="Main Event",
            order=1,
            fighters=[Fighter(name=name, country=PLACEHOLDER, record=PLACEHOLDER) for name in names[:2]],
        )]

    # -----------------------------------------------------------------

    def extract_results(self, doc: Selector) -> List[ItemResult[Fight]]:
        """Detail markup first, generic markup when the page has none."""
        if DETAIL_FIGHT_NODES.select(doc):
            return self.detail_fight_results(doc)
        return self.card_fight_results(doc)

    def extract(self, doc: Selector) -> List[Fight]:
        return [r.value for r in self.extract_results(doc) if r.is_ok]
