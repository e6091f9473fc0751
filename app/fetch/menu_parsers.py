"""
Per-vendor extraction of today's menu from a fetched page.

Every parser takes the raw page and the menu day (ISO weekday) and returns a
plain text block: no markup, no empty lines, single spaces. Missing boundary
markers raise MenuNotFoundError.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from app.core.config import settings
from app.exceptions import MenuNotFoundError
from app.fetch.html_analyzer import find_span, find_spans, inner_text, paragraphs_to_lines, strip_tags
from app.fetch.utils import PRESTO_DAYS, VEGLIFE_DAYS, leading_price, normalize_block

logger = logging.getLogger(__name__)

MenuParser = Callable[[str, int], str]

VEGLIFE_BOILERPLATE = ["Objednávky prijímame", "Zmena menu vyhradená"]

HAMKA_START = '<div class="entry-content"'
HAMKA_END = "</div>"

CLICK_START = '<div id="denne-menu"'
CLICK_END = '<div id="stale-menu"'
CLICK_ITEM_START = '<h4 class="modal-title">'
CLICK_ITEM_END = "</h4>"
CLICK_SOUP_ANCHOR = 'id="polievky"'
CLICK_SOUP_HEADING = "Polievky:"
CLICK_MAIN_HEADING = "Hlavné jedlá:"


def _day_slice(text: str, days: Sequence[str], day: int, vendor: str) -> str:
    if not 1 <= day < len(days) - 1:
        raise MenuNotFoundError(vendor, day)

    span = find_span(text, days[day], days[day + 1])
    if span is None:
        raise MenuNotFoundError(vendor, day)
    return span.text


def parse_presto_menu(page: str, day: int) -> str:
    """The whole week is on one page; cut out the given day."""
    text = strip_tags(page)
    return normalize_block(_day_slice(text, PRESTO_DAYS, day, "presto"))


def _cut_boilerplate(text: str, markers: Sequence[str]) -> str:
    positions = [text.find(marker) for marker in markers]
    found = [pos for pos in positions if pos >= 0]
    return text[:min(found)] if found else text


def parse_veglife_menu(page: str, day: int) -> str:
    text = strip_tags(_day_slice(page, VEGLIFE_DAYS, day, "veglife"))
    return normalize_block(_cut_boilerplate(text, VEGLIFE_BOILERPLATE))


def parse_hamka_menu(page: str, day: int) -> str:
    """Hamka publishes only the current menu, one dish per paragraph."""
    span = find_span(page, HAMKA_START, HAMKA_END)
    if span is None:
        raise MenuNotFoundError("hamka", day)
    return normalize_block(paragraphs_to_lines(span.text))


def parse_click_menu(page: str, day: int, min_price: Optional[int] = None) -> str:
    """
    Click lists every dish as a modal title. Titles after the soup anchor are
    soups; the rest are mains, where anything not pricier than `min_price`
    is a dessert or a side and is left out.
    """
    if min_price is None:
        min_price = settings.CLICK_MAIN_MIN_PRICE

    container = find_span(page, CLICK_START, CLICK_END)
    if container is None:
        raise MenuNotFoundError("click", day)

    soup_offset = container.text.find(CLICK_SOUP_ANCHOR)
    titles = find_spans(container.text, CLICK_ITEM_START, CLICK_ITEM_END, repeat=True, include_start=False)

    soups: List[str] = []
    mains: List[str] = []
    for title in titles:
        item = normalize_block(inner_text(title.text))
        if not item:
            continue
        if 0 <= soup_offset < title.offset:
            soups.append(item)
            continue
        price = leading_price(item)
        if price is not None and price > min_price:
            mains.append(item)
        else:
            logger.debug("Dropping click item %r priced below %d", item, min_price)

    label = re.search(r"Menu\s+(\S+)", strip_tags(container.text))
    header = f"Menu {label.group(1)}" if label else "Menu"

    return "\n".join([header, CLICK_SOUP_HEADING, *soups, CLICK_MAIN_HEADING, *mains])


MENU_PARSERS: Dict[str, MenuParser] = {
    "presto": parse_presto_menu,
    "veglife": parse_veglife_menu,
    "hamka": parse_hamka_menu,
    "click": parse_click_menu,
}
