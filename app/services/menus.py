import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from app.core.config import settings
from app.exceptions import OrderBotError
from app.fetch.base import BaseFetcher
from app.fetch.menu_parsers import MenuParser, parse_click_menu, parse_hamka_menu, parse_presto_menu, parse_veglife_menu
from app.fetch.scraper import fetch_html
from app.fetch.utils import current_menu_day

logger = logging.getLogger(__name__)

CODE_FENCE = "```"
MENU_LOAD_FAILED = "Menu sa nepodarilo načítať."

@dataclass(frozen=True)
class Vendor:
    name: str
    title: str
    url: str
    parser: MenuParser

def configured_vendors() -> List[Vendor]:
    """Vendors in the order their menus are shown."""
    return [
        Vendor("presto", "Presto", settings.PRESTO_URL, parse_presto_menu),
        Vendor("veglife", "Veglife", settings.VEGLIFE_URL, parse_veglife_menu),
        Vendor("hamka", "Hamka", settings.HAMKA_URL, parse_hamka_menu),
        Vendor("click", "Click", settings.CLICK_URL, parse_click_menu),
    ]

def get_vendor(name: str) -> Vendor:
    for vendor in configured_vendors():
        if vendor.name == name:
            return vendor
    raise KeyError(name)

def fence(text: str) -> str:
    return f"{CODE_FENCE}\n{text}\n{CODE_FENCE}"

async def fetch_one(
    link: str,
    parser: MenuParser,
    fetcher: Optional[BaseFetcher] = None,
    day: Optional[int] = None,
) -> str:
    """
    Fetch one vendor page and extract the menu for the menu day.

    Never raises for fetch or extraction failures; the placeholder block is
    returned instead so other vendors are unaffected.
    """
    if day is None:
        day = current_menu_day()

    try:
        html = await fetch_html(link, fetcher)
        menu = await asyncio.to_thread(parser, html, day)
    except OrderBotError as e:
        logger.warning("Menu load failed for %s: %s", link, e)
        return fence(MENU_LOAD_FAILED)
    except Exception:
        logger.exception("Unexpected error while loading menu from %s", link)
        return fence(MENU_LOAD_FAILED)

    return fence(menu)

async def fetch_all(
    vendors: Optional[Sequence[Vendor]] = None,
    fetcher: Optional[BaseFetcher] = None,
    day: Optional[int] = None,
) -> str:
    """All vendor menus fetched concurrently, joined in vendor order."""
    if vendors is None:
        vendors = configured_vendors()
    if day is None:
        day = current_menu_day()

    menus = await asyncio.gather(
        *(fetch_one(vendor.url, vendor.parser, fetcher, day) for vendor in vendors)
    )

    return "\n".join(f"*{vendor.title}*\n{menu}" for vendor, menu in zip(vendors, menus))
