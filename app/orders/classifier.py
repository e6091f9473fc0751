"""
Order classification.

Every rule is tried in order and the LAST rule that matches decides the
restaurant. A message such as "presto1 veg2" therefore counts as veglife.
"""

import logging
import re
from typing import List, Optional, Tuple

from app.exceptions import OrderContractError
from app.schemas import RestaurantKind

logger = logging.getLogger(__name__)

LAST_MATCH_WINS = True

ORDER_RULES: List[Tuple[RestaurantKind, "re.Pattern[str]"]] = [
    (RestaurantKind.PRESTO, re.compile(r"presto(?P<meal>[1-7])(?:p(?P<soup>[1-2]))?")),
    (RestaurantKind.PIZZA, re.compile(r"pizza(?P<number>[0-9]{1,2})(?:v(?P<size>33|40|50))?")),
    (RestaurantKind.VEGLIFE, re.compile(r"veg(?P<meal>[1-4])\+?(?P<side>[ps])?")),
    (RestaurantKind.HAMKA, re.compile(r"^(?P<meal>[1-6])(?P<soup>p)?(?P<note>.*)")),
    (RestaurantKind.CLICK, re.compile(r"click(?P<meal>[1-6])(?:p(?P<soup>[1-4]))?")),
    (RestaurantKind.SHOP, re.compile(r"^(?P<keyword>nakup|nákup|nakúp)(?P<note>.*)")),
]

_PATTERNS = dict(ORDER_RULES)

def normalize_order_text(text: str) -> str:
    return text.lower().strip()

def identify_restaurant(text: str) -> Optional[RestaurantKind]:
    """Return the restaurant the order belongs to, or None when it is not an order."""
    text = normalize_order_text(text)
    found = None
    for kind, pattern in ORDER_RULES:
        if pattern.search(text):
            if found is not None and not LAST_MATCH_WINS:
                break
            found = kind
    if found is None:
        logger.debug("Message is not an order: %s", text)
    else:
        logger.debug("Order type is %s: %s", found.value, text)
    return found

def is_order(text: str) -> bool:
    return identify_restaurant(text) is not None

def match_order(text: str, kind: RestaurantKind) -> "re.Match[str]":
    """Match the restaurant's pattern, exposing the named groups of the order token."""
    match = _PATTERNS[kind].search(normalize_order_text(text))
    if match is None:
        raise OrderContractError(f"Order {text!r} was classified as {kind.value} but does not match its pattern")
    return match

def extract_token(text: str, kind: RestaurantKind) -> str:
    return match_order(text, kind).group(0)
