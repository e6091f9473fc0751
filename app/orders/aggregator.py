import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from app.exceptions import UnknownUserError
from app.orders.classifier import extract_token, identify_restaurant, match_order
from app.orders.mention import is_mentioned, strip_mention
from app.schemas import AggregatedOrders, ClassifiedOrder, HamkaNote, Message, NamedOrder, RestaurantKind

logger = logging.getLogger(__name__)

DEFAULT_PIZZA_SIZE = "33"

def classify(messages: Iterable[Message], bot_id: Optional[str] = None) -> Iterator[ClassifiedOrder]:
    """Orders addressed to the bot, in message order. Everything else is skipped."""
    for message in messages:
        if not is_mentioned(message.text, bot_id):
            continue
        text = strip_mention(message.text, bot_id).lower()
        restaurant = identify_restaurant(text)
        if restaurant is None:
            continue
        yield ClassifiedOrder(restaurant=restaurant, token=extract_token(text, restaurant), ts=message.ts, user=message.user)

def _pizza_key(number: str, size: Optional[str]) -> str:
    if not size or size == DEFAULT_PIZZA_SIZE:
        return number
    return f"{number} veľkosti {size}"

def _count(counter: Dict[str, int], key: str) -> None:
    counter[key] = counter.get(key, 0) + 1

def aggregate(messages: Iterable[Message], bot_id: Optional[str] = None) -> AggregatedOrders:
    """
    Fold the day's messages into per-restaurant tallies.

    Builds a fresh structure on every call; the result depends only on the messages.
    """
    orders = AggregatedOrders()

    for order in classify(messages, bot_id):
        restaurant = order.restaurant
        match = match_order(order.token, restaurant)
        logger.debug("Message %s is from %s, order %s", order.ts, restaurant.value, order.token)

        if restaurant == RestaurantKind.PRESTO:
            orders.presto.meals[int(match["meal"]) - 1] += 1
            if match["soup"]:
                _count(orders.presto.soups, match["soup"])
        elif restaurant == RestaurantKind.PIZZA:
            _count(orders.presto.pizzas, _pizza_key(match["number"], match["size"]))
        elif restaurant == RestaurantKind.VEGLIFE:
            orders.veglife.meals[int(match["meal"]) - 1] += 1
            if match["side"] == "s":
                orders.veglife.salads += 1
            else:
                orders.veglife.soups += 1
        elif restaurant == RestaurantKind.HAMKA:
            note = HamkaNote(soup=bool(match["soup"]), note=match["note"].strip())
            orders.hamka.meals[int(match["meal"]) - 1].append(note)
        elif restaurant == RestaurantKind.CLICK:
            orders.click.meals[int(match["meal"]) - 1] += 1
            if match["soup"]:
                _count(orders.click.soups, match["soup"])
        elif restaurant == RestaurantKind.SHOP:
            orders.shop.append(match["note"].strip())

    return orders

def _log_unknown_user(error: UnknownUserError) -> None:
    logger.warning("Skipping order: %s", error)

def aggregate_named(
    messages: Iterable[Message],
    users: Dict[str, str],
    bot_id: Optional[str] = None,
    on_unknown_user: Callable[[UnknownUserError], None] = _log_unknown_user,
) -> List[NamedOrder]:
    """
    One NamedOrder per order, in message order.

    Orders from authors missing in `users` are skipped; each is reported to
    `on_unknown_user` as an UnknownUserError and the rest of the batch is kept.
    """
    named: List[NamedOrder] = []

    for order in classify(messages, bot_id):
        if order.user not in users:
            on_unknown_user(UnknownUserError(order.user))
            continue

        text = order.token
        if order.restaurant == RestaurantKind.SHOP:
            text = match_order(order.token, order.restaurant)["note"].strip()
        named.append(NamedOrder(user=users[order.user], restaurant=order.restaurant, order=text, ts=order.ts))

    logger.debug("Named orders: %d", len(named))
    return named
