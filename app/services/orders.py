import logging
from typing import List

from app.exceptions import UnknownUserError
from app.orders.aggregator import aggregate, aggregate_named
from app.orders.history import ChatHistorySource
from app.schemas import AggregatedOrders, Message, NamedOrdersResponse

logger = logging.getLogger(__name__)

def summarize_orders(source: ChatHistorySource) -> AggregatedOrders:
    """Today's orders tallied per restaurant, recomputed from the chat history."""
    return aggregate(source.get_todays_messages())

def named_orders(messages: List[Message], users: dict) -> NamedOrdersResponse:
    """Who ordered what, plus the authors that could not be resolved."""
    unknown: List[str] = []

    def report(error: UnknownUserError) -> None:
        logger.warning("Skipping order: %s", error)
        if error.user_id not in unknown:
            unknown.append(error.user_id)

    orders = aggregate_named(messages, users, on_unknown_user=report)
    return NamedOrdersResponse(orders=orders, unknown_users=unknown)

def named_orders_from_source(source: ChatHistorySource) -> NamedOrdersResponse:
    return named_orders(source.get_todays_messages(), source.get_user_directory())
