import re
from typing import Optional

from app.core.config import settings

def _mention_regex(bot_id: str) -> "re.Pattern[str]":
    return re.compile(rf"^<@{re.escape(bot_id)}>:?")

def is_mentioned(text: str, bot_id: Optional[str] = None) -> bool:
    """Check whether the message starts with the bot mention, e.g. '<@U1234>:'."""
    bot_id = settings.BOT_ID if bot_id is None else bot_id
    if not text or not bot_id:
        return False
    return _mention_regex(bot_id).match(text) is not None

def strip_mention(text: str, bot_id: Optional[str] = None) -> str:
    """
    Remove the bot mention (with its optional colon) from the message.
    Raises ValueError when the message does not start with the mention.
    """
    bot_id = settings.BOT_ID if bot_id is None else bot_id
    match = _mention_regex(bot_id).match(text or "") if bot_id else None
    if match is None:
        raise ValueError(f"Message is not addressed to <@{bot_id}>: {text!r}")
    return text[match.end():].strip()
