import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo
from typing import Optional

from app.core.config import settings

# Index = ISO weekday; index 6 terminates the Friday slice
PRESTO_DAYS = ["", "PONDELOK", "UTOROK", "STREDA", "ŠTVRTOK", "PIATOK", "CENA"]
VEGLIFE_DAYS = ["", "PONDELOK", "UTOROK", "STREDA", "ŠTVRTOK", "PIATOK", "SOBOTA"]

def local_now() -> datetime:
    """Current time in the configured timezone"""
    return datetime.now(ZoneInfo(settings.TIMEZONE))

def resolve_menu_day(now: datetime, cutoff_hour: Optional[int] = None) -> int:
    """
    Return the ISO weekday (1=Monday) whose menu should be shown at `now`.

    Weekends roll over to Monday. After the cutoff hour the menu of the next
    day is shown, which again rolls over the weekend, so late Friday gives Monday.
    """
    if cutoff_hour is None:
        cutoff_hour = settings.MENU_CUTOFF_HOUR

    day: date = now.date()
    past_cutoff = now.hour > cutoff_hour

    for _ in range(7):
        if day.isoweekday() < 6 and not past_cutoff:
            return day.isoweekday()
        day += timedelta(days=1)
        # an advanced day starts at midnight
        past_cutoff = False

    raise RuntimeError(f"Could not resolve menu day for {now.isoformat()}")

def current_menu_day() -> int:
    return resolve_menu_day(local_now())

def normalize_block(text: str) -> str:
    """
    Example: '  Polievka \\n\\n  Guláš   s knedľou ' -> 'Polievka\\nGuláš s knedľou'
    Example: '  Polievka \n\n  Guláš   s knedľou ' -> 'Polievka\nGuláš s knedľou'
    """
    lines = (re.sub(r"\s+", " ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)

def leading_price(text: str) -> Optional[int]:
    """
    Price written at the start of a menu item.
    Examples: '150 Rizoto' -> 150, '145,- Guláš' -> 145, 'Dezert 45' -> None
    """
    if not text:
        return None

    match = re.match(r"\s*(\d+)(?:[,.-]\d*)?", str(text))
    if match:
        return int(match.group(1))

    return None
