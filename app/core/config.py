import os

class Settings:
    # Chat
    BOT_ID: str = os.getenv("BOT_ID", "")

    # Menu pages
    PRESTO_URL: str = os.getenv("PRESTO_URL", "")
    VEGLIFE_URL: str = os.getenv("VEGLIFE_URL", "")
    HAMKA_URL: str = os.getenv("HAMKA_URL", "")
    CLICK_URL: str = os.getenv("CLICK_URL", "")

    # Scraping
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

    # Menu day resolution
    TIMEZONE: str = os.getenv("TIMEZONE", "Europe/Bratislava")
    MENU_CUTOFF_HOUR: int = int(os.getenv("MENU_CUTOFF_HOUR", "13"))

    # Click mains cheaper than this are desserts or sides
    CLICK_MAIN_MIN_PRICE: int = int(os.getenv("CLICK_MAIN_MIN_PRICE", "120"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
