import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.api.routes import router
from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Warn about missing configuration on startup.
    """
    logger.info("Starting Lunch Order Bot...")
    if not settings.BOT_ID:
        logger.warning("BOT_ID is not set, no message will be treated as an order")
    missing = [name for name in ("PRESTO_URL", "VEGLIFE_URL", "HAMKA_URL", "CLICK_URL") if not getattr(settings, name)]
    if missing:
        logger.warning("Menu links not configured: %s", ", ".join(missing))

    yield

    logger.info("Shutting down Lunch Order Bot...")

app = FastAPI(
    title="Lunch Order Bot",
    description="Collects lunch orders from chat messages and serves today's restaurant menus",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Lunch Order Bot",
        "version": "1.0.0",
        "endpoints": {
            "orders": "POST /orders",
            "named_orders": "POST /orders/named",
            "menus": "POST /menus",
            "help": "POST /help",
            "health": "GET /health"
        }
    }
