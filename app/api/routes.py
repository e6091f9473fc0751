from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse
from app.core.config import settings
from app.exceptions import OrderContractError
from app.schemas import AggregatedOrders, NamedOrdersRequest, NamedOrdersResponse, OrdersRequest
from app.orders.aggregator import aggregate
from app.services.menus import fetch_all, fetch_one, get_vendor
from app.services.orders import named_orders

router = APIRouter()

HELP_TEXT = """Objednávky píš do kanála ako `@obedbot [objednávka]`:
presto1-7 (p1-2 polievka), napr. presto3p2
pizza0-99 (v33, v40, v50 veľkosť), napr. pizza12v40
veg1-4 (+s šalát, +p polievka), napr. veg2+s
Hamka 1-6 (p polievka) a poznámka, napr. 2p bez cibule
click1-6 (p1-4 polievka), napr. click4p1
nákup a zoznam, napr. nákup mlieko, chlieb
Menu: /menupresto, /menuveglife, /menuhamka, /menuclick, /menus"""

@router.post("/orders", response_model=AggregatedOrders)
async def orders(request: OrdersRequest):
    """Today's orders tallied per restaurant."""
    try:
        return aggregate(request.messages)
    except OrderContractError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.post("/orders/named", response_model=NamedOrdersResponse)
async def orders_named(request: NamedOrdersRequest):
    """Orders with the names of the people who placed them."""
    try:
        return named_orders(request.messages, request.users)
    except OrderContractError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

async def _vendor_menu(name: str) -> str:
    vendor = get_vendor(name)
    return await fetch_one(vendor.url, vendor.parser)

@router.post("/menupresto", response_class=PlainTextResponse)
async def menu_presto():
    return await _vendor_menu("presto")

@router.post("/menuveglife", response_class=PlainTextResponse)
async def menu_veglife():
    return await _vendor_menu("veglife")

@router.post("/menuhamka", response_class=PlainTextResponse)
async def menu_hamka():
    return await _vendor_menu("hamka")

@router.post("/menuclick", response_class=PlainTextResponse)
async def menu_click():
    return await _vendor_menu("click")

@router.post("/menus", response_class=PlainTextResponse)
async def menus():
    """All menus, in the configured vendor order"""
    return await fetch_all()

@router.post("/help", response_class=PlainTextResponse)
async def help_text():
    return HELP_TEXT

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Lunch Order Bot", "bot_configured": bool(settings.BOT_ID)}
