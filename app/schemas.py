from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List

class RestaurantKind(str, Enum):
    PRESTO = "presto"
    PIZZA = "pizza"
    VEGLIFE = "veglife"
    HAMKA = "hamka"
    CLICK = "click"
    SHOP = "shop"

class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    ts: str = Field(description="Chat timestamp, used as ordering key")
    user: str = Field(description="Author id")
    text: str

class ClassifiedOrder(BaseModel):
    restaurant: RestaurantKind
    token: str
    ts: str
    user: str

class PrestoOrders(BaseModel):
    meals: List[int] = Field(default_factory=lambda: [0] * 7)
    soups: Dict[str, int] = Field(default_factory=dict)
    pizzas: Dict[str, int] = Field(default_factory=dict)

class VeglifeOrders(BaseModel):
    meals: List[int] = Field(default_factory=lambda: [0] * 4)
    soups: int = 0
    salads: int = 0

class HamkaNote(BaseModel):
    soup: bool = False
    note: str = ""

class HamkaOrders(BaseModel):
    meals: List[List[HamkaNote]] = Field(default_factory=lambda: [[] for _ in range(6)])

class ClickOrders(BaseModel):
    meals: List[int] = Field(default_factory=lambda: [0] * 6)
    soups: Dict[str, int] = Field(default_factory=dict)

class AggregatedOrders(BaseModel):
    presto: PrestoOrders = Field(default_factory=PrestoOrders)
    veglife: VeglifeOrders = Field(default_factory=VeglifeOrders)
    hamka: HamkaOrders = Field(default_factory=HamkaOrders)
    click: ClickOrders = Field(default_factory=ClickOrders)
    shop: List[str] = Field(default_factory=list)

class NamedOrder(BaseModel):
    user: str = Field(description="Username resolved from the user directory")
    restaurant: RestaurantKind
    order: str
    ts: str

class OrdersRequest(BaseModel):
    messages: List[Message]

class NamedOrdersRequest(BaseModel):
    messages: List[Message]
    users: Dict[str, str] = Field(default_factory=dict, description="Author id to username")

class NamedOrdersResponse(BaseModel):
    orders: List[NamedOrder]
    unknown_users: List[str] = Field(default_factory=list)
