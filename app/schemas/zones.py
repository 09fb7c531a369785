from pydantic import BaseModel, Field
from typing import Annotated, List, Optional

from app.schemas.orders import GeoPoint

Vertex = Annotated[List[float], Field(min_length=2, max_length=2)]  # [latitude, longitude]
Coordinates = List[Vertex]

# Storage boundary: money in minor units (integer).

class DeliveryZoneIn(BaseModel):
    name: str = Field(min_length=1)
    coordinates: Coordinates
    is_active: bool = True
    delivery_price: int = Field(ge=0)
    min_order_value: int = Field(default=0, ge=0)
    free_delivery_from: Optional[int] = Field(default=None, ge=0)
    courier_rate: Optional[int] = Field(default=None, ge=0)
    color: str = "#3b82f6"
    position: int = 0

class DeliveryZonePatch(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    coordinates: Optional[Coordinates] = None
    is_active: Optional[bool] = None
    delivery_price: Optional[int] = Field(default=None, ge=0)
    min_order_value: Optional[int] = Field(default=None, ge=0)
    free_delivery_from: Optional[int] = Field(default=None, ge=0)
    courier_rate: Optional[int] = Field(default=None, ge=0)
    color: Optional[str] = None
    position: Optional[int] = None

class DeliveryZoneOut(DeliveryZoneIn):
    id: str
    area: float

# Pricing side: money in major units.

class DeliveryZone(BaseModel):
    id: str
    name: str
    coordinates: Coordinates = []
    is_active: bool = True
    delivery_price: float = 0.0
    min_order_value: float = 0.0
    free_delivery_from: Optional[float] = None
    courier_rate: Optional[float] = None
    area: float = 0.0
    color: str = "#3b82f6"

class ResolveIn(BaseModel):
    coordinate: Optional[GeoPoint] = None
    items_subtotal: float = 0.0

class ResolveOut(BaseModel):
    zone: Optional[DeliveryZone] = None
    delivery_fee: float
    below_minimum: bool = False
