from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union

from app.schemas.menu import AddedIngredient, Dish, Ingredient, Size

OrderTypeLiteral = Literal["DINE_IN", "TAKEAWAY", "DELIVERY"]

class AddonSelection(BaseModel):
    """One counter per addon id. Paid selections are priced, free ones only shown."""
    id: str
    name: str = ""
    price: float = 0.0
    quantity: int = 1

class SimpleItem(BaseModel):
    kind: Literal["simple"] = "simple"
    dish: Dish
    selected_size: Optional[Size] = None
    added_ingredients: List[AddedIngredient] = []
    removed_ingredients: List[Ingredient] = []
    paid_addons: List[AddonSelection] = []
    free_addons: List[AddonSelection] = []
    quantity: int = 1
    notes: Optional[str] = None

class HalfSide(BaseModel):
    dish: Dish
    added_ingredients: List[AddedIngredient] = []
    removed_ingredients: List[Ingredient] = []
    paid_addons: List[AddonSelection] = []
    free_addons: List[AddonSelection] = []

class HalfHalfItem(BaseModel):
    kind: Literal["half_half"] = "half_half"
    # a side may still be unchosen while the operator is composing the item
    left_half: Optional[HalfSide] = None
    right_half: Optional[HalfSide] = None
    selected_size: Optional[Size] = None
    quantity: int = 1
    notes: Optional[str] = None

ComposedOrderItem = Annotated[Union[SimpleItem, HalfHalfItem], Field(discriminator="kind")]

class GeoPoint(BaseModel):
    # either coordinate is None until the address has been geocoded
    latitude: Optional[float] = None
    longitude: Optional[float] = None

class OrderIn(BaseModel):
    type: OrderTypeLiteral
    items: List[ComposedOrderItem] = []
    coordinate: Optional[GeoPoint] = None

class PricedLineOut(BaseModel):
    name: str
    quantity: int
    unit_price: float
    line_total: float

class OrderQuoteOut(BaseModel):
    lines: List[PricedLineOut]
    items_subtotal: float
    zone_id: Optional[str] = None
    zone_name: Optional[str] = None
    delivery_fee: float
    below_minimum: bool = False
    total: float

class AddLineIn(BaseModel):
    lines: List[ComposedOrderItem] = []
    item: ComposedOrderItem

class ItemIn(BaseModel):
    item: ComposedOrderItem
