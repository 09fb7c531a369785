from pydantic import BaseModel, Field
from typing import List, Optional

# Read-only menu records supplied by menu storage. Prices are major units.

class Size(BaseModel):
    id: Optional[str] = None
    name: str
    price: float  # absolute price of the dish at this size, not a delta

class Ingredient(BaseModel):
    id: str
    name: str

class AddedIngredient(Ingredient):
    quantity: int = Field(default=1, ge=1)

class AddonItem(BaseModel):
    id: str
    group_id: Optional[str] = None
    name: str
    price: float = Field(default=0.0, ge=0)

class AddonGroup(BaseModel):
    id: str
    name: str
    # selection limits count paid and free picks together
    min_select: int = Field(default=0, ge=0)
    max_select: Optional[int] = Field(default=None, ge=1)
    items: List[AddonItem] = []

class Dish(BaseModel):
    id: str
    name: str
    category_id: str
    base_price: float = 0.0
    sizes: List[Size] = []
    ingredients: List[Ingredient] = []
    addon_groups: List[AddonGroup] = []

    @property
    def has_sizes(self) -> bool:
        return len(self.sizes) > 0
