from fastapi import APIRouter, Depends, HTTPException
from typing import List

from app.deps import get_half_half, load_zones
from app.schemas.orders import AddLineIn, HalfHalfItem, ItemIn, OrderIn, OrderQuoteOut, PricedLineOut
from app.schemas.zones import DeliveryZone
from app.services.billing import order_total, to_storage_payload
from app.services.halfhalf import HalfHalfRegistry
from app.services.money import money
from app.services.order_lines import add_item
from app.services.pricing import IncompleteConfiguration, InvalidAddonSelection, display_name, price_item

router = APIRouter(prefix="/quote", tags=["pricing"])


def _check_half_half(items, registry: HalfHalfRegistry) -> None:
    for item in items:
        if not isinstance(item, HalfHalfItem) or not (item.left_half and item.right_half):
            continue
        left, right = item.left_half.dish, item.right_half.dish
        if not registry.can_combine(left, right):
            raise HTTPException(422, detail=f"{left.name} and {right.name} cannot be combined half & half")


def _quote(order: OrderIn, zones: List[DeliveryZone], registry: HalfHalfRegistry):
    _check_half_half(order.items, registry)
    try:
        return order_total(order, zones)
    except (IncompleteConfiguration, InvalidAddonSelection) as e:
        raise HTTPException(422, detail=str(e))


@router.post("/item", response_model=PricedLineOut)
def quote_item(body: ItemIn, registry: HalfHalfRegistry = Depends(get_half_half)):
    item = body.item
    _check_half_half([item], registry)
    try:
        line = price_item(item)
    except (IncompleteConfiguration, InvalidAddonSelection) as e:
        raise HTTPException(422, detail=str(e))
    return PricedLineOut(name=display_name(item), quantity=line.quantity,
                         unit_price=money(line.unit_price), line_total=money(line.line_total))


@router.post("/order", response_model=OrderQuoteOut)
def quote_order(body: OrderIn,
                zones: List[DeliveryZone] = Depends(load_zones),
                registry: HalfHalfRegistry = Depends(get_half_half)):
    return _quote(body, zones, registry).as_dict()


@router.post("/order/payload")
def order_payload(body: OrderIn,
                  zones: List[DeliveryZone] = Depends(load_zones),
                  registry: HalfHalfRegistry = Depends(get_half_half)):
    """Record handed to order storage; persisted as-is, never re-derived."""
    return to_storage_payload(body, _quote(body, zones, registry))


@router.post("/lines/add")
def add_line(body: AddLineIn):
    lines = add_item(body.lines, body.item)
    return {"lines": [l.model_dump() for l in lines]}
