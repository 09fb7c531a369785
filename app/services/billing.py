from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List, Optional

from app.schemas.orders import HalfHalfItem, HalfSide, OrderIn
from app.schemas.zones import DeliveryZone
from app.services.money import CENT, money, non_negative
from app.services.pricing import PricedLine, clamp_quantity, display_name, price_item
from app.services.zones import compute_delivery_fee, meets_minimum_order, resolve_zone


@dataclass
class OrderQuote:
    lines: List[PricedLine] = field(default_factory=list)
    names: List[str] = field(default_factory=list)
    items_subtotal: Decimal = Decimal("0")
    zone: Optional[DeliveryZone] = None
    delivery_fee: Decimal = Decimal("0")
    below_minimum: bool = False

    @property
    def total(self) -> Decimal:
        return self.items_subtotal + self.delivery_fee

    def as_dict(self) -> dict:
        return {
            "lines": [
                {"name": n, "quantity": l.quantity,
                 "unit_price": money(l.unit_price), "line_total": money(l.line_total)}
                for n, l in zip(self.names, self.lines)
            ],
            "items_subtotal": money(self.items_subtotal),
            "zone_id": self.zone.id if self.zone else None,
            "zone_name": self.zone.name if self.zone else None,
            "delivery_fee": money(self.delivery_fee),
            "below_minimum": self.below_minimum,
            "total": money(self.total),
        }


def order_total(order: OrderIn, zones: Iterable[DeliveryZone]) -> OrderQuote:
    """Price every line and add the delivery fee for delivery orders.

    Nothing is cached: callers re-run this after any change to the items,
    the delivery coordinate or the zone set.
    """
    q = OrderQuote()
    for item in order.items:
        q.lines.append(price_item(item))
        q.names.append(display_name(item))
    q.items_subtotal = sum((l.line_total for l in q.lines), Decimal("0"))

    if order.type == "DELIVERY":
        q.zone = resolve_zone(order.coordinate, zones)
        q.delivery_fee = compute_delivery_fee(q.items_subtotal, q.zone)
        q.below_minimum = not meets_minimum_order(q.items_subtotal, q.zone)
    return q


def _half_payload(side: Optional[HalfSide]) -> dict | None:
    if side is None:
        return None
    return {
        "dish_name": side.dish.name,
        # stored per-half addon price is the charged half price
        "addons": [{**a.model_dump(), "price": float(non_negative(a.price) / 2)} for a in side.paid_addons],
        "free_addons": [a.model_dump() for a in side.free_addons],
        "added_ingredients": [i.model_dump() for i in side.added_ingredients],
        "removed_ingredients": [i.model_dump() for i in side.removed_ingredients],
    }


def to_storage_payload(order: OrderIn, quote: OrderQuote) -> dict:
    """Order storage record, emitted exactly as priced.

    Storage rejects non-positive values, so quantity is at least 1 and the unit
    price at least 0.01.
    """
    items = []
    for item, name, line in zip(order.items, quote.names, quote.lines):
        row = {
            "name": name or "Unknown dish",
            "quantity": clamp_quantity(line.quantity),
            "price": float(max(line.unit_price, CENT)),
            "is_half_half": isinstance(item, HalfHalfItem),
            "selected_size": item.selected_size.model_dump() if item.selected_size else None,
            "notes": item.notes,
        }
        if isinstance(item, HalfHalfItem):
            row.update({
                "addons": [], "added_ingredients": [], "removed_ingredients": [],
                "left_half": _half_payload(item.left_half),
                "right_half": _half_payload(item.right_half),
            })
        else:
            row.update({
                "addons": [a.model_dump() for a in item.paid_addons],
                "free_addons": [a.model_dump() for a in item.free_addons],
                "added_ingredients": [i.model_dump() for i in item.added_ingredients],
                "removed_ingredients": [i.model_dump() for i in item.removed_ingredients],
                "left_half": None, "right_half": None,
            })
        items.append(row)
    return {
        "type": order.type,
        "items": items,
        "delivery_fee": money(quote.delivery_fee),
        "total": money(quote.total),
    }
