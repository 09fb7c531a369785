"""Item pricing.

Reduces one composed order item to a unit price and a line total. Ingredient
changes (added or removed) and free addons never move the price; only the
size or base price and the paid addon counters do.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Union

from app.schemas.menu import Dish, Size
from app.schemas.orders import AddonSelection, HalfHalfItem, SimpleItem
from app.services.money import non_negative, quantize

HALF = Decimal(2)


class IncompleteConfiguration(ValueError):
    """Item cannot be priced until the operator finishes configuring it."""


class InvalidAddonSelection(ValueError):
    """Addon is not offered for the dish or breaks its group's selection limits."""


@dataclass(frozen=True)
class PricedLine:
    unit_price: Decimal
    line_total: Decimal
    quantity: int


def clamp_quantity(q: int | None) -> int:
    return max(int(q or 1), 1)


def _addons_total(addons: Iterable[AddonSelection]) -> Decimal:
    total = Decimal("0")
    for a in addons:
        if a.quantity > 0:
            total += non_negative(a.price) * a.quantity
    return total


def check_addons(dish: Dish, paid: Iterable[AddonSelection], free: Iterable[AddonSelection]) -> None:
    group_of = {a.id: g for g in dish.addon_groups for a in g.items}
    picked = {g.id: 0 for g in dish.addon_groups}
    for a in list(paid) + list(free):
        g = group_of.get(a.id)
        if g is None:
            raise InvalidAddonSelection(f"addon {a.name or a.id} is not offered for {dish.name}")
        picked[g.id] += max(a.quantity, 0)
    for g in dish.addon_groups:
        n = picked[g.id]
        if n < g.min_select:
            raise InvalidAddonSelection(f"{g.name} requires at least {g.min_select} selections")
        if g.max_select is not None and n > g.max_select:
            raise InvalidAddonSelection(f"{g.name} allows at most {g.max_select} selections")


def _line(unit: Decimal, quantity: int | None) -> PricedLine:
    q = clamp_quantity(quantity)
    unit = quantize(unit)
    return PricedLine(unit_price=unit, line_total=unit * q, quantity=q)


def price_simple_item(item: SimpleItem) -> PricedLine:
    size = item.selected_size
    if size is None and item.dish.has_sizes:
        raise IncompleteConfiguration(f"select a size for {item.dish.name}")
    check_addons(item.dish, item.paid_addons, item.free_addons)
    base = non_negative(size.price if size is not None else item.dish.base_price)
    return _line(base + _addons_total(item.paid_addons), item.quantity)


def _half_base(dish: Dish, size: Optional[Size]) -> Decimal:
    # the shared size is halved for both sides, not each dish's own size table
    if size is not None:
        return non_negative(size.price) / HALF
    return non_negative(dish.base_price) / HALF


def price_half_half_item(item: HalfHalfItem) -> PricedLine:
    left, right = item.left_half, item.right_half
    if left is None or right is None:
        raise IncompleteConfiguration("choose a dish for both halves")
    size = item.selected_size
    if size is None and (left.dish.has_sizes or right.dish.has_sizes):
        raise IncompleteConfiguration(
            f"select a size for {left.dish.name} + {right.dish.name}")
    for side in (left, right):
        check_addons(side.dish, side.paid_addons, side.free_addons)
    unit = (
        _half_base(left.dish, size)
        + _half_base(right.dish, size)
        # addons on a half cover half the item
        + _addons_total(left.paid_addons) / HALF
        + _addons_total(right.paid_addons) / HALF
    )
    return _line(unit, item.quantity)


def price_item(item: Union[SimpleItem, HalfHalfItem]) -> PricedLine:
    if isinstance(item, HalfHalfItem):
        return price_half_half_item(item)
    return price_simple_item(item)


def display_name(item: Union[SimpleItem, HalfHalfItem]) -> str:
    if isinstance(item, HalfHalfItem):
        left = item.left_half.dish.name if item.left_half else "?"
        right = item.right_half.dish.name if item.right_half else "?"
        name = f"{left} + {right} (half & half)"
    else:
        name = item.dish.name
    if item.selected_size is not None:
        name = f"{name} {item.selected_size.name}"
    return name
