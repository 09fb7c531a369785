from typing import List, Optional, Tuple, Union

from app.schemas.orders import HalfHalfItem, SimpleItem
from app.services.pricing import clamp_quantity

Item = Union[SimpleItem, HalfHalfItem]
MergeKey = Tuple[str, Optional[str], Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]


def merge_key(item: Item) -> Optional[MergeKey]:
    """Identity used to fold a newly configured item into an existing line.

    Ids are compared sorted so insertion order never matters. Free addons are
    listed with the added ingredients. Half & half items are never merged.
    """
    if isinstance(item, HalfHalfItem):
        return None
    size = item.selected_size.name if item.selected_size is not None else None
    added = [i.id for i in item.added_ingredients] + [a.id for a in item.free_addons]
    return (
        item.dish.name,
        size,
        tuple(sorted(a.id for a in item.paid_addons)),
        tuple(sorted(added)),
        tuple(sorted(i.id for i in item.removed_ingredients)),
    )


def add_item(lines: List[Item], item: Item) -> List[Item]:
    """Return a new line list with `item` merged into a matching line or appended."""
    key = merge_key(item)
    out: List[Item] = []
    merged = False
    for line in lines:
        if not merged and key is not None and merge_key(line) == key:
            out.append(line.model_copy(update={
                "quantity": clamp_quantity(line.quantity) + clamp_quantity(item.quantity),
                # latest configuration wins so stored addons match the price
                "selected_size": item.selected_size or line.selected_size,
                "paid_addons": item.paid_addons,
            }))
            merged = True
        else:
            out.append(line)
    if not merged:
        out.append(item)
    return out
