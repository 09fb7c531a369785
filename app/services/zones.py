import json
import logging
from decimal import Decimal
from typing import Iterable, Optional

from app.schemas.orders import GeoPoint
from app.schemas.zones import DeliveryZone
from app.services.geometry import point_in_polygon
from app.services.money import to_decimal

logger = logging.getLogger(__name__)


def _minor_to_major(v: int | None) -> float | None:
    if v is None:
        return None
    return float(Decimal(v) / 100)


def zone_from_record(row) -> DeliveryZone:
    """Storage row (minor units, JSON coordinates) -> pricing zone (major units)."""
    coords = row.coordinates
    if isinstance(coords, str):
        coords = json.loads(coords or "[]")
    return DeliveryZone(
        id=row.id,
        name=row.name,
        coordinates=coords,
        is_active=bool(row.is_active),
        delivery_price=_minor_to_major(row.delivery_price or 0),
        min_order_value=_minor_to_major(row.min_order_value or 0),
        free_delivery_from=_minor_to_major(row.free_delivery_from),
        courier_rate=_minor_to_major(row.courier_rate),
        area=float(row.area or 0),
        color=row.color or "#3b82f6",
    )


def has_coordinate(point: Optional[GeoPoint]) -> bool:
    return point is not None and point.latitude is not None and point.longitude is not None


def resolve_zone(point: Optional[GeoPoint], zones: Iterable[DeliveryZone]) -> Optional[DeliveryZone]:
    """First active zone (in the given order) whose polygon contains the point.

    A point that has not been geocoded yet resolves to no zone.
    """
    if not has_coordinate(point):
        return None
    q = (point.latitude, point.longitude)
    for zone in zones:
        if not zone.is_active:
            continue
        if len(zone.coordinates) < 3:
            logger.warning("delivery zone %s (%s) has %d vertices, skipping",
                           zone.id, zone.name, len(zone.coordinates))
            continue
        if point_in_polygon(q, zone.coordinates):
            return zone
    logger.debug("no delivery zone contains %s", q)
    return None


def compute_delivery_fee(items_subtotal, zone: Optional[DeliveryZone]) -> Decimal:
    # outside every zone: no fee charged
    if zone is None:
        return Decimal("0")
    subtotal = to_decimal(items_subtotal)
    if zone.free_delivery_from is not None and subtotal >= to_decimal(zone.free_delivery_from):
        return Decimal("0")
    return to_decimal(zone.delivery_price)


def meets_minimum_order(items_subtotal, zone: Optional[DeliveryZone]) -> bool:
    """Display/validation only; never affects the fee."""
    if zone is None or not zone.min_order_value:
        return True
    return to_decimal(items_subtotal) >= to_decimal(zone.min_order_value)
